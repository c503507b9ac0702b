"""
Test suite for correlation ID context helpers.

System role: Verification of request tracing context
"""

import asyncio
import uuid

import pytest

from querylab.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)


class TestCorrelationId:
    """Test suite for set/get/clear_correlation_id."""

    def test_set_should_keep_given_id(self) -> None:
        """Test an explicit ID is stored verbatim."""
        assert set_correlation_id("req-1") == "req-1"
        assert get_correlation_id() == "req-1"
        clear_correlation_id()

    def test_set_without_id_should_generate_uuid(self) -> None:
        """Test a UUID4 is generated when no ID is given."""
        value = set_correlation_id()

        assert uuid.UUID(value).version == 4
        clear_correlation_id()

    def test_clear_should_reset_to_empty(self) -> None:
        """Test clearing leaves an empty string."""
        set_correlation_id("req-2")

        clear_correlation_id()

        assert get_correlation_id() == ""

    @pytest.mark.asyncio
    async def test_ids_should_not_leak_between_tasks(self) -> None:
        """Test each task sees only the ID it set."""

        async def handle(request_id: str) -> str:
            set_correlation_id(request_id)
            await asyncio.sleep(0)
            return get_correlation_id()

        results = await asyncio.gather(handle("a"), handle("b"))

        assert results == ["a", "b"]
