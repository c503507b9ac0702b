"""
Common response schemas.

Dependencies: pydantic
System role: Shared API contracts
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

ItemT = TypeVar("ItemT")


class PageResponse(BaseModel, Generic[ItemT]):
    """One page of items with the unpaged total."""

    content: list[ItemT]
    total: int = Field(..., ge=0, description="Row count ignoring offset and limit")
    offset: int | None = None
    limit: int | None = None
