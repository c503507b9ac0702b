"""
Exception hierarchy for querylab.

Provides layered exception structure for query and lookup errors.
All exceptions include context for observability and debugging.
Database errors raised by SQLAlchemy are not wrapped.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class QueryLabException(Exception):
    """Base exception for all querylab errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(QueryLabException):
    """Raised when query arguments fail validation."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class NonUniqueResultError(QueryLabException):
    """Raised when a single-result fetch matches more than one row."""

    def __init__(self, count: int, details: dict[str, Any] | None = None) -> None:
        """
        Initialize non-unique result error.

        Args:
            count: Number of rows the query returned
            details: Additional context
        """
        details = details or {}
        details["count"] = count
        super().__init__(f"Expected at most one result, got {count}", details)


class MemberNotFoundError(QueryLabException):
    """Raised when a member cannot be found."""

    def __init__(self, member_ref: int | str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["member"] = member_ref
        super().__init__(f"Member not found: {member_ref}", details)


class TeamNotFoundError(QueryLabException):
    """Raised when a team cannot be found."""

    def __init__(self, team_ref: int | str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["team"] = team_ref
        super().__init__(f"Team not found: {team_ref}", details)
