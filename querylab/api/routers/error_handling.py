"""
Query error handling utilities.

Provides a decorator for consistent error handling across query endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from querylab.core.exceptions import (
    MemberNotFoundError,
    QueryLabException,
    TeamNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_query_errors(func: F) -> F:
    """
    Decorator to turn querylab errors into HTTPExceptions.

    - ValidationError -> 400
    - MemberNotFoundError, TeamNotFoundError -> 404
    - any other error -> 500
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except ValidationError as e:
            logger.warning("Invalid query request", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=e.message,
            )

        except (MemberNotFoundError, TeamNotFoundError) as e:
            logger.warning("Lookup failed", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=e.message,
            )

        except QueryLabException as e:
            logger.error("Query failed", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=e.message,
            )

        except Exception as e:
            logger.exception(
                "Unexpected error in query endpoint",
                extra={"error_type": type(e).__name__},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Internal server error",
            )

    return wrapper  # type: ignore
