"""FastAPI dependency factories."""

from querylab.api.deps.dependencies import (
    get_member_query_service,
    get_settings_dependency,
)

__all__ = [
    "get_member_query_service",
    "get_settings_dependency",
]
