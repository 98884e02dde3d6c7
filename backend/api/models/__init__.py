"""API models package."""

from .errors import ErrorItem, ErrorListResponse, MessageResponse

__all__ = [
    "ErrorItem",
    "ErrorListResponse",
    "MessageResponse",
]
