"""
Error response models.

Two shapes are used by the API:
- ErrorListResponse for rejected input and credentials: {"errors": [{"msg": ...}]}
- MessageResponse for everything else: {"msg": ...}
"""

from pydantic import BaseModel
from typing import Optional


class ErrorItem(BaseModel):
    """One problem with a request."""

    msg: str
    param: Optional[str] = None


class ErrorListResponse(BaseModel):
    """Validation, conflict and credential error response format."""

    errors: list[ErrorItem]


class MessageResponse(BaseModel):
    """Single-message error response format."""

    msg: str
