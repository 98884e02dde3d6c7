"""
Token authentication gate.

Reads the token from the ``x-auth-token`` header, verifies it and hands
the authenticated subject to the route handler.
"""

import logging
from typing import Optional
from fastapi import Depends
from fastapi.security import APIKeyHeader

from shared.models import AuthenticatedUser
from shared.exceptions import AuthorizationError
from modules.auth.interfaces import ITokenService
from modules.auth.exceptions import MissingTokenError, InvalidTokenError
from ..dependencies import get_token_service

logger = logging.getLogger(__name__)

AUTH_HEADER = "x-auth-token"

# Header token extractor
token_header = APIKeyHeader(name=AUTH_HEADER, auto_error=False)


async def get_current_user(
    token: Optional[str] = Depends(token_header),
    tokens: ITokenService = Depends(get_token_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}

    Raises:
        MissingTokenError: No token header (401 "No token, authorization denied")
        InvalidTokenError: Any verification failure (401 "Token is not valid")
    """
    if not token:
        raise MissingTokenError()

    try:
        subject_id = tokens.verify(token)
    except AuthorizationError as e:
        logger.warning(f"Rejected token: {e.code}")
        raise InvalidTokenError()

    return AuthenticatedUser(id=subject_id)

