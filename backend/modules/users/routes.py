"""
User and auth API endpoints.

- POST /api/users: register
- POST /api/auth: log in
- GET /api/auth: the authenticated user
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_user_service
from shared.models import AuthenticatedUser
from modules.auth.models import TokenResponse

from .interfaces import IUserService
from .models import User, RegisterRequest, LoginRequest

users_router = APIRouter()
auth_router = APIRouter()


@users_router.post("", response_model=TokenResponse)
async def register_user(
    request: RegisterRequest,
    service: IUserService = Depends(get_user_service),
) -> TokenResponse:
    """
    Register a user and return a token for them.
    """
    token = await service.register(request.name, request.email, request.password)
    return TokenResponse(token=token)


@auth_router.get("", response_model=User)
async def get_authenticated_user(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> User:
    """
    Get the logged-in user (without the password hash).

    Requires authentication.
    """
    return await service.get_authenticated(user.id)


@auth_router.post("", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    service: IUserService = Depends(get_user_service),
) -> TokenResponse:
    """
    Authenticate a user and return a token.
    """
    token = await service.login(request.email, request.password)
    return TokenResponse(token=token)
