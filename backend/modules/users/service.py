"""
User service implementation.

Registration, login and "who am I" lookups on top of the user repository,
the password hasher and the token service.
"""

import asyncio
import hashlib
import logging
from typing import Optional

from email_validator import validate_email, EmailNotValidError

from shared.exceptions import ValidationError, DuplicateKeyError
from modules.auth.interfaces import IPasswordHasher, ITokenService

from .interfaces import IUserService
from .models import User
from .repository import UserRepository
from .exceptions import (
    UserAlreadyExistsError,
    InvalidCredentialsError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
GRAVATAR_URL = "https://www.gravatar.com/avatar/{digest}?s=200&r=pg&d=mm"


def gravatar_url(email: str) -> str:
    """Build the identicon-style Gravatar URL for an email address."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    return GRAVATAR_URL.format(digest=digest)


def is_valid_email(email: Optional[str]) -> bool:
    if not email:
        return False
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


class UserService(IUserService):
    """
    User service backed by the document store.

    Implements IUserService protocol.
    """

    def __init__(
        self,
        repository: UserRepository,
        hasher: IPasswordHasher,
        tokens: ITokenService,
    ):
        self._users = repository
        self._hasher = hasher
        self._tokens = tokens

    async def register(self, name: str, email: str, password: str) -> str:
        errors = []
        if not name or not name.strip():
            errors.append({"param": "name", "msg": "Name is required"})
        if not is_valid_email(email):
            errors.append({"param": "email", "msg": "Please include a valid email"})
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            errors.append({
                "param": "password",
                "msg": f"Please enter a password with {MIN_PASSWORD_LENGTH} or more characters",
            })
        if errors:
            raise ValidationError(errors)

        if self._users.get_by_email(email) is not None:
            raise UserAlreadyExistsError(email)

        password_hash = await asyncio.to_thread(self._hasher.hash, password)
        try:
            user = self._users.create(
                name=name.strip(),
                email=email,
                avatar=gravatar_url(email),
                password_hash=password_hash,
            )
        except DuplicateKeyError:
            # Lost a race with a concurrent registration for this email
            raise UserAlreadyExistsError(email)
        logger.info(f"Registered user {user.id}")
        return self._tokens.issue(user.id)

    async def login(self, email: str, password: str) -> str:
        errors = []
        if not is_valid_email(email):
            errors.append({"param": "email", "msg": "Please include a valid email"})
        if not password:
            errors.append({"param": "password", "msg": "Password is required"})
        if errors:
            raise ValidationError(errors)

        user = self._users.get_by_email(email)
        if user is None or not await asyncio.to_thread(
            self._hasher.verify, password, user.password_hash
        ):
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError()

        return self._tokens.issue(user.id)

    async def get_authenticated(self, subject_id: str) -> User:
        user = self._users.get_by_id(subject_id)
        if user is None:
            raise UserNotFoundError(subject_id)
        return user.to_public()

    async def get_user(self, user_id: str) -> Optional[User]:
        user = self._users.get_by_id(user_id)
        return user.to_public() if user else None

    async def delete_user(self, user_id: str) -> bool:
        return self._users.delete(user_id)
