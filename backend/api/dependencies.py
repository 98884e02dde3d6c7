"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations from Settings.

Configuration is read once here and passed into constructors; services
never look up secrets or URLs on their own.
"""

from datetime import timedelta
from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from shared.store import IDocumentStore
    from modules.auth.interfaces import IPasswordHasher, ITokenService
    from modules.users.interfaces import IUserService
    from modules.profiles.interfaces import IProfileService
    from modules.github.interfaces import IRepoLookup


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: "IDocumentStore | None" = None,
    ) -> None:
        self._settings = settings
        self._store = store
        self._password_hasher: "IPasswordHasher | None" = None
        self._token_service: "ITokenService | None" = None
        self._user_service: "IUserService | None" = None
        self._profile_service: "IProfileService | None" = None
        self._repo_lookup: "IRepoLookup | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def store(self) -> "IDocumentStore":
        """Get the document store instance."""
        if self._store is None:
            from shared.database import create_document_store
            self._store = create_document_store()
        return self._store

    @property
    def passwords(self) -> "IPasswordHasher":
        """Get the password hasher instance."""
        if self._password_hasher is None:
            from modules.auth.passwords import BcryptPasswordHasher
            self._password_hasher = BcryptPasswordHasher(rounds=self.settings.bcrypt_rounds)
        return self._password_hasher

    @property
    def tokens(self) -> "ITokenService":
        """Get the token service instance."""
        if self._token_service is None:
            from modules.auth.service import TokenService
            self._token_service = TokenService(
                secret=self.settings.jwt_secret,
                ttl=timedelta(hours=self.settings.jwt_ttl_hours),
            )
        return self._token_service

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.repository import UserRepository
            from modules.users.service import UserService
            self._user_service = UserService(
                repository=UserRepository(self.store),
                hasher=self.passwords,
                tokens=self.tokens,
            )
        return self._user_service

    @property
    def profiles(self) -> "IProfileService":
        """Get the profile service instance."""
        if self._profile_service is None:
            from modules.profiles.repository import ProfileRepository
            from modules.profiles.service import ProfileService
            self._profile_service = ProfileService(
                repository=ProfileRepository(self.store),
                users=self.users,
            )
        return self._profile_service

    @property
    def github(self) -> "IRepoLookup":
        """Get the GitHub repository lookup instance."""
        if self._repo_lookup is None:
            from modules.github.service import GithubRepoLookup
            self._repo_lookup = GithubRepoLookup(
                api_url=self.settings.github_api_url,
                token=self.settings.github_token or None,
                timeout=self.settings.github_timeout,
                user_agent=self.settings.github_user_agent,
            )
        return self._repo_lookup

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._password_hasher = None
        self._token_service = None
        self._user_service = None
        self._profile_service = None
        self._repo_lookup = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def set_container(container: ServiceContainer) -> None:
    """Install a pre-built container (tests and local tooling)."""
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_token_service() -> "ITokenService":
    """FastAPI dependency for token service."""
    return get_container().tokens


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_profile_service() -> "IProfileService":
    """FastAPI dependency for profile service."""
    return get_container().profiles


def get_repo_lookup() -> "IRepoLookup":
    """FastAPI dependency for GitHub repository lookup."""
    return get_container().github
