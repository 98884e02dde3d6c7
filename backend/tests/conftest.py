"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Services are wired against an in-memory document store and a known JWT
secret, so no test needs Supabase or network access.
"""

import pytest
from datetime import datetime, timedelta, timezone

from api.app import create_app
from api.dependencies import ServiceContainer, set_container, reset_container
from shared.config import Settings
from shared.store import InMemoryDocumentStore
from modules.auth.passwords import BcryptPasswordHasher
from modules.auth.service import TokenService
from modules.users.repository import UserRepository
from modules.users.service import UserService
from modules.profiles.repository import ProfileRepository
from modules.profiles.service import ProfileService


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"


class FakeClock:
    """A clock tests can move forward by hand."""

    def __init__(self, now: datetime | None = None):
        self.now = now or datetime.now(timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a known secret and the in-memory store."""
    return Settings(
        _env_file=None,
        jwt_secret=TEST_JWT_SECRET,
        store_backend="memory",
        bcrypt_rounds=4,
    )


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def token_service(clock) -> TokenService:
    return TokenService(secret=TEST_JWT_SECRET, clock=clock)


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    # Lowest bcrypt cost keeps the suite fast
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def user_service(store, password_hasher, token_service) -> UserService:
    return UserService(
        repository=UserRepository(store),
        hasher=password_hasher,
        tokens=token_service,
    )


@pytest.fixture
def profile_service(store, user_service) -> ProfileService:
    return ProfileService(repository=ProfileRepository(store), users=user_service)


@pytest.fixture
def container(test_settings, store) -> ServiceContainer:
    """Install a container wired to the in-memory store for the test."""
    container = ServiceContainer(settings=test_settings, store=store)
    set_container(container)
    yield container
    reset_container()


@pytest.fixture
def app(container):
    """Create a fresh app for each test."""
    return create_app()


@pytest.fixture
def client(app):
    from fastapi.testclient import TestClient

    return TestClient(app)


@pytest.fixture
def register(client):
    """Register a user over the API and return their token."""

    def _register(
        name: str = "Ann",
        email: str = "ann@example.com",
        password: str = "secret1",
    ) -> str:
        response = client.post(
            "/api/users",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 200, response.json()
        return response.json()["token"]

    return _register


@pytest.fixture
def auth_headers(register) -> dict[str, str]:
    """Headers carrying a valid token for a freshly registered user."""
    return {"x-auth-token": register()}
