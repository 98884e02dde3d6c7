"""
Shared infrastructure for the DevConnector backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client and document store factory
- store: Document store interface and implementations
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, create_document_store, reset_client_cache
from .store import IDocumentStore, InMemoryDocumentStore, SupabaseDocumentStore
from .exceptions import (
    DevConnectorError,
    NotFoundError,
    ValidationError,
    ConflictError,
    DuplicateKeyError,
    AuthenticationError,
    AuthorizationError,
    FatalStorageError,
    ExternalServiceError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "create_document_store",
    "reset_client_cache",
    "IDocumentStore",
    "InMemoryDocumentStore",
    "SupabaseDocumentStore",
    "DevConnectorError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateKeyError",
    "AuthenticationError",
    "AuthorizationError",
    "FatalStorageError",
    "ExternalServiceError",
    "AuthenticatedUser",
]
