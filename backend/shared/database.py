"""
Database client factory.

Provides the Supabase service-role client and the document store built on
top of it (or an in-memory store when STORE_BACKEND=memory).
"""

from typing import Optional
from supabase import create_client, Client

from .config import get_settings
from .store import IDocumentStore, InMemoryDocumentStore, SupabaseDocumentStore

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    The backend owns authentication itself, so every query runs with the
    service role and ownership is enforced by the services.

    Returns:
        Supabase client configured with service role key
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def create_document_store() -> IDocumentStore:
    """
    Create the document store selected by ``store_backend``.

    Returns:
        A new store instance; callers are expected to cache it.
    """
    settings = get_settings()
    if settings.store_backend == "memory":
        return InMemoryDocumentStore()
    return SupabaseDocumentStore(get_supabase_client())


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None
