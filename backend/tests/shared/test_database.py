"""Tests for shared/database.py."""

import pytest
from unittest.mock import patch, MagicMock

from shared.database import (
    get_supabase_client,
    create_document_store,
    reset_client_cache,
)
from shared.store import InMemoryDocumentStore, SupabaseDocumentStore


class TestSupabaseClient:
    def setup_method(self):
        """Reset cache before each test."""
        reset_client_cache()

    def teardown_method(self):
        reset_client_cache()

    @patch("shared.database.create_client")
    @patch("shared.database.get_settings")
    def test_get_supabase_client_creates_client(self, mock_settings, mock_create):
        """Should create client with service role key."""
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_service_role_key = "test-key"
        mock_create.return_value = MagicMock()

        client = get_supabase_client()

        mock_create.assert_called_once_with(
            "https://test.supabase.co",
            "test-key",
        )
        assert client is not None

    @patch("shared.database.create_client")
    @patch("shared.database.get_settings")
    def test_get_supabase_client_caches_client(self, mock_settings, mock_create):
        """Should cache the client and not recreate it."""
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_service_role_key = "test-key"
        mock_create.return_value = MagicMock()

        client1 = get_supabase_client()
        client2 = get_supabase_client()

        mock_create.assert_called_once()
        assert client1 is client2

    @patch("shared.database.get_settings")
    def test_get_supabase_client_raises_without_config(self, mock_settings):
        """Should raise if configuration is missing."""
        mock_settings.return_value.supabase_url = ""
        mock_settings.return_value.supabase_service_role_key = ""

        with pytest.raises(RuntimeError, match="configuration missing"):
            get_supabase_client()


class TestCreateDocumentStore:
    def setup_method(self):
        reset_client_cache()

    def teardown_method(self):
        reset_client_cache()

    @patch("shared.database.get_settings")
    def test_memory_backend(self, mock_settings):
        """store_backend=memory should give an in-memory store."""
        mock_settings.return_value.store_backend = "memory"
        assert isinstance(create_document_store(), InMemoryDocumentStore)

    @patch("shared.database.create_client")
    @patch("shared.database.get_settings")
    def test_supabase_backend(self, mock_settings, mock_create):
        """store_backend=supabase should wrap the Supabase client."""
        mock_settings.return_value.store_backend = "supabase"
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_service_role_key = "test-key"
        mock_create.return_value = MagicMock()

        store = create_document_store()

        assert isinstance(store, SupabaseDocumentStore)
        assert store._db is mock_create.return_value
