"""
User repository for document store access.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import UserRecord


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user records.

    Note: This repository does NOT check email uniqueness.
    The service layer checks it before creating a user, and the
    ``users.email`` unique constraint backs it up in Supabase.
    """

    collection = "users"

    def create(self, name: str, email: str, avatar: str, password_hash: str) -> UserRecord:
        data = self._store.insert(
            self.collection,
            {
                "name": name,
                "email": email,
                "avatar": avatar,
                "password_hash": password_hash,
            },
        )
        return self._map_to_user(data)

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        data = self._store.find_one(self.collection, {"id": user_id})
        return self._map_to_user(data) if data else None

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        data = self._store.find_one(self.collection, {"email": email})
        return self._map_to_user(data) if data else None

    def delete(self, user_id: str) -> bool:
        return self._store.delete(self.collection, {"id": user_id}) > 0

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        """Map stored document to UserRecord model."""
        return UserRecord(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            avatar=data.get("avatar"),
            password_hash=data["password_hash"],
            created_at=data.get("created_at"),
        )
