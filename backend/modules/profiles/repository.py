"""
Profile repository for document store access.

Profiles are stored one document per user in the ``profiles`` collection,
with experience and education embedded as JSON lists.
"""

from typing import Optional, Any, Sequence, Union

from pydantic import BaseModel

from shared.repository import BaseRepository
from .models import (
    ProfileRecord,
    SocialLinks,
    ExperienceEntry,
    EducationEntry,
)

Entry = Union[ExperienceEntry, EducationEntry]


class ProfileRepository(BaseRepository[ProfileRecord]):
    """
    Repository for profile data access.

    Note: This repository does NOT perform authorization checks.
    The service layer only ever passes the authenticated user's ID.
    """

    collection = "profiles"

    def upsert(self, user_id: str, values: dict[str, Any]) -> ProfileRecord:
        """
        Create the user's profile or update it in place, atomically.

        Args:
            user_id: Owning user's ID (unique key).
            values: Fields to write; fields not present keep their value.

        Returns:
            The profile after the write.
        """
        data = self._store.upsert(self.collection, {"user_id": user_id}, values)
        return self._map_to_profile(data)

    def get_by_user_id(self, user_id: str) -> Optional[ProfileRecord]:
        data = self._store.find_one(self.collection, {"user_id": user_id})
        return self._map_to_profile(data) if data else None

    def list_all(self) -> list[ProfileRecord]:
        return [self._map_to_profile(d) for d in self._store.find(self.collection)]

    def save_entries(
        self,
        user_id: str,
        field: str,
        entries: Sequence[Entry],
    ) -> Optional[ProfileRecord]:
        """
        Replace the ``experience`` or ``education`` list of a profile.

        Returns:
            The updated profile, or None if it no longer exists.
        """
        data = self._store.update(
            self.collection,
            {"user_id": user_id},
            {field: [self._dump_entry(entry) for entry in entries]},
        )
        return self._map_to_profile(data) if data else None

    def delete_by_user_id(self, user_id: str) -> bool:
        return self._store.delete(self.collection, {"user_id": user_id}) > 0

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    @staticmethod
    def _dump_entry(entry: BaseModel) -> dict[str, Any]:
        return entry.model_dump(mode="json", by_alias=True)

    def _map_to_profile(self, data: dict[str, Any]) -> ProfileRecord:
        """Map stored document to ProfileRecord model."""
        return ProfileRecord(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            company=data.get("company"),
            website=data.get("website"),
            location=data.get("location"),
            bio=data.get("bio"),
            status=data["status"],
            githubusername=data.get("githubusername"),
            skills=data.get("skills") or [],
            social=SocialLinks(**(data.get("social") or {})),
            experience=[ExperienceEntry(**e) for e in data.get("experience") or []],
            education=[EducationEntry(**e) for e in data.get("education") or []],
            created_at=data.get("created_at"),
        )
