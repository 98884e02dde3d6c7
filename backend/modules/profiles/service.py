"""
Profile service implementation.

Manages the profile aggregate: atomic create-or-update, newest-first
experience/education lists, and the cascading account delete.
"""

import logging
import uuid
from typing import Any, Optional, Union

from shared.exceptions import ValidationError
from modules.users.interfaces import IUserService
from modules.users.exceptions import UserNotFoundError

from .interfaces import IProfileService
from .repository import ProfileRepository
from .models import (
    SOCIAL_NETWORKS,
    Profile,
    ProfileRecord,
    ProfileOwner,
    ProfileFields,
    ExperienceEntry,
    EducationEntry,
    ExperienceRequest,
    EducationRequest,
)
from .exceptions import ProfileNotFoundError, NO_PROFILE_FOR_USER

logger = logging.getLogger(__name__)

PROFILE_SCALAR_FIELDS = ("company", "website", "location", "bio", "status", "githubusername")

EXPERIENCE_REQUIRED = (
    ("title", "Title is required"),
    ("company", "Company is required"),
    ("from_", "From date is required"),
)
EDUCATION_REQUIRED = (
    ("school", "School is required"),
    ("degree", "Degree is required"),
    ("fieldofstudy", "Field of study is required"),
    ("from_", "From date is required"),
)


def split_skills(skills: str) -> list[str]:
    """Split a comma-separated skills string into trimmed, non-empty items."""
    return [skill.strip() for skill in skills.split(",") if skill.strip()]


def build_profile_values(fields: ProfileFields) -> dict[str, Any]:
    """
    Turn an upsert payload into the fields to write.

    Empty scalar fields are left out so the stored value is kept. The
    social map only contains the networks that were given.
    """
    values: dict[str, Any] = {}
    for name in PROFILE_SCALAR_FIELDS:
        value = getattr(fields, name)
        if value:
            values[name] = value
    if fields.skills:
        values["skills"] = split_skills(fields.skills)
    values["social"] = {
        network: getattr(fields, network)
        for network in SOCIAL_NETWORKS
        if getattr(fields, network)
    }
    return values


def _check_required(request: Any, required: tuple[tuple[str, str], ...]) -> None:
    errors = [
        {"param": "from" if field == "from_" else field, "msg": msg}
        for field, msg in required
        if not getattr(request, field)
    ]
    if errors:
        raise ValidationError(errors)


class ProfileService(IProfileService):
    """
    Profile service backed by the document store.

    Implements IProfileService protocol. Users are resolved through
    IUserService for the ``user`` sub-object and the account delete.
    """

    def __init__(self, repository: ProfileRepository, users: IUserService):
        self._profiles = repository
        self._users = users

    async def upsert(self, subject_id: str, fields: ProfileFields) -> Profile:
        errors = []
        if not fields.status:
            errors.append({"param": "status", "msg": "Status is required"})
        if not fields.skills or not split_skills(fields.skills):
            errors.append({"param": "skills", "msg": "Skills is required"})
        if errors:
            raise ValidationError(errors)

        # A token can outlive its user
        if await self._users.get_user(subject_id) is None:
            raise UserNotFoundError(subject_id)

        record = self._profiles.upsert(subject_id, build_profile_values(fields))
        logger.info(f"Saved profile {record.id} for user {subject_id}")
        return await self._populate(record)

    async def get_by_subject(self, subject_id: str) -> Profile:
        return await self._populate(self._require_profile(subject_id))

    async def get_by_user_id(self, user_id: str) -> Profile:
        record = self._profiles.get_by_user_id(user_id)
        if record is None:
            raise ProfileNotFoundError(user_id)
        return await self._populate(record)

    async def list_all(self) -> list[Profile]:
        return [await self._populate(record) for record in self._profiles.list_all()]

    async def delete_for_subject(self, subject_id: str) -> None:
        # Two separate deletes; a crash in between leaves a user without a profile
        profile_deleted = self._profiles.delete_by_user_id(subject_id)
        user_deleted = await self._users.delete_user(subject_id)
        logger.info(
            f"Deleted account {subject_id} "
            f"(profile removed: {profile_deleted}, user removed: {user_deleted})"
        )

    async def add_experience(self, subject_id: str, entry: ExperienceRequest) -> Profile:
        _check_required(entry, EXPERIENCE_REQUIRED)
        new_entry = ExperienceEntry(id=uuid.uuid4().hex, **entry.model_dump())
        return await self._prepend(subject_id, "experience", new_entry)

    async def remove_experience(self, subject_id: str, entry_id: str) -> Profile:
        return await self._remove(subject_id, "experience", entry_id)

    async def add_education(self, subject_id: str, entry: EducationRequest) -> Profile:
        _check_required(entry, EDUCATION_REQUIRED)
        new_entry = EducationEntry(id=uuid.uuid4().hex, **entry.model_dump())
        return await self._prepend(subject_id, "education", new_entry)

    async def remove_education(self, subject_id: str, entry_id: str) -> Profile:
        return await self._remove(subject_id, "education", entry_id)

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    def _require_profile(self, subject_id: str) -> ProfileRecord:
        record = self._profiles.get_by_user_id(subject_id)
        if record is None:
            raise ProfileNotFoundError(subject_id, NO_PROFILE_FOR_USER)
        return record

    async def _prepend(
        self,
        subject_id: str,
        field: str,
        entry: Union[ExperienceEntry, EducationEntry],
    ) -> Profile:
        record = self._require_profile(subject_id)
        entries = [entry, *getattr(record, field)]
        return await self._save(subject_id, field, entries)

    async def _remove(self, subject_id: str, field: str, entry_id: str) -> Profile:
        record = self._require_profile(subject_id)
        entries = getattr(record, field)
        remaining = [entry for entry in entries if entry.id != entry_id]
        if len(remaining) == len(entries):
            return await self._populate(record)
        return await self._save(subject_id, field, remaining)

    async def _save(self, subject_id: str, field: str, entries: list) -> Profile:
        record = self._profiles.save_entries(subject_id, field, entries)
        if record is None:
            raise ProfileNotFoundError(subject_id, NO_PROFILE_FOR_USER)
        return await self._populate(record)

    async def _populate(self, record: ProfileRecord) -> Profile:
        """Attach the owner's display fields to a stored profile."""
        owner: Optional[ProfileOwner] = None
        user = await self._users.get_user(record.user_id)
        if user is not None:
            owner = ProfileOwner(id=user.id, name=user.name, avatar=user.avatar)
        fields = {name: value for name, value in record if name != "user_id"}
        return Profile(user=owner, **fields)
