"""
Profiles module interface.

The API layer depends on IProfileService for all profile operations.
"""

from typing import Protocol, runtime_checkable

from .models import Profile, ProfileFields, ExperienceRequest, EducationRequest


@runtime_checkable
class IProfileService(Protocol):
    """
    Interface for profile aggregate operations.

    Every ``subject_id`` is the ID asserted by a verified token.
    """

    async def upsert(self, subject_id: str, fields: ProfileFields) -> Profile:
        """
        Create the subject's profile or update it in place.

        Raises:
            ValidationError: If status or skills is missing
            UserNotFoundError: If the subject no longer has an account
        """
        ...

    async def get_by_subject(self, subject_id: str) -> Profile:
        """
        Get the authenticated user's own profile.

        Raises:
            ProfileNotFoundError: If the user has no profile
        """
        ...

    async def get_by_user_id(self, user_id: str) -> Profile:
        """
        Get any user's profile.

        Raises:
            ProfileNotFoundError: If the user has no profile
        """
        ...

    async def list_all(self) -> list[Profile]:
        """List every profile (unordered, not paginated)."""
        ...

    async def delete_for_subject(self, subject_id: str) -> None:
        """Delete the subject's profile and user account. Idempotent."""
        ...

    async def add_experience(self, subject_id: str, entry: ExperienceRequest) -> Profile:
        """
        Prepend an experience entry.

        Raises:
            ValidationError: If title, company or from is missing
            ProfileNotFoundError: If the user has no profile
        """
        ...

    async def remove_experience(self, subject_id: str, entry_id: str) -> Profile:
        """
        Remove an experience entry by ID. Unknown IDs leave the list unchanged.

        Raises:
            ProfileNotFoundError: If the user has no profile
        """
        ...

    async def add_education(self, subject_id: str, entry: EducationRequest) -> Profile:
        """
        Prepend an education entry.

        Raises:
            ValidationError: If school, degree, fieldofstudy or from is missing
            ProfileNotFoundError: If the user has no profile
        """
        ...

    async def remove_education(self, subject_id: str, entry_id: str) -> Profile:
        """
        Remove an education entry by ID. Unknown IDs leave the list unchanged.

        Raises:
            ProfileNotFoundError: If the user has no profile
        """
        ...
