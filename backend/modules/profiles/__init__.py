"""
Profiles module.

Handles the profile aggregate: create-or-update, listing, and the
experience/education sub-lists.

Public API:
- IProfileService: Interface for profile operations
- Profile: Profile with populated owner
- ProfileFields, ExperienceRequest, EducationRequest: Request payloads
- ProfileNotFoundError
"""

from .interfaces import IProfileService
from .models import (
    Profile,
    ProfileRecord,
    ProfileOwner,
    ProfileFields,
    SocialLinks,
    ExperienceEntry,
    EducationEntry,
    ExperienceRequest,
    EducationRequest,
)
from .exceptions import ProfileNotFoundError

__all__ = [
    # Interface
    "IProfileService",
    # Models
    "Profile",
    "ProfileRecord",
    "ProfileOwner",
    "ProfileFields",
    "SocialLinks",
    "ExperienceEntry",
    "EducationEntry",
    "ExperienceRequest",
    "EducationRequest",
    # Exceptions
    "ProfileNotFoundError",
]
