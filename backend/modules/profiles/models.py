"""
Profiles module data models.

A profile is one aggregate per user: scalar fields, a skills list, a
social-links map and two newest-first lists of experience and education
entries. Entry start dates are exposed as ``from`` in JSON.
"""

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


SOCIAL_NETWORKS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


class SocialLinks(BaseModel):
    """Links to the user's social accounts. Unset networks are None."""

    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


class ExperienceEntry(BaseModel):
    """A job in the user's employment history."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Entry ID, unique within the profile")
    title: str
    company: str
    location: Optional[str] = None
    from_: date = Field(..., alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None


class EducationEntry(BaseModel):
    """A school in the user's education history."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Entry ID, unique within the profile")
    school: str
    degree: str
    fieldofstudy: str
    from_: date = Field(..., alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None


class ProfileOwner(BaseModel):
    """The owning user's display fields, embedded in every profile read."""

    id: str
    name: str
    avatar: Optional[str] = None


class ProfileBase(BaseModel):
    """Fields shared by the stored record and the API representation."""

    id: str
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    status: str
    githubusername: Optional[str] = None
    skills: list[str] = Field(default_factory=list)
    social: SocialLinks = Field(default_factory=SocialLinks)
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    created_at: Optional[datetime] = None


class ProfileRecord(ProfileBase):
    """Profile as stored, linked to its owner by ID."""

    user_id: str


class Profile(ProfileBase):
    """Profile as returned by the API, with the owner populated."""

    user: Optional[ProfileOwner] = None


class ProfileFields(BaseModel):
    """
    Payload for creating or updating a profile.

    ``status`` and ``skills`` are required; they are typed optional so the
    service can report both at once when missing. Every other field is
    written only when non-empty, otherwise the stored value is kept.
    """

    status: Optional[str] = Field(None, description="Current position, e.g. 'Developer'")
    skills: Optional[str] = Field(
        None, description="Comma-separated skills; split and trimmed into a list"
    )
    company: Optional[str] = Field(None, description="Current employer")
    website: Optional[str] = Field(None, description="Personal or company website")
    location: Optional[str] = Field(None, description="City and state/country")
    bio: Optional[str] = Field(None, description="Short biography")
    githubusername: Optional[str] = Field(
        None, description="GitHub username used for the repository listing"
    )
    # The social map is rebuilt from these on every upsert
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


class ExperienceRequest(BaseModel):
    """Payload for adding an experience entry. title, company and from are required."""

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    from_: Optional[date] = Field(None, alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None


class EducationRequest(BaseModel):
    """Payload for adding an education entry. school, degree, fieldofstudy and from are required."""

    model_config = ConfigDict(populate_by_name=True)

    school: Optional[str] = None
    degree: Optional[str] = None
    fieldofstudy: Optional[str] = None
    from_: Optional[date] = Field(None, alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None


class DeleteAccountResponse(BaseModel):
    """Response for account deletion."""

    msg: str = "User deleted"
