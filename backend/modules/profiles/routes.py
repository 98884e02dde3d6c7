"""
Profile API endpoints.

Provides REST endpoints for the profile aggregate and the GitHub
repository listing shown on profiles.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_profile_service, get_repo_lookup
from shared.models import AuthenticatedUser
from modules.github.interfaces import IRepoLookup
from modules.github.models import RepoSummary

from .interfaces import IProfileService
from .models import (
    Profile,
    ProfileFields,
    ExperienceRequest,
    EducationRequest,
    DeleteAccountResponse,
)

router = APIRouter()


@router.get("/me", response_model=Profile)
async def get_my_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    """
    Get the current user's profile.
    """
    return await service.get_by_subject(user.id)


@router.post("", response_model=Profile)
async def upsert_profile(
    fields: ProfileFields,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    """
    Create or update the current user's profile.
    """
    return await service.upsert(user.id, fields)


@router.get("", response_model=list[Profile])
async def list_profiles(
    service: IProfileService = Depends(get_profile_service),
) -> list[Profile]:
    """
    List all profiles.
    """
    return await service.list_all()


@router.get("/user/{user_id}", response_model=Profile)
async def get_profile_by_user(
    user_id: str,
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    """
    Get a profile by its owner's user ID.
    """
    return await service.get_by_user_id(user_id)


@router.delete("", response_model=DeleteAccountResponse)
async def delete_account(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> DeleteAccountResponse:
    """
    Delete the current user's profile and account.
    """
    await service.delete_for_subject(user.id)
    return DeleteAccountResponse()


@router.put("/experience", response_model=Profile)
async def add_experience(
    entry: ExperienceRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    return await service.add_experience(user.id, entry)


@router.delete("/experience/{exp_id}", response_model=Profile)
async def remove_experience(
    exp_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    return await service.remove_experience(user.id, exp_id)


@router.put("/education", response_model=Profile)
async def add_education(
    entry: EducationRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    return await service.add_education(user.id, entry)


@router.delete("/education/{edu_id}", response_model=Profile)
async def remove_education(
    edu_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    return await service.remove_education(user.id, edu_id)


@router.get("/github/{username}", response_model=list[RepoSummary])
async def get_github_repos(
    username: str,
    lookup: IRepoLookup = Depends(get_repo_lookup),
) -> list[RepoSummary]:
    """
    List the user's first five GitHub repositories, oldest first.
    """
    return await lookup.repos_for(username)
