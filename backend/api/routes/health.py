"""
Liveness endpoint.

Does not touch the document store or GitHub, so it answers even when
those are unavailable.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report that the process is up and which version is running."""
    return HealthResponse(status="healthy", version=get_settings().app_version)
