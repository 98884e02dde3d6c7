"""
GitHub lookup data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict


class RepoSummary(BaseModel):
    """The parts of a GitHub repository listing shown on a profile."""

    model_config = ConfigDict(extra="ignore")

    name: str
    full_name: Optional[str] = None
    html_url: str
    description: Optional[str] = None
    language: Optional[str] = None
    stargazers_count: int = 0
    watchers_count: int = 0
    forks_count: int = 0
    created_at: Optional[datetime] = None
