"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation at the boundary where GitHub JSON enters the program.
- Aliases map the API's snake_case keys without leaking HTTP into the Core.

Note:
- These models describe *what* the data is, not *how* it is fetched.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class GitHubProfile(BaseModel):
    """Public profile of a GitHub user, as returned by `GET /users/{login}`.

    Immutable once built: a single fetch owns it for the rest of the run.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    login: str = Field(
        ...,
        min_length=1,
        description="Login handle.",
    )
    avatar_url: str = Field(
        ...,
        min_length=1,
        description="Absolute http(s) URL of the avatar image.",
    )
    bio: str | None = Field(
        default=None,
        description="Public biography, if any.",
    )
    public_repos: int = Field(
        default=0,
        ge=0,
        description="Number of public repositories.",
    )
    followers: int = Field(
        default=0,
        ge=0,
        description="Follower count.",
    )
    following: int = Field(
        default=0,
        ge=0,
        description="Following count.",
    )
    location: str | None = Field(
        default=None,
        description="Free-text location, if any.",
    )

    @field_validator("avatar_url")
    @classmethod
    def _check_avatar_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("avatar_url must be an absolute http(s) URL")
        return value


class ProfileData(BaseModel):
    """Everything the layout needs besides the avatar."""

    model_config = ConfigDict(frozen=True)

    profile: GitHubProfile
    starred_count: int = Field(
        default=0,
        ge=0,
        description="Length of the starred-repositories response (0 when unavailable).",
    )
