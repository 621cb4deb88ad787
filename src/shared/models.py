"""
Pydantic models for profiles, match results and the match API bodies.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Profile(BaseModel):
    """Student profile as stored in the profiles collection."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(..., description="Profile ID")
    name: Optional[str] = Field(default=None, description="Display name")
    email: Optional[str] = Field(default=None, description="Contact email")
    major: str = Field(default="", description="Field of study")
    year: str = Field(default="", description="Year label, e.g. Junior")
    tags: list[str] = Field(default_factory=list, description="Interest tags")
    bio: str = Field(default="", description="Free-text bio")
    looking_for: list[str] = Field(
        default_factory=list, description="Goals, e.g. Study friends"
    )

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        if value is None:
            return value
        return str(value)

    @field_validator("major", "year", "bio", mode="before")
    @classmethod
    def empty_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("tags", "looking_for", mode="before")
    @classmethod
    def empty_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("tags", "looking_for")
    @classmethod
    def collapse_duplicates(cls, value: list[str]) -> list[str]:
        # Set semantics, first occurrence keeps its position
        return list(dict.fromkeys(value))


class MatchResult(Profile):
    """A candidate profile with its match score and shared tags."""

    match_score: float = Field(..., alias="matchScore", ge=0, le=100)
    common_tags: list[str] = Field(default_factory=list, alias="commonTags")

    @classmethod
    def from_profile(
        cls, profile: Profile, match_score: float, common_tags: list[str]
    ) -> "MatchResult":
        """Build a result that passes through every profile field."""
        return cls(
            **profile.model_dump(),
            match_score=match_score,
            common_tags=common_tags,
        )

    def to_response(self) -> dict[str, Any]:
        """Serialize with the camelCase score fields used by the API."""
        return self.model_dump(by_alias=True, mode="json")


class MatchRequest(BaseModel):
    """Body of POST /match-users."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(default=None, alias="userId")
    user_intent: Optional[str] = Field(default=None, alias="userIntent")


class MatchResponse(BaseModel):
    """Successful match response."""

    matches: list[dict[str, Any]] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error body returned with a non-2xx status."""

    error: str
