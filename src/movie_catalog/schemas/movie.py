"""Pydantic schemas for movie API endpoints."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MovieCreate(BaseModel):
    """Schema for creating a movie."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, max_length=255, description="Movie name (unique)")
    synopsis: str | None = Field(default=None, description="Movie synopsis")
    released_at: date = Field(description="Release date")
    runtime_in_minutes: int = Field(ge=1, description="Runtime in minutes")
    genre_id: int | None = Field(default=None, ge=1, description="Genre ID")


class MovieUpdate(BaseModel):
    """Schema for a partial movie update.

    Only fields present in the request body are written.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1, max_length=255)
    synopsis: str | None = Field(default=None)
    released_at: date | None = Field(default=None)
    runtime_in_minutes: int | None = Field(default=None, ge=1)
    genre_id: int | None = Field(default=None, ge=1)

    @field_validator("name", "released_at", "runtime_in_minutes")
    @classmethod
    def reject_null(cls, v: object) -> object:
        """Required columns may be omitted but not set to null."""
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class MovieResponse(BaseModel):
    """Movie as stored in the catalog."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Movie ID")
    name: str = Field(description="Movie name")
    synopsis: str | None = Field(default=None, description="Movie synopsis")
    released_at: date = Field(description="Release date")
    runtime_in_minutes: int = Field(description="Runtime in minutes")
    genre_id: int | None = Field(default=None, description="Genre ID")


class CreatedResponse(BaseModel):
    """Response for a created row: its ID and where to find it."""

    id: int = Field(description="ID of the created row")
    path: str = Field(description="Path of the created resource")
