"""Pydantic schemas for actor API endpoints and derived actor views."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ActorCreate(BaseModel):
    """Schema for creating an actor."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, max_length=255, description="Actor name")
    bio: str = Field(description="Biography")
    born_at: date = Field(description="Date of birth")


class ActorUpdate(BaseModel):
    """Schema for a partial actor update."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1, max_length=255)
    bio: str | None = Field(default=None)
    born_at: date | None = Field(default=None)

    @field_validator("name", "bio", "born_at")
    @classmethod
    def reject_null(cls, v: object) -> object:
        """Required columns may be omitted but not set to null."""
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class ActorResponse(BaseModel):
    """Actor as stored in the catalog."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Actor ID")
    name: str = Field(description="Actor name")
    bio: str = Field(description="Biography")
    born_at: date = Field(description="Date of birth")


class ActorMovie(BaseModel):
    """A movie the actor appeared in, with the character played."""

    id: int = Field(description="Movie ID")
    name: str = Field(description="Movie name")
    synopsis: str | None = Field(default=None, description="Movie synopsis")
    released_at: date = Field(description="Release date")
    runtime_in_minutes: int = Field(description="Runtime in minutes")
    genre_id: int | None = Field(default=None, description="Genre ID")
    character_name: str | None = Field(default=None, description="Character played")


class ActorWithMovies(ActorResponse):
    """Actor together with every movie they are linked to."""

    movies: list[ActorMovie] = Field(default_factory=list, description="Linked movies")


class FavoriteGenre(BaseModel):
    """The genre an actor appeared in most often."""

    id: int = Field(description="Genre ID")
    name: str = Field(description="Genre name")
    movie_count: int = Field(description="Number of the actor's movies in this genre")


class CharacterNamesResponse(BaseModel):
    """Character names played by an actor."""

    character_names: list[str] = Field(default_factory=list, description="Character names")


class AddMovieToActor(BaseModel):
    """Optional body when linking a movie to an actor."""

    model_config = ConfigDict(extra="forbid")

    character_name: str | None = Field(
        default=None, min_length=1, max_length=255, description="Character played"
    )
