"""Actor API endpoints, including an actor's movies and derived views."""

from fastapi import APIRouter, Body, HTTPException, Path

from movie_catalog.api.dependencies import Actors, Associations, Relations
from movie_catalog.schemas.actor import (
    ActorCreate,
    ActorResponse,
    ActorUpdate,
    ActorWithMovies,
    AddMovieToActor,
    CharacterNamesResponse,
    FavoriteGenre,
)
from movie_catalog.schemas.movie import CreatedResponse

router = APIRouter(prefix="/actors", tags=["actors"])


@router.get("", response_model=list[ActorResponse])
async def list_actors(actors: Actors) -> list[ActorResponse]:
    """List every actor."""
    rows = await actors.list()
    return [ActorResponse.model_validate(actor) for actor in rows]


@router.post("", response_model=CreatedResponse, status_code=201)
async def create_actor(actor_data: ActorCreate, actors: Actors) -> CreatedResponse:
    """Create an actor."""
    actor_id = await actors.create(actor_data.model_dump())
    return CreatedResponse(id=actor_id, path=f"/v0/actors/{actor_id}")


@router.get("/{actor_id}", response_model=ActorResponse)
async def get_actor(actors: Actors, actor_id: int = Path(ge=1)) -> ActorResponse:
    """Get a single actor."""
    actor = await actors.find(actor_id)
    if actor is None:
        raise HTTPException(status_code=404, detail="Actor not found")
    return ActorResponse.model_validate(actor)


@router.put("/{actor_id}", response_model=ActorResponse)
async def update_actor(
    actor_data: ActorUpdate,
    actors: Actors,
    actor_id: int = Path(ge=1),
) -> ActorResponse:
    """Update an actor.

    Only fields present in the request body are changed.
    """
    found = await actors.update(actor_id, actor_data.model_dump(exclude_unset=True))
    if not found:
        raise HTTPException(status_code=404, detail="Actor not found")

    actor = await actors.find(actor_id)
    if actor is None:
        raise HTTPException(status_code=404, detail="Actor not found")
    return ActorResponse.model_validate(actor)


@router.delete("/{actor_id}", status_code=204)
async def delete_actor(actors: Actors, actor_id: int = Path(ge=1)) -> None:
    """Delete an actor and their movie links."""
    if not await actors.remove(actor_id):
        raise HTTPException(status_code=404, detail="Actor not found")


@router.get("/{actor_id}/movies", response_model=ActorWithMovies)
async def get_actor_movies(relations: Relations, actor_id: int = Path(ge=1)) -> ActorWithMovies:
    """Get an actor with every movie they appear in."""
    actor = await relations.movies_for_actor(actor_id)
    if actor is None:
        raise HTTPException(status_code=404, detail="Actor not found")
    return actor


@router.post("/{actor_id}/movies/{movie_id}", status_code=201)
async def add_movie_to_actor(
    associations: Associations,
    actor_id: int = Path(ge=1),
    movie_id: int = Path(ge=1),
    link_data: AddMovieToActor | None = Body(default=None),
) -> None:
    """Link a movie to an actor, optionally naming the character played.

    Fails with 400 if either side is missing or they are already linked.
    To change the character name, delete the link and add it again.
    """
    character_name = link_data.character_name if link_data else None
    if not await associations.add_movie_to_actor(actor_id, movie_id, character_name):
        raise HTTPException(status_code=400, detail="Could not add movie to actor")


@router.delete("/{actor_id}/movies/{movie_id}", status_code=204)
async def remove_movie_from_actor(
    associations: Associations,
    actor_id: int = Path(ge=1),
    movie_id: int = Path(ge=1),
) -> None:
    """Unlink a movie from an actor."""
    if not await associations.remove_movie_from_actor(actor_id, movie_id):
        raise HTTPException(status_code=404, detail="Movie is not linked to actor")


@router.get("/{actor_id}/favorite-genre", response_model=FavoriteGenre)
async def get_favorite_genre(relations: Relations, actor_id: int = Path(ge=1)) -> FavoriteGenre:
    """Get the genre the actor appeared in most.

    Returns 404 if the actor does not exist or none of their movies has a genre.
    """
    favorite = await relations.favorite_genre(actor_id)
    if favorite is None:
        raise HTTPException(status_code=404, detail="Favorite genre not found")
    return favorite


@router.get("/{actor_id}/characters", response_model=CharacterNamesResponse)
async def get_character_names(
    relations: Relations, actor_id: int = Path(ge=1)
) -> CharacterNamesResponse:
    """Get the names of every character the actor played."""
    names = await relations.character_names(actor_id)
    if names is None:
        raise HTTPException(status_code=404, detail="Actor not found")
    return CharacterNamesResponse(character_names=names)
