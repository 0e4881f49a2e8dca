"""Movie API endpoints."""

from fastapi import APIRouter, HTTPException, Path

from movie_catalog.api.dependencies import Movies
from movie_catalog.schemas.movie import (
    CreatedResponse,
    MovieCreate,
    MovieResponse,
    MovieUpdate,
)

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=list[MovieResponse])
async def list_movies(movies: Movies) -> list[MovieResponse]:
    """List every movie in the catalog."""
    rows = await movies.list()
    return [MovieResponse.model_validate(movie) for movie in rows]


@router.post("", response_model=CreatedResponse, status_code=201)
async def create_movie(movie_data: MovieCreate, movies: Movies) -> CreatedResponse:
    """Create a movie.

    Movie names are unique; a duplicate name is rejected with 409.
    """
    movie_id = await movies.create(movie_data.model_dump())
    return CreatedResponse(id=movie_id, path=f"/v0/movies/{movie_id}")


@router.get("/{movie_id}", response_model=MovieResponse)
async def get_movie(movies: Movies, movie_id: int = Path(ge=1)) -> MovieResponse:
    """Get a single movie."""
    movie = await movies.find(movie_id)
    if movie is None:
        raise HTTPException(status_code=404, detail="Movie not found")
    return MovieResponse.model_validate(movie)


@router.put("/{movie_id}", response_model=MovieResponse)
async def update_movie(
    movie_data: MovieUpdate,
    movies: Movies,
    movie_id: int = Path(ge=1),
) -> MovieResponse:
    """Update a movie.

    Only fields present in the request body are changed.
    """
    found = await movies.update(movie_id, movie_data.model_dump(exclude_unset=True))
    if not found:
        raise HTTPException(status_code=404, detail="Movie not found")

    movie = await movies.find(movie_id)
    if movie is None:
        # Deleted between the two statements
        raise HTTPException(status_code=404, detail="Movie not found")
    return MovieResponse.model_validate(movie)


@router.delete("/{movie_id}", status_code=204)
async def delete_movie(movies: Movies, movie_id: int = Path(ge=1)) -> None:
    """Delete a movie and its actor links."""
    if not await movies.remove(movie_id):
        raise HTTPException(status_code=404, detail="Movie not found")
