"""Tests for movie API endpoints."""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import AsyncClient

from movie_catalog.api.dependencies import get_movie_repository
from movie_catalog.main import app
from movie_catalog.models.movie import Movie
from movie_catalog.repositories import ConstraintViolationError, MovieRepository

VALID_PAYLOAD = {
    "name": "Iron Man",
    "synopsis": "A billionaire builds a suit of armor.",
    "released_at": "2008-05-02",
    "runtime_in_minutes": 126,
}


def create_mock_movie(id: int = 1, name: str = "Iron Man", genre_id: int | None = None) -> MagicMock:
    """Create a mock Movie object."""
    mock_movie = MagicMock(spec=Movie)
    mock_movie.id = id
    mock_movie.name = name
    mock_movie.synopsis = "A billionaire builds a suit of armor."
    mock_movie.released_at = date(2008, 5, 2)
    mock_movie.runtime_in_minutes = 126
    mock_movie.genre_id = genre_id
    return mock_movie


@pytest.fixture
def mock_movies():
    """Create a mock movie repository that fails unless a test sets results."""
    repo = MagicMock(spec=MovieRepository)
    for method in ("list", "find", "create", "update", "remove"):
        setattr(repo, method, AsyncMock(side_effect=AssertionError(f"unexpected {method}()")))
    app.dependency_overrides[get_movie_repository] = lambda: repo
    yield repo
    app.dependency_overrides.clear()


class TestListMovies:
    """Tests for list movies endpoint."""

    async def test_list_movies(self, client: AsyncClient, mock_movies: MagicMock) -> None:
        """Test listing all movies."""
        mock_movies.list = AsyncMock(
            return_value=[create_mock_movie(), create_mock_movie(id=2, name="Iron Man 2")]
        )

        response = await client.get("/v0/movies")

        assert response.status_code == 200
        data = response.json()
        assert [m["name"] for m in data] == ["Iron Man", "Iron Man 2"]
        assert data[0]["released_at"] == "2008-05-02"


class TestCreateMovie:
    """Tests for create movie endpoint."""

    async def test_create_movie(self, client: AsyncClient, mock_movies: MagicMock) -> None:
        """Test that a created movie returns its ID and path."""
        mock_movies.create = AsyncMock(return_value=123)

        response = await client.post("/v0/movies", json=VALID_PAYLOAD)

        assert response.status_code == 201
        assert response.json() == {"id": 123, "path": "/v0/movies/123"}
        fields = mock_movies.create.call_args.args[0]
        assert fields["name"] == "Iron Man"
        assert fields["released_at"] == date(2008, 5, 2)
        assert fields["genre_id"] is None

    async def test_create_movie_invalid_payload(
        self, client: AsyncClient, mock_movies: MagicMock
    ) -> None:
        """Test that a payload missing required fields is rejected."""
        response = await client.post("/v0/movies", json={"some": "object"})

        assert response.status_code == 422
        mock_movies.create.assert_not_called()

    async def test_create_movie_zero_runtime(
        self, client: AsyncClient, mock_movies: MagicMock
    ) -> None:
        """Test that runtime must be positive."""
        response = await client.post("/v0/movies", json={**VALID_PAYLOAD, "runtime_in_minutes": 0})

        assert response.status_code == 422

    async def test_create_movie_duplicate_name(
        self, client: AsyncClient, mock_movies: MagicMock
    ) -> None:
        """Test that a duplicate name maps to 409."""
        mock_movies.create = AsyncMock(
            side_effect=ConstraintViolationError("UNIQUE constraint failed", table="movie")
        )

        response = await client.post("/v0/movies", json=VALID_PAYLOAD)

        assert response.status_code == 409


class TestGetMovie:
    """Tests for get movie endpoint."""

    async def test_get_movie(self, client: AsyncClient, mock_movies: MagicMock) -> None:
        """Test fetching a single movie."""
        mock_movies.find = AsyncMock(return_value=create_mock_movie(id=7, genre_id=2))

        response = await client.get("/v0/movies/7")

        assert response.status_code == 200
        assert response.json()["genre_id"] == 2
        mock_movies.find.assert_called_once_with(7)

    async def test_get_movie_not_found(self, client: AsyncClient, mock_movies: MagicMock) -> None:
        """Test fetching an unknown movie."""
        mock_movies.find = AsyncMock(return_value=None)

        response = await client.get("/v0/movies/7")

        assert response.status_code == 404

    async def test_get_movie_invalid_id(self, client: AsyncClient, mock_movies: MagicMock) -> None:
        """Test that non-numeric and non-positive IDs are rejected."""
        assert (await client.get("/v0/movies/not-a-number")).status_code == 422
        assert (await client.get("/v0/movies/0")).status_code == 422


class TestUpdateMovie:
    """Tests for update movie endpoint."""

    async def test_update_movie_partial(self, client: AsyncClient, mock_movies: MagicMock) -> None:
        """Test that only supplied fields are passed to the repository."""
        mock_movies.update = AsyncMock(return_value=True)
        mock_movies.find = AsyncMock(return_value=create_mock_movie(name="Iron Man (2008)"))

        response = await client.put("/v0/movies/1", json={"name": "Iron Man (2008)"})

        assert response.status_code == 200
        assert response.json()["name"] == "Iron Man (2008)"
        mock_movies.update.assert_called_once_with(1, {"name": "Iron Man (2008)"})

    async def test_update_movie_not_found(
        self, client: AsyncClient, mock_movies: MagicMock
    ) -> None:
        """Test updating an unknown movie."""
        mock_movies.update = AsyncMock(return_value=False)

        response = await client.put("/v0/movies/1", json={"name": "Nothing"})

        assert response.status_code == 404

    async def test_update_movie_null_name(
        self, client: AsyncClient, mock_movies: MagicMock
    ) -> None:
        """Test that a required column cannot be set to null."""
        response = await client.put("/v0/movies/1", json={"name": None})

        assert response.status_code == 422
        mock_movies.update.assert_not_called()


class TestDeleteMovie:
    """Tests for delete movie endpoint."""

    async def test_delete_movie(self, client: AsyncClient, mock_movies: MagicMock) -> None:
        """Test deleting a movie."""
        mock_movies.remove = AsyncMock(return_value=True)

        response = await client.delete("/v0/movies/1")

        assert response.status_code == 204
        mock_movies.remove.assert_called_once_with(1)

    async def test_delete_movie_not_found(
        self, client: AsyncClient, mock_movies: MagicMock
    ) -> None:
        """Test deleting an unknown movie."""
        mock_movies.remove = AsyncMock(return_value=False)

        response = await client.delete("/v0/movies/1")

        assert response.status_code == 404
