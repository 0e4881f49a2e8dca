"""Main API router aggregation."""

from fastapi import APIRouter

from movie_catalog.api.actors import router as actors_router
from movie_catalog.api.movies import router as movies_router

# Main API router
api_router = APIRouter(prefix="/v0")

# Include all sub-routers
api_router.include_router(actors_router)
api_router.include_router(movies_router)
