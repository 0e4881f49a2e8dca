"""Movie Catalog - movies, actors and the characters they played."""

__version__ = "0.1.0"
