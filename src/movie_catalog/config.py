"""Configuration management using environment variables."""

import os
from functools import lru_cache

from attrs import define


@define
class Settings:
    """Application settings."""

    movies_file: str = "deisi_movies.txt"
    actors_file: str = "deisi_actors.txt"
    genres_file: str = "deisi_genres.txt"
    encoding: str = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Load settings from environment, falling back to the default file names."""
    defaults = Settings()
    return Settings(
        movies_file=os.environ.get("MOVIE_CATALOG_MOVIES_FILE", defaults.movies_file),
        actors_file=os.environ.get("MOVIE_CATALOG_ACTORS_FILE", defaults.actors_file),
        genres_file=os.environ.get("MOVIE_CATALOG_GENRES_FILE", defaults.genres_file),
        encoding=os.environ.get("MOVIE_CATALOG_ENCODING", defaults.encoding),
    )
