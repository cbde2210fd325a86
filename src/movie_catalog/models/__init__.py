"""Data models for the movie catalog."""

from .catalog import Actor, Genre, Movie, ReleaseDate
from .ingestion import IngestionReport, SourceStats

__all__ = ["Actor", "Genre", "Movie", "ReleaseDate", "IngestionReport", "SourceStats"]
