"""Ingestion of the movies, actors and genres sources into a catalog store."""

import logging
from collections.abc import Callable, Iterable

from attrs import define

from ..config import Settings, get_settings
from ..models.catalog import Actor, Movie, ReleaseDate
from ..models.ingestion import IngestionReport, SourceStats
from .store import CatalogStore

logger = logging.getLogger(__name__)

MOVIE_FIELDS = 7
ACTOR_FIELDS = 4
GENRE_FIELDS = 2


def split_record(line: str) -> list[str]:
    """Split a raw line into stripped comma-separated fields."""
    return [part.strip() for part in line.rstrip("\r\n").split(",")]


def parse_flag(value: str) -> bool:
    return value.strip().lower() == "true"


def read_source(path: str, encoding: str = "utf-8") -> list[str] | None:
    """Read all lines of a source file, or None if it cannot be read."""
    try:
        with open(path, encoding=encoding) as fh:
            return [line.rstrip("\r\n") for line in fh]
    except FileNotFoundError:
        logger.warning("Source file %s was not found, skipping", path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read source file %s: %s", path, exc)
    return None


@define
class CatalogIngestor:
    """Populates a catalog store from raw source lines."""

    store: CatalogStore

    def ingest(
        self,
        movies: Iterable[str] | None,
        actors: Iterable[str] | None,
        genres: Iterable[str] | None,
    ) -> IngestionReport:
        """Ingest the three sources in order. A None source is skipped.

        A store is only ever loaded once; later calls return the first report.
        """
        if self.store.report is not None:
            logger.debug("Catalog already loaded, ignoring repeated ingestion")
            return self.store.report

        report = IngestionReport()
        if movies is not None:
            report.movies = self._ingest_lines(movies, self._ingest_movie)
        if actors is not None:
            report.actors = self._ingest_lines(actors, self._ingest_actor)
        if genres is not None:
            report.genres = self._ingest_lines(genres, self._ingest_genre)
        self.store.report = report
        return report

    def _ingest_lines(
        self, lines: Iterable[str], handler: Callable[[list[str]], bool]
    ) -> SourceStats:
        stats = SourceStats(loaded=True)
        for line in lines:
            if not line.strip():
                stats.ignored += 1
                continue
            try:
                accepted = handler(split_record(line))
            except ValueError:
                logger.debug("Ignoring malformed line: %r", line)
                accepted = False
            if accepted:
                stats.accepted += 1
            else:
                stats.ignored += 1
        return stats

    def _ingest_movie(self, fields: list[str]) -> bool:
        if len(fields) != MOVIE_FIELDS:
            return False
        movie_id = int(fields[0])
        if self.store.get_movie(movie_id) is not None:
            return False
        movie = Movie(
            id=movie_id,
            title=fields[1],
            release_date=ReleaseDate.parse(fields[2]),
            budget=int(fields[3]),
            duration=float(fields[4]),
            average_rating=float(fields[5]),
            vote_count=int(fields[6]),
        )
        return self.store.add_movie(movie)

    def _ingest_actor(self, fields: list[str]) -> bool:
        if len(fields) != ACTOR_FIELDS:
            return False
        actor = Actor(id=int(fields[0]), name=fields[1], male=parse_flag(fields[2]))
        movie_id = int(fields[3])
        actor = self.store.register_actor(actor)
        self.store.add_actor_to_movie(actor, movie_id)
        return True

    def _ingest_genre(self, fields: list[str]) -> bool:
        if len(fields) != GENRE_FIELDS:
            return False
        name = fields[0]
        movie_id = int(fields[1])
        genre = self.store.intern_genre(name)
        self.store.add_genre_to_movie(genre, movie_id)
        return True


def load_catalog(
    settings: Settings | None = None, store: CatalogStore | None = None
) -> CatalogStore:
    """Read the configured source files and ingest them into a store."""
    if settings is None:
        settings = get_settings()
    if store is None:
        store = CatalogStore()

    report = CatalogIngestor(store).ingest(
        read_source(settings.movies_file, settings.encoding),
        read_source(settings.actors_file, settings.encoding),
        read_source(settings.genres_file, settings.encoding),
    )
    logger.info(
        "Loaded %d movies, %d actors and %d genres (%d lines ignored)",
        len(store.list_movies()),
        len(store.list_actors()),
        len(store.list_genres()),
        report.ignored,
    )
    return store
