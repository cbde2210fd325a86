"""Ingestion report models."""

from attrs import define, field


@define
class SourceStats:
    """Line counts for one ingestion source."""

    accepted: int = 0
    ignored: int = 0
    loaded: bool = False


@define
class IngestionReport:
    """Outcome of ingesting the movies, actors and genres sources."""

    movies: SourceStats = field(factory=SourceStats)
    actors: SourceStats = field(factory=SourceStats)
    genres: SourceStats = field(factory=SourceStats)

    @property
    def ignored(self) -> int:
        return self.movies.ignored + self.actors.ignored + self.genres.ignored
