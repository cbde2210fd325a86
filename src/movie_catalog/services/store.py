"""In-memory catalog store."""

from attrs import define, field

from ..models.catalog import Actor, Genre, Movie
from ..models.ingestion import IngestionReport


@define
class CatalogStore:
    """Holds movies, actors and genres and the links between them.

    Movies, actors and genres are kept in insertion order; every query
    that scans the catalog sees them in the order they were ingested.
    """

    _movies: dict[int, Movie] = field(factory=dict)
    _actors: dict[int, Actor] = field(factory=dict)
    _genres: dict[str, Genre] = field(factory=dict)
    report: IngestionReport | None = None

    @property
    def loaded(self) -> bool:
        return self.report is not None

    def get_movie(self, movie_id: int) -> Movie | None:
        return self._movies.get(movie_id)

    def list_movies(self) -> list[Movie]:
        return list(self._movies.values())

    def get_actor(self, actor_id: int) -> Actor | None:
        return self._actors.get(actor_id)

    def list_actors(self) -> list[Actor]:
        return list(self._actors.values())

    def list_genres(self) -> list[Genre]:
        return list(self._genres.values())

    def add_movie(self, movie: Movie) -> bool:
        """Add a movie unless its id is already taken."""
        if movie.id in self._movies:
            return False
        self._movies[movie.id] = movie
        return True

    def register_actor(self, actor: Actor) -> Actor:
        """Register an actor and return the registry's instance for its id."""
        return self._actors.setdefault(actor.id, actor)

    def intern_genre(self, name: str) -> Genre:
        """Return the shared genre for a name, creating it on first sight."""
        genre = self._genres.get(name)
        if genre is None:
            genre = self._genres[name] = Genre(name=name)
        return genre

    def add_actor_to_movie(self, actor: Actor, movie_id: int) -> bool:
        movie = self._movies.get(movie_id)
        if movie is None:
            return False
        return movie.add_actor(actor)

    def add_genre_to_movie(self, genre: Genre, movie_id: int) -> bool:
        movie = self._movies.get(movie_id)
        if movie is None:
            return False
        return movie.add_genre(genre)

    def remove_actor(self, actor_id: int) -> bool:
        """Remove an actor from every cast and from the registry."""
        if actor_id not in self._actors:
            return False
        for movie in self._movies.values():
            movie.remove_actor(actor_id)
        del self._actors[actor_id]
        return True
