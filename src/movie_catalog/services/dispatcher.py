"""Line-oriented query protocol over a catalog store."""

import logging
import threading
from collections import Counter
from collections.abc import Callable, Iterable

from attrs import define, field

from ..models.catalog import Actor, Movie
from .ingestion import parse_flag
from .store import CatalogStore

logger = logging.getLogger(__name__)

INVALID_QUERY = "Query com formato inválido. Tente novamente."
TITLE_SEPARATOR = "||"
TOP_ACTORS_LIMIT = 10
ALL_ENTRIES = -1


class QueryParseError(ValueError):
    """Raised when a recognized command carries a malformed argument."""


def parse_int(value: str, name: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise QueryParseError(f"Invalid {name}: {value!r}") from None


def required(args: list[str], index: int, name: str) -> str:
    if index >= len(args):
        raise QueryParseError(f"Missing {name}")
    return args[index]


def count_appearances(movies: Iterable[Movie]) -> tuple[Counter, dict[int, Actor]]:
    """Tally cast appearances per actor id, in first-seen order."""
    tally: Counter = Counter()
    actors: dict[int, Actor] = {}
    for movie in movies:
        for actor in movie.cast:
            tally[actor.id] += 1
            actors.setdefault(actor.id, actor)
    return tally, actors


@define
class QueryDispatcher:
    """Parses command lines and answers them from a catalog store.

    The first space-separated token selects the command. The remaining
    tokens are joined back with single spaces so that names containing
    spaces survive. Each command runs under one lock, so a dispatcher can
    be shared by threads as long as all access goes through ``execute``.
    """

    store: CatalogStore
    _lock: threading.Lock = field(factory=threading.Lock, init=False)

    def execute(self, query: str) -> str:
        """Run one command line and return its response."""
        query = query.rstrip("\r\n")
        if " " not in query:
            return INVALID_QUERY
        command, *args = query.split(" ")
        while args and not args[-1]:
            args.pop()
        handler = self._handlers().get(command)
        if handler is None:
            logger.debug("Unknown command %r", command)
            return INVALID_QUERY
        with self._lock:
            return handler(args)

    def _handlers(self) -> dict[str, Callable[[list[str]], str]]:
        return {
            "COUNT_MOVIES_YEAR": self.count_movies_year,
            "COUNT_MOVIES_ACTOR": self.count_movies_actor,
            "COUNT_MOVIES_ACTORS": self.count_movies_actors,
            "GET_TITLES_YEAR": self.get_titles_year,
            "HARD_MODE_ON_1": self.hard_mode_on_1,
            "GET_TOP_VOTED_TITLES_YEAR": self.get_top_voted_titles_year,
            "COUNT_MOVIES_ACTOR_YEAR": self.count_movies_actor_year,
            "GET_TOP_ACTOR_YEAR": self.get_top_actor_year,
            "COUNT_MOVIES_YEAR_GENRE": self.count_movies_year_genre,
            "GET_MALE_RATIO_YEAR": self.get_male_ratio_year,
            "COUNT_MOVIES_WITH_MANY_ACTORS": self.count_movies_with_many_actors,
            "GET_TOP_ACTORS_BY_GENRE": self.get_top_actors_by_genre,
            "INSERT_ACTOR": self.insert_actor,
            "REMOVE_ACTOR": self.remove_actor,
        }

    def _movies_of_year(self, args: list[str]) -> list[Movie]:
        year = parse_int(required(args, 0, "year"), "year")
        return [m for m in self.store.list_movies() if m.year == year]

    # Read queries

    def count_movies_year(self, args: list[str]) -> str:
        return str(len(self._movies_of_year(args)))

    def count_movies_actor(self, args: list[str]) -> str:
        name = " ".join(args)
        count = sum(
            1
            for movie in self.store.list_movies()
            for actor in movie.cast
            if actor.name == name
        )
        return str(count)

    def count_movies_actors(self, args: list[str]) -> str:
        names = " ".join(args).split(";")
        if len(names) < 2:
            raise QueryParseError("Expected two actor names separated by ';'")
        first, second = names[0], names[1]
        count = sum(
            1
            for movie in self.store.list_movies()
            if movie.has_actor_named(first) and movie.has_actor_named(second)
        )
        return str(count)

    def get_titles_year(self, args: list[str]) -> str:
        return TITLE_SEPARATOR.join(m.title for m in self._movies_of_year(args))

    def hard_mode_on_1(self, args: list[str]) -> str:
        """Later movies with the same rating that share an actor name."""
        movie_id = parse_int(required(args, 0, "movie id"), "movie id")
        reference = self.store.get_movie(movie_id)
        if reference is None:
            return ""
        names = {actor.name for actor in reference.cast}
        day_count = reference.release_date.day_count()
        titles = [
            movie.title
            for movie in self.store.list_movies()
            if movie.id != reference.id
            and movie.release_date.day_count() > day_count
            and movie.average_rating == reference.average_rating
            and any(actor.name in names for actor in movie.cast)
        ]
        return TITLE_SEPARATOR.join(titles)

    def get_top_voted_titles_year(self, args: list[str]) -> str:
        movies = self._movies_of_year(args)
        limit = parse_int(required(args, 1, "count"), "count")
        # Stable sort keeps the first-seen movie ahead on equal ratings.
        ranked = sorted(movies, key=lambda m: m.average_rating, reverse=True)
        if limit != ALL_ENTRIES:
            ranked = ranked[: max(limit, 0)]
        return "".join(f"{m.title};{m.average_rating}\n" for m in ranked)

    def count_movies_actor_year(self, args: list[str]) -> str:
        movies = self._movies_of_year(args)
        name = " ".join(args[1:])
        count = sum(1 for movie in movies for actor in movie.cast if actor.name == name)
        return str(count)

    def get_top_actor_year(self, args: list[str]) -> str:
        tally, actors = count_appearances(self._movies_of_year(args))
        if not tally:
            return ""
        actor_id, count = tally.most_common(1)[0]
        return f"{actors[actor_id].name};{count}"

    def count_movies_year_genre(self, args: list[str]) -> str:
        movies = self._movies_of_year(args)
        genre = " ".join(args[1:])
        count = sum(1 for movie in movies for g in movie.genres if g.name == genre)
        return str(count)

    def get_male_ratio_year(self, args: list[str]) -> str:
        _, actors = count_appearances(self._movies_of_year(args))
        if not actors:
            return "0%"
        males = sum(1 for actor in actors.values() if actor.male)
        return f"{males * 100 // len(actors)}%"

    def count_movies_with_many_actors(self, args: list[str]) -> str:
        threshold = parse_int(required(args, 0, "threshold"), "threshold")
        count = sum(1 for movie in self.store.list_movies() if len(movie.cast) > threshold)
        return str(count)

    def get_top_actors_by_genre(self, args: list[str]) -> str:
        """Most frequent actors in movies carrying a genre.

        With more than ten candidates the ten best ids are listed. With ten
        or fewer, picking an actor drops every candidate sharing its name.
        """
        genre = " ".join(args)
        movies = [m for m in self.store.list_movies() if m.has_genre(genre)]
        tally, actors = count_appearances(movies)
        ranked = tally.most_common()

        lines = []
        if len(ranked) > TOP_ACTORS_LIMIT:
            for actor_id, count in ranked[:TOP_ACTORS_LIMIT]:
                lines.append(f"{actors[actor_id].name};{count}\n")
        else:
            seen: set[str] = set()
            for actor_id, count in ranked:
                name = actors[actor_id].name
                if name in seen:
                    continue
                seen.add(name)
                lines.append(f"{name};{count}\n")
        return "".join(lines)

    # Mutations

    def insert_actor(self, args: list[str]) -> str:
        fields = [part.strip() for part in " ".join(args).split(",")]
        if len(fields) != 4:
            raise QueryParseError("Expected id,name,genderFlag,movieId")
        actor_id = parse_int(fields[0], "actor id")
        movie_id = parse_int(fields[3], "movie id")

        movie = self.store.get_movie(movie_id)
        if movie is None or self.store.get_actor(actor_id) is not None:
            return "Erro"
        actor = self.store.register_actor(
            Actor(id=actor_id, name=fields[1], male=parse_flag(fields[2]))
        )
        movie.add_actor(actor)
        logger.debug("Inserted actor %d into movie %d", actor_id, movie_id)
        return "ok"

    def remove_actor(self, args: list[str]) -> str:
        actor_id = parse_int(required(args, 0, "actor id"), "actor id")
        if not self.store.remove_actor(actor_id):
            return "Erro"
        logger.debug("Removed actor %d", actor_id)
        return "OK"
