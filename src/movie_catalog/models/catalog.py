"""Catalog data models."""

from attrs import define, field


@define
class ReleaseDate:
    """Release date of a movie."""

    day: int
    month: int
    year: int

    @classmethod
    def parse(cls, value: str) -> "ReleaseDate":
        """Parse a ``dd-mm-yyyy`` string."""
        day, month, year = value.split("-")
        return cls(day=int(day), month=int(month), year=int(year))

    def day_count(self) -> int:
        """Approximate number of days since year zero, used for ordering."""
        return self.year * 365 + self.month * 30 + self.day

    def __str__(self) -> str:
        return f"{self.day:02d}-{self.month:02d}-{self.year}"


@define
class Actor:
    """Represents an actor in the global registry."""

    id: int
    name: str
    male: bool


@define(frozen=True)
class Genre:
    """Represents a genre. Shared by every movie carrying it."""

    name: str


@define
class Movie:
    """Represents a movie and its cast and genres."""

    id: int
    title: str
    release_date: ReleaseDate
    budget: int
    duration: float
    average_rating: float
    vote_count: int
    cast: list[Actor] = field(factory=list)
    genres: list[Genre] = field(factory=list)

    @property
    def year(self) -> int:
        return self.release_date.year

    def has_actor(self, actor_id: int) -> bool:
        return any(a.id == actor_id for a in self.cast)

    def has_actor_named(self, name: str) -> bool:
        return any(a.name == name for a in self.cast)

    def has_genre(self, name: str) -> bool:
        return any(g.name == name for g in self.genres)

    def add_actor(self, actor: Actor) -> bool:
        """Append an actor to the cast unless its id is already there."""
        if self.has_actor(actor.id):
            return False
        self.cast.append(actor)
        return True

    def add_genre(self, genre: Genre) -> bool:
        """Append a genre unless one with the same name is already there."""
        if self.has_genre(genre.name):
            return False
        self.genres.append(genre)
        return True

    def remove_actor(self, actor_id: int) -> bool:
        before = len(self.cast)
        self.cast = [a for a in self.cast if a.id != actor_id]
        return len(self.cast) != before

    def __str__(self) -> str:
        return (
            f"{self.id} | {self.title} | {self.release_date} | "
            f"{len(self.cast)} | {len(self.genres)}"
        )
