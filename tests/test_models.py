"""Tests for data models."""

import pytest
from movie_catalog.models.catalog import Actor, Genre, Movie, ReleaseDate
from movie_catalog.models.ingestion import IngestionReport, SourceStats


def make_movie(movie_id=1, title="Alpha", date="01-01-2000", rating=7.5):
    return Movie(
        id=movie_id,
        title=title,
        release_date=ReleaseDate.parse(date),
        budget=100,
        duration=90.0,
        average_rating=rating,
        vote_count=1000,
    )


class TestReleaseDate:
    """Tests for ReleaseDate model."""

    def test_parse(self):
        """Test parsing a dd-mm-yyyy date."""
        date = ReleaseDate.parse("24-12-1999")
        assert date.day == 24
        assert date.month == 12
        assert date.year == 1999

    def test_parse_rejects_malformed(self):
        """Test that a date without three parts is rejected."""
        with pytest.raises(ValueError):
            ReleaseDate.parse("1999-12")

    def test_day_count(self):
        """Test the approximate day count."""
        assert ReleaseDate(day=2, month=3, year=2000).day_count() == 2000 * 365 + 90 + 2

    def test_day_count_merges_month_boundaries(self):
        """Test that 31 January and 1 February share a day count."""
        jan = ReleaseDate(day=31, month=1, year=2000)
        feb = ReleaseDate(day=1, month=2, year=2000)
        assert jan.day_count() == feb.day_count() == 2000 * 365 + 61

    def test_str(self):
        """Test rendering back to dd-mm-yyyy."""
        assert str(ReleaseDate(day=5, month=7, year=2010)) == "05-07-2010"


class TestMovie:
    """Tests for Movie model."""

    def test_movie_creation(self):
        """Test basic movie creation."""
        movie = make_movie()
        assert movie.id == 1
        assert movie.title == "Alpha"
        assert movie.year == 2000
        assert movie.cast == []
        assert movie.genres == []

    def test_add_actor_skips_duplicate_id(self):
        """Test that the cast never holds the same actor id twice."""
        movie = make_movie()
        assert movie.add_actor(Actor(id=1, name="John", male=True))
        assert not movie.add_actor(Actor(id=1, name="Johnny", male=True))
        assert [a.name for a in movie.cast] == ["John"]

    def test_add_genre_skips_duplicate_name(self):
        """Test that the genre list never holds the same name twice."""
        movie = make_movie()
        assert movie.add_genre(Genre(name="Drama"))
        assert not movie.add_genre(Genre(name="Drama"))
        assert len(movie.genres) == 1

    def test_remove_actor(self):
        """Test removing an actor from the cast."""
        movie = make_movie()
        movie.add_actor(Actor(id=1, name="John", male=True))
        movie.add_actor(Actor(id=2, name="Mary", male=False))
        assert movie.remove_actor(1)
        assert not movie.remove_actor(1)
        assert [a.id for a in movie.cast] == [2]

    def test_str(self):
        """Test the one-line summary."""
        movie = make_movie()
        movie.add_actor(Actor(id=1, name="John", male=True))
        assert str(movie) == "1 | Alpha | 01-01-2000 | 1 | 0"


class TestGenre:
    """Tests for Genre model."""

    def test_genre_is_immutable(self):
        """Test that a genre cannot be renamed."""
        genre = Genre(name="Drama")
        with pytest.raises(AttributeError):
            genre.name = "Comedy"


class TestIngestionReport:
    """Tests for ingestion report models."""

    def test_defaults(self):
        """Test that an empty report has nothing loaded."""
        report = IngestionReport()
        assert report.movies == SourceStats()
        assert not report.actors.loaded
        assert report.ignored == 0

    def test_ignored_total(self):
        """Test the total of ignored lines."""
        report = IngestionReport(
            movies=SourceStats(accepted=3, ignored=1, loaded=True),
            actors=SourceStats(accepted=2, ignored=2, loaded=True),
        )
        assert report.ignored == 3
