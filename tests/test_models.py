"""Tests for data models."""

import pytest
from attrs.exceptions import FrozenInstanceError

from yodd_watch.models.media import (
    Episode,
    GenreInfo,
    MediaImages,
    Movie,
    MovieDetails,
    Person,
    TVShow,
)


class TestMovie:
    """Tests for Movie model."""

    def test_movie_creation(self):
        """Test basic movie creation leaves optional fields absent."""
        movie = Movie(id=123, title="Test Movie")
        assert movie.id == 123
        assert movie.title == "Test Movie"
        assert movie.overview is None
        assert movie.runtime is None
        assert movie.genres is None

    def test_movie_with_all_fields(self):
        """Test movie with all fields populated."""
        movie = Movie(
            id=10,
            title="Example",
            overview="Test",
            poster_path="/p.jpg",
            backdrop_path="/b.jpg",
            release_date="2024-01-01",
            vote_average=8.0,
            runtime=120,
            tagline="Tag",
            homepage="https://example.com",
            genres=[GenreInfo(id=1, name="Drama")],
        )
        assert movie.runtime == 120
        assert movie.genres[0].name == "Drama"

    def test_movie_is_immutable(self):
        """Test records cannot be mutated after construction."""
        movie = Movie(id=1, title="Fixed")
        with pytest.raises(FrozenInstanceError):
            movie.title = "Changed"


class TestTVShowProjection:
    """Tests for projecting a TV show into the Movie shape."""

    def test_as_movie_copies_shared_fields(self):
        """Test name and first air date map to title and release date."""
        show = TVShow(
            id=5,
            name="X",
            overview="o",
            poster_path="/p",
            first_air_date="2020-01-01",
            vote_average=7.0,
        )
        movie = show.as_movie()
        assert movie == Movie(
            id=5,
            title="X",
            overview="o",
            poster_path="/p",
            release_date="2020-01-01",
            vote_average=7.0,
        )

    def test_as_movie_drops_tv_only_fields(self):
        """Test backdrop, seasons and genres are not carried over."""
        show = TVShow(
            id=9,
            name="Long Show",
            backdrop_path="/b",
            tagline="t",
            genres=[GenreInfo(id=18, name="Drama")],
            number_of_seasons=4,
        )
        movie = show.as_movie()
        assert movie.backdrop_path is None
        assert movie.tagline is None
        assert movie.genres is None


class TestAggregates:
    """Tests for details and image aggregates."""

    def test_movie_details(self):
        """Test details bundle a movie with its cast."""
        details = MovieDetails(
            movie=Movie(id=1, title="A"),
            cast=[Person(id=2, name="Actor", character="Hero")],
        )
        assert details.cast[0].character == "Hero"

    def test_media_images_default_empty(self):
        """Test images default to empty sequences."""
        images = MediaImages()
        assert images.posters == []
        assert images.backdrops == []

    def test_episode_requires_numbers(self):
        """Test season and episode numbers are mandatory."""
        with pytest.raises(TypeError):
            Episode(id=1, name="Pilot")
