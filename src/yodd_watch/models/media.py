"""TMDb media records."""

from enum import Enum, IntEnum

from attrs import field, frozen


class MediaType(str, Enum):
    """Kind of media a trending query targets."""

    MOVIE = "movie"
    TV = "tv"


class WatchProvider(IntEnum):
    """Streaming providers known to TMDb's discover endpoints."""

    NETFLIX = 8
    PRIME_VIDEO = 9
    DISNEY_PLUS = 337
    APPLE_TV_PLUS = 350


class Genre(IntEnum):
    """Movie genres used by the default categories."""

    ACTION = 28
    COMEDY = 35
    DRAMA = 18


@frozen
class GenreInfo:
    """A genre attached to a movie or show."""

    id: int
    name: str


@frozen
class Movie:
    """A movie, or any title projected into the movie shape."""

    id: int
    title: str
    overview: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    release_date: str | None = None
    vote_average: float | None = None
    runtime: int | None = None
    tagline: str | None = None
    homepage: str | None = None
    genres: list[GenreInfo] | None = None


@frozen
class TVShow:
    """A TV show."""

    id: int
    name: str
    overview: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    first_air_date: str | None = None
    vote_average: float | None = None
    tagline: str | None = None
    homepage: str | None = None
    genres: list[GenreInfo] | None = None
    number_of_seasons: int | None = None
    number_of_episodes: int | None = None
    episode_run_time: list[int] | None = None

    def as_movie(self) -> Movie:
        """Project this show into the Movie shape so both render alike.

        Only id, name, overview, poster path, first air date and vote
        average survive; TV-only fields are dropped.
        """
        return Movie(
            id=self.id,
            title=self.name,
            overview=self.overview,
            poster_path=self.poster_path,
            release_date=self.first_air_date,
            vote_average=self.vote_average,
        )


@frozen
class Person:
    """A cast member or person profile.

    ``character`` is only filled in credits responses.
    """

    id: int
    name: str
    character: str | None = None
    profile_path: str | None = None
    biography: str | None = None
    birthday: str | None = None
    place_of_birth: str | None = None


@frozen
class Episode:
    """A single episode of a TV show season."""

    id: int
    name: str
    season_number: int
    episode_number: int
    overview: str | None = None
    still_path: str | None = None
    air_date: str | None = None
    vote_average: float | None = None


@frozen
class ImageInfo:
    """An image file reference."""

    file_path: str
    width: int | None = None
    height: int | None = None


@frozen
class VideoInfo:
    """A video hosted on an external site (``key`` is the host's id)."""

    name: str
    key: str
    site: str
    type: str


@frozen
class MediaImages:
    """Posters and backdrops of a movie or show."""

    posters: list[ImageInfo] = field(factory=list)
    backdrops: list[ImageInfo] = field(factory=list)


@frozen
class MovieDetails:
    """A movie together with its cast."""

    movie: Movie
    cast: list[Person] = field(factory=list)


@frozen
class TVShowDetails:
    """A TV show together with its cast."""

    show: TVShow
    cast: list[Person] = field(factory=list)
