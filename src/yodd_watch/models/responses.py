"""Response envelopes wrapping TMDb result lists."""

from attrs import frozen

from .media import Episode, ImageInfo, Movie, Person, TVShow, VideoInfo


@frozen
class MovieResults:
    """Paged ``{"results": [...]}`` envelope of movies."""

    results: list[Movie]


@frozen
class TVShowResults:
    """Paged ``{"results": [...]}`` envelope of TV shows."""

    results: list[TVShow]


@frozen
class CreditsResponse:
    cast: list[Person]


@frozen
class ImagesResponse:
    posters: list[ImageInfo]
    backdrops: list[ImageInfo]


@frozen
class PersonImagesResponse:
    profiles: list[ImageInfo]


@frozen
class VideosResponse:
    results: list[VideoInfo]


@frozen
class SeasonResponse:
    episodes: list[Episode]


@frozen
class SeasonCount:
    """Just the season count out of a full show payload."""

    number_of_seasons: int
