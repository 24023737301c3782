"""TMDb API service: cached requests and the endpoint surface built on them."""

import asyncio
from typing import TypeVar

import httpx
from attrs import define, field
from loguru import logger

from ..config import get_settings
from ..errors import DecodeError, HTTPStatusError, InvalidResponseError
from ..models.media import (
    Episode,
    ImageInfo,
    MediaImages,
    MediaType,
    Movie,
    MovieDetails,
    Person,
    TVShow,
    TVShowDetails,
    VideoInfo,
    WatchProvider,
)
from ..models.responses import (
    CreditsResponse,
    ImagesResponse,
    MovieResults,
    PersonImagesResponse,
    SeasonCount,
    SeasonResponse,
    TVShowResults,
    VideosResponse,
)
from .cache import ResponseCache
from .decoding import decode_json

T = TypeVar("T")

BASE_URL = "https://api.themoviedb.org/3"
IMAGE_BASE_URL = "https://image.tmdb.org/t/p"
DEFAULT_IMAGE_SIZE = "w500"
STREAMING_BASE_URL = "https://vixsrc.to"
YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v="

Params = list[tuple[str, str]]


def _masked(url: str) -> str:
    """Return ``url`` with the api_key value hidden, for logging."""
    return str(httpx.URL(url).copy_set_param("api_key", "***"))


def select_trailer(videos: list[VideoInfo]) -> VideoInfo | None:
    """Pick the first YouTube trailer, in API order."""
    for video in videos:
        if video.site.lower() == "youtube" and video.type.lower() == "trailer":
            return video
    return None


def trailer_url(key: str) -> str:
    return f"{YOUTUBE_WATCH_URL}{key}"


@define
class TMDbService:
    """Client for the TMDb v3 API.

    Every successful response body is memoized by full URL for the life of
    the service, so repeating a call with identical arguments never touches
    the network again.
    """

    api_key: str = field(repr=False)
    cache: ResponseCache = field(factory=ResponseCache, repr=False)
    _client: httpx.AsyncClient | None = None

    @classmethod
    def create(cls, api_key: str | None = None) -> "TMDbService | None":
        """Build a service, falling back to the TMDB_API_KEY setting.

        Returns None when no API key is available from either source.
        """
        key = api_key or get_settings().tmdb_api_key
        if not key:
            logger.info("No TMDb API key configured; service unavailable")
            return None
        return cls(api_key=key)

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=BASE_URL,
                headers={"Accept": "application/json"},
                timeout=30.0,
            )
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "TMDbService":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def build_url(self, endpoint: str, params: Params | None = None) -> str:
        """Compose the request URL; api_key always comes first in the query."""
        query = [("api_key", self.api_key), *(params or [])]
        return str(httpx.URL(f"{BASE_URL}/{endpoint}", params=query))

    async def _request(
        self, endpoint: str, params: Params | None, shape: type[T]
    ) -> T:
        """Fetch ``endpoint`` through the cache and decode it into ``shape``."""
        url = self.build_url(endpoint, params)

        cached = self.cache.get(url)
        if cached is not None:
            logger.debug("Cache hit: {}", _masked(url))
            return self._decode(shape, cached, url)

        logger.debug("Cache miss: {}", _masked(url))
        client = await self._get_client()
        try:
            resp = await client.get(url)
        except httpx.TransportError as exc:
            raise InvalidResponseError(
                f"No response from TMDb for {endpoint}: {exc}"
            ) from exc

        if not 200 <= resp.status_code < 300:
            logger.warning(
                "TMDb returned HTTP {} for {}", resp.status_code, _masked(url)
            )
            raise HTTPStatusError(resp.status_code, _masked(url))

        # Cached before decoding: a body that fails to decode stays cached
        # and fails the same way on the next lookup.
        body = resp.content
        self.cache.set(url, body)
        return self._decode(shape, body, url)

    def _decode(self, shape: type[T], body: bytes, url: str) -> T:
        try:
            return decode_json(shape, body)
        except DecodeError as exc:
            logger.warning("Undecodable TMDb payload from {}: {}", _masked(url), exc)
            raise

    # Search

    async def search_movies(self, query: str, language: str = "en") -> list[Movie]:
        """Search movies by title."""
        resp = await self._request(
            "search/movie",
            [("query", query), ("language", language)],
            MovieResults,
        )
        return resp.results

    async def search_tv_shows(self, query: str, language: str = "en") -> list[TVShow]:
        """Search TV shows by name."""
        resp = await self._request(
            "search/tv",
            [("query", query), ("language", language)],
            TVShowResults,
        )
        return resp.results

    # Trending

    async def trending(
        self,
        media_type: MediaType,
        time_window: str = "week",
        language: str = "en",
        page: int = 1,
    ) -> list[Movie]:
        """Trending titles of either kind, always in the Movie shape."""
        if MediaType(media_type) is MediaType.TV:
            return await self.trending_tv_shows(time_window, language, page)
        return await self.trending_movies(time_window, language, page)

    async def trending_movies(
        self, time_window: str = "week", language: str = "en", page: int = 1
    ) -> list[Movie]:
        """Trending movies for the given time window (``day`` or ``week``)."""
        resp = await self._request(
            f"trending/movie/{time_window}",
            [("language", language), ("page", str(page))],
            MovieResults,
        )
        return resp.results

    async def trending_tv_shows(
        self, time_window: str = "week", language: str = "en", page: int = 1
    ) -> list[Movie]:
        """Trending TV shows projected to Movie."""
        resp = await self._request(
            f"trending/tv/{time_window}",
            [("language", language), ("page", str(page))],
            TVShowResults,
        )
        return [show.as_movie() for show in resp.results]

    # Details

    async def movie_details(self, movie_id: int, language: str = "en") -> MovieDetails:
        """Fetch a movie and its cast concurrently."""
        movie, credits = await asyncio.gather(
            self._request(f"movie/{movie_id}", [("language", language)], Movie),
            self._request(f"movie/{movie_id}/credits", None, CreditsResponse),
        )
        return MovieDetails(movie=movie, cast=credits.cast)

    async def tv_show_details(self, show_id: int, language: str = "en") -> TVShowDetails:
        """Fetch a TV show and its cast concurrently."""
        show, credits = await asyncio.gather(
            self._request(f"tv/{show_id}", [("language", language)], TVShow),
            self._request(f"tv/{show_id}/credits", None, CreditsResponse),
        )
        return TVShowDetails(show=show, cast=credits.cast)

    async def person_details(self, person_id: int, language: str = "en") -> Person:
        return await self._request(
            f"person/{person_id}", [("language", language)], Person
        )

    async def episodes(
        self, show_id: int, season: int, language: str = "en"
    ) -> list[Episode]:
        """Episodes of one season of a TV show."""
        resp = await self._request(
            f"tv/{show_id}/season/{season}",
            [("language", language)],
            SeasonResponse,
        )
        return resp.episodes

    async def number_of_seasons(self, show_id: int, language: str = "en") -> int:
        info = await self._request(
            f"tv/{show_id}", [("language", language)], SeasonCount
        )
        return info.number_of_seasons

    # Popular / top rated

    async def popular_movies(self, language: str = "en", page: int = 1) -> list[Movie]:
        resp = await self._request(
            "movie/popular",
            [("language", language), ("page", str(page))],
            MovieResults,
        )
        return resp.results

    async def top_rated_movies(self, language: str = "en", page: int = 1) -> list[Movie]:
        resp = await self._request(
            "movie/top_rated",
            [("language", language), ("page", str(page))],
            MovieResults,
        )
        return resp.results

    async def popular_tv_shows(self, language: str = "en", page: int = 1) -> list[TVShow]:
        resp = await self._request(
            "tv/popular",
            [("language", language), ("page", str(page))],
            TVShowResults,
        )
        return resp.results

    async def top_rated_tv_shows(
        self, language: str = "en", page: int = 1
    ) -> list[TVShow]:
        resp = await self._request(
            "tv/top_rated",
            [("language", language), ("page", str(page))],
            TVShowResults,
        )
        return resp.results

    # Discover

    def _provider_params(
        self, provider: WatchProvider, region: str, language: str, page: int
    ) -> Params:
        return [
            ("language", language),
            ("with_watch_providers", str(int(provider))),
            ("watch_region", region),
            ("sort_by", "popularity.desc"),
            ("page", str(page)),
        ]

    async def top_movies(
        self,
        provider: WatchProvider,
        region: str = "US",
        language: str = "en",
        page: int = 1,
    ) -> list[Movie]:
        """Most popular movies on a streaming provider."""
        resp = await self._request(
            "discover/movie",
            self._provider_params(provider, region, language, page),
            MovieResults,
        )
        return resp.results

    async def top_tv_shows(
        self,
        provider: WatchProvider,
        region: str = "US",
        language: str = "en",
        page: int = 1,
    ) -> list[TVShow]:
        """Most popular TV shows on a streaming provider."""
        resp = await self._request(
            "discover/tv",
            self._provider_params(provider, region, language, page),
            TVShowResults,
        )
        return resp.results

    async def discover_movies(
        self, genre: int | None = None, language: str = "en", page: int = 1
    ) -> list[Movie]:
        """Discover movies, optionally restricted to one genre."""
        params = [("language", language), ("page", str(page))]
        if genre is not None:
            params.append(("with_genres", str(int(genre))))
        resp = await self._request("discover/movie", params, MovieResults)
        return resp.results

    async def discover_tv_shows(
        self, genre: int | None = None, language: str = "en", page: int = 1
    ) -> list[TVShow]:
        """Discover TV shows, optionally restricted to one genre."""
        params = [("language", language), ("page", str(page))]
        if genre is not None:
            params.append(("with_genres", str(int(genre))))
        resp = await self._request("discover/tv", params, TVShowResults)
        return resp.results

    # Images

    def image_url(self, path: str, size: str = DEFAULT_IMAGE_SIZE) -> str:
        """Public URL of an image file path at the given size token."""
        return f"{IMAGE_BASE_URL}/{size}/{path.lstrip('/')}"

    async def movie_images(self, movie_id: int) -> MediaImages:
        resp = await self._request(f"movie/{movie_id}/images", None, ImagesResponse)
        return MediaImages(posters=resp.posters, backdrops=resp.backdrops)

    async def tv_show_images(self, show_id: int) -> MediaImages:
        resp = await self._request(f"tv/{show_id}/images", None, ImagesResponse)
        return MediaImages(posters=resp.posters, backdrops=resp.backdrops)

    async def person_images(self, person_id: int) -> list[ImageInfo]:
        resp = await self._request(
            f"person/{person_id}/images", None, PersonImagesResponse
        )
        return resp.profiles

    # Videos

    async def movie_videos(self, movie_id: int, language: str = "en") -> list[VideoInfo]:
        resp = await self._request(
            f"movie/{movie_id}/videos", [("language", language)], VideosResponse
        )
        return resp.results

    async def tv_show_videos(self, show_id: int, language: str = "en") -> list[VideoInfo]:
        resp = await self._request(
            f"tv/{show_id}/videos", [("language", language)], VideosResponse
        )
        return resp.results

    async def movie_trailer_url(self, movie_id: int, language: str = "en") -> str | None:
        """YouTube URL of the movie's first trailer, or None if it has none."""
        video = select_trailer(await self.movie_videos(movie_id, language))
        return trailer_url(video.key) if video else None

    async def tv_show_trailer_url(self, show_id: int, language: str = "en") -> str | None:
        """YouTube URL of the show's first trailer, or None if it has none."""
        video = select_trailer(await self.tv_show_videos(show_id, language))
        return trailer_url(video.key) if video else None

    # Streaming links

    def movie_streaming_url(self, tmdb_id: int) -> str:
        return f"{STREAMING_BASE_URL}/movie/{tmdb_id}"

    def show_streaming_url(self, tmdb_id: int, season: int, episode: int) -> str:
        return f"{STREAMING_BASE_URL}/tv/{tmdb_id}/{season}/{episode}"


def create_tmdb_service(api_key: str | None = None) -> TMDbService | None:
    """Build a TMDbService, or None when no API key can be found."""
    return TMDbService.create(api_key)
