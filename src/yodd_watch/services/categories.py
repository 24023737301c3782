"""Default movie and TV categories built on TMDbService."""

import asyncio

from loguru import logger

from ..models.category import MovieCategory
from ..models.media import Genre, WatchProvider
from .tmdb import TMDbService


def default_movie_categories(
    service: TMDbService, region: str = "US", language: str = "en"
) -> list[MovieCategory]:
    """Common movie rows: trending, top rated, per provider and per genre."""

    async def trending(page: int):
        return await service.trending_movies(language=language, page=page)

    async def top_rated(page: int):
        return await service.top_rated_movies(language=language, page=page)

    def on_provider(provider: WatchProvider):
        async def load(page: int):
            return await service.top_movies(
                provider, region=region, language=language, page=page
            )

        return load

    def in_genre(genre: Genre):
        async def load(page: int):
            return await service.discover_movies(
                genre=genre, language=language, page=page
            )

        return load

    return [
        MovieCategory("Trending", trending),
        MovieCategory("Top Rated", top_rated),
        MovieCategory("Top on Netflix", on_provider(WatchProvider.NETFLIX)),
        MovieCategory("Top on Prime Video", on_provider(WatchProvider.PRIME_VIDEO)),
        MovieCategory("Action", in_genre(Genre.ACTION)),
        MovieCategory("Comedy", in_genre(Genre.COMEDY)),
    ]


def default_tv_show_categories(
    service: TMDbService, region: str = "US", language: str = "en"
) -> list[MovieCategory]:
    """Common TV rows, with shows projected to the Movie shape."""

    async def trending(page: int):
        return await service.trending_tv_shows(language=language, page=page)

    async def top_rated(page: int):
        shows = await service.top_rated_tv_shows(language=language, page=page)
        return [show.as_movie() for show in shows]

    async def popular(page: int):
        shows = await service.popular_tv_shows(language=language, page=page)
        return [show.as_movie() for show in shows]

    def on_provider(provider: WatchProvider):
        async def load(page: int):
            shows = await service.top_tv_shows(
                provider, region=region, language=language, page=page
            )
            return [show.as_movie() for show in shows]

        return load

    return [
        MovieCategory("Trending", trending),
        MovieCategory("Top Rated", top_rated),
        MovieCategory("Popular", popular),
        MovieCategory("Top on Netflix", on_provider(WatchProvider.NETFLIX)),
        MovieCategory("Top on Prime Video", on_provider(WatchProvider.PRIME_VIDEO)),
    ]


async def preload_categories(categories: list[MovieCategory]) -> list[MovieCategory]:
    """Load the first page of every category concurrently."""
    await asyncio.gather(*(category.reload() for category in categories))
    logger.debug("Preloaded {} categories", len(categories))
    return categories


async def load_default_movie_categories(
    service: TMDbService,
    region: str = "US",
    language: str = "en",
    preload: bool = True,
) -> list[MovieCategory]:
    categories = default_movie_categories(service, region, language)
    if preload:
        await preload_categories(categories)
    return categories


async def load_default_tv_show_categories(
    service: TMDbService,
    region: str = "US",
    language: str = "en",
    preload: bool = True,
) -> list[MovieCategory]:
    categories = default_tv_show_categories(service, region, language)
    if preload:
        await preload_categories(categories)
    return categories
