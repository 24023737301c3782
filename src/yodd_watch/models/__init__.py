"""Data models for yodd-watch."""

from .category import MovieCategory
from .media import (
    Episode,
    Genre,
    GenreInfo,
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

__all__ = [
    "Episode",
    "Genre",
    "GenreInfo",
    "ImageInfo",
    "MediaImages",
    "MediaType",
    "Movie",
    "MovieCategory",
    "MovieDetails",
    "Person",
    "TVShow",
    "TVShowDetails",
    "VideoInfo",
    "WatchProvider",
]
