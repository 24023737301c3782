"""Service layer: the TMDb client and the local preference store."""

from .categories import default_movie_categories, default_tv_show_categories
from .preferences import UserPreferences
from .tmdb import TMDbService, create_tmdb_service

__all__ = [
    "TMDbService",
    "UserPreferences",
    "create_tmdb_service",
    "default_movie_categories",
    "default_tv_show_categories",
]
