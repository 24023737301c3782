"""Client library for TMDb movie and TV metadata plus local viewing preferences."""

from .errors import DecodeError, HTTPStatusError, InvalidResponseError, TMDbError
from .services.tmdb import TMDbService, create_tmdb_service
from .services.preferences import UserPreferences

__all__ = [
    "DecodeError",
    "HTTPStatusError",
    "InvalidResponseError",
    "TMDbError",
    "TMDbService",
    "UserPreferences",
    "create_tmdb_service",
]
