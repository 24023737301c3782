"""Errors raised by the TMDb request pipeline."""


class TMDbError(Exception):
    """Base class for TMDb client failures."""


class InvalidResponseError(TMDbError):
    """The transport did not produce a usable HTTP response."""


class HTTPStatusError(TMDbError):
    """The API answered with a status outside the 2xx range."""

    def __init__(self, status_code: int, url: str | None = None) -> None:
        self.status_code = status_code
        self.url = url
        message = f"TMDb request failed with HTTP {status_code}"
        if url:
            message += f" ({url})"
        super().__init__(message)


class DecodeError(TMDbError):
    """A payload could not be decoded into the requested record type."""

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"Cannot decode {target}: {reason}")
