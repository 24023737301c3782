"""Paginated movie categories."""

import uuid
from collections.abc import Awaitable, Callable

from attrs import define, field

from .media import Movie

PageLoader = Callable[[int], Awaitable[list[Movie]]]


@define
class MovieCategory:
    """A named, paginated list of movies backed by a page loader.

    ``page`` is 0 until the first successful load. A failed load leaves
    both ``page`` and ``items`` untouched, so retrying ``load_next`` asks
    for the same page again.
    """

    name: str
    loader: PageLoader = field(repr=False)
    id: uuid.UUID = field(factory=uuid.uuid4)
    page: int = 0
    items: list[Movie] = field(factory=list)

    async def reload(self) -> list[Movie]:
        """Load the first page, replacing any accumulated items."""
        first = await self.loader(1)
        self.page = 1
        self.items = list(first)
        return list(first)

    async def load_next(self) -> list[Movie]:
        """Load the page after the current one and append it.

        Returns only the newly loaded movies.
        """
        next_page = self.page + 1
        more = await self.loader(next_page)
        self.page = next_page
        self.items.extend(more)
        return more
