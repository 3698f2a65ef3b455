from typing import Protocol

from route_sentinel.data import NewsArticle


class NewsSearcher(Protocol):
    """Interface for looking up recent news about a shipping route."""

    async def search(self, route: str) -> list[NewsArticle]:
        """Return recent articles about *route*, most recent first.

        Implementations never raise: any failure yields an empty list.
        """
        ...
