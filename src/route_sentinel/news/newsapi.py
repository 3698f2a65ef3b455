"""News lookup backed by the NewsAPI ``everything`` endpoint."""

import logging
import os
import re
from typing import Any

import httpx

from route_sentinel.data import NewsArticle

logger = logging.getLogger(__name__)

NEWSAPI_URL = "https://newsapi.org/v2/everything"
MAX_ARTICLES = 5

_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


class NewsAPISearcher:
    """Search NewsAPI for recent coverage of a shipping route.

    Args:
        api_key: NewsAPI key (defaults to NEWS_API_KEY env var).
        http_client: Shared client. If *None*, a short-lived client is
            opened per search.
        page_size: Articles to request (capped at 5).
        language: Language filter for results.
        timeout: Timeout in seconds for short-lived clients.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        page_size: int = MAX_ARTICLES,
        language: str = "en",
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key or os.environ.get("NEWS_API_KEY")
        self._http_client = http_client
        self._page_size = max(1, min(page_size, MAX_ARTICLES))
        self._language = language
        self._timeout = timeout

    async def search(self, route: str) -> list[NewsArticle]:
        """Return up to five recent articles about *route*.

        Failures of any kind degrade to an empty list.
        """
        if not self._api_key:
            logger.warning("NEWS_API_KEY is not set, skipping news lookup")
            return []

        params: dict[str, str | int] = {
            "q": f"{route} shipping route",
            "sortBy": "publishedAt",
            "pageSize": self._page_size,
            "language": self._language,
            "apiKey": self._api_key,
        }
        try:
            if self._http_client is not None:
                data = await self._fetch(self._http_client, params)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    data = await self._fetch(client, params)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("News fetch error for %r: %s", route, e)
            return []

        items = data.get("articles") if isinstance(data, dict) else None
        if not items:
            return []

        articles: list[NewsArticle] = []
        for item in items:
            article = _parse_article(item)
            if article is not None:
                articles.append(article)
        return articles[: self._page_size]

    async def _fetch(self, client: httpx.AsyncClient, params: dict[str, str | int]) -> Any:
        response = await client.get(NEWSAPI_URL, params=params)
        response.raise_for_status()
        return response.json()


def _parse_article(item: Any) -> NewsArticle | None:
    """Build a NewsArticle from one NewsAPI result, or None if unusable."""
    if not isinstance(item, dict):
        return None
    published = item.get("publishedAt") or ""
    date = published[:10] if isinstance(published, str) else ""
    if not _DATE_RE.match(date):
        logger.debug("Skipping article with unusable publishedAt: %r", published)
        return None
    source = item.get("source") or {}
    return NewsArticle(
        title=item.get("title") or "",
        date=date,
        url=item.get("url") or "",
        source=(source.get("name") if isinstance(source, dict) else None) or "Unknown",
    )
