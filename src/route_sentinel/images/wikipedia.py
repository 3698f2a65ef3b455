"""Port photos from Wikipedia page thumbnails."""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from route_sentinel.data import PortImage

logger = logging.getLogger(__name__)

WIKIPEDIA_API_URL = "https://en.wikipedia.org/w/api.php"
WIKIPEDIA_PAGE_URL = "https://en.wikipedia.org/wiki/"
USER_AGENT = "route-sentinel/0.1 (shipping route risk assessment)"


class WikipediaImageFinder:
    """Find a port photo by searching Wikipedia and taking a page thumbnail.

    Vector thumbnails (usually maps or logos) are skipped in favour of the
    next search hit.

    Args:
        http_client: Shared client. If *None*, a short-lived client is
            opened per lookup.
        thumbnail_width: Requested thumbnail width in pixels.
        max_candidates: Number of search hits to inspect.
        timeout: Timeout in seconds for short-lived clients.
    """

    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient | None = None,
        thumbnail_width: int = 600,
        max_candidates: int = 3,
        timeout: float = 30.0,
    ) -> None:
        self._http_client = http_client
        self._thumbnail_width = thumbnail_width
        self._max_candidates = max_candidates
        self._timeout = timeout

    async def find(self, port_name: str) -> PortImage | None:
        try:
            if self._http_client is not None:
                return await self._find(self._http_client, port_name)
            async with httpx.AsyncClient(
                timeout=self._timeout, headers={"User-Agent": USER_AGENT}
            ) as client:
                return await self._find(client, port_name)
        except (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Wikipedia image fetch error for %r: %s", port_name, e)
            return None

    async def _find(self, client: httpx.AsyncClient, port_name: str) -> PortImage | None:
        search_data = await self._query(
            client,
            {
                "action": "query",
                "list": "search",
                "srsearch": f"{port_name} port harbor",
                "format": "json",
                "origin": "*",
            },
        )
        hits = search_data["query"]["search"]
        if not hits:
            return None

        for hit in hits[: self._max_candidates]:
            title = hit["title"]
            image_data = await self._query(
                client,
                {
                    "action": "query",
                    "titles": title,
                    "prop": "pageimages",
                    "format": "json",
                    "pithumbsize": self._thumbnail_width,
                    "origin": "*",
                },
            )
            pages = image_data["query"]["pages"]
            page = next(iter(pages.values()), None)
            thumbnail = page.get("thumbnail") if page else None
            if not thumbnail:
                continue
            src = thumbnail["source"]
            if ".svg" in src.lower():
                continue
            return PortImage(url=src, credit_link=WIKIPEDIA_PAGE_URL + quote(title, safe="!'()*"))

        return None

    async def _query(self, client: httpx.AsyncClient, params: dict[str, str | int]) -> Any:
        response = await client.get(WIKIPEDIA_API_URL, params=params)
        response.raise_for_status()
        return response.json()
