"""Shared fixtures for the Route Sentinel test suite."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from route_sentinel.data import APICallUsage, NewsArticle, PortImage, Usage
from route_sentinel.llm import Completion

ASSESSMENT_REPLY = {
    "verdict": "At Risk",
    "score": 62,
    "reason": "Red Sea disruption forces Cape diversions. Congestion builds in Europe.",
    "factors": ["Red Sea security", "Port congestion", "Fuel costs"],
    "shipping_line": "Maersk, for its weekly Asia-Europe loop.",
    "transit_time": "35-40 days",
    "transhipment": {"count": 1, "ports": ["Singapore"]},
    "route_overview": "Departs Shanghai via the Malacca Strait. Rounds the Cape to Rotterdam.",
    "news_used": True,
}


def make_completion(text: str, input_tokens: int = 100, output_tokens: int = 50) -> Completion:
    """Create a Completion as returned by ClaudeCompleter."""
    return Completion(
        text=text,
        usage=Usage(
            api_calls=[
                APICallUsage(
                    model="claude-haiku-4-5-20251001",
                    input_tokens=input_tokens,
                    output_tokens=output_tokens,
                )
            ]
        ),
    )


def assessment_completion(**overrides: object) -> Completion:
    """A well-formed assessment reply, optionally with fields replaced."""
    return make_completion(json.dumps({**ASSESSMENT_REPLY, **overrides}))


def make_http_response(data: object) -> MagicMock:
    """Create a mock httpx response whose json() returns *data*."""
    response = MagicMock()
    response.json.return_value = data
    response.raise_for_status = MagicMock()
    return response


@pytest.fixture
def news_articles() -> list[NewsArticle]:
    return [
        NewsArticle(
            title="Houthi attacks push carriers around the Cape",
            date="2026-10-17",
            url="https://example.com/cape",
            source="Lloyd's List",
        ),
        NewsArticle(
            title="Rotterdam terminal strike ends",
            date="2026-10-15",
            url="https://example.com/strike",
            source="Splash247",
        ),
    ]


@pytest.fixture
def shanghai_image() -> PortImage:
    return PortImage(
        url="https://upload.wikimedia.org/shanghai.jpg",
        credit_link="https://en.wikipedia.org/wiki/Port%20of%20Shanghai",
    )


@pytest.fixture
def mock_completer() -> MagicMock:
    """A ClaudeCompleter stand-in returning a well-formed assessment."""
    completer = MagicMock()
    completer.complete = AsyncMock(return_value=assessment_completion())
    return completer
