"""Factory functions to create components from configuration."""

from dataclasses import dataclass
from pathlib import Path

import httpx

from route_sentinel.assessment import RouteAssessor
from route_sentinel.chat import FollowUpChat
from route_sentinel.config.models import (
    HTTPConfig,
    LLMConfig,
    NewsAPIConfig,
    RouteSentinelConfig,
    WikipediaImagesConfig,
)
from route_sentinel.images import WikipediaImageFinder
from route_sentinel.images.wikipedia import USER_AGENT
from route_sentinel.llm import ClaudeCompleter
from route_sentinel.news import NewsAPISearcher
from route_sentinel.ports import ClaudePortExtractor
from route_sentinel.run_logger import RunLogger


@dataclass(frozen=True)
class Services:
    """Everything the HTTP API and CLI need, wired together."""

    assessor: RouteAssessor
    chat: FollowUpChat
    run_logger: RunLogger | None = None


def create_http_client(config: HTTPConfig) -> httpx.AsyncClient:
    """Create the outbound HTTP client shared by the enrichment lookups."""
    return httpx.AsyncClient(
        timeout=config.timeout_seconds,
        headers={"User-Agent": USER_AGENT},
    )


def create_completer(config: LLMConfig) -> ClaudeCompleter:
    """Create the shared Claude client from config."""
    return ClaudeCompleter(model=config.model)


def create_news_searcher(
    config: NewsAPIConfig,
    http_client: httpx.AsyncClient | None = None,
    *,
    timeout: float = 30.0,
) -> NewsAPISearcher:
    """Create a news searcher from config."""
    return NewsAPISearcher(
        http_client=http_client,
        page_size=config.page_size,
        language=config.language,
        timeout=timeout,
    )


def create_image_finder(
    config: WikipediaImagesConfig,
    http_client: httpx.AsyncClient | None = None,
    *,
    timeout: float = 30.0,
) -> WikipediaImageFinder:
    """Create a port image finder from config."""
    return WikipediaImageFinder(
        http_client=http_client,
        thumbnail_width=config.thumbnail_width,
        max_candidates=config.max_candidates,
        timeout=timeout,
    )


def create_port_extractor(config: LLMConfig, completer: ClaudeCompleter) -> ClaudePortExtractor:
    """Create a port name extractor sharing *completer*."""
    return ClaudePortExtractor(completer, max_tokens=config.extraction_max_tokens)


def create_assessor(
    config: RouteSentinelConfig,
    completer: ClaudeCompleter,
    http_client: httpx.AsyncClient | None = None,
    run_logger: RunLogger | None = None,
) -> RouteAssessor:
    """Create the route assessor and its enrichment components."""
    timeout = config.http.timeout_seconds
    return RouteAssessor(
        completer,
        news_searcher=create_news_searcher(config.news, http_client, timeout=timeout),
        port_extractor=create_port_extractor(config.llm, completer),
        image_finder=create_image_finder(config.images, http_client, timeout=timeout),
        max_tokens=config.llm.assessment_max_tokens,
        run_logger=run_logger,
    )


def create_chat(config: LLMConfig, completer: ClaudeCompleter) -> FollowUpChat:
    """Create the follow-up chat sharing *completer*."""
    return FollowUpChat(completer, max_tokens=config.chat_max_tokens)


def create_services(
    config: RouteSentinelConfig,
    *,
    http_client: httpx.AsyncClient | None = None,
    completer: ClaudeCompleter | None = None,
    run_log_override: bool | None = None,
) -> Services:
    """Create all services from root config.

    Args:
        config: Root configuration.
        http_client: Shared outbound HTTP client. If None, lookups open
            their own short-lived clients.
        completer: Shared Claude client. Created from config if None.
        run_log_override: Override the config's logging.run_log setting.

    Returns:
        Wired services. run_logger is None if run logging is disabled.
    """
    run_log = run_log_override if run_log_override is not None else config.logging.run_log
    run_logger: RunLogger | None = None
    if run_log:
        run_logger = RunLogger(log_dir=Path(config.logging.log_dir), enabled=True)

    completer = completer or create_completer(config.llm)
    return Services(
        assessor=create_assessor(config, completer, http_client, run_logger),
        chat=create_chat(config.llm, completer),
        run_logger=run_logger,
    )
