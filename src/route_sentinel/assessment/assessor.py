"""Route risk assessment: news and port imagery enrichment plus one Claude verdict."""

import logging
import time

from pydantic import ValidationError

from route_sentinel.concurrency import gather_settled
from route_sentinel.data import (
    Assessment,
    AssessmentResponse,
    NewsArticle,
    PortImageEntry,
    PortImages,
    PortPair,
    Usage,
)
from route_sentinel.errors import InvalidRequestError, ReplyParseError
from route_sentinel.images.base import PortImageFinder
from route_sentinel.llm import ClaudeCompleter, parse_json_object
from route_sentinel.news.base import NewsSearcher
from route_sentinel.ports.base import PortExtractor
from route_sentinel.prompts import ASSESSMENT_PROMPT, PromptTemplate
from route_sentinel.run_logger import RunLogger, RunRecord

logger = logging.getLogger(__name__)

NO_NEWS_HEADLINES = "No recent news found."


def format_headlines(articles: list[NewsArticle]) -> str:
    """Render articles as a bullet list, or the no-news sentinel."""
    if not articles:
        return NO_NEWS_HEADLINES
    return "\n".join(f"- {a.title} ({a.date})" for a in articles)


def parse_assessment(raw: str) -> Assessment:
    """Parse and validate the assessment model's reply.

    Raises:
        ReplyParseError: If the reply is not JSON or lacks required fields.
    """
    data = parse_json_object(raw)
    try:
        return Assessment.model_validate(data)
    except ValidationError as e:
        raise ReplyParseError(f"Assessment reply has the wrong shape: {e}") from e


class RouteAssessor:
    """Assess the risk of a shipping route.

    Flow:
    1. News lookup and port name extraction run in parallel
    2. If ports were identified, image lookups for both run in parallel
    3. One Claude call turns the route and headlines into a verdict
    4. The verdict is merged with the news and images

    Failures in steps 1 and 2 degrade to empty news or null images. Failures
    in step 3 propagate to the caller.

    Args:
        completer: Shared Claude client.
        news_searcher: News lookup component.
        port_extractor: Port name extraction component.
        image_finder: Port image lookup component.
        max_tokens: Output bound for the assessment call.
        prompt: Template with ``$route`` and ``$headlines`` placeholders.
        run_logger: Optional RunLogger for per-run stage records.
    """

    def __init__(
        self,
        completer: ClaudeCompleter,
        news_searcher: NewsSearcher,
        port_extractor: PortExtractor,
        image_finder: PortImageFinder,
        *,
        max_tokens: int = 1024,
        prompt: PromptTemplate = ASSESSMENT_PROMPT,
        run_logger: RunLogger | None = None,
    ) -> None:
        self._completer = completer
        self._news_searcher = news_searcher
        self._port_extractor = port_extractor
        self._image_finder = image_finder
        self._max_tokens = max_tokens
        self._prompt = prompt
        self._run_logger = run_logger

    async def assess(self, route: str | None) -> AssessmentResponse:
        """Assess *route* and return the merged response.

        Raises:
            InvalidRequestError: If the route is missing or blank.
            ReplyParseError: If the assessment reply cannot be parsed.
        """
        if not route or not route.strip():
            raise InvalidRequestError("No route provided")

        record = self._run_logger.start_run(route) if self._run_logger else None
        total_usage = Usage()
        try:
            response = await self._assess(route, total_usage, record)
        except Exception as e:
            self._finish_run(record, total_usage, error=e)
            raise

        self._finish_run(record, total_usage)
        logger.info(
            "Assessed %r as %s (%d/100); %d input tokens, %d output tokens",
            route,
            response.assessment.verdict,
            response.assessment.score,
            total_usage.input_tokens,
            total_usage.output_tokens,
        )
        return response

    async def _assess(
        self, route: str, total_usage: Usage, record: RunRecord | None
    ) -> AssessmentResponse:
        # Step 1: news and port names in parallel
        t0 = time.monotonic()
        news_result, ports_result = await gather_settled(
            self._news_searcher.search(route),
            self._port_extractor.extract(route),
        )
        enrich_duration = time.monotonic() - t0

        if not news_result.ok:
            logger.warning(f"Error in news lookup: {news_result.error}")
        news: list[NewsArticle] = news_result.unwrap_or([])

        if not ports_result.ok:
            logger.warning(f"Error in port extraction: {ports_result.error}")
        ports, extraction_usage = ports_result.unwrap_or((None, Usage()))
        total_usage += extraction_usage

        self._log_stage(
            record, "news_lookup", self._news_searcher, route, news, None, enrich_duration
        )
        self._log_stage(
            record,
            "port_extraction",
            self._port_extractor,
            route,
            ports,
            extraction_usage,
            enrich_duration,
        )

        # Step 2: port images in parallel
        port_images = PortImages()
        if ports is not None:
            t0 = time.monotonic()
            port_images = await self._find_port_images(ports)
            self._log_stage(
                record,
                "port_images",
                self._image_finder,
                ports,
                port_images,
                None,
                time.monotonic() - t0,
            )

        # Step 3: the verdict
        headlines = format_headlines(news)
        content = self._prompt.render(route=route, headlines=headlines)
        t0 = time.monotonic()
        completion = await self._completer.complete(
            [{"role": "user", "content": content}],
            max_tokens=self._max_tokens,
        )
        total_usage += completion.usage
        assessment = parse_assessment(completion.text)
        self._log_stage(
            record,
            "assessment",
            self._completer,
            content,
            assessment,
            completion.usage,
            time.monotonic() - t0,
        )

        # Step 4: merge
        return AssessmentResponse(
            assessment=assessment,
            headlines=headlines,
            news_articles=news,
            port_images=port_images,
            usage=total_usage,
        )

    async def _find_port_images(self, ports: PortPair) -> PortImages:
        image1, image2 = await gather_settled(
            self._image_finder.find(ports.port1),
            self._image_finder.find(ports.port2),
        )
        for name, result in ((ports.port1, image1), (ports.port2, image2)):
            if not result.ok:
                logger.warning(f"Error in image lookup for {name}: {result.error}")
        return PortImages(
            port1=PortImageEntry(name=ports.port1, image=image1.unwrap_or(None)),
            port2=PortImageEntry(name=ports.port2, image=image2.unwrap_or(None)),
        )

    def _finish_run(
        self,
        record: RunRecord | None,
        usage: Usage,
        *,
        error: BaseException | None = None,
    ) -> None:
        if not self._run_logger:
            return
        try:
            self._run_logger.finish_run(record, usage, error=error)
        except OSError:
            logger.warning("Failed to write run log", exc_info=True)

    def _log_stage(
        self,
        record: RunRecord | None,
        stage: str,
        component: object,
        input_data: object,
        output_data: object,
        usage: Usage | None,
        duration: float,
    ) -> None:
        if self._run_logger:
            self._run_logger.log_stage(
                record,
                stage=stage,
                component=type(component).__name__,
                input_data=input_data,
                output_data=output_data,
                usage=usage,
                duration_seconds=duration,
            )
