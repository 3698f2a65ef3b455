"""Route Sentinel: shipping route risk assessment with live news and port imagery."""

from route_sentinel.api import create_app
from route_sentinel.assessment import RouteAssessor, format_headlines, parse_assessment
from route_sentinel.chat import FollowUpChat, build_priming_turns
from route_sentinel.concurrency import Settled, gather_settled
from route_sentinel.config import RouteSentinelConfig, create_services, load_config
from route_sentinel.data import (
    APICallUsage,
    Assessment,
    AssessmentContext,
    AssessmentResponse,
    ChatTurn,
    NewsArticle,
    PortImage,
    PortImageEntry,
    PortImages,
    PortPair,
    Transhipment,
    TranshipmentContext,
    Usage,
)
from route_sentinel.errors import InvalidRequestError, ReplyParseError, RouteSentinelError
from route_sentinel.images import PortImageFinder, WikipediaImageFinder
from route_sentinel.llm import ClaudeCompleter, Completion, parse_json_object, strip_code_fences
from route_sentinel.news import NewsAPISearcher, NewsSearcher
from route_sentinel.ports import ClaudePortExtractor, PortExtractor
from route_sentinel.prompts import PromptTemplate
from route_sentinel.run_logger import RunLogger

__all__ = [
    # Models
    "APICallUsage",
    "Assessment",
    "AssessmentContext",
    "AssessmentResponse",
    "ChatTurn",
    "NewsArticle",
    "PortImage",
    "PortImageEntry",
    "PortImages",
    "PortPair",
    "Transhipment",
    "TranshipmentContext",
    "Usage",
    # Errors
    "InvalidRequestError",
    "ReplyParseError",
    "RouteSentinelError",
    # Protocols
    "NewsSearcher",
    "PortExtractor",
    "PortImageFinder",
    # Components
    "ClaudeCompleter",
    "ClaudePortExtractor",
    "Completion",
    "FollowUpChat",
    "NewsAPISearcher",
    "RouteAssessor",
    "WikipediaImageFinder",
    # Functions
    "build_priming_turns",
    "format_headlines",
    "gather_settled",
    "parse_assessment",
    "parse_json_object",
    "strip_code_fences",
    "Settled",
    "PromptTemplate",
    # Logging
    "RunLogger",
    # Config and API
    "RouteSentinelConfig",
    "create_app",
    "create_services",
    "load_config",
]
