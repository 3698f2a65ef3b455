from route_sentinel.assessment.assessor import (
    NO_NEWS_HEADLINES,
    RouteAssessor,
    format_headlines,
    parse_assessment,
)

__all__ = ["NO_NEWS_HEADLINES", "RouteAssessor", "format_headlines", "parse_assessment"]
