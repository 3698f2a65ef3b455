from route_sentinel.data.models import (
    WIKIPEDIA_CREDIT,
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

__all__ = [
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
    "WIKIPEDIA_CREDIT",
]
