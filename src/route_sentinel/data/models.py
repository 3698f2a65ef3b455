"""Core data models for Route Sentinel."""

from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

WIKIPEDIA_CREDIT = "Wikipedia"


@dataclass(frozen=True)
class NewsArticle:
    """A recent news article about a shipping route."""

    title: str
    date: str
    url: str
    source: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "date": self.date, "url": self.url, "source": self.source}


@dataclass(frozen=True)
class PortPair:
    """The two endpoint ports named by a route."""

    port1: str
    port2: str


@dataclass(frozen=True)
class PortImage:
    """A raster port photo with attribution."""

    url: str
    credit_link: str
    credit: str = WIKIPEDIA_CREDIT

    def to_dict(self) -> dict[str, str]:
        return {"url": self.url, "credit": self.credit, "creditLink": self.credit_link}


@dataclass(frozen=True)
class PortImageEntry:
    """A port name paired with its image, if one was found."""

    name: str
    image: PortImage | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "image": self.image.to_dict() if self.image else None}


@dataclass(frozen=True)
class PortImages:
    """Image slots for both route endpoints.

    Both slots are ``None`` when the port names could not be extracted.
    """

    port1: PortImageEntry | None = None
    port2: PortImageEntry | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "port1": self.port1.to_dict() if self.port1 else None,
            "port2": self.port2.to_dict() if self.port2 else None,
        }


@dataclass(frozen=True)
class ChatTurn:
    """A single turn of a follow-up conversation."""

    role: Literal["user", "assistant"]
    content: str

    def to_message(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


class Transhipment(BaseModel):
    """Intermediate ports where cargo changes vessel."""

    count: int
    ports: list[str] = Field(default_factory=list)


class Assessment(BaseModel):
    """Structured verdict produced by the assessment model.

    The shape is a contract with the model: a reply that does not validate
    against it is treated as unparseable. ``factors`` is expected to hold
    three entries but the count is not enforced.
    """

    verdict: Literal["Safe", "At Risk"]
    score: int = Field(ge=0, le=100)
    reason: str
    factors: list[str]
    shipping_line: str
    transit_time: str
    transhipment: Transhipment
    route_overview: str
    news_used: bool

    model_config = ConfigDict(frozen=True)


class TranshipmentContext(BaseModel):
    """Transhipment details as echoed back by a chat client."""

    count: int | None = None
    ports: list[str] = Field(default_factory=list)


class AssessmentContext(BaseModel):
    """A previously returned assessment, as echoed back by a chat client.

    Only the core verdict fields are expected. Everything else renders as
    ``N/A`` in the chat priming turn when absent.
    """

    verdict: str = ""
    score: int | float | str = ""
    reason: str = ""
    factors: list[str] = Field(default_factory=list)
    shipping_line: str | None = None
    transit_time: str | None = None
    transhipment: TranshipmentContext | None = None
    route_overview: str | None = None
    headlines: str | None = None

    model_config = ConfigDict(extra="ignore")


@dataclass(frozen=True)
class APICallUsage:
    """Usage from a single LLM call."""

    model: str
    input_tokens: int = 0
    output_tokens: int = 0
    cache_creation_input_tokens: int = 0
    cache_read_input_tokens: int = 0


@dataclass
class Usage:
    """Accumulated LLM usage across the components of one request."""

    api_calls: list[APICallUsage] = field(default_factory=list)

    @property
    def input_tokens(self) -> int:
        return sum(c.input_tokens for c in self.api_calls)

    @property
    def output_tokens(self) -> int:
        return sum(c.output_tokens for c in self.api_calls)

    def __add__(self, other: "Usage") -> "Usage":
        return Usage(api_calls=self.api_calls + other.api_calls)

    def __iadd__(self, other: "Usage") -> "Usage":
        self.api_calls.extend(other.api_calls)
        return self


@dataclass(frozen=True)
class AssessmentResponse:
    """An assessment merged with the news and imagery it was built from."""

    assessment: Assessment
    headlines: str
    news_articles: list[NewsArticle] = field(default_factory=list)
    port_images: PortImages = field(default_factory=PortImages)
    usage: Usage = field(default_factory=Usage, compare=False)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire shape returned by ``POST /assess``."""
        payload = self.assessment.model_dump()
        payload["headlines"] = self.headlines
        payload["newsArticles"] = [a.to_dict() for a in self.news_articles]
        payload["portImages"] = self.port_images.to_dict()
        return payload
