"""Pydantic configuration models for Route Sentinel components."""

from typing import Literal

from pydantic import BaseModel, Field

from route_sentinel.llm.claude import DEFAULT_MODEL

# ============================================================
# LLM Config
# ============================================================


class LLMConfig(BaseModel):
    """Configuration for the shared Claude client."""

    model: str = DEFAULT_MODEL
    extraction_max_tokens: int = 100
    assessment_max_tokens: int = 1024
    chat_max_tokens: int = 1024

    model_config = {"frozen": True}


# ============================================================
# Enrichment Configs
# ============================================================


class NewsAPIConfig(BaseModel):
    """Configuration for NewsAPISearcher."""

    type: Literal["newsapi"] = "newsapi"
    page_size: int = Field(default=5, ge=1, le=5)
    language: str = "en"

    model_config = {"frozen": True}


class WikipediaImagesConfig(BaseModel):
    """Configuration for WikipediaImageFinder."""

    type: Literal["wikipedia"] = "wikipedia"
    thumbnail_width: int = 600
    max_candidates: int = Field(default=3, ge=1)

    model_config = {"frozen": True}


class HTTPConfig(BaseModel):
    """Configuration for the shared outbound HTTP client."""

    timeout_seconds: float = 30.0

    model_config = {"frozen": True}


# ============================================================
# Server and Logging Configs
# ============================================================


class ServerConfig(BaseModel):
    """Where the HTTP API listens."""

    host: str = "127.0.0.1"
    port: int = 3000

    model_config = {"frozen": True}


class LoggingConfig(BaseModel):
    """Log level and optional per-run JSON records."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    run_log: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class RouteSentinelConfig(BaseModel):
    """Root configuration for Route Sentinel."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    news: NewsAPIConfig = Field(default_factory=NewsAPIConfig)
    images: WikipediaImagesConfig = Field(default_factory=WikipediaImagesConfig)
    http: HTTPConfig = Field(default_factory=HTTPConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
