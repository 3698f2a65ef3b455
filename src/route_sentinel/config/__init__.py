"""Configuration module for Route Sentinel."""

from route_sentinel.config.factory import Services, create_http_client, create_services
from route_sentinel.config.loader import get_default_config_path, load_config
from route_sentinel.config.models import (
    HTTPConfig,
    LLMConfig,
    LoggingConfig,
    NewsAPIConfig,
    RouteSentinelConfig,
    ServerConfig,
    WikipediaImagesConfig,
)

__all__ = [
    "HTTPConfig",
    "LLMConfig",
    "LoggingConfig",
    "NewsAPIConfig",
    "RouteSentinelConfig",
    "ServerConfig",
    "Services",
    "WikipediaImagesConfig",
    "create_http_client",
    "create_services",
    "get_default_config_path",
    "load_config",
]
