from route_sentinel.ports.base import PortExtractor
from route_sentinel.ports.claude import ClaudePortExtractor

__all__ = ["ClaudePortExtractor", "PortExtractor"]
