from typing import Protocol

from route_sentinel.data import PortPair, Usage


class PortExtractor(Protocol):
    """Interface for naming the two endpoint ports of a route."""

    async def extract(self, route: str) -> tuple[PortPair | None, Usage]:
        """Identify the origin and destination ports of *route*.

        Returns:
            Tuple of (ports, usage). Ports is None when they could not be
            identified; implementations never raise.
        """
        ...
