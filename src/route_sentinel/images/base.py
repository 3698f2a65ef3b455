from typing import Protocol

from route_sentinel.data import PortImage


class PortImageFinder(Protocol):
    """Interface for finding a representative photo of a port."""

    async def find(self, port_name: str) -> PortImage | None:
        """Return a raster image of *port_name*, or None if none is suitable.

        Implementations never raise: any failure yields None.
        """
        ...
