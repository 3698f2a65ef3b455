from route_sentinel.images.base import PortImageFinder
from route_sentinel.images.wikipedia import WikipediaImageFinder

__all__ = ["PortImageFinder", "WikipediaImageFinder"]
