"""Operating system backends."""

from trawl.backends.network import Network

__all__ = ["Network"]
