"""
graphmongo backend
GraphQL API over a MongoDB connection established once at startup
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
