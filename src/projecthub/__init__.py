"""
projecthub backend
GraphQL API for projects and the clients that own them
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
