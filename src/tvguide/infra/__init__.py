"""
Infrastructure layer for tvguide.

Settings, logging configuration and the exception hierarchy.
"""

from .exceptions import TvGuideError
from .settings import settings

__all__ = ["TvGuideError", "settings"]
