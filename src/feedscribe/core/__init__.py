"""Core configuration and exceptions."""

from feedscribe.core.config import RenderOptions, Settings, get_settings
from feedscribe.core.exceptions import (
    ConfigurationError,
    FeedscribeError,
    RenderError,
    UnknownFormatError,
)

__all__ = [
    "ConfigurationError",
    "FeedscribeError",
    "RenderError",
    "RenderOptions",
    "Settings",
    "UnknownFormatError",
    "get_settings",
]
