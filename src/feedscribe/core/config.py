"""feedscribe configuration.

Two layers:

- `RenderOptions` is a plain model handed to the emitters. Its defaults are
  the built-in values, so rendering never looks at the environment.
- `Settings` loads the same knobs (plus logging) from environment variables
  with the FEEDSCRIBE_ prefix. Only the command line reads it.

Example:
    >>> from feedscribe.core.config import get_settings
    >>> settings = get_settings(log_level="DEBUG")
    >>> settings.log_level
    'DEBUG'
    >>> settings.render_options().json_indent
    4
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from feedscribe.core.exceptions import ConfigurationError

DEFAULT_GENERATOR = "feedscribe for Python"
DEFAULT_DOCS_URL = "http://blogs.law.harvard.edu/tech/rss"


class RenderOptions(BaseModel):
    """Knobs the emitters and the document renderer read.

    Example:
        >>> from feedscribe.core.config import RenderOptions
        >>> opts = RenderOptions()
        >>> opts.xml_indent
        '    '
        >>> RenderOptions(generator="my-site").generator
        'my-site'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    generator: str = Field(default=DEFAULT_GENERATOR, description="Default generator string")
    docs_url: str = Field(default=DEFAULT_DOCS_URL, description="RSS <docs> URL")
    xml_indent: str = Field(default="    ", description="Indent unit for XML output")
    json_indent: int = Field(default=4, ge=0, description="Indent width for JSON output")


class Settings(BaseSettings):
    """Application settings.

    Loads from environment variables with FEEDSCRIBE_ prefix.

    Example:
        >>> from feedscribe.core.config import Settings
        >>> s = Settings(generator="example.org")
        >>> s.generator
        'example.org'
        >>> s.xml_indent
        4
    """

    model_config = SettingsConfigDict(
        env_prefix="FEEDSCRIBE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Rendering
    generator: str = Field(default=DEFAULT_GENERATOR, description="Default generator string")
    docs_url: str = Field(default=DEFAULT_DOCS_URL, description="RSS <docs> URL")
    xml_indent: int = Field(default=4, ge=0, le=16, description="Spaces per XML indent level")
    json_indent: int = Field(default=4, ge=0, le=16, description="Spaces per JSON indent level")

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept level names in any case; reject unknown names."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    def render_options(self) -> RenderOptions:
        """Build the options the emitters consume."""
        return RenderOptions(
            generator=self.generator,
            docs_url=self.docs_url,
            xml_indent=" " * self.xml_indent,
            json_indent=self.json_indent,
        )


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Example:
        >>> from feedscribe.core.config import get_settings
        >>> s = get_settings(json_indent=2)
        >>> s.json_indent
        2

    Raises:
        ConfigurationError: If an override or environment value is invalid.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid feedscribe settings: {e}") from e
