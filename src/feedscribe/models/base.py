"""Base models and shared types.

This module provides the model base class and the small value types shared
by the feed and media models.

Example:
    >>> from feedscribe.models.base import Person, Extension
    >>> person = Person(name="Jane Doe", email="jane@example.com")
    >>> person.name
    'Jane Doe'
    >>> Extension(name="_custom", objects={"a": 1}).name
    '_custom'
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FeedscribeModel(BaseModel):
    """Base model with standard configuration.

    camelCase aliases are accepted alongside field names so feed
    descriptions written for other feed libraries load unchanged.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        validate_assignment=True,
        extra="forbid",
    )


class UrlModel(FeedscribeModel):
    """Model that may be written as a bare URL string.

    Example:
        >>> from feedscribe.models.media import Thumbnail
        >>> Thumbnail.model_validate("http://x/t.jpg").url
        'http://x/t.jpg'
    """

    @model_validator(mode="before")
    @classmethod
    def coerce_url(cls, data: Any) -> Any:
        """Turn `"http://..."` into `{"url": "http://..."}`."""
        if isinstance(data, str):
            return {"url": data}
        return data


class Person(FeedscribeModel):
    """Author or contributor.

    Every field is optional; each one present becomes its own sub-element
    (or JSON key) in formats that support it.

    Example:
        >>> from feedscribe.models.base import Person
        >>> p = Person(name="Jane", link="https://jane.example")
        >>> p.email is None
        True
    """

    name: str | None = Field(default=None, description="Display name")
    email: str | None = Field(default=None, description="Email address")
    link: str | None = Field(default=None, description="Home page (Atom uri, JSON url)")


class Extension(FeedscribeModel):
    """Named payload copied verbatim into JSON Feed output.

    Example:
        >>> from feedscribe.models.base import Extension
        >>> ext = Extension(name="_podcast", objects={"explicit": False})
        >>> ext.objects
        {'explicit': False}
    """

    name: str = Field(..., min_length=1, description="Key the payload is written under")
    objects: Any = Field(default=None, description="JSON-serializable payload")
