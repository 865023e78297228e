"""Custom exceptions.

Rendering itself never fails on missing data: absent optional fields are
simply not emitted. Exceptions are raised only at the boundary, e.g. when a
caller hands the JSON renderer a payload it cannot serialize or asks for a
format that does not exist.

Example:
    >>> from feedscribe.core.exceptions import RenderError, FeedscribeError
    >>> isinstance(RenderError("bad payload"), FeedscribeError)
    True
    >>> try:
    ...     raise UnknownFormatError("rss3")
    ... except RenderError as e:
    ...     print(f"Caught: {type(e).__name__}")
    Caught: UnknownFormatError
"""

from __future__ import annotations


class FeedscribeError(Exception):
    """Base exception for feedscribe.

    Example:
        >>> from feedscribe.core.exceptions import FeedscribeError
        >>> e = FeedscribeError("something went wrong")
        >>> str(e)
        'something went wrong'
    """


class RenderError(FeedscribeError):
    """A document could not be turned into text.

    Example:
        >>> from feedscribe.core.exceptions import RenderError
        >>> err = RenderError("not serializable", format="json1")
        >>> err.format
        'json1'
    """

    def __init__(
        self,
        message: str,
        format: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.format = format
        self.cause = cause


class UnknownFormatError(RenderError):
    """Requested output format is not supported.

    Example:
        >>> from feedscribe.core.exceptions import UnknownFormatError
        >>> str(UnknownFormatError("rss3"))
        "Unknown feed format 'rss3' (expected one of: rss2, atom1, json1)"
    """

    def __init__(self, format: str) -> None:
        super().__init__(
            f"Unknown feed format {format!r} (expected one of: rss2, atom1, json1)",
            format=format,
        )


class ConfigurationError(FeedscribeError):
    """Configuration is invalid.

    Example:
        >>> from feedscribe.core.exceptions import ConfigurationError
        >>> raise ConfigurationError("bad indent")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ConfigurationError: bad indent
    """
