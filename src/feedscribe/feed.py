"""Feed builder.

`Feed` collects the metadata, items, categories, contributors, extensions
and custom field names of one feed and renders them into any of the three
formats. It is a pydantic model, so a complete feed description can also be
loaded from JSON.

Example:
    >>> from feedscribe import Feed, FeedMetadata, Item
    >>> feed = Feed(metadata=FeedMetadata(title="Example", link="http://x/"))
    >>> feed.add_item(Item(title="First", link="http://x/1"))
    >>> feed.add_category("news")
    >>> feed.rss2().startswith('<?xml version="1.0" encoding="utf-8"?>')
    True
    >>> feed.serialize("json1").splitlines()[1]
    '    "version": "https://jsonfeed.org/version/1",'
"""

from __future__ import annotations

import logging
import warnings
from typing import Any

from pydantic import Field

from feedscribe.core.config import RenderOptions
from feedscribe.core.exceptions import UnknownFormatError
from feedscribe.document import render_json, render_xml
from feedscribe.emitter.atom1 import render_atom1
from feedscribe.emitter.json1 import render_json1
from feedscribe.emitter.rss2 import render_rss2
from feedscribe.models.base import Extension, FeedscribeModel, Person
from feedscribe.models.feed import FeedMetadata, Item

logger = logging.getLogger(__name__)

FORMATS = ("rss2", "atom1", "json1")


class Feed(FeedscribeModel):
    """A feed under construction.

    Example:
        >>> from feedscribe import Feed
        >>> feed = Feed.model_validate(
        ...     {"metadata": {"title": "T"}, "items": [{"title": "a"}, {"title": "b"}]}
        ... )
        >>> [item.title for item in feed.items]
        ['a', 'b']
    """

    metadata: FeedMetadata
    items: list[Item] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    contributors: list[Person] = Field(default_factory=list)
    extensions: list[Extension] = Field(default_factory=list)
    custom_fields: list[str] = Field(
        default_factory=list,
        description="Item.custom keys copied into RSS items",
    )

    def add_item(self, item: Item | dict[str, Any]) -> None:
        """Append an item; order of addition is document order."""
        self.items.append(Item.model_validate(item))

    def add_category(self, category: str) -> None:
        self.categories.append(category)

    def add_contributor(self, contributor: Person | dict[str, Any]) -> None:
        self.contributors.append(Person.model_validate(contributor))

    def add_extension(self, extension: Extension | dict[str, Any]) -> None:
        self.extensions.append(Extension.model_validate(extension))

    def add_custom_field(self, field_name: str) -> None:
        """Declare an `Item.custom` key to copy into RSS items."""
        self.custom_fields.append(field_name)

    def rss2(self, options: RenderOptions | None = None) -> str:
        """Render as RSS 2.0 text."""
        options = options or RenderOptions()
        document = render_rss2(
            self.metadata,
            self.items,
            self.categories,
            self.custom_fields,
            options=options,
        )
        return render_xml(document, indent=options.xml_indent)

    def atom1(self, options: RenderOptions | None = None) -> str:
        """Render as Atom 1.0 text."""
        options = options or RenderOptions()
        document = render_atom1(
            self.metadata,
            self.items,
            self.categories,
            self.contributors,
            options=options,
        )
        return render_xml(document, indent=options.xml_indent)

    def json1(self, options: RenderOptions | None = None) -> str:
        """Render as JSON Feed 1.0 text."""
        options = options or RenderOptions()
        document = render_json1(self.metadata, self.items, self.extensions)
        return render_json(document, indent=options.json_indent)

    def serialize(self, format: str, options: RenderOptions | None = None) -> str:
        """Render in the named format (`rss2`, `atom1` or `json1`).

        Raises:
            UnknownFormatError: If `format` is not one of FORMATS.
        """
        if format == "rss2":
            return self.rss2(options)
        if format == "atom1":
            return self.atom1(options)
        if format == "json1":
            return self.json1(options)
        raise UnknownFormatError(format)

    def render(self, format: str = "rss-2.0") -> str:
        """Render Atom for `"atom-1.0"`, RSS 2.0 for anything else.

        Deprecated: call `atom1()` or `rss2()` instead.
        """
        logger.warning("Feed.render() is deprecated, use atom1() or rss2() instead")
        warnings.warn(
            "Feed.render() is deprecated, use atom1() or rss2() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        if format == "atom-1.0":
            return self.atom1()
        return self.rss2()
