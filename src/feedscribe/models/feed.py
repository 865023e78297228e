"""Feed metadata and item models - the input of every emitter.

Example:
    >>> from datetime import datetime, timezone
    >>> from feedscribe.models.feed import FeedMetadata, Item
    >>> meta = FeedMetadata(title="Example", id="urn:1", link="http://x/")
    >>> item = Item(
    ...     id="i1",
    ...     title="Hello",
    ...     link="http://x/1",
    ...     date=datetime(2020, 1, 1, tzinfo=timezone.utc),
    ... )
    >>> item.authors
    []
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from feedscribe.models.base import Extension, FeedscribeModel, Person
from feedscribe.models.media import (
    Enclosure,
    MediaAsset,
    MediaContent,
    PeerLink,
    TorrentMetainfo,
    as_list,
)


class FeedLinks(FeedscribeModel):
    """Per-format URLs where the feed itself is published."""

    atom: str | None = None
    json_: str | None = Field(default=None, alias="json")
    rss: str | None = None


class FeedMetadata(FeedscribeModel):
    """Channel-level description of a feed.

    Example:
        >>> from feedscribe.models.feed import FeedMetadata
        >>> meta = FeedMetadata(
        ...     title="Example",
        ...     feedLinks={"atom": "http://x/atom.xml", "json": "http://x/feed.json"},
        ... )
        >>> meta.self_link
        'http://x/atom.xml'
        >>> meta.feed_links.json_
        'http://x/feed.json'
    """

    title: str = Field(..., description="Feed title")
    id: str | None = Field(default=None, description="Unique feed identifier")
    link: str | None = Field(default=None, description="Home page URL")
    description: str | None = None
    updated: datetime | None = Field(default=None, description="Last update, defaults to now")
    generator: str | None = Field(default=None, description="Overrides the default generator")
    author: Person | None = None
    image: str | None = Field(default=None, description="Channel image / Atom logo / JSON icon")
    favicon: str | None = None
    copyright: str | None = None
    feed: str | None = Field(default=None, description="URL of this feed document")
    hub: str | None = Field(default=None, description="WebSub (PubSubHubbub) hub URL")
    feed_links: FeedLinks = Field(default_factory=FeedLinks, alias="feedLinks")

    @property
    def self_link(self) -> str | None:
        """URL advertised as `rel="self"`: `feed`, else the Atom feed link."""
        return self.feed or self.feed_links.atom


class Item(MediaAsset):
    """One feed entry.

    Inherits the optional MRSS fields from `MediaAsset`; `title` and
    `description` double as the entry title and summary.

    Example:
        >>> from feedscribe.models.feed import Item
        >>> item = Item(
        ...     title="Episode 1",
        ...     link="http://x/1",
        ...     author={"name": "Jane"},
        ...     torrent="http://x/1.torrent",
        ... )
        >>> item.authors[0].name
        'Jane'
        >>> item.torrent[0].url
        'http://x/1.torrent'
    """

    id: str | None = None
    link: str | None = None
    guid: str | None = Field(default=None, description="Defaults to link in RSS output")
    date: datetime | None = Field(default=None, description="Last modification time")
    published: datetime | None = None
    content: str | None = Field(default=None, description="Full HTML body")
    authors: list[Person] = Field(default_factory=list, alias="author")
    contributors: list[Person] = Field(default_factory=list, alias="contributor")
    copyright: str | None = None

    # Passthrough fields
    custom: dict[str, Any] = Field(
        default_factory=dict,
        description="Values for the feed's declared custom fields (RSS only)",
    )
    extensions: list[Extension] = Field(
        default_factory=list,
        description="Named payloads merged into the JSON item",
    )

    # RSS-only media
    enclosures: list[Enclosure] = Field(default_factory=list)
    peer_links: list[PeerLink] = Field(default_factory=list, alias="peerLinks")
    torrent: list[TorrentMetainfo] = Field(default_factory=list)
    videos: list[MediaContent] = Field(default_factory=list)
    nsfw: bool = Field(default=False, description="Rated adult in media:rating")

    @field_validator("authors", "contributors", "torrent", "enclosures", mode="before")
    @classmethod
    def normalize_lists(cls, v: Any) -> Any:
        return as_list(v)
