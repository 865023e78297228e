"""JSON Feed 1.0 emitter.

Produces a plain dict; keys whose value is absent are left out. Two
limitations of the format are kept as they are: only the first author of an
item is written, and torrents are the only attachments.

Example:
    >>> from feedscribe.emitter.json1 import render_json1
    >>> from feedscribe.models.feed import FeedMetadata, Item
    >>> doc = render_json1(
    ...     FeedMetadata(title="T", link="http://x/"),
    ...     [Item(id="1", content="<p>Hi</p>", author=[{"name": "A"}, {"name": "B"}])],
    ... )
    >>> doc["home_page_url"]
    'http://x/'
    >>> doc["items"][0]["author"]
    {'name': 'A'}
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from feedscribe.document import JsonDocument
from feedscribe.emitter.media import BITTORRENT_MIME_TYPE
from feedscribe.models.base import Extension, Person
from feedscribe.models.feed import FeedMetadata, Item
from feedscribe.utils.dates import to_atom_date

logger = logging.getLogger(__name__)

JSON_FEED_VERSION = "https://jsonfeed.org/version/1"


def _author(person: Person) -> dict[str, Any]:
    # JSON Feed 1 has no author email
    author: dict[str, Any] = {}
    if person.name:
        author["name"] = person.name
    if person.link:
        author["url"] = person.link
    return author


def _merge_extensions(target: dict[str, Any], extensions: Iterable[Extension]) -> None:
    for extension in extensions:
        target[extension.name] = extension.objects


def _item(item: Item) -> dict[str, Any]:
    feed_item: dict[str, Any] = {}
    if item.id is not None:
        feed_item["id"] = item.id
    # Content is always taken to be HTML
    if item.content is not None:
        feed_item["html_content"] = item.content
    if item.link:
        feed_item["url"] = item.link
    if item.title:
        feed_item["title"] = item.title
    if item.description:
        feed_item["summary"] = item.description

    if item.torrent:
        feed_item["attachments"] = [
            {**torrent.model_dump(exclude_none=True), "mime_type": BITTORRENT_MIME_TYPE}
            for torrent in item.torrent
        ]

    if item.image is not None:
        feed_item["image"] = item.image.url
    if item.date:
        feed_item["date_modified"] = to_atom_date(item.date)
    if item.published:
        feed_item["date_published"] = to_atom_date(item.published)

    if item.authors:
        feed_item["author"] = _author(item.authors[0])

    _merge_extensions(feed_item, item.extensions)
    return feed_item


def render_json1(
    metadata: FeedMetadata,
    items: Iterable[Item],
    extensions: Sequence[Extension] = (),
) -> JsonDocument:
    """Build a JSON Feed 1.0 document.

    Args:
        metadata: Feed metadata.
        items: Items in document order.
        extensions: Top-level extensions, merged in under their names.

    Returns:
        The feed as a JSON-ready dict.
    """
    feed: JsonDocument = {"version": JSON_FEED_VERSION, "title": metadata.title}

    if metadata.link:
        feed["home_page_url"] = metadata.link
    if metadata.feed_links.json_:
        feed["feed_url"] = metadata.feed_links.json_
    if metadata.description:
        feed["description"] = metadata.description
    if metadata.image:
        feed["icon"] = metadata.image
    if metadata.author is not None:
        feed["author"] = _author(metadata.author)

    _merge_extensions(feed, extensions)

    feed["items"] = [_item(item) for item in items]

    logger.debug(f"Rendered JSON Feed 1.0 document with {len(feed['items'])} items")
    return feed
