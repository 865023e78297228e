"""Atom 1.0 emitter (RFC 4287).

Atom output is deliberately plain: no media or extension elements.

Example:
    >>> from datetime import datetime, timezone
    >>> from feedscribe.emitter.atom1 import render_atom1
    >>> from feedscribe.models.feed import FeedMetadata, Item
    >>> meta = FeedMetadata(title="T", id="urn:1", link="http://x/")
    >>> item = Item(
    ...     id="i1",
    ...     link="http://x/1",
    ...     title="Hi",
    ...     date=datetime(2020, 1, 1, tzinfo=timezone.utc),
    ... )
    >>> entry = render_atom1(meta, [item]).root.find("entry")
    >>> entry.find("id").text, entry.find("updated").text
    ('i1', '2020-01-01T00:00:00Z')
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from feedscribe.core.config import RenderOptions
from feedscribe.document import Element, XmlDocument
from feedscribe.models.base import Person
from feedscribe.models.feed import FeedMetadata, Item
from feedscribe.utils.dates import to_atom_date

logger = logging.getLogger(__name__)

ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"


def person_element(tag: str, person: Person) -> Element:
    """`author` / `contributor` element with the person's set fields."""
    element = Element(tag)
    if person.name:
        element.add("name", person.name)
    if person.email:
        element.add("email", person.email)
    if person.link:
        element.add("uri", person.link)
    return element


def _entry_element(item: Item) -> Element:
    entry = Element("entry")
    entry.add("title", item.title, {"type": "html"}, cdata=True)
    entry.add("id", item.id or item.link)
    entry.add("link", attrs={"href": item.link})
    entry.add("updated", to_atom_date(item.date))

    if item.description:
        entry.add("summary", item.description, {"type": "html"}, cdata=True)

    if item.content:
        entry.add("content", item.content, {"type": "html"}, cdata=True)

    for author in item.authors:
        entry.append(person_element("author", author))

    for contributor in item.contributors:
        entry.append(person_element("contributor", contributor))

    if item.published:
        entry.add("published", to_atom_date(item.published))

    if item.copyright:
        entry.add("rights", item.copyright)

    return entry


def render_atom1(
    metadata: FeedMetadata,
    items: Iterable[Item],
    categories: Sequence[str] = (),
    contributors: Sequence[Person] = (),
    *,
    options: RenderOptions | None = None,
) -> XmlDocument:
    """Build an Atom 1.0 document.

    Args:
        metadata: Feed metadata.
        items: Entries in document order.
        categories: Feed-level category terms.
        contributors: Feed-level contributors.
        options: Rendering defaults (generator).

    Returns:
        Document rooted at `<feed xmlns="http://www.w3.org/2005/Atom">`.
    """
    options = options or RenderOptions()

    feed = Element("feed", {"xmlns": ATOM_NAMESPACE})
    feed.add("id", metadata.id)
    feed.add("title", metadata.title)
    feed.add("updated", to_atom_date(metadata.updated))
    feed.add("generator", metadata.generator or options.generator)

    if metadata.author is not None:
        feed.append(person_element("author", metadata.author))

    if metadata.link:
        feed.add("link", attrs={"rel": "alternate", "href": metadata.link})

    if metadata.self_link:
        feed.add("link", attrs={"rel": "self", "href": metadata.self_link})

    if metadata.hub:
        feed.add("link", attrs={"rel": "hub", "href": metadata.hub})

    if metadata.description:
        feed.add("subtitle", metadata.description)

    if metadata.image:
        feed.add("logo", metadata.image)

    if metadata.favicon:
        feed.add("icon", metadata.favicon)

    if metadata.copyright:
        feed.add("rights", metadata.copyright)

    for category in categories:
        feed.add("category", attrs={"term": category})

    for contributor in contributors:
        feed.append(person_element("contributor", contributor))

    count = 0
    for item in items:
        feed.append(_entry_element(item))
        count += 1

    logger.debug(f"Rendered Atom 1.0 document with {count} entries")
    return XmlDocument(feed)
