"""RSS 2.0 emitter.

Maps feed metadata and items onto an RSS 2.0 `XmlDocument`. Optional
namespaces (`content`, `atom`, `dc`, `media`) are declared on the root only
when some element actually used them, and the root attributes are sorted by
key so identical input renders byte-identical output.

Example:
    >>> from feedscribe.document import render_xml
    >>> from feedscribe.emitter.rss2 import render_rss2
    >>> from feedscribe.models.feed import FeedMetadata, Item
    >>> meta = FeedMetadata(title="T", link="http://x/", copyright="(c) 2020")
    >>> doc = render_rss2(meta, [Item(title="Hi", link="http://x/1")])
    >>> doc.root.attrs
    {'version': '2.0'}
    >>> doc.root.find("channel").find("copyright").text
    '(c) 2020'
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from feedscribe.core.config import RenderOptions
from feedscribe.document import Element, XmlDocument, format_attr_value
from feedscribe.emitter.media import build_media_block
from feedscribe.emitter.namespaces import Namespace, Namespaces
from feedscribe.models.base import Person
from feedscribe.models.feed import FeedMetadata, Item
from feedscribe.utils.dates import to_rss_date

logger = logging.getLogger(__name__)

RSS_VERSION = "2.0"
RSS_MIME_TYPE = "application/rss+xml"

# An author rule turns a person into an item element, or passes with None.
AuthorRule = Callable[[Person], tuple[Element, Namespaces] | None]


def _email_and_name(person: Person) -> tuple[Element, Namespaces] | None:
    if person.email and person.name:
        return Element("author", text=f"{person.email} ({person.name})"), Namespaces()
    return None


def _dc_creator(person: Person) -> tuple[Element, Namespaces] | None:
    if person.name:
        return Element("dc:creator", text=person.name), Namespaces.of(Namespace.DC)
    return None


AUTHOR_RULES: list[AuthorRule] = [_email_and_name, _dc_creator]


def select_author(
    authors: Iterable[Person],
    rules: Sequence[AuthorRule] = AUTHOR_RULES,
) -> tuple[Element, Namespaces] | None:
    """Element for the first author any rule accepts.

    Authors are scanned in order; for each one the rules are tried in rank
    order and the first hit wins. Later authors are ignored.

    Example:
        >>> from feedscribe.models.base import Person
        >>> element, _ = select_author([Person(email="a@x"), Person(name="Bo")])
        >>> element.name, element.text
        ('dc:creator', 'Bo')
    """
    for person in authors:
        for rule in rules:
            selected = rule(person)
            if selected is not None:
                return selected
    return None


def _channel_element(
    metadata: FeedMetadata,
    categories: Sequence[str],
    options: RenderOptions,
) -> tuple[Element, Namespaces]:
    channel = Element("channel")
    channel.add("title", metadata.title)
    channel.add("link", metadata.link)
    channel.add("description", metadata.description)
    channel.add("lastBuildDate", to_rss_date(metadata.updated))
    channel.add("docs", options.docs_url)
    channel.add("generator", metadata.generator or options.generator)

    if metadata.image:
        image = channel.add("image")
        image.add("title", metadata.title)
        image.add("url", metadata.image)
        image.add("link", metadata.link)

    if metadata.copyright:
        channel.add("copyright", metadata.copyright)

    for category in categories:
        channel.add("category", category)

    used = Namespaces()
    if metadata.self_link:
        used |= Namespaces.of(Namespace.ATOM)
        channel.add(
            "atom:link",
            attrs={"href": metadata.self_link, "rel": "self", "type": RSS_MIME_TYPE},
        )

    if metadata.hub:
        used |= Namespaces.of(Namespace.ATOM)
        channel.add("atom:link", attrs={"href": metadata.hub, "rel": "hub"})

    return channel, used


def _item_element(
    item: Item,
    custom_fields: Sequence[str],
    media_active: bool,
) -> tuple[Element, Namespaces]:
    element = Element("item")
    used = Namespaces()

    for field_name in custom_fields:
        value = item.custom.get(field_name)
        if value:
            element.add(field_name, format_attr_value(value))

    if item.title:
        element.add("title", item.title, cdata=True)

    if item.link:
        element.add("link", item.link)

    if item.guid:
        if "http" in item.guid:
            element.add("guid", item.guid)
        else:
            element.add("guid", item.guid, {"isPermaLink": "false"})
    elif item.link:
        element.add("guid", item.link)

    if item.date:
        element.add("pubDate", to_rss_date(item.date))

    if item.description:
        element.add("description", item.description, cdata=True)

    if item.content:
        used |= Namespaces.of(Namespace.CONTENT)
        element.add("content:encoded", item.content, cdata=True)

    author = select_author(item.authors)
    if author is not None:
        author_element, author_namespaces = author
        element.append(author_element)
        used |= author_namespaces

    block = build_media_block(item, media_active=media_active)
    element.extend(block.elements)
    used |= block.namespaces

    if media_active or Namespace.MEDIA in used:
        element.add("media:rating", "adult" if item.nsfw else "nonadult")

    return element, used


def render_rss2(
    metadata: FeedMetadata,
    items: Iterable[Item],
    categories: Sequence[str] = (),
    custom_fields: Sequence[str] = (),
    *,
    options: RenderOptions | None = None,
) -> XmlDocument:
    """Build an RSS 2.0 document.

    Args:
        metadata: Channel metadata.
        items: Items in document order.
        categories: Channel-level category names.
        custom_fields: Names of `Item.custom` entries to copy into each item.
        options: Rendering defaults (generator, docs URL).

    Returns:
        Document rooted at `<rss version="2.0">`.
    """
    options = options or RenderOptions()
    channel, used = _channel_element(metadata, categories, options)

    count = 0
    for item in items:
        element, item_namespaces = _item_element(
            item, custom_fields, media_active=Namespace.MEDIA in used
        )
        channel.append(element)
        used |= item_namespaces
        count += 1

    attrs = {"version": RSS_VERSION, **used.declarations()}
    root = Element("rss", dict(sorted(attrs.items())), [channel])

    logger.debug(
        f"Rendered RSS 2.0 document with {count} items "
        f"(namespaces: {sorted(ns.value for ns in used.used)})"
    )
    return XmlDocument(root)
