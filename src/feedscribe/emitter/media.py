"""Media RSS (MRSS) block builder.

Builds the optional `media:*` elements of an RSS item, plus its enclosures
and torrent attachments, and reports which namespaces the block used so the
RSS emitter can declare them once on the root element.

Element order within a block:

1. `media:category`, `media:community`, `media:embed`, `media:keywords`,
   `media:subTitle`, `media:player`
2. plain `enclosure` elements, then the primary torrent `enclosure`
3. one `media:group` (peer links and nested `media:content`), or else the
   image fallback `enclosure`
4. `media:thumbnail`
5. `media:title` / `media:description`, only once the media namespace is
   active for the document

Example:
    >>> from feedscribe.emitter.media import build_media_block
    >>> from feedscribe.emitter.namespaces import Namespace
    >>> from feedscribe.models.feed import Item
    >>> block = build_media_block(Item(title="Clip", keywords=["cats", "dogs"]))
    >>> [el.name for el in block.elements]
    ['media:keywords', 'media:title']
    >>> Namespace.MEDIA in block.namespaces
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from feedscribe.document import Element
from feedscribe.emitter.namespaces import Namespace, Namespaces
from feedscribe.models.base import FeedscribeModel
from feedscribe.models.feed import Item
from feedscribe.models.media import (
    Community,
    MediaAsset,
    MediaCategory,
    MediaContent,
    TorrentMetainfo,
)

BITTORRENT_MIME_TYPE = "application/x-bittorrent"

# (model field, XML attribute) pairs, in output order
EMBED_ATTRS = [
    ("url", "url"),
    ("width", "width"),
    ("height", "height"),
    ("type", "type"),
    ("allow_full_screen", "allowFullScreen"),
]
PLAYER_ATTRS = [("url", "url"), ("width", "width"), ("height", "height")]
SUBTITLE_ATTRS = [("href", "href"), ("type", "type"), ("lang", "lang")]
STATISTICS_ATTRS = [("views", "views"), ("favorites", "favorites")]
STAR_RATING_ATTRS = [("average", "average"), ("count", "count"), ("min", "min"), ("max", "max")]
THUMBNAIL_ATTRS = [("url", "url"), ("height", "height"), ("width", "width"), ("time", "time")]
ENCLOSURE_ATTRS = [("length", "length"), ("type", "type"), ("url", "url")]
CONTENT_ATTRS = [
    ("url", "url"),
    ("file_size", "fileSize"),
    ("type", "type"),
    ("medium", "medium"),
    ("expression", "expression"),
    ("bitrate", "bitrate"),
    ("framerate", "framerate"),
    ("samplingrate", "samplingrate"),
    ("channels", "channels"),
    ("duration", "duration"),
    ("height", "height"),
    ("width", "width"),
    ("lang", "lang"),
]
HASH_ALGORITHMS = [("md5", "md5"), ("sha1", "sha-1")]


def pick(model: FeedscribeModel, fields: list[tuple[str, str]]) -> dict[str, Any]:
    """Attributes for the fields of `model` that are set.

    Example:
        >>> from feedscribe.models.media import Player
        >>> pick(Player(url="http://x/p", width=640), PLAYER_ATTRS)
        {'url': 'http://x/p', 'width': 640}
    """
    attrs: dict[str, Any] = {}
    for field_name, attr in fields:
        value = getattr(model, field_name)
        if value is not None:
            attrs[attr] = value
    return attrs


@dataclass
class MediaBlock:
    """Elements built for one asset and the namespaces they need."""

    elements: list[Element]
    namespaces: Namespaces


class _BlockBuilder:
    def __init__(self, media_active: bool) -> None:
        self.elements: list[Element] = []
        self.namespaces = Namespaces()
        self._document_media_active = media_active

    @property
    def media_active(self) -> bool:
        """Media namespace declared by an earlier item or used in this block."""
        return self._document_media_active or Namespace.MEDIA in self.namespaces

    def add(self, element: Element) -> Element:
        self.elements.append(element)
        return element

    def media(self, element: Element) -> Element:
        self.namespaces |= Namespaces.of(Namespace.MEDIA)
        return self.add(element)

    def merge(self, namespaces: Namespaces) -> None:
        self.namespaces |= namespaces


def _category_elements(categories: list[MediaCategory]) -> list[Element]:
    return [
        Element("media:category", {"scheme": c.scheme, "label": c.label}, text=c.value)
        for c in categories
        if c.value
    ]


def _community_element(community: Community) -> Element | None:
    group = Element("media:community")
    if community.statistics is not None:
        group.add("media:statistics", attrs=pick(community.statistics, STATISTICS_ATTRS))
    if community.star_rating is not None:
        group.add("media:starRating", attrs=pick(community.star_rating, STAR_RATING_ATTRS))
    return group if group.children else None


def _content_element(video: MediaContent, media_active: bool) -> tuple[Element, Namespaces]:
    """`media:content` for a nested video, with its own media block inside."""
    content = Element("media:content", pick(video, CONTENT_ATTRS))
    for field_name, algo in HASH_ALGORITHMS:
        digest = getattr(video, field_name)
        if digest is not None:
            content.add("media:hash", digest, {"algo": algo})

    nested = build_media_block(video, allow_nested=False, media_active=media_active)
    content.extend(nested.elements)
    return content, nested.namespaces


def _torrent_elements(torrents: list[TorrentMetainfo]) -> tuple[Element | None, list[Element]]:
    """Primary enclosure and peer links for an item's torrent metainfo.

    A single torrent becomes the item's enclosure. From the second entry on
    every torrent is a peer link instead: the first entry is promoted to the
    default peer link when the second is seen, and no enclosure is emitted.
    """
    if len(torrents) == 1:
        torrent = torrents[0]
        enclosure = Element(
            "enclosure",
            {"type": BITTORRENT_MIME_TYPE, "url": torrent.url, "length": torrent.size_in_bytes},
        )
        return enclosure, []

    peer_links: list[Element] = []
    for index, torrent in enumerate(torrents):
        if index == 0:
            continue
        if index == 1:
            peer_links.append(
                Element(
                    "media:peerLink",
                    {"type": BITTORRENT_MIME_TYPE, "href": torrents[0].url, "isDefault": True},
                )
            )
        peer_links.append(
            Element("media:peerLink", {"type": BITTORRENT_MIME_TYPE, "href": torrent.url})
        )
    return None, peer_links


def build_media_block(
    asset: MediaAsset,
    *,
    allow_nested: bool = True,
    media_active: bool = False,
) -> MediaBlock:
    """Build the MRSS elements for an item or nested media content.

    Args:
        asset: Item or nested media content to describe.
        allow_nested: Whether enclosures, peer links, torrents and nested
            videos are processed. Nested content is built with False, which
            bounds the recursion at one level.
        media_active: Whether the document already declares the media
            namespace; gates `media:title` and `media:description`.

    Returns:
        The elements in output order and the namespaces they used.
    """
    block = _BlockBuilder(media_active)

    for element in _category_elements(asset.categories):
        block.media(element)

    if asset.community is not None:
        community = _community_element(asset.community)
        if community is not None:
            block.media(community)

    if asset.embed is not None:
        block.media(Element("media:embed", pick(asset.embed, EMBED_ATTRS)))

    if asset.keywords:
        block.media(Element("media:keywords", text=", ".join(asset.keywords)))

    for subtitle in asset.subtitles:
        if subtitle.href and subtitle.type:
            block.media(Element("media:subTitle", pick(subtitle, SUBTITLE_ATTRS)))

    if asset.player is not None:
        block.media(Element("media:player", pick(asset.player, PLAYER_ATTRS)))

    group: list[Element] = []
    if allow_nested and isinstance(asset, Item):
        for enclosure in asset.enclosures:
            block.add(Element("enclosure", pick(enclosure, ENCLOSURE_ATTRS)))

        for index, link in enumerate(asset.peer_links):
            group.append(
                Element(
                    "media:peerLink",
                    {"href": link.href, "isDefault": index == 0, "type": link.type},
                )
            )

        if asset.torrent:
            primary, torrent_links = _torrent_elements(asset.torrent)
            if primary is not None:
                block.add(primary)
            group.extend(torrent_links)

        for video in asset.videos:
            content, used = _content_element(video, block.media_active)
            block.merge(used)
            group.append(content)

    if group:
        block.media(Element("media:group", children=group))
    elif asset.image is not None:
        block.add(Element("enclosure", pick(asset.image, ENCLOSURE_ATTRS)))

    for thumbnail in asset.thumbnail:
        block.media(Element("media:thumbnail", pick(thumbnail, THUMBNAIL_ATTRS)))

    if block.media_active:
        if asset.title:
            block.add(Element("media:title", {"type": "plain"}, text=asset.title))
        if asset.description:
            block.add(Element("media:description", {"type": "plain"}, text=asset.description))

    return MediaBlock(block.elements, block.namespaces)
