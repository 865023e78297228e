"""
feedscribe - Syndication feed writer.

feedscribe renders one in-memory feed description as RSS 2.0, Atom 1.0 or
JSON Feed 1.0 text. Rendering is pure: the data model goes in, text comes
out, nothing is fetched, written or cached.

Key Features:
- One pydantic data model for all three formats
- Media RSS (MRSS) and torrent attachments in RSS output
- Namespaces declared only when used
- Byte-reproducible output for identical input

Quick Start:
    >>> from feedscribe import Feed, FeedMetadata, Item
    >>> feed = Feed(metadata=FeedMetadata(title="News", id="urn:news", link="https://example.com/"))
    >>> feed.add_item(Item(title="Hello", link="https://example.com/hello"))
    >>> xml = feed.atom1()
    >>> "<title>News</title>" in xml
    True

Architecture:
    Models: FeedMetadata, Item, Person, Extension, MediaContent, ...
    Emitters: render_rss2, render_atom1, render_json1
    Renderers: render_xml, render_json
"""

from feedscribe.core.config import RenderOptions, Settings, get_settings
from feedscribe.core.exceptions import (
    ConfigurationError,
    FeedscribeError,
    RenderError,
    UnknownFormatError,
)
from feedscribe.document import Element, XmlDocument, render_json, render_xml
from feedscribe.emitter import (
    build_media_block,
    render_atom1,
    render_json1,
    render_rss2,
)
from feedscribe.feed import FORMATS, Feed
from feedscribe.models import (
    Community,
    Embed,
    Enclosure,
    Extension,
    FeedLinks,
    FeedMetadata,
    Item,
    MediaAsset,
    MediaCategory,
    MediaContent,
    PeerLink,
    Person,
    Player,
    StarRating,
    Statistics,
    SubTitle,
    Thumbnail,
    TorrentMetainfo,
)
from feedscribe.utils.dates import to_atom_date, to_rss_date

__version__ = "0.1.0"

__all__ = [
    # Builder
    "FORMATS",
    "Feed",
    # Models
    "Community",
    "Embed",
    "Enclosure",
    "Extension",
    "FeedLinks",
    "FeedMetadata",
    "Item",
    "MediaAsset",
    "MediaCategory",
    "MediaContent",
    "PeerLink",
    "Person",
    "Player",
    "StarRating",
    "Statistics",
    "SubTitle",
    "Thumbnail",
    "TorrentMetainfo",
    # Emitters
    "build_media_block",
    "render_atom1",
    "render_json1",
    "render_rss2",
    # Documents
    "Element",
    "XmlDocument",
    "render_json",
    "render_xml",
    # Dates
    "to_atom_date",
    "to_rss_date",
    # Config
    "RenderOptions",
    "Settings",
    "get_settings",
    # Exceptions
    "ConfigurationError",
    "FeedscribeError",
    "RenderError",
    "UnknownFormatError",
    # Version
    "__version__",
]
