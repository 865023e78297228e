"""Data model for feed rendering."""

from feedscribe.models.base import Extension, FeedscribeModel, Person
from feedscribe.models.feed import FeedLinks, FeedMetadata, Item
from feedscribe.models.media import (
    Community,
    Embed,
    Enclosure,
    MediaAsset,
    MediaCategory,
    MediaContent,
    PeerLink,
    Player,
    StarRating,
    Statistics,
    SubTitle,
    Thumbnail,
    TorrentMetainfo,
)

__all__ = [
    "Community",
    "Embed",
    "Enclosure",
    "Extension",
    "FeedLinks",
    "FeedMetadata",
    "FeedscribeModel",
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
]
