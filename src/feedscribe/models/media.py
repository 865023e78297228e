"""Media RSS (MRSS) and torrent models.

`MediaAsset` is the bag of optional rich-media fields shared by feed items
and the nested `MediaContent` entries of a `media:group`. Single values are
accepted where lists are expected (thumbnails, torrents) and bare URL
strings where an object with a `url` is expected.

Example:
    >>> from feedscribe.models.media import MediaAsset
    >>> asset = MediaAsset(thumbnail="http://x/t.jpg", keywords=["a", "b"])
    >>> [t.url for t in asset.thumbnail]
    ['http://x/t.jpg']
"""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field, field_validator

from feedscribe.models.base import FeedscribeModel, UrlModel

MRSS_CATEGORY_SCHEME = "http://search.yahoo.com/mrss/category_schema"

Number = int | float


def as_list(value: Any) -> Any:
    """Wrap a single value in a list; None becomes an empty list."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


class MediaCategory(FeedscribeModel):
    """`media:category` entry. Entries without a value are not emitted."""

    value: str | None = None
    scheme: str | None = MRSS_CATEGORY_SCHEME
    label: str | None = None


class Statistics(FeedscribeModel):
    views: int | None = None
    favorites: int | None = None


class StarRating(FeedscribeModel):
    average: Number | None = None
    count: int | None = None
    min: Number | None = None
    max: Number | None = None


class Community(FeedscribeModel):
    """`media:community` statistics and averaged ratings."""

    statistics: Statistics | None = None
    star_rating: StarRating | None = Field(default=None, alias="starRating")


class Embed(UrlModel):
    url: str | None = None
    width: int | str | None = None
    height: int | str | None = None
    type: str | None = None
    allow_full_screen: bool | None = Field(default=None, alias="allowFullScreen")


class SubTitle(FeedscribeModel):
    """`media:subTitle` track. Both `href` and `type` are needed to emit it."""

    href: str | None = None
    type: str | None = None
    lang: str | None = None


class Player(UrlModel):
    url: str | None = None
    width: int | str | None = None
    height: int | str | None = None


class Thumbnail(UrlModel):
    url: str
    height: int | str | None = None
    width: int | str | None = None
    time: str | None = None


class Enclosure(UrlModel):
    """RSS `enclosure`: a single attached binary resource."""

    url: str
    length: int | str | None = None
    type: str | None = None


class PeerLink(FeedscribeModel):
    href: str
    type: str | None = None


class TorrentMetainfo(UrlModel):
    """Torrent attachment.

    Fields beyond `url` and `size_in_bytes` are kept and copied into JSON
    Feed attachments as given.

    Example:
        >>> from feedscribe.models.media import TorrentMetainfo
        >>> t = TorrentMetainfo(url="http://x/a.torrent", title="Episode 1")
        >>> t.model_dump(exclude_none=True)
        {'url': 'http://x/a.torrent', 'title': 'Episode 1'}
    """

    model_config = ConfigDict(extra="allow")

    url: str
    size_in_bytes: int | None = None


class MediaAsset(FeedscribeModel):
    """Optional MRSS fields shared by items and nested media content."""

    title: str | None = None
    description: str | None = None
    categories: list[MediaCategory] = Field(default_factory=list)
    community: Community | None = None
    embed: Embed | None = None
    keywords: list[str] = Field(default_factory=list)
    subtitles: list[SubTitle] = Field(default_factory=list, alias="subTitle")
    player: Player | None = None
    thumbnail: list[Thumbnail] = Field(default_factory=list)
    image: Enclosure | None = Field(
        default=None,
        description="Fallback enclosure when no media:group is produced",
    )

    @field_validator("thumbnail", mode="before")
    @classmethod
    def normalize_thumbnails(cls, v: Any) -> Any:
        return as_list(v)


class MediaContent(MediaAsset):
    """Nested `media:content` entry of an item's `media:group`.

    Example:
        >>> from feedscribe.models.media import MediaContent
        >>> video = MediaContent(url="http://x/v.mp4", fileSize=1024, medium="video")
        >>> video.file_size
        1024
    """

    url: str | None = None
    file_size: int | None = Field(default=None, alias="fileSize")
    type: str | None = None
    medium: str | None = None
    expression: str | None = None
    bitrate: Number | None = None
    framerate: Number | None = None
    samplingrate: Number | None = None
    channels: int | None = None
    duration: Number | None = None
    height: int | None = None
    width: int | None = None
    lang: str | None = None
    md5: str | None = None
    sha1: str | None = Field(default=None, alias="sha-1")
