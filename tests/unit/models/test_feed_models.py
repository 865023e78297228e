"""Tests for feedscribe.models."""

from __future__ import annotations

import pytest

from feedscribe.models.base import Extension, Person
from feedscribe.models.feed import FeedLinks, FeedMetadata, Item
from feedscribe.models.media import (
    MRSS_CATEGORY_SCHEME,
    Enclosure,
    MediaCategory,
    MediaContent,
    Thumbnail,
    TorrentMetainfo,
)


class TestPerson:
    """Tests for Person model."""

    def test_all_fields_optional(self) -> None:
        """A person can be empty."""
        person = Person()
        assert person.name is None
        assert person.email is None
        assert person.link is None

    def test_rejects_unknown_fields(self) -> None:
        """Extra keys are refused."""
        with pytest.raises(ValueError):
            Person(nickname="jd")  # type: ignore[call-arg]


class TestExtension:
    """Tests for Extension model."""

    def test_name_required(self) -> None:
        """Extensions need a name."""
        with pytest.raises(ValueError):
            Extension(name="", objects={})

    def test_payload_kept_as_is(self) -> None:
        """Payload is not validated."""
        ext = Extension(name="_x", objects=[1, {"a": None}])
        assert ext.objects == [1, {"a": None}]


class TestFeedMetadata:
    """Tests for FeedMetadata model."""

    def test_title_required(self) -> None:
        """Title is required."""
        with pytest.raises(ValueError):
            FeedMetadata()  # type: ignore[call-arg]

    def test_feed_links_alias(self) -> None:
        """camelCase feedLinks and the json key are accepted."""
        meta = FeedMetadata(title="T", feedLinks={"json": "http://x/feed.json"})
        assert meta.feed_links == FeedLinks(json_="http://x/feed.json")

    def test_self_link_prefers_feed(self) -> None:
        """`feed` wins over the Atom feed link."""
        meta = FeedMetadata(
            title="T",
            feed="http://x/rss.xml",
            feed_links=FeedLinks(atom="http://x/atom.xml"),
        )
        assert meta.self_link == "http://x/rss.xml"

    def test_self_link_falls_back_to_atom_link(self) -> None:
        """Without `feed`, the Atom link is the self link."""
        meta = FeedMetadata(title="T", feed_links=FeedLinks(atom="http://x/atom.xml"))
        assert meta.self_link == "http://x/atom.xml"

    def test_self_link_absent(self) -> None:
        """No self link when neither is set."""
        assert FeedMetadata(title="T").self_link is None


class TestItem:
    """Tests for Item model."""

    def test_defaults(self) -> None:
        """Lists default empty, nsfw false."""
        item = Item()
        assert item.authors == []
        assert item.contributors == []
        assert item.torrent == []
        assert item.custom == {}
        assert item.nsfw is False

    def test_single_author_becomes_list(self) -> None:
        """A single author object is wrapped in a list."""
        item = Item(author={"name": "Jane"})
        assert item.authors == [Person(name="Jane")]

    def test_authors_by_field_name(self) -> None:
        """Field name works as well as the alias."""
        item = Item(authors=[Person(name="A"), Person(name="B")])
        assert [a.name for a in item.authors] == ["A", "B"]

    def test_torrent_string(self) -> None:
        """A bare torrent URL becomes metainfo."""
        item = Item(torrent="http://x/a.torrent")
        assert item.torrent == [TorrentMetainfo(url="http://x/a.torrent")]

    def test_torrent_mixed_list(self) -> None:
        """Lists may mix strings and objects."""
        item = Item(
            torrent=["http://x/a.torrent", {"url": "http://x/b.torrent", "size_in_bytes": 10}]
        )
        assert [t.url for t in item.torrent] == ["http://x/a.torrent", "http://x/b.torrent"]
        assert item.torrent[1].size_in_bytes == 10

    def test_torrent_keeps_extra_fields(self) -> None:
        """Unknown metainfo keys are kept."""
        item = Item(torrent={"url": "http://x/a.torrent", "title": "A"})
        assert item.torrent[0].model_dump(exclude_none=True) == {
            "url": "http://x/a.torrent",
            "title": "A",
        }

    def test_thumbnail_forms(self) -> None:
        """Thumbnails accept a string, an object or a list."""
        assert Item(thumbnail="http://x/t.jpg").thumbnail == [Thumbnail(url="http://x/t.jpg")]
        assert Item(thumbnail={"url": "http://x/t.jpg", "width": 10}).thumbnail[0].width == 10
        assert len(Item(thumbnail=["http://x/a.jpg", "http://x/b.jpg"]).thumbnail) == 2

    def test_image_string(self) -> None:
        """A bare image URL becomes an enclosure."""
        assert Item(image="http://x/i.png").image == Enclosure(url="http://x/i.png")

    def test_camel_case_aliases(self) -> None:
        """MRSS camelCase keys load."""
        item = Item.model_validate(
            {
                "peerLinks": [{"href": "http://p/1", "type": "video/mp4"}],
                "subTitle": [{"href": "http://s/en.vtt", "type": "text/vtt", "lang": "en"}],
                "community": {"starRating": {"average": 4.5}},
                "embed": {"url": "http://e/", "allowFullScreen": True},
            }
        )
        assert item.peer_links[0].href == "http://p/1"
        assert item.subtitles[0].lang == "en"
        assert item.community is not None
        assert item.community.star_rating is not None
        assert item.community.star_rating.average == 4.5
        assert item.embed is not None
        assert item.embed.allow_full_screen is True

    def test_rejects_unknown_fields(self) -> None:
        """Custom values go in `custom`, not on the item."""
        with pytest.raises(ValueError):
            Item(itunes_duration="10:00")  # type: ignore[call-arg]


class TestMediaModels:
    """Tests for media models."""

    def test_category_default_scheme(self) -> None:
        """Categories default to the MRSS category schema."""
        assert MediaCategory(value="music").scheme == MRSS_CATEGORY_SCHEME

    def test_media_content_aliases(self) -> None:
        """fileSize and sha-1 keys load."""
        video = MediaContent.model_validate(
            {"url": "http://x/v.mp4", "fileSize": 100, "sha-1": "abc"}
        )
        assert video.file_size == 100
        assert video.sha1 == "abc"

    def test_media_content_is_media_asset(self) -> None:
        """Nested content carries its own media fields."""
        video = MediaContent(url="http://x/v.mp4", keywords=["k"], thumbnail="http://x/t.jpg")
        assert video.keywords == ["k"]
        assert video.thumbnail[0].url == "http://x/t.jpg"
