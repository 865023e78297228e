"""Tests for feedscribe.feed - Feed builder."""

from __future__ import annotations

import json

import pytest

from feedscribe.core.config import RenderOptions
from feedscribe.core.exceptions import RenderError, UnknownFormatError
from feedscribe.feed import FORMATS, Feed
from feedscribe.models.base import Extension, Person
from feedscribe.models.feed import FeedMetadata, Item

# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture
def feed(metadata: FeedMetadata, item: Item) -> Feed:
    """Feed with one item, a category and a contributor."""
    feed = Feed(metadata=metadata)
    feed.add_item(item)
    feed.add_category("news")
    feed.add_contributor(Person(name="Helper"))
    return feed


# =============================================================================
# Builder Tests
# =============================================================================


class TestFeedBuilder:
    """Tests for the add_* mutators."""

    def test_starts_empty(self, metadata: FeedMetadata) -> None:
        """A new feed has no items or extras."""
        feed = Feed(metadata=metadata)
        assert feed.items == []
        assert feed.categories == []
        assert feed.contributors == []
        assert feed.extensions == []
        assert feed.custom_fields == []

    def test_add_item_accepts_dicts(self, metadata: FeedMetadata) -> None:
        """Items can be given as plain dicts."""
        feed = Feed(metadata=metadata)
        feed.add_item({"title": "a", "author": {"name": "Jane"}})
        assert feed.items[0].authors[0].name == "Jane"

    def test_add_item_keeps_order(self, metadata: FeedMetadata, items: list[Item]) -> None:
        """Items are kept in insertion order."""
        feed = Feed(metadata=metadata)
        for item in items:
            feed.add_item(item)
        assert [i.id for i in feed.items] == ["i1", "i2", "i3"]

    def test_add_extension_and_custom_field(self, metadata: FeedMetadata) -> None:
        """Extensions and custom fields are recorded."""
        feed = Feed(metadata=metadata)
        feed.add_extension({"name": "_x", "objects": {"a": 1}})
        feed.add_custom_field("itunes:duration")
        assert feed.extensions == [Extension(name="_x", objects={"a": 1})]
        assert feed.custom_fields == ["itunes:duration"]

    def test_load_from_json(self) -> None:
        """A whole feed description loads from JSON text."""
        raw = json.dumps(
            {
                "metadata": {"title": "T", "feedLinks": {"json": "http://x/feed.json"}},
                "items": [{"title": "a", "date": "2020-01-01T00:00:00Z"}],
                "categories": ["c"],
                "custom_fields": ["x"],
            }
        )
        feed = Feed.model_validate_json(raw)
        assert feed.metadata.feed_links.json_ == "http://x/feed.json"
        assert feed.items[0].date is not None
        assert feed.items[0].date.year == 2020


# =============================================================================
# Rendering Tests
# =============================================================================


class TestFeedRendering:
    """Tests for the terminal render operations."""

    def test_rss2(self, feed: Feed) -> None:
        """RSS output includes categories."""
        text = feed.rss2()
        assert text.startswith('<?xml version="1.0" encoding="utf-8"?>\n<rss version="2.0">')
        assert "<category>news</category>" in text

    def test_atom1(self, feed: Feed) -> None:
        """Atom output includes contributors and categories."""
        text = feed.atom1()
        assert '<feed xmlns="http://www.w3.org/2005/Atom">' in text
        assert '<category term="news"/>' in text
        assert "<name>Helper</name>" in text

    def test_json1(self, feed: Feed) -> None:
        """JSON output parses and includes extensions."""
        feed.add_extension(Extension(name="_x", objects=True))
        doc = json.loads(feed.json1())
        assert doc["_x"] is True
        assert doc["items"][0]["id"] == "i1"

    def test_options_indent(self, feed: Feed) -> None:
        """Indent options reach the renderers."""
        options = RenderOptions(xml_indent="  ", json_indent=2)
        assert "\n  <channel>" in feed.rss2(options)
        assert feed.json1(options).startswith('{\n  "version"')

    def test_json_unserializable_extension(self, feed: Feed) -> None:
        """Payloads JSON cannot encode raise RenderError."""
        feed.add_extension(Extension(name="_bad", objects={1, 2}))
        with pytest.raises(RenderError):
            feed.json1()

    def test_repeat_renders_identical(self, feed: Feed) -> None:
        """Rendering does not change the model."""
        assert feed.rss2() == feed.rss2()
        assert feed.atom1() == feed.atom1()
        assert feed.json1() == feed.json1()

    @pytest.mark.parametrize("format", FORMATS)
    def test_serialize(self, feed: Feed, format: str) -> None:
        """serialize() dispatches by format name."""
        assert feed.serialize(format) == getattr(feed, format)()

    def test_serialize_unknown(self, feed: Feed) -> None:
        """Unknown names raise UnknownFormatError."""
        with pytest.raises(UnknownFormatError) as exc_info:
            feed.serialize("rss3")
        assert exc_info.value.format == "rss3"


class TestDeprecatedRender:
    """Tests for Feed.render()."""

    def test_atom(self, feed: Feed) -> None:
        """atom-1.0 renders Atom, with a deprecation warning."""
        with pytest.warns(DeprecationWarning):
            assert feed.render("atom-1.0") == feed.atom1()

    def test_anything_else_is_rss(self, feed: Feed) -> None:
        """Other names fall back to RSS."""
        with pytest.warns(DeprecationWarning):
            assert feed.render("rss-2.0") == feed.rss2()
        with pytest.warns(DeprecationWarning):
            assert feed.render() == feed.rss2()

    def test_logs_warning(self, feed: Feed, caplog: pytest.LogCaptureFixture) -> None:
        """The deprecation is logged too."""
        with pytest.warns(DeprecationWarning):
            feed.render()
        assert "deprecated" in caplog.text
