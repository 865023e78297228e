"""Shared fixtures for feedscribe tests."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from feedscribe.models.base import Person
from feedscribe.models.feed import FeedMetadata, Item


@pytest.fixture
def fixed_date() -> datetime:
    """2020-01-01T00:00:00Z."""
    return datetime(2020, 1, 1, tzinfo=UTC)


@pytest.fixture
def metadata(fixed_date: datetime) -> FeedMetadata:
    """Minimal feed metadata with a fixed update time."""
    return FeedMetadata(
        title="T",
        id="urn:1",
        link="http://x/",
        description="A test feed",
        updated=fixed_date,
    )


@pytest.fixture
def full_metadata(fixed_date: datetime) -> FeedMetadata:
    """Feed metadata with every optional field set."""
    return FeedMetadata(
        title="Full Feed",
        id="urn:full",
        link="http://x/",
        description="Everything set",
        updated=fixed_date,
        generator="test-generator",
        author=Person(name="Jane Doe", email="jane@example.com", link="http://jane.example/"),
        image="http://x/logo.png",
        favicon="http://x/favicon.ico",
        copyright="(c) 2020",
        feed="http://x/rss.xml",
        hub="http://hub.example/",
        feedLinks={"atom": "http://x/atom.xml", "json": "http://x/feed.json"},
    )


@pytest.fixture
def item(fixed_date: datetime) -> Item:
    """Single plain item."""
    return Item(id="i1", link="http://x/1", title="Hi", date=fixed_date)


@pytest.fixture
def items(fixed_date: datetime) -> list[Item]:
    """Three plain items in a known order."""
    return [
        Item(id=f"i{n}", link=f"http://x/{n}", title=f"Item {n}", date=fixed_date)
        for n in (1, 2, 3)
    ]
