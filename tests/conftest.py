"""
Shared test fixtures.

Provides pytest fixtures for common test resources including:
- Test configuration
- An empty feed with fixed dates
- A sample audio episode
- A YAML feed definition
"""

import pytest
from pathlib import Path
import tempfile
from datetime import datetime, timezone
from typing import Any, Dict

from podcast_rss.config import Config
from podcast_rss.models import EnclosureType, Feed, Item


@pytest.fixture
def temp_dir():
    """
    Create temporary directory for test files.

    Yields:
        Path: Temporary directory path
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_config() -> Config:
    """
    Create test configuration independent of the environment.

    Returns:
        Config: Test configuration
    """
    return Config(
        generator="podcast-rss tests",
        docs="https://www.rssboard.org/rss-specification",
        pretty_print=True,
        xml_encoding="UTF-8",
    )


@pytest.fixture
def feed(test_config: Config) -> Feed:
    """
    Create an empty feed with fixed publication dates.

    Returns:
        Feed: Feed without items
    """
    return Feed.new(
        "title",
        "https://example.com/",
        "description",
        pub_date=datetime(2024, 1, 15, 8, 30, tzinfo=timezone.utc),
        last_build_date=datetime(2024, 1, 16, 9, 0, tzinfo=timezone.utc),
        config=test_config,
    )


@pytest.fixture
def episode() -> Item:
    """
    Create a sample audio episode without link or GUID.

    Returns:
        Item: Episode with an MP3 enclosure
    """
    item = Item(title="Episode 1 - Pilot", description="First episode of the show.")
    item.add_enclosure("https://cdn.example.com/ep1.mp3", EnclosureType.MP3, 52428800)
    return item


@pytest.fixture
def feed_definition() -> Dict[str, Any]:
    """
    Create a feed definition as loaded from podcast.yaml.

    Returns:
        Dictionary with podcast and episodes sections
    """
    return {
        "podcast": {
            "title": "The Test Show",
            "link": "https://example.com/show",
            "description": "A show about tests.",
            "pub_date": "2024-01-15T08:30:00Z",
            "language": "en-us",
            "copyright": "2024 Test Show",
            "authors": ["Joe", "Lisa"],
            "owner": {"name": "Joe", "email": "joe@example.com"},
            "image": "https://example.com/cover.jpg",
            "subtitle": "Tests, weekly",
            "summary": "Everything about tests.",
            "parental_advisory": "clean",
            "type": "episodic",
            "atom_link": "https://example.com/feed.xml",
            "categories": ["Technology", "Education", "How To", "Courses"],
        },
        "episodes": [
            {
                "title": "Pilot",
                "description": "First episode.",
                "pub_date": "2024-01-15T08:30:00Z",
                "duration": 3725,
                "enclosure": {
                    "url": "https://cdn.example.com/1.mp3",
                    "type": "mp3",
                    "length": 5650889,
                },
            },
            {
                "title": "Show notes",
                "description": "Links from the pilot.",
                "link": "https://example.com/show/notes",
                "author": {"name": "Lisa", "email": "lisa@example.com"},
            },
        ],
    }
