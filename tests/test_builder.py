"""
Tests for building feeds from YAML feed definitions.

Covers:
- Channel fields mapped onto the Feed mutators
- Flat category lists grouped through the taxonomy
- Episodes with enclosures, durations, authors and YAML boolean flags
- Validation errors propagated from add_item
- Loading definitions from disk
"""

import logging

import pytest
import yaml

from podcast_rss.builder import build_feed, build_item, load_feed_file
from podcast_rss.errors import ItemValidationError
from podcast_rss.models import EnclosureType


class TestBuildFeed:
    """Tests for build_feed()."""

    def test_channel_fields(self, feed_definition, test_config):
        feed = build_feed(feed_definition, config=test_config)

        assert feed.title == "The Test Show"
        assert feed.pub_date == "Mon, 15 Jan 2024 08:30:00 +0000"
        assert feed.language == "en-us"
        assert feed.itunes_author == "Joe, Lisa"
        assert feed.itunes_owner.email == "joe@example.com"
        assert feed.itunes_image.href == "https://example.com/cover.jpg"
        assert feed.itunes_explicit == "false"
        assert feed.itunes_type == "episodic"
        assert feed.atom_link.href == "https://example.com/feed.xml"
        assert feed.generator == "podcast-rss tests"

    def test_categories_are_grouped(self, feed_definition, test_config):
        feed = build_feed(feed_definition, config=test_config)

        assert [c.text for c in feed.itunes_categories] == ["Technology", "Education"]
        assert [c.text for c in feed.itunes_categories[1].categories] == ["How To", "Courses"]
        assert feed.category == "Education"

    def test_unknown_sub_category_is_logged(self, feed_definition, test_config, caplog):
        feed_definition["podcast"]["categories"] = ["Arts", "Pottery"]

        with caplog.at_level(logging.WARNING, logger="podcast_rss.builder"):
            feed = build_feed(feed_definition, config=test_config)

        assert "Pottery" in caplog.text
        assert feed.itunes_categories[0].categories[0].text == "Pottery"

    def test_episodes(self, feed_definition, test_config):
        feed = build_feed(feed_definition, config=test_config)

        assert len(feed.items) == 2
        audio, notes = feed.items
        assert audio.link == "https://cdn.example.com/1.mp3"
        assert audio.guid == "https://cdn.example.com/1.mp3"
        assert audio.enclosure.type is EnclosureType.MP3
        assert audio.enclosure.length == 5650889
        assert audio.itunes_duration == "01:02:05"
        assert audio.itunes_author == "Joe, Lisa"
        assert notes.author_formatted == "lisa@example.com (Lisa)"

    def test_missing_podcast_section(self, test_config):
        with pytest.raises(ValueError, match="podcast"):
            build_feed({"episodes": []}, config=test_config)

    def test_invalid_episode(self, feed_definition, test_config):
        feed_definition["episodes"].append({"title": "No description"})

        with pytest.raises(ItemValidationError, match="Description is required"):
            build_feed(feed_definition, config=test_config)


class TestBuildItem:
    """Tests for build_item()."""

    def test_string_author(self):
        item = build_item({"title": "t", "description": "d", "author": "Guest"})

        assert item.itunes_author == "Guest"
        assert item.author is None

    def test_string_duration(self):
        item = build_item({"title": "t", "description": "d", "duration": "45:30"})

        assert item.itunes_duration == "45:30"

    def test_enclosure_mime_type(self):
        item = build_item({
            "title": "t",
            "description": "d",
            "enclosure": {"url": "http://a.co/1.mp4", "type": "video/mp4", "length": "10"},
        })

        assert item.enclosure.type is EnclosureType.MP4
        assert item.enclosure.length == 10

    def test_boolean_flags(self):
        item = build_item({
            "title": "t",
            "description": "d",
            "link": "http://a.co/",
            "explicit": False,
            "closed_captioned": True,
        })

        assert item.itunes_explicit == "false"
        assert item.itunes_is_closed_captioned == "Yes"

        item = build_item({
            "title": "t",
            "description": "d",
            "explicit": True,
            "closed_captioned": False,
        })

        assert item.itunes_explicit == "true"
        assert item.itunes_is_closed_captioned == ""

    def test_string_flags_verbatim(self):
        item = build_item({
            "title": "t",
            "description": "d",
            "explicit": "clean",
            "closed_captioned": "Yes",
        })

        assert item.itunes_explicit == "clean"
        assert item.itunes_is_closed_captioned == "Yes"

    def test_flags_unset(self):
        item = build_item({"title": "t", "description": "d"})

        assert item.itunes_explicit == ""
        assert item.itunes_is_closed_captioned == ""


class TestLoadFeedFile:
    """Tests for load_feed_file()."""

    def test_loads_yaml(self, feed_definition, test_config, temp_dir):
        path = temp_dir / "podcast.yaml"
        path.write_text(yaml.safe_dump(feed_definition), encoding="utf-8")

        feed = load_feed_file(path, config=test_config)

        assert feed.title == "The Test Show"
        assert len(feed.items) == 2

    def test_unquoted_yaml_dates(self, test_config, temp_dir):
        path = temp_dir / "podcast.yaml"
        path.write_text(
            "podcast:\n"
            "  title: Show\n"
            "  link: https://example.com\n"
            "  description: Desc\n"
            "  pub_date: 2024-01-15\n"
            "episodes:\n"
            "  - title: Pilot\n"
            "    description: First\n"
            "    link: https://example.com/1\n"
            "    pub_date: 2024-01-15 08:30:00\n",
            encoding="utf-8",
        )

        feed = load_feed_file(path, config=test_config)

        assert feed.pub_date == "Mon, 15 Jan 2024 00:00:00 +0000"
        assert feed.items[0].pub_date_formatted == "Mon, 15 Jan 2024 08:30:00 +0000"

    def test_unquoted_yaml_booleans(self, test_config, temp_dir):
        path = temp_dir / "podcast.yaml"
        path.write_text(
            "podcast:\n"
            "  title: Show\n"
            "  link: https://example.com\n"
            "  description: Desc\n"
            "episodes:\n"
            "  - title: Pilot\n"
            "    description: First\n"
            "    link: https://example.com/1\n"
            "    explicit: false\n"
            "    closed_captioned: true\n",
            encoding="utf-8",
        )

        item = load_feed_file(path, config=test_config).items[0]

        assert item.itunes_explicit == "false"
        assert item.itunes_is_closed_captioned == "Yes"

    def test_empty_file(self, test_config, temp_dir):
        path = temp_dir / "podcast.yaml"
        path.write_text("# nothing yet\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Feed definition is empty"):
            load_feed_file(path, config=test_config)
