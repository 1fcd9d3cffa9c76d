"""
Build feeds from podcast.yaml-style feed definitions.

A definition has a ``podcast`` block with channel metadata and an
``episodes`` list. Everything goes through the public Feed mutators and
``Feed.add_item``, so the same normalization and validation apply as for
feeds built in code.

Example podcast.yaml:
    podcast:
      title: "My Show"
      link: "https://example.com"
      description: "Weekly chats"
      language: "en-us"
      authors: ["Joe", "Lisa"]
      owner: {name: "Joe", email: "joe@example.com"}
      categories: ["Arts", "Books", "Technology"]
    episodes:
      - title: "Pilot"
        description: "First episode"
        pub_date: "2024-01-15T08:30:00Z"
        duration: 3600
        enclosure:
          url: "https://cdn.example.com/1.mp3"
          type: "mp3"
          length: 5650889
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

import yaml

from podcast_rss.categories import parse_categories, validate_category
from podcast_rss.models import Author, Feed, Item

if TYPE_CHECKING:
    from podcast_rss.config import Config

logger = logging.getLogger(__name__)


def _explicit_flag(value: Any) -> str:
    """YAML booleans become "true" / "false"; strings pass through."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return "" if value is None else str(value)


def _closed_captioned_flag(value: Any) -> str:
    """True becomes "Yes"; false leaves the element out."""
    if isinstance(value, bool):
        return "Yes" if value else ""
    return "" if value is None else str(value)


def build_item(data: Dict[str, Any]) -> Item:
    """
    Create an Item from an episode definition.

    Args:
        data: Episode dictionary from the feed definition

    Returns:
        Item ready to be passed to Feed.add_item
    """
    item = Item(
        title=data.get("title", ""),
        description=data.get("description", ""),
        link=data.get("link", ""),
        guid=data.get("guid", ""),
        category=data.get("category", ""),
        comments=data.get("comments", ""),
        itunes_subtitle=data.get("subtitle", ""),
        itunes_explicit=_explicit_flag(data.get("explicit")),
        itunes_is_closed_captioned=_closed_captioned_flag(data.get("closed_captioned")),
        itunes_order=str(data.get("order", "")),
    )

    author = data.get("author")
    if isinstance(author, dict):
        item.author = Author(**author)
    elif author:
        item.itunes_author = str(author)

    if data.get("pub_date"):
        item.add_pub_date(str(data["pub_date"]))
    if data.get("image"):
        item.add_image(data["image"])
    if data.get("summary"):
        item.add_summary(data["summary"])

    duration = data.get("duration")
    if isinstance(duration, int):
        item.add_duration(duration)
    elif duration:
        item.itunes_duration = str(duration)

    enclosure = data.get("enclosure")
    if enclosure:
        item.add_enclosure(
            enclosure.get("url", ""),
            enclosure.get("type"),
            int(enclosure.get("length", 0)),
        )

    return item


def build_feed(data: Dict[str, Any], config: Optional["Config"] = None) -> Feed:
    """
    Create a Feed from a parsed feed definition.

    Args:
        data: Dictionary with ``podcast`` and ``episodes`` keys
        config: Config object (optional, uses default if None)

    Returns:
        Populated Feed

    Raises:
        ValueError: If the podcast block is missing
        ItemValidationError: If an episode misses required fields
    """
    podcast = data.get("podcast")
    if not podcast:
        raise ValueError("Feed definition has no 'podcast' section")

    feed = Feed.new(
        podcast.get("title", ""),
        podcast.get("link", ""),
        podcast.get("description", ""),
        pub_date=podcast.get("pub_date"),
        last_build_date=podcast.get("last_build_date"),
        config=config,
    )

    feed.managing_editor = podcast.get("managing_editor", "")
    feed.web_master = podcast.get("web_master", "")
    feed.ttl = int(podcast.get("ttl", 0))

    feed.add_author(podcast.get("authors", []))
    feed.add_language(podcast.get("language", ""))
    feed.add_copyright(podcast.get("copyright", ""))
    feed.add_atom_link(podcast.get("atom_link", ""))
    feed.add_new_feed_url(podcast.get("new_feed_url", ""))
    feed.add_itunes_type(podcast.get("type", ""))
    feed.add_parental_advisory(podcast.get("parental_advisory", ""))
    feed.add_image(podcast.get("image", ""))
    feed.add_subtitle(podcast.get("subtitle", ""))
    feed.add_summary(podcast.get("summary", ""))

    owner = podcast.get("owner") or {}
    feed.add_owner(owner.get("name", ""), owner.get("email", ""))

    for category, subs in parse_categories(podcast.get("categories", [])).items():
        unknown = validate_category(category, subs)
        if unknown:
            logger.warning(
                "Unknown sub-categories for '%s': %s", category, ", ".join(unknown)
            )
        feed.add_category(category, subs)

    for episode in data.get("episodes") or []:
        feed.add_item(build_item(episode))

    logger.info(
        "Built feed '%s' with %d episode(s)", feed.title, len(feed.items)
    )
    return feed


def load_feed_file(path: Union[str, Path], config: Optional["Config"] = None) -> Feed:
    """
    Load a YAML feed definition and build the Feed.

    Args:
        path: Path to the YAML file
        config: Config object (optional, uses default if None)

    Returns:
        Populated Feed

    Raises:
        ValueError: If the file holds no definition at all
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not data:
        raise ValueError(f"Feed definition is empty: {path}")
    return build_feed(data, config=config)
