"""
Data models for podcast feeds.

Provides the Feed channel aggregate, the Item entry model and the
Enclosure media descriptor.
"""

from podcast_rss.models.item import Author, Enclosure, EnclosureType, Item, ItunesImage
from podcast_rss.models.feed import (
    AtomLink,
    Feed,
    Image,
    ItunesCategory,
    Owner,
    Summary,
    validate_item,
)

__all__ = [
    "AtomLink",
    "Author",
    "Enclosure",
    "EnclosureType",
    "Feed",
    "Image",
    "Item",
    "ItunesCategory",
    "ItunesImage",
    "Owner",
    "Summary",
    "validate_item",
]
