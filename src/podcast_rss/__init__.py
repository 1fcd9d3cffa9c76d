"""
Podcast RSS Generator

Builds RSS 2.0 podcast feeds with Apple Podcasts (iTunes) extensions from
an in-memory model, validating episodes before they are serialized.
"""

__version__ = "0.1.0"
__author__ = "Podcast RSS Team"

from podcast_rss.config import Config
from podcast_rss.encoder import encode, to_bytes, to_string
from podcast_rss.errors import FeedError, FeedWriteError, ItemValidationError
from podcast_rss.models import Enclosure, EnclosureType, Feed, Item

__all__ = [
    "Config",
    "Enclosure",
    "EnclosureType",
    "Feed",
    "FeedError",
    "FeedWriteError",
    "Item",
    "ItemValidationError",
    "encode",
    "to_bytes",
    "to_string",
    "__version__",
]
