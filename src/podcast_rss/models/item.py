"""
Pydantic data models for podcast items and their enclosures.

An Item is one entry of the feed. Audio and video episodes attach their
media file as an Enclosure; plain articles only need a link.

Article minimal requirements:
- title
- description
- link

Episode minimal requirements:
- title
- description
- enclosure (url and type; length is recommended)
"""

from datetime import datetime
from enum import IntEnum
from typing import Any, Optional

from pydantic import BaseModel, field_validator

from podcast_rss.dates import DateLike, format_duration, format_rfc1123z, to_datetime


SUMMARY_MAX_LENGTH = 4000


class EnclosureType(IntEnum):
    """Media types accepted for item enclosures."""
    M4A = 1
    M4V = 2
    MP4 = 3
    MP3 = 4
    MOV = 5
    PDF = 6
    EPUB = 7

    @property
    def mime_type(self) -> str:
        """MIME type written to the enclosure's type attribute."""
        return _MIME_TYPES[self]

    @property
    def extension(self) -> str:
        """Conventional file extension for this media type."""
        return f".{self.name.lower()}"

    @classmethod
    def from_name(cls, value: str) -> "EnclosureType":
        """
        Resolve a member name, file extension or MIME type.

        Matching is case-insensitive, so "mp3", ".MP3" and "audio/mpeg"
        all resolve to EnclosureType.MP3.

        Raises:
            ValueError: If value matches no known media type
        """
        key = value.strip().lower()
        for member in cls:
            if key in (member.name.lower(), member.extension, member.mime_type):
                return member
        raise ValueError(f"Unknown enclosure type '{value}'")


_MIME_TYPES = {
    EnclosureType.M4A: "audio/x-m4a",
    EnclosureType.M4V: "video/x-m4v",
    EnclosureType.MP4: "video/mp4",
    EnclosureType.MP3: "audio/mpeg",
    EnclosureType.MOV: "video/quicktime",
    EnclosureType.PDF: "application/pdf",
    EnclosureType.EPUB: "document/x-epub",
}


def resolve_enclosure_type(value: Any) -> Optional[EnclosureType]:
    """
    Return the EnclosureType for value, or None when unset or unknown.

    0, "" and None all mean the type was never set.
    """
    if isinstance(value, EnclosureType):
        return value
    if not value:
        return None
    try:
        if isinstance(value, str):
            return EnclosureType.from_name(value)
        return EnclosureType(value)
    except ValueError:
        return None


class Enclosure(BaseModel):
    """
    Downloadable or streamable media asset attached to an item.

    Length is the size of the asset; negative values are clamped to 0 when
    the item is added to a feed.
    """
    url: str = ""
    type: Optional[EnclosureType] = None
    length: int = 0

    @field_validator("type", mode="before")
    @classmethod
    def coerce_type(cls, v: Any) -> Any:
        """Map unset markers to None and names/MIME types to members."""
        if isinstance(v, str) and v:
            v = int(v) if v.isdigit() else EnclosureType.from_name(v)
        return v or None

    @property
    def type_formatted(self) -> str:
        """MIME type of the enclosure, empty when the type is unset."""
        media_type = resolve_enclosure_type(self.type)
        return media_type.mime_type if media_type else ""


class Author(BaseModel):
    """Item author as an (optional) name and email address."""
    name: str = ""
    email: str = ""

    def formatted(self) -> str:
        """Render as RSS expects: "email (name)" or just the email."""
        if self.name:
            return f"{self.email} ({self.name})"
        return self.email


class ItunesImage(BaseModel):
    """Artwork referenced by an <itunes:image href="..."/> element."""
    href: str


class Item(BaseModel):
    """
    A single entry of a podcast feed.

    Fields prefixed with ``itunes_`` are rendered under the iTunes
    namespace and are passed through as set by the caller.
    """
    guid: str = ""
    title: str = ""
    link: str = ""
    description: str = ""
    author: Optional[Author] = None
    author_formatted: str = ""
    category: str = ""
    comments: str = ""
    source: str = ""
    pub_date: Optional[datetime] = None
    pub_date_formatted: str = ""
    enclosure: Optional[Enclosure] = None

    itunes_author: str = ""
    itunes_subtitle: str = ""
    itunes_summary: str = ""
    itunes_image: Optional[ItunesImage] = None
    itunes_duration: str = ""
    itunes_explicit: str = ""
    itunes_is_closed_captioned: str = ""
    itunes_order: str = ""

    @field_validator("pub_date", mode="before")
    @classmethod
    def parse_pub_date(cls, v: Any) -> Any:
        """Accept dates and date strings as well as datetime values."""
        if v and not isinstance(v, datetime):
            return to_datetime(v)
        return v or None

    def add_enclosure(
        self,
        url: str,
        enclosure_type: Optional[EnclosureType],
        length: int = 0,
    ) -> None:
        """Attach the downloadable asset to this item."""
        self.enclosure = Enclosure(url=url, type=enclosure_type, length=length)

    def add_image(self, url: str) -> None:
        """Set the episode artwork; empty url is ignored."""
        if url:
            self.itunes_image = ItunesImage(href=url)

    def add_pub_date(self, value: DateLike) -> None:
        """Set the publication date and its RFC 1123 rendering."""
        self.pub_date = to_datetime(value)
        self.pub_date_formatted = format_rfc1123z(self.pub_date)

    def add_summary(self, text: str) -> None:
        """Set the iTunes summary, cut to 4000 characters."""
        if text:
            self.itunes_summary = text[:SUMMARY_MAX_LENGTH]

    def add_duration(self, seconds: int) -> None:
        """Set the iTunes duration from a length in seconds."""
        self.itunes_duration = format_duration(seconds)

    def has_author(self) -> bool:
        """True if the caller supplied any author information."""
        return self.author is not None or bool(self.itunes_author)


__all__ = [
    "Author",
    "Enclosure",
    "EnclosureType",
    "Item",
    "ItunesImage",
    "resolve_enclosure_type",
]
