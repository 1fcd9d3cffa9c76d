"""
Pydantic data model for the podcast channel.

The Feed aggregate holds channel metadata and the ordered list of items.
Channel fields are populated through ``add_*`` mutators which ignore empty
input, and items enter the feed only through ``add_item``, which validates
and normalizes them first.

A Feed is not thread-safe: callers sharing one instance between threads
must serialize access themselves.

Example:
    >>> feed = Feed.new("My Show", "https://example.com", "Weekly chats")
    >>> feed.add_author(["Joe", "Lisa"])
    >>> item = Item(title="Pilot", description="First episode")
    >>> item.add_enclosure("https://cdn.example.com/1.mp3", EnclosureType.MP3, 5650889)
    >>> feed.add_item(item)
    1
"""

import logging
from typing import IO, TYPE_CHECKING, Any, List, Optional, Sequence

from pydantic import BaseModel, Field

from podcast_rss.dates import DateLike, format_rfc1123z
from podcast_rss.errors import FieldViolation, ItemValidationError
from podcast_rss.models.item import (
    SUMMARY_MAX_LENGTH,
    Author,
    Item,
    ItunesImage,
    resolve_enclosure_type,
)

if TYPE_CHECKING:
    from podcast_rss.config import Config

logger = logging.getLogger(__name__)


SUBTITLE_MAX_LENGTH = 64

# Accepted parental advisory values and their <itunes:explicit> rendering
PARENTAL_ADVISORY = {
    "explicit": "true",
    "clean": "false",
}


class Image(BaseModel):
    """RSS <image> block for the channel."""
    url: str
    title: str = ""
    link: str = ""


class AtomLink(BaseModel):
    """Self-reference rendered as <atom:link/>."""
    href: str
    rel: str = "self"
    type: str = "application/rss+xml"


class Owner(BaseModel):
    """Contact for the podcast, rendered as <itunes:owner>."""
    name: str = ""
    email: str


class Summary(BaseModel):
    """Channel summary, rendered as a CDATA block."""
    text: str


class ItunesCategory(BaseModel):
    """A category node; top-level nodes may nest sub-category nodes."""
    text: str
    categories: List["ItunesCategory"] = Field(default_factory=list)


class Feed(BaseModel):
    """
    Podcast channel with its items.

    Title, link and description are required by RSS but not enforced here.
    pub_date and last_build_date are stored as formatted strings and are
    fixed once the feed is created.
    """
    title: str
    link: str
    description: str
    category: str = ""
    copyright: str = ""
    docs: str = ""
    generator: str = ""
    language: str = ""
    last_build_date: str = ""
    managing_editor: str = ""
    pub_date: str = ""
    ttl: int = 0
    web_master: str = ""
    image: Optional[Image] = None
    atom_link: Optional[AtomLink] = None

    itunes_author: str = ""
    itunes_subtitle: str = ""
    itunes_summary: Optional[Summary] = None
    itunes_block: str = ""
    itunes_image: Optional[ItunesImage] = None
    itunes_explicit: str = ""
    itunes_complete: str = ""
    itunes_new_feed_url: str = ""
    itunes_owner: Optional[Owner] = None
    itunes_categories: List[ItunesCategory] = Field(default_factory=list)
    itunes_type: str = ""

    items: List[Item] = Field(default_factory=list)

    @classmethod
    def new(
        cls,
        title: str,
        link: str,
        description: str,
        pub_date: Optional[DateLike] = None,
        last_build_date: Optional[DateLike] = None,
        config: Optional["Config"] = None,
    ) -> "Feed":
        """
        Create a feed with formatted publication and build dates.

        Each missing date is replaced by the current UTC time on its own.

        Args:
            title: Podcast title
            link: Podcast website
            description: Podcast description
            pub_date: Publication date (datetime or date string)
            last_build_date: Last build date (datetime or date string)
            config: Config object (optional, uses default if None)

        Returns:
            New Feed instance
        """
        if config is None:
            from podcast_rss.config import get_config
            config = get_config()

        return cls(
            title=title,
            link=link,
            description=description,
            pub_date=format_rfc1123z(pub_date),
            last_build_date=format_rfc1123z(last_build_date),
            generator=config.generator,
            docs=config.docs,
        )

    # ------------------------------------------------------------------
    #  Channel mutators
    # ------------------------------------------------------------------

    def add_author(self, names: Sequence[str]) -> None:
        """Set the iTunes author from a list of names joined by ", "."""
        if not names:
            return
        self.itunes_author = ", ".join(names)

    def add_atom_link(self, href: str) -> None:
        """Add the feed's self-reference link."""
        if href:
            self.atom_link = AtomLink(href=href)

    def add_category(self, category: str, subs: Sequence[str] = ()) -> None:
        """
        Add an iTunes category with optional sub-categories.

        Every call appends another top-level node, so a feed can carry
        several categories; ``category`` always holds the latest one.
        Empty sub-category names are dropped. Names are not checked against
        the Apple taxonomy; use ``podcast_rss.categories.validate_category``
        for that.
        """
        if not category:
            return

        self.category = category
        self.itunes_categories.append(
            ItunesCategory(
                text=category,
                categories=[ItunesCategory(text=sub) for sub in subs if sub],
            )
        )

    def add_copyright(self, text: str) -> None:
        if text:
            self.copyright = text

    def add_image(self, url: str) -> None:
        """Set both the RSS image block and the iTunes artwork."""
        if not url:
            return
        self.image = Image(url=url, title=self.title, link=self.link)
        self.itunes_image = ItunesImage(href=url)

    def add_itunes_type(self, show_type: str) -> None:
        """Set the show type; callers pass "episodic" or "serial"."""
        if show_type:
            self.itunes_type = show_type

    def add_language(self, language: str) -> None:
        if language:
            self.language = language

    def add_new_feed_url(self, url: str) -> None:
        if url:
            self.itunes_new_feed_url = url

    def add_owner(self, name: str, email: str) -> None:
        """Set the iTunes owner; an owner without email is ignored."""
        if email:
            self.itunes_owner = Owner(name=name, email=email)

    def add_parental_advisory(self, value: str) -> None:
        """Map "explicit" / "clean" to the iTunes explicit flag."""
        if value in PARENTAL_ADVISORY:
            self.itunes_explicit = PARENTAL_ADVISORY[value]

    def add_subtitle(self, text: str) -> None:
        if text:
            self.itunes_subtitle = text[:SUBTITLE_MAX_LENGTH]

    def add_summary(self, text: str) -> None:
        if text:
            self.itunes_summary = Summary(text=text[:SUMMARY_MAX_LENGTH])

    # ------------------------------------------------------------------
    #  Items
    # ------------------------------------------------------------------

    def add_item(self, item: Item) -> int:
        """
        Validate, normalize and append an item.

        The feed stores a normalized copy; the caller's item is left as is.
        On failure nothing is appended.

        Normalization:
        - negative enclosure length becomes 0
        - missing link is taken from the enclosure url
        - missing guid is taken from the link
        - an item without author inherits the managing editor, or failing
          that the iTunes author of the feed

        Args:
            item: Item to add

        Returns:
            Number of items in the feed after the append

        Raises:
            ItemValidationError: If required fields are missing
        """
        violations = validate_item(item)
        if violations:
            logger.warning(
                "Rejected item '%s': %s",
                item.title,
                "; ".join(str(v) for v in violations),
            )
            raise ItemValidationError(violations)

        entry = item.model_copy(deep=True)

        if entry.enclosure is not None:
            entry.enclosure.type = resolve_enclosure_type(entry.enclosure.type)
            if entry.enclosure.length < 0:
                entry.enclosure.length = 0
            if not entry.link:
                entry.link = entry.enclosure.url

        if not entry.guid:
            entry.guid = entry.link

        if not entry.has_author():
            if self.managing_editor:
                entry.author = Author(email=self.managing_editor)
            elif self.itunes_author:
                entry.author = Author(email=self.itunes_author)

        if entry.author is not None:
            entry.author_formatted = entry.author.formatted()
            if not entry.itunes_author:
                entry.itunes_author = entry.author.email

        if entry.pub_date is not None:
            entry.pub_date_formatted = format_rfc1123z(entry.pub_date)

        self.items.append(entry)
        logger.debug("Added item '%s' (guid=%s)", entry.title, entry.guid)
        return len(self.items)

    # ------------------------------------------------------------------
    #  Serialization
    # ------------------------------------------------------------------

    def encode(self, sink: IO[Any]) -> None:
        """Write the feed as RSS XML to sink. See podcast_rss.encoder.encode."""
        from podcast_rss.encoder import encode
        encode(self, sink)

    def to_bytes(self) -> bytes:
        from podcast_rss.encoder import to_bytes
        return to_bytes(self)

    def to_string(self) -> str:
        from podcast_rss.encoder import to_string
        return to_string(self)


def validate_item(item: Item) -> List[FieldViolation]:
    """
    Check an item against the minimum feed requirements.

    Returns:
        Violations in check order; empty when the item is valid
    """
    violations: List[FieldViolation] = []

    if not item.title:
        violations.append(FieldViolation("Title", "Title is required"))
    if not item.description:
        violations.append(FieldViolation("Description", "Description is required"))

    enclosure = item.enclosure
    if enclosure is not None:
        if not enclosure.url:
            violations.append(
                FieldViolation("Enclosure.URL", "Enclosure.URL is required")
            )
        if resolve_enclosure_type(enclosure.type) is None:
            violations.append(
                FieldViolation("Enclosure.Type", "Enclosure.Type is required")
            )
    elif not item.link:
        violations.append(FieldViolation("Link", "Link is required"))

    return violations


__all__ = [
    "AtomLink",
    "Feed",
    "Image",
    "ItunesCategory",
    "Owner",
    "Summary",
    "validate_item",
]
