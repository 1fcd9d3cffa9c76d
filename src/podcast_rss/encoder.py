"""
RSS 2.0 serialization for podcast feeds.

Renders a Feed into an RSS document whose root declares the iTunes,
content and Atom namespaces. Elements are emitted in the order of the
CHANNEL_FIELDS and ITEM_FIELDS tables below; unset optional fields are
left out entirely.

Example:
    >>> with open("feed.xml", "wb") as f:
    ...     encode(feed, f)
"""

import io
import logging
import re
from typing import IO, TYPE_CHECKING, Any, Callable, List, Optional, Tuple

from lxml import etree

from podcast_rss.errors import FeedWriteError

if TYPE_CHECKING:
    from podcast_rss.config import Config

logger = logging.getLogger(__name__)


ITUNES_NS = "http://www.itunes.com/dtds/podcast-1.0.dtd"
CONTENT_NS = "http://purl.org/rss/1.0/modules/content/"
ATOM_NS = "http://www.w3.org/2005/Atom"

NSMAP = {
    "itunes": ITUNES_NS,
    "content": CONTENT_NS,
    "atom": ATOM_NS,
}

Renderer = Callable[[Any, Any], None]

REPLACEMENT_CHAR = "\ufffd"

# Complement of the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile(
    "[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


# ---------------------------------------------------------------------------
#  Element renderers
# ---------------------------------------------------------------------------

def _itunes(name: str) -> str:
    return f"{{{ITUNES_NS}}}{name}"


def xml_safe(value: Any) -> str:
    """
    Return value as text with characters XML 1.0 cannot carry replaced.

    Control characters (other than tab, newline and carriage return),
    lone surrogates and U+FFFE/U+FFFF become U+FFFD.
    """
    return _INVALID_XML_CHARS.sub(REPLACEMENT_CHAR, str(value))


def _text(tag: str) -> Renderer:
    """Render a value as a simple text element."""
    def render(parent: Any, value: Any) -> None:
        etree.SubElement(parent, tag).text = xml_safe(value)
    return render


def _cdata(tag: str) -> Renderer:
    """Render an object's text attribute inside a CDATA section."""
    def render(parent: Any, value: Any) -> None:
        element = etree.SubElement(parent, tag)
        text = xml_safe(value.text)
        # CDATA cannot contain its own terminator
        if "]]>" in text:
            element.text = text
        else:
            element.text = etree.CDATA(text)
    return render


def _href(tag: str) -> Renderer:
    """Render an object's href attribute as an empty element."""
    def render(parent: Any, value: Any) -> None:
        etree.SubElement(parent, tag, href=xml_safe(value.href))
    return render


def _image(parent: Any, image: Any) -> None:
    element = etree.SubElement(parent, "image")
    etree.SubElement(element, "url").text = xml_safe(image.url)
    if image.title:
        etree.SubElement(element, "title").text = xml_safe(image.title)
    if image.link:
        etree.SubElement(element, "link").text = xml_safe(image.link)


def _atom_link(parent: Any, link: Any) -> None:
    etree.SubElement(
        parent,
        f"{{{ATOM_NS}}}link",
        href=xml_safe(link.href),
        rel=xml_safe(link.rel),
        type=xml_safe(link.type),
    )


def _owner(parent: Any, owner: Any) -> None:
    element = etree.SubElement(parent, _itunes("owner"))
    if owner.name:
        etree.SubElement(element, _itunes("name")).text = xml_safe(owner.name)
    etree.SubElement(element, _itunes("email")).text = xml_safe(owner.email)


def _categories(parent: Any, categories: List[Any]) -> None:
    for category in categories:
        element = etree.SubElement(
            parent, _itunes("category"), text=xml_safe(category.text)
        )
        _categories(element, category.categories)


def _enclosure(parent: Any, enclosure: Any) -> None:
    etree.SubElement(
        parent,
        "enclosure",
        url=xml_safe(enclosure.url),
        length=str(enclosure.length),
        type=enclosure.type_formatted,
    )


# ---------------------------------------------------------------------------
#  Field order
# ---------------------------------------------------------------------------

# (model attribute, renderer, always emitted)
CHANNEL_FIELDS: List[Tuple[str, Renderer, bool]] = [
    ("title", _text("title"), True),
    ("link", _text("link"), True),
    ("description", _text("description"), True),
    ("category", _text("category"), False),
    ("copyright", _text("copyright"), False),
    ("docs", _text("docs"), False),
    ("generator", _text("generator"), False),
    ("language", _text("language"), False),
    ("last_build_date", _text("lastBuildDate"), False),
    ("managing_editor", _text("managingEditor"), False),
    ("pub_date", _text("pubDate"), False),
    ("ttl", _text("ttl"), False),
    ("web_master", _text("webMaster"), False),
    ("image", _image, False),
    ("atom_link", _atom_link, False),
    ("itunes_author", _text(_itunes("author")), False),
    ("itunes_subtitle", _text(_itunes("subtitle")), False),
    ("itunes_summary", _cdata(_itunes("summary")), False),
    ("itunes_block", _text(_itunes("block")), False),
    ("itunes_image", _href(_itunes("image")), False),
    ("itunes_explicit", _text(_itunes("explicit")), False),
    ("itunes_complete", _text(_itunes("complete")), False),
    ("itunes_new_feed_url", _text(_itunes("new-feed-url")), False),
    ("itunes_owner", _owner, False),
    ("itunes_categories", _categories, False),
    ("itunes_type", _text(_itunes("type")), False),
]

ITEM_FIELDS: List[Tuple[str, Renderer, bool]] = [
    ("guid", _text("guid"), True),
    ("title", _text("title"), True),
    ("link", _text("link"), True),
    ("description", _text("description"), True),
    ("author_formatted", _text("author"), False),
    ("category", _text("category"), False),
    ("comments", _text("comments"), False),
    ("source", _text("source"), False),
    ("pub_date_formatted", _text("pubDate"), False),
    ("enclosure", _enclosure, False),
    ("itunes_author", _text(_itunes("author")), False),
    ("itunes_subtitle", _text(_itunes("subtitle")), False),
    ("itunes_summary", _text(_itunes("summary")), False),
    ("itunes_image", _href(_itunes("image")), False),
    ("itunes_duration", _text(_itunes("duration")), False),
    ("itunes_explicit", _text(_itunes("explicit")), False),
    ("itunes_is_closed_captioned", _text(_itunes("isClosedCaptioned")), False),
    ("itunes_order", _text(_itunes("order")), False),
]


def _render_fields(
    parent: Any,
    model: Any,
    fields: List[Tuple[str, Renderer, bool]],
) -> None:
    for name, render, required in fields:
        value = getattr(model, name)
        if value or (required and value is not None):
            render(parent, value)


# ---------------------------------------------------------------------------
#  Public API
# ---------------------------------------------------------------------------

def build_tree(feed: Any) -> Any:
    """
    Build the <rss> element tree for a feed.

    Args:
        feed: Populated Feed

    Returns:
        lxml root element
    """
    root = etree.Element("rss", nsmap=NSMAP, version="2.0")
    channel = etree.SubElement(root, "channel")
    _render_fields(channel, feed, CHANNEL_FIELDS)

    for item in feed.items:
        element = etree.SubElement(channel, "item")
        _render_fields(element, item, ITEM_FIELDS)

    return root


def to_bytes(feed: Any, config: Optional["Config"] = None) -> bytes:
    """
    Serialize a feed to an encoded XML document.

    Args:
        feed: Populated Feed
        config: Config object (optional, uses default if None)

    Returns:
        XML document including the XML declaration
    """
    if config is None:
        from podcast_rss.config import get_config
        config = get_config()

    return etree.tostring(
        build_tree(feed),
        xml_declaration=True,
        encoding=config.xml_encoding,
        pretty_print=config.pretty_print,
    )


def to_string(feed: Any, config: Optional["Config"] = None) -> str:
    """Serialize a feed to an XML document as text."""
    if config is None:
        from podcast_rss.config import get_config
        config = get_config()

    return to_bytes(feed, config).decode(config.xml_encoding)


def encode(feed: Any, sink: IO[Any], config: Optional["Config"] = None) -> None:
    """
    Write a feed as RSS XML to sink.

    The sink may be a binary stream (the encoded document is written) or a
    text stream (the decoded document is written). The document is written
    in a single call; if the sink fails, whatever it already flushed stays
    there.

    Args:
        feed: Populated Feed
        sink: Object with a write() method
        config: Config object (optional, uses default if None)

    Raises:
        FeedWriteError: If the sink fails to accept the document
    """
    if config is None:
        from podcast_rss.config import get_config
        config = get_config()

    document = to_bytes(feed, config)
    if isinstance(sink, io.TextIOBase):
        payload: Any = document.decode(config.xml_encoding)
    else:
        payload = document

    try:
        sink.write(payload)
    except Exception as exc:
        raise FeedWriteError(f"Failed to write feed to sink: {exc}") from exc

    logger.debug(
        "Encoded feed '%s' with %d item(s), %d bytes",
        feed.title,
        len(feed.items),
        len(document),
    )
