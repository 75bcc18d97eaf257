"""
Atom Feed Parser.

Parses the status feed into FeedEntry records, one per <entry>, in
document order. Elements are matched by local name, so the Atom
namespace is optional.

Uses the standard library parser (xml.etree); the feed is small and
needs nothing heavier.
"""

from __future__ import annotations

from typing import List, Optional, Union
from xml.etree import ElementTree as ET

from incident_archiver.errors import ParseError
from incident_archiver.models import FeedEntry


def _local_name(tag: str) -> str:
    """'{http://www.w3.org/2005/Atom}entry' -> 'entry'."""
    return tag.rsplit("}", 1)[-1] if isinstance(tag, str) else ""


def _find_child(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _child_text(element: ET.Element, name: str) -> str:
    """Text content of the first child called ``name``, or ''."""
    child = _find_child(element, name)
    if child is None:
        return ""
    return "".join(child.itertext())


def _link_href(entry: ET.Element) -> str:
    """
    Pick the entry's hyperlink.

    Prefers a <link> that is rel="alternate" (or has no rel, which Atom
    defines as alternate); otherwise the first <link> with an href.
    """
    fallback = ""
    for child in entry:
        if _local_name(child.tag) != "link":
            continue
        href = child.attrib.get("href", "")
        if child.attrib.get("rel", "alternate") == "alternate" and href:
            return href
        if not fallback:
            fallback = href
    return fallback


# ─── Public API ───────────────────────────────────────────────


def parse_feed(data: Union[bytes, str]) -> List[FeedEntry]:
    """
    Parse an Atom feed document into FeedEntry records.

    Args:
        data: Raw feed body, as bytes (encoding taken from the XML
            declaration) or an already-decoded string.

    Returns:
        One FeedEntry per top-level <entry>, in feed order.

    Raises:
        ParseError: The document is not well-formed XML.
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise ParseError(f"malformed feed document: {exc}") from exc

    entries: List[FeedEntry] = []
    for element in root:
        if _local_name(element.tag) != "entry":
            continue
        entries.append(
            FeedEntry(
                id=_child_text(element, "id"),
                updated=_child_text(element, "updated"),
                title=_child_text(element, "title"),
                summary=_child_text(element, "summary"),
                link=_link_href(element),
            )
        )
    return entries
