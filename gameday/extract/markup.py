"""Lift Gameday XML payloads into BeautifulSoup trees."""

from bs4 import BeautifulSoup, Tag
from lxml import etree

from gameday.errors import FeedParseError

# Strict: a truncated or malformed document is an error, never a partial tree
_STRICT_PARSER = etree.XMLParser(recover=False, resolve_entities=False, no_network=True)


def parse_xml(payload: bytes, root: str, error_cls: type[FeedParseError]) -> Tag:
    """
    Parse payload as XML and return its <root> element. Raises error_cls when
    the payload is empty, not well formed, or its document element is not
    <root> (e.g. an HTML error page served with a 200).
    """
    if not payload or not payload.strip():
        raise error_cls(f"empty payload, expected <{root}>")
    try:
        etree.fromstring(payload, _STRICT_PARSER)
    except etree.XMLSyntaxError as exc:
        raise error_cls(f"malformed <{root}> document: {exc}") from exc
    soup = BeautifulSoup(payload, "xml")
    element = soup.find(root, recursive=False)
    if not isinstance(element, Tag):
        found = soup.find(True)
        name = found.name if isinstance(found, Tag) else None
        raise error_cls(f"expected <{root}> document, got <{name}>")
    return element


def attrs(tag: Tag) -> dict[str, str]:
    """Element attributes as a plain str -> str dict."""
    return {str(k): str(v) for k, v in tag.attrs.items()}
