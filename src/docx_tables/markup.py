"""Recovering lxml parse of WordprocessingML markup, plus nesting-aware element lookups.

The input is usually a slice of ``word/document.xml``: it may hold several
top-level elements, use a ``w:`` prefix that is never declared, or stop in the
middle of an element.  parse_markup() feeds it to an lxml pull parser in
recover mode inside a synthetic root that declares the WordprocessingML
namespace, and records which elements saw their own end tag.

Recovery rules (parse_markup never raises):
  - libxml2 recovery applies: comments and processing instructions are kept
    as non-element nodes and skipped by the lookups below, CDATA content
    becomes text, and an end tag that does not match the innermost open
    element closes that element
  - at end of input, completed descendants of still-open elements are kept
  - a ``w:tbl``, ``w:tr`` or ``w:tc`` whose own end tag never arrived is
    removed together with its contents

Elements are matched by qualified name (``w:tbl``), whichever namespace URI
the prefix is bound to.
"""

import logging
from collections.abc import Iterator

from lxml import etree

from docx_tables.patterns import CELL_TAG, ROW_TAG, TABLE_TAG, W_NAMESPACE, XML_DECLARATION_END, XML_DECLARATION_START

logger = logging.getLogger(__name__)

ROOT_NAME = "fragment"
END_MARKER_NAME = "fragment-end"

# Regions that must be terminated to count
_REGION_TAGS = (TABLE_TAG, ROW_TAG, CELL_TAG)


# ─── Element Helpers ─────────────────────────────────────────────────────────


def qualified_name(element: etree._Element) -> str | None:
    """Return ``prefix:local`` for an element, the bare name when unprefixed, None for comments and PIs."""
    tag = element.tag
    if not isinstance(tag, str):
        return None
    if tag.startswith("{"):
        local = tag.split("}", 1)[1]
        return f"{element.prefix}:{local}" if element.prefix else local
    return tag


def get_attr(element: etree._Element, name: str) -> str | None:
    """Look up an attribute by qualified name (``w:val``), resolving the prefix through the element's nsmap."""
    prefix, _, local = name.partition(":")
    if local:
        uri = element.nsmap.get(prefix)
        if uri is not None:
            value = element.get(f"{{{uri}}}{local}")
            if value is not None:
                return value
    return element.get(name)


def find_child(element: etree._Element, name: str) -> etree._Element | None:
    """Return the first direct child element called *name*, or None."""
    for child in element.iterchildren():
        if qualified_name(child) == name:
            return child
    return None


def iter_descendants(element: etree._Element, name: str, stop_at: tuple[str, ...] = ()) -> Iterator[etree._Element]:
    """Yield descendant elements called *name* in document order.

    A matching element is not searched further, and elements named in
    *stop_at* are skipped entirely (used to keep nested tables out of their
    parent's row and cell scans).
    """
    stack = list(reversed(list(element.iterchildren())))
    while stack:
        node = stack.pop()
        node_name = qualified_name(node)
        if node_name is None or node_name in stop_at:
            continue
        if node_name == name:
            yield node
            continue
        stack.extend(reversed(list(node.iterchildren())))


# ─── Parsing ─────────────────────────────────────────────────────────────────


def _strip_declaration(xml: str) -> str:
    """Drop a leading BOM and XML declaration, which may only open a document."""
    text = xml.lstrip("\ufeff")
    if text.lstrip().startswith(XML_DECLARATION_START):
        text = text.lstrip()
        end = text.find(XML_DECLARATION_END)
        text = text[end + len(XML_DECLARATION_END) :] if end != -1 else ""
    return text


def _drop_unterminated_regions(root: etree._Element, terminated: set) -> int:
    """Remove table, row and cell elements that never saw their end tag; return how many."""
    unterminated = [el for el in root.iter() if qualified_name(el) in _REGION_TAGS and el not in terminated]
    pending = set(unterminated)
    dropped = 0
    for region in unterminated:
        # Goes out with its unterminated ancestor
        if any(ancestor in pending for ancestor in region.iterancestors()):
            continue
        region.getparent().remove(region)
        dropped += 1
    return dropped


def parse_markup(xml: str) -> etree._Element:
    """Parse *xml* into an element tree under a synthetic ``fragment`` root.

    The root is never closed, so its end tag cannot shift onto an element the
    input left open.  An empty marker element follows the input; only end
    tags seen before the marker's own end count as terminating an element.
    """
    parser = etree.XMLPullParser(events=("start", "end"), recover=True, resolve_entities=False, no_network=True)
    try:
        parser.feed(f'<{ROOT_NAME} xmlns:w="{W_NAMESPACE}">')
        text = _strip_declaration(xml)
        if text:
            parser.feed(text)
        parser.feed(f"<{END_MARKER_NAME}/>")
        parser.close()
    except etree.XMLSyntaxError as exc:
        logger.debug("Parser stopped early, keeping the partial tree: %s", exc)

    root = None
    marker = None
    terminated = set()
    for event, element in parser.read_events():
        if event == "start" and root is None:
            root = element
        elif event == "end" and marker is None:
            if qualified_name(element) == END_MARKER_NAME:
                marker = element
            else:
                terminated.add(element)

    if root is None:
        return etree.Element(ROOT_NAME)

    for error in parser.error_log:
        logger.debug("Recovered from malformed markup: line %d: %s", error.line, error.message)

    if marker is not None and marker.getparent() is not None:
        marker.getparent().remove(marker)
    dropped = _drop_unterminated_regions(root, terminated)
    if dropped:
        logger.debug("Dropped %d unterminated table/row/cell element(s)", dropped)
    return root
