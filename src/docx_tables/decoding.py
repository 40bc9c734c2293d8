"""Row, cell and run-style decoding over the parsed element tree.

Each decoder takes one lxml element from markup.parse_markup() and returns
the matching schema model.  Rows and cells that belong to a table nested inside a
cell are skipped by the row and cell scans, so only the table's own grid is
decoded.
"""

from lxml import etree

from docx_tables.markup import find_child, get_attr, iter_descendants
from docx_tables.patterns import (
    BOLD_TAG,
    CELL_PROPERTIES_TAG,
    CELL_TAG,
    GRID_SPAN_TAG,
    ITALIC_TAG,
    RUN_TAG,
    SPAN_VALUE_RE,
    TABLE_TAG,
    TEXT_TAG,
    TOGGLE_ON_VALUES,
    UNDERLINE_NONE,
    UNDERLINE_TAG,
    VAL_ATTR,
    VMERGE_RESTART,
    VMERGE_TAG,
)
from docx_tables.schema import Cell, Row, Style

# ─── Run Style ───────────────────────────────────────────────────────────────


def _is_toggled_on(run: etree._Element, tag: str) -> bool:
    """Return True if the run carries an on/off property such as <w:b/> or <w:i w:val="1"/>."""
    for prop in iter_descendants(run, tag):
        value = get_attr(prop, VAL_ATTR)
        if value is None or value in TOGGLE_ON_VALUES:
            return True
    return False


def _is_underlined(run: etree._Element) -> bool:
    """Return True for any explicit underline value other than "none"."""
    for prop in iter_descendants(run, UNDERLINE_TAG):
        value = get_attr(prop, VAL_ATTR)
        if value and value != UNDERLINE_NONE:
            return True
    return False


def extract_run_style(run: etree._Element) -> Style:
    """Read bold, italic and underline markers from a single <w:r> run."""
    return Style(
        bold=_is_toggled_on(run, BOLD_TAG),
        italic=_is_toggled_on(run, ITALIC_TAG),
        underline=_is_underlined(run),
    )


# ─── Cell ────────────────────────────────────────────────────────────────────


def _cell_text(cell: etree._Element) -> str:
    """Join the text of every <w:t> in the cell with single spaces and trim."""
    return " ".join(t.text or "" for t in iter_descendants(cell, TEXT_TAG)).strip()


def _grid_span(properties: etree._Element | None) -> int | None:
    """Return the explicit gridSpan count, or None when absent or non-numeric."""
    if properties is None:
        return None
    span = find_child(properties, GRID_SPAN_TAG)
    if span is None:
        return None
    value = (get_attr(span, VAL_ATTR) or "").strip()
    return int(value) if SPAN_VALUE_RE.match(value) else None


def _is_merge_start(properties: etree._Element | None) -> bool:
    """Return True if the cell opens a vertical merge (<w:vMerge w:val="restart"/>)."""
    if properties is None:
        return False
    vmerge = find_child(properties, VMERGE_TAG)
    return vmerge is not None and get_attr(vmerge, VAL_ATTR) == VMERGE_RESTART


def decode_cell(cell: etree._Element, include_styles: bool = False) -> Cell:
    """Decode one <w:tc> into text, explicit merge attributes and (optionally) the first run's style."""
    properties = find_child(cell, CELL_PROPERTIES_TAG)

    style = None
    if include_styles:
        # A run with no children (<w:r/>) carries neither properties nor text
        first_run = next((run for run in iter_descendants(cell, RUN_TAG) if len(run)), None)
        style = extract_run_style(first_run) if first_run is not None else Style()

    return Cell(
        text=_cell_text(cell),
        colspan=_grid_span(properties),
        # The merge extent lives in later rows, so only the start marker is reported
        merge_start=True if _is_merge_start(properties) else None,
        style=style,
    )


# ─── Row ─────────────────────────────────────────────────────────────────────


def decode_row(row: etree._Element, is_first_row: bool, include_styles: bool = False) -> Row:
    """Decode the cells of one <w:tr> in source order.

    ``is_header`` mirrors *is_first_row*; whether the row really reads as a
    header is decided later by the table assembler.
    """
    cells = tuple(decode_cell(cell, include_styles) for cell in iter_descendants(row, CELL_TAG, stop_at=(TABLE_TAG,)))
    return Row(cells=cells, is_header=is_first_row)
