"""Table assembly and the document-level entry point.

extract_tables() parses the markup once, then for every top-level <w:tbl>:

  1. decodes its rows (decoding.py),
  2. runs the header heuristic on the first row (classifiers.py),
  3. computes the table dimensions,
  4. in "objects" mode, projects the data rows into header-keyed records.

Every call is a pure function of the markup and the options; nothing is
cached between calls.
"""

import logging
from collections.abc import Sequence

from lxml import etree

from docx_tables.classifiers import is_likely_header_row
from docx_tables.config import ExtractionOptions
from docx_tables.decoding import decode_row
from docx_tables.markup import iter_descendants, parse_markup
from docx_tables.patterns import CELL_TAG, ROW_TAG, TABLE_TAG
from docx_tables.schema import Row, Table

logger = logging.getLogger(__name__)


# ─── Row-to-Object Projection ────────────────────────────────────────────────


def rows_to_records(rows: Sequence[Row], headers: Sequence[str]) -> list[dict[str, str]]:
    """Map each data row to a {header label: cell text} record.

    Empty labels become ``column_<n>`` (1-based).  Short rows are padded with
    "" and cells beyond the header count are dropped.  Repeated labels keep
    the value of the later cell.
    """
    records: list[dict[str, str]] = []
    for row in rows:
        record: dict[str, str] = {}
        for i, label in enumerate(headers):
            key = label or f"column_{i + 1}"
            record[key] = row.cells[i].text if i < len(row.cells) else ""
        records.append(record)
    return records


# ─── Table Assembly ──────────────────────────────────────────────────────────


def assemble_table(table: etree._Element, table_id: str, options: ExtractionOptions | None = None) -> Table:
    """Build a Table from one <w:tbl> element."""
    options = options or ExtractionOptions()

    # Nested tables sit inside cells, so only a table recovered directly under this one adds rows
    row_elements = iter_descendants(table, ROW_TAG, stop_at=(CELL_TAG,))
    rows = [decode_row(row, is_first_row=(i == 0), include_styles=options.include_styles) for i, row in enumerate(row_elements)]

    headers: list[str] | None = None
    if rows:
        header_like = is_likely_header_row(rows[0], options.header_heuristic)
        if header_like:
            headers = [cell.text.strip() for cell in rows[0].cells]
        if options.header_flag_from_classifier and not header_like:
            rows[0] = rows[0].model_copy(update={"is_header": False})

    data = None
    if headers and options.table_format == "objects" and len(rows) > 1:
        data = rows_to_records(rows[1:], headers)

    # 0 when the table has no rows
    column_count = max((len(row.cells) for row in rows), default=0)

    logger.debug(
        "%s: %d rows x %d columns, headers=%s, records=%s",
        table_id,
        len(rows),
        column_count,
        headers is not None,
        len(data) if data is not None else None,
    )
    return Table(
        id=table_id,
        headers=headers,
        rows=rows,
        data=data,
        row_count=len(rows),
        column_count=column_count,
    )


# ─── Document Scanner ────────────────────────────────────────────────────────


def extract_tables(xml: str, options: ExtractionOptions | None = None) -> list[Table]:
    """Return every top-level table in *xml*, in source order, with ids ``table_1``, ``table_2``, ...

    Tables nested inside a cell stay part of that cell.  Malformed markup
    never raises: complete tables are kept and a table cut off by the end of
    input is left out.
    """
    options = options or ExtractionOptions()
    root = parse_markup(xml)

    tables = [assemble_table(element, f"table_{i}", options) for i, element in enumerate(iter_descendants(root, TABLE_TAG), start=1)]
    logger.info("Extracted %d table(s) (format=%s, styles=%s)", len(tables), options.table_format, options.include_styles)
    return tables
