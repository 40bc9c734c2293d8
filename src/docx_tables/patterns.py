"""Compiled regex patterns and WordprocessingML name constants for table extraction.

Element and attribute names are qualified names as they appear in
``word/document.xml``; markup.py matches them whatever URI the ``w:`` prefix
is bound to.  Used by markup.py, decoding.py and classifiers.py.
"""

import re

# ─── Namespaces and Declarations ──────────────────────────────────────────────

# Bound to ``w:`` on the synthetic parse root so body fragments need no declaration
W_NAMESPACE = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

XML_DECLARATION_START = "<?xml"
XML_DECLARATION_END = "?>"


# ─── Element Names ────────────────────────────────────────────────────────────

TABLE_TAG = "w:tbl"
ROW_TAG = "w:tr"
CELL_TAG = "w:tc"
RUN_TAG = "w:r"
TEXT_TAG = "w:t"
CELL_PROPERTIES_TAG = "w:tcPr"
GRID_SPAN_TAG = "w:gridSpan"
VMERGE_TAG = "w:vMerge"
BOLD_TAG = "w:b"
ITALIC_TAG = "w:i"
UNDERLINE_TAG = "w:u"

VAL_ATTR = "w:val"

# vMerge value that opens a vertical merge (continuation cells omit it)
VMERGE_RESTART = "restart"


# ─── Attribute Value Patterns ─────────────────────────────────────────────────

# Explicit gridSpan count; anything else leaves colspan absent
SPAN_VALUE_RE = re.compile(r"^\d+$")

# Values that switch an on/off run property (w:b, w:i) on
TOGGLE_ON_VALUES = ("true", "1", "on")

# Underline value meaning "no underline"
UNDERLINE_NONE = "none"


# ─── Header Heuristic Patterns ────────────────────────────────────────────────

# Purely numeric cell: integer or decimal with "." or "," separator
NUMERIC_LITERAL_PATTERN = r"^\d+([.,]\d+)?$"
NUMERIC_LITERAL_RE = re.compile(NUMERIC_LITERAL_PATTERN)
