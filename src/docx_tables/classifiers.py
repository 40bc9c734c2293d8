"""Header-row heuristic for decoded tables.

The table markup has no reliable "this row is a header" flag, so the first
row is classified from its cell texts and formatting: short, non-numeric
labels, or mostly bold cells.
"""

import re

from docx_tables.config import HeaderHeuristicConfig
from docx_tables.schema import Row

DEFAULT_HEURISTIC = HeaderHeuristicConfig()


def is_numeric_literal(text: str, pattern: str = DEFAULT_HEURISTIC.numeric_pattern) -> bool:
    """Return True if the trimmed text is purely a number such as '30', '2.5' or '1,75'."""
    return bool(re.match(pattern, text.strip()))


def is_likely_header_row(row: Row, config: HeaderHeuristicConfig | None = None) -> bool:
    """Return True if the row looks like column headers.

    Empty cells are skipped when counting but still count toward the total,
    so a row of mostly blank cells does not qualify.
    """
    config = config or DEFAULT_HEURISTIC
    total = len(row.cells)
    if total == 0:
        return False

    short_text_count = 0
    bold_count = 0
    valid_header_count = 0
    for cell in row.cells:
        text = cell.text.strip()
        if not text:
            continue
        if len(text) < config.short_text_max_length:
            short_text_count += 1
        if cell.style is not None and cell.style.bold:
            bold_count += 1
        # Headers are labels, not bare numbers
        if not is_numeric_literal(text, config.numeric_pattern):
            valid_header_count += 1

    label_like = short_text_count >= total * config.short_text_ratio and valid_header_count >= total * config.valid_header_ratio
    mostly_bold = bold_count >= total * config.bold_ratio
    return label_like or mostly_bold
