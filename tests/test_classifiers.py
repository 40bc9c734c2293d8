"""Unit tests for the header-row heuristic."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from docx_tables.classifiers import is_likely_header_row, is_numeric_literal
from docx_tables.config import HeaderHeuristicConfig
from docx_tables.schema import Cell, Row, Style


def make_row(*texts: str, bold: tuple[bool, ...] | None = None) -> Row:
    """Build a Row from cell texts, optionally with per-cell bold styles."""
    if bold is None:
        cells = tuple(Cell(text=text) for text in texts)
    else:
        cells = tuple(Cell(text=text, style=Style(bold=b, italic=False, underline=False)) for text, b in zip(texts, bold))
    return Row(cells=cells, is_header=True)


# ===========================================================================
# is_numeric_literal tests
# ===========================================================================


class TestIsNumericLiteral:

    def test_integer(self):
        assert is_numeric_literal("30") is True

    def test_decimal_dot(self):
        assert is_numeric_literal("2.5") is True

    def test_decimal_comma(self):
        assert is_numeric_literal("1,75") is True

    def test_surrounding_whitespace(self):
        assert is_numeric_literal("  42 ") is True

    def test_negative_not_literal(self):
        assert is_numeric_literal("-3") is False

    def test_thousands_grouping_not_literal(self):
        assert is_numeric_literal("1,000,000") is False

    def test_text(self):
        assert is_numeric_literal("Age") is False

    def test_mixed(self):
        assert is_numeric_literal("30 years") is False


# ===========================================================================
# is_likely_header_row tests
# ===========================================================================


class TestIsLikelyHeaderRow:

    def test_short_labels(self):
        assert is_likely_header_row(make_row("Name", "Age")) is True

    def test_all_numeric_rejected(self):
        assert is_likely_header_row(make_row("1", "2", "3")) is False

    def test_empty_row_never_header(self):
        assert is_likely_header_row(Row(cells=(), is_header=True)) is False

    def test_all_blank_cells_rejected(self):
        assert is_likely_header_row(make_row("", " ", "")) is False

    def test_half_labels_qualifies(self):
        # 2 of 4 non-numeric short cells meets the 50% threshold
        assert is_likely_header_row(make_row("Name", "Age", "1", "2")) is True

    def test_below_half_labels_rejected(self):
        assert is_likely_header_row(make_row("Name", "1", "2")) is False

    def test_blank_cells_count_toward_total(self):
        assert is_likely_header_row(make_row("Name", "", "")) is False

    def test_long_text_rejected(self):
        long_text = "x" * 60
        assert is_likely_header_row(make_row(long_text, long_text)) is False

    def test_length_cutoff_is_exclusive(self):
        assert is_likely_header_row(make_row("x" * 49)) is True
        assert is_likely_header_row(make_row("x" * 50)) is False

    def test_bold_overrides_numeric(self):
        assert is_likely_header_row(make_row("2021", "2022", bold=(True, True))) is True

    def test_bold_overrides_long_text(self):
        long_text = "y" * 80
        assert is_likely_header_row(make_row(long_text, long_text, bold=(True, False))) is True

    def test_bold_below_half_does_not_help(self):
        assert is_likely_header_row(make_row("1", "2", "3", bold=(True, False, False))) is False

    def test_bold_on_blank_cell_ignored(self):
        assert is_likely_header_row(make_row("", "1", bold=(True, False))) is False

    def test_same_row_same_verdict(self):
        row = make_row("Name", "Age")
        assert is_likely_header_row(row) == is_likely_header_row(row)


# ===========================================================================
# Custom thresholds
# ===========================================================================


class TestHeuristicConfig:

    def test_stricter_ratio(self):
        config = HeaderHeuristicConfig(short_text_ratio=1.0, valid_header_ratio=1.0)
        assert is_likely_header_row(make_row("Name", "Age", "1", "2"), config) is False
        assert is_likely_header_row(make_row("Name", "Age"), config) is True

    def test_shorter_length_cutoff(self):
        config = HeaderHeuristicConfig(short_text_max_length=5)
        assert is_likely_header_row(make_row("Description", "Quantity"), config) is False

    def test_custom_numeric_pattern(self):
        config = HeaderHeuristicConfig(numeric_pattern=r"^-?\d+$")
        assert is_likely_header_row(make_row("-1", "-2"), config) is False
        assert is_likely_header_row(make_row("-1", "-2")) is True
