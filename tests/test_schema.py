"""Unit tests for the table schema models: validation, immutability and JSON shape."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest
from pydantic import ValidationError

from docx_tables.schema import Cell, Row, Style, Table


class TestTableValidation:

    def test_consistent_table(self):
        table = Table(id="table_1", rows=(Row(cells=(Cell(text="a"),)),), row_count=1, column_count=1)
        assert table.row_count == 1

    def test_row_count_mismatch(self):
        with pytest.raises(ValidationError, match="rowCount"):
            Table(id="table_1", rows=(), row_count=2, column_count=0)

    def test_column_count_mismatch(self):
        with pytest.raises(ValidationError, match="columnCount"):
            Table(id="table_1", rows=(Row(cells=(Cell(), Cell())),), row_count=1, column_count=1)

    def test_data_requires_headers(self):
        with pytest.raises(ValidationError, match="headers"):
            Table(id="table_1", data=({"a": "b"},))

    def test_empty_table_defaults(self):
        table = Table(id="table_1")
        assert table.to_dict() == {"id": "table_1", "rows": [], "rowCount": 0, "columnCount": 0}


class TestImmutability:

    def test_cell_frozen(self):
        cell = Cell(text="a")
        with pytest.raises(ValidationError):
            cell.text = "b"

    def test_rows_are_tuples(self):
        table = Table(id="table_1", rows=[Row(cells=[Cell(text="a")])], row_count=1, column_count=1)
        assert isinstance(table.rows, tuple)
        assert isinstance(table.rows[0].cells, tuple)


class TestSerialization:

    def test_absent_fields_omitted(self):
        assert Cell(text="x").to_dict() == {"text": "x"}

    def test_aliases(self):
        cell = Cell(text="x", colspan=2, merge_start=True, style=Style(bold=True, italic=False, underline=False))
        assert cell.to_dict() == {
            "text": "x",
            "colspan": 2,
            "mergeStart": True,
            "style": {"bold": True, "italic": False, "underline": False},
        }

    def test_populate_by_alias(self):
        assert Row.model_validate({"cells": [], "isHeader": True}).is_header is True

    def test_false_values_kept(self):
        assert Style(bold=False, italic=False, underline=False).to_dict() == {"bold": False, "italic": False, "underline": False}
