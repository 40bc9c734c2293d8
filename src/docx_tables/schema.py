"""Pydantic models for extracted table data.

Every model is frozen: tables are built once per extraction call and handed
back to the caller untouched.  Optional attributes stay ``None`` when the
markup does not specify them, and ``to_dict`` omits them so downstream
consumers can tell "not specified" from "specified as 1".  Field aliases give
the camelCase JSON shape (``rowCount``, ``isHeader``, ...).
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> dict:
        """Return the JSON-ready dict, omitting absent fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Style(_FrozenModel):
    """Run formatting read from the first run of a cell.  All fields absent when the cell has no run."""

    bold: bool | None = None
    italic: bool | None = None
    underline: bool | None = None


class Cell(_FrozenModel):
    """One decoded table cell.

    ``colspan`` is set only from an explicit ``w:gridSpan``.  ``merge_start``
    is set only when the cell opens a vertical merge; how many rows the merge
    covers is not recorded in the cell and is never reported.
    """

    text: str = ""
    colspan: int | None = None
    merge_start: bool | None = Field(default=None, alias="mergeStart")
    style: Style | None = None


class Row(_FrozenModel):
    cells: tuple[Cell, ...] = ()
    is_header: bool = Field(default=False, alias="isHeader")


class Table(_FrozenModel):
    """A table recovered from the document body.

    ``headers`` is present only when the first row passed the header
    heuristic; ``data`` holds the remaining rows as label -> text records and
    is present only in object-projection mode.
    """

    id: str
    headers: tuple[str, ...] | None = None
    rows: tuple[Row, ...] = ()
    data: tuple[dict[str, str], ...] | None = None
    row_count: int = Field(default=0, alias="rowCount")
    column_count: int = Field(default=0, alias="columnCount")

    @model_validator(mode="after")
    def validate_dimensions(self) -> "Table":
        """Ensure the counts agree with the rows and that records never appear without headers."""
        if self.row_count != len(self.rows):
            raise ValueError(f"rowCount is {self.row_count} but the table has {len(self.rows)} rows")
        widest = max((len(row.cells) for row in self.rows), default=0)
        if self.column_count != widest:
            raise ValueError(f"columnCount is {self.column_count} but the widest row has {widest} cells")
        if self.data is not None and self.headers is None:
            raise ValueError("data records require detected headers")
        return self


class TableStats(_FrozenModel):
    """Summary counters over a list of extracted tables."""

    tables_found: int = Field(default=0, alias="tablesFound")
    total_cells: int = Field(default=0, alias="totalCells")
    tables_with_headers: int = Field(default=0, alias="tablesWithHeaders")
    tables_with_merged_cells: int = Field(default=0, alias="tablesWithMergedCells")
