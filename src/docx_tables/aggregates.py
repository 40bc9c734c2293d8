"""Read-only helpers over already-extracted tables."""

from collections.abc import Sequence

from docx_tables.schema import Table, TableStats


def count_total_cells(tables: Sequence[Table]) -> int:
    """Return the number of cells across every row of every table."""
    return sum(len(row.cells) for table in tables for row in table.rows)


def has_merged_cells(table: Table) -> bool:
    """Return True if any cell spans several columns or opens a vertical merge."""
    for row in table.rows:
        for cell in row.cells:
            if cell.colspan is not None and cell.colspan > 1:
                return True
            if cell.merge_start:
                return True
    return False


def extract_table_texts(table: Table) -> list[str]:
    """Return the trimmed, non-empty cell texts in row-major order."""
    return [cell.text.strip() for row in table.rows for cell in row.cells if cell.text.strip()]


def summarize_tables(tables: Sequence[Table]) -> TableStats:
    """Count tables, cells, header-bearing tables and tables with merged cells."""
    return TableStats(
        tables_found=len(tables),
        total_cells=count_total_cells(tables),
        tables_with_headers=sum(1 for table in tables if table.headers is not None),
        tables_with_merged_cells=sum(1 for table in tables if has_merged_cells(table)),
    )
