"""Executive directory: search filter and column sorting."""

import polars as pl

SORTABLE_FIELDS = ("name", "department", "status", "total_calls", "performance")


def filter_executives(executives: pl.DataFrame, query: str) -> pl.DataFrame:
    """Keep executives whose name or department contains query (case-insensitive)."""
    query = (query or "").strip().lower()
    if not query:
        return executives
    return executives.filter(
        pl.col("name").str.to_lowercase().str.contains(query, literal=True)
        | pl.col("department").str.to_lowercase().str.contains(query, literal=True)
    )


def sort_executives(executives: pl.DataFrame, field: str = "name", descending: bool = False) -> pl.DataFrame:
    if field not in SORTABLE_FIELDS:
        raise ValueError(f"Cannot sort executives by {field!r}")
    return executives.sort(field, descending=descending, maintain_order=True)


def toggle_sort(current_field: str, current_descending: bool, clicked_field: str) -> tuple[str, bool]:
    """Next (field, descending) after a header click: same field flips, new field starts ascending."""
    if clicked_field == current_field:
        return current_field, not current_descending
    return clicked_field, False


def directory_view(executives: pl.DataFrame, query: str, field: str, descending: bool) -> pl.DataFrame:
    """Filtered, sorted table with the columns shown in the directory."""
    return sort_executives(filter_executives(executives, query), field, descending).select([
        "id", "name", "email", "department", "status", "total_calls", "performance",
    ])
