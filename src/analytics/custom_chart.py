"""Custom chart builder: turn two `table.column` fields into name/value rows."""

from numbers import Number
from typing import Callable

import polars as pl

CHART_TYPES = {
    "bar": "Bar Chart",
    "line": "Line Chart",
    "area": "Area Chart",
    "pie": "Pie Chart",
}

CHART_COLORS = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#a855f7", "#ec4899"]

# fetch(table, columns) -> list of row dicts
Fetcher = Callable[[str, str], list[dict]]


def list_fields(samples: dict[str, list[dict]]) -> list[str]:
    """Qualified field names from one sample row per table, in table order."""
    fields = []
    for table, rows in samples.items():
        if rows:
            fields.extend(f"{table}.{key}" for key in rows[0].keys())
    return fields


def split_field(field: str) -> tuple[str, str]:
    table, sep, column = field.partition(".")
    if not sep or not table or not column:
        raise ValueError(f"Expected 'table.column', got {field!r}")
    return table, column


def _numeric(value) -> float:
    # bool is a Number subclass but is not a chartable measure
    if isinstance(value, Number) and not isinstance(value, bool):
        return float(value)
    return 0.0


def _label(value) -> str:
    if value is None or value == "":
        return "Unknown"
    return str(value)


def build_chart_data(x_field: str, y_field: str, fetch: Fetcher, limit: int = 10) -> pl.DataFrame:
    """Build sorted name/value rows for the selected fields (top `limit` by value).

    Fields from different tables are paired by row position over the first
    five x rows, since the tables share no declared join key.
    """
    x_table, x_col = split_field(x_field)
    y_table, y_col = split_field(y_field)

    if x_table == y_table:
        columns = x_col if x_col == y_col else f"{x_col},{y_col}"
        rows = fetch(x_table, columns)
        data = [{"name": _label(r.get(x_col)), "value": _numeric(r.get(y_col))} for r in rows]
    else:
        x_rows = fetch(x_table, f"id,{x_col}")
        y_rows = fetch(y_table, f"id,{y_col}")
        data = [
            {
                "name": _label(x_row.get(x_col)),
                "value": _numeric(y_rows[i].get(y_col)) if i < len(y_rows) else 0.0,
            }
            for i, x_row in enumerate(x_rows[:5])
        ]

    df = pl.DataFrame(data, schema={"name": pl.Utf8, "value": pl.Float64})
    return df.sort("value", descending=True, maintain_order=True).head(limit)


def frame_fetcher(frames: dict[str, pl.DataFrame]) -> Fetcher:
    """Fetcher over in-memory frames, used when no backend is configured."""

    def fetch(table: str, columns: str) -> list[dict]:
        df = frames[table]
        wanted = [c for c in dict.fromkeys(columns.split(",")) if c in df.columns]
        return df.select(wanted).to_dicts()

    return fetch


def frame_samples(frames: dict[str, pl.DataFrame]) -> dict[str, list[dict]]:
    return {table: df.head(1).to_dicts() for table, df in frames.items()}
