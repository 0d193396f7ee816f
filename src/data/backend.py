"""Thin wrapper around the Supabase client plus row normalizers.

Helpers log failures and return None so pages can fall back to mock data.
"""

import logging
import math

import polars as pl
from supabase import Client, create_client

from src.config import BackendConfig
from src.data.models import EXECUTIVE_SCHEMA, SENTIMENTS, STATUSES

logger = logging.getLogger(__name__)


class BackendError(RuntimeError):
    """A Supabase request failed."""


def create_backend(config: BackendConfig) -> Client | None:
    """Create a Supabase client, or None when the backend is disabled or unconfigured."""
    if not config.is_configured:
        logger.info("Supabase backend not configured; using mock data")
        return None
    return create_client(config.url, config.key)


def fetch_table(client: Client, table: str, columns: str = "*", limit: int | None = None) -> list[dict]:
    """Select rows from a table. Raises BackendError on any client failure."""
    try:
        query = client.table(table).select(columns)
        if limit is not None:
            query = query.limit(limit)
        response = query.execute()
    except Exception as exc:
        raise BackendError(f"Failed to read {table}: {exc}") from exc
    return response.data or []


def _fetch_or_none(client: Client, table: str, what: str) -> list[dict] | None:
    try:
        return fetch_table(client, table)
    except BackendError as exc:
        logger.error("Error fetching %s: %s", what, exc)
        return None


def get_chart_data(client: Client, config: BackendConfig) -> list[dict] | None:
    return _fetch_or_none(client, config.call_trends_table, "chart data")


def get_dashboard_metrics(client: Client, config: BackendConfig) -> list[dict] | None:
    return _fetch_or_none(client, config.dashboard_stats_table, "dashboard metrics")


def get_executive_performance(client: Client, config: BackendConfig) -> list[dict] | None:
    return _fetch_or_none(client, config.executive_performance_table, "executive performance")


def get_sentiment_distribution(client: Client, config: BackendConfig) -> list[dict] | None:
    return _fetch_or_none(client, config.sentiment_distribution_table, "sentiment distribution")


def initialize_database(client: Client, config: BackendConfig) -> bool:
    """Invoke the chart-data initializer when call_trends is empty.

    Returns True when the function was invoked successfully. Never raises.
    """
    logger.info("Initializing database...")
    try:
        existing = fetch_table(client, config.call_trends_table, limit=1)
    except BackendError as exc:
        logger.error("Error checking chart data: %s", exc)
        return False

    if existing:
        logger.info("Chart data already initialized.")
        return False

    logger.info("Initializing chart data...")
    try:
        response = client.functions.invoke(config.init_function)
    except Exception as exc:
        logger.error("Error initializing chart data: %s", exc)
        return False
    logger.info("Chart data initialization response: %s", response)
    return True


def table_status(client: Client, tables: list[str]) -> list[dict]:
    """Availability of each table, probed with a one-row select."""
    status = []
    for table in tables:
        try:
            rows = fetch_table(client, table, limit=1)
            status.append({"table": table, "status": "Available", "rows_previewed": len(rows), "error": None})
        except BackendError as exc:
            status.append({"table": table, "status": "Unavailable", "rows_previewed": None, "error": str(exc)})
    return status


def sample_rows(client: Client, tables: list[str]) -> dict[str, list[dict]]:
    """One row per table for the custom chart builder field list."""
    return {table: fetch_table(client, table, limit=1) for table in tables}


# ---------------------------------------------------------------------------
# Row normalizers: backend rows -> frames shaped like the mock data
# ---------------------------------------------------------------------------

# Backend column -> model column
_EXECUTIVE_COLUMN_ALIASES = {
    "avg_handling_time": "average_handling_time",
    "csat": "satisfaction_score",
    "fcr_rate": "first_call_resolution_rate",
    "sla_compliance": "sla_compliance_rate",
}


def executives_from_rows(rows: list[dict]) -> pl.DataFrame:
    """Normalize executive_performance rows into the executives frame schema."""
    records = []
    for i, row in enumerate(rows):
        record = {_EXECUTIVE_COLUMN_ALIASES.get(k, k): v for k, v in row.items()}
        record = {col: record.get(col) for col in EXECUTIVE_SCHEMA}
        record["id"] = str(record["id"] if record["id"] is not None else i + 1)
        if record["status"] not in STATUSES:
            record["status"] = "offline"
        for col in ("total_calls", "resolved_calls", "performance"):
            record[col] = int(record[col] or 0)
        for col in ("average_handling_time", "satisfaction_score"):
            record[col] = float(record[col] or 0.0)
        records.append(record)
    return pl.DataFrame(records, schema=EXECUTIVE_SCHEMA)


def trend_from_rows(rows: list[dict], label_col: str = "day", value_col: str = "calls") -> pl.DataFrame:
    """Normalize call_trends rows into label/value pairs, preserving row order."""
    return pl.DataFrame(
        [{"label": str(r.get(label_col, "")), "calls": int(r.get(value_col) or 0)} for r in rows],
        schema={"label": pl.Utf8, "calls": pl.Int64},
    )


def sentiment_from_rows(rows: list[dict]) -> dict[str, float]:
    """Normalize sentiment_distribution rows ({sentiment, percentage}) into a dict."""
    distribution = {s: 0.0 for s in SENTIMENTS}
    for row in rows:
        key = str(row.get("sentiment", "")).lower()
        if key in distribution:
            distribution[key] = float(row.get("percentage") or row.get("value") or 0.0)
    return distribution


def _as_float(value) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    return result if math.isfinite(result) else None


def metrics_from_rows(rows: list[dict]) -> dict[str, float]:
    """Normalize dashboard_stats rows ({metric, value}) into a dict.

    Rows without a metric name or a numeric value are skipped.
    """
    metrics = {}
    for row in rows:
        value = _as_float(row.get("value"))
        if row.get("metric") is None or value is None:
            logger.warning("Skipping malformed dashboard_stats row: %s", row)
            continue
        metrics[str(row["metric"])] = value
    return metrics
