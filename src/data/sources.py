"""Data source selection: Supabase when reachable, mock data otherwise."""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime

import polars as pl

from src.config import AppConfig
from src.cache_manager import cached_snapshot
from src.data.models import Executive, DashboardStats, executives_frame, calls_frame
from src.data.mock_data import EXECUTIVES, generate_calls
from src.data.backend import (
    BackendError, fetch_table, executives_from_rows, trend_from_rows,
    sentiment_from_rows, metrics_from_rows,
)
from src.analytics.dashboard_stats import compute_dashboard_stats, WEEKDAY_LABELS

logger = logging.getLogger(__name__)


@dataclass
class DataBundle:
    """Everything the pages need, plus where it came from."""
    executives: pl.DataFrame
    calls: pl.DataFrame
    stats: DashboardStats
    source: str
    trend_labels: list[str] = field(default_factory=lambda: list(WEEKDAY_LABELS))
    errors: list[str] = field(default_factory=list)


def _generated_calls(executives: pl.DataFrame, config: AppConfig, now: datetime) -> pl.DataFrame:
    # Calls are generated for whichever executives are loaded; the backend has no call-level table
    execs = [Executive(**row) for row in executives.iter_rows(named=True)]
    return calls_frame(generate_calls(execs, now=now, seed=config.seed,
                                      calls_per_executive=config.calls_per_executive))


def load_mock_bundle(config: AppConfig, now: datetime = None, errors: list[str] = None) -> DataBundle:
    if now is None:
        now = datetime.now()
    executives = executives_frame(EXECUTIVES)
    calls = calls_frame(generate_calls(EXECUTIVES, now=now, seed=config.seed,
                                       calls_per_executive=config.calls_per_executive))
    return DataBundle(
        executives=executives,
        calls=calls,
        stats=compute_dashboard_stats(executives, calls, now),
        source="mock",
        errors=list(errors or []),
    )


def _snapshot(client, config: AppConfig, table: str) -> pl.DataFrame:
    def _build():
        rows = fetch_table(client, table)
        return pl.DataFrame(rows) if rows else pl.DataFrame()
    return cached_snapshot(config.snapshot_path(table), config.backend.snapshot_max_age, _build)


def _optional_rows(client, config: AppConfig, table: str) -> list[dict]:
    """Rows from a table the dashboard can do without; failures log and yield []."""
    try:
        return _snapshot(client, config, table).to_dicts()
    except BackendError as exc:
        logger.error("Error fetching %s: %s", table, exc)
        return []


def load_backend_bundle(client, config: AppConfig, now: datetime = None) -> DataBundle:
    """Build a bundle from backend tables. Raises BackendError when unusable."""
    if now is None:
        now = datetime.now()
    backend = config.backend

    exec_rows = _snapshot(client, config, backend.executive_performance_table).to_dicts()
    if not exec_rows:
        raise BackendError(f"{backend.executive_performance_table} returned no rows")
    executives = executives_from_rows(exec_rows)
    calls = _generated_calls(executives, config, now)
    stats = compute_dashboard_stats(executives, calls, now)

    trend_labels = list(WEEKDAY_LABELS)
    trend = trend_from_rows(_optional_rows(client, config, backend.call_trends_table))
    if len(trend):
        stats = replace(stats, calls_trend=trend["calls"].to_list())
        trend_labels = trend["label"].to_list()

    sentiment_rows = _optional_rows(client, config, backend.sentiment_distribution_table)
    if sentiment_rows:
        stats = replace(stats, sentiment_distribution=sentiment_from_rows(sentiment_rows))

    metrics = metrics_from_rows(_optional_rows(client, config, backend.dashboard_stats_table))
    overrides = {k: type(getattr(stats, k))(v) for k, v in metrics.items()
                 if k in ("calls_today", "pending_calls", "total_calls", "resolved_calls",
                          "average_handling_time", "satisfaction_score")}
    if overrides:
        stats = replace(stats, **overrides)

    return DataBundle(
        executives=executives,
        calls=calls,
        stats=stats,
        source="supabase",
        trend_labels=trend_labels,
    )


def load_bundle(client, config: AppConfig, now: datetime = None) -> DataBundle:
    """Load from Supabase when a client is given, falling back to mock data on failure."""
    if client is None:
        return load_mock_bundle(config, now, errors=["Supabase not configured"])
    try:
        return load_backend_bundle(client, config, now)
    except BackendError as exc:
        logger.warning("Falling back to mock data: %s", exc)
        return load_mock_bundle(config, now, errors=[str(exc)])
