"""Headline dashboard statistics: totals, today's calls, weekly trend, sentiment."""

from datetime import datetime, timedelta

import polars as pl

from src.data.models import DashboardStats, SENTIMENTS

WEEKDAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def resolution_rate(resolved: int, total: int) -> int:
    """Resolved share as a rounded percentage (0 when there are no calls)."""
    if total <= 0:
        return 0
    return round(resolved / total * 100)


def sentiment_percentages(calls: pl.DataFrame) -> dict[str, float]:
    """Percentage of calls per sentiment, in positive/neutral/negative order."""
    total = len(calls)
    if total == 0:
        return {s: 0.0 for s in SENTIMENTS}
    counts = dict(
        calls.group_by("sentiment").agg(pl.len().alias("n")).iter_rows()
    )
    return {s: counts.get(s, 0) / total * 100 for s in SENTIMENTS}


def weekly_trend(calls: pl.DataFrame, now: datetime) -> list[int]:
    """Call counts for the 7 days ending today, bucketed Mon..Sun."""
    start = datetime.combine((now - timedelta(days=6)).date(), datetime.min.time())
    recent = calls.filter(pl.col("timestamp") >= start)
    counts = dict(
        recent.group_by(pl.col("timestamp").dt.weekday().alias("weekday"))
        .agg(pl.len().alias("n"))
        .iter_rows()
    )
    # Polars weekday is 1=Mon .. 7=Sun
    return [counts.get(d, 0) for d in range(1, 8)]


def stat_card_trend(current: float, previous: float) -> tuple[float, bool]:
    """Percentage change from previous to current and whether it is an increase."""
    if not previous:
        return 0.0, current >= 0
    change = (current - previous) / abs(previous) * 100
    return round(change, 1), change >= 0


def compute_dashboard_stats(
    executives: pl.DataFrame,
    calls: pl.DataFrame,
    now: datetime = None,
) -> DashboardStats:
    """Compute the headline KPIs shown on the dashboard page."""
    if now is None:
        now = datetime.now()
    n_exec = len(executives)
    today = now.date()
    todays_calls = calls.filter(pl.col("timestamp").dt.date() == today)

    return DashboardStats(
        total_calls=int(executives["total_calls"].sum()) if n_exec else 0,
        resolved_calls=int(executives["resolved_calls"].sum()) if n_exec else 0,
        average_handling_time=float(executives["average_handling_time"].mean()) if n_exec else 0.0,
        satisfaction_score=float(executives["satisfaction_score"].mean()) if n_exec else 0.0,
        calls_today=len(todays_calls),
        online_executives=len(executives.filter(pl.col("status") == "online")),
        pending_calls=len(todays_calls.filter(~pl.col("resolved"))),
        calls_trend=weekly_trend(calls, now),
        sentiment_distribution=sentiment_percentages(calls),
    )
