"""Per-executive statistics for the executive details page."""

from datetime import datetime

import numpy as np
import polars as pl

from src.data.models import ExecutiveStats
from src.data.mock_data import SATISFACTION_TREND, PERFORMANCE_TREND
from src.analytics.dashboard_stats import sentiment_percentages
from src.analytics.distributions import dominant_emotion, fcr_by_topic, sla_compliance

MONTH_LABELS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

EMOTION_NAMES = ["Happy", "Satisfied", "Neutral", "Confused", "Frustrated"]

# (low, high) ranges for the sampled emotion shares; high is exclusive
_CUSTOMER_EMOTION_RANGES = [(10, 50), (15, 45), (10, 30), (5, 20), (5, 15)]
_EXECUTIVE_EMOTION_RANGES = [(15, 55), (20, 50), (5, 25), (0, 15), (0, 10)]

RADAR_SUBJECTS = [
    "Call Volume", "Response Time", "Handling Time",
    "Resolution Rate", "Satisfaction", "Sentiment",
]


class ExecutiveNotFoundError(LookupError):
    """Raised when stats are requested for an unknown executive id."""

    def __init__(self, executive_id: str):
        super().__init__(f"Executive with ID {executive_id} not found")
        self.executive_id = executive_id


def _month_start(year: int, month: int) -> datetime:
    # month may be <= 0 when walking backwards across a year boundary
    while month <= 0:
        month += 12
        year -= 1
    return datetime(year, month, 1)


def last_twelve_months(now: datetime) -> list[tuple[int, int]]:
    """(year, month) pairs for the 12 months ending with now's month, oldest first."""
    months = []
    for offset in range(11, -1, -1):
        start = _month_start(now.year, now.month - offset)
        months.append((start.year, start.month))
    return months


def last_twelve_month_labels(now: datetime) -> list[str]:
    return [MONTH_LABELS[m - 1] for _, m in last_twelve_months(now)]


def calls_by_month(calls: pl.DataFrame, now: datetime) -> list[int]:
    """Count calls per calendar month for the last 12 months, oldest first."""
    monthly = calls.group_by([
        pl.col("timestamp").dt.year().alias("year"),
        pl.col("timestamp").dt.month().alias("month"),
    ]).agg(pl.len().alias("n"))
    counts = {(year, month): n for year, month, n in monthly.iter_rows()}
    return [counts.get((y, m), 0) for y, m in last_twelve_months(now)]


def top_topics(calls: pl.DataFrame, n: int = 5) -> list[dict]:
    """Most frequent topics, descending by count, ties broken by topic name."""
    if len(calls) == 0:
        return []
    return (
        calls.group_by("topic")
        .agg(pl.len().alias("count"))
        .sort(["count", "topic"], descending=[True, False])
        .head(n)
        .to_dicts()
    )


def _sample_emotions(rng: np.random.Generator) -> tuple[list[dict], list[dict]]:
    emotions = [
        {"name": name, "value": int(rng.integers(lo, hi))}
        for name, (lo, hi) in zip(EMOTION_NAMES, _CUSTOMER_EMOTION_RANGES)
    ]
    comparison = [
        {
            "name": name,
            "customer": int(rng.integers(c_lo, c_hi)),
            "executive": int(rng.integers(e_lo, e_hi)),
        }
        for name, (c_lo, c_hi), (e_lo, e_hi) in zip(
            EMOTION_NAMES, _CUSTOMER_EMOTION_RANGES, _EXECUTIVE_EMOTION_RANGES
        )
    ]
    return emotions, comparison


def _scale(value: float, lo: float, hi: float, invert: bool = False) -> int:
    """Map value onto 0-100 between lo and hi, clipped. Missing values score 0."""
    if value is None or np.isnan(value):
        return 0
    if hi == lo:
        return 100
    score = (value - lo) / (hi - lo) * 100
    if invert:
        score = 100 - score
    return int(round(min(max(score, 0.0), 100.0)))


def productivity_scores(executive: dict, team: pl.DataFrame, sentiment_positive: float) -> list[dict]:
    """Radar-chart scores for an executive (A) against the team average (B)."""
    calls_hi = float(team["total_calls"].max())
    aht_hi = float(team["average_handling_time"].max())
    csat_lo, csat_hi = 0.0, 5.0

    # Executives without calls have no resolved rate and are left out of the team mean
    resolved = team.filter(pl.col("total_calls") > 0).select(
        (pl.col("resolved_calls") / pl.col("total_calls") * 100).mean()
    ).item()
    team_resolved = 0.0 if resolved is None else float(resolved)
    exec_resolved = executive["resolved_calls"] / executive["total_calls"] * 100 if executive["total_calls"] else 0.0
    # Response time falls back to handling time when the backend does not track it
    exec_response = executive.get("response_time") or executive["average_handling_time"]

    a = [
        _scale(executive["total_calls"], 0, calls_hi),
        _scale(exec_response, 0, aht_hi * 1.5, invert=True),
        _scale(executive["average_handling_time"], 0, aht_hi * 1.5, invert=True),
        _scale(exec_resolved, 0, 100),
        _scale(executive["satisfaction_score"], csat_lo, csat_hi),
        _scale(sentiment_positive, 0, 100),
    ]
    b = [
        _scale(float(team["total_calls"].mean()), 0, calls_hi),
        _scale(float(team["average_handling_time"].mean()), 0, aht_hi * 1.5, invert=True),
        _scale(float(team["average_handling_time"].mean()), 0, aht_hi * 1.5, invert=True),
        _scale(team_resolved, 0, 100),
        _scale(float(team["satisfaction_score"].mean()), csat_lo, csat_hi),
        a[5],
    ]
    return [
        {"subject": subject, "A": score_a, "B": score_b, "full_mark": 100}
        for subject, score_a, score_b in zip(RADAR_SUBJECTS, a, b)
    ]


def generate_executive_stats(
    executive_id: str,
    executives: pl.DataFrame,
    calls: pl.DataFrame,
    now: datetime = None,
    seed: int = 42,
) -> ExecutiveStats:
    """Build the full statistics bundle for one executive."""
    if now is None:
        now = datetime.now()

    match = executives.filter(pl.col("id") == executive_id)
    if len(match) == 0:
        raise ExecutiveNotFoundError(executive_id)
    executive = match.row(0, named=True)

    exec_calls = calls.filter(pl.col("executive_id") == executive_id)
    sentiment = sentiment_percentages(exec_calls)

    total = executive["total_calls"]
    resolved_rate = executive["resolved_calls"] / total * 100 if total else 0.0

    # Seed per executive so each profile is stable across reruns
    rng = np.random.default_rng([seed, *executive_id.encode("utf-8")])
    emotions, comparison = _sample_emotions(rng)

    transfer_rate = executive.get("transfer_rate")
    if transfer_rate is None and len(exec_calls):
        transfer_rate = float(exec_calls["transferred"].mean() * 100)

    sla_rate = executive.get("sla_compliance_rate")
    if sla_rate is None:
        sla_rate = sla_compliance(exec_calls)

    return ExecutiveStats(
        executive_id=executive_id,
        name=executive["name"],
        total_calls=total,
        calls_by_month=calls_by_month(exec_calls, now),
        resolved_rate=resolved_rate,
        average_handling_time=executive["average_handling_time"],
        satisfaction_trend=list(SATISFACTION_TREND),
        sentiment_distribution=sentiment,
        performance_trend=list(PERFORMANCE_TREND),
        top_topics=top_topics(exec_calls),
        emotions_data=emotions,
        emotions_comparison_data=comparison,
        dominant_emotion=executive.get("dominant_emotion") or dominant_emotion(exec_calls),
        transfer_rate=transfer_rate,
        sla_compliance=sla_rate,
        fcr_by_category=fcr_by_topic(exec_calls),
        productivity_score=productivity_scores(executive, executives, sentiment["positive"]),
    )
