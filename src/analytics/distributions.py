"""Call distributions: durations, hours, topics, statuses, emotions, SLA."""

import polars as pl

WEEKDAY_COLUMNS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

# (label, lower bound seconds inclusive, upper bound seconds exclusive)
DURATION_BUCKETS = [
    ("0-1 min", 0, 60),
    ("1-3 min", 60, 180),
    ("3-5 min", 180, 300),
    ("5-10 min", 300, 600),
    ("10+ min", 600, None),
]


def duration_buckets(calls: pl.DataFrame) -> pl.DataFrame:
    """Count calls per duration bucket, in fixed bucket order (zero-filled)."""
    rows = []
    for label, lo, hi in DURATION_BUCKETS:
        cond = pl.col("duration") >= lo
        if hi is not None:
            cond = cond & (pl.col("duration") < hi)
        rows.append({"duration": label, "count": len(calls.filter(cond))})
    return pl.DataFrame(rows, schema={"duration": pl.Utf8, "count": pl.Int64})


def hourly_volume(calls: pl.DataFrame) -> pl.DataFrame:
    """Calls per hour of day, labelled like '9:00'."""
    return (
        calls.group_by(pl.col("timestamp").dt.hour().alias("hour_num"))
        .agg(pl.len().alias("calls"))
        .sort("hour_num")
        .with_columns(pl.format("{}:00", pl.col("hour_num")).alias("hour"))
        .select(["hour", "calls"])
    )


def peak_hours_matrix(calls: pl.DataFrame, weekdays_only: bool = True) -> pl.DataFrame:
    """Hour x weekday call counts, one column per weekday (zero-filled)."""
    days = WEEKDAY_COLUMNS[:5] if weekdays_only else WEEKDAY_COLUMNS
    counts = (
        calls.with_columns([
            pl.col("timestamp").dt.hour().alias("hour_num"),
            pl.col("timestamp").dt.weekday().alias("weekday"),
        ])
        .group_by(["hour_num", "weekday"])
        .agg(pl.len().alias("n"))
    )
    lookup = {(h, d): n for h, d, n in counts.iter_rows()}
    hours = sorted({h for h, _ in lookup})
    rows = []
    for h in hours:
        row = {"hour": f"{h}:00"}
        for i, day in enumerate(days, start=1):
            row[day] = lookup.get((h, i), 0)
        rows.append(row)
    schema = {"hour": pl.Utf8, **{d: pl.Int64 for d in days}}
    return pl.DataFrame(rows, schema=schema)


def topic_counts(calls: pl.DataFrame) -> pl.DataFrame:
    return (
        calls.group_by("topic")
        .agg(pl.len().alias("count"))
        .sort(["count", "topic"], descending=[True, False])
    )


def call_status_split(calls: pl.DataFrame) -> pl.DataFrame:
    """Resolved / unresolved / transferred call counts."""
    transferred = pl.col("transferred").fill_null(False)
    return pl.DataFrame({
        "status": ["Resolved", "Unresolved", "Transferred"],
        "value": [
            len(calls.filter(pl.col("resolved") & ~transferred)),
            len(calls.filter(~pl.col("resolved") & ~transferred)),
            len(calls.filter(transferred)),
        ],
    })


def transfer_split(transfer_rate: float | None, default: float = 15.0) -> list[dict]:
    """Transferred vs not-transferred percentages for the transfer donut."""
    rate = default if transfer_rate is None else transfer_rate
    return [
        {"name": "Transferred", "value": rate},
        {"name": "Not Transferred", "value": 100 - rate},
    ]


def efficiency_by_topic(calls: pl.DataFrame) -> pl.DataFrame:
    """Resolved vs pending percentage per topic."""
    return (
        calls.group_by("topic")
        .agg((pl.col("resolved").mean() * 100).round(1).alias("resolved"))
        .with_columns((100 - pl.col("resolved")).round(1).alias("pending"))
        .rename({"topic": "category"})
        .sort("category")
    )


def fcr_by_topic(calls: pl.DataFrame) -> list[dict]:
    """First-call resolution rate per topic: resolved without a transfer."""
    if len(calls) == 0:
        return []
    first_call = pl.col("resolved") & ~pl.col("transferred").fill_null(False)
    return (
        calls.group_by("topic")
        .agg((first_call.mean() * 100).round(0).alias("rate"))
        .rename({"topic": "category"})
        .sort("category")
        .to_dicts()
    )


def sla_compliance(calls: pl.DataFrame) -> float | None:
    """Share of calls that met SLA, as a percentage; None when untracked."""
    tracked = calls.filter(pl.col("sla_compliant").is_not_null())
    if len(tracked) == 0:
        return None
    return float(tracked["sla_compliant"].mean() * 100)


def emotion_counts(calls: pl.DataFrame, column: str = "customer_emotion") -> pl.DataFrame:
    """Count calls per emotion with capitalized names."""
    return (
        calls.filter(pl.col(column).is_not_null())
        .group_by(column)
        .agg(pl.len().alias("value"))
        .with_columns(
            pl.col(column).str.to_titlecase().alias("name")
        )
        .sort(["value", "name"], descending=[True, False])
        .select(["name", "value"])
    )


def dominant_emotion(calls: pl.DataFrame, column: str = "customer_emotion") -> str | None:
    """Most frequent emotion (lowercase), or None when there is no data."""
    counts = emotion_counts(calls, column)
    if len(counts) == 0:
        return None
    return counts["name"][0].lower()
