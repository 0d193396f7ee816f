"""Chart insight strings: min/max/average summaries and z-score outliers."""

from dataclasses import dataclass

import numpy as np
from scipy import stats


@dataclass
class SeriesSummary:
    count: int
    minimum: float
    maximum: float
    mean: float
    above_mean: int
    argmin: int
    argmax: int


def summarize_series(values) -> SeriesSummary | None:
    """Single-pass summary of a numeric series. Returns None for an empty series."""
    arr = np.asarray(list(values), dtype=float)
    if arr.size == 0:
        return None
    mean = float(arr.mean())
    return SeriesSummary(
        count=int(arr.size),
        minimum=float(arr.min()),
        maximum=float(arr.max()),
        mean=mean,
        above_mean=int((arr > mean).sum()),
        argmin=int(arr.argmin()),
        argmax=int(arr.argmax()),
    )


def detect_series_outliers(values, z_threshold: float = 2.0) -> list[bool]:
    """Flag points whose z-score exceeds the threshold.

    Fewer than 4 points, or a constant series, yields no outliers.
    """
    arr = np.asarray(list(values), dtype=float)
    if arr.size < 4 or np.all(arr == arr[0]):
        return [False] * int(arr.size)
    z_scores = stats.zscore(arr)
    return [bool(flag) for flag in np.abs(z_scores) > z_threshold]


def _fmt(value: float, decimals: int = 0) -> str:
    return f"{value:,.{decimals}f}"


def call_volume_insights(labels: list[str], counts: list[int]) -> list[str]:
    s = summarize_series(counts)
    if s is None:
        return ["No call volume data available."]
    lines = [
        f"Busiest period: {labels[s.argmax]} with {_fmt(s.maximum)} calls.",
        f"Quietest period: {labels[s.argmin]} with {_fmt(s.minimum)} calls.",
        f"Average of {_fmt(s.mean, 1)} calls per period; "
        f"{s.above_mean} of {s.count} periods are above average.",
    ]
    outliers = [labels[i] for i, flag in enumerate(detect_series_outliers(counts)) if flag]
    if outliers:
        lines.append(f"Unusual volume in: {', '.join(outliers)}.")
    return lines


def sentiment_insights(distribution: dict[str, float]) -> list[str]:
    if not distribution or sum(distribution.values()) == 0:
        return ["No sentiment data available."]
    leading = max(distribution, key=distribution.get)
    lines = [f"{leading.capitalize()} sentiment leads at {distribution[leading]:.0f}% of calls."]
    negative = distribution.get("negative", 0.0)
    positive = distribution.get("positive", 0.0)
    if negative > positive:
        lines.append("Negative calls outnumber positive ones; review recent escalations.")
    else:
        lines.append(f"Positive calls outnumber negative ones by {positive - negative:.0f} points.")
    return lines


def csat_insights(labels: list[str], scores: list[float], excellent: float = 4.5) -> list[str]:
    s = summarize_series(scores)
    if s is None:
        return ["No satisfaction scores available."]
    n_excellent = sum(1 for v in scores if v >= excellent)
    return [
        f"Average CSAT is {s.mean:.2f} (range {s.minimum:.1f} - {s.maximum:.1f}).",
        f"Best: {labels[s.argmax]} ({s.maximum:.1f}); lowest: {labels[s.argmin]} ({s.minimum:.1f}).",
        f"{n_excellent} of {s.count} periods rated excellent.",
    ]


def fcr_insights(categories: list[str], rates: list[float], target: float = 90) -> list[str]:
    s = summarize_series(rates)
    if s is None:
        return ["No first-call resolution data available."]
    below = [c for c, r in zip(categories, rates) if r < target]
    lines = [
        f"Highest first-call resolution: {categories[s.argmax]} ({s.maximum:.0f}%).",
        f"Lowest first-call resolution: {categories[s.argmin]} ({s.minimum:.0f}%).",
        f"Average rate is {s.mean:.1f}%; {s.above_mean} of {s.count} categories are above it.",
    ]
    if below:
        lines.append(f"Below {target:.0f}% target: {', '.join(below)}.")
    return lines


def sla_insights(compliance: float, target: float = 90) -> list[str]:
    gap = compliance - target
    if gap >= 0:
        return [f"SLA compliance of {compliance:.0f}% meets the {target:.0f}% target."]
    return [
        f"SLA compliance of {compliance:.0f}% is {abs(gap):.0f} points below the {target:.0f}% target.",
    ]


def agent_comparison_insights(names: list[str], calls: list[int], handling_times: list[float]) -> list[str]:
    s_calls = summarize_series(calls)
    s_aht = summarize_series(handling_times)
    if s_calls is None or s_aht is None:
        return ["No agent data available."]
    return [
        f"{names[s_calls.argmax]} handled the most calls ({_fmt(s_calls.maximum)}).",
        f"{names[s_aht.argmin]} has the shortest handling time ({s_aht.minimum:.1f} min).",
        f"{s_calls.above_mean} of {s_calls.count} agents handle more calls than the "
        f"average of {s_calls.mean:.1f}.",
    ]


def hourly_insights(hours: list[str], calls: list[int]) -> list[str]:
    s = summarize_series(calls)
    if s is None:
        return ["No hourly data available."]
    peak_hours = [h for h, c in zip(hours, calls) if c > s.mean]
    return [
        f"Peak hour: {hours[s.argmax]} ({_fmt(s.maximum)} calls); "
        f"quietest: {hours[s.argmin]} ({_fmt(s.minimum)} calls).",
        f"Above-average hours: {', '.join(peak_hours)}." if peak_hours
        else "Call volume is flat across the day.",
    ]
