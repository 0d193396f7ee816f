"""Threshold bands and color mapping for KPIs shown across the dashboard."""

from typing import NamedTuple

GREEN = "#22c55e"
LIGHT_GREEN = "#4ade80"
YELLOW = "#eab308"
ORANGE = "#f97316"
RED = "#ef4444"
LIGHT_RED = "#f87171"
BLUE = "#60a5fa"
AMBER = "#f59e0b"
GRAY = "#9ca3af"
SLATE = "#94a3b8"

SENTIMENT_COLORS = {"positive": LIGHT_GREEN, "neutral": SLATE, "negative": LIGHT_RED}

EMOTION_COLORS = {
    "happy": LIGHT_GREEN,
    "satisfied": BLUE,
    "neutral": "#a78bfa",
    "confused": "#fbbf24",
    "frustrated": LIGHT_RED,
}

STATUS_COLORS = {"online": GREEN, "away": YELLOW, "offline": "#d1d5db"}


class Band(NamedTuple):
    label: str
    color: str


def performance_band(performance: float) -> Band:
    if performance >= 90:
        return Band("high", GREEN)
    if performance >= 70:
        return Band("medium", YELLOW)
    return Band("low", RED)


def sla_band(compliance: float, target: float = 90) -> Band:
    """Green at or above target, yellow within 80% of target, red below."""
    if compliance >= target:
        return Band("on target", GREEN)
    if compliance >= target * 0.8:
        return Band("near target", YELLOW)
    return Band("below target", RED)


def sla_target_message(compliance: float, target: float = 90) -> str:
    diff = round(compliance - target, 1)
    if diff == int(diff):
        diff = int(diff)
    if diff >= 0:
        sign = "+" if diff > 0 else ""
        return f"{sign}{diff}% above target"
    return f"{diff}% below target"


def fcr_band(rate: float) -> Band:
    if rate >= 90:
        return Band("high", GREEN)
    if rate >= 80:
        return Band("medium", YELLOW)
    if rate >= 70:
        return Band("acceptable", ORANGE)
    return Band("low", RED)


def csat_band(score: float) -> Band:
    """Rating and bar color for a CSAT score on the 0-5 scale."""
    if score >= 4.5:
        return Band("Excellent", LIGHT_GREEN)
    if score >= 4.0:
        return Band("Good", BLUE)
    if score >= 3.5:
        return Band("Average", AMBER)
    return Band("Poor", LIGHT_RED)


def scorecard_resolved_band(rate: float) -> Band:
    if rate >= 90:
        return Band("high", GREEN)
    if rate >= 80:
        return Band("medium", YELLOW)
    return Band("low", RED)


def scorecard_satisfaction_band(score: float) -> Band:
    if score >= 4.5:
        return Band("high", GREEN)
    if score >= 4.0:
        return Band("medium", YELLOW)
    return Band("low", RED)


def resolution_gauge_message(value: float) -> Band:
    """Verdict sentence and color for the first-call resolution gauge."""
    if value >= 85:
        return Band("Excellent resolution rate!", GREEN)
    if value >= 70:
        return Band("Good resolution rate, but there's room for improvement.", YELLOW)
    return Band("Resolution rate needs improvement.", RED)


def status_color(status: str) -> str:
    return STATUS_COLORS.get(status, STATUS_COLORS["offline"])


def emotion_color(emotion: str | None) -> str:
    if not emotion:
        return GRAY
    return EMOTION_COLORS.get(emotion.lower(), GRAY)


def heat_intensity(value: float, max_value: float) -> float:
    """Cell opacity for the peak-hours heatmap (value relative to the max)."""
    if max_value <= 0:
        return 0.0
    return round(value / max_value, 2)


def percent_label(fraction: float) -> str | None:
    """Slice label for pie charts; slices at or below 5% get no label."""
    if fraction <= 0.05:
        return None
    return f"{fraction * 100:.0f}%"


def capitalize(value: str | None) -> str:
    if not value:
        return "N/A"
    return value[0].upper() + value[1:]
