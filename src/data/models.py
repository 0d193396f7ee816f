"""Domain dataclasses for executives, calls and dashboard statistics."""

from dataclasses import dataclass, field, asdict
from datetime import datetime

import polars as pl

STATUSES = ("online", "offline", "away")
SENTIMENTS = ("positive", "neutral", "negative")
CUSTOMER_EMOTIONS = ("happy", "satisfied", "neutral", "confused", "frustrated", "angry")
EXECUTIVE_EMOTIONS = ("happy", "satisfied", "neutral", "calm", "empathetic", "professional")

TOPICS = [
    "Account Access", "Billing Issue", "Product Information",
    "Technical Support", "Service Outage", "Refund Request",
    "Upgrade Options", "Installation Help", "Account Closure",
    "Complaint", "Password Reset", "Feature Inquiry",
]


@dataclass
class Executive:
    """A call-center agent tracked by the dashboard."""
    id: str
    name: str
    avatar: str
    email: str
    phone: str
    department: str
    performance: int
    status: str
    total_calls: int
    resolved_calls: int
    average_handling_time: float  # minutes
    satisfaction_score: float     # CSAT, 0-5
    dominant_emotion: str | None = None
    transfer_rate: float | None = None
    first_call_resolution_rate: float | None = None
    sla_compliance_rate: float | None = None
    response_time: float | None = None


@dataclass
class Call:
    id: str
    executive_id: str
    customer_id: str
    customer_name: str
    timestamp: datetime
    duration: int  # seconds
    sentiment: str
    topic: str
    resolved: bool
    notes: str | None = None
    customer_emotion: str | None = None
    executive_emotion: str | None = None
    transferred: bool = False
    transferred_to: str | None = None
    sla_compliant: bool | None = None


@dataclass
class DashboardStats:
    total_calls: int
    resolved_calls: int
    average_handling_time: float
    satisfaction_score: float
    calls_today: int
    online_executives: int
    pending_calls: int
    calls_trend: list[int]
    sentiment_distribution: dict[str, float]


@dataclass
class ExecutiveStats:
    """Per-executive aggregates shown on the executive details page."""
    executive_id: str
    name: str
    total_calls: int
    calls_by_month: list[int]
    resolved_rate: float
    average_handling_time: float
    satisfaction_trend: list[float]
    sentiment_distribution: dict[str, float]
    performance_trend: list[int]
    top_topics: list[dict]
    emotions_data: list[dict] = field(default_factory=list)
    emotions_comparison_data: list[dict] = field(default_factory=list)
    dominant_emotion: str | None = None
    transfer_rate: float | None = None
    sla_compliance: float | None = None
    fcr_by_category: list[dict] = field(default_factory=list)
    productivity_score: list[dict] = field(default_factory=list)


EXECUTIVE_SCHEMA = {
    "id": pl.Utf8,
    "name": pl.Utf8,
    "avatar": pl.Utf8,
    "email": pl.Utf8,
    "phone": pl.Utf8,
    "department": pl.Utf8,
    "performance": pl.Int64,
    "status": pl.Utf8,
    "total_calls": pl.Int64,
    "resolved_calls": pl.Int64,
    "average_handling_time": pl.Float64,
    "satisfaction_score": pl.Float64,
    "dominant_emotion": pl.Utf8,
    "transfer_rate": pl.Float64,
    "first_call_resolution_rate": pl.Float64,
    "sla_compliance_rate": pl.Float64,
    "response_time": pl.Float64,
}

CALL_SCHEMA = {
    "id": pl.Utf8,
    "executive_id": pl.Utf8,
    "customer_id": pl.Utf8,
    "customer_name": pl.Utf8,
    "timestamp": pl.Datetime,
    "duration": pl.Int64,
    "sentiment": pl.Utf8,
    "topic": pl.Utf8,
    "resolved": pl.Boolean,
    "notes": pl.Utf8,
    "customer_emotion": pl.Utf8,
    "executive_emotion": pl.Utf8,
    "transferred": pl.Boolean,
    "transferred_to": pl.Utf8,
    "sla_compliant": pl.Boolean,
}


def executives_frame(executives: list[Executive]) -> pl.DataFrame:
    """Convert executives to a Polars frame with a stable schema."""
    return pl.DataFrame([asdict(e) for e in executives], schema=EXECUTIVE_SCHEMA)


def calls_frame(calls: list[Call]) -> pl.DataFrame:
    """Convert calls to a Polars frame with a stable schema."""
    return pl.DataFrame([asdict(c) for c in calls], schema=CALL_SCHEMA)
