"""Tests for dashboard_stats module."""

from datetime import datetime

import pytest

from src.analytics.dashboard_stats import (
    WEEKDAY_LABELS, compute_dashboard_stats, resolution_rate,
    sentiment_percentages, stat_card_trend, weekly_trend,
)
from src.data.mock_data import EXECUTIVES
from src.data.models import Call, calls_frame, executives_frame

# Wednesday
NOW = datetime(2024, 6, 12, 15, 0)


def _call(i, ts, sentiment="positive", resolved=True):
    return Call(
        id=f"c{i}", executive_id="1", customer_id="cust-1", customer_name="Customer 1",
        timestamp=ts, duration=120, sentiment=sentiment, topic="Billing Issue", resolved=resolved,
    )


class TestResolutionRate:
    def test_rounded(self):
        assert resolution_rate(235, 243) == 97

    def test_no_calls(self):
        assert resolution_rate(0, 0) == 0


class TestSentimentPercentages:
    def test_split(self):
        calls = calls_frame([
            _call(1, NOW, "positive"), _call(2, NOW, "positive"),
            _call(3, NOW, "neutral"), _call(4, NOW, "negative"),
        ])
        assert sentiment_percentages(calls) == {"positive": 50.0, "neutral": 25.0, "negative": 25.0}

    def test_empty(self):
        assert sentiment_percentages(calls_frame([])) == {"positive": 0.0, "neutral": 0.0, "negative": 0.0}

    def test_order(self):
        calls = calls_frame([_call(1, NOW, "negative")])
        assert list(sentiment_percentages(calls)) == ["positive", "neutral", "negative"]


class TestWeeklyTrend:
    def test_buckets_by_weekday(self):
        calls = calls_frame([
            _call(1, datetime(2024, 6, 12, 9)),   # Wed
            _call(2, datetime(2024, 6, 10, 11)),  # Mon
            _call(3, datetime(2024, 6, 10, 14)),  # Mon
            _call(4, datetime(2024, 6, 1, 10)),   # outside the window
        ])
        assert weekly_trend(calls, NOW) == [2, 0, 1, 0, 0, 0, 0]

    def test_seven_buckets(self):
        assert len(weekly_trend(calls_frame([]), NOW)) == len(WEEKDAY_LABELS) == 7


class TestStatCardTrend:
    def test_increase(self):
        assert stat_card_trend(110, 100) == (10.0, True)

    def test_decrease(self):
        assert stat_card_trend(90, 100) == (-10.0, False)

    def test_no_previous(self):
        assert stat_card_trend(5, 0) == (0.0, True)


class TestComputeDashboardStats:
    def test_totals_from_executives(self):
        stats = compute_dashboard_stats(executives_frame(EXECUTIVES), calls_frame([]), NOW)
        assert stats.total_calls == 1039
        assert stats.resolved_calls == 961
        assert stats.online_executives == 3
        assert stats.satisfaction_score == pytest.approx(4.48)
        assert stats.average_handling_time == pytest.approx(7.78)

    def test_today_and_pending(self):
        calls = calls_frame([
            _call(1, datetime(2024, 6, 12, 9), resolved=True),
            _call(2, datetime(2024, 6, 12, 10), resolved=False),
            _call(3, datetime(2024, 6, 11, 10), resolved=False),
        ])
        stats = compute_dashboard_stats(executives_frame(EXECUTIVES), calls, NOW)
        assert stats.calls_today == 2
        assert stats.pending_calls == 1

    def test_no_executives(self):
        stats = compute_dashboard_stats(executives_frame([]), calls_frame([]), NOW)
        assert stats.total_calls == 0
        assert stats.satisfaction_score == 0.0
