"""Tests for insights module."""

from src.analytics.insights import (
    agent_comparison_insights, call_volume_insights, csat_insights, detect_series_outliers,
    fcr_insights, hourly_insights, sentiment_insights, sla_insights, summarize_series,
)


class TestSummarizeSeries:
    def test_summary(self):
        s = summarize_series([1, 2, 3])
        assert s.count == 3
        assert s.mean == 2.0
        assert s.above_mean == 1
        assert (s.argmin, s.argmax) == (0, 2)

    def test_empty(self):
        assert summarize_series([]) is None


class TestOutliers:
    def test_spike_flagged(self):
        flags = detect_series_outliers([1] * 9 + [50])
        assert flags[-1] is True
        assert not any(flags[:-1])

    def test_short_series(self):
        assert detect_series_outliers([1, 100, 1]) == [False, False, False]

    def test_constant_series(self):
        assert detect_series_outliers([4, 4, 4, 4, 4]) == [False] * 5


def test_call_volume_insights():
    lines = call_volume_insights(["Mon", "Tue", "Wed"], [10, 30, 20])
    assert lines[0] == "Busiest period: Tue with 30 calls."
    assert lines[1] == "Quietest period: Mon with 10 calls."
    assert "1 of 3 periods are above average" in lines[2]


def test_call_volume_empty():
    assert call_volume_insights([], []) == ["No call volume data available."]


def test_sentiment_insights():
    lines = sentiment_insights({"positive": 60.0, "neutral": 25.0, "negative": 15.0})
    assert lines[0] == "Positive sentiment leads at 60% of calls."
    assert "45 points" in lines[1]


def test_sentiment_insights_negative_heavy():
    lines = sentiment_insights({"positive": 10.0, "neutral": 30.0, "negative": 60.0})
    assert "Negative calls outnumber positive" in lines[1]


def test_sentiment_insights_empty():
    assert sentiment_insights({"positive": 0.0, "neutral": 0.0, "negative": 0.0}) == [
        "No sentiment data available."
    ]


def test_csat_insights():
    lines = csat_insights(["Week 1", "Week 2"], [4.0, 4.6])
    assert "Best: Week 2 (4.6)" in lines[1]
    assert lines[2] == "1 of 2 periods rated excellent."


def test_fcr_insights_lists_below_target():
    lines = fcr_insights(["Technical", "General", "Product"], [88, 95, 78])
    assert lines[0] == "Highest first-call resolution: General (95%)."
    assert lines[-1] == "Below 90% target: Technical, Product."


def test_sla_insights():
    assert sla_insights(92) == ["SLA compliance of 92% meets the 90% target."]
    assert "5 points below" in sla_insights(85)[0]


def test_agent_comparison_insights():
    lines = agent_comparison_insights(["A", "B"], [100, 150], [5.0, 4.0])
    assert lines[0] == "B handled the most calls (150)."
    assert lines[1] == "B has the shortest handling time (4.0 min)."


def test_hourly_insights():
    lines = hourly_insights(["9:00", "10:00", "11:00"], [12, 24, 35])
    assert lines[0].startswith("Peak hour: 11:00 (35 calls)")
