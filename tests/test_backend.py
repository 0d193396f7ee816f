"""Tests for backend module."""

import pytest

from src.config import BackendConfig
from src.data.backend import (
    BackendError, create_backend, executives_from_rows, fetch_table, get_chart_data,
    get_dashboard_metrics, get_executive_performance, get_sentiment_distribution,
    initialize_database, metrics_from_rows, sample_rows, sentiment_from_rows,
    table_status, trend_from_rows,
)
from fakes import FakeClient


def _config():
    return BackendConfig(url="https://example.supabase.co", key="anon-key", disabled=False)


def test_create_backend_unconfigured():
    assert create_backend(BackendConfig(url="", key="", disabled=False)) is None


def test_create_backend_disabled():
    assert create_backend(BackendConfig(url="https://x.supabase.co", key="k", disabled=True)) is None


class TestFetchTable:
    def test_rows_and_limit(self):
        client = FakeClient({"calls": [{"id": 1}, {"id": 2}]})
        assert fetch_table(client, "calls", limit=1) == [{"id": 1}]
        assert client.queries == [("calls", "*", 1)]

    def test_failure_wrapped(self):
        client = FakeClient(failing={"calls"})
        with pytest.raises(BackendError, match="Failed to read calls"):
            fetch_table(client, "calls")


class TestNamedHelpers:
    def test_tables_read(self):
        client = FakeClient({"call_trends": [{"day": "Mon", "calls": 4}]})
        config = _config()
        assert get_chart_data(client, config) == [{"day": "Mon", "calls": 4}]
        assert get_dashboard_metrics(client, config) == []
        assert get_executive_performance(client, config) == []
        assert get_sentiment_distribution(client, config) == []
        assert [q[0] for q in client.queries] == [
            "call_trends", "dashboard_stats", "executive_performance", "sentiment_distribution",
        ]

    def test_error_returns_none(self):
        client = FakeClient(failing={"dashboard_stats"})
        assert get_dashboard_metrics(client, _config()) is None


class TestInitializeDatabase:
    def test_invokes_when_empty(self):
        client = FakeClient()
        assert initialize_database(client, _config()) is True
        assert client.functions.invoked == ["initialize-chart-data"]

    def test_skips_when_populated(self):
        client = FakeClient({"call_trends": [{"day": "Mon", "calls": 1}]})
        assert initialize_database(client, _config()) is False
        assert client.functions.invoked == []

    def test_invoke_failure_does_not_raise(self):
        client = FakeClient(fail_functions=True)
        assert initialize_database(client, _config()) is False

    def test_check_failure_does_not_raise(self):
        client = FakeClient(failing={"call_trends"})
        assert initialize_database(client, _config()) is False
        assert client.functions.invoked == []


def test_table_status():
    client = FakeClient({"calls": [{"id": 1}, {"id": 2}]}, failing={"user"})
    status = table_status(client, ["calls", "user"])
    assert status[0] == {"table": "calls", "status": "Available", "rows_previewed": 1, "error": None}
    assert status[1]["status"] == "Unavailable"
    assert "user" in status[1]["error"]


def test_sample_rows():
    client = FakeClient({"calls": [{"id": 1}, {"id": 2}], "user": []})
    assert sample_rows(client, ["calls", "user"]) == {"calls": [{"id": 1}], "user": []}


class TestNormalizers:
    def test_executives_aliases_and_defaults(self):
        df = executives_from_rows([
            {"id": 7, "name": "Pat Lee", "department": "Billing Support", "performance": 81,
             "total_calls": 10, "resolved_calls": 8, "avg_handling_time": 5, "csat": 4.1,
             "fcr_rate": 77.5},
            {"name": "No Id"},
        ])
        first = df.row(0, named=True)
        assert first["id"] == "7"
        assert first["average_handling_time"] == 5.0
        assert first["satisfaction_score"] == 4.1
        assert first["first_call_resolution_rate"] == 77.5
        assert first["status"] == "offline"
        second = df.row(1, named=True)
        assert second["id"] == "2"
        assert second["total_calls"] == 0

    def test_unknown_status_is_offline(self):
        df = executives_from_rows([{"id": "1", "name": "A", "status": "break"}])
        assert df["status"].to_list() == ["offline"]

    def test_trend_keeps_order(self):
        df = trend_from_rows([{"day": "Tue", "calls": 3}, {"day": "Mon", "calls": None}])
        assert df["label"].to_list() == ["Tue", "Mon"]
        assert df["calls"].to_list() == [3, 0]

    def test_sentiment(self):
        dist = sentiment_from_rows([
            {"sentiment": "Positive", "percentage": 60},
            {"sentiment": "negative", "value": 15},
            {"sentiment": "mixed", "percentage": 5},
        ])
        assert dist == {"positive": 60.0, "neutral": 0.0, "negative": 15.0}

    def test_metrics(self):
        rows = [{"metric": "calls_today", "value": 47}, {"metric": None, "value": 1}]
        assert metrics_from_rows(rows) == {"calls_today": 47.0}

    def test_metrics_skip_missing_or_non_numeric_values(self):
        rows = [
            {"metric": "calls_today", "value": None},
            {"metric": "pending_calls"},
            {"metric": "total_calls", "value": "n/a"},
            {"metric": "satisfaction_score", "value": float("nan")},
            {"metric": "resolved_calls", "value": "12"},
        ]
        assert metrics_from_rows(rows) == {"resolved_calls": 12.0}
