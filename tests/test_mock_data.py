"""Tests for mock_data module."""

from datetime import datetime, timedelta

from src.data.mock_data import (
    EXECUTIVES, PERFORMANCE_KPIS, AGENT_SCORECARD, SATISFACTION_TREND,
    PERFORMANCE_TREND, SATISFIED_NOTE, generate_calls,
)
from src.data.models import SENTIMENTS, TOPICS, calls_frame, executives_frame

NOW = datetime(2024, 6, 12, 15, 30)


def test_five_executives():
    assert [e.name for e in EXECUTIVES] == [
        "Alex Johnson", "Maria Garcia", "David Kim", "Sarah Wilson", "James Taylor",
    ]


def test_calls_per_executive():
    calls = generate_calls(now=NOW)
    assert len(calls) == 5 * 30
    for exec_ in EXECUTIVES:
        assert sum(1 for c in calls if c.executive_id == exec_.id) == 30


def test_deterministic_for_seed():
    a = generate_calls(now=NOW, seed=7)
    b = generate_calls(now=NOW, seed=7)
    assert a == b


def test_different_seed_differs():
    a = generate_calls(now=NOW, seed=1)
    b = generate_calls(now=NOW, seed=2)
    assert a != b


def test_timestamps_within_thirty_days():
    for call in generate_calls(now=NOW):
        assert NOW - timedelta(days=29) <= call.timestamp <= NOW


def test_field_ranges():
    for call in generate_calls(now=NOW):
        assert 60 <= call.duration < 960
        assert call.sentiment in SENTIMENTS
        assert call.topic in TOPICS
        assert call.notes in (None, SATISFIED_NOTE)


def test_transfers_go_to_other_executive():
    for call in generate_calls(now=NOW):
        if call.transferred:
            assert call.transferred_to is not None
            assert call.transferred_to != call.executive_id
        else:
            assert call.transferred_to is None


def test_single_executive_never_transfers_to_someone():
    calls = generate_calls(EXECUTIVES[:1], now=NOW)
    assert all(c.transferred_to is None for c in calls)


def test_frames_have_stable_schema():
    execs = executives_frame(EXECUTIVES)
    calls = calls_frame(generate_calls(now=NOW, calls_per_executive=2))
    assert execs.height == 5
    assert calls.height == 10
    assert calls.schema["duration"].is_integer()
    assert "sla_compliant" in calls.columns


def test_empty_calls_frame():
    assert calls_frame([]).height == 0


def test_presets():
    assert all(k["full_mark"] == 100 for k in PERFORMANCE_KPIS)
    assert len(AGENT_SCORECARD) == 5
    assert len(SATISFACTION_TREND) == 12
    assert len(PERFORMANCE_TREND) == 12
