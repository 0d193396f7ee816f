"""Tests for distributions module."""

from datetime import datetime

from src.analytics.distributions import (
    call_status_split, dominant_emotion, duration_buckets, efficiency_by_topic,
    emotion_counts, fcr_by_topic, hourly_volume, peak_hours_matrix, sla_compliance,
    topic_counts, transfer_split,
)
from src.data.models import Call, calls_frame

# Monday
MON_9 = datetime(2024, 6, 10, 9, 15)


def _call(i, ts=MON_9, duration=120, topic="Billing Issue", resolved=True,
          transferred=False, sla=None, emotion=None):
    return Call(
        id=f"c{i}", executive_id="1", customer_id="cust-1", customer_name="Customer 1",
        timestamp=ts, duration=duration, sentiment="neutral", topic=topic, resolved=resolved,
        transferred=transferred, sla_compliant=sla, customer_emotion=emotion,
    )


def test_duration_buckets_fixed_order():
    calls = calls_frame([_call(1, duration=30), _call(2, duration=60),
                         _call(3, duration=200), _call(4, duration=700)])
    df = duration_buckets(calls)
    assert df["duration"].to_list() == ["0-1 min", "1-3 min", "3-5 min", "5-10 min", "10+ min"]
    assert df["count"].to_list() == [1, 1, 1, 0, 1]


def test_duration_buckets_empty():
    assert duration_buckets(calls_frame([]))["count"].to_list() == [0, 0, 0, 0, 0]


def test_hourly_volume():
    calls = calls_frame([_call(1), _call(2), _call(3, ts=datetime(2024, 6, 10, 14, 0))])
    df = hourly_volume(calls)
    assert df["hour"].to_list() == ["9:00", "14:00"]
    assert df["calls"].to_list() == [2, 1]


def test_peak_hours_matrix():
    calls = calls_frame([_call(1), _call(2, ts=datetime(2024, 6, 12, 9, 0))])
    df = peak_hours_matrix(calls)
    assert df.columns == ["hour", "monday", "tuesday", "wednesday", "thursday", "friday"]
    row = df.row(0, named=True)
    assert row == {"hour": "9:00", "monday": 1, "tuesday": 0, "wednesday": 1, "thursday": 0, "friday": 0}


def test_peak_hours_with_weekend():
    df = peak_hours_matrix(calls_frame([_call(1)]), weekdays_only=False)
    assert df.columns[-1] == "sunday"


def test_topic_counts():
    calls = calls_frame([_call(1, topic="Complaint"), _call(2, topic="Complaint"), _call(3)])
    assert topic_counts(calls)["topic"].to_list() == ["Complaint", "Billing Issue"]


def test_call_status_split():
    calls = calls_frame([
        _call(1, resolved=True),
        _call(2, resolved=False),
        _call(3, resolved=True, transferred=True),
    ])
    df = call_status_split(calls)
    assert dict(zip(df["status"], df["value"])) == {"Resolved": 1, "Unresolved": 1, "Transferred": 1}


def test_transfer_split_default():
    assert transfer_split(None) == [
        {"name": "Transferred", "value": 15.0},
        {"name": "Not Transferred", "value": 85.0},
    ]


def test_transfer_split_rate():
    assert transfer_split(40)[1]["value"] == 60


def test_efficiency_by_topic():
    calls = calls_frame([_call(1, resolved=True), _call(2, resolved=False),
                         _call(3, topic="Complaint", resolved=True)])
    rows = efficiency_by_topic(calls).to_dicts()
    assert rows == [
        {"category": "Billing Issue", "resolved": 50.0, "pending": 50.0},
        {"category": "Complaint", "resolved": 100.0, "pending": 0.0},
    ]


def test_fcr_excludes_transferred():
    calls = calls_frame([_call(1), _call(2, transferred=True), _call(3, resolved=False), _call(4)])
    assert fcr_by_topic(calls) == [{"category": "Billing Issue", "rate": 50.0}]


def test_fcr_empty():
    assert fcr_by_topic(calls_frame([])) == []


def test_sla_compliance():
    calls = calls_frame([_call(1, sla=True), _call(2, sla=True), _call(3, sla=False), _call(4, sla=True)])
    assert sla_compliance(calls) == 75.0


def test_sla_untracked():
    assert sla_compliance(calls_frame([_call(1), _call(2)])) is None


def test_emotion_counts():
    calls = calls_frame([_call(1, emotion="happy"), _call(2, emotion="happy"),
                         _call(3, emotion="angry"), _call(4)])
    df = emotion_counts(calls)
    assert df.to_dicts() == [{"name": "Happy", "value": 2}, {"name": "Angry", "value": 1}]
    assert dominant_emotion(calls) == "happy"


def test_dominant_emotion_none():
    assert dominant_emotion(calls_frame([_call(1)])) is None
