"""Static mock executives, a seeded call generator and preset widget series.

The preset series back the operations widgets whose figures only exist as
fixed sample data; the dashboard shows them when no live table is available.
"""

from datetime import datetime, timedelta

import numpy as np

from src.data.models import (
    Executive, Call, TOPICS, SENTIMENTS, CUSTOMER_EMOTIONS, EXECUTIVE_EMOTIONS,
)

EXECUTIVES = [
    Executive(
        id="1", name="Alex Johnson", avatar="https://i.pravatar.cc/150?img=1",
        email="alex.johnson@example.com", phone="+1 (555) 123-4567",
        department="Technical Support", performance=94, status="online",
        total_calls=243, resolved_calls=235, average_handling_time=8.5,
        satisfaction_score=4.7, dominant_emotion="happy",
    ),
    Executive(
        id="2", name="Maria Garcia", avatar="https://i.pravatar.cc/150?img=5",
        email="maria.garcia@example.com", phone="+1 (555) 987-6543",
        department="Customer Service", performance=88, status="online",
        total_calls=198, resolved_calls=180, average_handling_time=6.2,
        satisfaction_score=4.5, dominant_emotion="neutral",
    ),
    Executive(
        id="3", name="David Kim", avatar="https://i.pravatar.cc/150?img=3",
        email="david.kim@example.com", phone="+1 (555) 456-7890",
        department="Billing Support", performance=92, status="away",
        total_calls=215, resolved_calls=201, average_handling_time=7.8,
        satisfaction_score=4.6, dominant_emotion="satisfied",
    ),
    Executive(
        id="4", name="Sarah Wilson", avatar="https://i.pravatar.cc/150?img=20",
        email="sarah.wilson@example.com", phone="+1 (555) 789-0123",
        department="Technical Support", performance=79, status="offline",
        total_calls=178, resolved_calls=158, average_handling_time=9.1,
        satisfaction_score=4.2, dominant_emotion="confused",
    ),
    Executive(
        id="5", name="James Taylor", avatar="https://i.pravatar.cc/150?img=8",
        email="james.taylor@example.com", phone="+1 (555) 321-6547",
        department="Customer Service", performance=85, status="online",
        total_calls=205, resolved_calls=187, average_handling_time=7.3,
        satisfaction_score=4.4, dominant_emotion="happy",
    ),
]

SATISFIED_NOTE = "Customer was satisfied with the resolution."


def generate_calls(
    executives: list[Executive] = None,
    now: datetime = None,
    seed: int = 42,
    calls_per_executive: int = 30,
) -> list[Call]:
    """Generate calls for each executive over the 30 days ending at `now`.

    Same seed and `now` always produce the same calls.
    """
    if executives is None:
        executives = EXECUTIVES
    if now is None:
        now = datetime.now()
    rng = np.random.default_rng(seed)
    others = [e.id for e in executives]

    calls = []
    for exec_ in executives:
        for i in range(calls_per_executive):
            transferred = bool(rng.random() < 0.15)
            transferred_to = None
            if transferred and len(others) > 1:
                transferred_to = str(rng.choice([o for o in others if o != exec_.id]))
            calls.append(Call(
                id=f"{exec_.id}-call-{i}",
                executive_id=exec_.id,
                customer_id=f"cust-{rng.integers(0, 1000)}",
                customer_name=f"Customer {rng.integers(0, 1000)}",
                timestamp=now - timedelta(days=int(rng.integers(0, 30))),
                duration=int(rng.integers(60, 960)),
                sentiment=str(rng.choice(SENTIMENTS)),
                topic=str(rng.choice(TOPICS)),
                resolved=bool(rng.random() > 0.15),
                notes=SATISFIED_NOTE if rng.random() > 0.7 else None,
                customer_emotion=str(rng.choice(CUSTOMER_EMOTIONS)),
                executive_emotion=str(rng.choice(EXECUTIVE_EMOTIONS)),
                transferred=transferred,
                transferred_to=transferred_to,
                sla_compliant=bool(rng.random() > 0.15),
            ))
    return calls


# ---------------------------------------------------------------------------
# Preset widget series
# ---------------------------------------------------------------------------

HOURLY_CALL_VOLUME = [
    {"hour": "9:00", "calls": 12},
    {"hour": "10:00", "calls": 24},
    {"hour": "11:00", "calls": 35},
    {"hour": "12:00", "calls": 22},
    {"hour": "13:00", "calls": 15},
    {"hour": "14:00", "calls": 28},
    {"hour": "15:00", "calls": 32},
    {"hour": "16:00", "calls": 27},
    {"hour": "17:00", "calls": 18},
]

PEAK_CALL_HOURS = [
    {"hour": "9:00", "monday": 15, "tuesday": 25, "wednesday": 30, "thursday": 20, "friday": 10},
    {"hour": "10:00", "monday": 20, "tuesday": 30, "wednesday": 35, "thursday": 25, "friday": 15},
    {"hour": "11:00", "monday": 30, "tuesday": 35, "wednesday": 40, "thursday": 30, "friday": 25},
    {"hour": "12:00", "monday": 20, "tuesday": 25, "wednesday": 30, "thursday": 20, "friday": 15},
    {"hour": "13:00", "monday": 15, "tuesday": 20, "wednesday": 25, "thursday": 15, "friday": 10},
    {"hour": "14:00", "monday": 25, "tuesday": 30, "wednesday": 35, "thursday": 25, "friday": 20},
    {"hour": "15:00", "monday": 30, "tuesday": 35, "wednesday": 40, "thursday": 30, "friday": 25},
    {"hour": "16:00", "monday": 25, "tuesday": 30, "wednesday": 35, "thursday": 25, "friday": 20},
    {"hour": "17:00", "monday": 15, "tuesday": 20, "wednesday": 25, "thursday": 15, "friday": 10},
]

CALLS_BY_CATEGORY = [
    {"category": "Monday", "technical": 45, "billing": 30, "general": 25, "complaints": 10},
    {"category": "Tuesday", "technical": 50, "billing": 25, "general": 30, "complaints": 15},
    {"category": "Wednesday", "technical": 40, "billing": 35, "general": 20, "complaints": 12},
    {"category": "Thursday", "technical": 55, "billing": 28, "general": 18, "complaints": 14},
    {"category": "Friday", "technical": 48, "billing": 32, "general": 22, "complaints": 8},
]

CALL_STATUS = [
    {"status": "Answered", "value": 75},
    {"status": "Missed", "value": 15},
    {"status": "Dropped", "value": 10},
]

WEEKLY_CSAT = [
    {"name": "Week 1", "score": 4.2},
    {"name": "Week 2", "score": 4.5},
    {"name": "Week 3", "score": 4.0},
    {"name": "Week 4", "score": 4.7},
    {"name": "Week 5", "score": 4.3},
]

CALL_EFFICIENCY = [
    {"category": "Technical", "resolved": 65, "pending": 35},
    {"category": "Billing", "resolved": 80, "pending": 20},
    {"category": "Product", "resolved": 45, "pending": 55},
    {"category": "General", "resolved": 90, "pending": 10},
]

FCR_BY_CATEGORY = [
    {"category": "Technical", "rate": 88},
    {"category": "Billing", "rate": 82},
    {"category": "General", "rate": 95},
    {"category": "Product", "rate": 78},
    {"category": "Support", "rate": 91},
]

PERFORMANCE_KPIS = [
    {"subject": "Efficiency", "value": 85, "full_mark": 100},
    {"subject": "Resolution", "value": 90, "full_mark": 100},
    {"subject": "Satisfaction", "value": 75, "full_mark": 100},
    {"subject": "Speed", "value": 80, "full_mark": 100},
    {"subject": "Accuracy", "value": 88, "full_mark": 100},
    {"subject": "Empathy", "value": 92, "full_mark": 100},
]

AGENT_SCORECARD = [
    {"name": "Jane Smith", "total_calls": 145, "answered_calls": 138, "missed_calls": 7,
     "avg_handling_time": 4.2, "resolved_rate": 92, "satisfaction_score": 4.8, "status": "online"},
    {"name": "John Doe", "total_calls": 132, "answered_calls": 121, "missed_calls": 11,
     "avg_handling_time": 3.8, "resolved_rate": 85, "satisfaction_score": 4.5, "status": "offline"},
    {"name": "Alice Johnson", "total_calls": 156, "answered_calls": 149, "missed_calls": 7,
     "avg_handling_time": 4.5, "resolved_rate": 94, "satisfaction_score": 4.9, "status": "online"},
    {"name": "Bob Williams", "total_calls": 118, "answered_calls": 105, "missed_calls": 13,
     "avg_handling_time": 5.2, "resolved_rate": 82, "satisfaction_score": 4.3, "status": "break"},
    {"name": "Carol Martinez", "total_calls": 128, "answered_calls": 120, "missed_calls": 8,
     "avg_handling_time": 4.1, "resolved_rate": 90, "satisfaction_score": 4.7, "status": "online"},
]

SATISFACTION_TREND = [4.3, 4.4, 4.5, 4.6, 4.5, 4.7, 4.6, 4.8, 4.7, 4.6, 4.7, 4.7]
PERFORMANCE_TREND = [82, 84, 87, 85, 88, 90, 89, 91, 92, 90, 93, 94]
