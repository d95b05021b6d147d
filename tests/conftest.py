# -*- coding: utf-8 -*-
"""
Shared fixtures for the EventDesk test suite.
"""

import os
import tempfile
from datetime import datetime

# Keep test logs out of the project tree; must run before app.config is imported
os.environ.setdefault("LOGS_DIR", tempfile.mkdtemp(prefix="eventdesk-logs-"))

import pytest

from models.event_draft import EventCategory, EventDraft, MealSession
from services.draft_store import InMemoryDraftStore


EVENT_START = datetime(2025, 1, 10, 9, 0)


def meal(name, begin, end, **kwargs):
    """Meal session helper taking datetimes."""
    return MealSession(name=name, begin_time=begin, end_time=end, **kwargs)


@pytest.fixture
def event_start():
    return EVENT_START


@pytest.fixture
def valid_draft():
    """A draft that passes every wizard step."""
    return EventDraft(
        name="Tech Summit 2025",
        description="Annual technology summit",
        date=EVENT_START,
        end_date=datetime(2025, 1, 11, 18, 0),
        venue="Convention Center",
        address="1 Main Street",
        max_capacity=100,
        registration_deadline=datetime(2025, 1, 5, 23, 59),
        categories=[
            EventCategory(name="Regular", price=50.0, max_capacity=60),
            EventCategory(name="VIP", price=150.0, max_capacity=40),
        ],
        meal_sessions=[
            meal("Lunch", datetime(2025, 1, 10, 12, 0), datetime(2025, 1, 10, 13, 0)),
            meal("Dinner", datetime(2025, 1, 10, 19, 0), datetime(2025, 1, 10, 21, 0)),
        ],
        payment_required=True,
        payment_deadline=datetime(2025, 1, 1, 12, 0),
        deposit_allowed=True,
        deposit_percentage=30,
        full_payment_deadline=datetime(2025, 1, 8, 12, 0),
        refund_policy="partial",
        badge_template_id="conference-modern",
    )


@pytest.fixture
def store():
    return InMemoryDraftStore()
