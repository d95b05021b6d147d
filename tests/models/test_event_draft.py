# -*- coding: utf-8 -*-
"""
Tests for the event draft models and their draftData serialization.
"""

from datetime import datetime, timedelta, timezone

from app.config import Config
from models.draft_record import DraftRecord
from models.event_draft import EventCategory, EventDraft, MealSession


class TestEventDraftDefaults:

    def test_fresh_draft(self):
        draft = EventDraft()

        assert len(draft.categories) == 1
        assert draft.categories[0].name == ""
        assert draft.meal_sessions == []
        assert draft.badge_template_id == Config.DEFAULT_BADGE_TEMPLATE_ID
        assert draft.deposit_percentage == Config.DEFAULT_DEPOSIT_PERCENTAGE
        assert draft.refund_policy == "none"

    def test_effective_end_date(self):
        start = datetime(2025, 1, 10, 9)
        assert EventDraft(date=start).effective_end_date == start
        assert EventDraft(date=start, end_date=start + timedelta(days=1)).effective_end_date == start + timedelta(days=1)

    def test_seed_content(self):
        assert not EventDraft().has_seed_content()
        assert EventDraft(description="Draft notes").has_seed_content()
        assert not EventDraft(address="1 Main Street").has_seed_content()


class TestSerialization:

    def test_camel_case_keys(self, valid_draft):
        data = valid_draft.to_dict()

        assert data["maxCapacity"] == 100
        assert data["registrationDeadline"] == "2025-01-05T23:59:00"
        assert data["categories"][0]["maxCapacity"] == 60
        assert data["mealSessions"][0]["beginTime"] == "2025-01-10T12:00:00"
        assert data["endDate"] == "2025-01-11T18:00:00"

    def test_round_trip(self, valid_draft):
        assert EventDraft.from_dict(valid_draft.to_dict()) == valid_draft

    def test_partial_draft_round_trip(self):
        draft = EventDraft(name="Half done", payment_required=True, deposit_allowed=True,
                           categories=[], badge_template_id="")
        assert EventDraft.from_dict(draft.to_dict()) == draft

    def test_form_strings_are_parsed(self):
        draft = EventDraft.from_dict({
            "name": "Expo",
            "date": "2025-01-10T09:00",
            "endDate": "",
            "maxCapacity": "250",
            "categories": [{"id": "c1", "name": "General", "price": "12.5", "maxCapacity": "100"}],
        })

        assert draft.date == datetime(2025, 1, 10, 9, 0)
        assert draft.end_date is None
        assert draft.max_capacity == 250
        assert draft.categories == [EventCategory(id="c1", name="General", price=12.5, max_capacity=100)]

    def test_aware_timestamps_become_local_naive(self):
        aware = datetime(2025, 1, 10, 9, 0, tzinfo=timezone.utc)
        session = MealSession.from_dict({"beginTime": "2025-01-10T09:00:00Z"})

        assert session.begin_time.tzinfo is None
        assert session.begin_time == aware.astimezone().replace(tzinfo=None)


class TestDraftRecord:

    def test_round_trip(self, valid_draft):
        record = DraftRecord(draft_data=valid_draft, current_step=4, id="d1", user_id="u1",
                             last_saved_at=datetime(2025, 1, 2, 10, 0))
        restored = DraftRecord.from_dict(record.to_dict())

        assert restored == record

    def test_expiry(self, valid_draft):
        record = DraftRecord(draft_data=valid_draft, expires_at=datetime(2025, 1, 9))

        assert record.is_expired(at=datetime(2025, 1, 10))
        assert not record.is_expired(at=datetime(2025, 1, 8))
        assert not DraftRecord(draft_data=valid_draft).is_expired()
