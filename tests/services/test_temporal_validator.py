# -*- coding: utf-8 -*-
"""
Tests for the temporal consistency rules.

Tests cover:
- End date and registration deadline
- Payment deadline, deposit percentage and full payment deadline
- Strictness of "before the event" comparisons
"""

from datetime import datetime, timedelta

import pytest

from models.event_draft import EventDraft
from services.validation import ErrorCode, validate_dates, validate_event_dates, validate_payment_dates


START = datetime(2025, 1, 10, 9, 0)


@pytest.fixture
def draft():
    return EventDraft(name="Expo", date=START, venue="Hall A")


@pytest.fixture
def paid_draft(draft):
    draft.payment_required = True
    draft.payment_deadline = START - timedelta(days=7)
    return draft


class TestEventDates:
    """End date and registration deadline rules."""

    def test_no_optional_dates_is_valid(self, draft):
        assert validate_event_dates(draft).is_valid

    def test_end_date_before_start(self, draft):
        draft.end_date = START - timedelta(hours=1)
        result = validate_event_dates(draft)

        assert result.has(ErrorCode.END_DATE_BEFORE_START)
        assert result.error_map()["end_date"] == "End date must be equal to or after the start date"

    def test_end_date_equal_to_start_is_allowed(self, draft):
        draft.end_date = START
        assert validate_event_dates(draft).is_valid

    def test_registration_deadline_equal_to_start_fails(self, draft):
        draft.registration_deadline = START
        result = validate_event_dates(draft)

        assert result.codes == {ErrorCode.DEADLINE_NOT_BEFORE_START}
        assert "registration_deadline" in result.error_map()

    def test_registration_deadline_one_second_before_passes(self, draft):
        draft.registration_deadline = START - timedelta(seconds=1)
        assert validate_event_dates(draft).is_valid

    def test_registration_deadline_one_millisecond_before_passes(self, draft):
        draft.registration_deadline = START - timedelta(milliseconds=1)
        assert validate_event_dates(draft).is_valid

    def test_registration_deadline_ignored_without_date(self):
        draft = EventDraft(registration_deadline=START)
        assert validate_event_dates(draft).is_valid

    def test_both_rules_reported_independently(self, draft):
        draft.end_date = START - timedelta(days=1)
        draft.registration_deadline = START + timedelta(days=1)
        result = validate_event_dates(draft)

        assert result.codes == {ErrorCode.END_DATE_BEFORE_START, ErrorCode.DEADLINE_NOT_BEFORE_START}


class TestPaymentDates:
    """Payment branch rules."""

    def test_skipped_when_payment_not_required(self, draft):
        draft.payment_deadline = START + timedelta(days=1)
        draft.deposit_allowed = True
        draft.deposit_percentage = 0
        assert validate_payment_dates(draft).is_valid

    def test_missing_payment_deadline(self, draft):
        draft.payment_required = True
        result = validate_payment_dates(draft)

        assert result.has(ErrorCode.MISSING_PAYMENT_DEADLINE)

    def test_payment_deadline_at_start_fails(self, paid_draft):
        paid_draft.payment_deadline = START
        assert validate_payment_dates(paid_draft).has(ErrorCode.PAYMENT_DEADLINE_NOT_BEFORE_START)

    def test_valid_payment_without_deposit(self, paid_draft):
        assert validate_payment_dates(paid_draft).is_valid

    def test_zero_deposit_percentage(self, paid_draft):
        paid_draft.deposit_allowed = True
        paid_draft.deposit_percentage = 0
        paid_draft.full_payment_deadline = START - timedelta(days=1)
        result = validate_payment_dates(paid_draft)

        assert result.codes == {ErrorCode.INVALID_DEPOSIT_PERCENTAGE}
        assert "deposit_percentage" in result.error_map()

    @pytest.mark.parametrize("percentage", [100, 150, -5])
    def test_out_of_range_deposit_percentage(self, paid_draft, percentage):
        paid_draft.deposit_allowed = True
        paid_draft.deposit_percentage = percentage
        paid_draft.full_payment_deadline = START - timedelta(days=1)
        assert validate_payment_dates(paid_draft).has(ErrorCode.INVALID_DEPOSIT_PERCENTAGE)

    def test_missing_full_payment_deadline(self, paid_draft):
        paid_draft.deposit_allowed = True
        result = validate_payment_dates(paid_draft)

        assert result.codes == {ErrorCode.MISSING_FULL_PAYMENT_DEADLINE}

    def test_full_payment_deadline_at_start_fails(self, paid_draft):
        paid_draft.deposit_allowed = True
        paid_draft.full_payment_deadline = START
        assert validate_payment_dates(paid_draft).has(ErrorCode.FULL_PAYMENT_DEADLINE_NOT_BEFORE_START)

    def test_full_payment_deadline_before_initial(self, paid_draft):
        paid_draft.deposit_allowed = True
        paid_draft.full_payment_deadline = paid_draft.payment_deadline - timedelta(minutes=1)
        result = validate_payment_dates(paid_draft)

        assert result.codes == {ErrorCode.FULL_PAYMENT_DEADLINE_BEFORE_INITIAL}

    def test_full_payment_deadline_equal_to_initial_is_accepted(self, paid_draft):
        paid_draft.deposit_allowed = True
        paid_draft.full_payment_deadline = paid_draft.payment_deadline
        assert validate_payment_dates(paid_draft).is_valid


class TestValidateDates:
    """Combined rule set."""

    def test_collects_both_groups(self, paid_draft):
        paid_draft.end_date = START - timedelta(days=2)
        paid_draft.payment_deadline = START + timedelta(days=1)
        result = validate_dates(paid_draft)

        assert ErrorCode.END_DATE_BEFORE_START in result.codes
        assert ErrorCode.PAYMENT_DEADLINE_NOT_BEFORE_START in result.codes

    def test_idempotent(self, paid_draft):
        paid_draft.registration_deadline = START
        paid_draft.deposit_allowed = True

        assert validate_dates(paid_draft).error_map() == validate_dates(paid_draft).error_map()
