# -*- coding: utf-8 -*-
"""
Temporal consistency rules for event dates and payment deadlines.

Every rule is checked independently; one failure never hides another.
"Before the event" is strict: a deadline equal to the event start fails.
"""

from models.event_draft import EventDraft
from services.validation.result import ErrorCode, ValidationResult


def validate_event_dates(draft: EventDraft) -> ValidationResult:
    """End date and registration deadline rules (event details step)."""
    result = ValidationResult()

    # Equality is allowed: single-day events may set end_date == date
    if draft.end_date is not None and draft.date is not None and draft.end_date < draft.date:
        result.add_error(
            "end_date",
            ErrorCode.END_DATE_BEFORE_START,
            "End date must be equal to or after the start date",
        )

    if (
        draft.registration_deadline is not None
        and draft.date is not None
        and draft.registration_deadline >= draft.date
    ):
        result.add_error(
            "registration_deadline",
            ErrorCode.DEADLINE_NOT_BEFORE_START,
            "Registration deadline must be before event start date",
        )

    return result


def validate_payment_dates(draft: EventDraft) -> ValidationResult:
    """Payment deadline and deposit rules; a no-op unless payment is required."""
    result = ValidationResult()
    if not draft.payment_required:
        return result

    event_start = draft.date

    if draft.payment_deadline is None:
        result.add_error(
            "payment_deadline",
            ErrorCode.MISSING_PAYMENT_DEADLINE,
            "Payment deadline is required when payment is enabled",
        )
    elif event_start is not None and draft.payment_deadline >= event_start:
        result.add_error(
            "payment_deadline",
            ErrorCode.PAYMENT_DEADLINE_NOT_BEFORE_START,
            "Payment deadline must be before the event start date",
        )

    if not draft.deposit_allowed:
        return result

    percentage = draft.deposit_percentage
    if percentage is None or not 0 < percentage < 100:
        result.add_error(
            "deposit_percentage",
            ErrorCode.INVALID_DEPOSIT_PERCENTAGE,
            "Deposit percentage must be between 1 and 99",
        )

    full_deadline = draft.full_payment_deadline
    if full_deadline is None:
        result.add_error(
            "full_payment_deadline",
            ErrorCode.MISSING_FULL_PAYMENT_DEADLINE,
            "Full payment deadline is required when deposits are allowed",
        )
        return result

    if event_start is not None and full_deadline >= event_start:
        result.add_error(
            "full_payment_deadline",
            ErrorCode.FULL_PAYMENT_DEADLINE_NOT_BEFORE_START,
            "Full payment deadline must be before the event start date",
        )

    # Equal deadlines are accepted
    if draft.payment_deadline is not None and full_deadline < draft.payment_deadline:
        result.add_error(
            "full_payment_deadline",
            ErrorCode.FULL_PAYMENT_DEADLINE_BEFORE_INITIAL,
            "Full payment deadline must be after or equal to the initial payment deadline",
        )

    return result


def validate_dates(draft: EventDraft) -> ValidationResult:
    """All temporal rules over the draft."""
    return validate_event_dates(draft).merge(validate_payment_dates(draft))
