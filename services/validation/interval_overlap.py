# -*- coding: utf-8 -*-
"""
Meal session interval checks.

Overlap detection groups sessions by the local calendar day of their begin
time and compares only sessions on the same day, using the half-open rule
``a.begin < b.end and a.end > b.begin``. Touching endpoints do not overlap,
and sessions on different days never collide even when they are minutes
apart across midnight.
"""

from datetime import datetime
from itertools import combinations
from typing import Iterable, List, Optional, Tuple

from models.event_draft import EventDraft, MealSession
from services.validation.result import ErrorCode, ValidationResult
from utils.datetime_utils import end_of_day, is_same_day


def complete_sessions(sessions: Iterable[MealSession]) -> List[MealSession]:
    """Sessions with both begin and end times set."""
    return [session for session in sessions if session.is_complete]


def intervals_intersect(first: MealSession, second: MealSession) -> bool:
    """Half-open interval intersection of two complete sessions."""
    return first.begin_time < second.end_time and first.end_time > second.begin_time


def find_overlapping_pair(
    sessions: Iterable[MealSession],
) -> Optional[Tuple[MealSession, MealSession]]:
    """First pair of same-day sessions whose intervals intersect, if any."""
    for first, second in combinations(complete_sessions(sessions), 2):
        if is_same_day(first.begin_time, second.begin_time) and intervals_intersect(first, second):
            return first, second
    return None


def detect_overlap(sessions: Iterable[MealSession]) -> bool:
    """True when any two sessions on the same calendar day overlap."""
    return find_overlapping_pair(sessions) is not None


def find_invalid_time_ranges(sessions: Iterable[MealSession]) -> List[MealSession]:
    """Complete sessions that do not end after they begin."""
    return [s for s in complete_sessions(sessions) if s.begin_time >= s.end_time]


def find_incomplete_sessions(sessions: Iterable[MealSession]) -> List[MealSession]:
    """Named sessions that are missing a begin or end time."""
    return [s for s in sessions if s.name and not s.is_complete]


def validate_date_range(
    sessions: Iterable[MealSession],
    event_start: Optional[datetime],
    event_end: Optional[datetime] = None,
) -> List[str]:
    """
    Describe every session lying outside the event's date span.

    A session may end as late as the last millisecond of the event's end
    day, so same-day evening sessions are accepted. The end day defaults to
    the start day. Both violations of one session are reported.

    Returns:
        Human readable violations, empty when all sessions fit
    """
    if event_start is None:
        return []

    latest_end = end_of_day(event_end or event_start)
    violations: List[str] = []

    for session in complete_sessions(sessions):
        if session.begin_time < event_start:
            violations.append(f'"{session.display_name}" starts before the event begins')
        if session.end_time > latest_end:
            violations.append(f'"{session.display_name}" ends after the event ends')

    return violations


def validate_meal_sessions(draft: EventDraft) -> ValidationResult:
    """All meal session rules of the draft; no sessions means nothing to check."""
    result = ValidationResult()
    sessions = draft.meal_sessions
    if not sessions:
        return result

    if find_incomplete_sessions(sessions):
        result.add_error(
            "meal_session_times",
            ErrorCode.INCOMPLETE_SESSION,
            "All meal sessions must have both begin and end times",
        )

    if find_invalid_time_ranges(sessions):
        result.add_error(
            "meal_session_times",
            ErrorCode.INVALID_SESSION_TIME_RANGE,
            "End time must be after begin time for all meal sessions",
        )

    if detect_overlap(sessions):
        result.add_error(
            "meal_session_overlap",
            ErrorCode.SESSION_OVERLAP,
            "Meal sessions on the same day cannot overlap. Please adjust the times.",
        )

    violations = validate_date_range(sessions, draft.date, draft.end_date)
    if violations:
        result.add_error(
            "meal_session_date_range",
            ErrorCode.SESSION_OUTSIDE_EVENT,
            f"Meal sessions must be within event dates: {', '.join(violations)}",
        )

    return result
