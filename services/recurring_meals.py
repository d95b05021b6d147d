# -*- coding: utf-8 -*-
"""
Recurring meal session expansion.

A recurring session is a template: its name and time of day are copied
onto every matching event day, producing one concrete session per day.
"""

from datetime import date, datetime
from typing import List, Optional

from models.event_draft import EventDraft, MealSession, new_temp_id
from utils.datetime_utils import iter_days
from utils.helpers import format_date
from utils.logger import get_logger

logger = get_logger(__name__)

PATTERN_DAILY = "daily"
PATTERN_CUSTOM = "custom"


def day_name(day: date) -> str:
    """Lowercase English weekday name, e.g. 'monday'."""
    return day.strftime("%A").lower()


def event_dates(start: Optional[datetime], end: Optional[datetime] = None) -> List[date]:
    """Every calendar day of the event, start and end included."""
    if start is None:
        return []
    return list(iter_days(start, end))


def _matches_pattern(template: MealSession, day: date) -> bool:
    if template.recurring_pattern == PATTERN_DAILY:
        return True
    if template.recurring_pattern == PATTERN_CUSTOM:
        return day_name(day) in template.recurring_days
    return False


def generate_recurring_sessions(
    template: MealSession,
    start: Optional[datetime],
    end: Optional[datetime] = None,
) -> List[MealSession]:
    """
    Expand a recurring template over the event days.

    Args:
        template: Session carrying the name, times and recurring pattern
        start: Event start
        end: Event end (defaults to the start day)

    Returns:
        Generated sessions in day order; empty when the template has no
        times or no day matches the pattern
    """
    if not template.is_complete:
        return []

    begin, finish = template.begin_time, template.end_time
    sessions = []
    for day in event_dates(start, end):
        if not _matches_pattern(template, day):
            continue
        sessions.append(MealSession(
            id=new_temp_id(),
            name=f"{template.name} - {format_date(day)}",
            begin_time=datetime.combine(day, begin.time()).replace(second=0, microsecond=0),
            end_time=datetime.combine(day, finish.time()).replace(second=0, microsecond=0),
            description=template.description,
            generated_from_recurring=True,
        ))
    return sessions


def expand_recurring_session(draft: EventDraft, session_id: str) -> List[MealSession]:
    """
    Replace a recurring template in the draft with its generated sessions.

    The draft is left untouched when the template is missing, lacks a name
    or times, or expands to nothing.

    Returns:
        The generated sessions (empty when nothing changed)
    """
    template = draft.find_meal_session(session_id)
    if template is None or not template.name or not template.is_complete:
        logger.warning(f"Cannot generate recurring sessions for {session_id}: missing required fields")
        return []

    generated = generate_recurring_sessions(template, draft.date, draft.end_date)
    if not generated:
        logger.info(f"No sessions generated for '{template.name}', keeping template")
        return []

    draft.meal_sessions = [s for s in draft.meal_sessions if s.id != session_id] + generated
    logger.info(f"Generated {len(generated)} sessions from '{template.name}'")
    return generated
