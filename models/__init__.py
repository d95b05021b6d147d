# -*- coding: utf-8 -*-
"""
EventDesk Data Models
"""

from .event_draft import EventCategory, EventDraft, MealSession
from .draft_record import DraftRecord

__all__ = [
    "EventCategory",
    "EventDraft",
    "MealSession",
    "DraftRecord",
]
