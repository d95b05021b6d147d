# -*- coding: utf-8 -*-
"""
Event draft entity models.

EventDraft is the compound object built up by the event creation wizard:
event details, registration categories, meal sessions and payment policy.
Any field may be partially invalid while the user is mid-edit.

Serialization uses the remote camelCase keys so that the dict can be stored
as the draft record's ``draftData`` and restored verbatim.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional
import uuid

from app.config import Config
from utils.datetime_utils import from_isoformat, to_isoformat


def new_temp_id() -> str:
    """Client-side temporary id for a category or meal session."""
    return str(uuid.uuid4())


def _as_int(value: Any, default: int = 0) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_float(value: Any, default: float = 0.0) -> float:
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


@dataclass
class EventCategory:
    """Registration category (ticket tier) of an event."""

    id: str = field(default_factory=new_temp_id)
    name: str = ""
    price: float = 0.0
    max_capacity: int = 0
    description: str = ""

    def is_valid(self) -> bool:
        """Named, non-negative price and a positive capacity."""
        return bool(self.name and self.name.strip()) and self.price >= 0 and self.max_capacity > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "maxCapacity": self.max_capacity,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventCategory":
        return cls(
            id=str(data.get("id") or new_temp_id()),
            name=data.get("name") or "",
            price=_as_float(data.get("price")),
            max_capacity=_as_int(data.get("maxCapacity")),
            description=data.get("description") or "",
        )


@dataclass
class MealSession:
    """
    Catering session of an event.

    A session is complete only when both begin and end times are set.
    The recurring fields describe a template that can be expanded into one
    session per event day (see services.recurring_meals).
    """

    id: str = field(default_factory=new_temp_id)
    name: str = ""
    begin_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    description: str = ""

    # Recurring template settings
    is_recurring: bool = False
    recurring_pattern: str = "daily"  # daily, custom
    recurring_days: List[str] = field(default_factory=list)  # lowercase weekday names
    generated_from_recurring: bool = False

    @property
    def is_complete(self) -> bool:
        return self.begin_time is not None and self.end_time is not None

    @property
    def display_name(self) -> str:
        return self.name or "Unnamed session"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "beginTime": to_isoformat(self.begin_time),
            "endTime": to_isoformat(self.end_time),
            "description": self.description,
            "isRecurring": self.is_recurring,
            "recurringPattern": self.recurring_pattern,
            "recurringDays": list(self.recurring_days),
            "generatedFromRecurring": self.generated_from_recurring,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MealSession":
        return cls(
            id=str(data.get("id") or new_temp_id()),
            name=data.get("name") or "",
            begin_time=from_isoformat(data.get("beginTime")),
            end_time=from_isoformat(data.get("endTime")),
            description=data.get("description") or "",
            is_recurring=bool(data.get("isRecurring", False)),
            recurring_pattern=data.get("recurringPattern") or "daily",
            recurring_days=list(data.get("recurringDays") or []),
            generated_from_recurring=bool(data.get("generatedFromRecurring", False)),
        )


@dataclass
class EventDraft:
    """
    Event under construction.

    ``end_date`` defaults to ``date`` when absent. ``max_capacity == 0`` means
    the event capacity is unconstrained.
    """

    # Event details
    name: str = ""
    description: str = ""
    date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    venue: str = ""
    address: str = ""
    max_capacity: int = 0
    registration_deadline: Optional[datetime] = None
    logo_url: Optional[str] = None

    # Categories (a fresh form starts with one blank category)
    categories: List[EventCategory] = field(default_factory=lambda: [EventCategory()])

    # Meal sessions
    meal_sessions: List[MealSession] = field(default_factory=list)

    # Payment settings
    payment_required: bool = False
    payment_deadline: Optional[datetime] = None
    deposit_allowed: bool = False
    deposit_percentage: int = field(default_factory=lambda: Config.DEFAULT_DEPOSIT_PERCENTAGE)
    full_payment_deadline: Optional[datetime] = None
    late_payment_fee: float = 0.0
    refund_policy: str = "none"  # full, partial, deposit, none

    # Badge template
    badge_template_id: str = field(default_factory=lambda: Config.DEFAULT_BADGE_TEMPLATE_ID)

    # Organizer assignment (user id references)
    assigned_organizers: List[str] = field(default_factory=list)

    @property
    def effective_end_date(self) -> Optional[datetime]:
        """End date, falling back to the start date."""
        return self.end_date or self.date

    def has_seed_content(self, seed_fields: Optional[tuple] = None) -> bool:
        """True when any of the fields that justify persisting a draft is filled in."""
        fields_to_check = seed_fields or Config.DRAFT_SEED_FIELDS
        return any(getattr(self, name, None) for name in fields_to_check)

    def find_meal_session(self, session_id: str) -> Optional[MealSession]:
        for session in self.meal_sessions:
            if session.id == session_id:
                return session
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the draftData dictionary."""
        return {
            "name": self.name,
            "description": self.description,
            "date": to_isoformat(self.date),
            "endDate": to_isoformat(self.end_date),
            "venue": self.venue,
            "address": self.address,
            "maxCapacity": self.max_capacity,
            "registrationDeadline": to_isoformat(self.registration_deadline),
            "logoUrl": self.logo_url,
            "categories": [category.to_dict() for category in self.categories],
            "mealSessions": [session.to_dict() for session in self.meal_sessions],
            "paymentRequired": self.payment_required,
            "paymentDeadline": to_isoformat(self.payment_deadline),
            "depositAllowed": self.deposit_allowed,
            "depositPercentage": self.deposit_percentage,
            "fullPaymentDeadline": to_isoformat(self.full_payment_deadline),
            "latePaymentFee": self.late_payment_fee,
            "refundPolicy": self.refund_policy,
            "badgeTemplateId": self.badge_template_id,
            "assignedOrganizers": list(self.assigned_organizers),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventDraft":
        """Restore a draft from a draftData dictionary."""
        return cls(
            name=data.get("name") or "",
            description=data.get("description") or "",
            date=from_isoformat(data.get("date")),
            end_date=from_isoformat(data.get("endDate")),
            venue=data.get("venue") or "",
            address=data.get("address") or "",
            max_capacity=_as_int(data.get("maxCapacity")),
            registration_deadline=from_isoformat(data.get("registrationDeadline")),
            logo_url=data.get("logoUrl"),
            categories=[EventCategory.from_dict(c) for c in data.get("categories") or []],
            meal_sessions=[MealSession.from_dict(m) for m in data.get("mealSessions") or []],
            payment_required=bool(data.get("paymentRequired", False)),
            payment_deadline=from_isoformat(data.get("paymentDeadline")),
            deposit_allowed=bool(data.get("depositAllowed", False)),
            deposit_percentage=_as_int(data.get("depositPercentage"), Config.DEFAULT_DEPOSIT_PERCENTAGE),
            full_payment_deadline=from_isoformat(data.get("fullPaymentDeadline")),
            late_payment_fee=_as_float(data.get("latePaymentFee")),
            refund_policy=data.get("refundPolicy") or "none",
            badge_template_id=data.get("badgeTemplateId") or "",
            assigned_organizers=[str(u) for u in data.get("assignedOrganizers") or []],
        )
