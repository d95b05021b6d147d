# -*- coding: utf-8 -*-
"""
Category capacity rules.
"""

from typing import Iterable

from models.event_draft import EventCategory, EventDraft
from services.validation.result import ErrorCode, ValidationResult
from utils.helpers import format_number


def total_category_capacity(categories: Iterable[EventCategory]) -> int:
    """Sum of every category's capacity (missing capacities count as 0)."""
    return sum(category.max_capacity or 0 for category in categories)


def validate_capacity(draft: EventDraft) -> ValidationResult:
    """
    Validate registration categories against the event.

    - at least one category
    - every category named, with price >= 0 and capacity > 0
    - category capacities fit into the event capacity; an event capacity of
      0 means unbounded and skips this check
    """
    result = ValidationResult()

    if not draft.categories:
        result.add_error(
            "categories",
            ErrorCode.NO_CATEGORIES,
            "At least one category is required",
        )
        return result

    if any(not category.is_valid() for category in draft.categories):
        result.add_error(
            "categories",
            ErrorCode.INVALID_CATEGORY,
            "All categories must have valid name, price, and capacity",
        )

    if draft.max_capacity > 0:
        total = total_category_capacity(draft.categories)
        if total > draft.max_capacity:
            result.add_error(
                "category_capacity",
                ErrorCode.CAPACITY_EXCEEDED,
                f"Total category capacity ({format_number(total)}) exceeds "
                f"event maximum capacity ({format_number(draft.max_capacity)})",
            )

    return result
