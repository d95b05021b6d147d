# -*- coding: utf-8 -*-
"""
Validation result types.

Validators never raise for invalid user input: they return a
ValidationResult that the UI renders as a field -> message map.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Set


class ErrorCode(Enum):
    """Validation error codes."""

    # Temporal consistency
    END_DATE_BEFORE_START = "EndDateBeforeStart"
    DEADLINE_NOT_BEFORE_START = "DeadlineNotBeforeStart"
    MISSING_PAYMENT_DEADLINE = "MissingPaymentDeadline"
    PAYMENT_DEADLINE_NOT_BEFORE_START = "PaymentDeadlineNotBeforeStart"
    INVALID_DEPOSIT_PERCENTAGE = "InvalidDepositPercentage"
    MISSING_FULL_PAYMENT_DEADLINE = "MissingFullPaymentDeadline"
    FULL_PAYMENT_DEADLINE_NOT_BEFORE_START = "FullPaymentDeadlineNotBeforeStart"
    FULL_PAYMENT_DEADLINE_BEFORE_INITIAL = "FullPaymentDeadlineBeforeInitial"

    # Capacity
    NO_CATEGORIES = "NoCategories"
    INVALID_CATEGORY = "InvalidCategory"
    CAPACITY_EXCEEDED = "CapacityExceeded"

    # Meal sessions
    INCOMPLETE_SESSION = "IncompleteSession"
    INVALID_SESSION_TIME_RANGE = "InvalidSessionTimeRange"
    SESSION_OVERLAP = "SessionOverlap"
    SESSION_OUTSIDE_EVENT = "SessionOutsideEvent"

    # Generic
    REQUIRED_FIELD = "RequiredField"
    UNKNOWN_BADGE_TEMPLATE = "UnknownBadgeTemplate"


@dataclass(frozen=True)
class ValidationIssue:
    """A single field-scoped validation failure."""

    field: str
    code: ErrorCode
    message: str


@dataclass
class ValidationResult:
    """Ordered collection of validation issues."""

    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    @property
    def codes(self) -> Set[ErrorCode]:
        return {issue.code for issue in self.issues}

    def has(self, code: ErrorCode) -> bool:
        return any(issue.code is code for issue in self.issues)

    def add_error(self, field_name: str, code: ErrorCode, message: str):
        """Add an error for a field."""
        self.issues.append(ValidationIssue(field=field_name, code=code, message=message))

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Append another result's issues; returns self for chaining."""
        self.issues.extend(other.issues)
        return self

    def error_map(self) -> Dict[str, str]:
        """
        Field -> message map shown next to the form fields.

        When several issues target the same field, the last one wins.
        """
        errors: Dict[str, str] = {}
        for issue in self.issues:
            errors[issue.field] = issue.message
        return errors
