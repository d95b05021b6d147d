# -*- coding: utf-8 -*-
"""
Validation Strategy Pattern - Abstract interface for draft validation.

Provides a pluggable architecture for validation rules over an EventDraft
without modifying existing validation logic.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from models.event_draft import EventDraft
from services.validation.result import ErrorCode, ValidationResult


class ValidationStrategy(ABC):
    """
    Abstract base class for validation strategies.

    Each strategy implements one group of rules over the draft.
    """

    @abstractmethod
    def validate(self, draft: EventDraft) -> ValidationResult:
        """
        Validate a draft.

        Args:
            draft: Event draft to validate

        Returns:
            ValidationResult (no issues when valid)
        """
        pass

    def is_valid(self, draft: EventDraft) -> bool:
        """Check if the draft passes this strategy's rules."""
        return self.validate(draft).is_valid


class RequiredFieldsValidator(ValidationStrategy):
    """
    Generic validator for checking required fields.

    Validates that the named draft attributes are set and, for strings,
    not blank.
    """

    def __init__(self, required_fields: List[str], messages: Optional[Dict[str, str]] = None):
        """
        Initialize validator with required fields.

        Args:
            required_fields: Draft attribute names that must be filled in
            messages: Optional mapping of attribute name to error message
        """
        self.required_fields = list(required_fields)
        self.messages = messages or {}

    @staticmethod
    def _is_empty(value: Any) -> bool:
        return value is None or (isinstance(value, str) and not value.strip())

    def validate(self, draft: EventDraft) -> ValidationResult:
        result = ValidationResult()

        for field_name in self.required_fields:
            if self._is_empty(getattr(draft, field_name, None)):
                message = self.messages.get(
                    field_name,
                    f"{field_name.replace('_', ' ').capitalize()} is required"
                )
                result.add_error(field_name, ErrorCode.REQUIRED_FIELD, message)

        return result
