# -*- coding: utf-8 -*-
"""
Step validation service for the Event Creation Wizard.

Validates draft data for each step without UI coupling. The same rules
back both the live "Next disabled" probe and the canonical check run on
Next/Submit, so the two can never disagree.
"""

from typing import Callable, Dict, List, Optional, Tuple, Union

from models.event_draft import EventDraft
from services.badge_templates import is_known_template
from services.validation.capacity_validator import validate_capacity
from services.validation.interval_overlap import validate_meal_sessions
from services.validation.result import ErrorCode, ValidationResult
from services.validation.temporal_validator import validate_event_dates, validate_payment_dates
from services.validation.validation_strategy import RequiredFieldsValidator
from services.wizard.steps import STEP_SEQUENCE, WizardStep, resolve_step

Rule = Callable[[EventDraft], ValidationResult]

_event_details_required = RequiredFieldsValidator(
    ["name", "date", "venue"],
    messages={
        "name": "Event name is required",
        "date": "Event date is required",
        "venue": "Venue is required",
    },
)

_badge_template_required = RequiredFieldsValidator(
    ["badge_template_id"],
    messages={"badge_template_id": "Please select a badge template"},
)


def _validate_badge_template(draft: EventDraft) -> ValidationResult:
    result = _badge_template_required.validate(draft)
    if result.is_valid and not is_known_template(draft.badge_template_id):
        result.add_error(
            "badge_template_id",
            ErrorCode.UNKNOWN_BADGE_TEMPLATE,
            f"Unknown badge template: {draft.badge_template_id}",
        )
    return result


STEP_RULES: Dict[WizardStep, List[Rule]] = {
    WizardStep.EVENT_DETAILS: [_event_details_required.validate, validate_event_dates],
    WizardStep.CATEGORIES: [validate_capacity],
    WizardStep.MEAL_SESSIONS: [validate_meal_sessions],
    WizardStep.PAYMENT_SETTINGS: [validate_payment_dates],
    WizardStep.BADGE_TEMPLATE: [_validate_badge_template],
    # Organizer assignment is optional
    WizardStep.ORGANIZERS: [],
}


class StepValidator:
    """Validates wizard step data based on the draft."""

    def __init__(self, rules: Optional[Dict[WizardStep, List[Rule]]] = None):
        self.rules = rules if rules is not None else STEP_RULES

    def validate_step(self, step: Union[WizardStep, int], draft: EventDraft) -> ValidationResult:
        """
        Validate the part of the draft that belongs to a step.

        Args:
            step: WizardStep or its 1-based number
            draft: Event draft

        Returns:
            ValidationResult; no issues means the step is valid
        """
        result = ValidationResult()
        for rule in self.rules.get(resolve_step(step), []):
            result.merge(rule(draft))
        return result

    def errors_for(self, step: Union[WizardStep, int], draft: EventDraft) -> Dict[str, str]:
        """Field -> message map for a step (empty when valid)."""
        return self.validate_step(step, draft).error_map()

    def is_step_valid(self, step: Union[WizardStep, int], draft: EventDraft) -> bool:
        return self.validate_step(step, draft).is_valid

    def is_next_disabled(self, step: Union[WizardStep, int], draft: EventDraft) -> bool:
        """Live probe used to grey out the Next control."""
        return not self.is_step_valid(step, draft)

    def first_invalid_step(
        self, draft: EventDraft
    ) -> Optional[Tuple[WizardStep, ValidationResult]]:
        """
        Validate every step in wizard order.

        Returns:
            (step, result) of the first failing step, or None when all pass
        """
        for step in STEP_SEQUENCE:
            result = self.validate_step(step, draft)
            if not result.is_valid:
                return step, result
        return None

    @staticmethod
    def get_step_name(step: Union[WizardStep, int]) -> str:
        """Get display name for step."""
        try:
            return resolve_step(step).title
        except ValueError:
            return ""
