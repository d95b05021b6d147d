# -*- coding: utf-8 -*-
"""
Event creation wizard steps.

Step numbers shown to the user and persisted in draft checkpoints are
derived from the position in STEP_SEQUENCE, so inserting or reordering a
step cannot misalign the validation dispatch table.
"""

from enum import Enum
from typing import Optional, Tuple, Union


class WizardStep(Enum):
    """Sections of the event creation wizard."""

    EVENT_DETAILS = "event_details"
    CATEGORIES = "categories"
    MEAL_SESSIONS = "meal_sessions"
    PAYMENT_SETTINGS = "payment_settings"
    BADGE_TEMPLATE = "badge_template"
    ORGANIZERS = "organizers"

    @property
    def number(self) -> int:
        """1-based position in the wizard."""
        return STEP_SEQUENCE.index(self) + 1

    @property
    def title(self) -> str:
        return STEP_TITLES[self][0]

    @property
    def description(self) -> str:
        return STEP_TITLES[self][1]


STEP_SEQUENCE: Tuple[WizardStep, ...] = (
    WizardStep.EVENT_DETAILS,
    WizardStep.CATEGORIES,
    WizardStep.MEAL_SESSIONS,
    WizardStep.PAYMENT_SETTINGS,
    WizardStep.BADGE_TEMPLATE,
    WizardStep.ORGANIZERS,
)

STEP_TITLES = {
    WizardStep.EVENT_DETAILS: ("Event Details", "Basic event information"),
    WizardStep.CATEGORIES: ("Categories", "Registration categories"),
    WizardStep.MEAL_SESSIONS: ("Meal Sessions", "Catering and meals"),
    WizardStep.PAYMENT_SETTINGS: ("Payment Settings", "Pricing and policies"),
    WizardStep.BADGE_TEMPLATE: ("Badge Template", "Badge design selection"),
    WizardStep.ORGANIZERS: ("Organizers", "Event management"),
}

STEP_COUNT = len(STEP_SEQUENCE)
FIRST_STEP = 1
LAST_STEP = STEP_COUNT


def step_at(number: int) -> Optional[WizardStep]:
    """Step at a 1-based position, or None when out of range."""
    if FIRST_STEP <= number <= LAST_STEP:
        return STEP_SEQUENCE[number - 1]
    return None


def resolve_step(step: Union[WizardStep, int]) -> WizardStep:
    """Accept a WizardStep or its 1-based number."""
    if isinstance(step, WizardStep):
        return step
    resolved = step_at(int(step))
    if resolved is None:
        raise ValueError(f"Invalid wizard step: {step} (valid range: {FIRST_STEP}-{LAST_STEP})")
    return resolved


def clamp_step(number: int) -> int:
    """Clamp a step number into the valid range."""
    return max(FIRST_STEP, min(number, LAST_STEP))
