# -*- coding: utf-8 -*-
"""
Event creation wizard engine: step catalogue, step validation and navigation.
"""

from .steps import STEP_COUNT, STEP_SEQUENCE, WizardStep, step_at
from .step_validator import StepValidator
from .step_navigator import StepNavigator

__all__ = [
    'STEP_COUNT',
    'STEP_SEQUENCE',
    'WizardStep',
    'step_at',
    'StepValidator',
    'StepNavigator',
]
