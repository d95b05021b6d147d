# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between event wizard steps.

Handles:
- Step progression (next/previous/goto)
- Step validation before forward navigation
- Draft checkpoint after every transition
- Progress tracking
"""

from typing import Callable, Dict, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from models.event_draft import EventDraft
from services.wizard.step_validator import StepValidator
from services.wizard.steps import FIRST_STEP, LAST_STEP, STEP_COUNT, WizardStep, resolve_step
from utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    Owns the current step and gates forward navigation on validation.

    Backward movement and sidebar jumps are never validated. Every
    successful transition is followed by a checkpoint call with the new
    step number.
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_step, new_step
    errors_changed = pyqtSignal(dict)
    validation_failed = pyqtSignal(dict)
    can_go_previous_changed = pyqtSignal(bool)

    def __init__(
        self,
        draft_provider: Callable[[], EventDraft],
        validator: Optional[StepValidator] = None,
        checkpoint: Optional[Callable[[int], None]] = None,
        initial_step: int = FIRST_STEP,
        parent=None,
    ):
        """
        Initialize the navigator.

        Args:
            draft_provider: Returns the draft being edited
            validator: Step validator (default rule set when omitted)
            checkpoint: Called with the new step after each transition
            initial_step: Starting step number
        """
        super().__init__(parent)
        self._draft_provider = draft_provider
        self.validator = validator or StepValidator()
        self._checkpoint = checkpoint
        self._current_step = resolve_step(initial_step).number
        self._errors: Dict[str, str] = {}

    @property
    def current_step(self) -> int:
        return self._current_step

    @property
    def current_wizard_step(self) -> WizardStep:
        return resolve_step(self._current_step)

    @property
    def errors(self) -> Dict[str, str]:
        """Errors published by the last canonical check."""
        return dict(self._errors)

    def can_go_previous(self) -> bool:
        return self._current_step > FIRST_STEP

    def is_next_disabled(self) -> bool:
        """Live probe for the current step; does not publish errors."""
        return self.validator.is_next_disabled(self._current_step, self._draft_provider())

    def next_step(self) -> bool:
        """
        Validate the current step and advance.

        Returns:
            True if navigation was successful
        """
        errors = self.validator.errors_for(self._current_step, self._draft_provider())
        if errors:
            logger.warning(f"Step {self._current_step} validation failed: {errors}")
            self._set_errors(errors)
            self.validation_failed.emit(dict(errors))
            return False

        self._set_errors({})
        target = min(self._current_step + 1, LAST_STEP)
        logger.info(f"Navigating: Step {self._current_step} → {target}")
        return self._navigate_to(target)

    def previous_step(self) -> bool:
        """Navigate to the previous step without validation."""
        target = max(self._current_step - 1, FIRST_STEP)
        logger.info(f"Navigating back: Step {self._current_step} → {target}")
        self._set_errors({})
        return self._navigate_to(target)

    def goto_step(self, step) -> bool:
        """
        Jump to any step without validation.

        Args:
            step: Target step number or WizardStep

        Returns:
            True if navigation was successful
        """
        try:
            target = resolve_step(step).number
        except ValueError:
            logger.error(f"Invalid step: {step} (valid range: {FIRST_STEP}-{LAST_STEP})")
            return False

        logger.info(f"Jumping: Step {self._current_step} → {target}")
        self._set_errors({})
        return self._navigate_to(target)

    def reposition(self, step, errors: Dict[str, str]) -> bool:
        """Move to a failing step and publish its errors."""
        if not self.goto_step(step):
            return False
        self._set_errors(errors)
        self.validation_failed.emit(dict(errors))
        return True

    def restore(self, step: int):
        """Set the step from a restored draft. No checkpoint is written."""
        old_step = self._current_step
        self._current_step = resolve_step(step).number
        self._set_errors({})
        if old_step != self._current_step:
            self.step_changed.emit(old_step, self._current_step)
            self.can_go_previous_changed.emit(self.can_go_previous())

    def _navigate_to(self, new_step: int) -> bool:
        old_step = self._current_step
        self._current_step = new_step

        # Emit signals
        self.step_changed.emit(old_step, new_step)
        self.can_go_previous_changed.emit(self.can_go_previous())

        if self._checkpoint is not None:
            self._checkpoint(new_step)

        logger.info(f"Navigation complete: Step {new_step} is now active")
        return True

    def _set_errors(self, errors: Dict[str, str]):
        if errors == self._errors:
            return
        self._errors = dict(errors)
        self.errors_changed.emit(dict(self._errors))

    def progress_percentage(self) -> float:
        """
        Get current progress as percentage.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        if STEP_COUNT <= 1:
            return 100.0
        return ((self._current_step - FIRST_STEP) / (STEP_COUNT - 1)) * 100.0
