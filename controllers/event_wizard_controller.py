# -*- coding: utf-8 -*-
"""
Event Wizard Controller
=======================
Surface of the event creation wizard exposed to the UI layer.

Wires the step navigator to the draft controller so that every step
transition is checkpointed, and runs submission: full re-validation,
event creation, draft removal and organizer assignment.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController, OperationResult
from controllers.draft_controller import DraftController
from models.event_draft import EventDraft, MealSession
from services.event_creation_service import EventCreationService
from services.exceptions import PartialAssignmentError, SubmissionError
from services.recurring_meals import expand_recurring_session
from services.wizard.step_navigator import StepNavigator
from services.wizard.step_validator import StepValidator
from utils.logger import get_logger

logger = get_logger(__name__)


class EventWizardController(BaseController):
    """
    Controller for the event creation wizard.

    Usage:
        client = EventAdminApiClient()
        controller = EventWizardController(
            DraftController(ApiDraftStore(client)),
            EventCreationService(client),
        )
        controller.load_draft()
        controller.update_field(name="Tech Summit")
        controller.next()
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_step, new_step
    errors_changed = pyqtSignal(dict)
    event_created = pyqtSignal(str)  # event id
    submission_failed = pyqtSignal(str)
    assignment_warning = pyqtSignal(str)

    def __init__(
        self,
        drafts: DraftController,
        creation_service: EventCreationService,
        validator: Optional[StepValidator] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.drafts = drafts
        self.creation_service = creation_service
        self.validator = validator or StepValidator()
        self.navigator = StepNavigator(
            draft_provider=lambda: self.drafts.draft,
            validator=self.validator,
            checkpoint=self.drafts.checkpoint,
            initial_step=self.drafts.current_step,
            parent=self,
        )
        self._is_submitting = False
        self._created_event_id: Optional[str] = None

        self.navigator.step_changed.connect(self.step_changed)
        self.navigator.errors_changed.connect(self.errors_changed)
        self.drafts.draft_restored.connect(self.navigator.restore)

    # ==================== State ====================

    @property
    def draft(self) -> EventDraft:
        return self.drafts.draft

    @property
    def current_step(self) -> int:
        return self.navigator.current_step

    @property
    def errors(self) -> Dict[str, str]:
        return self.navigator.errors

    @property
    def has_unsaved_changes(self) -> bool:
        return self.drafts.has_unsaved_changes

    @property
    def last_saved_at(self) -> Optional[datetime]:
        return self.drafts.last_saved_at

    @property
    def is_submitting(self) -> bool:
        return self._is_submitting

    @property
    def created_event_id(self) -> Optional[str]:
        """Id of the event created by this wizard, once submitted."""
        return self._created_event_id

    def is_next_disabled(self) -> bool:
        return self.navigator.is_next_disabled()

    # ==================== Navigation ====================

    def next(self) -> bool:
        return self.navigator.next_step()

    def previous(self) -> bool:
        return self.navigator.previous_step()

    def goto(self, step) -> bool:
        return self.navigator.goto_step(step)

    # ==================== Draft ====================

    def load_draft(self) -> bool:
        """Restore the saved draft, if any. Returns True when restored."""
        return self.drafts.load() is not None

    def update_field(self, **changes: Any):
        self.drafts.update_draft(**changes)

    def save_now(self) -> bool:
        return self.drafts.save_now()

    def generate_recurring_sessions(self, session_id: str) -> List[MealSession]:
        """Replace a recurring meal template with one session per matching day."""
        draft = self.drafts.draft
        generated = expand_recurring_session(draft, session_id)
        if generated:
            self.drafts.replace_draft(draft)
        return generated

    # ==================== Submission ====================

    def submit(self) -> OperationResult[Dict[str, Any]]:
        """
        Validate every step and create the event.

        The first failing step becomes the current step with its errors
        published. A failed create keeps the wizard and the draft as they
        are. Organizer assignment failures are reported as a warning on an
        otherwise successful result. After success the draft is closed and
        further submissions are refused.
        """
        if self._is_submitting:
            return OperationResult.fail("Submission already in progress")
        if self._created_event_id is not None:
            return OperationResult.fail("Event already created")

        draft = self.drafts.draft
        failure = self.validator.first_invalid_step(draft)
        if failure is not None:
            step, result = failure
            errors = result.error_map()
            logger.warning(f"Submission blocked at step {step.number} ({step.title}): {errors}")
            self.navigator.reposition(step, errors)
            return OperationResult.fail(
                f"Please fix the errors in {step.title}",
                errors=list(errors.values()),
            )

        self._is_submitting = True
        self._emit_started("submit")
        try:
            try:
                event = self.creation_service.create_event(draft)
            except SubmissionError as e:
                self._emit_error("submit", e.message)
                self.submission_failed.emit(e.message)
                return OperationResult.fail(e.message)

            event_id = str(event["id"])
            self._created_event_id = event_id
            self.drafts.delete()
            self.drafts.close()

            warning = ""
            if draft.assigned_organizers:
                try:
                    self.creation_service.assign_organizers(event_id, draft.assigned_organizers)
                except PartialAssignmentError as e:
                    logger.warning(f"{e.message} Failed: {e.failed}")
                    warning = e.message
                    self.assignment_warning.emit(warning)

            self._emit_completed("submit", True)
            self.event_created.emit(event_id)
            return OperationResult.ok(data=event, message="Event created successfully", warning=warning)
        finally:
            self._is_submitting = False
