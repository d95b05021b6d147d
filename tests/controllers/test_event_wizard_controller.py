# -*- coding: utf-8 -*-
"""
Tests for the event wizard controller: navigation with checkpoints,
draft restore and submission.
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from controllers.draft_controller import DraftController
from controllers.event_wizard_controller import EventWizardController
from models.event_draft import EventDraft, MealSession
from services.exceptions import PartialAssignmentError, SubmissionError


@pytest.fixture
def creation_service():
    service = MagicMock()
    service.create_event.return_value = {"id": "evt-1", "name": "Tech Summit 2025"}
    service.assign_organizers.return_value = []
    return service


@pytest.fixture
def make_wizard(store, creation_service):
    def factory(draft=None):
        return EventWizardController(DraftController(store, draft=draft), creation_service)
    return factory


class TestNavigation:

    def test_next_blocked_publishes_errors(self, make_wizard):
        wizard = make_wizard()
        published = []
        wizard.errors_changed.connect(published.append)

        assert wizard.next() is False
        assert wizard.current_step == 1
        assert set(wizard.errors) == {"name", "date", "venue"}
        assert published == [wizard.errors]

    def test_next_checkpoints_new_step(self, make_wizard, store, valid_draft):
        wizard = make_wizard(valid_draft)

        assert wizard.next() is True
        assert wizard.current_step == 2
        assert store.load_draft().current_step == 2
        assert wizard.last_saved_at is not None

    def test_goto_and_previous_checkpoint(self, make_wizard, store):
        wizard = make_wizard()

        wizard.goto(5)
        assert store.load_draft().current_step == 5
        wizard.previous()
        assert store.load_draft().current_step == 4

    def test_meal_overlap_blocks_next(self, make_wizard):
        start = datetime(2025, 1, 10, 9, 0)
        draft = EventDraft(date=start, meal_sessions=[
            MealSession(name="A", begin_time=start.replace(hour=12), end_time=start.replace(hour=13)),
            MealSession(name="B", begin_time=start.replace(hour=12, minute=30),
                        end_time=start.replace(hour=13, minute=30)),
        ])
        wizard = make_wizard(draft)
        wizard.goto(3)

        assert wizard.is_next_disabled() is True
        assert wizard.next() is False
        assert "meal_session_overlap" in wizard.errors

        wizard.draft.meal_sessions[1].begin_time = start.replace(hour=13)
        assert wizard.is_next_disabled() is False
        assert wizard.next() is True
        assert wizard.current_step == 4

    def test_step_changed_signal(self, make_wizard):
        wizard = make_wizard()
        changes = []
        wizard.step_changed.connect(lambda old, new: changes.append((old, new)))

        wizard.goto(3)
        assert changes == [(1, 3)]


class TestRestore:

    def test_reload_restores_step(self, store, creation_service):
        draft = EventDraft(name="Spring Gala", venue="Grand Hotel",
                           payment_required=True, deposit_allowed=True, deposit_percentage=0)
        store.save_draft(draft, 4)
        wizard = EventWizardController(DraftController(store), creation_service)

        assert wizard.load_draft() is True
        assert wizard.current_step == 4
        assert wizard.draft == draft
        assert wizard.has_unsaved_changes is False
        assert store.save_count == 1

    def test_update_field_autosaves(self, make_wizard, store):
        wizard = make_wizard()
        wizard.update_field(name="Expo", venue="Hall A")

        assert store.load_draft().draft_data.venue == "Hall A"
        assert wizard.has_unsaved_changes is False


class TestSubmit:

    def test_success_deletes_draft(self, make_wizard, store, creation_service, valid_draft):
        wizard = make_wizard(valid_draft)
        wizard.save_now()
        created = []
        wizard.event_created.connect(created.append)

        result = wizard.submit()

        assert result.success is True
        assert result.data["id"] == "evt-1"
        assert result.warning == ""
        assert store.load_draft() is None
        assert created == ["evt-1"]
        creation_service.assign_organizers.assert_not_called()

    def test_draft_stays_deleted_after_success(self, make_wizard, store, creation_service, valid_draft):
        wizard = make_wizard(valid_draft)
        wizard.save_now()
        assert wizard.submit().success is True

        wizard.previous()
        wizard.update_field(name="Tech Summit 2026")
        wizard.drafts.auto_save()

        assert store.load_draft() is None
        assert wizard.has_unsaved_changes is False
        assert wizard.created_event_id == "evt-1"

        result = wizard.submit()
        assert result.success is False
        assert result.message == "Event already created"
        assert creation_service.create_event.call_count == 1

    def test_repositions_to_first_failing_step(self, make_wizard, creation_service, valid_draft):
        valid_draft.max_capacity = 50
        valid_draft.badge_template_id = ""
        wizard = make_wizard(valid_draft)
        wizard.goto(6)

        result = wizard.submit()

        assert result.success is False
        assert wizard.current_step == 2
        assert "category_capacity" in wizard.errors
        creation_service.create_event.assert_not_called()

    def test_submission_error_keeps_draft(self, make_wizard, store, creation_service, valid_draft):
        creation_service.create_event.side_effect = SubmissionError("Failed to create event: timeout")
        wizard = make_wizard(valid_draft)
        wizard.goto(6)
        failures = []
        wizard.submission_failed.connect(failures.append)

        result = wizard.submit()

        assert result.success is False
        assert result.message == "Failed to create event: timeout"
        assert failures == [result.message]
        assert wizard.current_step == 6
        assert store.load_draft().draft_data == valid_draft

    def test_organizers_assigned_after_draft_deleted(self, make_wizard, store, creation_service, valid_draft):
        valid_draft.assigned_organizers = ["u1", "u2"]
        wizard = make_wizard(valid_draft)
        wizard.save_now()

        def assign(event_id, user_ids):
            assert store.load_draft() is None
            return user_ids

        creation_service.assign_organizers.side_effect = assign

        result = wizard.submit()

        assert result.success is True
        creation_service.assign_organizers.assert_called_once_with("evt-1", ["u1", "u2"])

    def test_partial_assignment_is_a_warning(self, make_wizard, creation_service, valid_draft):
        valid_draft.assigned_organizers = ["u1", "u2"]
        creation_service.assign_organizers.side_effect = PartialAssignmentError(
            "evt-1", {"u2": "Not a manager"}, ["u1"]
        )
        wizard = make_wizard(valid_draft)
        warnings = []
        wizard.assignment_warning.connect(warnings.append)

        result = wizard.submit()

        assert result.success is True
        assert "1 organizer assignment(s) failed" in result.warning
        assert warnings == [result.warning]


class TestRecurringSessions:

    def test_generate_replaces_template(self, make_wizard, store):
        draft = EventDraft(
            name="Retreat",
            date=datetime(2025, 1, 6, 9),
            end_date=datetime(2025, 1, 8, 17),
            meal_sessions=[MealSession(name="Lunch", begin_time=datetime(2025, 1, 6, 12),
                                       end_time=datetime(2025, 1, 6, 13), is_recurring=True)],
        )
        wizard = make_wizard(draft)
        template_id = draft.meal_sessions[0].id

        generated = wizard.generate_recurring_sessions(template_id)

        assert len(generated) == 3
        assert wizard.draft.find_meal_session(template_id) is None
        assert len(store.load_draft().draft_data.meal_sessions) == 3
