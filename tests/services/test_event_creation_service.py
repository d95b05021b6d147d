# -*- coding: utf-8 -*-
"""
Tests for event creation and organizer assignment fan-out.
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from models.event_draft import MealSession
from services.event_creation_service import EventCreationService
from services.exceptions import ApiException, NetworkException, PartialAssignmentError, SubmissionError


@pytest.fixture
def api():
    return MagicMock()


@pytest.fixture
def service(api):
    return EventCreationService(api)


class TestBuildCreateInput:

    def test_core_fields(self, valid_draft):
        event_input = EventCreationService.build_create_input(valid_draft)

        assert event_input["name"] == "Tech Summit 2025"
        assert event_input["slug"] == "tech-summit-2025"
        assert event_input["date"] == "2025-01-10T09:00:00"
        assert event_input["endDate"] == "2025-01-11T18:00:00"
        assert event_input["badgeTemplateId"] == "conference-modern"
        assert event_input["depositPercentage"] == 30

    def test_temporary_ids_are_stripped(self, valid_draft):
        event_input = EventCreationService.build_create_input(valid_draft)

        assert all("id" not in category for category in event_input["categories"])
        assert all("id" not in meal for meal in event_input["meals"])

    def test_optional_fields_omitted(self, valid_draft):
        valid_draft.end_date = None
        valid_draft.registration_deadline = None
        valid_draft.deposit_allowed = False
        event_input = EventCreationService.build_create_input(valid_draft)

        assert "endDate" not in event_input
        assert "registrationDeadline" not in event_input
        assert "depositPercentage" not in event_input
        assert "latePaymentFee" not in event_input

    def test_incomplete_meals_dropped(self, valid_draft):
        valid_draft.meal_sessions.append(MealSession(name="Snack", begin_time=datetime(2025, 1, 10, 15)))
        valid_draft.meal_sessions.append(MealSession(begin_time=datetime(2025, 1, 10, 16),
                                                     end_time=datetime(2025, 1, 10, 17)))
        event_input = EventCreationService.build_create_input(valid_draft)

        assert [meal["name"] for meal in event_input["meals"]] == ["Lunch", "Dinner"]

    @pytest.mark.parametrize("name, slug", [
        ("  Hello,  World!  ", "hello-world"),
        ("Café 2025", "caf-2025"),
        ("---", ""),
    ])
    def test_slug(self, valid_draft, name, slug):
        valid_draft.name = name
        assert EventCreationService.build_create_input(valid_draft)["slug"] == slug


class TestCreateEvent:

    def test_returns_created_event(self, service, api, valid_draft):
        api.create_event.return_value = {"id": "evt-1", "name": valid_draft.name}

        assert service.create_event(valid_draft)["id"] == "evt-1"
        api.create_event.assert_called_once()

    @pytest.mark.parametrize("error", [
        ApiException("Slug already taken"),
        NetworkException("Connection refused"),
    ])
    def test_failure_raises_submission_error(self, service, api, valid_draft, error):
        api.create_event.side_effect = error

        with pytest.raises(SubmissionError) as exc_info:
            service.create_event(valid_draft)

        assert exc_info.value.original_error is error

    def test_missing_event_in_response(self, service, api, valid_draft):
        api.create_event.return_value = {}

        with pytest.raises(SubmissionError):
            service.create_event(valid_draft)


class TestAssignOrganizers:

    def test_all_succeed(self, service, api):
        assert service.assign_organizers("evt-1", ["u1", "u2"]) == ["u1", "u2"]
        assert api.assign_event_manager.call_count == 2

    def test_failure_does_not_stop_remaining_commands(self, service, api):
        def assign(event_id, user_id):
            if user_id == "u2":
                raise ApiException("User is not an event manager")
            return {"id": f"a-{user_id}"}

        api.assign_event_manager.side_effect = assign

        with pytest.raises(PartialAssignmentError) as exc_info:
            service.assign_organizers("evt-1", ["u1", "u2", "u3"])

        error = exc_info.value
        assert api.assign_event_manager.call_count == 3
        assert error.event_id == "evt-1"
        assert error.failed == {"u2": "User is not an event manager"}
        assert error.succeeded == ["u1", "u3"]
        assert "1 organizer assignment(s) failed" in error.message

    def test_no_organizers(self, service, api):
        assert service.assign_organizers("evt-1", []) == []
        api.assign_event_manager.assert_not_called()
