# -*- coding: utf-8 -*-
"""
Event creation service.

Turns a validated EventDraft into a CreateEventInput payload, creates the
event and fans out organizer assignment commands.
"""

from typing import Any, Dict, List

from models.event_draft import EventDraft
from services.api_client import EventAdminApiClient
from services.exceptions import (
    ApiException,
    NetworkException,
    PartialAssignmentError,
    SubmissionError,
)
from utils.datetime_utils import to_isoformat
from utils.helpers import slugify
from utils.logger import get_logger

logger = get_logger(__name__)


class EventCreationService:
    """Creates events from wizard drafts."""

    def __init__(self, api_client: EventAdminApiClient):
        self.api = api_client

    @staticmethod
    def build_create_input(draft: EventDraft) -> Dict[str, Any]:
        """
        Flatten a draft into the CreateEventInput payload.

        Optional dates are omitted when empty; temporary client ids are not
        sent and meal sessions missing a name or a time are dropped.
        """
        event_input: Dict[str, Any] = {
            "name": draft.name,
            "slug": slugify(draft.name),
            "description": draft.description,
            "date": to_isoformat(draft.date),
            "venue": draft.venue,
            "address": draft.address,
            "maxCapacity": draft.max_capacity,
            "paymentRequired": draft.payment_required,
            "depositAllowed": draft.deposit_allowed,
            "refundPolicy": draft.refund_policy,
            "badgeTemplateId": draft.badge_template_id,
            "categories": [
                {
                    "name": category.name,
                    "price": category.price,
                    "maxCapacity": category.max_capacity,
                    "description": category.description,
                }
                for category in draft.categories
            ],
            "meals": [
                {
                    "name": session.name,
                    "beginTime": to_isoformat(session.begin_time),
                    "endTime": to_isoformat(session.end_time),
                    "description": session.description,
                }
                for session in draft.meal_sessions
                if session.name and session.is_complete
            ],
        }

        optional_dates = {
            "endDate": draft.end_date,
            "registrationDeadline": draft.registration_deadline,
            "paymentDeadline": draft.payment_deadline,
            "fullPaymentDeadline": draft.full_payment_deadline,
        }
        for key, value in optional_dates.items():
            if value is not None:
                event_input[key] = to_isoformat(value)

        if draft.deposit_allowed:
            event_input["depositPercentage"] = draft.deposit_percentage
        if draft.late_payment_fee:
            event_input["latePaymentFee"] = draft.late_payment_fee
        if draft.logo_url:
            event_input["logoUrl"] = draft.logo_url

        return event_input

    def create_event(self, draft: EventDraft) -> Dict[str, Any]:
        """
        Create the event.

        Raises:
            SubmissionError: The API rejected the event or was unreachable
        """
        event_input = self.build_create_input(draft)
        logger.info(f"Creating event '{draft.name}' (slug: {event_input['slug']})")
        try:
            event = self.api.create_event(event_input)
        except (ApiException, NetworkException) as e:
            logger.error(f"Event creation failed: {e}")
            raise SubmissionError(f"Failed to create event: {e.message}", original_error=e)

        if not event.get("id"):
            raise SubmissionError("Failed to create event: no event returned")

        logger.info(f"Event created: {event['id']}")
        return event

    def assign_organizers(self, event_id: str, user_ids: List[str]) -> List[str]:
        """
        Assign every organizer as event manager.

        Each assignment is an independent command; a failure does not stop
        the remaining ones and nothing is rolled back.

        Returns:
            User ids that were assigned

        Raises:
            PartialAssignmentError: After all commands ran, if any failed
        """
        succeeded: List[str] = []
        failed: Dict[str, str] = {}

        for user_id in user_ids:
            try:
                self.api.assign_event_manager(event_id, user_id)
                succeeded.append(user_id)
            except (ApiException, NetworkException) as e:
                logger.error(f"Failed to assign organizer {user_id} to event {event_id}: {e}")
                failed[user_id] = e.message

        logger.info(
            f"Organizer assignment for {event_id}: "
            f"{len(succeeded)} assigned, {len(failed)} failed"
        )
        if failed:
            raise PartialAssignmentError(event_id, failed, succeeded)
        return succeeded
