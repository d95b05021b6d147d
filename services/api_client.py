# -*- coding: utf-8 -*-
"""
EventDesk API Client
====================

GraphQL client for the event administration backend. Covers the calls the
event creation wizard needs: the per-user event draft, event creation and
event manager assignment.
"""

import json
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

import requests
import urllib3

from app.config import Config
from services.exceptions import ApiException, NetworkException
from utils.helpers import truncate_text
from utils.logger import get_logger

logger = get_logger(__name__)

# Suppress SSL warnings for self-signed certificates in development
if not Config.API_VERIFY_SSL:
    urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)


_DRAFT_FIELDS = """
      id
      userId
      draftData
      currentStep
      lastSavedAt
      expiresAt
"""

GET_EVENT_DRAFT = """
  query GetEventDraft {
    getEventDraft {%s}
  }
""" % _DRAFT_FIELDS

SAVE_EVENT_DRAFT = """
  mutation SaveEventDraft($input: SaveEventDraftInput!) {
    saveEventDraft(input: $input) {%s}
  }
""" % _DRAFT_FIELDS

UPDATE_EVENT_DRAFT = """
  mutation UpdateEventDraft($input: UpdateEventDraftInput!) {
    updateEventDraft(input: $input) {%s}
  }
""" % _DRAFT_FIELDS

DELETE_EVENT_DRAFT = """
  mutation DeleteEventDraft {
    deleteEventDraft
  }
"""

CREATE_EVENT = """
  mutation CreateEvent($input: CreateEventInput!) {
    createEvent(input: $input) {
      id
      name
      slug
      date
      endDate
      venue
      maxCapacity
      isActive
      createdAt
    }
  }
"""

ASSIGN_EVENT_MANAGER = """
  mutation AssignEventManager($eventId: ID!, $userId: ID!) {
    assignEventManager(eventId: $eventId, userId: $userId) {
      id
      eventId
      userId
      role
      assignedAt
    }
  }
"""


@dataclass
class ApiConfig:
    """
    API connection settings.

    Reads from .env via Config when not provided.

    Example .env:
        API_BASE_URL=http://192.168.1.20:4000
        API_TIMEOUT=30
    """
    base_url: str = None
    graphql_path: str = None
    timeout: int = None
    verify_ssl: bool = None

    def __post_init__(self):
        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.graphql_path is None:
            self.graphql_path = Config.API_GRAPHQL_PATH
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.verify_ssl is None:
            self.verify_ssl = Config.API_VERIFY_SSL


class EventAdminApiClient:
    """
    GraphQL client for the event administration backend.

    Features:
    - Bearer token supplied by the authenticated session
    - Error mapping: HTTP failures and GraphQL errors -> ApiException,
      connection problems and timeouts -> NetworkException

    Usage:
        client = EventAdminApiClient()
        client.set_access_token(current_user.token)
        record = client.get_event_draft()
    """

    def __init__(self, config: Optional[ApiConfig] = None):
        self.config = config or ApiConfig()
        self.base_url = self.config.base_url.rstrip('/')
        self.endpoint = f"{self.base_url}{self.config.graphql_path}"
        self.access_token: Optional[str] = None
        self.token_expires_at: Optional[datetime] = None

    # ==================== Authentication ====================

    def set_access_token(self, token: str, expires_in: int = 3600):
        """
        Set access token from the authenticated user session.

        Args:
            token: Access token to use
            expires_in: Token expiration time in seconds (default: 3600 = 1 hour)
        """
        self.access_token = token
        self.token_expires_at = datetime.now() + timedelta(seconds=expires_in)
        logger.debug(f"Access token updated (expires in {expires_in}s)")

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    # ==================== Transport ====================

    def _execute(self, query: str, variables: Optional[Dict[str, Any]] = None,
                 operation: str = "") -> Dict[str, Any]:
        """
        Execute a GraphQL operation with error handling.

        Args:
            query: GraphQL document
            variables: Operation variables
            operation: Name used in logs and error context

        Returns:
            The response ``data`` object
        """
        payload: Dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        logger.info(f"[API REQ] {operation}")
        if variables:
            logger.debug(f"[API REQ] Variables: {truncate_text(json.dumps(variables, default=str), 1000)}")

        try:
            response = requests.post(
                self.endpoint,
                json=payload,
                headers=self._headers(),
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except (ValueError, AttributeError):
                pass
            logger.error(f"[API ERR] {status_code} {operation} | Response: {response_data}")
            raise ApiException(
                message=str(e),
                status_code=status_code,
                response_data=response_data,
                context=operation,
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {operation} - {e}")
            raise NetworkException(message=str(e), original_error=e, context=operation)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {operation} - {e}")
            raise NetworkException(message=str(e), original_error=e, context=operation)

        try:
            result = response.json() if response.text else {}
        except ValueError as e:
            logger.error(f"Invalid JSON response: {operation} - {e}")
            raise ApiException(message="Invalid JSON response", status_code=response.status_code,
                               context=operation)

        errors = result.get("errors")
        if errors:
            message = "; ".join(err.get("message", "Unknown error") for err in errors)
            logger.error(f"[API ERR] {operation} | GraphQL errors: {message}")
            raise ApiException(message=message, response_data=result, context=operation)

        logger.info(f"[API RES] {response.status_code} {operation}")
        logger.debug(f"[API RES] Body: {truncate_text(json.dumps(result, default=str), 1000)}")
        return result.get("data") or {}

    # ==================== Event Draft ====================

    def get_event_draft(self) -> Optional[Dict[str, Any]]:
        """Current user's draft record, or None."""
        data = self._execute(GET_EVENT_DRAFT, operation="getEventDraft")
        return data.get("getEventDraft")

    def save_event_draft(self, draft_data: Dict[str, Any], current_step: int) -> Dict[str, Any]:
        """Create the user's draft record."""
        data = self._execute(
            SAVE_EVENT_DRAFT,
            {"input": {"draftData": draft_data, "currentStep": current_step}},
            operation="saveEventDraft",
        )
        return data.get("saveEventDraft") or {}

    def update_event_draft(self, draft_id: str, draft_data: Dict[str, Any],
                           current_step: int) -> Dict[str, Any]:
        """Overwrite an existing draft record (last write wins)."""
        data = self._execute(
            UPDATE_EVENT_DRAFT,
            {"input": {"id": draft_id, "draftData": draft_data, "currentStep": current_step}},
            operation="updateEventDraft",
        )
        return data.get("updateEventDraft") or {}

    def delete_event_draft(self) -> bool:
        data = self._execute(DELETE_EVENT_DRAFT, operation="deleteEventDraft")
        return bool(data.get("deleteEventDraft"))

    # ==================== Events ====================

    def create_event(self, event_input: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create an event.

        Args:
            event_input: CreateEventInput payload

        Returns:
            Created event (includes ``id``)
        """
        data = self._execute(CREATE_EVENT, {"input": event_input}, operation="createEvent")
        return data.get("createEvent") or {}

    def assign_event_manager(self, event_id: str, user_id: str) -> Dict[str, Any]:
        """Assign a user as manager of an event."""
        data = self._execute(
            ASSIGN_EVENT_MANAGER,
            {"eventId": event_id, "userId": user_id},
            operation="assignEventManager",
        )
        return data.get("assignEventManager") or {}
