# -*- coding: utf-8 -*-
"""
Draft stores for the event creation wizard.

One active draft per authoring session. Saves are last-write-wins; every
failure surfaces as PersistenceError so callers handle a single type.
"""

import copy
import json
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Optional

from app.config import Config
from models.draft_record import DraftRecord
from models.event_draft import EventDraft
from services.api_client import EventAdminApiClient
from services.exceptions import ApiException, NetworkException, PersistenceError
from utils.datetime_utils import now
from utils.logger import get_logger

logger = get_logger(__name__)


class DraftStore(ABC):
    """External store holding the user's single event draft."""

    @abstractmethod
    def load_draft(self) -> Optional[DraftRecord]:
        """Fetch the persisted draft, or None when there is none."""

    @abstractmethod
    def save_draft(self, draft: EventDraft, step: int) -> DraftRecord:
        """Persist the draft with the step it was saved at."""

    @abstractmethod
    def delete_draft(self) -> None:
        """Remove the persisted draft."""


class ApiDraftStore(DraftStore):
    """Draft store backed by the GraphQL API."""

    def __init__(self, client: EventAdminApiClient):
        self.client = client
        self._draft_id: Optional[str] = None

    def load_draft(self) -> Optional[DraftRecord]:
        try:
            data = self.client.get_event_draft()
        except (ApiException, NetworkException) as e:
            raise PersistenceError("load", str(e), original_error=e)

        if not data:
            return None
        record = self._to_record(data)
        self._draft_id = record.id
        return record

    def save_draft(self, draft: EventDraft, step: int) -> DraftRecord:
        draft_data = draft.to_dict()
        try:
            if self._draft_id:
                data = self.client.update_event_draft(self._draft_id, draft_data, step)
            else:
                data = self.client.save_event_draft(draft_data, step)
        except (ApiException, NetworkException) as e:
            raise PersistenceError("save", str(e), original_error=e)

        record = self._to_record(data, "save") if data else DraftRecord(
            draft_data=copy.deepcopy(draft), current_step=step
        )
        if record.id:
            self._draft_id = record.id
        return record

    def delete_draft(self) -> None:
        try:
            self.client.delete_event_draft()
        except (ApiException, NetworkException) as e:
            raise PersistenceError("delete", str(e), original_error=e)
        self._draft_id = None

    @staticmethod
    def _to_record(data: dict, operation: str = "load") -> DraftRecord:
        # The JSON scalar may come back serialized
        draft_data = data.get("draftData")
        if isinstance(draft_data, str):
            try:
                data = dict(data, draftData=json.loads(draft_data))
            except ValueError as e:
                raise PersistenceError(operation, "Malformed draft data", original_error=e)
        try:
            return DraftRecord.from_dict(data)
        except (TypeError, ValueError, AttributeError) as e:
            raise PersistenceError(operation, "Malformed draft record", original_error=e)


class InMemoryDraftStore(DraftStore):
    """
    Process-local draft store.

    Used for offline sessions and tests. Stores deep copies so later edits
    to the caller's draft never leak into the persisted record.
    """

    def __init__(self, expiry_days: Optional[int] = None):
        self.expiry_days = Config.DRAFT_EXPIRY_DAYS if expiry_days is None else expiry_days
        self._record: Optional[DraftRecord] = None
        self.save_count = 0

    @property
    def record(self) -> Optional[DraftRecord]:
        return self._record

    def load_draft(self) -> Optional[DraftRecord]:
        if self._record is None:
            return None
        if self._record.is_expired():
            logger.info("Stored draft expired, discarding")
            self._record = None
            return None
        return copy.deepcopy(self._record)

    def save_draft(self, draft: EventDraft, step: int) -> DraftRecord:
        saved_at = now()
        self._record = DraftRecord(
            draft_data=copy.deepcopy(draft),
            current_step=step,
            last_saved_at=saved_at,
            expires_at=saved_at + timedelta(days=self.expiry_days),
            id=self._record.id if self._record else "local-draft",
        )
        self.save_count += 1
        return copy.deepcopy(self._record)

    def delete_draft(self) -> None:
        self._record = None
