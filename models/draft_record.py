# -*- coding: utf-8 -*-
"""
Persisted draft record: the draft payload plus the wizard step it was saved at.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from models.event_draft import EventDraft
from utils.datetime_utils import from_isoformat, now, to_isoformat


@dataclass
class DraftRecord:
    """
    Checkpoint of the event creation wizard.

    Created on the first save, updated on every checkpoint and deleted once
    the event has been created server-side.
    """

    draft_data: EventDraft
    current_step: int = 1
    last_saved_at: datetime = field(default_factory=now)
    expires_at: Optional[datetime] = None
    id: Optional[str] = None
    user_id: Optional[str] = None

    def is_expired(self, at: Optional[datetime] = None) -> bool:
        """Check whether the draft passed its expiry time."""
        if self.expires_at is None:
            return False
        return self.expires_at < (at or now())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the remote record shape."""
        return {
            "id": self.id,
            "userId": self.user_id,
            "draftData": self.draft_data.to_dict(),
            "currentStep": self.current_step,
            "lastSavedAt": to_isoformat(self.last_saved_at),
            "expiresAt": to_isoformat(self.expires_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DraftRecord":
        """Create a DraftRecord from the remote record shape."""
        return cls(
            draft_data=EventDraft.from_dict(data.get("draftData") or {}),
            current_step=int(data.get("currentStep") or 1),
            last_saved_at=from_isoformat(data.get("lastSavedAt")) or now(),
            expires_at=from_isoformat(data.get("expiresAt")),
            id=data.get("id"),
            user_id=data.get("userId"),
        )
