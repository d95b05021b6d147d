# -*- coding: utf-8 -*-
"""
Draft Controller
================
Owns the in-memory event draft and its persistence lifecycle.

The draft is restored at most once per session. While a restore is in
progress the controller is in RESTORING mode: change notifications caused
by the restore itself are applied but never counted as user edits. The
mode returns to EDITING as soon as the load operation finishes. Once
the draft is deleted after a successful submission the controller is
CLOSED and nothing is persisted again.
"""

import copy
from datetime import datetime
from enum import Enum
from typing import Optional

from PyQt5.QtCore import QTimer, pyqtSignal

from app.config import Config
from controllers.base_controller import BaseController
from models.draft_record import DraftRecord
from models.event_draft import EventDraft
from services.draft_store import DraftStore
from services.exceptions import PersistenceError
from services.wizard.steps import FIRST_STEP, clamp_step
from utils.logger import get_logger

logger = get_logger(__name__)


class DraftMode(Enum):
    """Lifecycle mode of the draft."""
    IDLE = "idle"
    RESTORING = "restoring"
    EDITING = "editing"
    CLOSED = "closed"


class DraftController(BaseController):
    """
    Controller for the event draft lifecycle.

    Persistence failures are logged and swallowed: the save status goes
    stale (``save_failed``) and editing continues.
    """

    # Signals
    draft_restored = pyqtSignal(int)  # restored step
    draft_saved = pyqtSignal(object)  # DraftRecord
    draft_deleted = pyqtSignal()
    draft_changed = pyqtSignal()
    dirty_changed = pyqtSignal(bool)
    persistence_failed = pyqtSignal(str, str)  # operation, message

    def __init__(self, store: DraftStore, draft: Optional[EventDraft] = None, parent=None):
        super().__init__(parent)
        self.store = store
        self._draft = draft or EventDraft()
        self._current_step = FIRST_STEP
        self._mode = DraftMode.IDLE
        self._dirty = False
        self._load_attempted = False
        self._last_saved_at: Optional[datetime] = None
        self._save_failed = False
        self._auto_save_timer: Optional[QTimer] = None

    # ==================== State ====================

    @property
    def draft(self) -> EventDraft:
        return self._draft

    @property
    def mode(self) -> DraftMode:
        return self._mode

    @property
    def current_step(self) -> int:
        return self._current_step

    @property
    def has_unsaved_changes(self) -> bool:
        return self._dirty

    @property
    def last_saved_at(self) -> Optional[datetime]:
        return self._last_saved_at

    @property
    def save_failed(self) -> bool:
        """True when the last persistence call failed (stale save status)."""
        return self._save_failed

    def _set_dirty(self, dirty: bool):
        if dirty != self._dirty:
            self._dirty = dirty
            self.dirty_changed.emit(dirty)

    # ==================== Load ====================

    def load(self) -> Optional[DraftRecord]:
        """
        Restore the persisted draft. Runs at most once per session.

        Returns:
            The restored record, or None when nothing was restored
        """
        if self._load_attempted:
            logger.debug("Draft already loaded this session")
            return None
        self._load_attempted = True

        self._mode = DraftMode.RESTORING
        self._emit_started("load_draft")
        try:
            record = self.store.load_draft()
            if record is None:
                logger.info("No saved draft found")
                self._emit_completed("load_draft", True)
                return None
            if record.is_expired():
                logger.info(f"Saved draft expired at {record.expires_at}, ignoring")
                self._emit_completed("load_draft", True)
                return None

            self._draft = record.draft_data
            self._current_step = clamp_step(record.current_step)
            self._last_saved_at = record.last_saved_at
            self._save_failed = False
            self._set_dirty(False)
            logger.info(f"Draft restored at step {self._current_step}")
            self.draft_restored.emit(self._current_step)
            self.draft_changed.emit()
            self._emit_completed("load_draft", True)
            return record

        except PersistenceError as e:
            self._persistence_failed(e)
            return None

        finally:
            if self._mode == DraftMode.RESTORING:
                self._mode = DraftMode.EDITING

    # ==================== Editing ====================

    def update_draft(self, **changes):
        """
        Apply field changes to the draft.

        Unknown fields raise AttributeError. The draft is marked dirty unless
        a restore is in progress, then auto-save is attempted.
        """
        for field_name, value in changes.items():
            if not hasattr(self._draft, field_name):
                raise AttributeError(f"EventDraft has no field '{field_name}'")
            setattr(self._draft, field_name, value)
        self._on_change()

    def replace_draft(self, draft: EventDraft):
        """Replace the whole draft (e.g. after a step edits a copy)."""
        self._draft = draft
        self._on_change()

    def _on_change(self):
        if self._mode in (DraftMode.RESTORING, DraftMode.CLOSED):
            self.draft_changed.emit()
            return
        if self._mode == DraftMode.IDLE:
            self._mode = DraftMode.EDITING
        self._set_dirty(True)
        self.draft_changed.emit()
        self.auto_save()

    # ==================== Saving ====================

    def auto_save(self) -> bool:
        """
        Save when there is something worth saving.

        Skipped during a restore, when nothing changed, or when none of the
        seed fields (name, description, venue) is filled in.
        """
        if self._mode in (DraftMode.RESTORING, DraftMode.CLOSED):
            return False
        if not self._dirty:
            return False
        if not self._draft.has_seed_content():
            return False
        return self._save("auto_save")

    def save_now(self) -> bool:
        """Explicit save requested by the user."""
        return self._save("save_draft")

    def checkpoint(self, step: int) -> bool:
        """Record the wizard step and save."""
        self._current_step = clamp_step(step)
        return self._save("checkpoint")

    def _save(self, operation: str) -> bool:
        if self._mode == DraftMode.CLOSED:
            logger.debug(f"Draft closed, skipping {operation}")
            return False
        self._emit_started(operation)
        try:
            record = self.store.save_draft(copy.deepcopy(self._draft), self._current_step)
        except PersistenceError as e:
            self._persistence_failed(e)
            return False

        self._last_saved_at = record.last_saved_at
        self._save_failed = False
        self._set_dirty(False)
        logger.debug(f"Draft saved ({operation}) at step {self._current_step}")
        self.draft_saved.emit(record)
        self._emit_completed(operation, True)
        return True

    def delete(self) -> bool:
        """Remove the persisted draft after the event was created."""
        self._emit_started("delete_draft")
        try:
            self.store.delete_draft()
        except PersistenceError as e:
            self._persistence_failed(e)
            return False

        self._last_saved_at = None
        self.close()
        logger.info("Draft deleted")
        self.draft_deleted.emit()
        self._emit_completed("delete_draft", True)
        return True

    @property
    def is_closed(self) -> bool:
        return self._mode == DraftMode.CLOSED

    def close(self):
        """Stop persisting the draft. Further edits are kept in memory only."""
        self._mode = DraftMode.CLOSED
        self._set_dirty(False)
        self.disable_auto_save()

    def _persistence_failed(self, error: PersistenceError):
        self._save_failed = True
        self._emit_error(error.operation, error.message)
        self.persistence_failed.emit(error.operation, error.message)

    # ==================== Auto-save timer ====================

    def enable_auto_save(self, interval_ms: Optional[int] = None):
        """Run auto_save() periodically."""
        interval = interval_ms or Config.AUTO_SAVE_INTERVAL_MS
        if self._auto_save_timer is None:
            self._auto_save_timer = QTimer(self)
            self._auto_save_timer.timeout.connect(self.auto_save)
        self._auto_save_timer.start(interval)
        logger.debug(f"Auto-save enabled every {interval} ms")

    def disable_auto_save(self):
        if self._auto_save_timer is not None:
            self._auto_save_timer.stop()
