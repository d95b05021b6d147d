# -*- coding: utf-8 -*-
"""Custom exceptions for the application.

Validation failures are not exceptions: they are returned as
ValidationResult data by the validators.
"""

from typing import Dict, List, Optional


class ApiException(Exception):
    """Exception raised for API errors."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.context = context

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class NetworkException(Exception):
    """Exception raised for network/connection errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context


class PersistenceError(Exception):
    """Draft load/save/delete failed. Editing continues with a stale save status."""

    def __init__(self, operation: str, message: str,
                 original_error: Exception = None):
        super().__init__(message)
        self.operation = operation
        self.message = message
        self.original_error = original_error

    def __str__(self):
        return f"{self.operation}: {self.message}"


class SubmissionError(Exception):
    """The create-event call failed. The draft is kept."""

    def __init__(self, message: str, original_error: Exception = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class PartialAssignmentError(Exception):
    """
    One or more organizer assignments failed after the event was created.

    Raised only after every assignment command has run; the event exists
    regardless, so callers report this as a warning.
    """

    def __init__(self, event_id: str, failed: Dict[str, str],
                 succeeded: Optional[List[str]] = None):
        self.event_id = event_id
        self.failed = failed
        self.succeeded = succeeded or []
        message = (
            f"Event created but {len(failed)} organizer assignment(s) failed. "
            "You can assign them later."
        )
        super().__init__(message)
        self.message = message
