# -*- coding: utf-8 -*-
"""
EventDesk Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "EventAdminApiClient",
    "DraftStore",
    "ApiDraftStore",
    "InMemoryDraftStore",
    "EventCreationService",
    "StepValidator",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "EventAdminApiClient":
        from .api_client import EventAdminApiClient
        return EventAdminApiClient
    elif name in ("DraftStore", "ApiDraftStore", "InMemoryDraftStore"):
        from . import draft_store
        return getattr(draft_store, name)
    elif name == "EventCreationService":
        from .event_creation_service import EventCreationService
        return EventCreationService
    elif name == "StepValidator":
        from .wizard.step_validator import StepValidator
        return StepValidator
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
