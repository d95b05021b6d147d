# -*- coding: utf-8 -*-
"""
EventDesk Controllers
=====================
Controller layer between the wizard UI and the services.

Controllers provide:
- Standardized results via OperationResult
- Qt signals for UI updates
- Draft lifecycle and submission orchestration

Usage:
    from controllers import EventWizardController

    result = controller.submit()
    if result.success:
        print(f"Created: {result.data['id']}")
    else:
        print(f"Error: {result.message}")
"""

# Base controller and result types
from controllers.base_controller import (
    BaseController,
    OperationResult,
)

# Wizard controllers
from controllers.draft_controller import (
    DraftController,
    DraftMode,
)

from controllers.event_wizard_controller import (
    EventWizardController,
)

# All public exports
__all__ = [
    # Base
    "BaseController",
    "OperationResult",

    # Draft
    "DraftController",
    "DraftMode",

    # Wizard
    "EventWizardController",
]
