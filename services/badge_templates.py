# -*- coding: utf-8 -*-
"""
Badge template catalogue.

Only the ids matter to the wizard: step 5 requires one of them to be
selected. Rendering lives in the badge printing module.
"""

from typing import Dict, List, Optional

BADGE_TEMPLATES: Dict[str, str] = {
    "festival-fun": "Festival Fun",
    "wedding-elegant": "Wedding Elegant",
    "sports-event": "Sports Event",
    "community-gathering": "Community Gathering",
    "birthday-party": "Birthday Party",
    "charity-fundraiser": "Charity Fundraiser",
    "conference-modern": "Conference Modern",
    "workshop-creative": "Workshop Creative",
    "google-io": "Google I/O",
    "aws-reinvent": "AWS re:Invent",
    "salesforce-dreamforce": "Salesforce Dreamforce",
    "apple-wwdc": "Apple WWDC",
    "ted-talks": "TED Talks",
    "medical-conference": "Medical Conference",
    "government-summit": "Government Summit",
    "startup-summit": "Startup Summit",
    "academic-research": "Academic Research",
    "nonprofit-gala": "Nonprofit Gala",
    "trade-show": "Trade Show",
    "professional": "Professional",
}


def is_known_template(template_id: Optional[str]) -> bool:
    """Check if a template id exists in the catalogue."""
    return bool(template_id) and template_id in BADGE_TEMPLATES


def list_template_ids() -> List[str]:
    """Template ids in catalogue order."""
    return list(BADGE_TEMPLATES.keys())
