# -*- coding: utf-8 -*-
"""
Utility helper functions.
"""

import re
from datetime import datetime, date
from typing import Optional, Union

_SLUG_SEPARATORS = re.compile(r"[^a-z0-9]+")


def format_date(
    value: Optional[Union[datetime, date, str]],
    format_str: str = "%d/%m/%Y"
) -> str:
    """
    Format a date value for display.

    Args:
        value: Date, datetime, or ISO string
        format_str: Output format string

    Returns:
        Formatted date string or empty string
    """
    if value is None:
        return ""

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value

    if isinstance(value, (datetime, date)):
        return value.strftime(format_str)

    return str(value)


def format_number(value: Optional[Union[int, float]], decimals: int = 0) -> str:
    """
    Format a number with thousands separator.

    Args:
        value: Number to format
        decimals: Decimal places

    Returns:
        Formatted number string
    """
    if value is None:
        return ""

    try:
        if decimals == 0:
            return f"{int(value):,}"
        else:
            return f"{float(value):,.{decimals}f}"
    except (ValueError, TypeError):
        return str(value)


def slugify(name: str) -> str:
    """
    Build a URL slug from an event name.

    Lowercases, collapses every run of characters outside [a-z0-9] into a
    single dash and trims leading/trailing dashes.

    Example:
        >>> slugify("  Tech Summit 2025!  ")
        'tech-summit-2025'
    """
    if not name:
        return ""
    return _SLUG_SEPARATORS.sub("-", name.lower()).strip("-")


def truncate_text(text: str, max_length: int = 50, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add when truncated

    Returns:
        Truncated text
    """
    if not text or len(text) <= max_length:
        return text

    return text[:max_length - len(suffix)] + suffix
