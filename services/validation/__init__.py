# -*- coding: utf-8 -*-
"""Validation services package."""

from .result import ErrorCode, ValidationIssue, ValidationResult
from .validation_strategy import ValidationStrategy, RequiredFieldsValidator
from .temporal_validator import validate_dates, validate_event_dates, validate_payment_dates
from .capacity_validator import validate_capacity, total_category_capacity
from .interval_overlap import (
    detect_overlap,
    find_overlapping_pair,
    validate_date_range,
    validate_meal_sessions,
)

__all__ = [
    'ErrorCode',
    'ValidationIssue',
    'ValidationResult',
    'ValidationStrategy',
    'RequiredFieldsValidator',
    'validate_dates',
    'validate_event_dates',
    'validate_payment_dates',
    'validate_capacity',
    'total_category_capacity',
    'detect_overlap',
    'find_overlapping_pair',
    'validate_date_range',
    'validate_meal_sessions',
]
