# -*- coding: utf-8 -*-
"""
Validation rules - stateless checks for a single field value.

Every rule returns None when the value passes and a human-readable
message when it fails. Rules are composed by the form engine; they
never raise for bad input.
"""

from datetime import date, datetime
from typing import Any, Mapping, Optional

from .email_validator import EmailValidator


def _field_prefix(label: Optional[str]) -> str:
    return f'Field "{label}"' if label else "Field"


def _as_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return None


def is_empty(value: Any) -> bool:
    """Check whether a value counts as absent."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple, set, frozenset)):
        return len(value) == 0
    if isinstance(value, Mapping):
        return len(value) == 0
    return False


def required(value: Any, label: Optional[str] = None) -> Optional[str]:
    """Fail on empty string, None, an empty collection or an empty mapping."""
    if is_empty(value):
        return f"{_field_prefix(label)} is required"
    return None


def min_length(value: Any, length: int, label: Optional[str] = None) -> Optional[str]:
    """Fail when a string/sequence value is shorter than `length`."""
    if not isinstance(value, (str, list, tuple)):
        return None
    if len(value) < length:
        return f"{_field_prefix(label)} must be at least {length} characters"
    return None


def max_length(value: Any, length: int, label: Optional[str] = None) -> Optional[str]:
    """Fail when a string/sequence value is longer than `length`."""
    if not isinstance(value, (str, list, tuple)):
        return None
    if len(value) > length:
        return f"{_field_prefix(label)} must be at most {length} characters"
    return None


def email(value: Any, label: Optional[str] = None) -> Optional[str]:
    """Fail when the value is not a well-formed email address."""
    if EmailValidator.is_valid(value):
        return None
    return f"{_field_prefix(label)} must be a valid email address"


def date_range(
    value: Any,
    min_date: Optional[date] = None,
    max_date: Optional[date] = None,
    label: Optional[str] = None,
) -> Optional[str]:
    """Fail when a date value lies outside [min_date, max_date]."""
    current = _as_date(value)
    if current is None:
        return None

    lower = _as_date(min_date)
    upper = _as_date(max_date)

    if lower is not None and current < lower:
        return f"{_field_prefix(label)} must not be earlier than {lower.isoformat()}"
    if upper is not None and current > upper:
        return f"{_field_prefix(label)} must not be later than {upper.isoformat()}"
    return None
