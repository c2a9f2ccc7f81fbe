# -*- coding: utf-8 -*-
"""
DateTime Utilities.

Date arithmetic for age-gated fields and serialization of form values
before they are sent to the API.
"""

from datetime import datetime, date, timedelta
from typing import Any, Dict, Optional, Union


def subtract_years_from_today(years: int, today: Optional[date] = None) -> date:
    """
    Get the date `years` years before today, shifted one day forward.

    Day overflow rolls into the next month, so 29 February in a non-leap
    target year becomes 2 March.

    Args:
        years: Number of years to subtract
        today: Reference date (defaults to the current date)

    Returns:
        The computed date

    Examples:
        >>> subtract_years_from_today(14, today=date(2024, 5, 10))
        datetime.date(2010, 5, 11)
        >>> subtract_years_from_today(1, today=date(2024, 2, 29))
        datetime.date(2023, 3, 2)
    """
    if today is None:
        today = date.today()

    first_of_month = date(today.year - years, today.month, 1)
    return first_of_month + timedelta(days=today.day)


def to_isoformat(value: Union[datetime, date, str, None]) -> Optional[str]:
    """
    Convert a datetime-like value to an ISO format string.

    Args:
        value: datetime, date, string or None

    Returns:
        ISO string for dates, the value itself for strings, None for None

    Examples:
        >>> to_isoformat(date(2024, 1, 15))
        '2024-01-15'
        >>> to_isoformat(datetime(2024, 1, 15, 10, 30))
        '2024-01-15T10:30:00'
        >>> to_isoformat('already text')
        'already text'
    """
    if value is None:
        return None

    if isinstance(value, (datetime, date)):
        return value.isoformat()

    return str(value)


def serialize_record(record: Dict[str, Any]) -> Dict[str, Any]:
    """Return a JSON-ready copy of a form record (dates become ISO strings)."""
    return {
        key: to_isoformat(value) if isinstance(value, (datetime, date)) else value
        for key, value in record.items()
    }
