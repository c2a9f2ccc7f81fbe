# -*- coding: utf-8 -*-
"""
Utility module
"""

from .logger import get_logger, setup_logger
from .datetime_utils import subtract_years_from_today, to_isoformat, serialize_record

__all__ = [
    "get_logger",
    "setup_logger",
    "subtract_years_from_today",
    "to_isoformat",
    "serialize_record",
]
