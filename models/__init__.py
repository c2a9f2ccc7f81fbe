# -*- coding: utf-8 -*-
"""
Data models
"""

from .form import (
    FieldType,
    SelectOption,
    FieldDescriptor,
    ButtonDescriptor,
    StepDescriptor,
)
from .registration import RegistrationRecord, Visibility
from .auth import AuthTokens

__all__ = [
    "FieldType",
    "SelectOption",
    "FieldDescriptor",
    "ButtonDescriptor",
    "StepDescriptor",
    "RegistrationRecord",
    "Visibility",
    "AuthTokens",
]
