# -*- coding: utf-8 -*-
"""Validation services package."""

from . import rules
from .email_validator import EmailValidator
from .descriptor_validator import StepDescriptorValidator, ValidationStrategy

__all__ = ['rules', 'EmailValidator', 'ValidationStrategy', 'StepDescriptorValidator']
