# -*- coding: utf-8 -*-
"""
Wizard Framework - generic multi-step form engine.

Provides the validation engine, button dispatching, step navigation
and a base flow that ties them to a set of step descriptors.
"""

from .form_engine import FormEngine
from .button_dispatcher import ButtonDispatcher
from .step_navigator import StepNavigator
from .wizard_context import WizardContext
from .step_flow import StepFlow

__all__ = [
    'FormEngine',
    'ButtonDispatcher',
    'StepNavigator',
    'WizardContext',
    'StepFlow'
]
