# -*- coding: utf-8 -*-
"""
Registration Package - sign-up and sign-in flows built on the wizard framework.

This package contains:
- Step factories producing the step descriptors
- RegistrationContext: accumulated registration data
- RegistrationFlow: three-step sign-up flow
- LoginFlow: single-step sign-in flow
"""

from .step_factories import (
    build_personal_step,
    build_credentials_step,
    build_privacy_step,
    build_login_step,
)
from .registration_context import RegistrationContext
from .registration_flow import RegistrationFlow
from .login_flow import LoginFlow

__all__ = [
    'build_personal_step',
    'build_credentials_step',
    'build_privacy_step',
    'build_login_step',
    'RegistrationContext',
    'RegistrationFlow',
    'LoginFlow'
]
