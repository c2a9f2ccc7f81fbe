# -*- coding: utf-8 -*-
"""
Step factories for the registration and login forms.

Each factory only assembles an immutable StepDescriptor from its
parameters and callbacks; all state lives in the engine and the flow.
"""

from datetime import date
from typing import Any, List, Mapping, Optional

from app.config import Config
from models.form import (
    ButtonCallback, ButtonDescriptor, FieldDescriptor, FieldType, SelectOption, StepDescriptor
)
from models.registration import Visibility

PASSWORD_MISMATCH_MESSAGE = "Passwords do not match"

VISIBILITY_OPTIONS = (
    SelectOption(name="Everyone", value=Visibility.ALL.value),
    SelectOption(name="Friends only", value=Visibility.FRIENDS.value),
    SelectOption(name="Only me", value=Visibility.ONLY_ME.value),
)


def password_confirmation_matches(value: Any, values: Mapping[str, Any]) -> Optional[List[str]]:
    """Cross-field check: the confirmation must equal the password field."""
    if value != values.get("password"):
        return [PASSWORD_MISMATCH_MESSAGE]
    return None


def _text_field(field_id: str, label: str, placeholder: str, icon: str,
                required: bool = True, field_type: FieldType = FieldType.TEXT,
                **extra) -> FieldDescriptor:
    return FieldDescriptor(
        id=field_id,
        label=label,
        placeholder=placeholder,
        icon=icon,
        type=field_type,
        required=required,
        min_length=Config.FIELD_MIN_LENGTH,
        max_length=Config.FIELD_MAX_LENGTH,
        **extra
    )


def _next_button(callback: ButtonCallback, label: str = "Next",
                 icon: str = "fa fa-arrow-right") -> ButtonDescriptor:
    return ButtonDescriptor(id="next", label=label, icon=icon, callback=callback)


def build_personal_step(
    min_birthday: date,
    max_birthday: date,
    callback: ButtonCallback
) -> StepDescriptor:
    """
    Step 1 - personal data.

    Args:
        min_birthday: Earliest allowed date of birth (oldest user)
        max_birthday: Latest allowed date of birth (youngest user), also
            the field default
        callback: "Next" button action
    """
    return StepDescriptor(
        title="About you",
        fields=(
            _text_field("name", "Name", "Enter your name", "fa fa-user"),
            _text_field("surname", "Surname", "Enter your surname", "fa fa-user"),
            _text_field("patronymic", "Patronymic", "Enter your patronymic", "fa fa-user",
                        required=False),
            FieldDescriptor(
                id="date_birthday",
                label="Date of birth",
                placeholder="Enter your date of birth",
                icon="fa fa-calendar",
                type=FieldType.DATE,
                required=True,
                default_value=max_birthday,
                min_date=min_birthday,
                max_date=max_birthday,
            ),
        ),
        buttons=(
            _next_button(callback),
        ),
    )


def build_credentials_step(
    prev_callback: ButtonCallback,
    next_callback: ButtonCallback
) -> StepDescriptor:
    """
    Step 2 - login and password with confirmation.

    The "back" button skips validation so the user can leave the step
    with incomplete input.
    """
    return StepDescriptor(
        title="Sign-in details",
        fields=(
            _text_field("login", "Login", "Enter your login", "fa fa-user"),
            _text_field("password", "Password", "Enter your password", "fa fa-key",
                        field_type=FieldType.PASSWORD),
            _text_field("password_confirmation", "Repeat password",
                        "Repeat the password to check it", "fa fa-key",
                        field_type=FieldType.PASSWORD,
                        validation=password_confirmation_matches),
        ),
        buttons=(
            ButtonDescriptor(
                id="back",
                label="Back",
                icon="fa fa-arrow-left",
                skip_validate=True,
                style="secondary",
                callback=prev_callback,
            ),
            _next_button(next_callback),
        ),
    )


def build_privacy_step(next_callback: ButtonCallback) -> StepDescriptor:
    """Step 3 - privacy settings and the final "sign up" button."""
    return StepDescriptor(
        title="Privacy",
        fields=(
            FieldDescriptor(
                id="default_post_visible",
                label="Who can see my posts",
                type=FieldType.SELECT,
                default_value=Visibility.ALL.value,
                select_values=VISIBILITY_OPTIONS,
            ),
            FieldDescriptor(
                id="default_profile_visible",
                label="Who can see my profile",
                type=FieldType.SELECT,
                default_value=Visibility.ALL.value,
                select_values=VISIBILITY_OPTIONS,
            ),
        ),
        buttons=(
            _next_button(next_callback, label="Sign up", icon="fa fa-unlock"),
        ),
    )


def build_login_step(callback: ButtonCallback) -> StepDescriptor:
    """Single-step login form."""
    return StepDescriptor(
        title="Sign in",
        fields=(
            _text_field("login", "Login", "Enter your login", "fa fa-user"),
            _text_field("password", "Password", "Enter your password", "fa fa-key",
                        field_type=FieldType.PASSWORD),
        ),
        buttons=(
            ButtonDescriptor(id="login", label="Sign in", icon="fa fa-unlock", callback=callback),
        ),
    )
