# -*- coding: utf-8 -*-
"""
Form configuration models.

Declarative, immutable descriptions of one form step: its fields and
its buttons. Field behaviour is selected by FieldType, not by subclassing.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Tuple, Union

FieldValue = Union[str, date]
FormValues = Dict[str, FieldValue]

# (value, all_values) -> list of messages, or None when valid
FieldValidator = Callable[[Any, Mapping[str, Any]], Optional[List[str]]]

# (values) -> None, or an awaitable resolving to None
ButtonCallback = Callable[[FormValues], Optional[Awaitable[None]]]


class FieldType(str, Enum):
    """Input kinds understood by the form engine."""
    TEXT = "text"
    PASSWORD = "password"
    EMAIL = "email"
    DATE = "date"
    SELECT = "select"

    @property
    def is_textual(self) -> bool:
        return self in (FieldType.TEXT, FieldType.PASSWORD, FieldType.EMAIL)


@dataclass(frozen=True)
class SelectOption:
    """One entry of a select field."""
    name: str
    value: str


@dataclass(frozen=True)
class FieldDescriptor:
    """
    Description of a single form input.

    Length limits apply only to textual values, date bounds only to
    date values. Select membership is not checked by the engine.
    """

    id: str
    label: str
    type: FieldType = FieldType.TEXT
    required: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    min_date: Optional[date] = None
    max_date: Optional[date] = None
    default_value: Optional[FieldValue] = None
    validation: Optional[FieldValidator] = field(default=None, compare=False)
    select_values: Tuple[SelectOption, ...] = ()

    # Display only
    placeholder: str = ""
    icon: str = ""

    def initial_value(self) -> FieldValue:
        """Seed value for the engine (empty string when no default)."""
        return "" if self.default_value is None else self.default_value


@dataclass(frozen=True)
class ButtonDescriptor:
    """A clickable action tied to a step."""

    id: str
    label: str
    callback: ButtonCallback = field(compare=False)
    icon: str = ""
    skip_validate: bool = False
    style: Optional[str] = None


@dataclass(frozen=True)
class StepDescriptor:
    """One page of a multi-step form."""

    title: str
    fields: Tuple[FieldDescriptor, ...] = ()
    buttons: Tuple[ButtonDescriptor, ...] = ()

    def get_field(self, field_id: str) -> Optional[FieldDescriptor]:
        for item in self.fields:
            if item.id == field_id:
                return item
        return None

    def get_button(self, button_id: str) -> Optional[ButtonDescriptor]:
        for button in self.buttons:
            if button.id == button_id:
                return button
        return None

    @property
    def field_ids(self) -> List[str]:
        return [item.id for item in self.fields]

    def default_values(self) -> FormValues:
        """Value map seeded from every field's default."""
        return {item.id: item.initial_value() for item in self.fields}
