# -*- coding: utf-8 -*-
"""
Form Engine - validation state for the currently active step.

Holds the value map, the per-field error lists and the per-button
loading flags for one StepDescriptor. A new engine is created every
time a step becomes active.

Signals:
- validation_failed(dict): emitted by validate_form() when at least one
  field is invalid, with a copy of field_errors
- step_boundary_crossed(str): emitted with the button id right before
  a button callback runs (see ButtonDispatcher)
- button_loading_changed(str, bool): a button's loading flag changed
"""

from datetime import date
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from models.form import (
    ButtonDescriptor, FieldDescriptor, FieldType, FieldValue, FormValues, StepDescriptor
)
from services.validation import rules
from utils.logger import get_logger

from .button_dispatcher import ButtonDispatcher

logger = get_logger(__name__)


class FormEngine(QObject):
    """Runs the validation pipeline for one step and tracks button state."""

    validation_failed = pyqtSignal(dict)
    step_boundary_crossed = pyqtSignal(str)
    button_loading_changed = pyqtSignal(str, bool)

    def __init__(
        self,
        descriptor: StepDescriptor,
        initial_values: Optional[Mapping[str, FieldValue]] = None,
        parent: Optional[QObject] = None
    ):
        """
        Initialize the engine.

        Args:
            descriptor: The active step
            initial_values: Values overriding field defaults; keys that are
                not fields of the step and None values are ignored
            parent: Parent QObject
        """
        super().__init__(parent)
        self.descriptor = descriptor

        self.values: FormValues = descriptor.default_values()
        if initial_values:
            for field_id, value in initial_values.items():
                if field_id in self.values and value is not None:
                    self.values[field_id] = value

        self.field_errors: Dict[str, List[str]] = {}
        self.btn_loading: Dict[str, bool] = {
            button.id: False for button in descriptor.buttons
        }

        self.dispatcher = ButtonDispatcher(self)

    # =========================================================================
    # Host input
    # =========================================================================

    def set_value(self, field_id: str, value: FieldValue):
        """Store user input for a field of this step."""
        if field_id not in self.values:
            raise KeyError(f"Unknown field '{field_id}' in step '{self.descriptor.title}'")
        self.values[field_id] = value

    # =========================================================================
    # Validation
    # =========================================================================

    def validate_field(self, descriptor: FieldDescriptor) -> List[str]:
        """
        Validate one field and return its error messages.

        String values are trimmed and written back before any rule runs.
        A failed required check is the only message returned for the field.
        """
        value = self.values.get(descriptor.id, "")
        if isinstance(value, str):
            value = value.strip()
            self.values[descriptor.id] = value

        if descriptor.required:
            message = rules.required(value, descriptor.label)
            if message:
                return [message]

        errors: List[str] = []

        if isinstance(value, str) and value:
            if descriptor.min_length is not None:
                message = rules.min_length(value, descriptor.min_length, descriptor.label)
                if message:
                    errors.append(message)

            if descriptor.max_length is not None:
                message = rules.max_length(value, descriptor.max_length, descriptor.label)
                if message:
                    errors.append(message)

            if descriptor.type == FieldType.EMAIL:
                message = rules.email(value, descriptor.label)
                if message:
                    errors.append(message)

        if isinstance(value, date):
            message = rules.date_range(
                value, descriptor.min_date, descriptor.max_date, descriptor.label
            )
            if message:
                errors.append(message)

        if descriptor.validation is not None:
            custom_errors = descriptor.validation(value, MappingProxyType(self.values))
            if custom_errors:
                errors.extend(custom_errors)

        return errors

    def validate_form(self) -> bool:
        """
        Validate every field of the step.

        Returns:
            True if no field has errors
        """
        self.field_errors = {}

        for descriptor in self.descriptor.fields:
            errors = self.validate_field(descriptor)
            if errors:
                self.field_errors[descriptor.id] = errors

        if self.field_errors:
            logger.info(
                f"Step '{self.descriptor.title}' invalid: {sorted(self.field_errors)}"
            )
            self.validation_failed.emit(dict(self.field_errors))
            return False

        logger.debug(f"Step '{self.descriptor.title}' validated successfully")
        return True

    @property
    def is_valid(self) -> bool:
        """Whether the last validation pass left no errors."""
        return not any(self.field_errors.values())

    def get_field_errors(self, field_id: str) -> List[str]:
        return list(self.field_errors.get(field_id, []))

    # =========================================================================
    # Buttons
    # =========================================================================

    def set_button_loading(self, button_id: str, loading: bool):
        self.btn_loading[button_id] = loading
        self.button_loading_changed.emit(button_id, loading)

    async def invoke(self, button: ButtonDescriptor) -> bool:
        """Run a button through the dispatcher (see ButtonDispatcher.invoke)."""
        return await self.dispatcher.invoke(button)

    async def invoke_by_id(self, button_id: str) -> bool:
        button = self.descriptor.get_button(button_id)
        if button is None:
            raise KeyError(f"Unknown button '{button_id}' in step '{self.descriptor.title}'")
        return await self.dispatcher.invoke(button)
