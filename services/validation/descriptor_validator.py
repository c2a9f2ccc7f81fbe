# -*- coding: utf-8 -*-
"""
Configuration checks for step descriptors.

The form engine trusts its configuration. Factory output is checked
with this validator in tests so that defects such as max_length below
min_length never reach a running form.
"""

from abc import ABC, abstractmethod
from collections import Counter
from datetime import date
from typing import Any, List

from models.form import FieldDescriptor, FieldType, StepDescriptor


class ValidationStrategy(ABC):
    """Checks one kind of record and reports problems as messages instead of raising."""

    @abstractmethod
    def validate(self, record: Any) -> List[str]:
        """Return the error messages for `record` (empty when valid)."""

    def is_valid(self, record: Any) -> bool:
        return not self.validate(record)


class StepDescriptorValidator(ValidationStrategy):
    """Reports configuration defects of a StepDescriptor."""

    def validate(self, record: StepDescriptor) -> List[str]:
        errors: List[str] = []

        if not record.title:
            errors.append("Step has no title")

        for field_id, count in Counter(record.field_ids).items():
            if count > 1:
                errors.append(f"Duplicate field id: {field_id}")

        button_ids = [button.id for button in record.buttons]
        for button_id, count in Counter(button_ids).items():
            if count > 1:
                errors.append(f"Duplicate button id: {button_id}")

        if not record.buttons:
            errors.append(f"Step '{record.title}' has no buttons")

        for item in record.fields:
            errors.extend(self._validate_field(item))

        for button in record.buttons:
            if not callable(button.callback):
                errors.append(f"Button '{button.id}' has no callable callback")

        return errors

    def _validate_field(self, item: FieldDescriptor) -> List[str]:
        errors: List[str] = []
        prefix = f"Field '{item.id}'"

        if not item.id:
            errors.append("Field with empty id")
        if not item.label:
            errors.append(f"{prefix} has no label")

        for name in ("min_length", "max_length"):
            limit = getattr(item, name)
            if limit is not None and limit < 0:
                errors.append(f"{prefix}: {name} must not be negative")

        if (
            item.min_length is not None
            and item.max_length is not None
            and item.max_length < item.min_length
        ):
            errors.append(f"{prefix}: max_length is less than min_length")

        if item.type == FieldType.DATE:
            if item.default_value is not None and not isinstance(item.default_value, date):
                errors.append(f"{prefix}: date field default must be a date")
            if (
                item.min_date is not None
                and item.max_date is not None
                and item.max_date < item.min_date
            ):
                errors.append(f"{prefix}: max_date is earlier than min_date")
        elif item.min_date is not None or item.max_date is not None:
            errors.append(f"{prefix}: date bounds on a non-date field")

        if item.type.is_textual:
            if item.default_value is not None and not isinstance(item.default_value, str):
                errors.append(f"{prefix}: {item.type.value} field default must be a string")

        if item.type == FieldType.SELECT:
            if not item.select_values:
                errors.append(f"{prefix}: select field has no options")
            elif item.default_value is not None:
                allowed = {option.value for option in item.select_values}
                if item.default_value not in allowed:
                    errors.append(f"{prefix}: default value is not one of the options")
        elif item.select_values:
            errors.append(f"{prefix}: options on a non-select field")

        if item.validation is not None and not callable(item.validation):
            errors.append(f"{prefix}: validation is not callable")

        return errors
