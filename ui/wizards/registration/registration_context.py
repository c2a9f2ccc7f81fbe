# -*- coding: utf-8 -*-
"""
Registration Context - accumulated data of the registration flow.
"""

from datetime import date
from typing import Any, Dict

from models.registration import RegistrationRecord
from ui.wizards.framework import WizardContext


class RegistrationContext(WizardContext):
    """Context for the three-step registration flow."""

    def __init__(self, default_birthday: date):
        """
        Initialize registration context.

        Args:
            default_birthday: Birthday used in the record until step 1 is submitted
        """
        super().__init__()
        self.default_birthday = default_birthday

    def build_record(self) -> RegistrationRecord:
        """Merge the base registration data with everything collected so far."""
        base = RegistrationRecord(date_birthday=self.default_birthday).to_dict()
        base.update(self.data)
        return RegistrationRecord.from_dict(base)

    def to_dict(self) -> Dict[str, Any]:
        base_data = super().to_dict()
        base_data["default_birthday"] = self.default_birthday.isoformat()
        return base_data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RegistrationContext':
        context = cls(default_birthday=date.fromisoformat(data["default_birthday"]))
        cls._restore_base_fields(context, data)

        # Dates were serialized as ISO strings
        birthday = context.data.get("date_birthday")
        if isinstance(birthday, str):
            context.data["date_birthday"] = date.fromisoformat(birthday)

        return context
