# -*- coding: utf-8 -*-
"""
Wizard Context - Base class for the data a multi-step flow accumulates.

Form engines are discarded on every step change; the values they
collect are merged here by the flow's button callbacks.
"""

from typing import Any, Dict, Mapping
from datetime import datetime
from abc import ABC, abstractmethod
import uuid

from utils.datetime_utils import serialize_record


class WizardContext(ABC):
    """
    Base class for wizard context.

    All wizard contexts should inherit from this class and implement:
    - from_dict(): Restore context from dictionary
    """

    def __init__(self):
        """Initialize base context properties."""
        self.wizard_id: str = str(uuid.uuid4())
        self.status: str = "draft"  # draft, in_progress, completed
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()

        # Step completion tracking
        self.completed_steps: set = set()

        # Values merged from step engines
        self.data: Dict[str, Any] = {}

    def mark_step_completed(self, step: int):
        """Mark a step as completed."""
        self.completed_steps.add(step)
        self.updated_at = datetime.now()

    def is_step_completed(self, step: int) -> bool:
        return step in self.completed_steps

    def merge_values(self, values: Mapping[str, Any]):
        """Merge the values of a finished step into the accumulated data."""
        self.data.update(values)
        if self.status == "draft":
            self.status = "in_progress"
        self.updated_at = datetime.now()

    def mark_completed(self):
        self.status = "completed"
        self.updated_at = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize context to dictionary.

        Subclasses should call super().to_dict() and add their own fields.
        """
        return {
            "wizard_id": self.wizard_id,
            "status": self.status,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "completed_steps": sorted(self.completed_steps),
            "data": serialize_record(self.data)
        }

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WizardContext':
        """
        Restore context from dictionary.

        Subclasses must implement this method.
        """
        pass

    @classmethod
    def _restore_base_fields(cls, context: 'WizardContext', data: Dict[str, Any]):
        """Helper method to restore base fields from dictionary."""
        context.wizard_id = data.get("wizard_id", context.wizard_id)
        context.status = data.get("status", "draft")
        context.completed_steps = set(data.get("completed_steps", []))
        context.data = dict(data.get("data", {}))

        # Parse datetime strings
        if "created_at" in data:
            context.created_at = datetime.fromisoformat(data["created_at"])
        if "updated_at" in data:
            context.updated_at = datetime.fromisoformat(data["updated_at"])
