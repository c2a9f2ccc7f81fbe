# -*- coding: utf-8 -*-
"""
Step Flow - Abstract host that drives a multi-step form.

Owns the navigator, the wizard context and the step descriptors, and
builds a fresh FormEngine whenever the active step changes.
"""

from typing import Dict, Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtCore import QObject, pyqtSignal

from models.form import StepDescriptor
from utils.logger import get_logger

from .form_engine import FormEngine
from .step_navigator import StepNavigator
from .wizard_context import WizardContext

logger = get_logger(__name__)


# Combine PyQt5 metaclass with ABC metaclass
class ABCQObjectMeta(type(QObject), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class StepFlow(QObject, metaclass=ABCQObjectMeta):
    """
    Abstract base class for multi-step flows.

    Subclasses must implement:
    - create_steps(): step number -> StepDescriptor
    - create_context(): WizardContext for accumulated values

    Subclasses set up their own collaborators in __init__ and then call
    start(). Engine signals are forwarded through the flow so hosts can
    connect once instead of on every step change.
    """

    # Signals
    engine_changed = pyqtSignal(object)  # new FormEngine
    flow_completed = pyqtSignal(dict)  # serialized context
    validation_failed = pyqtSignal(dict)
    step_boundary_crossed = pyqtSignal(str)

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.context: Optional[WizardContext] = None
        self.steps: Dict[int, StepDescriptor] = {}
        self.navigator: Optional[StepNavigator] = None
        self._engine: Optional[FormEngine] = None

    def start(self):
        """Build context, steps and navigator, and activate the first step."""
        self.context = self.create_context()
        self.steps = self.create_steps()
        if not self.steps:
            raise ValueError(f"{self.__class__.__name__} defines no steps")

        self.navigator = StepNavigator(max_step=max(self.steps), min_step=min(self.steps))
        self.navigator.step_changed.connect(self._on_step_changed)

        self._load_step(self.navigator.current_step)

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_steps(self) -> Dict[int, StepDescriptor]:
        """Create the step descriptors, keyed by step number."""
        pass

    @abstractmethod
    def create_context(self) -> WizardContext:
        pass

    # =========================================================================
    # State
    # =========================================================================

    @property
    def current_step(self) -> int:
        return self.navigator.current_step

    @property
    def current_descriptor(self) -> StepDescriptor:
        return self.steps[self.navigator.current_step]

    @property
    def current_engine(self) -> FormEngine:
        return self._engine

    @property
    def progress_percentage(self) -> int:
        return self.navigator.progress_percentage

    async def invoke(self, button_id: str) -> bool:
        """Invoke a button of the active step by id."""
        return await self._engine.invoke_by_id(button_id)

    def complete(self):
        """Mark the flow finished and notify the host."""
        self.context.mark_completed()
        logger.info(f"{self.__class__.__name__} completed ({self.context.wizard_id})")
        self.flow_completed.emit(self.context.to_dict())

    # =========================================================================
    # Step activation
    # =========================================================================

    def _load_step(self, step: int):
        descriptor = self.steps[step]

        # Values merged earlier win over field defaults when a step is revisited
        initial_values = {
            field_id: self.context.data[field_id]
            for field_id in descriptor.field_ids
            if field_id in self.context.data
        }

        engine = FormEngine(descriptor, initial_values=initial_values)
        engine.validation_failed.connect(self.validation_failed)
        engine.step_boundary_crossed.connect(self.step_boundary_crossed)

        self._engine = engine
        logger.debug(f"Step {step} active: '{descriptor.title}'")
        self.engine_changed.emit(engine)

    def _on_step_changed(self, old_step: int, new_step: int):
        self._load_step(new_step)
