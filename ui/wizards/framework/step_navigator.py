# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between wizard steps.

Handles:
- Step progression (next/previous) within [min_step, max_step]
- Progress tracking
"""

import math

from PyQt5.QtCore import QObject, pyqtSignal

from utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    Bounded step counter for a multi-step flow.

    Transitions past either bound are no-ops, not errors, so
    min_step <= current_step <= max_step always holds.
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_step, new_step
    progress_changed = pyqtSignal(int)

    def __init__(self, max_step: int, min_step: int = 1, parent: QObject = None):
        """
        Initialize the navigator at min_step.

        Args:
            max_step: Last step number
            min_step: First step number
            parent: Parent QObject
        """
        super().__init__(parent)
        if max_step < min_step:
            raise ValueError(f"max_step ({max_step}) is less than min_step ({min_step})")

        self.min_step = min_step
        self.max_step = max_step
        self.current_step = min_step

    @property
    def progress_percentage(self) -> int:
        """round(current_step / max_step * 100), halves rounded up."""
        if self.max_step == 0:
            return 0
        return int(math.floor(self.current_step / self.max_step * 100 + 0.5))

    def get_step_count(self) -> int:
        return self.max_step - self.min_step + 1

    def can_go_next(self) -> bool:
        return self.current_step < self.max_step

    def can_go_previous(self) -> bool:
        return self.current_step > self.min_step

    def is_last_step(self) -> bool:
        return self.current_step == self.max_step

    def next_step(self) -> bool:
        """
        Move forward one step.

        Returns:
            True if the step changed
        """
        if not self.can_go_next():
            logger.debug(f"Cannot go next: already at last step ({self.current_step})")
            return False

        logger.info(f"Navigating: Step {self.current_step} → {self.current_step + 1}")
        return self._navigate_to(self.current_step + 1)

    def prev_step(self) -> bool:
        """Move back one step; returns True if the step changed."""
        if not self.can_go_previous():
            logger.debug(f"Cannot go previous: already at first step ({self.current_step})")
            return False

        logger.info(f"Navigating back: Step {self.current_step} → {self.current_step - 1}")
        return self._navigate_to(self.current_step - 1)

    def goto_step(self, step: int) -> bool:
        """
        Jump to a specific step.

        Returns:
            True if the step changed; out-of-range targets are ignored
        """
        if step < self.min_step or step > self.max_step:
            logger.debug(f"Ignoring jump to step {step} (valid range: {self.min_step}-{self.max_step})")
            return False

        if step == self.current_step:
            return False

        return self._navigate_to(step)

    def reset(self):
        """Reset navigator to the first step."""
        self.goto_step(self.min_step)

    def _navigate_to(self, new_step: int) -> bool:
        old_step = self.current_step
        self.current_step = new_step

        self.step_changed.emit(old_step, new_step)
        self.progress_changed.emit(self.progress_percentage)
        return True
