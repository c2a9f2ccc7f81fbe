# -*- coding: utf-8 -*-
"""
Button Dispatcher - runs a button's callback with loading-state tracking.
"""

import inspect
from typing import TYPE_CHECKING

from models.form import ButtonDescriptor
from utils.logger import get_logger

if TYPE_CHECKING:
    from .form_engine import FormEngine

logger = get_logger(__name__)


class ButtonDispatcher:
    """
    Wraps button callbacks for a FormEngine.

    Each button has its own loading flag, so invocations of different
    buttons on the same step do not block each other.
    """

    def __init__(self, engine: 'FormEngine'):
        self.engine = engine

    async def invoke(self, button: ButtonDescriptor) -> bool:
        """
        Validate (unless the button skips validation) and run the callback.

        The step boundary signal is emitted right before the callback. A
        skip-validate button emits it a second time after the callback.
        The loading flag is reset even when the callback raises; the
        exception is not swallowed.

        Args:
            button: A button of the engine's step

        Returns:
            True if the callback ran, False if validation blocked it
        """
        engine = self.engine
        # Only this step's own descriptor may run
        if engine.descriptor.get_button(button.id) is not button:
            raise KeyError(f"Button '{button.id}' does not belong to step '{engine.descriptor.title}'")

        engine.set_button_loading(button.id, True)
        try:
            executed = False

            if button.skip_validate or engine.validate_form():
                logger.debug(f"Button '{button.id}': crossing step boundary")
                engine.step_boundary_crossed.emit(button.id)

                result = button.callback(engine.values)
                if inspect.isawaitable(result):
                    await result
                executed = True
            else:
                logger.debug(f"Button '{button.id}': blocked by validation")

            if button.skip_validate:
                engine.step_boundary_crossed.emit(button.id)

            return executed
        finally:
            engine.set_button_loading(button.id, False)
