# -*- coding: utf-8 -*-
"""
Registration Flow - three-step sign-up form.

Step 1: personal data (age-gated date of birth)
Step 2: login and password
Step 3: privacy settings, then submission to the backend
"""

from datetime import date
from typing import Dict, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from app.config import Config
from models.auth import AuthTokens
from models.form import FormValues, StepDescriptor
from models.registration import RegistrationRecord
from services.auth_service import AuthService
from ui.wizards.framework import StepFlow
from utils.datetime_utils import subtract_years_from_today
from utils.logger import get_logger

from .registration_context import RegistrationContext
from .step_factories import build_credentials_step, build_personal_step, build_privacy_step

logger = get_logger(__name__)


class RegistrationFlow(StepFlow):
    """Wires the registration step factories to navigation and submission."""

    register_in_process_changed = pyqtSignal(bool)

    def __init__(
        self,
        auth_service: AuthService,
        today: Optional[date] = None,
        parent: Optional[QObject] = None
    ):
        """
        Initialize the flow at step 1.

        Args:
            auth_service: Submission collaborator
            today: Reference date for the birthday bounds (defaults to today)
            parent: Parent QObject
        """
        super().__init__(parent)
        self.auth_service = auth_service

        # Latest allowed birthday (youngest user) and earliest (oldest user)
        self.max_birthday: date = subtract_years_from_today(Config.MIN_REGISTER_YEAR, today)
        self.min_birthday: date = subtract_years_from_today(Config.MAX_REGISTER_YEAR, today)

        self.register_in_process = False
        self.tokens: Optional[AuthTokens] = None

        self.start()

    def create_context(self) -> RegistrationContext:
        return RegistrationContext(default_birthday=self.min_birthday)

    def create_steps(self) -> Dict[int, StepDescriptor]:
        return {
            Config.MIN_REGISTER_STEP: build_personal_step(
                self.min_birthday, self.max_birthday, self.handle_step1_submit
            ),
            Config.MIN_REGISTER_STEP + 1: build_credentials_step(
                self.handle_step2_prev, self.handle_step2_submit
            ),
            Config.MAX_REGISTER_STEP: build_privacy_step(self.handle_step3_submit),
        }

    @property
    def registration_record(self) -> RegistrationRecord:
        return self.context.build_record()

    # =========================================================================
    # Button callbacks
    # =========================================================================

    def handle_step1_submit(self, values: FormValues):
        self.context.merge_values(values)
        self.context.mark_step_completed(1)
        self.navigator.next_step()

    def handle_step2_submit(self, values: FormValues):
        self.context.merge_values(values)
        self.context.mark_step_completed(2)
        self.navigator.next_step()

    def handle_step2_prev(self, values: FormValues):
        self.navigator.prev_step()

    async def handle_step3_submit(self, values: FormValues):
        self.context.merge_values(values)
        self.context.mark_step_completed(3)
        await self.register(self.context.build_record())

    # =========================================================================
    # Submission
    # =========================================================================

    async def register(self, record: RegistrationRecord) -> AuthTokens:
        """
        Submit the merged record and finish the flow.

        Errors from the backend propagate to the caller; the flow stays on
        the last step so the user can retry.
        """
        self._set_register_in_process(True)
        try:
            logger.info(f"Submitting registration for login '{record.login}'")
            self.tokens = await self.auth_service.register(record)
        finally:
            self._set_register_in_process(False)

        self.complete()
        return self.tokens

    def _set_register_in_process(self, value: bool):
        self.register_in_process = value
        self.register_in_process_changed.emit(value)
