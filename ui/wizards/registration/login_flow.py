# -*- coding: utf-8 -*-
"""
Login Flow - single-step sign-in form driven by the same engine.
"""

from typing import Dict, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from models.auth import AuthTokens
from models.form import FormValues, StepDescriptor
from services.auth_service import AuthService
from ui.wizards.framework import StepFlow, WizardContext

from .step_factories import build_login_step


class LoginContext(WizardContext):
    """Context holding the submitted credentials."""

    @classmethod
    def from_dict(cls, data: Dict) -> 'LoginContext':
        context = cls()
        cls._restore_base_fields(context, data)
        return context


class LoginFlow(StepFlow):

    auth_in_process_changed = pyqtSignal(bool)

    def __init__(self, auth_service: AuthService, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.auth_service = auth_service
        self.auth_in_process = False
        self.tokens: Optional[AuthTokens] = None
        self.start()

    def create_context(self) -> LoginContext:
        return LoginContext()

    def create_steps(self) -> Dict[int, StepDescriptor]:
        return {1: build_login_step(self.handle_submit)}

    async def handle_submit(self, values: FormValues):
        # Credentials are not kept in the context
        self._set_auth_in_process(True)
        try:
            self.tokens = await self.auth_service.login(values["login"], values["password"])
        finally:
            self._set_auth_in_process(False)

        self.context.mark_step_completed(1)
        self.complete()

    def _set_auth_in_process(self, value: bool):
        self.auth_in_process = value
        self.auth_in_process_changed.emit(value)
