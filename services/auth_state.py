# -*- coding: utf-8 -*-
"""
Auth State - whether the current user is signed in.

Injected into the services that change it instead of living in a
global store.
"""

from PyQt5.QtCore import QObject, pyqtSignal


class AuthState(QObject):

    authentication_changed = pyqtSignal(bool)

    def __init__(self, user_authenticated: bool = False, parent: QObject = None):
        super().__init__(parent)
        self._user_authenticated = user_authenticated

    @property
    def user_authenticated(self) -> bool:
        return self._user_authenticated

    def set_authenticated(self, value: bool):
        if value == self._user_authenticated:
            return
        self._user_authenticated = value
        self.authentication_changed.emit(value)
