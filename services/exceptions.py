# -*- coding: utf-8 -*-
"""Custom exceptions raised by the service layer."""


class ServiceException(Exception):
    """Base class for errors raised while talking to the backend."""

    def __init__(self, message: str, method: str = None, path: str = None):
        super().__init__(message)
        self.message = message
        self.method = method
        self.path = path


class ApiException(ServiceException):
    """The backend answered with an HTTP error status."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, method: str = None, path: str = None):
        super().__init__(message, method=method, path=path)
        self.status_code = status_code
        self.response_data = response_data or {}

    @property
    def code(self) -> str:
        """Backend error code, if the response carried one."""
        return self.response_data.get("code", "UNKNOWN_ERROR")

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class NetworkException(ServiceException):
    """The backend could not be reached (connection error, timeout)."""

    def __init__(self, message: str, original_error: Exception = None,
                 method: str = None, path: str = None):
        super().__init__(message, method=method, path=path)
        self.original_error = original_error
