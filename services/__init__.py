# -*- coding: utf-8 -*-
"""
Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "ApiClient",
    "ApiConfig",
    "AuthService",
    "AuthState",
    "TokenStorage",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name in ("ApiClient", "ApiConfig"):
        from . import api_client
        return getattr(api_client, name)
    elif name == "AuthService":
        from .auth_service import AuthService
        return AuthService
    elif name == "AuthState":
        from .auth_state import AuthState
        return AuthState
    elif name == "TokenStorage":
        from .token_storage import TokenStorage
        return TokenStorage
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
