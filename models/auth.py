# -*- coding: utf-8 -*-
"""
Authentication token model.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class AuthTokens:
    """Access/refresh token pair returned by the auth endpoints."""

    access_token: str
    refresh_token: Optional[str] = None

    @classmethod
    def from_response(cls, data: Optional[Dict[str, Any]]) -> "AuthTokens":
        """
        Parse a token response.

        Accepts the PascalCase keys the backend sends (AccessToken,
        RefreshToken) as well as camelCase and snake_case variants.

        Raises:
            KeyError: If the response carries no access token
        """
        if not isinstance(data, dict):
            data = {}
        access = (
            data.get("AccessToken")
            or data.get("accessToken")
            or data.get("access_token")
        )
        if not access:
            raise KeyError("access token missing from auth response")

        refresh = (
            data.get("RefreshToken")
            or data.get("refreshToken")
            or data.get("refresh_token")
        )
        return cls(access_token=access, refresh_token=refresh)
