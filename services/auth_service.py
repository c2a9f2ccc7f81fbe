# -*- coding: utf-8 -*-
"""
Authentication Service - registration and login against the backend.

POST /register and POST /login both answer with an access/refresh
token pair, which is persisted in TokenStorage.
"""

from typing import Any, Dict, Optional

from models.auth import AuthTokens
from models.registration import RegistrationRecord
from services.api_client import ApiClient
from services.auth_state import AuthState
from services.exceptions import ApiException
from services.token_storage import TokenStorage
from utils.logger import get_logger

logger = get_logger(__name__)

REGISTER_PATH = "/register"
LOGIN_PATH = "/login"


class AuthService:
    """Signs users up and in, and keeps AuthState and stored tokens in sync."""

    def __init__(
        self,
        api_client: ApiClient,
        token_storage: TokenStorage,
        auth_state: Optional[AuthState] = None
    ):
        self.api_client = api_client
        self.token_storage = token_storage
        self.auth_state = auth_state or AuthState()

    async def register(self, record: RegistrationRecord) -> AuthTokens:
        """
        Submit a registration record.

        Raises:
            ApiException: Backend rejected the request or sent no token
            NetworkException: Backend unreachable
        """
        data = await self.api_client.call_async("POST", REGISTER_PATH, json_data=record.to_payload())
        tokens = self._accept_tokens(data, REGISTER_PATH)
        logger.info(f"Registered user '{record.login}'")
        return tokens

    async def login(self, login: str, password: str) -> AuthTokens:
        """Sign in with login and password; same errors as register()."""
        data = await self.api_client.call_async(
            "POST", LOGIN_PATH, json_data={"login": login, "password": password}
        )
        tokens = self._accept_tokens(data, LOGIN_PATH)
        logger.info(f"Logged in as '{login}'")
        return tokens

    def logout(self):
        self.token_storage.clear_tokens()
        self.auth_state.set_authenticated(False)
        logger.info("Logged out")

    def is_authenticated(self) -> bool:
        return self.auth_state.user_authenticated

    def restore_session(self) -> bool:
        """Mark the user authenticated if an access token is already stored."""
        access_token, _ = self.token_storage.get_tokens()
        self.auth_state.set_authenticated(bool(access_token))
        return bool(access_token)

    def _accept_tokens(self, data: Optional[Dict[str, Any]], path: str) -> AuthTokens:
        try:
            tokens = AuthTokens.from_response(data)
        except KeyError:
            logger.error(f"No access token in response from {path}")
            raise ApiException(
                message="Auth response did not contain an access token",
                response_data=data if isinstance(data, dict) else {},
                method="POST",
                path=path
            )

        self.token_storage.save_tokens(tokens.access_token, tokens.refresh_token)
        self.auth_state.set_authenticated(True)
        return tokens
