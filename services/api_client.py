# -*- coding: utf-8 -*-
"""
API Client - HTTP access to the backend.
=========================================

Thin wrapper over requests: bearer-token headers, request/response
logging, error normalization and an awaitable variant for callers
running on an event loop.
"""

import asyncio
import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import requests

from app.config import Config
from services.exceptions import ApiException, NetworkException
from services.token_storage import TokenStorage
from utils.logger import get_logger

logger = get_logger(__name__)

ALLOWED_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


@dataclass
class ApiConfig:
    """
    API connection settings.

    Missing values are loaded from Config (which reads the .env file).
    """
    base_url: str = None
    timeout: int = None
    verify_ssl: bool = None

    def __post_init__(self):
        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.verify_ssl is None:
            self.verify_ssl = Config.API_VERIFY_SSL


class ApiClient:
    """
    Backend API client.

    Usage:
        client = ApiClient(ApiConfig(base_url="http://localhost:8080/api"), storage)
        data = await client.call_async("POST", "/register", json_data=payload)
    """

    def __init__(
        self,
        config: Optional[ApiConfig] = None,
        token_storage: Optional[TokenStorage] = None,
        on_auth_required: Optional[Callable[[], None]] = None
    ):
        """
        Args:
            config: Connection settings
            token_storage: Source of the bearer token; tokens are cleared
                from it when the backend answers 401
            on_auth_required: Called after a 401 response
        """
        self.config = config or ApiConfig()
        self.base_url = self.config.base_url.rstrip('/')
        self.token_storage = token_storage
        self.on_auth_required = on_auth_required

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "X-Requested-With": "XMLHttpRequest"
        }
        if self.token_storage is not None:
            token = self.token_storage.get_access_token()
            if token:
                headers["Authorization"] = f"Bearer {token}"
        return headers

    def call(
        self,
        method: str,
        path: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None
    ) -> Any:
        """
        Execute an HTTP request.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE)
            path: Endpoint path relative to the base URL (e.g. "/register")
            json_data: JSON payload
            params: Query parameters

        Returns:
            Decoded JSON response, or None for an empty body

        Raises:
            ValueError: Unsupported method or blank path
            ApiException: The backend answered with an error status
            NetworkException: The backend could not be reached
        """
        method = (method or "").upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method!r}")
        if not path or not path.strip():
            raise ValueError("Request path must not be empty")

        url = f"{self.base_url}{path}"

        logger.info(f"[API REQ] {method} {path}")
        if params:
            logger.debug(f"[API REQ] Params: {params}")
        if json_data:
            # Never log credentials
            safe_body = {
                key: ("***" if "password" in key else value)
                for key, value in json_data.items()
            }
            logger.debug(f"[API REQ] Body: {json.dumps(safe_body, ensure_ascii=False, default=str)}")

        try:
            response = requests.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                headers=self._headers(),
                timeout=self.config.timeout,
                verify=self.config.verify_ssl
            )
            response.raise_for_status()

            result = None
            if response.text:
                result = response.json()

            logger.info(f"[API RES] {response.status_code} {method} {path}")
            return result

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except (ValueError, AttributeError):
                pass
            if not isinstance(response_data, dict):
                response_data = {"details": response_data}

            logger.error(f"[API ERR] {status_code} {method} {path} | Response: {response_data}")

            if status_code == 401:
                self._handle_auth_required()

            raise ApiException(
                message=response_data.get("message") or str(e),
                status_code=status_code,
                response_data=response_data,
                method=method,
                path=path
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {method} {path} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e,
                method=method,
                path=path
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {method} {path} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e,
                method=method,
                path=path
            )

    async def call_async(
        self,
        method: str,
        path: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None
    ) -> Any:
        """Awaitable call(): the blocking request runs in a worker thread."""
        return await asyncio.to_thread(self.call, method, path, json_data, params)

    def _handle_auth_required(self):
        if self.token_storage is not None:
            self.token_storage.clear_tokens()
        if self.on_auth_required is not None:
            self.on_auth_required()
