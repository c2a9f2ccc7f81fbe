# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8080/api")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_VERIFY_SSL = os.getenv("API_VERIFY_SSL", "true").lower() in ("true", "1", "yes")

# Logging
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Storage
_STORAGE_PATH = os.getenv("STORAGE_PATH", None)


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "DH|MoodTracker"
    VERSION: str = "1.0.0"

    # HTTP API Backend Settings
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_VERIFY_SSL: bool = _API_VERIFY_SSL

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Durable key/value storage (tokens)
    STORAGE_PATH: Path = Path(_STORAGE_PATH) if _STORAGE_PATH else DATA_DIR / "storage.db"
    ACCESS_TOKEN_KEY: str = "access_token"
    REFRESH_TOKEN_KEY: str = "refresh_token"

    # Logging
    LOG_PATH: Path = LOGS_DIR / "app.log"
    LOG_LEVEL: str = _LOG_LEVEL
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
    LOG_BACKUP_COUNT: int = 3

    # Registration flow
    # Youngest allowed user, in years (latest allowed birthday)
    MIN_REGISTER_YEAR: int = 14
    # Oldest allowed user, in years (earliest allowed birthday)
    MAX_REGISTER_YEAR: int = 80
    MIN_REGISTER_STEP: int = 1
    MAX_REGISTER_STEP: int = 3

    # Field length limits shared by the auth forms
    FIELD_MIN_LENGTH: int = 4
    FIELD_MAX_LENGTH: int = 50

    @classmethod
    def ensure_directories(cls):
        """Create necessary directories if they don't exist."""
        for directory in (cls.DATA_DIR, cls.LOGS_DIR, cls.STORAGE_PATH.parent):
            directory.mkdir(parents=True, exist_ok=True)
