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
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:4000")
_API_GRAPHQL_PATH = os.getenv("API_GRAPHQL_PATH", "/graphql")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_VERIFY_SSL = os.getenv("API_VERIFY_SSL", "true").lower() in ("true", "1", "yes")

# Draft Settings
_DRAFT_EXPIRY_DAYS = int(os.getenv("DRAFT_EXPIRY_DAYS", "7"))
_AUTO_SAVE_INTERVAL_MS = int(os.getenv("AUTO_SAVE_INTERVAL_MS", "30000"))

# Badge Settings
_DEFAULT_BADGE_TEMPLATE_ID = os.getenv("DEFAULT_BADGE_TEMPLATE_ID", "festival-fun")

# Logging
_LOGS_DIR = os.getenv("LOGS_DIR", None)
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


@dataclass
class Config:
    """Application configuration."""

    # HTTP API Backend Settings
    # Reads from .env file (API_BASE_URL, API_TIMEOUT, ...)
    API_BASE_URL: str = _API_BASE_URL
    API_GRAPHQL_PATH: str = _API_GRAPHQL_PATH
    API_TIMEOUT: int = _API_TIMEOUT
    API_VERIFY_SSL: bool = _API_VERIFY_SSL

    # Event Creation Wizard
    DRAFT_EXPIRY_DAYS: int = _DRAFT_EXPIRY_DAYS
    AUTO_SAVE_INTERVAL_MS: int = _AUTO_SAVE_INTERVAL_MS
    DRAFT_SEED_FIELDS: tuple = ("name", "description", "venue")
    DEFAULT_BADGE_TEMPLATE_ID: str = _DEFAULT_BADGE_TEMPLATE_ID
    DEFAULT_DEPOSIT_PERCENTAGE: int = 50

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = Path(_LOGS_DIR) if _LOGS_DIR else PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "eventdesk.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOG_LEVEL: str = _LOG_LEVEL  # console handler level
