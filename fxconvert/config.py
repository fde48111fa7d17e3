"""Environment configuration."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a required setting is missing."""


def load_env(path: str | os.PathLike[str] = ".env") -> bool:
    """Load variables from a dotenv file without overriding existing ones.

    Returns True when the file was found and loaded.
    """
    env_path = Path(path)
    if not env_path.is_file():
        logger.warning("Warning: .env file not found")
        return False
    load_dotenv(env_path, override=False)
    return True


def get_env(key: str) -> str:
    """Return a non-empty environment variable or raise ConfigError."""
    value = os.environ.get(key, "")
    if not value:
        raise ConfigError(f"Error: {key} not set in env")
    return value