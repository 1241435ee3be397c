"""
Configuration management for the recipe book.

This module centralizes environment variable loading from the .env file at the
project root. It is imported early by the Streamlit entry point so that .env is
loaded before any other code reads environment variables.

When .env does not exist, load_dotenv() is a no-op and the process environment
is used as-is.

Environment Variables:
- RECIPEBOOK_LOG_LEVEL: Optional, root log level (default "INFO")
- RECIPEBOOK_EVENT_LOG: Optional, path of a JSONL file receiving UI events
  (unset: events only go to the logger)
- RECIPEBOOK_SHOW_VALIDATION_FEEDBACK: Optional, "1"/"true" shows why the Add
  form refused to save (default off)
- RECIPEBOOK_APP_TITLE: Optional, title of the list screen (default "Recipes")
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def load_env_file() -> None:
    """
    Load environment variables from .env at the project root.

    Safe to call multiple times. Existing environment variables take precedence
    over values in the file.
    """
    # recipebook/config.py -> recipebook/ -> project root
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


load_env_file()


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


class AppConfig:
    """Configuration read from the environment on every access."""

    @staticmethod
    def get_log_level() -> str:
        """
        Get the root log level name.

        Returns:
            Upper-cased level name (default: "INFO")
        """
        return os.getenv("RECIPEBOOK_LOG_LEVEL", "INFO").upper()

    @staticmethod
    def get_event_log_path() -> Optional[Path]:
        """
        Get the path of the JSONL event log.

        Returns:
            Path, or None if event file logging is disabled
        """
        raw = os.getenv("RECIPEBOOK_EVENT_LOG")
        return Path(raw) if raw else None

    @staticmethod
    def show_validation_feedback() -> bool:
        return _env_flag("RECIPEBOOK_SHOW_VALIDATION_FEEDBACK")

    @staticmethod
    def get_app_title() -> str:
        return os.getenv("RECIPEBOOK_APP_TITLE", "Recipes")


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger once.

    Args:
        level: Level name; defaults to AppConfig.get_log_level()
    """
    level_name = level or AppConfig.get_log_level()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
