"""Application settings and environment variables."""

import os

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


def _env_flag(name: str, default: str = "false") -> bool:
    """Reads a boolean flag from the environment (1/true/yes/on)."""
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    # Command loop behaviour
    DEMO_MODE: bool = _env_flag("DEMO_MODE")  # Fixed Apple/5 and Apple/8 values instead of prompting
    STRICT_MENU_INPUT: bool = _env_flag("STRICT_MENU_INPUT")  # Non-numeric menu choice aborts the process

    APP_TIMEZONE: str = os.getenv("APP_TIMEZONE", "Europe/Berlin")

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")  # INFO, DEBUG, WARNING, ERROR, CRITICAL


settings = Settings()
