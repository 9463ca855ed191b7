# moodflow/config.py
import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    page_title: str = "MoodFlow"
    page_icon: str = "✨"
    max_chars: int = 500
    history_limit: int = 0  # 0 keeps every entry
    log_level: str = "INFO"


def _int_setting(env, name, default):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(environ=None):
    """Build Settings from the environment (a .env file is loaded when present)."""
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ
    defaults = Settings()
    settings = Settings(
        page_title=environ.get("MOODFLOW_PAGE_TITLE") or defaults.page_title,
        page_icon=defaults.page_icon,
        max_chars=_int_setting(environ, "MOODFLOW_MAX_CHARS", defaults.max_chars),
        history_limit=_int_setting(environ, "MOODFLOW_HISTORY_LIMIT", defaults.history_limit),
        log_level=(environ.get("MOODFLOW_LOG_LEVEL") or defaults.log_level).upper(),
    )
    if settings.max_chars <= 0:
        raise ValueError("MOODFLOW_MAX_CHARS must be positive")
    if settings.history_limit < 0:
        raise ValueError("MOODFLOW_HISTORY_LIMIT must be 0 or more")
    if settings.log_level not in LOG_LEVELS:
        raise ValueError(f"Unknown MOODFLOW_LOG_LEVEL: {settings.log_level}")
    return settings


def configure_logging(settings):
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
