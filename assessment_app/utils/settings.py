"""Process configuration read from the environment (and an optional .env file)."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from dotenv import load_dotenv

API_KEY_ENV: str = "ANTHROPIC_API_KEY"
MODEL_ENV: str = "ASSESSMENT_MODEL"
LOG_LEVEL_ENV: str = "ASSESSMENT_LOG_LEVEL"

DEFAULT_MODEL: str = "claude-haiku-4-5"
DEFAULT_LOG_LEVEL: str = "INFO"


@dataclass(frozen=True, slots=True)
class AppSettings:
    """Runtime settings. A missing API key is allowed here and reported at generation time."""

    api_key: str | None
    model: str = DEFAULT_MODEL
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(env_file: Path | None = None) -> AppSettings:
    """Load ``.env`` (without overriding real environment variables) and build settings."""
    if env_file is not None:
        load_dotenv(env_file, override=False)
    else:
        load_dotenv(override=False)

    api_key = os.environ.get(API_KEY_ENV, "").strip() or None
    model = os.environ.get(MODEL_ENV, "").strip() or DEFAULT_MODEL
    log_level = os.environ.get(LOG_LEVEL_ENV, "").strip().upper() or DEFAULT_LOG_LEVEL
    return AppSettings(api_key=api_key, model=model, log_level=log_level)
