"""Configuration resolved once at startup from the environment and ``.env``."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values, load_dotenv

from chatgpt_cli._exceptions import ConfigError

logger = logging.getLogger(__name__)

API_KEY_ENV = "OPENAI_API_KEY"
MODEL_ENV = "OPENAI_API_MODEL"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_ENV_FILE = ".env"

SOURCE_ENVIRONMENT = "environment variable"
SOURCE_ENV_FILE = ".env file"


@dataclass(frozen=True, slots=True)
class Config:
    """Resolved API key and model."""

    api_key: str
    model: str
    key_source: str = SOURCE_ENVIRONMENT
    model_is_default: bool = False

    @property
    def masked_key(self) -> str:
        return mask_key(self.api_key)

    def __repr__(self) -> str:
        return (
            f"Config(api_key={self.masked_key!r}, model={self.model!r}, "
            f"key_source={self.key_source!r}, model_is_default={self.model_is_default!r})"
        )


def mask_key(key: str) -> str:
    """Show only the last 4 characters of ``key``.

    Keys of 4 characters or fewer are fully hidden (``"***"``) rather than
    shown in full.
    """
    if len(key) <= 4:
        return "***"
    return f"***{key[-4:]}"


def _load_env_file(path: Path) -> bool:
    """Load ``path`` into ``os.environ`` without overriding existing variables.

    Returns True if the file defined the API key and the environment did not.
    """
    if not path.is_file():
        logger.info("No %s file found, proceeding with existing environment variables", path)
        return False
    try:
        defined = dotenv_values(path)
        key_from_file = bool(defined.get(API_KEY_ENV)) and not os.getenv(API_KEY_ENV)
        load_dotenv(path, override=False)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Error loading {path}: {exc}") from exc
    logger.debug("Loaded environment from %s", path)
    return key_from_file


def load_config(env_file: str | os.PathLike[str] | None = DEFAULT_ENV_FILE) -> Config:
    """Resolve :class:`Config`, raising :class:`ConfigError` if no API key is set
    or the settings file cannot be read.

    Pass ``env_file=None`` to skip reading a settings file entirely.
    """
    key_from_file = _load_env_file(Path(env_file)) if env_file is not None else False

    api_key = os.getenv(API_KEY_ENV, "")
    if not api_key:
        raise ConfigError(
            f"API key not found in environment variables. Please set {API_KEY_ENV}."
        )

    model = os.getenv(MODEL_ENV, "")
    model_is_default = not model
    return Config(
        api_key=api_key,
        model=model or DEFAULT_MODEL,
        key_source=SOURCE_ENV_FILE if key_from_file else SOURCE_ENVIRONMENT,
        model_is_default=model_is_default,
    )
