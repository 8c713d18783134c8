from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from .models import DEFAULT_FORMAT, DEFAULT_MODEL, DEFAULT_QUALITY, OutputFormat

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "genimg.toml"


class GenimgConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    api_key_env: str = "OPENAI_API_KEY"
    model: str = DEFAULT_MODEL
    format: str = DEFAULT_FORMAT
    quality: str = DEFAULT_QUALITY
    dir: str = "."

    @field_validator("api_key_env", "model")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("value cannot be empty")
        return v

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        allowed = [f.value for f in OutputFormat]
        if v not in allowed:
            raise ValueError(f"format must be one of {allowed}")
        return v


class ConfigError(Exception):
    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


def load_config(config_path: Path) -> GenimgConfig:
    try:
        text = config_path.read_text(encoding="utf-8")
        data = tomllib.loads(text)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to parse TOML: {e}", path=config_path) from e

    try:
        return GenimgConfig.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration: {e}", path=config_path) from e


def find_config(start_dir: Optional[Path] = None) -> Optional[Path]:
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.exists():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def load_settings(start_dir: Optional[Path] = None) -> GenimgConfig:
    """Load ``.env`` and the nearest genimg.toml; built-in defaults without one."""
    if start_dir is None:
        start_dir = Path.cwd()

    load_dotenv(start_dir / ".env")

    config_path = find_config(start_dir)
    if config_path is None:
        return GenimgConfig()

    logger.debug("Using config %s", config_path)
    return load_config(config_path)


def get_api_key(config: GenimgConfig) -> str:
    key = os.environ.get(config.api_key_env)
    if not key:
        raise ConfigError(
            f"{config.api_key_env} is missing. Define it in the current directory .env file."
        )
    return key
