"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from polysite.errors import ConfigError


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:        str = "polysite"
    sites_root:      str = Field(default="sites",    description="Root directory holding one tree per hostname")
    max_concurrency: int = Field(default=6,  ge=1,   description="Max route writes in flight per locale")
    switcher_max:    int = Field(default=6,  ge=1,   description="Max locales listed in the fallback language switcher")
    default_theme:   str = Field(default="classic",  description="Theme used when the blueprint names none")
    parser_config:   str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    log_level:       str = Field(default="WARNING",  pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then POLYSITE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"POLYSITE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    if isinstance(data.get("log_level"), str):
        data["log_level"] = data["log_level"].upper()
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e
