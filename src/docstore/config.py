"""Application configuration: settings schema and layered loader

Precedence, lowest first: the YAML config file, DOCSTORE_<FIELD> env vars,
then non-None CLI overrides.
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, field_validator


ENV_PREFIX = "DOCSTORE_"
CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:  str = "docstore"
    seed_file: Optional[str] = Field(default=None, description="YAML/JSON documents loaded by the CLI")
    log_level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    indent:    int = Field(default=2, ge=0, description="JSON indentation for CLI output")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value


def _config_path(explicit: Optional[Path]) -> Path:
    """Return the config file to read: explicit path, DOCSTORE_CONFIG, or ./config.yaml."""
    if explicit is not None:
        return Path(explicit)
    return Path(os.getenv(f"{ENV_PREFIX}CONFIG") or CONFIG_FILE)


def _read_config_file(path: Path) -> dict[str, Any]:
    """Parse the YAML config file; relative seed_file paths are taken from the file's directory."""
    if not path.is_file():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")

    seed = data.get("seed_file")
    if seed and not Path(seed).is_absolute():
        data["seed_file"] = str(path.parent / seed)
    return data


def _read_env() -> dict[str, str]:
    """Collect DOCSTORE_<FIELD> values that are set and non-empty."""
    found = {}
    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            found[name] = val
    return found


def load_config(overrides: dict[str, Any] = None, config_file: Optional[Path] = None) -> Settings:
    """Build Settings from the config file, env vars, and overrides (later layers win)."""
    data = _read_config_file(_config_path(config_file))
    data.update(_read_env())
    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
