"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from mdlite.core.options import DEFAULT_PRESET, ParserOptions, get_preset


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MDLITE_"


class Settings(BaseModel):
    app_name:      str = "mdlite"
    preset:        str = Field(default=DEFAULT_PRESET, description="Parser preset name (see `mdlite presets`)")
    output_format: str = Field(default="json", pattern="^(json|md)$", description="json or md")
    output_dir:    str = Field(default="dist", description="Directory for rendered documents")
    json_indent:   int = Field(default=2, ge=0, description="JSON indent; 0 = compact")
    log_level:     str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$")

    @field_validator("preset")
    @classmethod
    def check_preset(cls, name: str) -> str:
        get_preset(name)
        return name

    @property
    def parser_options(self) -> ParserOptions:
        return get_preset(self.preset)


def _read_config_file(path: Path) -> dict[str, Any]:
    """Return the mapping in path, or {} when the file is missing or empty."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")
    return data


def _env_values() -> dict[str, str]:
    """Collect non-empty MDLITE_<FIELD> variables for known Settings fields."""
    values = {name: os.getenv(f"{ENV_PREFIX}{name.upper()}") for name in Settings.model_fields}
    return {k: v for k, v in values.items() if v}


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDLITE_<FIELD> env vars, then non-None CLI overrides."""
    data = _read_config_file(Path(CONFIG_FILE))
    data.update(_env_values())
    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
