"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from artpub.core.parse import DEFAULT_UNSAFE_TAGS


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    parser:        str = Field(default="html.parser", pattern="^(html\\.parser|lxml|html5lib)$",
                               description="BeautifulSoup parser backend")
    unsafe_tags:   list[str] = Field(default=list(DEFAULT_UNSAFE_TAGS),
                                     description="Elements removed with their content before serialization")
    content_field: str = Field(default="content", description="Markup field of article JSON payloads")
    output_dir:    str = Field(default="dist", description="Directory for transformed HTML + JSON files")
    json_indent:   int = Field(default=2, ge=0, description="Sidecar JSON indent; 0 = compact")

    @field_validator("unsafe_tags", mode="before")
    @classmethod
    def _split_tags(cls, v):
        """Accept a comma-separated string (env var form) as well as a list."""
        if isinstance(v, str):
            return [t.strip().lower() for t in v.split(",") if t.strip()]
        return v


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then ARTPUB_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"ARTPUB_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
