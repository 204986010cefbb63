"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:     str = "txt2md"
    output_dir:   str = Field(default="converted", description="Directory for converted .md files and archives")
    archive_name: str = Field(default="converted-markdown-files.zip", pattern=r"^.+\.zip$", description="Batch archive filename")
    docx_mode:    str = Field(default="text", pattern="^(text|html)$", description="text: heuristic core; html: mammoth -> markdownify")
    encoding:     str = Field(default="utf-8", description="Encoding used to read plain-text sources")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then TXT2MD_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"TXT2MD_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
