"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from hdiff.core.errors import DuplicateHighlightColors
from hdiff.core.models import Numbering, OpKind


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "HDIFF_"


class Settings(BaseModel):
    app_name:      str = "hdiff"
    numbering:     Numbering = Field(default=Numbering.off, description="off, absolute or bracketed line numbers")
    updates_only:  bool = Field(default=False, description="Only show the changed regions")
    truncate:      Optional[int] = Field(default=None, ge=1, description="Truncate displayed lines to this many characters")
    escape_html:   bool = Field(default=False, description="Escape '<' in displayed lines")
    add_color:     str = Field(default="#FF8C00", description="Highlight colour for added lines (orange)")
    change_color:  str = Field(default="#FFFF00", description="Highlight colour for changed lines (yellow)")
    delete_color:  str = Field(default="#C0C0C0", description="Highlight colour for deleted lines (grey)")
    tab_width:     int = Field(default=8,   ge=1, description="Tab stop width used when reading files")
    show_script:   bool = Field(default=False, description="Include the raw diff output in the report")
    script_width:  int = Field(default=100, ge=1, description="Columns of the raw diff output window")
    script_height: int = Field(default=10,  ge=1, description="Rows of the raw diff output window")
    font_size:     str = Field(default="14px", description="CSS font size of the report")
    font_family:   str = Field(default="Courier New, Courier, Arial", description="CSS font family of the report")
    output:        str = Field(default="diff-report.htm", description="Path of the generated HTML report")
    diff_command:  str = Field(default="diff", description="Line-diff program producing ed-style output")

    @field_validator("add_color", "change_color", "delete_color")
    @classmethod
    def _normalize_color(cls, value: str) -> str:
        """Accept 'RRGGBB' or '#RRGGBB' hex digits; store as upper-case '#RRGGBB'."""
        digits = value[1:] if value.startswith("#") else value
        if len(digits) != 6 or any(c not in "0123456789abcdefABCDEF" for c in digits):
            raise ValueError(f"Invalid color code '{value}': expected 6 hex digits")
        return "#" + digits.upper()


def highlight_colors(settings: Settings) -> dict[OpKind, str]:
    """Map each operation kind to its colour; the three colours must be distinct."""
    colors = {
        OpKind.add:    settings.add_color,
        OpKind.change: settings.change_color,
        OpKind.delete: settings.delete_color,
    }
    if len(set(colors.values())) < len(colors):
        listing = ", ".join(f"{kind.label} => {color}" for kind, color in colors.items())
        raise DuplicateHighlightColors(f"You have requested duplicate color code values ({listing})")
    return colors


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then HDIFF_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    settings = Settings(**data)
    highlight_colors(settings)
    return settings
