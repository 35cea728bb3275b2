"""Configuration and constants for bright region grouping."""

import json
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from errors import SettingsError
from models import UNDERFLOW_SATURATE

DEFAULT_THRESHOLD = 40
DEFAULT_REGION_SIZE = 5
# Above this many bright pixels a run needs --forced.
MAX_CANDIDATES = 1000


class Settings(BaseModel):
    """Validated parameters of one run."""
    threshold: int = Field(DEFAULT_THRESHOLD, ge=0, le=255)
    region_size: int = Field(DEFAULT_REGION_SIZE, ge=1)
    border: int = Field(0, ge=0)
    max_candidates: int = Field(MAX_CANDIDATES, ge=0)
    forced: bool = False
    seed_order: Literal["last", "first"] = "last"
    underflow: Literal["saturate", "raise"] = UNDERFLOW_SATURATE


def load_settings(settings_file: Optional[Path] = None, **overrides) -> Settings:
    """Load settings from JSON, apply overrides and validate.

    Args:
        settings_file: Optional path to a JSON object with any ``Settings`` keys
        **overrides: Values that win over the file; ``None`` values are ignored

    Returns:
        Validated ``Settings``
    """
    data = {}
    if settings_file is not None:
        if not settings_file.exists():
            raise SettingsError(f"Settings file not found: {settings_file}")
        try:
            with settings_file.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise SettingsError(f"Failed to read settings from {settings_file}: {e}") from e
        if not isinstance(data, dict):
            raise SettingsError("Invalid settings file; expected a JSON object.")

    data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings: {e}") from e
