"""Configuration file loading for taskpick.

A single YAML file (taskpick_config.yaml) holds the scheduler limits and
the report layout. Every section is optional; missing sections fall back to
defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ParseError, ValidationError
from .scheduler import SchedulingConfig

CONFIG_FILENAME = "taskpick_config.yaml"


class DisplayConfig(BaseModel):
    """Configuration for text reports."""

    line_width: int = Field(default=50, ge=10)  # Width of ruled lines in reports
    show_unselected: bool = True  # List tasks left out of a selection


class AppConfig(BaseModel):
    """Complete configuration with all sections."""

    scheduler: SchedulingConfig = Field(default_factory=SchedulingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)


def load_config(config_path: Path | str) -> AppConfig:
    """Load a configuration file.

    Args:
        config_path: Path to the YAML config file

    Returns:
        AppConfig with every section populated

    Raises:
        ParseError: If the file is missing or is not a YAML mapping
        ValidationError: If a section has invalid values
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ParseError(f"Config file not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ParseError(f"Failed to parse config YAML: {e}") from e

    if data is None:
        return AppConfig()
    if not isinstance(data, dict):
        raise ParseError("Config must contain a dictionary at the root level")

    try:
        return AppConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid config in {config_path}: {e}") from e
