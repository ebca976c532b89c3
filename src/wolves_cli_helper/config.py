"""Presentation settings for styled terminal output."""

from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from .errors import ConfigError


@dataclass(frozen=True)
class DisplayConfig:
    """Colours and separators used by the verbose helpers."""
    lead_style: str = "color(208)"
    value_style: str = "green"
    rule_style: str = "blue"
    rule_width: int = 65
    separator: str = " :: "


def load_display_config(path: Path) -> DisplayConfig:
    """
    Load display settings from a YAML mapping.

    Keys not present in the file keep their defaults.

    Raises:
        ConfigError: if the file is missing, is not valid YAML, or holds
            unknown keys
    """
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
    except (FileNotFoundError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not load display config from {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Display config in {path} must be a mapping")

    known = {f.name for f in fields(DisplayConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown display config keys in {path}: {', '.join(unknown)}")

    return DisplayConfig(**data)
