"""Driver configuration with YAML support."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field

from secure_core.schemas import BaseSchema, SecurityConfig


class DriverConfig(BaseSchema):
    """Limits plus the sample fixtures the demo runs with."""

    security: SecurityConfig = Field(default_factory=SecurityConfig)

    sample_input: str = "Hello World"
    sample_expression: str = "2 + 3 * 4"
    # Untyped on purpose: a bad element is reported by the transform, not the loader.
    sample_data: list[Any] = Field(default_factory=lambda: [1, 2, 3, 4, 5])


def load_config(yaml_path: str | Path) -> DriverConfig:
    """Load driver configuration from a YAML file.

    Args:
        yaml_path: Path to YAML configuration file

    Returns:
        DriverConfig instance

    Raises:
        FileNotFoundError: If YAML file doesn't exist
        ValueError: If YAML is empty or does not match the schema
    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data:
        raise ValueError(f"Empty or invalid YAML file: {yaml_path}")
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {yaml_path}")

    try:
        return DriverConfig.from_dict(data)
    except Exception as e:
        raise ValueError(f"Invalid configuration in {yaml_path}: {e}") from e


def save_config(config: DriverConfig, yaml_path: str | Path) -> None:
    """Save driver configuration to a YAML file."""
    yaml_path = Path(yaml_path)
    yaml_path.parent.mkdir(parents=True, exist_ok=True)

    data = config.to_dict()

    with open(yaml_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False, indent=2)
