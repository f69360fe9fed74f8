"""
Configuration for stamped-geometry.

Loads configuration from a YAML file with Pydantic validation.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel


class TransformConfig(BaseModel):
    # Log a warning when a transform's quaternion is not unit length.
    # The transform is applied unchanged either way.
    check_rotation_norm: bool = False
    rotation_norm_tolerance: float = 1e-6

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> "TransformConfig":
        """Load configuration from a YAML file."""
        if path is None:
            return cls()

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, encoding="utf-8") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}

        return cls(**data)
