"""
Registry configuration.

Loaded from YAML, for example::

    max_default_duration: 86400      # seconds, or ISO-8601 such as "P1D"
    max_default_grace_period: 3600
    allow_replace: false
"""

from datetime import timedelta
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from secretlease.exceptions import ConfigError


class LeaseConfig(BaseModel):
    """Limits the registry enforces on secret descriptors."""

    max_default_duration: Optional[timedelta] = Field(
        default=None, description="Upper bound for a descriptor's default duration"
    )
    max_default_grace_period: Optional[timedelta] = Field(
        default=None, description="Upper bound for a descriptor's default grace period"
    )
    allow_replace: bool = Field(
        default=False, description="Let a new descriptor replace a registered type"
    )


def load_config(path: Union[str, Path]) -> LeaseConfig:
    """Load a LeaseConfig from a YAML file.

    An empty file yields the defaults.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config not found: {path}")
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping")
    try:
        return LeaseConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {path}: {exc}") from exc
