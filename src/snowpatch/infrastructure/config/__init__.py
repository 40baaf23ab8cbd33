"""Configuration loading and validation."""

from __future__ import annotations

from .loader import load_config
from .validators import validate_config

__all__ = ["load_config", "validate_config"]
