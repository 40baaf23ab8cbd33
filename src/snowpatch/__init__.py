"""snowpatch: continuous integration for patch-based workflows."""

from __future__ import annotations

from snowpatch.config_loader import Config, ConfigError, load_config

__version__ = "0.1.0"

__all__ = ["Config", "ConfigError", "load_config", "__version__"]
