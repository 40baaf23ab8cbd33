"""Compatibility layer for configuration utilities."""

from __future__ import annotations

from snowpatch.domain.config import (
    DEFAULT_PATCHWORK_PORT,
    Config,
    ConfigError,
    GitCfg,
    InvalidConfig,
    MalformedConfig,
    MalformedUrl,
    PatchworkCfg,
    PrivateKeyUnreadable,
    PublicKeyUnreadable,
    SourceUnavailable,
)
from snowpatch.infrastructure.config.loader import load_config
from snowpatch.infrastructure.config.validators import validate_config

__all__ = [
    "DEFAULT_PATCHWORK_PORT",
    "Config",
    "ConfigError",
    "GitCfg",
    "InvalidConfig",
    "MalformedConfig",
    "MalformedUrl",
    "PatchworkCfg",
    "PrivateKeyUnreadable",
    "PublicKeyUnreadable",
    "SourceUnavailable",
    "load_config",
    "validate_config",
]
