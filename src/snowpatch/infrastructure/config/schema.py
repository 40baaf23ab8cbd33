"""Schema utilities for configuration validation."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Mapping

import yaml

SCHEMA_FILE = Path(__file__).resolve().parent / "schemas" / "config-schema.json"
CONFIG_REF = "#/$defs/config"


@lru_cache(maxsize=1)
def load_schema() -> Mapping[str, object]:
    """Return the configuration JSON Schema, parsed once per process."""

    return yaml.safe_load(SCHEMA_FILE.read_text(encoding="utf-8"))


def schema_for(ref: str) -> dict[str, object]:
    """Return a root schema that applies the definition at *ref*."""

    return {**load_schema(), "$ref": ref}


__all__ = ["CONFIG_REF", "SCHEMA_FILE", "load_schema", "schema_for"]
