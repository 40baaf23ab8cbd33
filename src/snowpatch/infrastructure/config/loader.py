"""Config loading utilities coordinating schema validation and parsing."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml
from rich.console import Console

from snowpatch.domain.config import (
    DEFAULT_PATCHWORK_PORT,
    Config,
    GitCfg,
    MalformedConfig,
    PatchworkCfg,
    SourceUnavailable,
)
from snowpatch.utils import describe_config, redact_possible_secrets

from .validators import build_validator, format_error, validate_config, validate_with_schema

__all__ = ["load_config", "validate_config"]


def _read_source(source: str | Path) -> tuple[Path, str]:
    path = Path(source)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise SourceUnavailable(
            format_error(path, "<file>", f"Failed to open config file: {exc.strerror or exc}"),
            identifier=str(source),
        ) from exc
    try:
        return path, raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        detail = f"Config file is not valid UTF-8: {exc.reason} at byte {exc.start}"
        raise MalformedConfig(
            format_error(path, "<root>", detail), detail=detail, path=path, field="<root>"
        ) from exc


def _parse_yaml(path: Path, text: str) -> Mapping[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        detail = redact_possible_secrets(f"Invalid YAML: {exc}")
        raise MalformedConfig(
            format_error(path, "<root>", detail), detail=detail, path=path, field="<root>"
        ) from exc
    if not isinstance(data, Mapping):
        detail = "Top-level document must be a mapping."
        raise MalformedConfig(format_error(path, "<root>", detail), detail=detail, path=path, field="<root>")
    return data


def _build_git(data: Mapping[str, Any]) -> GitCfg:
    return GitCfg(
        user=str(data["user"]),
        public_key=str(data["public_key"]),
        private_key=str(data["private_key"]),
    )


def _build_patchwork(data: Mapping[str, Any]) -> PatchworkCfg:
    port = data.get("port")
    token = data.get("token")
    return PatchworkCfg(
        url=str(data["url"]),
        port=DEFAULT_PATCHWORK_PORT if port is None else int(port),
        token=None if token is None else str(token),
    )


def _build_config(data: Mapping[str, Any], path: Path) -> Config:
    return Config(
        path=path,
        name=str(data["name"]),
        git=_build_git(data["git"]),
        patchwork=_build_patchwork(data["patchwork"]),
    )


def load_config(source: str | Path, *, console: Console | None = None) -> Config:
    """Load, print and validate the snowpatch configuration stored at *source*.

    Raises a ``ConfigError`` subclass describing the first problem found:
    ``SourceUnavailable`` when the file cannot be read, ``MalformedConfig``
    when it does not match the schema and ``InvalidConfig`` when a key file
    or the Patchwork URL fails its check.
    """

    console = console or Console()
    path, text = _read_source(source)
    data = _parse_yaml(path, text)
    validate_with_schema(build_validator(), data, path)
    config = _build_config(data, path)

    console.print("Config:", describe_config(config))

    validate_config(config)
    return config
