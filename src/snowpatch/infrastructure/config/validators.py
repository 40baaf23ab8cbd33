"""Validation helpers for the snowpatch configuration."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Mapping
from urllib.parse import urlsplit

from jsonschema import Draft202012Validator, ValidationError
from rich.markup import escape

from snowpatch.domain.config import (
    Config,
    InvalidConfig,
    MalformedConfig,
    MalformedUrl,
    PrivateKeyUnreadable,
    PublicKeyUnreadable,
)
from snowpatch.utils import redact_possible_secrets

from .schema import CONFIG_REF, schema_for

_URL_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*$")


def build_validator(ref: str = CONFIG_REF) -> Draft202012Validator:
    return Draft202012Validator(schema_for(ref))


def format_error(path: Path, field: str, message: str) -> str:
    location = f"[cyan]{escape(str(path))}[/cyan]"
    target = f" → [magenta]{field}[/magenta]" if field else ""
    return f"[bold red]Config error[/bold red]: {location}{target} {escape(message)}"


def validate_with_schema(
    validator: Draft202012Validator,
    instance: Mapping[str, object],
    path: Path,
) -> None:
    """Check the structure of a parsed document, raising MalformedConfig."""

    try:
        validator.validate(instance)
    except ValidationError as exc:
        field = ".".join(str(part) for part in exc.absolute_path) or "<root>"
        if "token" in exc.absolute_path:
            # never echo the offending token value
            message = f"Invalid value for '{field}' ({exc.validator} check failed); expected a string or null."
        else:
            message = redact_possible_secrets(exc.message)
        raise MalformedConfig(
            format_error(path, field, message),
            detail=f"{field}: {message}",
            path=path,
            field=field,
        ) from exc


def _check_readable(
    path: Path,
    field: str,
    key_path: str,
    error_cls: type[InvalidConfig],
    label: str,
) -> None:
    try:
        with open(key_path, "rb"):
            pass
    except OSError as exc:
        raise error_cls(
            format_error(path, field, f"Couldn't open {label} file '{key_path}': {exc.strerror or exc}"),
            path=path,
            field=field,
        ) from exc


def parse_absolute_url(url: str) -> None:
    """Raise ValueError unless *url* is a well-formed absolute URL."""

    if not url or url != url.strip() or any(ch.isspace() for ch in url):
        raise ValueError("URL must not be empty or contain whitespace")
    parts = urlsplit(url)
    if not parts.scheme or not _URL_SCHEME.match(parts.scheme):
        raise ValueError("URL must start with a scheme such as 'https://'")
    if not parts.netloc or not parts.hostname:
        raise ValueError("URL must include a host")
    # raises ValueError for a non-numeric or out of range port
    parts.port


def validate_config(config: Config) -> None:
    """Check the semantic preconditions of *config*, stopping at the first failure."""

    _check_readable(config.path, "git.public_key", config.git.public_key, PublicKeyUnreadable, "public key")
    _check_readable(config.path, "git.private_key", config.git.private_key, PrivateKeyUnreadable, "private key")

    try:
        parse_absolute_url(config.patchwork.url)
    except ValueError as exc:
        raise MalformedUrl(
            format_error(
                config.path,
                "patchwork.url",
                f"Couldn't parse Patchwork URL '{config.patchwork.url}': {exc}",
            ),
            path=config.path,
            field="patchwork.url",
        ) from exc


__all__ = [
    "build_validator",
    "format_error",
    "validate_with_schema",
    "parse_absolute_url",
    "validate_config",
]
