"""General utility helpers for snowpatch."""

from __future__ import annotations

import re
from dataclasses import asdict
from typing import Any

from snowpatch.domain.config import Config

REDACTED = "***REDACTED***"

_SECRET_TOKEN = re.compile(r"\b[A-Fa-f0-9]{32,}\b")
_TOKEN_ASSIGNMENT = re.compile(r"(\btoken\b\s*[:=]\s*['\"]?)[^\s'\",}]+", re.IGNORECASE)


def redact_possible_secrets(text: str) -> str:
    """Redact likely API tokens from *text*, such as parser diagnostics quoting the document."""

    if not text:
        return text

    redacted = _TOKEN_ASSIGNMENT.sub(rf"\g<1>{REDACTED}", text)
    return _SECRET_TOKEN.sub(REDACTED, redacted)


def describe_config(config: Config) -> dict[str, Any]:
    """Return a plain mapping of *config* safe to print, with the token masked."""

    data = asdict(config)
    data.pop("path", None)
    if data["patchwork"].get("token") is not None:
        data["patchwork"]["token"] = REDACTED
    return data


__all__ = ["REDACTED", "describe_config", "redact_possible_secrets"]
