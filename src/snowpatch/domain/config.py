"""Domain models representing the snowpatch configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_PATCHWORK_PORT = 443


class ConfigError(Exception):
    """Raised when the configuration cannot be loaded or fails validation."""

    def __init__(self, message: str, *, path: Path | None = None, field: str | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.field = field


class SourceUnavailable(ConfigError):
    """Raised when the configuration source cannot be opened."""

    def __init__(self, message: str, *, identifier: str) -> None:
        super().__init__(message, path=Path(identifier), field="<file>")
        self.identifier = identifier


class MalformedConfig(ConfigError):
    """Raised when the document does not match the configuration schema."""

    def __init__(self, message: str, *, detail: str, path: Path | None = None, field: str | None = None) -> None:
        super().__init__(message, path=path, field=field)
        self.detail = detail


class InvalidConfig(ConfigError):
    """Raised when a parsed configuration fails a semantic check."""


class PublicKeyUnreadable(InvalidConfig):
    """The git public key file cannot be opened."""


class PrivateKeyUnreadable(InvalidConfig):
    """The git private key file cannot be opened."""


class MalformedUrl(InvalidConfig):
    """The Patchwork URL is not a well-formed absolute URL."""


@dataclass(frozen=True, kw_only=True)
class GitCfg:
    """SSH credentials used to push to git remotes."""

    user: str
    public_key: str
    private_key: str


@dataclass(frozen=True, kw_only=True)
class PatchworkCfg:
    """The Patchwork server to work with.

    Only API token authentication is supported. A missing token restricts
    callers to operations that do not need authentication.
    """

    url: str
    port: int = DEFAULT_PATCHWORK_PORT
    token: str | None = field(default=None, repr=False)

    @property
    def has_token(self) -> bool:
        return self.token is not None


@dataclass(frozen=True, kw_only=True)
class Config:
    path: Path = field(repr=False, compare=False)
    name: str
    git: GitCfg
    patchwork: PatchworkCfg


__all__ = [
    "DEFAULT_PATCHWORK_PORT",
    "ConfigError",
    "SourceUnavailable",
    "MalformedConfig",
    "InvalidConfig",
    "PublicKeyUnreadable",
    "PrivateKeyUnreadable",
    "MalformedUrl",
    "GitCfg",
    "PatchworkCfg",
    "Config",
]
