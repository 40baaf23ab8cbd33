"""Tests for semantic validation of the snowpatch configuration."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
import yaml
from rich.console import Console

from snowpatch.config_loader import (
    Config,
    GitCfg,
    InvalidConfig,
    MalformedUrl,
    PatchworkCfg,
    PrivateKeyUnreadable,
    PublicKeyUnreadable,
    load_config,
    validate_config,
)
from snowpatch.infrastructure.config.schema import load_schema
from snowpatch.infrastructure.config.validators import build_validator, parse_absolute_url


def _make_config(tmp_path: Path, *, url: str = "https://patchwork.example.org", **git: str) -> Config:
    public_key = tmp_path / "id_ed25519.pub"
    private_key = tmp_path / "id_ed25519"
    public_key.write_text("ssh-ed25519 AAAA test@ci\n", encoding="utf-8")
    private_key.write_text("secret\n", encoding="utf-8")
    return Config(
        path=tmp_path / "snowpatch.yaml",
        name="ci1",
        git=GitCfg(
            user="git",
            public_key=git.get("public_key", str(public_key)),
            private_key=git.get("private_key", str(private_key)),
        ),
        patchwork=PatchworkCfg(url=url),
    )


def test_valid_config_passes(tmp_path: Path) -> None:
    validate_config(_make_config(tmp_path))


def test_missing_public_key(tmp_path: Path) -> None:
    config = _make_config(tmp_path, public_key=str(tmp_path / "ghost.pub"))
    with pytest.raises(PublicKeyUnreadable) as excinfo:
        validate_config(config)
    assert excinfo.value.field == "git.public_key"
    assert "ghost.pub" in str(excinfo.value)


def test_missing_private_key(tmp_path: Path) -> None:
    config = _make_config(tmp_path, private_key=str(tmp_path / "ghost"))
    with pytest.raises(PrivateKeyUnreadable) as excinfo:
        validate_config(config)
    assert excinfo.value.field == "git.private_key"


def test_directory_is_not_a_readable_key(tmp_path: Path) -> None:
    config = _make_config(tmp_path, private_key=str(tmp_path))
    with pytest.raises(PrivateKeyUnreadable):
        validate_config(config)


def test_first_failure_wins(tmp_path: Path) -> None:
    config = _make_config(
        tmp_path,
        url="not a url",
        public_key=str(tmp_path / "ghost.pub"),
        private_key=str(tmp_path / "ghost"),
    )
    with pytest.raises(PublicKeyUnreadable):
        validate_config(config)


@pytest.mark.parametrize(
    "url",
    [
        "not a url",
        "htp:/bad",
        "patchwork.example.org",
        "/api/1.2/",
        "",
        "https://",
        "https://patchwork.example.org:notaport",
        "https://patchwork.example.org:99999",
        "1https://patchwork.example.org",
    ],
)
def test_malformed_url(tmp_path: Path, url: str) -> None:
    with pytest.raises(MalformedUrl) as excinfo:
        validate_config(_make_config(tmp_path, url=url))
    assert isinstance(excinfo.value, InvalidConfig)
    assert excinfo.value.field == "patchwork.url"


@pytest.mark.parametrize(
    "url",
    [
        "https://patchwork.ozlabs.org",
        "http://localhost:8000/",
        "https://patchwork.example.org/project/linuxppc-dev/",
        "https://[::1]:8443",
    ],
)
def test_well_formed_url(url: str) -> None:
    parse_absolute_url(url)


def test_key_removed_after_first_validation(tmp_path: Path) -> None:
    config = _make_config(tmp_path)
    validate_config(config)
    Path(config.git.public_key).unlink()
    with pytest.raises(PublicKeyUnreadable):
        validate_config(config)


def test_load_reports_missing_key_from_document(tmp_path: Path) -> None:
    public_key = tmp_path / "id_rsa.pub"
    public_key.write_text("ssh-rsa AAAA\n", encoding="utf-8")
    path = tmp_path / "snowpatch.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "name": "ci1",
                "git": {
                    "user": "git",
                    "public_key": str(public_key),
                    "private_key": str(tmp_path / "missing"),
                },
                "patchwork": {"url": "https://patchwork.example.org"},
            }
        ),
        encoding="utf-8",
    )
    with pytest.raises(PrivateKeyUnreadable) as excinfo:
        load_config(path, console=Console(file=io.StringIO()))
    assert excinfo.value.path == path


def test_schema_defines_config() -> None:
    schema = load_schema()
    assert set(schema["$defs"]) >= {"config", "git", "patchwork"}
    errors = list(build_validator().iter_errors({"name": "ci1"}))
    assert errors


def test_load_reports_missing_public_key_from_document(tmp_path: Path) -> None:
    private_key = tmp_path / "id_rsa"
    private_key.write_text("private\n", encoding="utf-8")
    path = tmp_path / "snowpatch.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "name": "ci1",
                "git": {
                    "user": "git",
                    "public_key": str(tmp_path / "missing.pub"),
                    "private_key": str(private_key),
                },
                "patchwork": {"url": "https://patchwork.example.org"},
            }
        ),
        encoding="utf-8",
    )
    with pytest.raises(PublicKeyUnreadable) as excinfo:
        load_config(path, console=Console(file=io.StringIO()))
    assert excinfo.value.field == "git.public_key"
    assert "missing.pub" in str(excinfo.value)
