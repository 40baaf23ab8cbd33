"""Command line interface for snowpatch."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import typer
from rich.console import Console
from rich.table import Table

from snowpatch.config_loader import Config, ConfigError, load_config

app = typer.Typer(help="CLI for snowpatch configuration checks.")
console = Console()


def _config_option() -> Path:
    return typer.Option(
        Path("snowpatch.yaml"),
        "--config",
        "-c",
        envvar="SNOWPATCH_CONFIG",
        dir_okay=False,
        help="Path to the snowpatch configuration file.",
    )


def _handle_config_error(exc: ConfigError) -> None:
    console.print(str(exc))
    raise typer.Exit(code=1) from exc


def _load(config_path: Path) -> Config:
    try:
        return load_config(config_path, console=console)
    except ConfigError as exc:
        _handle_config_error(exc)
        raise  # pragma: no cover


@app.command()
def validate(config_path: Path = _config_option()) -> None:
    """Load and validate a configuration file."""

    _load(config_path)
    console.print("[green]Config OK[/green]")


@app.command()
def show(config_path: Path = _config_option()) -> None:
    """Display the validated configuration."""

    config = _load(config_path)
    _print_config_details(config)


def _print_config_details(config: Config) -> None:
    console.print(f"[bold]Instance:[/bold] {config.name}")
    console.print("")

    table = Table(title="Configuration Overview")
    table.add_column("Field", justify="left")
    table.add_column("Value", justify="left")
    table.add_row("Git User", config.git.user)
    table.add_row("Public Key", config.git.public_key)
    table.add_row("Private Key", config.git.private_key)
    table.add_row("Patchwork URL", config.patchwork.url)
    table.add_row("Patchwork Port", str(config.patchwork.port))
    table.add_row("API Token", "set" if config.patchwork.has_token else "not set")
    console.print(table)


def main(argv: Iterable[str] | None = None) -> None:
    """Invoke the Typer application."""
    app(args=list(argv) if argv is not None else None)


if __name__ == "__main__":
    main()
