"""CLI commands for managing eventparse settings."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from eventparse.configuration.settings import (
    DEFAULT_CONFIG_PATH,
    ParserSettings,
    bootstrap_settings,
    load_settings,
    save_settings,
)
from eventparse.errors import ConfigurationError
from eventparse.errors.user_messages import format_error_for_cli


config_app = typer.Typer(help="Manage eventparse configuration")


@config_app.command("init")
def init_config(
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, help="Path to config file"),
    default_duration: Optional[int] = typer.Option(
        None, help="Override default event length in minutes"
    ),
    year_pivot: Optional[int] = typer.Option(None, help="Override two-digit year pivot"),
) -> None:
    """Initialize the eventparse settings file."""

    overrides = {}
    if default_duration is not None:
        overrides["default_duration_minutes"] = default_duration
    if year_pivot is not None:
        overrides["two_digit_year_pivot"] = year_pivot

    try:
        settings = bootstrap_settings(path=config_path, overrides=overrides)
    except ConfigurationError as e:
        typer.echo(format_error_for_cli(e), err=True)
        raise typer.Exit(code=1)
    save_settings(settings, config_path)
    typer.echo(f"Configuration initialized at {config_path}")
    typer.echo(_summarize_settings(settings))


@config_app.command("show")
def show_config(config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, help="Path to config")) -> None:
    """Display the stored configuration."""

    try:
        settings = load_settings(config_path)
    except ConfigurationError as e:
        typer.echo(format_error_for_cli(e), err=True)
        raise typer.Exit(code=1)
    typer.echo(_summarize_settings(settings))


def _summarize_settings(settings: ParserSettings) -> str:
    lines = [
        f"Default duration: {settings.default_duration_minutes} minutes",
        f"Two-digit year pivot: {settings.two_digit_year_pivot}",
        f"Default summary: {settings.default_summary}",
    ]
    return "\n".join(lines)
