"""Command line entry points for eventparse."""

import logging
from pathlib import Path
from typing import Optional

import typer
from typer import Typer

from ..configuration.cli import config_app
from ..configuration.settings import DEFAULT_CONFIG_PATH, bootstrap_settings
from ..errors import EventParseError, MissingConfigError
from ..errors.user_messages import format_error_for_cli
from .parse import date_command, event_command, repl_command, time_command


cli = Typer(help="Turn informal English into dates, times and events")
cli.add_typer(config_app, name="config")
cli.command("event")(event_command)
cli.command("date")(date_command)
cli.command("time")(time_command)
cli.command("repl")(repl_command)


@cli.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(
        None, "--config", help=f"Settings file (default {DEFAULT_CONFIG_PATH} when present)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log recognizer decisions"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

    try:
        if config_path is not None and not config_path.exists():
            raise MissingConfigError(
                f"Settings file not found at {config_path}", details={"path": str(config_path)}
            )
        settings = bootstrap_settings(path=config_path or DEFAULT_CONFIG_PATH)
    except EventParseError as e:
        typer.echo(format_error_for_cli(e), err=True)
        raise typer.Exit(code=1)

    ctx.obj = {"settings": settings}


__all__ = ["cli", "config_app"]
