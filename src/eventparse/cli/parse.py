"""CLI commands that parse text into dates, times and events."""

from __future__ import annotations

import json
import logging
import sys
from datetime import date, datetime, time
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from eventparse.configuration.settings import ParserSettings
from eventparse.temporal.dates import parse_date
from eventparse.temporal.events import EventSpanBuilder
from eventparse.temporal.models import EventSpan
from eventparse.temporal.times import parse_time

logger = logging.getLogger(__name__)

console = Console(highlight=False)

PROMPT_EXAMPLE = "e.g. Lunch at 12pm"


def _settings(ctx: typer.Context) -> ParserSettings:
    if ctx.obj and "settings" in ctx.obj:
        return ctx.obj["settings"]
    return ParserSettings()


def _parse_reference(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(f"Expected an ISO date or datetime, got {value!r}") from exc


def _parse_reference_time(value: Optional[str]) -> Optional[time]:
    if value is None:
        return None
    try:
        return time.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(f"Expected a time such as 13:30, got {value!r}") from exc


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_clock(instant: datetime) -> str:
    """12:00pm"""
    return instant.strftime("%I:%M") + instant.strftime("%p").lower()


def format_day(day: date) -> str:
    """April 25 2020"""
    return day.strftime("%B %d %Y")


def format_span(span: EventSpan) -> str:
    """One-line rendering of the span's start and end."""
    if span.start is not None and span.end is not None:
        return (
            f"{format_clock(span.start)} {format_day(span.start.date())} - "
            f"{format_clock(span.end)} {format_day(span.end.date())}"
        )
    if span.start_date == span.end_date:
        return format_day(span.start_date)
    return f"{format_day(span.start_date)} - {format_day(span.end_date)}"


def print_event(span: EventSpan, settings: ParserSettings, json_output: bool = False) -> None:
    summary = span.summary or settings.default_summary

    if json_output:
        payload = span.to_dict()
        payload["summary"] = summary
        typer.echo(json.dumps(payload))
        return

    console.print(f'Event: "{escape(summary)}"')
    console.print(format_span(span))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def event_command(
    ctx: typer.Context,
    text: str = typer.Argument(..., help='Event text, e.g. "Lunch at 1pm tomorrow"'),
    reference: Optional[str] = typer.Option(
        None, "--reference", "-r", help="Reference instant (ISO format), defaults to now"
    ),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON output"),
) -> None:
    """Parse TEXT into an event and print it.

    Examples:
        eventparse event "Dinner at 7"
        eventparse event "Welcome Week 9/1-9/8" --json
    """
    settings = _settings(ctx)
    span = EventSpanBuilder(settings).build(text, _parse_reference(reference))
    print_event(span, settings, json_output)


def date_command(
    ctx: typer.Context,
    text: str = typer.Argument(..., help='Text holding a date, e.g. "next friday"'),
    reference: Optional[str] = typer.Option(
        None, "--reference", "-r", help="Reference date (ISO format), defaults to today"
    ),
) -> None:
    """Print the date found in TEXT."""
    instant = _parse_reference(reference)
    found = parse_date(text, instant.date() if instant else None, _settings(ctx))
    if found is None:
        console.print(f"[yellow]No date found in {escape(repr(text))}[/yellow]")
        raise typer.Exit(code=1)
    typer.echo(found.isoformat())


def time_command(
    text: str = typer.Argument(..., help='Text holding a time, e.g. "at 7pm"'),
    reference: Optional[str] = typer.Option(
        None, "--reference", "-r", help="Reference time (HH:MM), defaults to now"
    ),
) -> None:
    """Print the time of day found in TEXT."""
    found = parse_time(text, _parse_reference_time(reference))
    if found is None:
        console.print(f"[yellow]No time found in {escape(repr(text))}[/yellow]")
        raise typer.Exit(code=1)
    typer.echo(found.strftime("%H:%M"))


def repl_command(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Emit one JSON object per line"),
) -> None:
    """Read event descriptions from stdin, one per line, until EOF."""
    settings = _settings(ctx)
    builder = EventSpanBuilder(settings)

    if not json_output:
        console.print(PROMPT_EXAMPLE)

    for line in sys.stdin:
        line = line.strip()
        if not line:
            continue
        logger.debug(f"Parsing line {line!r}")
        print_event(builder.build(line), settings, json_output)
