"""Typed settings management for eventparse.

Parser knobs are wrapped in a Pydantic model so the CLI and library callers
can rely on validated values. Settings live in an optional JSON file and can
be overridden per field with ``EVENTPARSE_*`` environment variables.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError

from eventparse.errors import InvalidConfigError, MissingConfigError

logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = Path.home() / ".eventparse" / "config.json"


class ParserSettings(BaseModel):
    """Configuration for recognition, resolution and event composition."""

    default_duration_minutes: int = Field(
        60, ge=1, le=24 * 60, description="Event length when no end time is given"
    )
    two_digit_year_pivot: Optional[int] = Field(
        50,
        ge=0,
        le=99,
        description="Two-digit years below the pivot are 20xx, the rest 19xx; null keeps them literal",
    )
    default_summary: str = Field(
        "Untitled event", description="Label shown when nothing is left after stripping dates and times"
    )


def load_settings(path: Path = DEFAULT_CONFIG_PATH) -> ParserSettings:
    """Load settings from disk or raise if missing or invalid."""

    if not path.exists():
        raise MissingConfigError(f"Settings file not found at {path}", details={"path": str(path)})
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        return ParserSettings.model_validate(payload)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise InvalidConfigError(
            f"Invalid configuration: {exc}", details={"path": str(path)}
        ) from exc


def save_settings(settings: ParserSettings, path: Path = DEFAULT_CONFIG_PATH) -> None:
    """Persist settings to disk."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(settings.model_dump(mode="json"), indent=2), encoding="utf-8")


def bootstrap_settings(
    *,
    path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> ParserSettings:
    """Build effective settings: defaults, then file, then overrides, then env.

    Unlike ``load_settings`` a missing file is not an error here; the
    defaults are used instead.
    """

    overrides = overrides or {}

    if path is not None and path.exists():
        settings = load_settings(path)
    else:
        settings = ParserSettings()

    merged = settings.model_dump(mode="python")
    merged.update(overrides)
    merged = _apply_env_overrides(merged)

    try:
        return ParserSettings.model_validate(merged)
    except ValidationError as exc:
        raise InvalidConfigError(f"Invalid configuration: {exc}") from exc


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    _set_env_override(data, "default_duration_minutes", "EVENTPARSE_DEFAULT_DURATION_MINUTES", cast_int=True)
    _set_env_override(data, "two_digit_year_pivot", "EVENTPARSE_TWO_DIGIT_YEAR_PIVOT", cast_int=True)
    _set_env_override(data, "default_summary", "EVENTPARSE_DEFAULT_SUMMARY")
    return data


def _set_env_override(
    mapping: Dict[str, Any],
    key: str,
    env_name: str,
    *,
    cast_int: bool = False,
) -> None:
    raw = os.getenv(env_name)
    if raw is None:
        return
    if cast_int:
        if raw.strip().lower() in {"", "none", "null"}:
            mapping[key] = None
            return
        try:
            mapping[key] = int(raw)
        except ValueError as exc:
            raise InvalidConfigError(
                f"{env_name} must be an integer, got {raw!r}", details={"variable": env_name}
            ) from exc
    else:
        mapping[key] = raw
    logger.debug(f"Applied {env_name} override to {key}")
