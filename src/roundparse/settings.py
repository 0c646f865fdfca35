from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from dynaconf import Dynaconf

from roundparse.rounding import RoundingMode
from roundparse.util import resolve_config_dir, str_to_bool

PACKAGE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = PACKAGE_DIR.parent

CONFIG_DIR = resolve_config_dir(
    "ROUNDPARSE_CONFIG_DIR",
    [PROJECT_ROOT / "config", PROJECT_ROOT.parent / "config"],
)

DEFAULTS: dict[str, Any] = {
    "LOG_LEVEL": "INFO",
    "NUMBER": {
        "rounding": "half_away_from_zero",
        "strip_whitespace": True,
    },
}

_settings_files: list[Path] = []
if CONFIG_DIR is not None:
    _settings_files = [
        CONFIG_DIR / "settings.toml",
        CONFIG_DIR / ".secrets.toml",
        CONFIG_DIR / "settings.local.toml",
    ]

settings = Dynaconf(
    envvar_prefix="ROUNDPARSE",
    settings_files=_settings_files,
    environments=True,
    env_switcher="ROUNDPARSE_ENV",
    load_dotenv=True,
    envvar_parse_values=True,
    merge_enabled=True,
)


_MISSING = object()


def _dotted_defaults(defaults: Mapping[str, Any], prefix: str = "") -> Iterator[tuple[str, Any]]:
    for key, value in defaults.items():
        dotted = f"{prefix}.{key}" if prefix else key
        if isinstance(value, Mapping):
            yield from _dotted_defaults(value, dotted)
        else:
            yield dotted, value


def _backfill_defaults() -> None:
    for dotted, value in _dotted_defaults(DEFAULTS):
        if settings.get(dotted, _MISSING) is _MISSING:
            settings.set(dotted, value)


_backfill_defaults()


def _normalise_number_settings() -> None:
    raw_rounding = settings.get("NUMBER.rounding") or DEFAULTS["NUMBER"]["rounding"]
    try:
        rounding = RoundingMode.coerce(raw_rounding)
    except ValueError as exc:
        raise RuntimeError(
            "Set ROUNDPARSE_NUMBER__ROUNDING to one of: "
            + ", ".join(mode.value for mode in RoundingMode)
        ) from exc
    settings.set("NUMBER.rounding", rounding.value)

    raw_strip = settings.get("NUMBER.strip_whitespace", True)
    try:
        strip = str_to_bool(raw_strip)
    except ValueError as exc:
        raise RuntimeError(
            "Set ROUNDPARSE_NUMBER__STRIP_WHITESPACE to true or false"
        ) from exc
    settings.set("NUMBER.strip_whitespace", strip)


_normalise_number_settings()

__all__ = ["settings"]
