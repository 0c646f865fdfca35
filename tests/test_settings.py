from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

import roundparse
from roundparse.settings import DEFAULTS, _normalise_number_settings, settings
from roundparse.util import resolve_config_dir, str_to_bool


def test_defaults_are_loaded() -> None:
    assert settings.get("LOG_LEVEL") == DEFAULTS["LOG_LEVEL"]
    assert settings.get("NUMBER.rounding") == "half_away_from_zero"
    assert settings.get("NUMBER.strip_whitespace") is True


def test_package_reexports_parsers() -> None:
    assert roundparse.parse_rounded("2.7") == 3
    assert roundparse.parse_rounded_signed("-2.7") == -3
    assert roundparse.settings is settings


def test_configure_logging_uses_setting(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, Any]] = []
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    roundparse.configure_logging()
    roundparse.configure_logging("debug")
    monkeypatch.setenv("LOG_LEVEL", "warning")
    roundparse.configure_logging()

    assert [call["level"] for call in calls] == ["INFO", "DEBUG", "WARNING"]
    assert calls[0]["format"] == roundparse.LOG_FORMAT


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("yes", True), (" Off ", False), (True, True), (0, False), ("1", True)],
)
def test_str_to_bool(raw: Any, expected: bool) -> None:
    assert str_to_bool(raw) is expected


def test_str_to_bool_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        str_to_bool("maybe")
    with pytest.raises(ValueError):
        str_to_bool(None)


def test_resolve_config_dir_prefers_env_override(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    override = tmp_path / "override"
    fallback = tmp_path / "fallback"
    override.mkdir()
    fallback.mkdir()
    monkeypatch.setenv("TEST_CONFIG_DIR", str(override))

    assert resolve_config_dir("TEST_CONFIG_DIR", [fallback]) == override.resolve()


def test_resolve_config_dir_falls_back_to_candidates(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("TEST_CONFIG_DIR", raising=False)
    present = tmp_path / "config"
    present.mkdir()

    assert resolve_config_dir("TEST_CONFIG_DIR", [tmp_path / "missing", present]) == present.resolve()
    assert resolve_config_dir("TEST_CONFIG_DIR", [tmp_path / "missing"]) is None


def test_resolve_config_dir_rejects_missing_override(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("TEST_CONFIG_DIR", str(tmp_path / "nowhere"))

    with pytest.raises(RuntimeError, match="TEST_CONFIG_DIR"):
        resolve_config_dir("TEST_CONFIG_DIR", [tmp_path])


@pytest.fixture
def saved_number_settings() -> Iterator[None]:
    original_rounding = settings.get("NUMBER.rounding")
    original_strip = settings.get("NUMBER.strip_whitespace")
    yield
    settings.set("NUMBER.rounding", original_rounding)
    settings.set("NUMBER.strip_whitespace", original_strip)


def test_rounding_setting_is_normalised(saved_number_settings: None) -> None:
    settings.set("NUMBER.rounding", " Half-Even ")
    settings.set("NUMBER.strip_whitespace", "off")
    _normalise_number_settings()

    assert settings.get("NUMBER.rounding") == "half_even"
    assert settings.get("NUMBER.strip_whitespace") is False


def test_unknown_rounding_setting_fails_at_load(saved_number_settings: None) -> None:
    settings.set("NUMBER.rounding", "bogus")

    with pytest.raises(RuntimeError, match="ROUNDPARSE_NUMBER__ROUNDING"):
        _normalise_number_settings()


def test_unreadable_strip_setting_fails_at_load(saved_number_settings: None) -> None:
    settings.set("NUMBER.strip_whitespace", "sometimes")

    with pytest.raises(RuntimeError, match="ROUNDPARSE_NUMBER__STRIP_WHITESPACE"):
        _normalise_number_settings()
