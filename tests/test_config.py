from __future__ import annotations

import pytest

from edit_engine.config import DEFAULT_UNDO_LIMIT, EngineConfig
from edit_engine.runtime import telemetry


def test_defaults(clear_edit_engine_env: None) -> None:
    config = EngineConfig.from_env()

    assert config == EngineConfig()
    assert config.undo_limit == DEFAULT_UNDO_LIMIT
    assert config.lexicon == "rust"
    assert config.scan_on_edit is True


def test_environment_overrides(
    clear_edit_engine_env: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("EDIT_ENGINE_UNDO_LIMIT", "7")
    monkeypatch.setenv("EDIT_ENGINE_LEXICON", " Rust ")
    monkeypatch.setenv("EDIT_ENGINE_SCAN_ON_EDIT", "off")

    config = EngineConfig.from_env()

    assert config == EngineConfig(undo_limit=7, lexicon="rust", scan_on_edit=False)


def test_non_integer_undo_limit_is_rejected(
    clear_edit_engine_env: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("EDIT_ENGINE_UNDO_LIMIT", "lots")

    with pytest.raises(ValueError, match="EDIT_ENGINE_UNDO_LIMIT"):
        EngineConfig.from_env()


@pytest.mark.parametrize("kwargs", [{"undo_limit": 0}, {"lexicon": ""}])
def test_invalid_values_are_rejected(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        EngineConfig(**kwargs)


@pytest.mark.parametrize(
    "raw, expected", [("1", True), ("YES", True), ("0", False), ("nope", False)]
)
def test_env_flag_parsing(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
) -> None:
    monkeypatch.setenv("EDIT_ENGINE_SOME_FLAG", raw)

    assert telemetry.env_flag("SOME_FLAG", not expected) is expected


def test_env_flag_default_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EDIT_ENGINE_SOME_FLAG", raising=False)

    assert telemetry.env_flag("SOME_FLAG", True) is True


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown preset"):
        telemetry.configure(preset="verbose")


def test_log_profile_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LOG_FILE", "LOG_JSON", "NO_COLOR", "LOG_BUFFER_SIZE"):
        monkeypatch.delenv(f"EDIT_ENGINE_{name}", raising=False)
    monkeypatch.setenv("EDIT_ENGINE_LOG_LEVEL", "debug")
    monkeypatch.setenv("EDIT_ENGINE_DISABLE_CONSOLE", "1")
    monkeypatch.setenv("EDIT_ENGINE_LOG_BUFFERED", "yes")

    profile = telemetry.LogProfile.from_env()

    assert profile == telemetry.LogProfile(
        min_level="DEBUG", console=False, buffer_size=2048
    )


def test_built_in_profiles_keep_console_quiet_outside_development() -> None:
    assert telemetry.PRESETS == ("development", "production", "performance")
    assert telemetry.PROFILES["development"].console is True
    assert not telemetry.PROFILES["production"].console
    assert telemetry.PROFILES["performance"].json is True
