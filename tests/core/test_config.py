"""Unit tests for src/core/config.py"""

import logging

import pytest

from src.core.config import Settings
from src.core.exceptions import InvalidRequestError


def test_defaults() -> None:
    settings = Settings()
    assert settings.log_level == "WARNING"
    assert settings.log_file is None
    assert settings.confirm_exit is True
    assert settings.numeric_log_level == logging.WARNING


@pytest.mark.parametrize("level", ["debug", " Info ", "ERROR"])
def test_log_level_is_normalised(level: str) -> None:
    settings = Settings(log_level=level)
    assert settings.log_level == level.strip().upper()
    assert settings.numeric_log_level == getattr(logging, settings.log_level)


@pytest.mark.parametrize("level", ["", "verbose", "10"])
def test_unknown_log_level(level: str) -> None:
    """The custom exception is not wrapped into a pydantic ValidationError."""
    with pytest.raises(InvalidRequestError):
        _ = Settings(log_level=level)


def test_from_env() -> None:
    settings = Settings.from_env(
        {"ATAXX_LOG_LEVEL": "debug", "ATAXX_LOG_FILE": "ataxx.log", "UNRELATED": "x"}
    )
    assert settings.log_level == "DEBUG"
    assert settings.log_file == "ataxx.log"


def test_from_env_ignores_empty_values() -> None:
    settings = Settings.from_env({"ATAXX_LOG_LEVEL": "", "ATAXX_LOG_FILE": ""})
    assert settings == Settings()


def test_from_real_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ATAXX_LOG_LEVEL", "error")
    monkeypatch.delenv("ATAXX_LOG_FILE", raising=False)
    assert Settings.from_env().log_level == "ERROR"


def test_flags_override_environment() -> None:
    """Flags that were not given (None) leave the environment values in place."""
    settings = Settings.from_env({"ATAXX_LOG_LEVEL": "debug", "ATAXX_LOG_FILE": "a.log"})

    overridden = settings.with_overrides(log_level="info", log_file=None, confirm_exit=False)
    assert overridden.log_level == "INFO"
    assert overridden.log_file == "a.log"
    assert overridden.confirm_exit is False

    # the original is left alone
    assert settings.log_level == "DEBUG"


def test_invalid_override() -> None:
    with pytest.raises(InvalidRequestError):
        _ = Settings().with_overrides(log_level="loud")
