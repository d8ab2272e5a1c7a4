"""Unit tests for configuration management."""

from pathlib import Path

import pydantic
import pytest

from travel_plan.config import AppConfig, get_config, reset_config


def test_defaults():
    config = get_config()

    assert config.data_file == Path("travel_plan.json")
    assert config.strict_load is False
    assert config.currency_symbol == "¥"
    assert config.log_level == "WARNING"
    assert config.log_file is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TRAVEL_PLAN_DATA_FILE", "plans/trips.json")
    monkeypatch.setenv("TRAVEL_PLAN_STRICT_LOAD", "true")
    monkeypatch.setenv("TRAVEL_PLAN_LOG_LEVEL", "debug")

    config = get_config()

    assert config.data_file == Path("plans/trips.json")
    assert config.strict_load is True
    assert config.log_level == "DEBUG"


def test_dotenv_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("TRAVEL_PLAN_CURRENCY_SYMBOL=$\n", encoding="utf-8")

    assert AppConfig().currency_symbol == "$"


def test_invalid_log_level_rejected(monkeypatch):
    monkeypatch.setenv("TRAVEL_PLAN_LOG_LEVEL", "chatty")

    with pytest.raises(pydantic.ValidationError):
        get_config()


def test_get_config_is_cached_until_reset(monkeypatch):
    first = get_config()
    assert get_config() is first

    monkeypatch.setenv("TRAVEL_PLAN_CURRENCY_SYMBOL", "€")
    assert get_config().currency_symbol == "¥"

    reset_config()
    assert get_config().currency_symbol == "€"


def test_validate_config_warns_about_missing_directory(tmp_path):
    is_valid, warnings = AppConfig(data_file=tmp_path / "missing" / "trips.json").validate_config()

    assert not is_valid
    assert any("does not exist yet" in warning for warning in warnings)


def test_validate_config_default_is_clean():
    assert AppConfig().validate_config() == (True, [])
