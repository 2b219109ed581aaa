from __future__ import annotations

import pytest
from pydantic import ValidationError

from simulator.app import create_app
from simulator.core.config import Settings


def test_cors_origin_list_splits_and_strips():
    settings = Settings(cors_origins=" http://a.test , http://b.test,, ")

    assert settings.cors_origin_list == ["http://a.test", "http://b.test"]


def test_environment_overrides_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SIMULATOR_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("SIMULATOR_MAX_TOTAL_MONTHS", "240")

    settings = Settings()

    assert settings.log_level == "WARNING"
    assert settings.max_total_months == 240


def test_create_app_keeps_explicit_settings():
    settings = Settings(max_total_months=12)

    app = create_app(settings)

    assert app.config["SETTINGS"] is settings
    assert "api.compound_interest" in app.view_functions


def test_log_level_is_normalized_to_upper_case(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SIMULATOR_LOG_LEVEL", "debug")

    assert Settings().log_level == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SIMULATOR_LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        Settings()
