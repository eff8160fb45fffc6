"""Tests for environment based settings and logging setup."""

import logging

import pytest

from specimen_types import SColor, SDatetime
from specimen_types.config import app
from specimen_types.config.app import AppConfig, configure_logging, get_bool_env


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("true", True), (" Yes ", True), ("on", True), ("0", False), ("no", False)],
)
def test_get_bool_env(monkeypatch, raw, expected):
    monkeypatch.setenv("SPECIMEN_TEST_FLAG", raw)
    assert get_bool_env("SPECIMEN_TEST_FLAG", not expected) is expected


def test_get_bool_env_default(monkeypatch):
    monkeypatch.delenv("SPECIMEN_TEST_FLAG", raising=False)
    assert get_bool_env("SPECIMEN_TEST_FLAG", True) is True


def test_app_config_reads_environment(monkeypatch):
    monkeypatch.setenv("SPECIMEN_COLOR_FORMAT", "rgb")
    monkeypatch.setenv("SPECIMEN_DATETIME_FORMAT", "DD/MM/YYYY")
    monkeypatch.setenv("SPECIMEN_LOG_LEVEL", "debug")

    config = AppConfig()
    assert config.COLOR_FORMAT == "rgb"
    assert config.DATETIME_FORMAT == "DD/MM/YYYY"
    assert config.LOG_LEVEL == "DEBUG"


def test_app_config_defaults(monkeypatch):
    for name in ("SPECIMEN_COLOR_FORMAT", "SPECIMEN_DATETIME_FORMAT", "SPECIMEN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    config = AppConfig()
    assert config.COLOR_FORMAT == "hex"
    assert config.DATETIME_FORMAT == "YYYY-MM-DD"
    assert config.LOG_LEVEL == "WARNING"


def test_wrappers_fall_back_to_settings(monkeypatch):
    settings = AppConfig(COLOR_FORMAT="rgb", DATETIME_FORMAT="DD.MM.YYYY")
    monkeypatch.setattr("specimen_types.lib.scolor.settings", settings)
    monkeypatch.setattr("specimen_types.lib.sdatetime.settings", settings)

    color_data = {"value": "#ff0000"}
    SColor({}, color_data)
    assert color_data["format"] == "rgb"
    assert color_data["value"] == "#ff0000"

    date_data = {"iso": "2023-10-23T00:00:00.000Z"}
    SDatetime({}, date_data)
    assert date_data["value"] == "23.10.2023"


def test_configure_logging():
    logger = configure_logging("debug")
    try:
        assert logger.name == "specimen_types"
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
    finally:
        configure_logging()
    assert logger.level == logging.getLevelName(app.settings.LOG_LEVEL)
