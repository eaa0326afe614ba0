"""Tests for settings, exceptions and logging helpers."""

import io
import logging

import pytest

from read_quran import _logging, cli
from read_quran.config import ReadQuranSettings, configure, get_settings, reset_settings
from read_quran.exceptions import ConfigurationError, NetworkError, ReadQuranError


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


def test_defaults():
    settings = ReadQuranSettings()

    assert settings.api_base_url == "https://api.alquran.cloud/v1"
    assert settings.chapters_url == "https://api.alquran.cloud/v1/surah"
    assert settings.chapter_url(36) == "https://api.alquran.cloud/v1/surah/36"
    assert settings.audio_edition == "ar.alafasy"
    assert settings.audio_bitrate == 128


def test_environment_prefix(monkeypatch):
    monkeypatch.setenv("READ_QURAN_AUDIO_EDITION", "ar.husary")
    monkeypatch.setenv("READ_QURAN_INITIAL_CHAPTER", "36")

    settings = get_settings()

    assert settings.audio_edition == "ar.husary"
    assert settings.initial_chapter == 36


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_configure_replaces_settings():
    settings = configure(api_base_url="https://mirror.test/v1/")

    assert get_settings() is settings
    assert settings.chapters_url == "https://mirror.test/v1/surah"


@pytest.mark.parametrize(
    "overrides, setting_name",
    [
        ({"initial_chapter": 115}, "initial_chapter"),
        ({"log_level": "verbose"}, "log_level"),
    ],
)
def test_invalid_setting_raises_configuration_error(overrides, setting_name):
    with pytest.raises(ConfigurationError) as exc_info:
        configure(**overrides)

    assert exc_info.value.setting_name == setting_name


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("READ_QURAN_LOG_LEVEL", "info")

    assert get_settings().log_level == "INFO"


def test_cli_reports_bad_log_level(monkeypatch, capsys):
    monkeypatch.setenv("READ_QURAN_LOG_LEVEL", "verbose")

    assert cli.main(["chapters"]) == 1
    assert "log_level" in capsys.readouterr().err


def test_error_context_in_message():
    error = NetworkError("HTTP 503", url="https://api.test/v1/surah", status_code=503)

    assert isinstance(error, ReadQuranError)
    assert str(error) == "HTTP 503 (url=https://api.test/v1/surah, status_code=503)"
    assert ReadQuranError("plain").context == {}


def test_configure_logging_writes_to_stream():
    stream = io.StringIO()
    logger = _logging.configure_logging(level="DEBUG", stream=stream, format_string="%(levelname)s %(message)s")

    _logging.log_warning("Ignoring chapter selection", chapter_number=0)

    assert logger.level == logging.DEBUG
    assert "WARNING Ignoring chapter selection (chapter_number=0)" in stream.getvalue()

    _logging.disable_logging()
