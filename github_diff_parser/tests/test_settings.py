import logging

import pytest
from pydantic import ValidationError

from github_diff_parser.settings import Settings, load_settings, trace_enabled


def test_defaults(monkeypatch):
    monkeypatch.delenv("GITHUB_DIFF_PARSER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("GITHUB_DIFF_PARSER_TRACE", raising=False)
    settings = load_settings()
    assert settings.log_level == logging.WARNING
    assert settings.trace is False


@pytest.mark.parametrize(
    "value, expected",
    [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("10", 10),
        ("nonsense", logging.WARNING),
        ("", logging.WARNING),
    ],
)
def test_log_level_from_environment(monkeypatch, value, expected):
    monkeypatch.setenv("GITHUB_DIFF_PARSER_LOG_LEVEL", value)
    assert load_settings().log_level == expected


@pytest.mark.parametrize(
    "value, expected",
    [("1", True), ("true", True), ("YES", True), ("on", True), ("0", False), ("", False)],
)
def test_trace_flag(monkeypatch, value, expected):
    monkeypatch.setenv("GITHUB_DIFF_PARSER_TRACE", value)
    assert trace_enabled() is expected
    assert load_settings().trace is expected


def test_settings_are_frozen():
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.trace = True
