import pytest
from pydantic import ValidationError

from commandbus.core.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.DISPATCH_MAX_CONCURRENCY == 1
    assert settings.HANDLER_TIMEOUT_SECONDS is None
    assert settings.LOG_LEVEL == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("DISPATCH_MAX_CONCURRENCY", "8")
    monkeypatch.setenv("HANDLER_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "warning")
    settings = Settings(_env_file=None)
    assert settings.DISPATCH_MAX_CONCURRENCY == 8
    assert settings.HANDLER_TIMEOUT_SECONDS == 2.5
    assert settings.LOG_LEVEL == "WARNING"


def test_rejects_unknown_log_level():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, LOG_LEVEL="chatty")


@pytest.mark.parametrize("field, value", [("DISPATCH_MAX_CONCURRENCY", 0), ("HANDLER_TIMEOUT_SECONDS", -1.0)])
def test_rejects_out_of_range_values(field, value):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: value})


def test_exposes_only_dispatch_and_logging_fields():
    assert set(Settings.model_fields) == {
        "DISPATCH_MAX_CONCURRENCY",
        "HANDLER_TIMEOUT_SECONDS",
        "LOG_LEVEL",
        "LOG_JSON",
    }
