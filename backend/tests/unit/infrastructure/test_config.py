import pytest
from pydantic import ValidationError

from casebook.core.config import Settings


def test_defaults():
    config = Settings(_env_file=None)
    assert config.STORE_BACKEND == "memory"
    assert config.REQUEST_TIMEOUT_SECONDS is None


def test_store_backend_is_normalised():
    assert Settings(_env_file=None, STORE_BACKEND=" Memory ").STORE_BACKEND == "memory"


def test_unknown_store_backend_is_rejected():
    with pytest.raises(ValidationError, match="Unsupported STORE_BACKEND"):
        Settings(_env_file=None, STORE_BACKEND="mongo")


def test_log_level_is_validated():
    assert Settings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"
    with pytest.raises(ValidationError):
        Settings(_env_file=None, LOG_LEVEL="chatty")


def test_request_timeout_must_be_positive():
    assert Settings(_env_file=None, REQUEST_TIMEOUT_SECONDS=2.5).REQUEST_TIMEOUT_SECONDS == 2.5
    with pytest.raises(ValidationError):
        Settings(_env_file=None, REQUEST_TIMEOUT_SECONDS=0)


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("APP_ENV", "staging")
    config = Settings(_env_file=None)
    assert config.REQUEST_TIMEOUT_SECONDS == 5.0
    assert config.APP_ENV == "staging"
