import pytest
from pydantic import ValidationError

from xcrank.config import Settings, get_settings
from xcrank.dhv_fetcher import DEFAULT_API_URL


def test_settings_defaults():
    cfg = get_settings()
    assert isinstance(cfg, Settings)
    assert cfg.api_url == DEFAULT_API_URL
    assert cfg.timeout is None
    assert cfg.log_level == "WARNING"
    assert cfg.log_file is None


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("XCRANK_API_URL", "http://localhost:8000/flights")
    monkeypatch.setenv("XCRANK_TIMEOUT", "2.5")
    monkeypatch.setenv("XCRANK_LOG_LEVEL", "debug")
    monkeypatch.setenv("XCRANK_LOG_FILE", "")

    cfg = get_settings()
    assert cfg.api_url == "http://localhost:8000/flights"
    assert cfg.timeout == 2.5
    assert cfg.log_level == "DEBUG"
    assert cfg.log_file is None


@pytest.mark.parametrize(
    "name, value",
    [
        ("XCRANK_API_URL", "ftp://example.com"),
        ("XCRANK_TIMEOUT", "0"),
        ("XCRANK_LOG_LEVEL", "chatty"),
    ],
)
def test_settings_rejects_invalid(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings()
