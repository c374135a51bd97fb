import pytest

from xcrank.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for name in ("XCRANK_API_URL", "XCRANK_TIMEOUT", "XCRANK_LOG_LEVEL", "XCRANK_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
