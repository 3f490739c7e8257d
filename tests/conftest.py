import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # a developer's .env must not leak into URL or timeout assertions
    for key in ("JOKEAPI_BASE_URL", "JOKEAPI_TIMEOUT", "JOKEAPI_AUTH_KEY"):
        monkeypatch.delenv(key, raising=False)
