import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer settings from .env files and the shell out of the tests."""
    for name in ("HOSHI_USER", "GITHUB_TOKEN", "GITHUB_API_URL", "HOSHI_HTTP_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
