import pytest

from servaddr.constants import URLS_ENV_VAR


@pytest.fixture
def clean_env(monkeypatch):
    """Fixture removing the binding variable from the process environment."""
    monkeypatch.delenv(URLS_ENV_VAR, raising=False)
    return monkeypatch
