import pytest

from monetary.config import DECIMAL_PRECISION_ENV_VAR, reset_config
from monetary.currency import Currency


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Each test starts with default settings, no `.env` file and a fresh config cache."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(DECIMAL_PRECISION_ENV_VAR, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def isolated_registry(monkeypatch):
    """Let a test register currencies without leaking them into other tests."""
    monkeypatch.setattr(Currency, "_registry", dict(Currency._registry))
    return Currency._registry
