"""Shared fixtures for the service tests."""

import pytest
from fastapi.testclient import TestClient

from s2i_demo.config.settings import Settings, get_settings
from s2i_demo.main import create_app

ENV_VARS = ["PORT", "ENVIRONMENT", "HOST", "LOG_LEVEL", "APP_NAME"]


class FakeClock:
    """Monotonic clock stand-in that only moves when told to."""

    def __init__(self, now: float) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Start every test from an empty configuration environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(1000.0)


@pytest.fixture
def client(settings: Settings, clock: FakeClock) -> TestClient:
    return TestClient(create_app(settings, clock=clock))
