"""
Shared fixtures: temp snapshot files, a controllable clock, and an app
wired to both.
"""

import json
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from wordbank.config import Settings
from wordbank.main import create_app

MASTER = "test-master-code"
SESSION_SECRET = "test-session-secret"


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings(tmp_path):
    return Settings(
        master_code=MASTER,
        session_secret=SESSION_SECRET,
        data_file=tmp_path / "data.json",
        codes_file=tmp_path / "codes.json",
    )


@pytest.fixture
def empty_bank(settings):
    """Start from an empty word bank instead of the seeded default."""
    settings.data_file.write_text("{}", encoding="utf-8")
    return settings


@pytest.fixture
def app(settings, clock):
    return create_app(settings, clock=clock)


@pytest.fixture
def client(app):
    return TestClient(app)


def read_snapshot(path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)
