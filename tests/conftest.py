from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from main import create_app
from services.posts import PostStore


class StepClock:
    """Deterministic clock that advances one second per call"""

    def __init__(self, start=datetime(2024, 1, 1, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self):
        value = self.current
        self.current += timedelta(seconds=1)
        return value


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def store(clock):
    """Fresh store per test"""
    return PostStore(clock=clock)


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as test_client:
        yield test_client
