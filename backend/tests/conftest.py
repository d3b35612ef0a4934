"""
conftest.py
------------
Pytest fixtures for the health score engine and its FastAPI app.

Goals:
- Give every test its own engine and cache so cached results never leak
  between tests.
- Control time: the engine and its cache read a `FakeClock`, so TTL expiry
  and `calculatedAt` stamps are deterministic.
- Override the app's `get_engine` dependency so API tests use that engine.

Fixture scopes:
- `clock`: function-scoped FakeClock starting at a fixed UTC instant.
- `engine`: function-scoped HealthScoreEngine bound to `clock`.
- `client`: function-scoped FastAPI TestClient with `get_engine` overridden.
- `john_smith` / `michael_brown`: deep copies of demo customer metrics.
"""

import copy
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path so `import backend.*` works during pytest collection
import os, sys
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)


from backend.main import app, get_engine
from backend.mock_data import CUSTOMERS
from backend.services.cache import HealthScoreCache
from backend.services.engine import HealthScoreEngine


class FakeClock:
    """Callable clock that only moves when a test tells it to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture(scope="function")
def clock():
    return FakeClock(datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc))


@pytest.fixture(scope="function")
def engine(clock):
    """
    Fresh engine with the default TTL (5 min) and capacity (100) on the fake clock.
    """
    return HealthScoreEngine(cache=HealthScoreCache(clock=clock), clock=clock)


@pytest.fixture(scope="function")
def client(engine):
    """
    FastAPI TestClient whose requests are scored by the `engine` fixture.

    Usage in tests:
        def test_something(client, clock):
            r1 = client.get(...)
            clock.advance(minutes=6)
            r2 = client.get(...)
    """
    app.dependency_overrides[get_engine] = lambda: engine
    with TestClient(app) as c:
        yield c
    # Ensure we leave the app in a clean state for subsequent tests
    app.dependency_overrides.clear()


@pytest.fixture
def john_smith():
    """Customer 1 metrics (wire format); tests may mutate their copy."""
    return copy.deepcopy(CUSTOMERS["1"]["metrics"])


@pytest.fixture
def michael_brown():
    """Customer 3 metrics (wire format); tests may mutate their copy."""
    return copy.deepcopy(CUSTOMERS["3"]["metrics"])
