"""
Shared fixtures for the appeal tracker test suite.

Every test gets its own in-memory SQLite database and a clock
it can pin, so timestamps are deterministic.
"""

from datetime import datetime, timedelta

import pytest

from appeal_tracker.domain.appeals.lifecycle import AppealLifecycle
from appeal_tracker.infrastructure.appeals.appeal_repository import (
    SqlAlchemyAppealRepository,
)
from appeal_tracker.infrastructure.appeals.database import create_db_engine
from appeal_tracker.shared.security.rate_limiting import limiter


class FakeClock:
    """Deterministic clock: returns the current value, then ticks one second."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def set(self, when: datetime) -> None:
        self.now = when

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + timedelta(seconds=1)
        return current


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with empty rate limit counters."""
    limiter.reset()
    yield


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2025, 10, 27, 9, 0, 0))


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine, clock) -> SqlAlchemyAppealRepository:
    repo = SqlAlchemyAppealRepository(engine, clock=clock)
    repo.init_schema()
    return repo


@pytest.fixture
def lifecycle() -> AppealLifecycle:
    return AppealLifecycle()
