import copy
from datetime import datetime, timedelta, timezone

import pytest

from services.counselor_assessment.definitions import DEFAULT_CATALOG_DATA
from services.counselor_assessment.engine import AssessmentEngine
from services.counselor_assessment.loader import load_default_catalog

FIXED_START = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


class FakeClock:
    """Deterministic clock: every call moves one second forward."""

    def __init__(self, start: datetime = FIXED_START):
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + timedelta(seconds=1)
        return now


@pytest.fixture(scope="session")
def catalog():
    """The built-in question bank (5 psychometric, 5 technical, 10 WISCAR)."""
    return load_default_catalog()


@pytest.fixture
def catalog_data():
    """A mutable copy of the built-in catalog data for loader tests."""
    return copy.deepcopy(DEFAULT_CATALOG_DATA)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def engine(catalog, clock):
    return AssessmentEngine(catalog=catalog, clock=clock)


@pytest.fixture
def started_engine(engine):
    engine.start()
    return engine
