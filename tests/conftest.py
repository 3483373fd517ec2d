"""
Shared fixtures for ground_ops tests.

Provides a deterministic clock and id generator so service outputs can be
asserted exactly.
"""

from datetime import datetime, timedelta
from typing import List

import pytest

from src.ground_ops.config import Settings
from src.ground_ops.schemas.operator import OperatorProfile, OperatorStatus
from src.ground_ops.services.assignment_service import AssignmentService
from src.ground_ops.services.flight_intake_service import FlightIntakeService


class TickingClock:
    """Clock that advances by a fixed step on every read."""

    def __init__(self, start: datetime, step: timedelta = timedelta(seconds=1)) -> None:
        self._current = start
        self._step = step
        self.reads = 0

    def now(self) -> datetime:
        value = self._current
        self._current += self._step
        self.reads += 1
        return value


class SequentialIdGenerator:
    """Id generator returning id-1, id-2, ..."""

    def __init__(self, prefix: str = "id-") -> None:
        self._prefix = prefix
        self._counter = 0

    def new_id(self, at: datetime) -> str:
        self._counter += 1
        return f"{self._prefix}{self._counter}"


@pytest.fixture
def now() -> datetime:
    """Reference instant: 2026-07-15 07:30 local."""
    return datetime(2026, 7, 15, 7, 30)


@pytest.fixture
def clock(now: datetime) -> TickingClock:
    return TickingClock(start=now)


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def intake_service(clock, id_generator, settings) -> FlightIntakeService:
    return FlightIntakeService(clock, id_generator, settings)


@pytest.fixture
def assignment_service(clock, id_generator) -> AssignmentService:
    return AssignmentService(clock, id_generator)


@pytest.fixture
def valid_form() -> dict:
    """Dashboard form as typed by the desk manager."""
    return {
        "airlineCode": " g3 ",
        "registration": " pr-gxa ",
        "model": "b738",
        "flightNumber": "g3-1234",
        "eta": "06:45",
        "departureFlightNumber": " g3-1235",
        "destination": "sbsp ",
        "positionId": "12a",
        "etd": "08:00",
    }


@pytest.fixture
def operators() -> List[OperatorProfile]:
    """Candidate pool with one free and two busy operators."""
    return [
        OperatorProfile(id="op-1", war_name="SILVA", status=OperatorStatus.AVAILABLE),
        OperatorProfile(id="op-2", war_name="COSTA", status=OperatorStatus.BUSY),
        OperatorProfile(id="op-3", war_name="PEREIRA", status=OperatorStatus.ON_BREAK),
    ]
