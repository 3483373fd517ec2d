"""
In-memory roster - host-side storage for flights, operators and vehicles.

The rule engine owns no state. This roster is what a host (the
GroundOperations facade, the HTTP API) uses to persist what the services
return, with a single lock so there is at most one writer at a time.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Tuple

from src.ground_ops.exceptions import DuplicateEntityError, TargetNotFoundError
from src.ground_ops.schemas.audit import AuditLogEntry
from src.ground_ops.schemas.flight import FlightRecord
from src.ground_ops.schemas.operator import OperatorProfile, Vehicle
from src.ground_ops.schemas.result import AssignmentDecision

logger = logging.getLogger(__name__)


class InMemoryRoster:
    """
    Thread-safe in-process storage.

    Flights and vehicles are stored once (duplicates raise); operators are
    upserted because their status changes as work is handed out.

    Attributes:
        _flights: Flight records by id, in insertion order.
        _operators: Operator profiles by id.
        _vehicles: Vehicles by id.
        _decisions: Designation history, in insertion order.
        _lock: Lock for thread-safe access.
    """

    def __init__(self) -> None:
        self._flights: Dict[str, FlightRecord] = {}
        self._operators: Dict[str, OperatorProfile] = {}
        self._vehicles: Dict[str, Vehicle] = {}
        self._decisions: List[AssignmentDecision] = []
        self._lock = threading.Lock()

    @contextmanager
    def transaction(self) -> Iterator["InMemoryRoster"]:
        """
        Hold the writer lock across a read-decide-write sequence.

        Public methods take the lock themselves and the lock is not
        reentrant, so inside a transaction use the *_unlocked variants.
        """
        with self._lock:
            yield self

    # -------------------------
    # Flights
    # -------------------------

    def add_flight(self, flight: FlightRecord) -> None:
        with self._lock:
            if flight.id in self._flights:
                raise DuplicateEntityError("flight", flight.id)
            self._flights[flight.id] = flight
        logger.debug("Stored flight %s (%s)", flight.id, flight.registration)

    def get_flight(self, flight_id: str) -> FlightRecord:
        with self._lock:
            return self.get_flight_unlocked(flight_id)

    def get_flight_unlocked(self, flight_id: str) -> FlightRecord:
        try:
            return self._flights[flight_id]
        except KeyError:
            raise TargetNotFoundError("flight", flight_id) from None

    def list_flights(self) -> List[FlightRecord]:
        with self._lock:
            return list(self._flights.values())

    def append_log_unlocked(self, flight_id: str, entry: AuditLogEntry) -> FlightRecord:
        """Append entry to a stored flight's audit trail and return the new record."""
        updated = self.get_flight_unlocked(flight_id).with_log(entry)
        self._flights[flight_id] = updated
        return updated

    # -------------------------
    # Operators and vehicles
    # -------------------------

    def upsert_operator(self, operator: OperatorProfile) -> None:
        with self._lock:
            self._operators[operator.id] = operator

    def list_operators(self) -> List[OperatorProfile]:
        with self._lock:
            return self.list_operators_unlocked()

    def list_operators_unlocked(self) -> List[OperatorProfile]:
        return list(self._operators.values())

    def add_vehicle(self, vehicle: Vehicle) -> None:
        with self._lock:
            if vehicle.id in self._vehicles:
                raise DuplicateEntityError("vehicle", vehicle.id)
            self._vehicles[vehicle.id] = vehicle

    def get_vehicle_unlocked(self, vehicle_id: str) -> Vehicle:
        try:
            return self._vehicles[vehicle_id]
        except KeyError:
            raise TargetNotFoundError("vehicle", vehicle_id) from None

    # -------------------------
    # Decisions
    # -------------------------

    def record_decision_unlocked(self, decision: AssignmentDecision) -> None:
        self._decisions.append(decision)

    def decisions(self) -> Tuple[AssignmentDecision, ...]:
        with self._lock:
            return tuple(self._decisions)
