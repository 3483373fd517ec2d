"""
GroundOperations Use Case - Public API for the ramp desk.

This module provides the main entry point for hosts of the rule engine.
It acts as a Facade, wiring settings, clock, id generation and storage
into the stateless services, and plays the caller role the services
expect: it persists accepted flights and designation outcomes.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, List, Mapping, Optional, Tuple

from src.ground_ops.adapters.roster import InMemoryRoster
from src.ground_ops.adapters.system import SystemClock, TimestampIdGenerator
from src.ground_ops.config import Settings, load_settings
from src.ground_ops.ports.clock import Clock, IdGenerator
from src.ground_ops.schemas.flight import FlightBoardDataFrame, FlightRecord
from src.ground_ops.schemas.operator import OperatorProfile, Vehicle
from src.ground_ops.schemas.result import (
    AssignmentDecision,
    AssignmentResult,
    IntakeResult,
    Rejection,
)
from src.ground_ops.schemas.target import (
    AssignmentTarget,
    FlightTarget,
    RequiredEquipment,
    VehicleTarget,
)
from src.ground_ops.services.assignment_service import AssignmentService
from src.ground_ops.services.flight_board_service import FlightBoardService
from src.ground_ops.services.flight_intake_service import EtdInput, FlightIntakeService

logger = logging.getLogger(__name__)


class GroundOperations:
    """
    Public API for flight intake and operator designation.

    Example usage:
        >>> ops = GroundOperations()
        >>> intake = ops.create_flight({"registration": "pr-gxa", "etd": "08:00"})
        >>> ops.register_operator(OperatorProfile("op-1", "SILVA"))
        >>> decision = ops.designate("flight", intake.record.id, "op-1", actor="DESK")

    Attributes:
        _roster: Host-side storage (single writer at a time).
        _intake: Flight intake service.
        _assignment: Assignment service.
        _board: Priority board service.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clock: Optional[Clock] = None,
        id_generator: Optional[IdGenerator] = None,
        roster: Optional[InMemoryRoster] = None,
    ) -> None:
        """
        Initialize the desk facade with optional custom dependencies.

        Args:
            settings: Engine settings. If None, loaded from the environment.
            clock: Clock. If None, uses SystemClock.
            id_generator: Id source. If None, uses TimestampIdGenerator.
            roster: Storage. If None, a fresh InMemoryRoster.
        """
        self._settings = settings or load_settings()
        self._clock = clock or SystemClock()
        id_generator = id_generator or TimestampIdGenerator()
        self._roster = roster or InMemoryRoster()

        self._intake = FlightIntakeService(self._clock, id_generator, self._settings)
        self._assignment = AssignmentService(self._clock, id_generator)
        self._board = FlightBoardService(self._settings.priority_window_minutes)

        logger.info(
            "GroundOperations initialized (priority window %d min)",
            self._settings.priority_window_minutes,
        )

    # -------------------------
    # Flights
    # -------------------------

    def create_flight(
        self,
        raw: Mapping[str, Any],
        actor: Optional[str] = None,
    ) -> IntakeResult:
        """
        Create a flight from form input and store it when accepted.

        Returns:
            FlightIntake on success, Rejection otherwise (nothing stored).
        """
        result = self._intake.create(raw, actor=actor)
        if not isinstance(result, Rejection):
            self._roster.add_flight(result.record)
        return result

    def check_priority(self, etd: EtdInput, now: Optional[datetime] = None) -> bool:
        """Live priority check for the ETD currently typed in the form."""
        return self._intake.is_priority_candidate(etd, now=now)

    def get_flight(self, flight_id: str) -> FlightRecord:
        return self._roster.get_flight(flight_id)

    def list_flights(self) -> List[FlightRecord]:
        return self._roster.list_flights()

    def board(self, now: Optional[datetime] = None) -> FlightBoardDataFrame:
        """Priority board over every stored flight."""
        reference = now if now is not None else self._clock.now()
        return self._board.build_board(self._roster.list_flights(), reference)

    def priority_queue(self, now: Optional[datetime] = None) -> List[FlightRecord]:
        reference = now if now is not None else self._clock.now()
        return self._board.priority_queue(self._roster.list_flights(), reference)

    # -------------------------
    # Operators and vehicles
    # -------------------------

    def register_operator(self, operator: OperatorProfile) -> None:
        """Add or refresh an operator (status updates overwrite)."""
        self._roster.upsert_operator(operator)

    def list_operators(self) -> List[OperatorProfile]:
        return self._roster.list_operators()

    def register_vehicle(self, vehicle: Vehicle) -> None:
        self._roster.add_vehicle(vehicle)

    # -------------------------
    # Designation
    # -------------------------

    def designate(
        self,
        target_kind: str,
        target_id: str,
        operator_id: str,
        actor: Optional[str] = None,
        required_equipment: RequiredEquipment = RequiredEquipment.SERVER,
    ) -> AssignmentResult:
        """
        Designate a stored operator to a stored flight or vehicle.

        The operator snapshot, the decision and the flight log update all
        happen under the roster lock, so concurrent designations against
        the same operator or flight are serialized and none is lost.

        Args:
            target_kind: "flight" or "vehicle".
            target_id: Id of the stored target.
            operator_id: Id of the chosen operator.
            actor: Acting user. Defaults to the configured desk actor.
            required_equipment: Equipment a flight target requires.

        Returns:
            AssignmentDecision or Rejection.

        Raises:
            TargetNotFoundError: If the target is not stored.
            ValueError: If target_kind is unknown.
        """
        with self._roster.transaction() as roster:
            target = self._resolve_target(roster, target_kind, target_id, required_equipment)
            result = self._assignment.assign(
                target,
                roster.list_operators_unlocked(),
                operator_id,
                actor or self._settings.default_actor,
            )
            if isinstance(result, AssignmentDecision):
                roster.record_decision_unlocked(result)
                if isinstance(target, FlightTarget):
                    roster.append_log_unlocked(target.target_id, result.resulting_log_entry)
        return result

    def decisions(self) -> Tuple[AssignmentDecision, ...]:
        return self._roster.decisions()

    @staticmethod
    def _resolve_target(
        roster: InMemoryRoster,
        target_kind: str,
        target_id: str,
        required_equipment: RequiredEquipment,
    ) -> AssignmentTarget:
        if target_kind == "flight":
            return FlightTarget(
                flight=roster.get_flight_unlocked(target_id),
                required_equipment=required_equipment,
            )
        if target_kind == "vehicle":
            return VehicleTarget(vehicle=roster.get_vehicle_unlocked(target_id))
        raise ValueError(f"Unknown target kind: {target_kind!r}")
