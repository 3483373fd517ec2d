"""
Schema definitions for the ground operations rule engine.

Frozen dataclasses as the value contracts between services and callers,
plus the Pandera contract of the priority board.
"""

from .audit import AuditLogEntry, LogType
from .flight import (
    FlightBoardDataFrame,
    FlightBoardSchema,
    FlightForm,
    FlightRecord,
    FlightStatus,
)
from .operator import OperatorProfile, OperatorStatus, Vehicle
from .result import (
    AssignmentDecision,
    AssignmentResult,
    FlightIntake,
    IntakeResult,
    NormalizeResult,
    Rejection,
    RejectionReason,
)
from .target import AssignmentTarget, FlightTarget, RequiredEquipment, VehicleTarget

__all__ = [
    # Audit
    "AuditLogEntry",
    "LogType",
    # Flights
    "FlightForm",
    "FlightRecord",
    "FlightStatus",
    "FlightBoardSchema",
    "FlightBoardDataFrame",
    # Operators and targets
    "OperatorProfile",
    "OperatorStatus",
    "Vehicle",
    "AssignmentTarget",
    "FlightTarget",
    "VehicleTarget",
    "RequiredEquipment",
    # Outcomes
    "AssignmentDecision",
    "AssignmentResult",
    "FlightIntake",
    "IntakeResult",
    "NormalizeResult",
    "Rejection",
    "RejectionReason",
]
