"""
Service outcome types.

Services never raise for domain rule failures; they return a Rejection
the caller can display and let the user correct.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from src.ground_ops.schemas.audit import AuditLogEntry
from src.ground_ops.schemas.flight import FlightRecord


class RejectionReason(Enum):
    """Why a request was turned down."""

    MISSING_REGISTRATION = "missing_registration"
    """Flight form submitted without an aircraft registration."""

    OPERATOR_NOT_FOUND = "operator_not_found"
    """Chosen operator id is not part of the candidate pool."""


@dataclass(frozen=True)
class Rejection:
    """
    Typed validation failure.

    Attributes:
        reason: Machine-readable cause.
        message: Human-readable explanation.
        field: Name of the offending input, if any.
    """

    reason: RejectionReason
    message: str
    field: Optional[str] = None


@dataclass(frozen=True)
class FlightIntake:
    """Accepted flight plus its priority classification at creation time."""

    record: FlightRecord
    is_priority: bool


@dataclass(frozen=True)
class AssignmentDecision:
    """
    Outcome of binding an operator to a target.

    Attributes:
        target_id: Id of the flight or vehicle.
        operator_id: Id of the designated operator.
        was_busy_at_assignment: True when the operator was not AVAILABLE,
            meaning the new task queues behind existing work.
        resulting_log_entry: OPERATOR-ACTION entry describing the designation.
    """

    target_id: str
    operator_id: str
    was_busy_at_assignment: bool
    resulting_log_entry: AuditLogEntry


IntakeResult = Union[FlightIntake, Rejection]
NormalizeResult = Union[FlightRecord, Rejection]
AssignmentResult = Union[AssignmentDecision, Rejection]
