"""
Operator and vehicle schemas.

The engine treats operators and vehicles as read-only input: it reads an
operator's current status to classify a designation but never changes it.
"""

from dataclasses import dataclass
from enum import Enum


class OperatorStatus(Enum):
    """
    Current workload status of a ground-crew operator.

    Only AVAILABLE means free; every other value is a busy variant and a
    designation made against it queues behind the existing work.
    """

    AVAILABLE = "AVAILABLE"
    BUSY = "BUSY"
    IN_TASK = "IN-TASK"
    ON_BREAK = "ON-BREAK"
    OFFLINE = "OFFLINE"


@dataclass(frozen=True)
class OperatorProfile:
    """
    Ground-crew operator as seen by the designation dialog.

    Attributes:
        id: Operator identifier.
        war_name: Short display name used on the ramp.
        status: Current workload status.
    """

    id: str
    war_name: str
    status: OperatorStatus = OperatorStatus.AVAILABLE

    @property
    def is_available(self) -> bool:
        """Check if the operator can take a task without queueing."""
        return self.status is OperatorStatus.AVAILABLE


@dataclass(frozen=True)
class Vehicle:
    """Ramp vehicle that can be the target of a designation."""

    id: str
    vehicle_type: str
