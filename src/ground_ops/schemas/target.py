"""
Designation target variants.

A designation is made against either a flight or a vehicle. Both variants
expose the same minimal projection (target_id, descriptor), and that
projection is all AssignmentService reads.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Union

from src.ground_ops.schemas.flight import FlightRecord
from src.ground_ops.schemas.operator import Vehicle


class RequiredEquipment(Enum):
    """Equipment a flight requires from the designated operator."""

    CTA = "CTA"
    SERVER = "SERVER"


@dataclass(frozen=True)
class FlightTarget:
    """Designation against a flight."""

    flight: FlightRecord
    required_equipment: RequiredEquipment = RequiredEquipment.SERVER
    kind: Literal["flight"] = "flight"

    @property
    def target_id(self) -> str:
        return self.flight.id

    @property
    def descriptor(self) -> str:
        return f"Flight {self.flight.flight_number} • REQ. {self.required_equipment.value}"


@dataclass(frozen=True)
class VehicleTarget:
    """Designation against a fleet vehicle."""

    vehicle: Vehicle
    kind: Literal["vehicle"] = "vehicle"

    @property
    def target_id(self) -> str:
        return self.vehicle.id

    @property
    def descriptor(self) -> str:
        return f"Fleet {self.vehicle.id} • {self.vehicle.vehicle_type}"


AssignmentTarget = Union[FlightTarget, VehicleTarget]
