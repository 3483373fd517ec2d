"""
Flight record schemas.

FlightForm carries raw, unvalidated field input exactly as typed by a desk
user; FlightRecord is the normalized, immutable result of intake.
FlightBoardSchema is the Pandera contract of the tabular priority board.
"""

from dataclasses import dataclass, replace
from datetime import time
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

import pandera as pa
from pandera.typing import DataFrame, Series

from src.ground_ops.schemas.audit import AuditLogEntry


class FlightStatus(Enum):
    """Ramp handling phase of a flight."""

    ARRIVAL = "ARRIVAL"
    GROUND = "GROUND"
    DEPARTURE = "DEPARTURE"
    DEPARTED = "DEPARTED"
    CANCELLED = "CANCELLED"


# Raw form key -> FlightForm attribute. camelCase keys come from the
# dashboard form, snake_case keys from Python callers.
_FORM_KEYS = {
    "airlineCode": "airline_code",
    "registration": "registration",
    "model": "model",
    "arrivalFlightNumber": "arrival_flight_number",
    "flightNumber": "arrival_flight_number",
    "eta": "eta",
    "departureFlightNumber": "departure_flight_number",
    "destination": "destination",
    "destinationIcao": "destination",
    "positionId": "position_id",
    "etd": "etd",
}


@dataclass(frozen=True)
class FlightForm:
    """
    Raw manual-entry form, every field a string as entered.

    Attributes:
        airline_code: Carrier code (e.g. 'G3').
        registration: Aircraft registration ('PR-GXA'). Mandatory.
        model: Aircraft type designator ('B738').
        arrival_flight_number: Inbound flight number.
        eta: Estimated time of arrival, 'HH:MM'.
        departure_flight_number: Outbound flight number.
        destination: Destination ICAO code.
        position_id: Parking position.
        etd: Estimated time of departure, 'HH:MM'.
    """

    airline_code: str = ""
    registration: str = ""
    model: str = ""
    arrival_flight_number: str = ""
    eta: str = ""
    departure_flight_number: str = ""
    destination: str = ""
    position_id: str = ""
    etd: str = ""

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "FlightForm":
        """
        Build a form from a string-keyed mapping.

        Accepts dashboard (camelCase) and attribute (snake_case) keys.
        Unknown keys are ignored; None values become empty strings.
        """
        attributes = set(cls.__dataclass_fields__)
        values = {}
        for key, value in raw.items():
            name = _FORM_KEYS.get(key, key)
            if name in attributes:
                values[name] = "" if value is None else str(value)
        return cls(**values)


@dataclass(frozen=True)
class FlightRecord:
    """
    Normalized flight accepted by intake.

    Text fields are trimmed and upper-cased; only registration is
    guaranteed non-empty. Logs are append-only and insertion-ordered.
    """

    id: str
    registration: str
    airline_code: str = ""
    model: str = ""
    arrival_flight_number: str = ""
    departure_flight_number: str = ""
    destination_icao: str = ""
    position_id: str = ""
    eta: Optional[time] = None
    etd: Optional[time] = None
    status: FlightStatus = FlightStatus.ARRIVAL
    logs: Tuple[AuditLogEntry, ...] = ()
    messages: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        """Validate record after initialization."""
        if not self.registration:
            raise ValueError("registration cannot be empty")

    def with_log(self, entry: AuditLogEntry) -> "FlightRecord":
        """Return a copy with entry appended to the audit trail."""
        return replace(self, logs=self.logs + (entry,))

    @property
    def flight_number(self) -> str:
        """Most relevant flight number for display (departure wins)."""
        return self.departure_flight_number or self.arrival_flight_number


class FlightBoardSchema(pa.DataFrameModel):
    """
    Schema of the priority board built from the flight roster.

    One row per flight. minutes_to_departure is NaN for flights with no ETD.
    """

    flight_id: Series[str] = pa.Field(nullable=False, unique=True)
    registration: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Aircraft registration",
    )
    arrival_flight_number: Series[str] = pa.Field(nullable=False)
    departure_flight_number: Series[str] = pa.Field(nullable=False)
    status: Series[str] = pa.Field(
        isin=[s.value for s in FlightStatus],
        description="FlightStatus value",
    )
    etd: Series[str] = pa.Field(
        nullable=False,
        description="ETD as HH:MM, empty when unscheduled",
    )
    minutes_to_departure: Series[float] = pa.Field(
        nullable=True,
        description="Minutes from now to ETD today (negative when overdue)",
    )
    is_priority: Series[bool] = pa.Field(nullable=False)
    log_count: Series[int] = pa.Field(ge=0, description="Audit entries held")

    class Config:
        strict = True
        coerce = True
        ordered = True
        name = "FlightBoardSchema"
        description = "Flight roster ordered for the priority queue"


FlightBoardDataFrame = DataFrame[FlightBoardSchema]
