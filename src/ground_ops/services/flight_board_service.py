"""
Flight Board Service - Priority queue view of the flight roster.

Projects flight records into a DataFrame ordered the way the desk works
the queue: priority flights first, most urgent at the top.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, List

import pandas as pd

from src.ground_ops.config import DEFAULT_PRIORITY_WINDOW_MINUTES
from src.ground_ops.schemas.flight import (
    FlightBoardDataFrame,
    FlightBoardSchema,
    FlightRecord,
)
from src.ground_ops.services.flight_intake_service import minutes_until

logger = logging.getLogger(__name__)

BOARD_COLUMNS = [
    "flight_id",
    "registration",
    "arrival_flight_number",
    "departure_flight_number",
    "status",
    "etd",
    "minutes_to_departure",
    "is_priority",
    "log_count",
]


class FlightBoardService:
    """
    Builds the tabular priority board.

    Uses the same rule as the intake priority check, so a flight shown
    as priority on the board is exactly one that would get the warning
    banner at creation time.
    """

    def __init__(self, window_minutes: float = DEFAULT_PRIORITY_WINDOW_MINUTES) -> None:
        self._window_minutes = window_minutes

    def build_board(
        self,
        flights: Iterable[FlightRecord],
        now: datetime,
    ) -> FlightBoardDataFrame:
        """
        Build the validated board for the given flights.

        Args:
            flights: Flight records (any order).
            now: Reference instant for minutes-to-departure.

        Returns:
            DataFrame matching FlightBoardSchema. Priority rows first,
            then ascending minutes_to_departure, unscheduled flights last.
        """
        rows = []
        for flight in flights:
            minutes = minutes_until(flight.etd, now)
            rows.append({
                "flight_id": flight.id,
                "registration": flight.registration,
                "arrival_flight_number": flight.arrival_flight_number,
                "departure_flight_number": flight.departure_flight_number,
                "status": flight.status.value,
                "etd": flight.etd.strftime("%H:%M") if flight.etd else "",
                "minutes_to_departure": minutes,
                "is_priority": minutes is not None and minutes < self._window_minutes,
                "log_count": len(flight.logs),
            })

        df = pd.DataFrame(rows, columns=BOARD_COLUMNS)
        df["minutes_to_departure"] = pd.to_numeric(df["minutes_to_departure"], errors="coerce")
        df["is_priority"] = df["is_priority"].astype(bool)

        df = df.sort_values(
            by=["is_priority", "minutes_to_departure"],
            ascending=[False, True],
            na_position="last",
        ).reset_index(drop=True)

        logger.debug(
            "Built board with %d flights (%d priority)",
            len(df),
            int(df["is_priority"].sum()),
        )
        return FlightBoardSchema.validate(df)

    def priority_queue(
        self,
        flights: Iterable[FlightRecord],
        now: datetime,
    ) -> List[FlightRecord]:
        """Priority flights only, most urgent (smallest minutes) first."""
        ranked = []
        for flight in flights:
            minutes = minutes_until(flight.etd, now)
            if minutes is not None and minutes < self._window_minutes:
                ranked.append((minutes, flight))
        ranked.sort(key=lambda item: item[0])
        return [flight for _, flight in ranked]
