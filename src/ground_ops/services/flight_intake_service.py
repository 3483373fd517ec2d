"""
Flight Intake Service - Manual flight creation and priority classification.

Turns raw form input into a normalized FlightRecord (or a Rejection) and
decides whether a flight must be fast-tracked into the priority queue
based on how soon it departs.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, time
from typing import Any, Mapping, Optional, Union

from src.ground_ops.config import DEFAULT_PRIORITY_WINDOW_MINUTES, Settings
from src.ground_ops.exceptions import InvalidTimeOfDayError
from src.ground_ops.ports.clock import Clock, IdGenerator
from src.ground_ops.schemas.audit import LogType
from src.ground_ops.schemas.flight import FlightForm, FlightRecord, FlightStatus
from src.ground_ops.schemas.result import (
    FlightIntake,
    IntakeResult,
    NormalizeResult,
    Rejection,
    RejectionReason,
)
from src.ground_ops.services.audit_log import AuditLogFactory

logger = logging.getLogger(__name__)

# HH:MM with an optional, ignored :SS part (browser time inputs may send it)
_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::\d{2})?$")

CREATION_MESSAGE = "Flight created manually by desk manager."

EtdInput = Union[time, str, None]


def parse_time_of_day(text: str) -> time:
    """
    Parse a local time-of-day string.

    Args:
        text: 'HH:MM' (surrounding whitespace allowed).

    Returns:
        time(hour, minute).

    Raises:
        InvalidTimeOfDayError: If text is not a valid 24h HH:MM value.
    """
    match = _TIME_PATTERN.match(text.strip())
    if match is None:
        raise InvalidTimeOfDayError(text)
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidTimeOfDayError(text)
    return time(hour, minute)


def parse_optional_time(text: Optional[str]) -> Optional[time]:
    """
    Lenient variant of parse_time_of_day.

    Empty or malformed input means "not scheduled" and yields None;
    optional scheduling fields never block record creation.
    """
    if not text or not text.strip():
        return None
    try:
        return parse_time_of_day(text)
    except InvalidTimeOfDayError:
        logger.debug("Ignoring malformed time value %r", text)
        return None


def minutes_until(etd: EtdInput, now: datetime) -> Optional[float]:
    """
    Minutes from now to the ETD on now's calendar date.

    Returns None when etd is absent or malformed. The result is negative
    when the ETD time-of-day is earlier than now; there is no rollover to
    the next day.
    """
    if isinstance(etd, str):
        etd = parse_optional_time(etd)
    if etd is None:
        return None
    departure = datetime.combine(now.date(), etd, tzinfo=now.tzinfo)
    return (departure - now).total_seconds() / 60


def is_priority_candidate(
    etd: EtdInput,
    now: datetime,
    window_minutes: float = DEFAULT_PRIORITY_WINDOW_MINUTES,
) -> bool:
    """
    Check if a flight with this ETD goes into the priority queue.

    True iff etd is present and departs in strictly less than
    window_minutes from now. An ETD already past today gives a negative
    difference and therefore also counts as priority (overdue flights
    are treated as maximally urgent).

    Args:
        etd: ETD as time, raw 'HH:MM' string or None.
        now: Current local instant; its date is "today".
        window_minutes: Priority window, 60 by default.

    Returns:
        True if the flight qualifies for priority handling.
    """
    diff = minutes_until(etd, now)
    if diff is None:
        return False
    return diff < window_minutes


def _clean(value: str) -> str:
    return value.strip().upper()


class FlightIntakeService:
    """
    Domain service for manual flight intake.

    Stateless: every call works only on its arguments plus the injected
    clock and id generator, so calls may run concurrently.

    Attributes:
        _clock: Source of "now" for ids, log timestamps and priority checks.
        _id_generator: Mints flight and log entry ids.
        _settings: Priority window and default actor.
    """

    def __init__(
        self,
        clock: Clock,
        id_generator: IdGenerator,
        settings: Optional[Settings] = None,
    ) -> None:
        """
        Initialize the intake service.

        Args:
            clock: Clock implementation (e.g., SystemClock).
            id_generator: Id generator (e.g., TimestampIdGenerator).
            settings: Engine settings. If None, uses defaults.
        """
        self._clock = clock
        self._id_generator = id_generator
        self._settings = settings or Settings()
        self._log_factory = AuditLogFactory(clock, id_generator)

    def normalize(
        self,
        raw: Union[Mapping[str, Any], FlightForm],
        actor: Optional[str] = None,
    ) -> NormalizeResult:
        """
        Validate and normalize manual form input.

        Args:
            raw: Form field mapping (dashboard or snake_case keys) or FlightForm.
            actor: Author of the creation log entry. Defaults to the
                configured desk actor.

        Returns:
            FlightRecord with one SYSTEM log entry, or a Rejection when the
            registration is empty. No id is minted for rejected input.
        """
        form = raw if isinstance(raw, FlightForm) else FlightForm.from_mapping(raw)

        registration = _clean(form.registration)
        if not registration:
            logger.warning("Rejected manual flight: registration is empty")
            return Rejection(
                reason=RejectionReason.MISSING_REGISTRATION,
                message="Aircraft registration is required",
                field="registration",
            )

        now = self._clock.now()
        flight_id = self._id_generator.new_id(now)
        creation_log = self._log_factory.create(
            LogType.SYSTEM,
            CREATION_MESSAGE,
            actor or self._settings.default_actor,
            at=now,
        )

        record = FlightRecord(
            id=flight_id,
            registration=registration,
            airline_code=_clean(form.airline_code),
            model=_clean(form.model),
            arrival_flight_number=_clean(form.arrival_flight_number),
            departure_flight_number=_clean(form.departure_flight_number),
            destination_icao=_clean(form.destination),
            position_id=_clean(form.position_id),
            eta=parse_optional_time(form.eta),
            etd=parse_optional_time(form.etd),
            status=FlightStatus.ARRIVAL,
            logs=(creation_log,),
            messages=(),
        )

        logger.info("Flight %s created manually (%s)", record.id, record.registration)
        return record

    def create(
        self,
        raw: Union[Mapping[str, Any], FlightForm],
        actor: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> IntakeResult:
        """
        Normalize input and classify the new flight's priority.

        Args:
            raw: Form field mapping or FlightForm.
            actor: Author of the creation log entry.
            now: Reference instant for the priority check. If None, read
                from the clock.

        Returns:
            FlightIntake, or the Rejection produced by normalize().
        """
        result = self.normalize(raw, actor=actor)
        if isinstance(result, Rejection):
            return result

        priority = self.is_priority_candidate(result.etd, now=now)
        if priority:
            logger.info(
                "Flight %s (ETD %s) enters the priority queue",
                result.id,
                result.etd.strftime("%H:%M"),
            )
        return FlightIntake(record=result, is_priority=priority)

    def is_priority_candidate(
        self,
        etd: EtdInput,
        now: Optional[datetime] = None,
    ) -> bool:
        """
        Priority check using the configured window.

        Cheap and side-effect free; safe to call on every keystroke.
        """
        reference = now if now is not None else self._clock.now()
        priority = is_priority_candidate(
            etd, reference, window_minutes=self._settings.priority_window_minutes
        )
        logger.debug("Priority check etd=%r now=%s -> %s", etd, reference, priority)
        return priority
