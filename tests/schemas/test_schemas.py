"""
Tests for ground_ops schema definitions.

Validates that:
1. Form mapping accepts dashboard and snake_case keys
2. Records are immutable and logs append-only
3. Target variants expose the common projection
4. Settings validate their values
"""

from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from src.ground_ops.config import Settings, load_settings
from src.ground_ops.exceptions import ConfigurationError
from src.ground_ops.schemas.audit import AuditLogEntry, LogType
from src.ground_ops.schemas.flight import FlightForm, FlightRecord, FlightStatus
from src.ground_ops.schemas.operator import OperatorProfile, OperatorStatus, Vehicle
from src.ground_ops.schemas.target import FlightTarget, RequiredEquipment, VehicleTarget


# -------------------------
# Fixtures
# -------------------------


@pytest.fixture
def log_entry() -> AuditLogEntry:
    return AuditLogEntry(
        id="1752564600000abc1234",
        timestamp=datetime(2026, 7, 15, 7, 30),
        type=LogType.MANUAL,
        message="Fuel truck delayed",
        author="DESK-MANAGER",
    )


# -------------------------
# FlightForm
# -------------------------


class TestFlightForm:
    """Tests for FlightForm.from_mapping."""

    def test_dashboard_keys(self):
        form = FlightForm.from_mapping(
            {
                "airlineCode": "g3",
                "flightNumber": "g3-1",
                "destination": "sbsp",
                "positionId": "5",
            }
        )
        assert form.airline_code == "g3"
        assert form.arrival_flight_number == "g3-1"
        assert form.destination == "sbsp"
        assert form.position_id == "5"

    def test_arrival_flight_number_key(self):
        form = FlightForm.from_mapping({"arrivalFlightNumber": "ad1"})
        assert form.arrival_flight_number == "ad1"

    def test_none_and_unknown_keys(self):
        form = FlightForm.from_mapping({"registration": None, "origin": "SBGL"})
        assert form.registration == ""

    def test_values_are_not_normalized(self):
        form = FlightForm.from_mapping({"registration": " pr-abc "})
        assert form.registration == " pr-abc "


# -------------------------
# FlightRecord
# -------------------------


class TestFlightRecord:
    """Tests for FlightRecord."""

    def test_registration_required(self):
        with pytest.raises(ValueError, match="registration"):
            FlightRecord(id="1", registration="")

    def test_defaults(self):
        record = FlightRecord(id="1", registration="PR-ABC")
        assert record.status == FlightStatus.ARRIVAL
        assert record.logs == ()
        assert record.messages == ()

    def test_frozen(self):
        record = FlightRecord(id="1", registration="PR-ABC")
        with pytest.raises(FrozenInstanceError):
            record.registration = "PR-XYZ"

    def test_with_log_appends(self, log_entry):
        original = FlightRecord(id="1", registration="PR-ABC", logs=(log_entry,))
        second = AuditLogEntry(
            id="2",
            timestamp=datetime(2026, 7, 15, 7, 31),
            type=LogType.SYSTEM,
            message="later",
            author="X",
        )

        updated = original.with_log(second)

        assert updated.logs == (log_entry, second)
        assert original.logs == (log_entry,)
        assert updated.id == original.id

    def test_flight_number_prefers_departure(self):
        record = FlightRecord(
            id="1", registration="PR-ABC",
            arrival_flight_number="G3-1", departure_flight_number="G3-2",
        )
        assert record.flight_number == "G3-2"

    def test_flight_number_falls_back_to_arrival(self):
        record = FlightRecord(id="1", registration="PR-ABC", arrival_flight_number="G3-1")
        assert record.flight_number == "G3-1"


# -------------------------
# Operators and targets
# -------------------------


class TestOperatorsAndTargets:
    """Tests for operator profiles and designation targets."""

    def test_is_available(self):
        assert OperatorProfile("1", "SILVA").is_available is True
        assert OperatorProfile("1", "SILVA", OperatorStatus.BUSY).is_available is False

    def test_flight_target_projection(self):
        flight = FlightRecord(id="fl-9", registration="PR-ABC", arrival_flight_number="AD4050")
        target = FlightTarget(flight=flight)

        assert target.kind == "flight"
        assert target.target_id == "fl-9"
        assert target.descriptor == "Flight AD4050 • REQ. SERVER"

    def test_flight_target_cta(self):
        flight = FlightRecord(id="fl-9", registration="PR-ABC", arrival_flight_number="AD4050")
        target = FlightTarget(flight=flight, required_equipment=RequiredEquipment.CTA)
        assert target.descriptor.endswith("REQ. CTA")

    def test_vehicle_target_projection(self):
        target = VehicleTarget(vehicle=Vehicle(id="GPU-3", vehicle_type="GPU"))

        assert target.kind == "vehicle"
        assert target.target_id == "GPU-3"
        assert target.descriptor == "Fleet GPU-3 • GPU"


# -------------------------
# Settings
# -------------------------


class TestSettings:
    """Tests for configuration loading."""

    def test_defaults(self):
        settings = Settings()
        assert settings.priority_window_minutes == 60
        assert settings.default_actor == "DESK-MANAGER"

    def test_rejects_non_positive_window(self):
        with pytest.raises(ConfigurationError):
            Settings(priority_window_minutes=0)

    def test_rejects_empty_actor(self):
        with pytest.raises(ConfigurationError):
            Settings(default_actor="")

    def test_load_from_environment(self, monkeypatch):
        monkeypatch.setenv("GROUND_OPS_PRIORITY_WINDOW_MINUTES", "45")
        monkeypatch.setenv("GROUND_OPS_DEFAULT_ACTOR", "NIGHT-DESK")
        monkeypatch.setenv("GROUND_OPS_LOG_LEVEL", "debug")

        settings = load_settings()

        assert settings.priority_window_minutes == 45
        assert settings.default_actor == "NIGHT-DESK"
        assert settings.log_level == "DEBUG"

    def test_load_defaults_when_unset(self, monkeypatch):
        monkeypatch.delenv("GROUND_OPS_PRIORITY_WINDOW_MINUTES", raising=False)
        monkeypatch.delenv("GROUND_OPS_DEFAULT_ACTOR", raising=False)
        monkeypatch.delenv("GROUND_OPS_LOG_LEVEL", raising=False)

        assert load_settings() == Settings()

    def test_load_rejects_non_integer_window(self, monkeypatch):
        monkeypatch.setenv("GROUND_OPS_PRIORITY_WINDOW_MINUTES", "soon")
        with pytest.raises(ConfigurationError, match="GROUND_OPS_PRIORITY_WINDOW_MINUTES"):
            load_settings()
