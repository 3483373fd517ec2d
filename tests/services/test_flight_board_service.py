"""
Tests for FlightBoardService.

Tests cover:
- Board ordering (priority first, most urgent first, unscheduled last)
- Schema validation of the produced DataFrame
- priority_queue selection
"""

from datetime import datetime, time

import pandas as pd
import pandera as pa
import pytest

from src.ground_ops.schemas.flight import FlightBoardSchema, FlightRecord
from src.ground_ops.services.flight_board_service import BOARD_COLUMNS, FlightBoardService


@pytest.fixture
def board_now() -> datetime:
    return datetime(2026, 7, 15, 7, 30)


@pytest.fixture
def flights() -> list[FlightRecord]:
    return [
        FlightRecord(id="late", registration="PR-AAA", etd=time(12, 0)),
        FlightRecord(id="unscheduled", registration="PR-BBB"),
        FlightRecord(id="soon", registration="PR-CCC", etd=time(8, 0)),
        FlightRecord(id="overdue", registration="PR-DDD", etd=time(7, 0)),
        FlightRecord(id="mid", registration="PR-EEE", etd=time(9, 0)),
    ]


class TestBuildBoard:
    """Tests for build_board()."""

    def test_order(self, flights, board_now):
        board = FlightBoardService().build_board(flights, board_now)
        assert list(board["flight_id"]) == ["overdue", "soon", "mid", "late", "unscheduled"]

    def test_priority_flags(self, flights, board_now):
        board = FlightBoardService().build_board(flights, board_now).set_index("flight_id")

        assert bool(board.loc["overdue", "is_priority"]) is True
        assert bool(board.loc["soon", "is_priority"]) is True
        assert bool(board.loc["mid", "is_priority"]) is False
        assert bool(board.loc["unscheduled", "is_priority"]) is False

    def test_minutes_to_departure(self, flights, board_now):
        board = FlightBoardService().build_board(flights, board_now).set_index("flight_id")

        assert board.loc["soon", "minutes_to_departure"] == pytest.approx(30.0)
        assert board.loc["overdue", "minutes_to_departure"] == pytest.approx(-30.0)
        assert pd.isna(board.loc["unscheduled", "minutes_to_departure"])
        assert board.loc["unscheduled", "etd"] == ""
        assert board.loc["soon", "etd"] == "08:00"

    def test_columns_match_schema(self, flights, board_now):
        board = FlightBoardService().build_board(flights, board_now)

        assert list(board.columns) == BOARD_COLUMNS
        FlightBoardSchema.validate(board)

    def test_empty_roster(self, board_now):
        board = FlightBoardService().build_board([], board_now)

        assert board.empty
        assert list(board.columns) == BOARD_COLUMNS

    def test_custom_window(self, flights, board_now):
        board = FlightBoardService(window_minutes=120).build_board(flights, board_now)
        assert int(board["is_priority"].sum()) == 3

    def test_log_count(self, board_now):
        board = FlightBoardService().build_board(
            [FlightRecord(id="a", registration="PR-AAA")], board_now
        )
        assert int(board.loc[0, "log_count"]) == 0


class TestFlightBoardSchema:
    """Schema contract checks."""

    def test_rejects_unknown_status(self, flights, board_now):
        board = FlightBoardService().build_board(flights, board_now)
        board.loc[0, "status"] = "TAXIING"

        with pytest.raises(pa.errors.SchemaError):
            FlightBoardSchema.validate(board)

    def test_rejects_duplicate_ids(self, flights, board_now):
        board = FlightBoardService().build_board(flights, board_now)
        board.loc[1, "flight_id"] = board.loc[0, "flight_id"]

        with pytest.raises(pa.errors.SchemaError):
            FlightBoardSchema.validate(board)


class TestPriorityQueue:
    """Tests for priority_queue()."""

    def test_only_priority_flights_most_urgent_first(self, flights, board_now):
        queue = FlightBoardService().priority_queue(flights, board_now)
        assert [f.id for f in queue] == ["overdue", "soon"]

    def test_empty_when_nothing_due(self, board_now):
        flights = [FlightRecord(id="x", registration="PR-XXX", etd=time(15, 0))]
        assert FlightBoardService().priority_queue(flights, board_now) == []
