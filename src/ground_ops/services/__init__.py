"""
Domain services for the ground operations engine.

Services are stateless computations over their explicit inputs plus the
injected clock and id generator.
"""

from src.ground_ops.services.assignment_service import AssignmentService, queue_warning
from src.ground_ops.services.audit_log import AuditLogFactory
from src.ground_ops.services.flight_board_service import FlightBoardService
from src.ground_ops.services.flight_intake_service import (
    FlightIntakeService,
    is_priority_candidate,
    parse_optional_time,
    parse_time_of_day,
)

__all__ = [
    "AssignmentService",
    "AuditLogFactory",
    "FlightBoardService",
    "FlightIntakeService",
    "is_priority_candidate",
    "parse_optional_time",
    "parse_time_of_day",
    "queue_warning",
]
