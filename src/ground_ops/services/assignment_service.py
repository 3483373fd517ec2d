"""
Assignment Service - Operator designation with busy detection.

Binds a chosen operator to a flight or vehicle task and flags the
designation when the operator is already occupied, meaning the new task
queues behind their existing workload.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from src.ground_ops.ports.clock import Clock, IdGenerator
from src.ground_ops.schemas.audit import LogType
from src.ground_ops.schemas.operator import OperatorProfile
from src.ground_ops.schemas.result import (
    AssignmentDecision,
    AssignmentResult,
    Rejection,
    RejectionReason,
)
from src.ground_ops.schemas.target import AssignmentTarget
from src.ground_ops.services.audit_log import AuditLogFactory

logger = logging.getLogger(__name__)


def queue_warning(operator: OperatorProfile) -> Optional[str]:
    """
    Warning shown before confirming a designation to a busy operator.

    Args:
        operator: Candidate operator.

    Returns:
        Warning text, or None when the operator is AVAILABLE.
    """
    if operator.is_available:
        return None
    return (
        f"WARNING: operator {operator.war_name} is currently "
        f"{operator.status.value}; confirming this designation queues "
        "the task behind their existing workload."
    )


class AssignmentService:
    """
    Domain service for designating operators.

    The candidate pool is trusted as given: compatibility filtering
    (skills, vehicle type) is the caller's job. Operator state is only
    read, never changed, and no deduplication is attempted: each call
    yields an independent decision with its own log entry.
    """

    def __init__(self, clock: Clock, id_generator: IdGenerator) -> None:
        self._log_factory = AuditLogFactory(clock, id_generator)

    def assign(
        self,
        target: AssignmentTarget,
        operators: Sequence[OperatorProfile],
        chosen_operator_id: str,
        actor: str,
    ) -> AssignmentResult:
        """
        Designate an operator to a target.

        Args:
            target: FlightTarget or VehicleTarget; only target_id and
                descriptor are read.
            operators: Pre-filtered candidate pool with current statuses.
            chosen_operator_id: Operator picked by the caller.
            actor: Acting user, recorded as log author.

        Returns:
            AssignmentDecision with an OPERATOR-ACTION log entry, or a
            Rejection when the operator is not in the pool.
        """
        operator = next(
            (op for op in operators if op.id == chosen_operator_id),
            None,
        )
        if operator is None:
            logger.warning(
                "Designation to %s rejected: operator %s not in pool of %d",
                target.target_id,
                chosen_operator_id,
                len(operators),
            )
            return Rejection(
                reason=RejectionReason.OPERATOR_NOT_FOUND,
                message=f"Operator '{chosen_operator_id}' not found",
                field="chosen_operator_id",
            )

        message = f"Operator {operator.war_name} designated to {target.descriptor}."
        warning = queue_warning(operator)
        if warning:
            message = f"{message} {warning}"
            logger.warning(
                "Operator %s is %s; task %s queued behind existing work",
                operator.id,
                operator.status.value,
                target.target_id,
            )

        entry = self._log_factory.create(LogType.OPERATOR_ACTION, message, actor)

        logger.info("Operator %s designated to %s", operator.id, target.target_id)
        return AssignmentDecision(
            target_id=target.target_id,
            operator_id=operator.id,
            was_busy_at_assignment=warning is not None,
            resulting_log_entry=entry,
        )
