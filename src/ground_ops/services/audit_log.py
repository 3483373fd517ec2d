"""
Audit log factory shared by the intake and assignment services.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from src.ground_ops.ports.clock import Clock, IdGenerator
from src.ground_ops.schemas.audit import AuditLogEntry, LogType


class AuditLogFactory:
    """
    Mints AuditLogEntry values from the injected clock and id source.

    Each call produces a new entry with its own id, so two identical
    requests never share an audit record.
    """

    def __init__(self, clock: Clock, id_generator: IdGenerator) -> None:
        self._clock = clock
        self._id_generator = id_generator

    def create(
        self,
        log_type: LogType,
        message: str,
        author: str,
        at: Optional[datetime] = None,
    ) -> AuditLogEntry:
        """
        Create a new audit entry.

        Args:
            log_type: Category tag.
            message: Free text.
            author: Acting identity.
            at: Creation instant. If None, read from the clock.

        Returns:
            Immutable AuditLogEntry.
        """
        timestamp = at if at is not None else self._clock.now()
        return AuditLogEntry(
            id=self._id_generator.new_id(timestamp),
            timestamp=timestamp,
            type=log_type,
            message=message,
            author=author,
        )
