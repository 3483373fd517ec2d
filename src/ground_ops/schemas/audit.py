"""
Audit log value types.

Every flight (or other entity) carries an append-only sequence of
AuditLogEntry values. Entries are created once and never modified.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class LogType(Enum):
    """Category tag of an audit log entry."""

    SYSTEM = "SYSTEM"
    """Generated by the engine itself (e.g. manual flight creation)."""

    OPERATOR_ACTION = "OPERATOR-ACTION"
    """A designation or other action performed on behalf of an operator."""

    MANUAL = "MANUAL"
    """Free-text note entered by a desk user."""

    ALERT = "ALERT"
    """Operational alert raised by the host application."""


@dataclass(frozen=True)
class AuditLogEntry:
    """
    Immutable audit trail record.

    Attributes:
        id: Unique id (creation timestamp in ms plus a random suffix).
        timestamp: Creation instant.
        type: Category tag.
        message: Free text.
        author: Identity of the actor that caused the entry.
    """

    id: str
    timestamp: datetime
    type: LogType
    message: str
    author: str
