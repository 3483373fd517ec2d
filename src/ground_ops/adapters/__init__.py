"""
Adapter implementations for the ground operations engine.

Adapters implement the port interfaces (clock, id generation) and the
host-side storage the services' outputs are persisted to.
"""

from src.ground_ops.adapters.roster import InMemoryRoster
from src.ground_ops.adapters.system import SystemClock, TimestampIdGenerator

__all__ = [
    "InMemoryRoster",
    "SystemClock",
    "TimestampIdGenerator",
]
