"""
Clock and identity port interfaces.

Services never read the wall clock or a random source directly. Hosts
inject these collaborators so tests can supply fixed values and assert
exact outputs.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Source of the current local instant."""

    def now(self) -> datetime:
        """
        Get the current instant.

        Returns:
            Local datetime; intake and priority checks interpret it in the
            same clock as the ETD/ETA time-of-day values.
        """
        ...


@runtime_checkable
class IdGenerator(Protocol):
    """Source of unique identifiers for flights and audit entries."""

    def new_id(self, at: datetime) -> str:
        """
        Mint a new identifier.

        Args:
            at: Creation instant the id is derived from.

        Returns:
            Identifier unique even for calls sharing the same instant.
        """
        ...
