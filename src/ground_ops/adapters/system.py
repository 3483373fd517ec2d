"""
Production clock and id generator adapters.
"""

from __future__ import annotations

import random
import string
from datetime import datetime
from typing import Optional

_ALPHABET = string.digits + string.ascii_lowercase


class SystemClock:
    """Clock backed by the host's local wall clock."""

    def now(self) -> datetime:
        return datetime.now()


class TimestampIdGenerator:
    """
    Id generator combining a millisecond timestamp with a random suffix.

    The suffix (base-36, SUFFIX_LENGTH chars) keeps ids distinct when
    several entries are minted within the same millisecond.

    Attributes:
        _rng: Random source; pass a seeded random.Random for replay.
    """

    SUFFIX_LENGTH = 7

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def new_id(self, at: datetime) -> str:
        millis = int(at.timestamp() * 1000)
        suffix = "".join(self._rng.choice(_ALPHABET) for _ in range(self.SUFFIX_LENGTH))
        return f"{millis}{suffix}"
