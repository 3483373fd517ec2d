"""
Configuration module for the ground operations rule engine.

Loads environment variables (optionally from a .env file) and exposes
them as an immutable Settings object.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from src.ground_ops.exceptions import ConfigurationError

# Load environment variables from .env file
load_dotenv()

DEFAULT_PRIORITY_WINDOW_MINUTES = 60
DEFAULT_ACTOR = "DESK-MANAGER"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings for the intake and assignment services.

    Attributes:
        priority_window_minutes: Flights departing in less than this many
            minutes are fast-tracked into the priority queue.
        default_actor: Author recorded on audit entries when the caller
            supplies no identity.
        log_level: Logging level name used by configure_logging().
    """

    priority_window_minutes: int = DEFAULT_PRIORITY_WINDOW_MINUTES
    default_actor: str = DEFAULT_ACTOR
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.priority_window_minutes <= 0:
            raise ConfigurationError(
                "priority_window_minutes",
                str(self.priority_window_minutes),
                "must be > 0",
            )
        if not self.default_actor:
            raise ConfigurationError("default_actor", self.default_actor, "cannot be empty")


def load_settings() -> Settings:
    """
    Build Settings from GROUND_OPS_* environment variables.

    Returns:
        Settings with defaults for every unset variable.

    Raises:
        ConfigurationError: If a variable is set to an unusable value.
    """
    raw_window = os.getenv("GROUND_OPS_PRIORITY_WINDOW_MINUTES")
    window = DEFAULT_PRIORITY_WINDOW_MINUTES
    if raw_window:
        try:
            window = int(raw_window)
        except ValueError as exc:
            raise ConfigurationError(
                "GROUND_OPS_PRIORITY_WINDOW_MINUTES", raw_window, "not an integer"
            ) from exc

    return Settings(
        priority_window_minutes=window,
        default_actor=os.getenv("GROUND_OPS_DEFAULT_ACTOR") or DEFAULT_ACTOR,
        log_level=(os.getenv("GROUND_OPS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for hosts that run the engine as an app."""
    logging.basicConfig(
        level=getattr(logging, (level or DEFAULT_LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
