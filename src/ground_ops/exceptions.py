"""
Custom exceptions for the ground_ops package.

Domain rule failures (missing registration, unknown operator) are NOT
exceptions: services return them as Rejection values. The classes below
cover faults outside those rules: strict parsing, roster lookups and
configuration.
"""


class GroundOpsError(Exception):
    """Base exception for all ground_ops errors."""

    pass


class InvalidTimeOfDayError(GroundOpsError):
    """Raised by the strict parser when a time string is not HH:MM."""

    def __init__(self, value: str) -> None:
        self.value = value
        message = f"Invalid time of day: {value!r} (expected HH:MM)"
        super().__init__(message)


class TargetNotFoundError(GroundOpsError):
    """Raised when a flight or vehicle is not present in the roster."""

    def __init__(self, kind: str, target_id: str) -> None:
        self.kind = kind
        self.target_id = target_id
        message = f"{kind.capitalize()} '{target_id}' not found in roster"
        super().__init__(message)


class DuplicateEntityError(GroundOpsError):
    """Raised when an entity with the same id is already stored."""

    def __init__(self, kind: str, entity_id: str) -> None:
        self.kind = kind
        self.entity_id = entity_id
        message = f"{kind.capitalize()} '{entity_id}' already exists in roster"
        super().__init__(message)


class ConfigurationError(GroundOpsError):
    """Raised when an environment setting has an unusable value."""

    def __init__(self, name: str, value: str, reason: str = "") -> None:
        self.name = name
        self.value = value
        message = f"Invalid value for {name}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
