"""Engine error types."""


class NovaEngineError(Exception):
    """Base class for readiness engine errors."""


class InvalidWorkoutHistoryError(NovaEngineError, TypeError):
    """Raised when the workout history is not a sequence of records.

    ``None``, strings, bytes and mappings are rejected.  Individual
    malformed records inside a valid sequence never raise; they are
    skipped by the engine.
    """

    def __init__(self, received: object) -> None:
        self.received_type = type(received).__name__
        super().__init__(
            f"Workout history must be a list or tuple of records, got {self.received_type}"
        )


class InvalidReferenceTimeError(NovaEngineError, ValueError):
    """Raised when an explicit ``now`` cannot be read as a timestamp."""

    def __init__(self, received: object) -> None:
        self.received = received
        super().__init__(f"Cannot interpret {received!r} as a reference time")


class InvalidConditionError(NovaEngineError, ValueError):
    """Raised for a self-reported condition outside the known set."""

    def __init__(self, condition: str, allowed: tuple[str, ...]) -> None:
        self.condition = condition
        super().__init__(f"Unknown condition '{condition}'. Available: {list(allowed)}")
