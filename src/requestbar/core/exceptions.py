"""Exceptions raised by requestbar collectors."""


class DebugBarError(Exception):
    """Base class for all requestbar errors."""


class MeasurementError(DebugBarError):
    """Raised when stopping a measure that has no open span.

    Attributes:
        name: Name of the measure that could not be stopped.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Failed stopping measure '{name}' because it hasn't been started"
        )
