"""
Engine Errors - Exceptions raised for programming errors.

A missing card or an empty deck is never an error: those operations
are no-ops. Only malformed input (an unknown zone, a command the
reducer does not know) raises.
"""


class EngineError(Exception):
    """Base class for engine errors."""


class UnknownZoneError(EngineError, ValueError):
    """A zone name outside the closed set of eight zones."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unknown zone: {value!r}")
