"""
Exception hierarchy for the invasion engine.

Two families matter to callers:
- ConfigurationError: bad input detected before the run starts
  (unknown direction, too many aliens, malformed map file)
- StuckPopulationError: the move loop found no legal move while aliens remain

Neither is retryable. The engine raises and the caller decides.
"""


class InvasionError(Exception):
    """Base class for all invasion errors."""


class ConfigurationError(InvasionError, ValueError):
    """Invalid world or run configuration, detected before the simulation loop."""


class MapFormatError(ConfigurationError):
    """A map definition line does not follow the expected schema."""

    def __init__(self, message: str, line_number: int | None = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class StuckPopulationError(InvasionError, RuntimeError):
    """No alien in the world has a legal move."""


class InvariantError(InvasionError, AssertionError):
    """The world graph is internally inconsistent."""
