"""
Exception hierarchy for the puzzle engine.

Error classes:
    MathitError: Base class for everything the engine raises
    DivisionByZeroError: Expected, recoverable merge failure
    InvalidSelectionError: Stale or out-of-range selection (programming error)
    GenerationError: Puzzle generation could not make progress
"""


class MathitError(Exception):
    """Base class for engine errors."""


class DivisionByZeroError(MathitError, ZeroDivisionError):
    """Raised when DIVIDE is applied with an exact zero divisor.

    Recoverable: the generator retries with another pair, the resolver
    reports a failed merge and play continues with the same pool.
    """

    def __init__(self, dividend: float):
        self.dividend = dividend
        super().__init__(f"Cannot divide {dividend} by zero")


class InvalidSelectionError(MathitError):
    """A selection no longer refers to a slot of the current pool.

    Only happens when the round state was not reset after a resolution,
    so it is never shown to the player.
    """

    def __init__(self, message: str, token: int = None, index: int = None):
        self.token = token
        self.index = index
        super().__init__(message)


class GenerationError(MathitError):
    """The target simulation found no merge that can succeed."""


__all__ = [
    'MathitError',
    'DivisionByZeroError',
    'InvalidSelectionError',
    'GenerationError',
]
