"""
End-of-level outcome classification.

Compares the last value left in the pool with the level target:

    diff == 0          -> PERFECT_WIN
    0 < diff <= 0.5    -> CLOSE_WIN
    diff > 0.5         -> FAILED

Consumers use the outcome to decide which buttons to offer: "next level"
on any win, "retry" whenever the win was not perfect.

Usage:
    from mathit.outcome import OutcomeClassifier

    classifier = OutcomeClassifier()
    outcome = classifier.classify(final_value=10.3, target=10.0)
    print(classifier.message(10.3, 10.0))   # Close enough! 10.300 == 10
"""

from enum import Enum
import math

# Largest distance from the target still counted as a win
CLOSE_WIN_TOLERANCE = 0.5


class Outcome(str, Enum):
    """How close the final value came to the target."""
    PERFECT_WIN = "perfect_win"
    CLOSE_WIN = "close_win"
    FAILED = "failed"

    @property
    def is_win(self) -> bool:
        return self is not Outcome.FAILED

    @property
    def offers_next_level(self) -> bool:
        """Next level is offered on perfect and close wins."""
        return self.is_win

    @property
    def offers_retry(self) -> bool:
        """Retry is offered whenever the win was not perfect."""
        return self is not Outcome.PERFECT_WIN


# End screen background per outcome
OUTCOME_COLORS = {
    Outcome.PERFECT_WIN: "43C775",
    Outcome.CLOSE_WIN: "A3A225",
    Outcome.FAILED: "F31215",
}


def format_number(value: float) -> str:
    """One decimal place with a trailing ``.0`` trimmed (``7.0`` -> ``7``)."""
    text = f"{value:.1f}"
    while text.endswith(".0"):
        text = text[:-2]
    return text


def format_target(value: float) -> str:
    """Full-precision display, integral values without a decimal part."""
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def classify_outcome(final_value: float, target: float,
                     tolerance: float = CLOSE_WIN_TOLERANCE) -> Outcome:
    """
    Classify a final value against the target.

    Args:
        final_value: The value left in the pool.
        target: The level target.
        tolerance: Largest difference counted as a close win.

    Returns:
        The Outcome for the pair.
    """
    diff = abs(final_value - target)
    if diff == 0:
        return Outcome.PERFECT_WIN
    if diff <= tolerance:
        return Outcome.CLOSE_WIN
    # NaN lands here too
    return Outcome.FAILED


class OutcomeClassifier:
    """
    Classifies results and renders the end screen text.

    Attributes:
        tolerance: Largest difference counted as a close win.
    """

    def __init__(self, tolerance: float = CLOSE_WIN_TOLERANCE):
        if tolerance < 0:
            raise ValueError("tolerance must be non-negative")
        self.tolerance = tolerance

    def classify(self, final_value: float, target: float) -> Outcome:
        return classify_outcome(final_value, target, self.tolerance)

    def message(self, final_value: float, target: float) -> str:
        """Headline shown on the end-of-level screen."""
        outcome = self.classify(final_value, target)
        if outcome is Outcome.PERFECT_WIN:
            return "PERFECT WIN!"
        if outcome is Outcome.CLOSE_WIN:
            return f"Close enough! {final_value:.3f} == {format_target(target)}"
        return f"Target was {format_target(target)} but you had {format_number(final_value)}"


__all__ = [
    'Outcome',
    'OutcomeClassifier',
    'CLOSE_WIN_TOLERANCE',
    'OUTCOME_COLORS',
    'classify_outcome',
    'format_number',
    'format_target',
]
