"""
Arithmetic operators available to the player.

The set is closed: ADD, SUBTRACT, MULTIPLY, DIVIDE. New operators are
added here and nowhere else.
"""

from enum import Enum
from typing import Tuple

from .errors import DivisionByZeroError


class Operation(str, Enum):
    """An operator that merges two pool values into one."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self) -> str:
        """Single-character display form."""
        return self.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operation":
        """Parse a display symbol back into an Operation.

        Raises:
            ValueError: If the symbol is not one of ``+ - * /``.
        """
        try:
            return cls(symbol.strip())
        except ValueError:
            raise ValueError(f"Unknown operator symbol: {symbol!r}") from None

    def apply(self, a: float, b: float) -> float:
        """
        Apply the operator to ``a`` and ``b`` (in that order).

        Args:
            a: Left operand (first selected value).
            b: Right operand (second selected value).

        Returns:
            The merged value.

        Raises:
            DivisionByZeroError: DIVIDE with ``b == 0.0`` exactly.
        """
        if self is Operation.ADD:
            return a + b
        if self is Operation.SUBTRACT:
            return a - b
        if self is Operation.MULTIPLY:
            return a * b
        # Exact zero only: generated pools are integer valued
        if b == 0.0:
            raise DivisionByZeroError(a)
        return a / b

    @property
    def can_fail(self) -> bool:
        return self is Operation.DIVIDE


# Easiest levels get a prefix of this order
CANONICAL_ORDER: Tuple[Operation, ...] = (
    Operation.ADD,
    Operation.SUBTRACT,
    Operation.MULTIPLY,
    Operation.DIVIDE,
)


__all__ = ['Operation', 'CANONICAL_ORDER']
