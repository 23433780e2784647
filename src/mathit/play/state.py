"""
Selection state machine for one merge round.

A round collects two operands (pool slots) and one operator. Every
selection toggles: picking something already selected clears it.
Picking a third slot while both operands are bound, or a second
operator while one is bound, is ignored.

Slot selection and operator selection are independent sub-machines; the
round is *ready* once all three parts are bound.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..engine.operations import Operation


@dataclass(frozen=True)
class Selection:
    """
    Reference to one pool slot.

    Attributes:
        token: Slot token minted by the pool; the identity of the selection.
        index: Pool index at selection time. Advisory only: it is
            re-resolved from the token when the round is played.
    """
    token: int
    index: int


class Highlight(str, Enum):
    """Read-only highlight projection for rendering."""
    FIRST_OPERAND = "first_operand"
    SECOND_OPERAND = "second_operand"
    OPERATOR = "operator"

    @property
    def color(self) -> str:
        return HIGHLIGHT_COLORS[self]


HIGHLIGHT_COLORS = {
    Highlight.FIRST_OPERAND: "00FF00",   # green
    Highlight.SECOND_OPERAND: "0000FF",  # blue
    Highlight.OPERATOR: "9ACD32",        # yellow-green
}


@dataclass
class RoundState:
    """
    Pending picks of the current round.

    Attributes:
        operator: Selected operator, if any.
        operand1: First selected slot, if any.
        operand2: Second selected slot, if any.
    """
    operator: Optional[Operation] = None
    operand1: Optional[Selection] = None
    operand2: Optional[Selection] = None

    @property
    def is_ready(self) -> bool:
        """All three parts bound: the round can be resolved."""
        return (self.operator is not None
                and self.operand1 is not None
                and self.operand2 is not None)

    @property
    def is_empty(self) -> bool:
        return self.operator is None and self.operand1 is None and self.operand2 is None

    def select_slot(self, selection: Selection) -> bool:
        """
        Toggle a pool slot.

        Returns:
            True if the state changed, False if the selection was ignored.
        """
        if self.operand1 is not None and self.operand1.token == selection.token:
            self.operand1 = None
            return True
        if self.operand2 is not None and self.operand2.token == selection.token:
            self.operand2 = None
            return True
        if self.operand1 is None:
            self.operand1 = selection
            return True
        if self.operand2 is None:
            self.operand2 = selection
            return True
        # Both operands bound: the player has to deselect one first
        return False

    def select_operator(self, operator: Operation) -> bool:
        """
        Toggle an operator.

        Returns:
            True if the state changed, False if the selection was ignored.
        """
        if self.operator is operator:
            self.operator = None
            return True
        if self.operator is None:
            self.operator = operator
            return True
        return False

    def reset(self):
        """Clear all picks."""
        self.operator = None
        self.operand1 = None
        self.operand2 = None

    def highlights(self) -> Dict[Any, Highlight]:
        """
        Highlight per selected slot token and operator.

        Keys are slot tokens (int) for operands and the Operation for
        the operator.
        """
        result: Dict[Any, Highlight] = {}
        if self.operand1 is not None:
            result[self.operand1.token] = Highlight.FIRST_OPERAND
        if self.operand2 is not None:
            result[self.operand2.token] = Highlight.SECOND_OPERAND
        if self.operator is not None:
            result[self.operator] = Highlight.OPERATOR
        return result

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operator": self.operator.symbol if self.operator else None,
            "operand1": self.operand1.token if self.operand1 else None,
            "operand2": self.operand2.token if self.operand2 else None,
        }


__all__ = ['Selection', 'Highlight', 'HIGHLIGHT_COLORS', 'RoundState']
