"""
Round resolution: play a ready round against the pool.

The resolver re-resolves both selections against the current slot
layout, applies the operator, and on success writes the result into the
first operand's slot and removes the second. The round state is reset
in every case. A division by zero is an ordinary failed merge; a stale
selection is a bug and propagates.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
import logging

from ..engine.errors import DivisionByZeroError
from ..engine.pool import NumberPool
from ..types import MergeStep
from .state import RoundState

logger = logging.getLogger(__name__)


class MergeStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class MergeResult:
    """
    Outcome of resolving one round.

    Attributes:
        status: SUCCESS or FAILED.
        pool: Pool values after the round.
        step: The merge that was played (None on failure).
        completed: True when the pool is down to one value.
    """
    status: MergeStatus
    pool: Tuple[float, ...]
    step: Optional[MergeStep] = None
    completed: bool = False

    @property
    def succeeded(self) -> bool:
        return self.status is MergeStatus.SUCCESS

    @property
    def final_value(self) -> Optional[float]:
        return self.pool[0] if self.completed else None


class RoundResolver:
    """Applies ready rounds to a pool."""

    def resolve(self, round_state: RoundState, pool: NumberPool) -> MergeResult:
        """
        Play ``round_state`` against ``pool``.

        Args:
            round_state: A ready round; reset before returning.
            pool: The live pool; merged in place on success.

        Returns:
            MergeResult describing the round.

        Raises:
            ValueError: The round is not ready.
            InvalidSelectionError: A selection does not match the pool.
        """
        if not round_state.is_ready:
            raise ValueError("Cannot resolve a round that is not ready")

        operation = round_state.operator
        first_index = pool.resolve_index(round_state.operand1.token, round_state.operand1.index)
        second_index = pool.resolve_index(round_state.operand2.token, round_state.operand2.index)
        first, second = pool[first_index], pool[second_index]

        try:
            value = operation.apply(first, second)
        except DivisionByZeroError:
            round_state.reset()
            logger.debug("Merge failed: %s %s %s", first, operation, second)
            return MergeResult(status=MergeStatus.FAILED, pool=pool.values)

        pool.merge(first_index, second_index, value)
        round_state.reset()

        step = MergeStep(first, second, operation, value)
        logger.debug("Merged %s -> %s", step.describe(), pool.values)
        return MergeResult(
            status=MergeStatus.SUCCESS,
            pool=pool.values,
            step=step,
            completed=pool.is_complete,
        )


__all__ = ['MergeStatus', 'MergeResult', 'RoundResolver']
