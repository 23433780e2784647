"""
Shared type definitions for puzzle generation and play.

This module contains the plain-data types passed between the generator,
the session and the external consumers (rendering, end screen, CLI).

Types:
    LevelContext: Seed and level index that fully determine a puzzle
    MergeStep: One merge in a solution path
    Puzzle: Generated pool, operator subset and target
    GameResult: Final value vs target once the pool is reduced to one
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .engine.operations import Operation
from .outcome import Outcome, classify_outcome, format_number

U64_MASK = (1 << 64) - 1


@dataclass(frozen=True)
class LevelContext:
    """Seed and level index of a level.

    Attributes:
        seed: Session seed (unsigned 64-bit).
        level_index: Zero-based level number; drives difficulty.
    """
    seed: int
    level_index: int = 0

    def __post_init__(self):
        if not 0 <= self.seed <= U64_MASK:
            raise ValueError(f"seed must be an unsigned 64-bit integer, got {self.seed}")
        if not 0 <= self.level_index <= U64_MASK:
            raise ValueError(f"level_index must be an unsigned 64-bit integer, got {self.level_index}")

    @property
    def combined_seed(self) -> int:
        """Seed of the level RNG: ``seed + level_index`` wrapping at 2**64."""
        return (self.seed + self.level_index) & U64_MASK

    def next_level(self) -> "LevelContext":
        return LevelContext(seed=self.seed, level_index=self.level_index + 1)


@dataclass(frozen=True)
class MergeStep:
    """One merge: ``first <operation> second = result``."""
    first: float
    second: float
    operation: Operation
    result: float

    def describe(self) -> str:
        return (f"{format_number(self.first)} {self.operation} "
                f"{format_number(self.second)} = {format_number(self.result)}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "first": self.first,
            "second": self.second,
            "operation": self.operation.symbol,
            "result": self.result,
        }


@dataclass(frozen=True)
class Puzzle:
    """
    A generated level.

    Unpacks as ``pool, operators, target`` for callers that only need
    the boundary triple.

    Attributes:
        pool: Values handed to the player, in draw order.
        operators: Allowed operators, canonical order.
        target: Value the last remaining number is compared to.
        context: Seed and level index the puzzle was generated from.
        simulation: Merges the generator played to derive the target.
    """
    pool: Tuple[float, ...]
    operators: Tuple[Operation, ...]
    target: float
    context: LevelContext
    simulation: Tuple[MergeStep, ...] = field(default=(), compare=False)

    def __iter__(self) -> Iterator[Any]:
        return iter((self.pool, self.operators, self.target))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "seed": self.context.seed,
            "level_index": self.context.level_index,
            "pool": list(self.pool),
            "operators": [op.symbol for op in self.operators],
            "target": self.target,
            "simulation": [step.to_dict() for step in self.simulation],
        }


@dataclass(frozen=True)
class GameResult:
    """Final value of a completed level.

    Attributes:
        final_value: The single value left in the pool.
        target: The level target.
        level_index: Level the result belongs to.
    """
    final_value: float
    target: float
    level_index: int

    @property
    def outcome(self) -> Outcome:
        return classify_outcome(self.final_value, self.target)

    @property
    def score(self) -> Optional[int]:
        """Leaderboard score (1-based level number), None unless the level was won."""
        if not self.outcome.is_win:
            return None
        return self.level_index + 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "final_value": self.final_value,
            "target": self.target,
            "level_index": self.level_index,
            "outcome": self.outcome.value,
            "score": self.score,
        }


def replay(pool: List[float], steps: List[MergeStep]) -> float:
    """Check that ``steps`` can be played on ``pool`` and return the last value.

    Each step consumes one occurrence of its two operands and adds its
    result, so the check is independent of slot positions.

    Raises:
        ValueError: A step uses a value not present, or values remain.
    """
    remaining = list(pool)
    for step in steps:
        for operand in (step.first, step.second):
            if operand not in remaining:
                raise ValueError(f"Step {step.describe()} uses a value not in {remaining}")
            remaining.remove(operand)
        if step.operation.apply(step.first, step.second) != step.result:
            raise ValueError(f"Step {step.describe()} does not evaluate to its result")
        remaining.append(step.result)
    if len(remaining) != 1:
        raise ValueError(f"Replay left {len(remaining)} values: {remaining}")
    return remaining[0]


__all__ = ['LevelContext', 'MergeStep', 'Puzzle', 'GameResult', 'replay', 'U64_MASK']
