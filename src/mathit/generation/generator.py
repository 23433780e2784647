#!/usr/bin/env python3
"""
Deterministic puzzle generation.

A level is fully determined by ``(seed, level_index)``. The generator
draws a pool of small integers, picks a prefix of the canonical operator
order, then plays random merges on a copy of the pool until one value is
left. That value becomes the target, so every puzzle is solvable with
its own operator subset by construction.

Difficulty grows with the level index:
    pool size:      2 at level 0, +1 roughly every 2.5 levels, capped at 10
    operator count: + only at level 0, all four from level 6

Usage:
    from mathit.generation import generate_puzzle

    pool, operators, target = generate_puzzle(seed=42, level_index=3)

    # Custom difficulty curve
    config = GeneratorConfig(max_pool_size=6)
    puzzle = PuzzleGenerator(config).generate(LevelContext(seed=42, level_index=3))
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple
import logging
import random

from ..engine.errors import DivisionByZeroError, GenerationError
from ..engine.operations import CANONICAL_ORDER, Operation
from ..types import LevelContext, MergeStep, Puzzle

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class GeneratorConfig:
    """
    Difficulty curve and value range.

    Attributes:
        min_pool_size: Pool size at level 0.
        max_pool_size: Pool size cap.
        pool_ramp_levels: Levels over which the pool grows from min to max.
        min_operator_count: Operators available at the easiest level.
        max_operator_count: Operator count cap (at most 4).
        operator_ramp_levels: Levels over which operators are unlocked.
        min_value: Smallest value drawn into the pool (inclusive).
        max_value: Largest value drawn into the pool (inclusive).
        max_failed_draws: Consecutive failed random merges tolerated before
            the simulation falls back to a deterministic pair scan.
    """
    min_pool_size: int = 2
    max_pool_size: int = 10
    pool_ramp_levels: int = 20
    min_operator_count: int = 1
    max_operator_count: int = 4
    operator_ramp_levels: int = 8
    min_value: int = 1
    max_value: int = 10
    max_failed_draws: int = 64

    def __post_init__(self):
        if not 1 <= self.min_pool_size <= self.max_pool_size:
            raise ValueError("pool sizes must satisfy 1 <= min_pool_size <= max_pool_size")
        if not 1 <= self.min_operator_count <= self.max_operator_count <= len(CANONICAL_ORDER):
            raise ValueError(
                f"operator counts must satisfy 1 <= min <= max <= {len(CANONICAL_ORDER)}"
            )
        if self.pool_ramp_levels <= 0 or self.operator_ramp_levels <= 0:
            raise ValueError("ramp lengths must be positive")
        if self.min_value > self.max_value:
            raise ValueError("min_value must not exceed max_value")
        if self.max_failed_draws < 1:
            raise ValueError("max_failed_draws must be at least 1")


# =============================================================================
# DIFFICULTY CURVES
# =============================================================================

def lerp(start_value: float, end_value: float, ratio: float) -> float:
    """Linear interpolation, unclamped."""
    return start_value + (end_value - start_value) * ratio


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))


def pool_size_for_level(level_index: int, config: Optional[GeneratorConfig] = None) -> int:
    """
    Number of values in the pool at ``level_index``.

    Interpolates from min to max pool size over ``pool_ramp_levels``;
    the interpolated value is truncated, then clamped.
    """
    config = config or GeneratorConfig()
    ratio = (level_index + 1) / config.pool_ramp_levels
    raw = int(lerp(config.min_pool_size, config.max_pool_size, ratio))
    return _clamp(raw, config.min_pool_size, config.max_pool_size)


def operator_count_for_level(level_index: int, config: Optional[GeneratorConfig] = None) -> int:
    """
    Number of operators unlocked at ``level_index``.

    Interpolates from min to max count over ``operator_ramp_levels``
    (offset by two levels); truncated, then clamped.
    """
    config = config or GeneratorConfig()
    ratio = (level_index + 2) / config.operator_ramp_levels
    raw = int(lerp(config.min_operator_count, config.max_operator_count, ratio))
    return _clamp(raw, config.min_operator_count, config.max_operator_count)


def operators_for_level(level_index: int, config: Optional[GeneratorConfig] = None) -> Tuple[Operation, ...]:
    """Prefix of the canonical operator order unlocked at ``level_index``."""
    return CANONICAL_ORDER[:operator_count_for_level(level_index, config)]


# =============================================================================
# GENERATOR
# =============================================================================

class PuzzleGenerator:
    """
    Generates solvable puzzles from a level context.

    Every call builds its own ``random.Random`` from the context's
    combined seed; the module-level RNG is never touched, so identical
    inputs always reproduce the same puzzle.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()

    def generate(self, context: LevelContext) -> Puzzle:
        """
        Generate the puzzle for ``context``.

        Args:
            context: Seed and level index.

        Returns:
            Puzzle with the drawn pool, unlocked operators and a reachable target.

        Raises:
            GenerationError: The simulation found no merge that can succeed
                (only possible with a custom value range including zero).
        """
        rng = random.Random(context.combined_seed)

        count = pool_size_for_level(context.level_index, self.config)
        pool = tuple(
            float(rng.randint(self.config.min_value, self.config.max_value))
            for _ in range(count)
        )
        operators = operators_for_level(context.level_index, self.config)

        target, steps = self._simulate(list(pool), operators, rng)

        logger.debug(
            "Generated level %d (seed %d): pool=%s operators=%s target=%s",
            context.level_index, context.seed, pool,
            "".join(op.symbol for op in operators), target,
        )
        return Puzzle(
            pool=pool,
            operators=operators,
            target=target,
            context=context,
            simulation=tuple(steps),
        )

    def _simulate(
        self,
        values: List[float],
        operators: Tuple[Operation, ...],
        rng: random.Random,
    ) -> Tuple[float, List[MergeStep]]:
        """Merge random pairs until one value remains."""
        steps: List[MergeStep] = []
        failed_draws = 0

        while len(values) > 1:
            first, second = rng.sample(range(len(values)), 2)
            operation = rng.choice(operators)
            try:
                result = operation.apply(values[first], values[second])
            except DivisionByZeroError:
                failed_draws += 1
                if failed_draws < self.config.max_failed_draws:
                    continue
                logger.warning(
                    "%d failed draws in a row on %s, scanning for a viable merge",
                    failed_draws, values,
                )
                first, second, operation, result = self._first_viable_merge(values, operators)

            failed_draws = 0
            steps.append(MergeStep(values[first], values[second], operation, result))
            values[first] = result
            del values[second]

        return values[0], steps

    @staticmethod
    def _first_viable_merge(
        values: List[float],
        operators: Tuple[Operation, ...],
    ) -> Tuple[int, int, Operation, float]:
        """First (first, second, operator) in scan order whose merge succeeds."""
        for first in range(len(values)):
            for second in range(len(values)):
                if first == second:
                    continue
                for operation in operators:
                    try:
                        return first, second, operation, operation.apply(values[first], values[second])
                    except DivisionByZeroError:
                        continue
        raise GenerationError(
            f"No merge of {values} succeeds with operators "
            f"{''.join(op.symbol for op in operators)}"
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def generate_puzzle(
    seed: int,
    level_index: int,
    config: Optional[GeneratorConfig] = None,
) -> Puzzle:
    """
    Generate the puzzle for ``(seed, level_index)``.

    Pure function: same inputs, same puzzle.

    Args:
        seed: Session seed (unsigned 64-bit).
        level_index: Zero-based level number.
        config: Difficulty curve (defaults if None).

    Returns:
        Puzzle, which unpacks as ``(pool, operators, target)``.
    """
    return PuzzleGenerator(config).generate(LevelContext(seed=seed, level_index=level_index))


# =============================================================================
# CLI
# =============================================================================

if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Print the difficulty curve")
    parser.add_argument("--levels", type=int, default=25, help="Number of levels to show")
    parser.add_argument("--seed", type=int, default=0, help="Seed for the sample puzzles")
    args = parser.parse_args()

    print(f"{'Level':>6} {'Pool':>5} {'Ops':>4}  Sample")
    print("-" * 60)
    for level in range(args.levels):
        puzzle = generate_puzzle(args.seed, level)
        ops = "".join(op.symbol for op in puzzle.operators)
        print(f"{level + 1:>6} {len(puzzle.pool):>5} {ops:>4}  "
              f"{[int(v) for v in puzzle.pool]} -> {puzzle.target}")
