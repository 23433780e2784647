#!/usr/bin/env python3
"""
Exhaustive merge search.

Finds a sequence of merges that reduces a pool to the target using only
the allowed operators. The search is a depth-first walk over every
ordered pair and operator; pools already proven unable to reach the
target are pruned through a transposition table keyed on the sorted
pool, so different merge orders reaching the same values are explored
once.

A pool of n values needs exactly n - 1 merges, so the depth is bounded
by the pool size; the node budget bounds the breadth.

Usage:
    from mathit.search import PuzzleSolver, SolverConfig

    solver = PuzzleSolver(SolverConfig(max_nodes=50_000))
    result = solver.solve(puzzle.pool, puzzle.operators, puzzle.target)
    if result.found:
        for step in result.steps:
            print(step.describe())
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import logging

from ..engine.errors import DivisionByZeroError
from ..engine.operations import Operation
from ..types import MergeStep
from .transposition import TranspositionTable, pool_key

logger = logging.getLogger(__name__)

# a op b == b op a: only one ordering needs exploring
COMMUTATIVE = frozenset({Operation.ADD, Operation.MULTIPLY})


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class SolverConfig:
    """
    Configuration for the merge search.

    Attributes:
        max_nodes: Maximum pools to visit before giving up.
        tolerance: Largest distance from the target accepted as a solution.
        table_size: Dead-pool table capacity.
    """
    max_nodes: int = 200_000
    tolerance: float = 0.0
    table_size: int = 1_000_000


@dataclass
class SolveResult:
    """
    Outcome of a search.

    Attributes:
        found: A merge sequence reaching the target was found.
        steps: That sequence (empty if not found).
        nodes_explored: Pools visited.
        exhausted: The node budget ran out before the search finished.
        closest_value: Final value nearest to the target seen so far.
        closest_steps: Merges leading to closest_value.
        table_stats: Dead-pool table statistics.
    """
    found: bool
    steps: List[MergeStep]
    nodes_explored: int
    exhausted: bool
    closest_value: Optional[float] = None
    closest_steps: List[MergeStep] = field(default_factory=list)
    table_stats: dict = field(default_factory=dict)


class _NodeBudgetExhausted(Exception):
    pass


# =============================================================================
# SOLVER
# =============================================================================

class PuzzleSolver:
    """Depth-first merge search with pool memoization."""

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()
        self.table = TranspositionTable(max_size=self.config.table_size)
        self.nodes_explored = 0
        self._target = 0.0
        self._operators: Sequence[Operation] = ()
        self._closest_value: Optional[float] = None
        self._closest_steps: List[MergeStep] = []

    def solve(
        self,
        pool: Sequence[float],
        operators: Sequence[Operation],
        target: float,
    ) -> SolveResult:
        """
        Search for merges reducing ``pool`` to ``target``.

        Args:
            pool: Starting values.
            operators: Allowed operators.
            target: Value to reach.

        Returns:
            SolveResult with the first solution found in search order.
        """
        if not pool:
            raise ValueError("Cannot solve an empty pool")

        self.table.clear()
        self.nodes_explored = 0
        self._target = target
        self._operators = tuple(operators)
        self._closest_value = None
        self._closest_steps = []

        steps: List[MergeStep] = []
        exhausted = False
        try:
            found = self._search([float(v) for v in pool], steps)
        except _NodeBudgetExhausted:
            found = False
            exhausted = True
            logger.info("Search budget of %d nodes exhausted", self.config.max_nodes)

        logger.debug(
            "Solve %s -> %s: found=%s nodes=%d",
            list(pool), target, found, self.nodes_explored,
        )
        return SolveResult(
            found=found,
            steps=list(steps) if found else [],
            nodes_explored=self.nodes_explored,
            exhausted=exhausted,
            closest_value=self._closest_value,
            closest_steps=self._closest_steps,
            table_stats=self.table.stats(),
        )

    def _search(self, values: List[float], steps: List[MergeStep]) -> bool:
        self.nodes_explored += 1
        if self.nodes_explored > self.config.max_nodes:
            raise _NodeBudgetExhausted()

        if len(values) == 1:
            return self._record_final(values[0], steps)

        key = pool_key(values)
        if self.table.is_dead(key):
            return False

        n = len(values)
        for first in range(n):
            for second in range(n):
                if first == second:
                    continue
                for operation in self._operators:
                    if operation in COMMUTATIVE and first > second:
                        continue
                    try:
                        result = operation.apply(values[first], values[second])
                    except DivisionByZeroError:
                        continue

                    merged = list(values)
                    merged[first] = result
                    del merged[second]

                    steps.append(MergeStep(values[first], values[second], operation, result))
                    if self._search(merged, steps):
                        return True
                    steps.pop()

        self.table.mark_dead(key)
        return False

    def _record_final(self, value: float, steps: List[MergeStep]) -> bool:
        diff = abs(value - self._target)
        if self._closest_value is None or diff < abs(self._closest_value - self._target):
            self._closest_value = value
            self._closest_steps = list(steps)
        return diff <= self.config.tolerance


def solve_puzzle(puzzle, config: Optional[SolverConfig] = None) -> SolveResult:
    """Solve a generated Puzzle with its own operator subset."""
    return PuzzleSolver(config).solve(puzzle.pool, puzzle.operators, puzzle.target)


__all__ = ['COMMUTATIVE', 'SolverConfig', 'SolveResult', 'PuzzleSolver', 'solve_puzzle']
