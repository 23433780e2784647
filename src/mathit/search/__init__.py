"""
Search over merge sequences.

This module provides:
- Depth-first merge solver (solver.py)
- Dead-pool table for pruning (transposition.py)
"""

from .solver import (
    COMMUTATIVE,
    SolverConfig,
    SolveResult,
    PuzzleSolver,
    solve_puzzle,
)

from .transposition import (
    PoolKey,
    pool_key,
    TranspositionTable,
)

__all__ = [
    # Solver
    'COMMUTATIVE',
    'SolverConfig',
    'SolveResult',
    'PuzzleSolver',
    'solve_puzzle',
    # Transposition
    'PoolKey',
    'pool_key',
    'TranspositionTable',
]
