"""
Math it: arithmetic merge puzzle engine.

The player gets a pool of numbers and a subset of + - * /, and merges
numbers pairwise until one is left, trying to hit a target. This package
generates solvable puzzles deterministically from a seed and a level
index, and resolves the player's picks into pool updates and an
end-of-level outcome. Rendering and input hit-testing are left to the
consumer.

Submodules:
    engine     - Operators, number pool and exceptions
    generation - Seeded puzzle generation and difficulty curves
    play       - Round selection state, resolution and sessions
    search     - Merge-sequence solver and transposition table
    outcome    - End-of-level classification

Usage:
    from mathit import generate_puzzle, PuzzleSession

    pool, operators, target = generate_puzzle(seed=42, level_index=0)
    session = PuzzleSession(seed=42)
"""

from .engine import (
    MathitError,
    DivisionByZeroError,
    InvalidSelectionError,
    GenerationError,
    Operation,
    CANONICAL_ORDER,
    Slot,
    NumberPool,
)

# Shared types
from .types import LevelContext, MergeStep, Puzzle, GameResult, replay

# Outcome
from .outcome import Outcome, OutcomeClassifier, classify_outcome, format_number

# Generation
from .generation import GeneratorConfig, PuzzleGenerator, generate_puzzle

# Play
from .play import (
    Selection,
    Highlight,
    RoundState,
    MergeStatus,
    MergeResult,
    RoundResolver,
    SessionPhase,
    SessionListener,
    PuzzleSession,
)

# Search
from .search import SolverConfig, SolveResult, PuzzleSolver, solve_puzzle

__version__ = "0.1.0"

__all__ = [
    # Errors
    "MathitError",
    "DivisionByZeroError",
    "InvalidSelectionError",
    "GenerationError",
    # Engine
    "Operation",
    "CANONICAL_ORDER",
    "Slot",
    "NumberPool",
    # Shared types
    "LevelContext",
    "MergeStep",
    "Puzzle",
    "GameResult",
    "replay",
    # Outcome
    "Outcome",
    "OutcomeClassifier",
    "classify_outcome",
    "format_number",
    # Generation
    "GeneratorConfig",
    "PuzzleGenerator",
    "generate_puzzle",
    # Play
    "Selection",
    "Highlight",
    "RoundState",
    "MergeStatus",
    "MergeResult",
    "RoundResolver",
    "SessionPhase",
    "SessionListener",
    "PuzzleSession",
    # Search
    "SolverConfig",
    "SolveResult",
    "PuzzleSolver",
    "solve_puzzle",
]
