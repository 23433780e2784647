"""
Puzzle generation.

This module provides:
- Seeded puzzle generator and difficulty curves (generator.py)
"""

from .generator import (
    GeneratorConfig,
    PuzzleGenerator,
    generate_puzzle,
    lerp,
    pool_size_for_level,
    operator_count_for_level,
    operators_for_level,
)

__all__ = [
    'GeneratorConfig',
    'PuzzleGenerator',
    'generate_puzzle',
    'lerp',
    'pool_size_for_level',
    'operator_count_for_level',
    'operators_for_level',
]
