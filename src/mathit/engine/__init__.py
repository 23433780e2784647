"""
Engine layer: operators, pool and error taxonomy.

This module provides:
- The closed operator enum (operations.py)
- Number pool with slot tokens (pool.py)
- Engine exceptions (errors.py)
"""

from .errors import (
    MathitError,
    DivisionByZeroError,
    InvalidSelectionError,
    GenerationError,
)
from .operations import Operation, CANONICAL_ORDER
from .pool import Slot, NumberPool

__all__ = [
    # Errors
    'MathitError',
    'DivisionByZeroError',
    'InvalidSelectionError',
    'GenerationError',
    # Operators
    'Operation',
    'CANONICAL_ORDER',
    # Pool
    'Slot',
    'NumberPool',
]
