"""
Interactive play: selection state machine, round resolution, sessions.

This module provides:
- Round selection state machine (state.py)
- Round resolver (resolver.py)
- Puzzle session and notification interface (session.py)
"""

from .state import (
    Selection,
    Highlight,
    HIGHLIGHT_COLORS,
    RoundState,
)

from .resolver import (
    MergeStatus,
    MergeResult,
    RoundResolver,
)

from .session import (
    SessionPhase,
    SessionListener,
    PuzzleSession,
)

__all__ = [
    # State
    'Selection',
    'Highlight',
    'HIGHLIGHT_COLORS',
    'RoundState',
    # Resolver
    'MergeStatus',
    'MergeResult',
    'RoundResolver',
    # Session
    'SessionPhase',
    'SessionListener',
    'PuzzleSession',
]
