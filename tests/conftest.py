"""Shared pytest fixtures for mathit tests."""

import pytest

from mathit.engine.pool import NumberPool
from mathit.play.session import PuzzleSession, SessionListener


# Seeds used across tests
SEED = 42
OTHER_SEED = 1337


class RecordingListener(SessionListener):
    """Records every notification as (name, payload) in order."""

    def __init__(self):
        self.events = []

    def on_level_started(self, puzzle):
        self.events.append(("level_started", puzzle))

    def on_round_changed(self, round_state):
        self.events.append(("round_changed", round_state.to_dict()))

    def on_merge_success(self, pool):
        self.events.append(("merge_success", pool))

    def on_merge_failure(self):
        self.events.append(("merge_failure", None))

    def on_puzzle_complete(self, final_value, target):
        self.events.append(("puzzle_complete", (final_value, target)))

    def names(self):
        return [name for name, _ in self.events]

    def of(self, name):
        return [payload for event, payload in self.events if event == name]


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def session(listener):
    """Level 0 session: two numbers, addition only."""
    return PuzzleSession(seed=SEED, level_index=0, listeners=[listener])


@pytest.fixture
def make_pool():
    """Build a NumberPool from plain values."""
    def _make(*values):
        return NumberPool(values)
    return _make


@pytest.fixture
def second_listener():
    return RecordingListener()
