"""
Unit tests for round resolution.
"""

import pytest

from mathit.engine.errors import InvalidSelectionError
from mathit.engine.operations import Operation
from mathit.play.resolver import MergeStatus, RoundResolver
from mathit.play.state import RoundState, Selection


def ready_round(pool, first, second, operator):
    """Round selecting pool indices ``first`` and ``second``."""
    slots = pool.slots
    return RoundState(
        operator=operator,
        operand1=Selection(slots[first].token, first),
        operand2=Selection(slots[second].token, second),
    )


@pytest.fixture
def resolver():
    return RoundResolver()


class TestResolve:
    """Tests for RoundResolver.resolve."""

    def test_final_merge_completes(self, resolver, make_pool):
        pool = make_pool(3, 4)
        state = ready_round(pool, 0, 1, Operation.ADD)
        result = resolver.resolve(state, pool)

        assert result.succeeded
        assert result.pool == (7.0,)
        assert result.completed
        assert result.final_value == 7.0
        assert result.step.describe() == "3 + 4 = 7"
        assert state.is_empty

    def test_merge_keeps_first_operand_slot(self, resolver, make_pool):
        pool = make_pool(3, 4, 5)
        result = resolver.resolve(ready_round(pool, 1, 2, Operation.MULTIPLY), pool)
        assert result.pool == (3.0, 20.0)
        assert not result.completed
        assert result.final_value is None

    def test_operand_order_is_selection_order(self, resolver, make_pool):
        pool = make_pool(3, 4, 5)
        result = resolver.resolve(ready_round(pool, 2, 0, Operation.SUBTRACT), pool)
        assert result.step.first == 5.0
        assert result.step.second == 3.0
        # Slot 0 removed, so the merged value shifts down to index 1
        assert result.pool == (4.0, 2.0)

    def test_division_by_zero_is_failed_merge(self, resolver, make_pool):
        pool = make_pool(5, 0)
        state = ready_round(pool, 0, 1, Operation.DIVIDE)
        result = resolver.resolve(state, pool)

        assert result.status is MergeStatus.FAILED
        assert not result.succeeded
        assert result.step is None
        assert pool.values == (5.0, 0.0)
        assert result.pool == (5.0, 0.0)
        assert state.is_empty

    def test_zero_dividend_succeeds(self, resolver, make_pool):
        pool = make_pool(0, 5)
        result = resolver.resolve(ready_round(pool, 0, 1, Operation.DIVIDE), pool)
        assert result.succeeded
        assert result.pool == (0.0,)

    def test_advisory_index_is_re_resolved(self, resolver, make_pool):
        pool = make_pool(3, 4, 5)
        slots = pool.slots
        state = RoundState(
            operator=Operation.ADD,
            operand1=Selection(slots[2].token, 0),
            operand2=Selection(slots[1].token, 0),
        )
        result = resolver.resolve(state, pool)
        assert result.pool == (3.0, 9.0)

    def test_stale_selection_raises(self, resolver, make_pool):
        pool = make_pool(3, 4, 5)
        state = ready_round(pool, 1, 2, Operation.ADD)
        pool.merge(0, 1, 7.0)
        with pytest.raises(InvalidSelectionError):
            resolver.resolve(state, pool)

    def test_not_ready_raises(self, resolver, make_pool):
        pool = make_pool(3, 4)
        state = RoundState(operator=Operation.ADD)
        with pytest.raises(ValueError):
            resolver.resolve(state, pool)
        assert pool.values == (3.0, 4.0)
