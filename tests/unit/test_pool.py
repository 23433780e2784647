"""
Unit tests for NumberPool and slot tokens.
"""

from itertools import count

import pytest

from mathit.engine.errors import InvalidSelectionError
from mathit.engine.pool import NumberPool, Slot


class TestNumberPool:
    """Tests for pool contents and slots."""

    def test_values_are_floats_in_order(self, make_pool):
        pool = make_pool(3, 1, 2)
        assert pool.values == (3.0, 1.0, 2.0)
        assert all(isinstance(v, float) for v in pool.values)

    def test_empty_pool_rejected(self):
        with pytest.raises(ValueError):
            NumberPool([])

    def test_slots_carry_index_and_value(self, make_pool):
        pool = make_pool(3, 4)
        slots = pool.slots
        assert [s.index for s in slots] == [0, 1]
        assert [s.value for s in slots] == [3.0, 4.0]
        assert slots[0].token != slots[1].token

    def test_tokens_stable_without_mutation(self, make_pool):
        pool = make_pool(3, 4, 5)
        assert [s.token for s in pool.slots] == [s.token for s in pool.slots]

    def test_slot_for_token(self, make_pool):
        pool = make_pool(3, 4)
        token = pool.slots[1].token
        assert pool.slot_for_token(token) == Slot(token=token, index=1, value=4.0)
        assert pool.slot_for_token(-1) is None

    def test_shared_token_source(self):
        tokens = count(100)
        first = NumberPool([1, 2], token_source=tokens)
        second = NumberPool([3], token_source=tokens)
        assert [s.token for s in first.slots] == [100, 101]
        assert [s.token for s in second.slots] == [102]

    def test_is_complete(self, make_pool):
        assert make_pool(7).is_complete
        assert not make_pool(3, 4).is_complete


class TestMerge:
    """Tests for merge-and-remove."""

    def test_merge_writes_then_removes(self, make_pool):
        pool = make_pool(3, 4, 5)
        pool.merge(0, 1, 7.0)
        assert pool.values == (7.0, 5.0)

    def test_merge_with_higher_keep_index(self, make_pool):
        """Removing a lower index shifts the merged value down, not away."""
        pool = make_pool(3, 4, 5)
        pool.merge(2, 0, 9.0)
        assert pool.values == (4.0, 9.0)

    def test_merge_remints_tokens(self, make_pool):
        pool = make_pool(3, 4, 5)
        old_tokens = {s.token for s in pool.slots}
        pool.merge(0, 1, 7.0)
        assert not old_tokens & {s.token for s in pool.slots}

    def test_merge_same_index_rejected(self, make_pool):
        pool = make_pool(3, 4)
        with pytest.raises(InvalidSelectionError):
            pool.merge(1, 1, 8.0)
        assert pool.values == (3.0, 4.0)

    def test_merge_out_of_range_rejected(self, make_pool):
        pool = make_pool(3, 4)
        with pytest.raises(InvalidSelectionError):
            pool.merge(0, 2, 8.0)
        assert pool.values == (3.0, 4.0)


class TestResolveIndex:
    """Tests for selection re-validation."""

    def test_resolves_current_index(self, make_pool):
        pool = make_pool(3, 4)
        token = pool.slots[1].token
        assert pool.resolve_index(token, 1) == 1

    def test_recorded_index_is_advisory(self, make_pool):
        pool = make_pool(3, 4)
        token = pool.slots[1].token
        assert pool.resolve_index(token, 0) == 1

    def test_stale_token_raises(self, make_pool):
        pool = make_pool(3, 4, 5)
        stale = pool.slots[2].token
        pool.merge(0, 1, 7.0)
        with pytest.raises(InvalidSelectionError) as exc_info:
            pool.resolve_index(stale, 2)
        assert exc_info.value.token == stale
