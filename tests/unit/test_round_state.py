"""
Unit tests for the round selection state machine.
"""

import pytest

from mathit.engine.operations import Operation
from mathit.play.state import HIGHLIGHT_COLORS, Highlight, RoundState, Selection


A = Selection(token=10, index=0)
B = Selection(token=11, index=1)
C = Selection(token=12, index=2)


class TestSlotSelection:
    """Tests for the operand sub-machine."""

    def test_first_pick_binds_operand1(self):
        state = RoundState()
        assert state.select_slot(A)
        assert state.operand1 == A
        assert state.operand2 is None

    def test_second_pick_binds_operand2(self):
        state = RoundState()
        state.select_slot(A)
        state.select_slot(B)
        assert (state.operand1, state.operand2) == (A, B)

    def test_reselect_clears(self):
        state = RoundState()
        state.select_slot(A)
        assert state.select_slot(A)
        assert state.is_empty

    def test_toggle_twice_restores_state(self):
        state = RoundState(operator=Operation.ADD, operand1=A)
        before = state.to_dict()
        state.select_slot(B)
        state.select_slot(B)
        assert state.to_dict() == before

    def test_same_slot_never_bound_twice(self):
        state = RoundState()
        state.select_slot(A)
        state.select_slot(A)
        state.select_slot(A)
        assert state.operand1 == A
        assert state.operand2 is None

    def test_clearing_operand1_keeps_operand2(self):
        """The next pick fills the hole in operand1."""
        state = RoundState()
        state.select_slot(A)
        state.select_slot(B)
        state.select_slot(A)
        assert state.operand1 is None
        assert state.operand2 == B
        state.select_slot(C)
        assert (state.operand1, state.operand2) == (C, B)

    def test_third_slot_ignored(self):
        state = RoundState()
        state.select_slot(A)
        state.select_slot(B)
        assert not state.select_slot(C)
        assert (state.operand1, state.operand2) == (A, B)

    def test_identity_is_token(self):
        """A selection with the same token but another index is the same slot."""
        state = RoundState()
        state.select_slot(A)
        state.select_slot(Selection(token=A.token, index=5))
        assert state.operand1 is None


class TestOperatorSelection:
    """Tests for the operator sub-machine."""

    def test_bind_and_clear(self):
        state = RoundState()
        assert state.select_operator(Operation.MULTIPLY)
        assert state.operator is Operation.MULTIPLY
        assert state.select_operator(Operation.MULTIPLY)
        assert state.operator is None

    def test_second_operator_ignored(self):
        state = RoundState()
        state.select_operator(Operation.ADD)
        assert not state.select_operator(Operation.SUBTRACT)
        assert state.operator is Operation.ADD

    def test_independent_of_slots(self):
        state = RoundState()
        state.select_slot(A)
        state.select_operator(Operation.ADD)
        state.select_slot(A)
        assert state.operator is Operation.ADD
        assert state.operand1 is None


class TestReadiness:
    """Tests for is_ready and reset."""

    @pytest.mark.parametrize("kwargs", [
        {},
        {"operator": Operation.ADD},
        {"operator": Operation.ADD, "operand1": A},
        {"operand1": A, "operand2": B},
        {"operator": Operation.ADD, "operand2": B},
    ])
    def test_not_ready(self, kwargs):
        assert not RoundState(**kwargs).is_ready

    def test_ready(self):
        state = RoundState(operator=Operation.ADD, operand1=A, operand2=B)
        assert state.is_ready

    def test_reset(self):
        state = RoundState(operator=Operation.ADD, operand1=A, operand2=B)
        state.reset()
        assert state.is_empty
        assert state == RoundState()


class TestHighlights:
    """Tests for the render projection."""

    def test_empty(self):
        assert RoundState().highlights() == {}

    def test_full(self):
        state = RoundState(operator=Operation.DIVIDE, operand1=A, operand2=B)
        assert state.highlights() == {
            A.token: Highlight.FIRST_OPERAND,
            B.token: Highlight.SECOND_OPERAND,
            Operation.DIVIDE: Highlight.OPERATOR,
        }

    def test_colors(self):
        assert Highlight.FIRST_OPERAND.color == "00FF00"
        assert Highlight.SECOND_OPERAND.color == "0000FF"
        assert Highlight.OPERATOR.color == "9ACD32"
        assert set(HIGHLIGHT_COLORS) == set(Highlight)

    def test_to_dict(self):
        state = RoundState(operator=Operation.SUBTRACT, operand2=B)
        assert state.to_dict() == {"operator": "-", "operand1": None, "operand2": B.token}
