"""
Puzzle session: the single owner of all per-player game state.

A session holds the level context, the live pool, the round state and
the final result. Consumers feed it input notifications
(``on_slot_selected``, ``on_operator_selected`` or ``handle_input``) and
receive push notifications through ``SessionListener`` after each state
change is complete.

Usage:
    session = PuzzleSession(seed=42, listeners=[my_renderer])
    first, second = session.slots[:2]
    session.on_slot_selected(first.token)
    session.on_operator_selected(Operation.ADD)
    session.on_slot_selected(second.token)   # round resolves here

    if session.phase is SessionPhase.DONE and session.result.outcome.offers_next_level:
        session.advance_level()
"""

from enum import Enum
from itertools import count
from typing import Dict, Any, Iterable, List, Optional, Tuple
import logging
import random

from ..engine.operations import Operation
from ..engine.pool import NumberPool, Slot
from ..generation.generator import GeneratorConfig, PuzzleGenerator
from ..outcome import OutcomeClassifier
from ..types import GameResult, LevelContext, Puzzle
from .resolver import MergeResult, RoundResolver
from .state import Highlight, RoundState, Selection

logger = logging.getLogger(__name__)


class SessionPhase(str, Enum):
    PLAYING = "playing"
    DONE = "done"


class SessionListener:
    """
    Receiver of session notifications.

    Subclass and override what you need; every method defaults to a no-op.
    Notifications are delivered synchronously, in production order, after
    the change they describe is fully applied.
    """

    def on_level_started(self, puzzle: Puzzle):
        pass

    def on_round_changed(self, round_state: RoundState):
        pass

    def on_merge_success(self, pool: Tuple[float, ...]):
        pass

    def on_merge_failure(self):
        pass

    def on_puzzle_complete(self, final_value: float, target: float):
        pass


class PuzzleSession:
    """
    One player's game.

    Attributes:
        context: Seed and level index of the current level.
        puzzle: The generated puzzle of the current level.
        pool: Live pool with slot tokens.
        round: Pending picks of the current round.
        phase: PLAYING until the pool is reduced to one value, then DONE.
        result: GameResult of the finished level (None while playing).
        last_merge: Result of the most recent resolved round.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        level_index: int = 0,
        config: Optional[GeneratorConfig] = None,
        listeners: Iterable[SessionListener] = (),
        classifier: Optional[OutcomeClassifier] = None,
    ):
        """
        Create a session and start its first level.

        Args:
            seed: Session seed; drawn from the OS entropy source if None.
            level_index: Level to start at.
            config: Generator difficulty curve (defaults if None).
            listeners: Notification receivers.
            classifier: Outcome classifier used for logging and consumers.
        """
        if seed is None:
            seed = random.SystemRandom().getrandbits(64)
        self.context = LevelContext(seed=seed, level_index=level_index)
        self.generator = PuzzleGenerator(config)
        self.resolver = RoundResolver()
        self.classifier = classifier or OutcomeClassifier()
        self.listeners: List[SessionListener] = list(listeners)

        self._tokens = count(1)
        self.round = RoundState()
        self.phase = SessionPhase.PLAYING
        self.result: Optional[GameResult] = None
        self.last_merge: Optional[MergeResult] = None

        self.start_level()

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def seed(self) -> int:
        return self.context.seed

    @property
    def level_index(self) -> int:
        return self.context.level_index

    @property
    def target(self) -> float:
        return self.puzzle.target

    @property
    def operators(self) -> Tuple[Operation, ...]:
        return self.puzzle.operators

    @property
    def slots(self) -> List[Slot]:
        return self.pool.slots

    def highlights(self) -> Dict[Any, Highlight]:
        return self.round.highlights()

    def add_listener(self, listener: SessionListener):
        self.listeners.append(listener)

    # -------------------------------------------------------------------------
    # Level lifecycle
    # -------------------------------------------------------------------------

    def start_level(self) -> Puzzle:
        """(Re)generate the current level and reset all play state."""
        self.puzzle = self.generator.generate(self.context)
        self.pool = NumberPool(self.puzzle.pool, token_source=self._tokens)
        self.round.reset()
        self.phase = SessionPhase.PLAYING
        self.result = None
        self.last_merge = None

        logger.info(
            "Level %d started: %d numbers, operators %s, target %s",
            self.level_index + 1, len(self.pool),
            "".join(op.symbol for op in self.operators), self.target,
        )
        for listener in self.listeners:
            listener.on_level_started(self.puzzle)
        # A single drawn value leaves nothing to merge
        if self.pool.is_complete:
            self._finish(self.pool[0])
        return self.puzzle

    def retry(self) -> Puzzle:
        """Restart the current level from its original pool."""
        return self.start_level()

    def advance_level(self) -> Puzzle:
        """Move to the next level and generate it."""
        self.context = self.context.next_level()
        return self.start_level()

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def on_slot_selected(self, token: int) -> bool:
        """
        Toggle the slot carrying ``token``.

        Returns:
            True if the round state changed.
        """
        if self.phase is SessionPhase.DONE:
            return False
        slot = self.pool.slot_for_token(token)
        if slot is None:
            logger.warning("Ignoring selection of unknown slot token %s", token)
            return False
        changed = self.round.select_slot(Selection(token=slot.token, index=slot.index))
        if changed:
            self._round_changed()
        return changed

    def on_operator_selected(self, operator: Operation) -> bool:
        """
        Toggle ``operator``.

        Args:
            operator: An Operation or its symbol (``"+"``).

        Returns:
            True if the round state changed.
        """
        if self.phase is SessionPhase.DONE:
            return False
        try:
            operator = Operation(operator)
        except ValueError:
            logger.warning("Ignoring unknown operator %r", operator)
            return False
        if operator not in self.operators:
            logger.warning("Ignoring operator %s, not available at this level", operator)
            return False
        changed = self.round.select_operator(operator)
        if changed:
            self._round_changed()
        return changed

    def handle_input(self, slot_token: Optional[int] = None,
                     operator: Optional[Operation] = None) -> bool:
        """
        Dispatch one input event that may hit a slot, an operator or nothing.

        Slots are matched first; the operator is considered only when the
        event hit no current slot.
        """
        if slot_token is not None and self.pool.slot_for_token(slot_token) is not None:
            return self.on_slot_selected(slot_token)
        if operator is not None and operator in self.operators:
            return self.on_operator_selected(operator)
        return False

    # -------------------------------------------------------------------------
    # Reactions
    # -------------------------------------------------------------------------

    def _notify_round(self):
        for listener in self.listeners:
            listener.on_round_changed(self.round)

    def _round_changed(self):
        self._notify_round()
        if self.round.is_ready:
            self._resolve_round()

    def _resolve_round(self):
        merge = self.resolver.resolve(self.round, self.pool)
        self.last_merge = merge
        self._notify_round()

        if not merge.succeeded:
            for listener in self.listeners:
                listener.on_merge_failure()
            return

        for listener in self.listeners:
            listener.on_merge_success(merge.pool)

        if merge.completed:
            self._finish(merge.final_value)

    def _finish(self, final_value: float):
        """Record the result of a reduced pool and end the level."""
        self.result = GameResult(
            final_value=final_value,
            target=self.target,
            level_index=self.level_index,
        )
        self.phase = SessionPhase.DONE
        logger.info(
            "Level %d finished: %s (had %s, target %s)",
            self.level_index + 1,
            self.classifier.classify(self.result.final_value, self.result.target).value,
            self.result.final_value, self.result.target,
        )
        for listener in self.listeners:
            listener.on_puzzle_complete(self.result.final_value, self.result.target)


__all__ = ['SessionPhase', 'SessionListener', 'PuzzleSession']
