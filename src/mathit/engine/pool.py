"""
Number pool and slot identity.

The pool is the ordered list of values the player can combine. Each
displayed value is a *slot* carrying an integer token minted by the
pool. Tokens are stable while the pool is unchanged and re-minted after
every mutation, so a selection made against an older layout can never
silently resolve to a different value.
"""

from dataclasses import dataclass
from itertools import count
from typing import Iterable, Iterator, List, Optional, Tuple
import logging

from .errors import InvalidSelectionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Slot:
    """
    One displayed pool value.

    Attributes:
        token: Opaque identity of the slot, unique within a session.
        index: Position of the value in the pool.
        value: The value shown in the slot.
    """
    token: int
    index: int
    value: float


class NumberPool:
    """
    Ordered sequence of values with slot tokens.

    Order is insertion order and is meaningful: selections refer to
    indices. Only merge() mutates the values.
    """

    def __init__(self, values: Iterable[float], token_source: Optional[Iterator[int]] = None):
        self._values: List[float] = [float(v) for v in values]
        if not self._values:
            raise ValueError("A number pool needs at least one value")
        self._tokens = token_source if token_source is not None else count(1)
        self._slot_tokens: List[int] = []
        self._mint_slots()

    def _mint_slots(self):
        self._slot_tokens = [next(self._tokens) for _ in self._values]

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def values(self) -> Tuple[float, ...]:
        """Snapshot of the current values."""
        return tuple(self._values)

    @property
    def slots(self) -> List[Slot]:
        return [
            Slot(token=token, index=idx, value=value)
            for idx, (token, value) in enumerate(zip(self._slot_tokens, self._values))
        ]

    @property
    def is_complete(self) -> bool:
        """A single remaining value ends the puzzle."""
        return len(self._values) == 1

    def slot_for_token(self, token: int) -> Optional[Slot]:
        """Find the slot currently carrying ``token``."""
        try:
            idx = self._slot_tokens.index(token)
        except ValueError:
            return None
        return Slot(token=token, index=idx, value=self._values[idx])

    def resolve_index(self, token: int, index: int) -> int:
        """
        Re-validate a selection against the current layout.

        Args:
            token: Slot token recorded at selection time.
            index: Pool index recorded at selection time.

        Returns:
            The index of the slot in the current pool.

        Raises:
            InvalidSelectionError: Token is stale or index out of bounds.
        """
        slot = self.slot_for_token(token)
        if slot is None:
            raise InvalidSelectionError(
                f"Slot token {token} does not belong to the current pool",
                token=token, index=index,
            )
        if not 0 <= slot.index < len(self._values):
            raise InvalidSelectionError(
                f"Slot index {slot.index} out of range for pool of {len(self._values)}",
                token=token, index=slot.index,
            )
        return slot.index

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> float:
        return self._values[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"NumberPool({list(self._values)!r})"

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def merge(self, keep_index: int, remove_index: int, value: float):
        """
        Write ``value`` into ``keep_index`` then drop ``remove_index``.

        Mutate first, remove second: the merged value stays in the pool
        regardless of which index is larger.
        """
        if keep_index == remove_index:
            raise InvalidSelectionError(
                "Cannot merge a slot with itself", index=keep_index,
            )
        for idx in (keep_index, remove_index):
            if not 0 <= idx < len(self._values):
                raise InvalidSelectionError(
                    f"Slot index {idx} out of range for pool of {len(self._values)}",
                    index=idx,
                )
        self._values[keep_index] = value
        del self._values[remove_index]
        self._mint_slots()
        logger.debug("Pool merged into %s", self._values)


__all__ = ['Slot', 'NumberPool']
