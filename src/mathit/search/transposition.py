"""
Dead-pool table for the merge search.

Two merge orders often reach the same multiset of values, and whether a
pool can still reach the target depends only on its values. Once a pool
has been fully explored without a solution it is recorded here, and
every later path arriving at it is pruned.

The table is bounded. When full, the smallest pools are forgotten first:
they are the cheapest to prove dead again.
"""

from typing import Dict, Iterable, Tuple

PoolKey = Tuple[float, ...]


def pool_key(values: Iterable[float]) -> PoolKey:
    """Order-independent key for a pool."""
    return tuple(sorted(values))


class TranspositionTable:
    """
    Bounded record of pools proven unable to reach the target.

    Attributes:
        max_size: Maximum number of pools kept before eviction.
        probes: Number of is_dead() calls.
        hits: Number of probes that found a dead pool.
        evictions: Number of pools forgotten to make room.
    """

    def __init__(self, max_size: int = 1_000_000):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        # Insertion ordered: among pools of equal size the oldest go first
        self._dead: Dict[PoolKey, None] = {}
        self.probes = 0
        self.hits = 0
        self.evictions = 0

    def is_dead(self, key: PoolKey) -> bool:
        """True if ``key`` was already explored without a solution."""
        self.probes += 1
        if key in self._dead:
            self.hits += 1
            return True
        return False

    def mark_dead(self, key: PoolKey):
        """Record that no merge sequence from ``key`` reaches the target."""
        if key in self._dead:
            return
        if len(self._dead) >= self.max_size:
            self._evict()
        self._dead[key] = None

    def _evict(self):
        """Forget the smallest tenth of the recorded pools (at least one)."""
        batch = max(1, len(self._dead) // 10)
        for key in sorted(self._dead, key=len)[:batch]:
            del self._dead[key]
        self.evictions += batch

    def clear(self):
        self._dead.clear()
        self.probes = 0
        self.hits = 0
        self.evictions = 0

    def stats(self) -> dict:
        """Size and probe statistics, reported with every SolveResult."""
        return {
            "size": len(self._dead),
            "max_size": self.max_size,
            "probes": self.probes,
            "hits": self.hits,
            "evictions": self.evictions,
            "hit_rate": self.hits / self.probes if self.probes else 0.0,
        }

    def __len__(self) -> int:
        return len(self._dead)

    def __contains__(self, key: PoolKey) -> bool:
        """Membership test that leaves the probe counters alone."""
        return key in self._dead


__all__ = ['PoolKey', 'pool_key', 'TranspositionTable']
