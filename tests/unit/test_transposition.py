#!/usr/bin/env python3
"""Unit tests for the dead-pool table."""

import unittest

from mathit.search.transposition import TranspositionTable, pool_key


class TestPoolKey(unittest.TestCase):
    """Test pool_key ordering."""

    def test_order_independent(self):
        """Permutations of a pool share a key."""
        self.assertEqual(pool_key([3.0, 1.0, 2.0]), pool_key([2.0, 3.0, 1.0]))

    def test_multiplicity_matters(self):
        self.assertNotEqual(pool_key([1.0, 1.0, 2.0]), pool_key([1.0, 2.0, 2.0]))

    def test_is_hashable_tuple(self):
        key = pool_key([4.0, 2.0])
        self.assertEqual(key, (2.0, 4.0))
        self.assertEqual({key: 1}[key], 1)


class TestTranspositionTable(unittest.TestCase):
    """Test dead-pool bookkeeping."""

    def setUp(self):
        self.table = TranspositionTable(max_size=10)

    def test_unknown_pool_is_not_dead(self):
        self.assertFalse(self.table.is_dead(pool_key([1.0, 2.0])))
        self.assertEqual(self.table.probes, 1)
        self.assertEqual(self.table.hits, 0)

    def test_marked_pool_is_dead(self):
        self.table.mark_dead(pool_key([2.0, 1.0]))
        self.assertTrue(self.table.is_dead(pool_key([1.0, 2.0])))
        self.assertEqual(self.table.hits, 1)

    def test_mark_twice_keeps_one_entry(self):
        self.table.mark_dead(pool_key([1.0]))
        self.table.mark_dead(pool_key([1.0]))
        self.assertEqual(len(self.table), 1)

    def test_contains_does_not_touch_stats(self):
        self.table.mark_dead(pool_key([5.0]))
        self.assertIn(pool_key([5.0]), self.table)
        self.assertNotIn(pool_key([6.0]), self.table)
        self.assertEqual(self.table.probes, 0)

    def test_eviction_drops_smallest_pools(self):
        for size in range(10, 0, -1):
            self.table.mark_dead(pool_key([1.0] * size))
        self.table.mark_dead(pool_key([7.0, 7.0]))
        self.assertEqual(len(self.table), 10)
        self.assertNotIn(pool_key([1.0]), self.table)
        self.assertIn(pool_key([1.0] * 10), self.table)
        self.assertIn(pool_key([7.0, 7.0]), self.table)
        self.assertEqual(self.table.evictions, 1)

    def test_eviction_prefers_oldest_among_equal_sizes(self):
        for i in range(10):
            self.table.mark_dead(pool_key([float(i), 0.5]))
        self.table.mark_dead(pool_key([99.0, 0.5]))
        self.assertNotIn(pool_key([0.0, 0.5]), self.table)
        self.assertIn(pool_key([1.0, 0.5]), self.table)

    def test_overwrite_when_full_does_not_evict(self):
        for i in range(10):
            self.table.mark_dead(pool_key([float(i)]))
        self.table.mark_dead(pool_key([0.0]))
        self.assertEqual(len(self.table), 10)
        self.assertEqual(self.table.evictions, 0)

    def test_clear(self):
        self.table.mark_dead(pool_key([1.0]))
        self.table.is_dead(pool_key([1.0]))
        self.table.clear()
        self.assertEqual(len(self.table), 0)
        self.assertEqual(self.table.stats()["hits"], 0)

    def test_stats(self):
        self.table.mark_dead(pool_key([1.0]))
        self.table.is_dead(pool_key([1.0]))
        self.table.is_dead(pool_key([2.0]))
        stats = self.table.stats()
        self.assertEqual(stats["size"], 1)
        self.assertEqual(stats["max_size"], 10)
        self.assertEqual(stats["probes"], 2)
        self.assertAlmostEqual(stats["hit_rate"], 0.5)

    def test_empty_stats(self):
        self.assertEqual(self.table.stats()["hit_rate"], 0.0)

    def test_invalid_size(self):
        with self.assertRaises(ValueError):
            TranspositionTable(max_size=0)


if __name__ == "__main__":
    unittest.main()
