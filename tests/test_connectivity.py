import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from labyrinth.core.grid import Grid, Direction
from labyrinth.algo.connectivity import is_connected, component, DisjointSet

class TestConnectivity(unittest.TestCase):
    def create_corridor(self):
        # 3x3, snake through the top two rows, (2,*) left isolated
        grid = Grid(3)
        grid.link(grid.at(0, 0), Direction.RIGHT)
        grid.link(grid.at(0, 1), Direction.RIGHT)
        grid.link(grid.at(0, 2), Direction.BOTTOM)
        grid.link(grid.at(1, 2), Direction.LEFT)
        grid.link(grid.at(1, 1), Direction.LEFT)
        return grid

    def test_reflexive(self):
        grid = Grid(2)
        cell = grid.at(1, 1)
        # No passages at all, still reachable from itself
        self.assertTrue(is_connected(cell, cell))

    def test_direct(self):
        grid = self.create_corridor()
        self.assertTrue(is_connected(grid.at(0, 0), grid.at(0, 1)))
        self.assertTrue(is_connected(grid.at(0, 1), grid.at(0, 0)))

    def test_transitive(self):
        grid = self.create_corridor()
        self.assertTrue(is_connected(grid.at(0, 0), grid.at(1, 0)))
        self.assertTrue(is_connected(grid.at(1, 0), grid.at(0, 0)))

    def test_disconnected(self):
        grid = self.create_corridor()
        self.assertFalse(is_connected(grid.at(0, 0), grid.at(2, 0)))
        self.assertFalse(is_connected(grid.at(2, 2), grid.at(1, 1)))

    def test_queries_do_not_share_state(self):
        grid = self.create_corridor()
        # A failed query must not poison the next one
        self.assertFalse(is_connected(grid.at(0, 0), grid.at(2, 1)))
        self.assertTrue(is_connected(grid.at(0, 0), grid.at(1, 0)))
        self.assertFalse(is_connected(grid.at(0, 0), grid.at(2, 1)))

    def test_cycle_terminates(self):
        grid = Grid(2)
        grid.link(grid.at(0, 0), Direction.RIGHT)
        grid.link(grid.at(0, 1), Direction.BOTTOM)
        grid.link(grid.at(1, 1), Direction.LEFT)
        grid.link(grid.at(1, 0), Direction.TOP)
        other = Grid(2)
        self.assertFalse(is_connected(grid.at(0, 0), other.at(0, 0)))
        self.assertTrue(is_connected(grid.at(0, 0), grid.at(1, 1)))

    def test_long_corridor(self):
        # Serpentine through every cell: path length far above the recursion limit
        n = 50
        grid = Grid(n)
        for r in range(n):
            cols = range(n - 1) if r % 2 == 0 else range(n - 1, 0, -1)
            for c in cols:
                grid.link(grid.at(r, c), Direction.RIGHT if r % 2 == 0 else Direction.LEFT)
            if r < n - 1:
                grid.link(grid.at(r, n - 1 if r % 2 == 0 else 0), Direction.BOTTOM)

        end = grid.at(n - 1, 0 if (n - 1) % 2 == 0 else n - 1)
        self.assertTrue(is_connected(grid.at(0, 0), end))
        self.assertEqual(sum(1 for _ in component(grid.at(0, 0))), n * n)

    def test_component(self):
        grid = self.create_corridor()
        reached = set(component(grid.at(1, 0)))
        self.assertEqual(len(reached), 6)
        self.assertNotIn(grid.at(2, 0), reached)
        self.assertEqual(list(component(grid.at(2, 2))), [grid.at(2, 2)])

    def test_disjoint_set(self):
        grid = Grid(3)
        sets = DisjointSet()
        a, b, c = grid.at(0, 0), grid.at(0, 1), grid.at(2, 2)

        self.assertFalse(sets.connected(a, b))
        self.assertTrue(sets.union(a, b))
        self.assertTrue(sets.connected(a, b))
        self.assertFalse(sets.union(b, a))
        self.assertFalse(sets.connected(a, c))

        sets.union(c, b)
        self.assertTrue(sets.connected(a, c))
        self.assertEqual(sets.size[sets.find(a)], 3)

if __name__ == '__main__':
    unittest.main()
