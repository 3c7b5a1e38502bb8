import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_walker.core.grid import Algorithm, Grid
from maze_walker.core.complexity import MazeStats

class TestComplexity(unittest.TestCase):
    def test_stats_cover_every_cell(self):
        grid = Grid(20)
        grid.generate(Algorithm.PRIM, seed=42)
        stats = MazeStats.calculate(grid)

        self.assertGreater(stats["dead_ends"], 0)
        self.assertEqual(stats["dead_ends"] + stats["corridors"] + stats["intersections"], 400)
        self.assertEqual(stats["open_walls"], 399)
        self.assertAlmostEqual(stats["dead_end_percent"], stats["dead_ends"] / 4.0)

    def test_backtracker_has_fewer_dead_ends(self):
        # Depth-first carving favours long corridors over branching
        dfs = Grid(30)
        dfs.generate(Algorithm.BACKTRACKING, seed=99)
        prim = Grid(30)
        prim.generate(Algorithm.PRIM, seed=99)

        dfs_stats = MazeStats.calculate(dfs)
        prim_stats = MazeStats.calculate(prim)
        self.assertLess(dfs_stats["dead_ends"], prim_stats["dead_ends"])
        self.assertGreater(dfs_stats["corridors"], prim_stats["corridors"])

    def test_unopened_grid(self):
        stats = MazeStats.calculate(Grid(3))
        self.assertEqual(stats["dead_ends"], 0)
        self.assertEqual(stats["open_walls"], 0)

if __name__ == '__main__':
    unittest.main()
