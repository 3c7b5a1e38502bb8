import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_walker.core.grid import Algorithm, CellState, Grid
from maze_walker.core.complexity import MazeStats
from maze_walker.algo.navigator import Navigator, Strategy
from maze_walker.core.traversal import TraversalRunner
from maze_walker.viz.ascii import render_ascii

def make_runner(size=12, algo=Algorithm.PRIM, strategy=Strategy.LEFT, seed=5, max_steps=None):
    grid = Grid(size)
    grid.generate(algo, seed=seed)
    nav = Navigator(*grid.start_cell, strategy=strategy, seed=seed)
    nav.determine_initial_direction(grid)
    return TraversalRunner(grid, nav, max_steps=max_steps)

class TestTraversalRunner(unittest.TestCase):
    def test_reaches_exit(self):
        for algo in Algorithm:
            runner = make_runner(algo=algo)
            result = runner.run_all()
            self.assertTrue(result.reached_exit)
            self.assertEqual(result.stats, runner.navigator.get_stats())
            self.assertEqual(runner.navigator.position, runner.grid.exit_cell)

    def test_default_budget(self):
        runner = make_runner(size=7)
        self.assertEqual(runner.max_steps, 4 * 49)

    def test_budget_stops_walk(self):
        runner = make_runner(size=20, strategy=Strategy.RANDOM, max_steps=3)
        result = runner.run_all()
        self.assertLessEqual(result.stats["steps"], 3)
        if not result.reached_exit:
            self.assertEqual(result.stats["steps"], 3)

    def test_single_cell_is_already_at_exit(self):
        runner = make_runner(size=1)
        result = runner.run_all()
        self.assertTrue(result.reached_exit)
        self.assertEqual(result.stats["steps"], 0)

    def test_cell_states_follow_steps(self):
        runner = make_runner(size=15, algo=Algorithm.KRUSKAL)
        results = list(runner.run())
        grid = runner.grid

        for result in results:
            state = grid.get_cell(*result.origin).state
            self.assertIn(state, (CellState.EXPLORED, CellState.DEADEND))

        # Left-hand reversals only happen in cells with a single opening
        for r in range(grid.size):
            for c in range(grid.size):
                if grid.get_cell(r, c).state == CellState.DEADEND:
                    walls = MazeStats.popcount_walls(grid.cells[grid.get_index(r, c)])
                    self.assertEqual(walls, 3)

        self.assertEqual(len(results), runner.navigator.steps)

    def test_reset(self):
        runner = make_runner(size=10, strategy=Strategy.RIGHT)
        first_heading = runner.navigator.heading
        runner.run_all()
        runner.reset()

        nav = runner.navigator
        self.assertEqual(nav.position, runner.grid.start_cell)
        self.assertEqual(nav.steps, 0)
        self.assertEqual(nav.strategy, Strategy.RIGHT)
        self.assertEqual(nav.heading, first_heading)
        for r in range(10):
            for c in range(10):
                self.assertEqual(runner.grid.get_cell(r, c).state, CellState.UNEXPLORED)
        # Walls untouched
        self.assertEqual(runner.grid.open_wall_count(), 99)

class TestAsciiRenderer(unittest.TestCase):
    def test_single_cell(self):
        grid = Grid(1)
        self.assertEqual(render_ascii(grid), "+---+\n| E |\n+---+")

    def test_markers(self):
        grid = Grid(2)
        grid.carve_path(1, 0, Grid.NORTH)
        grid.carve_path(0, 0, Grid.EAST)
        text = render_ascii(grid)
        self.assertEqual(text.splitlines(), [
            "+---+---+",
            "|     E |",
            "+   +---+",
            "| S |   |",
            "+---+---+",
        ])

    def test_agent_and_states(self):
        grid = Grid(2)
        grid.carve_path(1, 0, Grid.NORTH)
        grid.carve_path(0, 0, Grid.EAST)
        grid.get_cell(1, 1).set_state(CellState.DEADEND)
        nav = Navigator(0, 0)
        text = render_ascii(grid, nav)
        self.assertIn("^", text)
        self.assertIn("x", text)

if __name__ == '__main__':
    unittest.main()
