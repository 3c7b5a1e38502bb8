import sys
import os
import time
import argparse

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_walker.core.grid import Algorithm, Grid
from maze_walker.algo.navigator import Navigator, Strategy
from maze_walker.core.traversal import TraversalRunner

def race(size: int, algo: Algorithm, seed: int):
    """Walks one generated maze with every strategy and prints a row per strategy."""
    grid = Grid(size, algo)
    gen_start = time.perf_counter()
    grid.generate(seed=seed)
    gen_time = time.perf_counter() - gen_start

    print(f"\n--- {algo.value} {size}x{size} (generated in {gen_time:.4f}s) ---")
    print(f"{'STRATEGY':<10} | {'EXIT':<5} | {'STEPS':<8} | {'DEAD ENDS':<10} | {'TIME (s)':<10}")
    print("-" * 55)

    for strategy in Strategy:
        grid.reset()
        nav = Navigator(*grid.start_cell, strategy=strategy, seed=seed, path_capacity=0)
        nav.determine_initial_direction(grid)
        runner = TraversalRunner(grid, nav)

        t_start = time.perf_counter()
        result = runner.run_all()
        duration = time.perf_counter() - t_start

        stats = result.stats
        print(f"{strategy.value:<10} | {str(result.reached_exit):<5} | {stats['steps']:<8} | {stats['dead_ends']:<10} | {duration:<10.4f}")

def run_suite():
    parser = argparse.ArgumentParser(description="Navigator strategy race")
    parser.add_argument("--sizes", type=int, nargs="+", default=[10, 25, 50], help="Maze sizes")
    parser.add_argument("--seed", type=int, default=42, help="Random Seed")
    args = parser.parse_args()

    for size in args.sizes:
        for algo in Algorithm:
            race(size, algo, args.seed)

if __name__ == "__main__":
    run_suite()
