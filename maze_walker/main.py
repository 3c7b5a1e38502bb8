import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'maze_walker' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_walker import config

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT
    )

def maze_size(value: str) -> int:
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid size: {value!r}")
    if not config.MIN_SIZE <= size <= config.MAX_SIZE:
        raise argparse.ArgumentTypeError(
            f"size must be between {config.MIN_SIZE} and {config.MAX_SIZE}, got {size}")
    return size

def build_parser() -> argparse.ArgumentParser:
    from maze_walker.core.grid import Algorithm
    from maze_walker.algo.navigator import Strategy

    algos = [a.value for a in Algorithm]
    strategies = [s.value for s in Strategy]

    parser = argparse.ArgumentParser(description="Maze Walker: perfect maze generator and wall-following agent")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze and print it")
    gen_parser.add_argument("--size", type=maze_size, default=config.DEFAULT_SIZE, help="Maze size (N x N)")
    gen_parser.add_argument("--algo", type=str, default=config.DEFAULT_ALGORITHM, choices=algos, help="Generation Algorithm")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")

    # Run Command
    run_parser = subparsers.add_parser("run", help="Generate a maze and walk it from start to exit")
    run_parser.add_argument("--size", type=maze_size, default=config.DEFAULT_SIZE, help="Maze size (N x N)")
    run_parser.add_argument("--algo", type=str, default=config.DEFAULT_ALGORITHM, choices=algos, help="Generation Algorithm")
    run_parser.add_argument("--strategy", type=str, default=config.DEFAULT_STRATEGY, choices=strategies, help="Navigation strategy")
    run_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    run_parser.add_argument("--max-steps", type=int, default=None, help="Step budget (default: 4 * size^2)")
    run_parser.add_argument("--visual", action="store_true", help="Show pygame visualization")
    run_parser.add_argument("--speed", type=int, default=10, help="Steps per second in visual mode")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time every generator")
    bench_parser.add_argument("--sizes", type=maze_size, nargs="+", default=list(config.BENCHMARK_SIZES), help="Sizes to benchmark")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser

def cmd_generate(args, logger):
    from maze_walker.core.grid import Grid
    from maze_walker.core.complexity import MazeStats
    from maze_walker.viz.ascii import render_ascii

    logger.info(f"Generating {args.size}x{args.size} maze with {args.algo.upper()}...")
    grid = Grid(args.size, args.algo)
    grid.generate(seed=args.seed)

    print(render_ascii(grid))
    logger.info(f"Stats: {MazeStats.calculate(grid)}")

def cmd_run(args, logger):
    from maze_walker.core.grid import Grid
    from maze_walker.algo.navigator import Navigator
    from maze_walker.core.traversal import TraversalRunner
    from maze_walker.viz.ascii import render_ascii

    grid = Grid(args.size, args.algo)
    grid.generate(seed=args.seed)

    nav = Navigator(*grid.start_cell, strategy=args.strategy, seed=args.seed)
    heading = nav.determine_initial_direction(grid)
    logger.info(f"Walking with {args.strategy.upper()} strategy, initial heading {heading.value}")

    runner = TraversalRunner(grid, nav, max_steps=args.max_steps)

    if args.visual:
        from maze_walker.viz.renderer import Renderer
        logger.info("Visual mode enabled - Opening window...")
        renderer = Renderer(grid, runner=runner, fps=max(1, args.speed))
        renderer.init_window()
        renderer.run_loop()
        reached = runner.at_exit
        stats = nav.get_stats()
    else:
        result = runner.run_all()
        reached, stats = result.reached_exit, result.stats
        print(render_ascii(grid, nav))

    print(f"\nExit reached: {reached}")
    print(f"Steps: {stats['steps']} | Dead ends: {stats['dead_ends']} | Backtracks: {stats['backtrack_count']}")
    return 0 if reached else 1

def cmd_benchmark(args, logger):
    from maze_walker.core.grid import Algorithm, Grid
    from maze_walker.core.complexity import MazeStats

    print(f"\n{'ALGORITHM':<14} | {'SIZE':<6} | {'TIME (s)':<10} | {'DEAD ENDS':<10} | {'CORRIDORS':<10}")
    print("-" * 62)

    for size in args.sizes:
        for algo in Algorithm:
            grid = Grid(size, algo)
            t_start = time.perf_counter()
            grid.generate(seed=args.seed)
            duration = time.perf_counter() - t_start

            stats = MazeStats.calculate(grid)
            print(f"{algo.value:<14} | {size:<6} | {duration:<10.4f} | {stats['dead_ends']:<10} | {stats['corridors']:<10}")

            if duration > 1.0:
                logger.warning(f"{algo.value} took {duration:.2f}s on {size}x{size}")

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_walker")

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Running command: {args.command}")

    if args.command == "generate":
        cmd_generate(args, logger)
    elif args.command == "run":
        return cmd_run(args, logger)
    elif args.command == "benchmark":
        cmd_benchmark(args, logger)
    return 0

if __name__ == "__main__":
    sys.exit(main())
