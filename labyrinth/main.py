import argparse
import sys
import os
import time
import logging

# Ensure project root is in path so we can import 'labyrinth' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from labyrinth.algo.closure import MazeBuilder, GUARDS, GUARD_UNION_FIND, DEFAULT_DIMENSION
from labyrinth.core.complexity import MazeAnalyzer
from labyrinth.core.errors import LabyrinthError

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Labyrinth: perfect maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate and verify a new maze")
    gen_parser.add_argument("--dimension", "-d", type=int, default=DEFAULT_DIMENSION, help="Cells per side")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--guard", type=str, default=GUARD_UNION_FIND, choices=GUARDS, help="Cycle guard")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time both cycle guards")
    bench_parser.add_argument("--size", type=int, default=30, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")
    return parser

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("labyrinth")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    try:
        if args.command == "generate":
            logger.info(f"Generating {args.dimension}x{args.dimension} maze (guard={args.guard})...")
            t0 = time.time()
            maze = MazeBuilder(args.dimension, seed=args.seed, guard=args.guard).build()
            logger.info(f"Generation complete in {time.time() - t0:.4f}s")

            MazeAnalyzer.verify(maze)
            stats = MazeAnalyzer.calculate_stats(maze)
            logger.info(f"Stats: {stats}")

        elif args.command == "benchmark":
            logger.info(f"Running guard benchmark (Size: {args.size}x{args.size})...")

            print(f"\n{'GUARD':<12} | {'TIME (s)':<10} | {'PASSAGES':<10}")
            print("-" * 38)
            for guard in GUARDS:
                t_start = time.time()
                maze = MazeBuilder(args.size, seed=args.seed, guard=guard).build()
                duration = time.time() - t_start
                print(f"{guard:<12} | {duration:<10.4f} | {maze.passage_count():<10}")
    except LabyrinthError as e:
        logger.error(str(e))
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
