import sys
import os
import time
import argparse

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from labyrinth.algo.closure import MazeBuilder, GUARDS
from labyrinth.core.complexity import MazeAnalyzer

def benchmark_size(dimension: int, seed: int):
    print(f"\n--- Benchmarking {dimension}x{dimension} ({dimension * dimension} cells) ---")

    for guard in GUARDS:
        start_time = time.time()
        maze = MazeBuilder(dimension, seed=seed, guard=guard).build()
        gen_time = time.time() - start_time

        MazeAnalyzer.verify(maze)
        stats = MazeAnalyzer.calculate_stats(maze)
        print(f"[{guard}] Generation Time: {gen_time:.4f}s | Dead ends: {stats['dead_end_percent']:.1f}%")

def main():
    parser = argparse.ArgumentParser(description="Cycle guard benchmark")
    parser.add_argument("--sizes", type=int, nargs="+", default=[10, 20, 35, 50], help="Maze sizes")
    parser.add_argument("--seed", type=int, default=42, help="Random Seed")
    args = parser.parse_args()

    for size in args.sizes:
        benchmark_size(size, args.seed)

if __name__ == "__main__":
    main()
