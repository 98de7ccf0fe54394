"""
Profiling and demo script for pyrbt.

Prints a small insert/delete walkthrough, then profiles bulk insert and
delete workloads to find hot spots in the balancing code.
"""

import cProfile
import pstats
import io
from pstats import SortKey
import time
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np
from pyrbt import RBTree, render


def random_keys(n, seed=42):
    """Return n distinct keys in random order."""
    rng = np.random.default_rng(seed)
    return [int(k) for k in rng.permutation(n * 10)[:n]]


def demo():
    """Show the tree after each step of a short insert/delete sequence."""
    tree = RBTree()
    for key in (50, 70, 60, 65):
        tree.insert(key)
        print(f"insert {key}:\n{render(tree)}\n")
    tree.delete(50)
    print(f"delete 50:\n{render(tree)}\n")


def profile_random_inserts():
    """Profile 20000 inserts in random order."""
    RBTree(random_keys(20000))


def profile_sorted_inserts():
    """Profile 20000 inserts in ascending order (rotation heavy)."""
    RBTree(range(20000))


def profile_deletes():
    """Profile deleting every key of a 20000 key tree in random order."""
    keys = random_keys(20000)
    tree = RBTree(keys)
    for key in random_keys(20000, seed=7):
        tree.delete(key)
    for key in keys:
        tree.delete(key)


def benchmark_scenario(name, func):
    """Benchmark a scenario and print timing."""
    print(f"\n{'='*60}")
    print(f"Profiling: {name}")
    print('='*60)

    profiler = cProfile.Profile()

    start_time = time.time()
    profiler.enable()
    func()
    profiler.disable()
    elapsed = time.time() - start_time

    print(f"\nTotal time: {elapsed:.3f}s")

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats(SortKey.CUMULATIVE)
    ps.print_stats(15)

    print("\nTop 15 functions by cumulative time:")
    print(s.getvalue())

    return profiler


def main():
    """Run the demo and all profiling scenarios."""
    print("pyrbt demo")
    print("=" * 60)
    demo()

    scenarios = [
        ("Random inserts (20000 keys)", profile_random_inserts),
        ("Sorted inserts (20000 keys)", profile_sorted_inserts),
        ("Deletes (20000 keys)", profile_deletes),
    ]

    for name, func in scenarios:
        benchmark_scenario(name, func)


if __name__ == "__main__":
    main()
