"""Example comparing first-fit, best-fit and worst-fit placement.

This example runs the same request sequence against a pre-fragmented address
space under each fit strategy and prints the resulting partition tables.
"""

import logging

from dynmem_lite.config import InitMode, MemoryConfig
from dynmem_lite.core.memory_manager import MemoryManager
from dynmem_lite.placement.strategy import FitStrategy

REQUESTS = [("A", 120), ("B", 60), ("C", 200), ("D", 30)]


def main():
    """Demonstrate the three placement strategies."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    for strategy in FitStrategy:
        print(f"\n=== {strategy.label} ===\n")

        config = MemoryConfig(
            total_size=1024,
            strategy=strategy,
            init_mode=InitMode.FRAGMENTED,
            seed=7,
        )
        manager = MemoryManager(config)
        print("Initial layout:")
        print(manager.render())

        for process_id, size in REQUESTS:
            ok = manager.allocate(process_id, size)
            print(f"allocate({process_id}, {size}) -> {ok} ({manager.last_outcome.value})")

        print(manager.render())

        # Releasing B frees its partition and merges it with free neighbours
        manager.release("B")
        print("\nAfter releasing B:")
        print(manager.render())

    # Same requests on a single free partition, then a full round trip
    print("\n\n=== Round trip on a single partition ===\n")
    manager = MemoryManager(MemoryConfig(total_size=1024))
    manager.allocate("P", 40)
    manager.release("P")
    print(manager.render())


if __name__ == "__main__":
    main()
