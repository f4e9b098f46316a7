"""
Pytest configuration and shared fixtures for dynmem-lite tests.

This module provides reusable fixtures for testing, including:
- Default and fragmented table configurations
- A builder for tables with an explicit partition layout
- An invariant checker usable after every operation
"""

from typing import Callable, List, Optional, Sequence, Tuple

import pytest

from dynmem_lite.config import InitMode, MemoryConfig
from dynmem_lite.memory.partition import Partition, PartitionStatus
from dynmem_lite.memory.partition_table import PartitionTable
from dynmem_lite.placement.strategy import FitStrategy


LayoutSpec = Sequence[Tuple[int, Optional[str]]]


@pytest.fixture
def default_config() -> MemoryConfig:
    """Single free partition of 1024 KB, first-fit."""
    return MemoryConfig(total_size=1024)


@pytest.fixture
def fragmented_config() -> MemoryConfig:
    """Seeded pre-fragmented layout of 1024 KB."""
    return MemoryConfig(total_size=1024, init_mode=InitMode.FRAGMENTED, seed=1234)


@pytest.fixture
def build_table() -> Callable[..., PartitionTable]:
    """
    Build a PartitionTable from an explicit layout.

    The layout is a sequence of ``(size, owner)`` pairs in address order;
    ``owner=None`` makes a free partition. The total size is the sum of
    the sizes.

    Example:
        def test_something(build_table):
            table = build_table([(100, None), (50, "P"), (50, None)])
            assert len(table) == 3
    """

    def _build(
        layout: LayoutSpec,
        strategy: FitStrategy = FitStrategy.FIRST_FIT,
        enable_backing_store: bool = False,
    ) -> PartitionTable:
        total = sum(size for size, _ in layout)
        table = PartitionTable(
            MemoryConfig(
                total_size=total,
                strategy=strategy,
                enable_backing_store=enable_backing_store,
            )
        )

        partitions: List[Partition] = []
        start = 0
        for size, owner in layout:
            status = PartitionStatus.FREE if owner is None else PartitionStatus.BUSY
            partitions.append(Partition(start=start, size=size, status=status, owner=owner))
            start += size
        table.partitions = partitions
        table.check_invariants()
        return table

    return _build


def ranges(table: PartitionTable) -> List[Tuple[int, int, Optional[str]]]:
    """Return ``(start, end, owner)`` triples for compact assertions."""
    return [(p.start, p.end, p.owner) for p in table.partitions]


@pytest.fixture
def as_ranges() -> Callable[[PartitionTable], List[Tuple[int, int, Optional[str]]]]:
    """Expose ``ranges`` as a fixture."""
    return ranges
