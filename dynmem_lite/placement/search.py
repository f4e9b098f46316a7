"""
Placement search functions.

Each function scans the partitions in address order and returns the index
of a FREE partition whose size is at least ``size``, or None when no
partition qualifies. The partition list is never modified.
"""

from typing import Optional, Sequence

from dynmem_lite.memory.partition import Partition


def first_fit(partitions: Sequence[Partition], size: int) -> Optional[int]:
    """Return the first free partition large enough for ``size``."""
    for index, partition in enumerate(partitions):
        if partition.is_free() and partition.size >= size:
            return index
    return None


def best_fit(partitions: Sequence[Partition], size: int) -> Optional[int]:
    """Return the smallest free partition large enough for ``size``.

    Ties go to the lowest address.
    """
    best = None
    for index, partition in enumerate(partitions):
        if partition.is_free() and partition.size >= size:
            if best is None or partition.size < partitions[best].size:
                best = index
    return best


def worst_fit(partitions: Sequence[Partition], size: int) -> Optional[int]:
    """Return the largest free partition large enough for ``size``.

    Ties go to the lowest address.
    """
    worst = None
    for index, partition in enumerate(partitions):
        if partition.is_free() and partition.size >= size:
            if worst is None or partition.size > partitions[worst].size:
                worst = index
    return worst
