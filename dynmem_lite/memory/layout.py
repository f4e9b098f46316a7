"""
Initial partition layouts.

A layout is the list of partitions a table starts from (or returns to on
reset). Two layouts are provided:

- single_partition_layout: the whole space as one free partition
- fragmented_layout: roughly three quarters of the space carved into
  near-equal free segments separated by external gaps, plus one trailing
  free segment covering the rest

External gaps are BUSY partitions owned by EXTERNAL_OWNER, so every layout
covers ``[0, total_size)`` without holes.
"""

import random
from typing import List, Optional

from dynmem_lite.memory.partition import EXTERNAL_OWNER, Partition, PartitionStatus


def single_partition_layout(total_size: int) -> List[Partition]:
    """Return one free partition spanning ``[0, total_size)``."""
    if total_size <= 0:
        raise ValueError(f"total_size must be positive, got {total_size}")
    return [Partition(start=0, size=total_size)]


def fragmented_layout(
    total_size: int,
    num_segments: int = 5,
    jitter_fraction: float = 0.2,
    max_gap_fraction: float = 0.1,
    rng: Optional[random.Random] = None,
) -> List[Partition]:
    """Return a pre-fragmented layout.

    The front region (``total_size - total_size // 4``) is divided into
    ``num_segments`` slots of equal nominal length. Each slot holds a free
    segment followed by an external gap. The segment size is the nominal
    segment size plus a jitter drawn from ``[-bound, bound]`` where
    ``bound = int(base * jitter_fraction)``; a non-positive result falls
    back to the unperturbed size. Gap lengths are drawn from
    ``[1, max_gap]``. Whatever is left after the last gap becomes one
    trailing free segment.

    Args:
        total_size: Size of the address space.
        num_segments: Number of near-equal free segments.
        jitter_fraction: Jitter bound as a fraction of the segment size.
        max_gap_fraction: Gap bound as a fraction of the slot length.
        rng: Random generator; a fresh unseeded one if None.

    Returns:
        Partitions in address order covering ``[0, total_size)``.

    Raises:
        ValueError: If the space is too small for the requested segments.
    """
    if num_segments <= 0:
        raise ValueError(f"num_segments must be positive, got {num_segments}")
    if rng is None:
        rng = random.Random()

    front = total_size - total_size // 4
    slot = front // num_segments
    if total_size // 4 == 0 or slot < 2:
        raise ValueError(
            f"total_size {total_size} is too small for {num_segments} fragmented segments"
        )

    max_gap = min(slot - 1, max(1, int(slot * max_gap_fraction)))
    base = slot - max_gap
    bound = int(base * jitter_fraction)

    partitions: List[Partition] = []
    cursor = 0
    for index in range(num_segments):
        slot_end = (index + 1) * slot
        gap = rng.randint(1, max_gap)

        size = base + rng.randint(-bound, bound)
        if size <= 0:
            size = base
        # Keep the segment and its gap inside the slot
        size = min(size, slot_end - cursor - gap)

        partitions.append(Partition(start=cursor, size=size))
        cursor += size
        partitions.append(
            Partition(
                start=cursor,
                size=gap,
                status=PartitionStatus.BUSY,
                owner=EXTERNAL_OWNER,
            )
        )
        cursor += gap

    partitions.append(Partition(start=cursor, size=total_size - cursor))
    return partitions
