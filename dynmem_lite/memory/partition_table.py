"""
Partition table for dynamic (variable-partition) memory allocation.

This module implements a PartitionTable that carves a single contiguous
address space into partitions which are either free or owned by a named
process. Partitions are kept in a list ordered by start address, covering
``[0, total_size)`` with no holes and no overlaps.

The table supports:
- First-fit, best-fit and worst-fit placement
- Splitting a free partition on allocation (allocated part at the low end)
- Releasing every partition owned by a process
- Coalescing physically adjacent free partitions after release
- Reset to the configured initial layout
- An optional torch tensor backing the address space
"""

import logging
import random
from typing import Dict, List, Optional, Union

import torch

from dynmem_lite.config import InitMode, MemoryConfig
from dynmem_lite.memory.errors import (
    AllocationOutcome,
    InternalAllocationError,
    PartitionTableCorruptedError,
)
from dynmem_lite.memory.layout import fragmented_layout, single_partition_layout
from dynmem_lite.memory.partition import Partition, PartitionInfo, PartitionStatus
from dynmem_lite.memory.validation import validate_process_id, validate_size
from dynmem_lite.placement.strategy import FitStrategy, find_partition, normalize_strategy

logger = logging.getLogger(__name__)


class PartitionTable:
    """Ordered table of partitions covering one address space.

    Attributes:
        config: Configuration the table was built from.
        total_size: Size of the address space.
        strategy: Active fit strategy.
        init_mode: Layout used at construction and on reset.
        partitions: Partitions ordered by ascending start address.
        memory: Backing byte tensor of length total_size, or None when the
            backing store is disabled.
    """

    def __init__(self, config: Optional[MemoryConfig] = None) -> None:
        """Initialize PartitionTable from a configuration.

        Args:
            config: Table configuration; defaults to MemoryConfig().

        Raises:
            InternalAllocationError: If the backing store cannot be allocated.
            ValueError: If the fragmented layout does not fit the space.
        """
        self.config = config if config is not None else MemoryConfig()
        self.total_size = self.config.total_size
        self.strategy = self.config.strategy
        self.init_mode = self.config.init_mode

        # Drives the fragmented layout; reset draws a fresh layout from it
        self._rng = random.Random(self.config.seed)

        self.memory: Optional[torch.Tensor] = None
        if self.config.enable_backing_store:
            self.memory = self._allocate_backing_store()

        self.partitions: List[Partition] = self._build_layout()

    def _allocate_backing_store(self) -> torch.Tensor:
        try:
            return torch.zeros(
                self.total_size, dtype=torch.uint8, device=self.config.device
            )
        except (RuntimeError, MemoryError) as e:
            raise InternalAllocationError(
                f"Failed to allocate {self.total_size} units of backing storage: {e}"
            ) from e

    def _build_layout(self) -> List[Partition]:
        if self.init_mode is InitMode.FRAGMENTED:
            return fragmented_layout(
                self.total_size,
                num_segments=self.config.num_segments,
                jitter_fraction=self.config.jitter_fraction,
                max_gap_fraction=self.config.max_gap_fraction,
                rng=self._rng,
            )
        return single_partition_layout(self.total_size)

    def set_strategy(self, strategy: Union[FitStrategy, int, str]) -> FitStrategy:
        """Change the active fit strategy.

        Args:
            strategy: Strategy in any form accepted by normalize_strategy.
                Unrecognized values select FIRST_FIT.

        Returns:
            The strategy now in effect.
        """
        self.strategy = normalize_strategy(strategy)
        return self.strategy

    def find(self, size: int) -> Optional[int]:
        """Return the index the active strategy would allocate ``size`` from.

        Args:
            size: Requested size.

        Returns:
            Index of a free partition with at least ``size`` units, or None.
        """
        return find_partition(self.strategy, self.partitions, size)

    def allocate(self, process_id: str, size: int) -> AllocationOutcome:
        """Allocate ``size`` units to ``process_id``.

        An exact fit turns the chosen free partition BUSY in place. A larger
        partition is split: the low ``size`` units become a new BUSY
        partition inserted just before the remaining free part.

        Args:
            process_id: Owner of the new allocation.
            size: Number of units requested.

        Returns:
            AllocationOutcome.OK, or OUT_OF_SPACE if no single free
            partition is large enough. The table is unchanged on failure.

        Raises:
            InvalidRequestError: If ``size`` or ``process_id`` is invalid.
        """
        validate_process_id(process_id)
        validate_size(size)

        index = self.find(size)
        if index is None:
            logger.warning(
                "No free partition of %d units for %s (%s)",
                size,
                process_id,
                self.strategy.label,
            )
            return AllocationOutcome.OUT_OF_SPACE

        target = self.partitions[index]
        if target.size == size:
            target.occupy(process_id)
            logger.debug("Exact fit at %d for %s", target.start, process_id)
        else:
            allocated = Partition(
                start=target.start,
                size=size,
                status=PartitionStatus.BUSY,
                owner=process_id,
            )
            target.start += size
            target.size -= size
            self.partitions.insert(index, allocated)
            logger.debug(
                "Split partition at %d: %d units to %s, %d units left free",
                allocated.start,
                size,
                process_id,
                target.size,
            )

        logger.info("Allocated %d units to %s", size, process_id)
        return AllocationOutcome.OK

    def release(self, process_id: str) -> AllocationOutcome:
        """Release every partition owned by ``process_id`` and coalesce.

        Args:
            process_id: Owner whose partitions are freed.

        Returns:
            AllocationOutcome.OK, or NOT_FOUND if the process owns nothing.
            Nothing is changed and no coalescing runs on NOT_FOUND.

        Raises:
            InvalidRequestError: If ``process_id`` is invalid.
        """
        validate_process_id(process_id)

        released = 0
        for partition in self.partitions:
            if partition.is_owned_by(process_id):
                if self.memory is not None:
                    self.memory[partition.start:partition.end].zero_()
                partition.vacate()
                released += 1

        if released == 0:
            logger.warning("No partition owned by %s", process_id)
            return AllocationOutcome.NOT_FOUND

        merges = self.coalesce()
        logger.info(
            "Released %d partition(s) of %s, %d merge(s)", released, process_id, merges
        )
        return AllocationOutcome.OK

    def coalesce(self) -> int:
        """Merge adjacent free partitions until no merge is possible.

        After each merge the scan restarts from the first partition, so runs
        of three or more free partitions collapse completely.

        Returns:
            Number of merges performed.
        """
        merges = 0
        merged = True
        while merged:
            merged = False
            for i in range(len(self.partitions) - 1):
                current = self.partitions[i]
                following = self.partitions[i + 1]
                if (
                    current.is_free()
                    and following.is_free()
                    and current.is_contiguous_with(following)
                ):
                    current.size += following.size
                    del self.partitions[i + 1]
                    logger.debug(
                        "Merged free partitions into [%d, %d)", current.start, current.end
                    )
                    merges += 1
                    merged = True
                    break
        return merges

    def snapshot(self) -> List[PartitionInfo]:
        """Return read-only copies of the partitions in address order."""
        return [partition.to_info() for partition in self.partitions]

    def get_owned(self, process_id: str) -> List[PartitionInfo]:
        """Return the partitions currently owned by ``process_id``."""
        return [p.to_info() for p in self.partitions if p.is_owned_by(process_id)]

    def get_regions(self, process_id: str) -> List[torch.Tensor]:
        """Get backing store views for every partition owned by ``process_id``.

        Args:
            process_id: Owner to look up.

        Returns:
            One uint8 tensor view per owned partition, in address order.
            Empty if the process owns nothing or the backing store is disabled.
        """
        if self.memory is None:
            return []
        return [
            self.memory[p.start:p.end]
            for p in self.partitions
            if p.is_owned_by(process_id)
        ]

    def reset(self) -> None:
        """Discard all partitions and rebuild the initial layout."""
        self.partitions = self._build_layout()
        if self.memory is not None:
            self.memory.zero_()
        logger.info(
            "Partition table reset (%s, %d units)", self.init_mode.value, self.total_size
        )

    def get_stats(self) -> Dict[str, float]:
        """Get partition table statistics.

        Returns:
            Dictionary with keys:
            - total: Size of the address space
            - used: Units in BUSY partitions (external gaps included)
            - free: Units in FREE partitions
            - utilization: Fraction of the space in use (0.0 to 1.0)
            - num_partitions: Number of partitions
            - num_free_partitions: Number of FREE partitions
            - largest_free: Size of the largest FREE partition
            - external_fragmentation: 1 - largest_free / free, 0.0 when
              nothing is free
        """
        free_sizes = [p.size for p in self.partitions if p.is_free()]
        free = sum(free_sizes)
        used = self.total_size - free
        largest_free = max(free_sizes, default=0)

        return {
            "total": self.total_size,
            "used": used,
            "free": free,
            "utilization": used / self.total_size,
            "num_partitions": len(self.partitions),
            "num_free_partitions": len(free_sizes),
            "largest_free": largest_free,
            "external_fragmentation": 1.0 - largest_free / free if free else 0.0,
        }

    def check_invariants(self) -> None:
        """Verify ordering, coverage and ownership of the partitions.

        Raises:
            PartitionTableCorruptedError: If any invariant is violated.
        """
        if not self.partitions:
            raise PartitionTableCorruptedError("partition table is empty")
        if self.partitions[0].start != 0:
            raise PartitionTableCorruptedError(
                f"first partition starts at {self.partitions[0].start}, expected 0"
            )

        for i, partition in enumerate(self.partitions):
            if partition.size <= 0:
                raise PartitionTableCorruptedError(
                    f"partition {i} has non-positive size {partition.size}"
                )
            if partition.is_busy() and not partition.owner:
                raise PartitionTableCorruptedError(f"busy partition {i} has no owner")
            if partition.is_free() and partition.owner is not None:
                raise PartitionTableCorruptedError(
                    f"free partition {i} still owned by {partition.owner}"
                )
            if i + 1 < len(self.partitions) and not partition.is_contiguous_with(
                self.partitions[i + 1]
            ):
                raise PartitionTableCorruptedError(
                    f"partition {i} ends at {partition.end} but partition {i + 1} "
                    f"starts at {self.partitions[i + 1].start}"
                )

        if self.partitions[-1].end != self.total_size:
            raise PartitionTableCorruptedError(
                f"partitions end at {self.partitions[-1].end}, expected {self.total_size}"
            )

    def __len__(self) -> int:
        return len(self.partitions)

    def __repr__(self) -> str:
        return (
            f"PartitionTable(total_size={self.total_size}, "
            f"strategy={self.strategy.name}, partitions={len(self.partitions)})"
        )
