"""
Partition bookkeeping for the simulated address space.

Provides:
- Partition / PartitionInfo: partition records and read-only snapshots
- PartitionStatus: FREE or BUSY
- Layouts: single free partition and pre-fragmented initial states
- Errors: OutOfSpace / NotFound outcomes and the exception hierarchy

PartitionTable lives in dynmem_lite.memory.partition_table.
"""

from dynmem_lite.memory.errors import (
    AllocationOutcome,
    InternalAllocationError,
    InvalidRequestError,
    PartitionError,
    PartitionTableCorruptedError,
)
from dynmem_lite.memory.layout import fragmented_layout, single_partition_layout
from dynmem_lite.memory.partition import (
    EXTERNAL_OWNER,
    Partition,
    PartitionInfo,
    PartitionStatus,
)

__all__ = [
    "AllocationOutcome",
    "EXTERNAL_OWNER",
    "InternalAllocationError",
    "InvalidRequestError",
    "Partition",
    "PartitionError",
    "PartitionInfo",
    "PartitionStatus",
    "PartitionTableCorruptedError",
    "fragmented_layout",
    "single_partition_layout",
]
