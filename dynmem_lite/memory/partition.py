"""
Partition records for the partition table.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# Owner of the gap partitions that model memory held outside the simulation
EXTERNAL_OWNER = "<external>"


class PartitionStatus(Enum):
    """Status of a partition."""

    FREE = "free"
    BUSY = "busy"


@dataclass
class Partition:
    """A contiguous half-open address range ``[start, start + size)``.

    Attributes:
        start: Offset of the first unit in the address space.
        size: Length of the range, always positive.
        status: FREE or BUSY.
        owner: Process identifier, set only while BUSY.
    """

    start: int
    size: int
    status: PartitionStatus = PartitionStatus.FREE
    owner: Optional[str] = None

    @property
    def end(self) -> int:
        """First address past the partition."""
        return self.start + self.size

    def is_free(self) -> bool:
        return self.status == PartitionStatus.FREE

    def is_busy(self) -> bool:
        return self.status == PartitionStatus.BUSY

    def is_owned_by(self, process_id: str) -> bool:
        """Check if the partition is BUSY and owned by ``process_id``."""
        return self.is_busy() and self.owner == process_id

    def is_external(self) -> bool:
        return self.is_owned_by(EXTERNAL_OWNER)

    def is_contiguous_with(self, other: "Partition") -> bool:
        """Check if ``other`` starts exactly where this partition ends."""
        return self.end == other.start

    def occupy(self, process_id: str) -> None:
        self.status = PartitionStatus.BUSY
        self.owner = process_id

    def vacate(self) -> None:
        self.status = PartitionStatus.FREE
        self.owner = None

    def to_info(self) -> "PartitionInfo":
        return PartitionInfo(
            start=self.start, size=self.size, status=self.status, owner=self.owner
        )


@dataclass(frozen=True)
class PartitionInfo:
    """Read-only copy of a partition, as returned by snapshots."""

    start: int
    size: int
    status: PartitionStatus
    owner: Optional[str] = None

    @property
    def end(self) -> int:
        return self.start + self.size

    def is_free(self) -> bool:
        return self.status == PartitionStatus.FREE
