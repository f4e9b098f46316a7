"""Errors and allocation outcomes for the partition table."""

from enum import Enum


class AllocationOutcome(Enum):
    """Result of an allocate or release call.

    Only ``OK`` is truthy, so an outcome can be used directly as the
    boolean success flag.
    """

    OK = "ok"
    OUT_OF_SPACE = "out_of_space"  # No free partition large enough
    NOT_FOUND = "not_found"  # No partition owned by the process
    INVALID_REQUEST = "invalid_request"  # Rejected before reaching the table

    def __bool__(self) -> bool:
        return self is AllocationOutcome.OK


class PartitionError(Exception):
    """Base class for partition table errors."""


class InvalidRequestError(PartitionError, ValueError):
    """Raised for a non-positive size or an unusable process identifier."""


class InternalAllocationError(PartitionError, MemoryError):
    """Raised when backing storage for the address space cannot be allocated."""


class PartitionTableCorruptedError(PartitionError, RuntimeError):
    """Raised when the partition table no longer satisfies its invariants."""
