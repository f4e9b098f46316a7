"""
Allocation request dataclass.
"""

from dataclasses import dataclass

from dynmem_lite.memory.validation import validate_process_id, validate_size


@dataclass(frozen=True)
class AllocationRequest:
    """A request for memory from one process.

    Attributes:
        process_id: Name of the requesting process
        size: Number of units requested (KB)

    Raises:
        InvalidRequestError: On construction, if either field is invalid.
    """

    process_id: str
    size: int

    def __post_init__(self) -> None:
        validate_process_id(self.process_id)
        validate_size(self.size)
