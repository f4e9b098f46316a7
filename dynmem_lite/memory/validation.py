"""Validation of allocation and release arguments."""

from dynmem_lite.memory.errors import InvalidRequestError
from dynmem_lite.memory.partition import EXTERNAL_OWNER


def validate_process_id(process_id: str) -> None:
    """Check that ``process_id`` can own a partition.

    Raises:
        InvalidRequestError: If the id is not a non-empty string or is the
            reserved external owner.
    """
    if not isinstance(process_id, str):
        raise InvalidRequestError(
            f"process_id must be a string, got {type(process_id).__name__}"
        )
    if not process_id.strip():
        raise InvalidRequestError("process_id cannot be empty")
    if process_id == EXTERNAL_OWNER:
        raise InvalidRequestError(f"process_id {EXTERNAL_OWNER!r} is reserved")


def validate_size(size: int) -> None:
    """Check that ``size`` is a positive integer.

    Raises:
        InvalidRequestError: If the size is not a positive integer.
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidRequestError(f"size must be an integer, got {size!r}")
    if size <= 0:
        raise InvalidRequestError(f"size must be positive, got {size}")
