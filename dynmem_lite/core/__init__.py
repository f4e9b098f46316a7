"""
Caller-facing API of the memory simulator.

Provides:
- MemoryManager: boolean allocate/release API with request validation
- AllocationRequest: validated (process, size) request
- format_partitions / format_stats: text rendering of snapshots
"""

from dynmem_lite.core.memory_manager import MemoryManager
from dynmem_lite.core.report import format_partitions, format_stats
from dynmem_lite.core.request import AllocationRequest

__all__ = ["AllocationRequest", "MemoryManager", "format_partitions", "format_stats"]
