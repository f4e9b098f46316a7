"""
dynmem_lite: A lightweight simulator for dynamic (variable-partition) memory allocation.

This package provides:
- PartitionTable: ordered partition list with split-on-allocate and coalesce-on-release
- Placement strategies: first-fit, best-fit and worst-fit
- Initial layouts: one free partition or a pre-fragmented address space
- MemoryManager: boolean caller-facing API with request validation
"""

__version__ = "0.1.0"
__author__ = "dynmem-lite contributors"

from dynmem_lite.config import InitMode, MemoryConfig
from dynmem_lite.core.memory_manager import MemoryManager
from dynmem_lite.memory.partition_table import PartitionTable
from dynmem_lite.placement.strategy import FitStrategy

__all__ = [
    "FitStrategy",
    "InitMode",
    "MemoryConfig",
    "MemoryManager",
    "PartitionTable",
]
