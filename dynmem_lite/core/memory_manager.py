"""
Caller-facing memory manager.
"""

import logging
from typing import Dict, List, Optional, Union

from dynmem_lite.config import InitMode, MemoryConfig
from dynmem_lite.core.report import format_partitions, format_stats
from dynmem_lite.core.request import AllocationRequest
from dynmem_lite.memory.errors import AllocationOutcome, InvalidRequestError
from dynmem_lite.memory.partition import PartitionInfo
from dynmem_lite.memory.partition_table import PartitionTable
from dynmem_lite.placement.strategy import FitStrategy

logger = logging.getLogger(__name__)


class MemoryManager:
    """Boolean API over a PartitionTable.

    Requests are validated before they reach the table. Invalid requests,
    out-of-space allocations and releases of unknown processes all return
    False; ``last_outcome`` tells them apart.
    """

    def __init__(self, config: Optional[MemoryConfig] = None) -> None:
        """Initialize the manager and its partition table.

        Args:
            config: Configuration for the table; defaults to MemoryConfig().

        Raises:
            InternalAllocationError: If the backing store cannot be allocated.
        """
        self.table = PartitionTable(config)
        self.last_outcome: Optional[AllocationOutcome] = None

    @property
    def config(self) -> MemoryConfig:
        return self.table.config

    @property
    def strategy(self) -> FitStrategy:
        return self.table.strategy

    def initialize(
        self,
        mode: Union[InitMode, str, None] = None,
        total_size: Optional[int] = None,
    ) -> None:
        """Replace the table with a fresh one.

        The active strategy and the other configuration values carry over.

        Args:
            mode: Initialization mode; keeps the current one if None.
            total_size: Size of the address space; keeps the current one if None.
        """
        values = self.config.to_dict()
        values["strategy"] = self.strategy
        if mode is not None:
            values["init_mode"] = mode
        if total_size is not None:
            values["total_size"] = total_size

        self.table = PartitionTable(MemoryConfig.from_dict(values))
        self.last_outcome = None
        logger.info(
            "Initialized %d units in %s mode", self.table.total_size, self.table.init_mode.value
        )

    def set_strategy(self, strategy: Union[FitStrategy, int, str]) -> FitStrategy:
        """Select the fit strategy; invalid input selects first-fit."""
        selected = self.table.set_strategy(strategy)
        logger.info("Using %s placement", selected.label)
        return selected

    def allocate(self, process_id: str, size: int) -> bool:
        """Allocate ``size`` units to ``process_id``.

        Returns:
            True on success, False if the request is invalid or no single
            free partition is large enough.
        """
        try:
            self.last_outcome = self.table.allocate(process_id, size)
        except InvalidRequestError as e:
            logger.warning("Rejected allocation request: %s", e)
            self.last_outcome = AllocationOutcome.INVALID_REQUEST
        return bool(self.last_outcome)

    def submit(self, request: AllocationRequest) -> bool:
        """Allocate for an already validated request."""
        return self.allocate(request.process_id, request.size)

    def release(self, process_id: str) -> bool:
        """Release every partition of ``process_id``.

        Returns:
            True if at least one partition was released, False otherwise.
        """
        try:
            self.last_outcome = self.table.release(process_id)
        except InvalidRequestError as e:
            logger.warning("Rejected release request: %s", e)
            self.last_outcome = AllocationOutcome.INVALID_REQUEST
        return bool(self.last_outcome)

    def snapshot(self) -> List[PartitionInfo]:
        return self.table.snapshot()

    def reset(self) -> None:
        """Rebuild the table in its current mode."""
        self.table.reset()
        self.last_outcome = None

    def get_stats(self) -> Dict[str, float]:
        return self.table.get_stats()

    def render(self) -> str:
        """Render the partition table and a statistics line as text."""
        return "\n".join(
            [
                f"Strategy: {self.strategy.label}",
                format_partitions(self.snapshot()),
                format_stats(self.get_stats()),
            ]
        )
