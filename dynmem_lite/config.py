"""
Memory simulator configuration.

This module defines the MemoryConfig class which stores the parameters of a
simulated address space: its total size, the active fit strategy, how the
partition table is initialized, and the knobs of the pre-fragmented layout.
"""

from enum import Enum
from typing import Any, Dict, Optional, Union

from dynmem_lite.placement.strategy import FitStrategy, normalize_strategy


class InitMode(Enum):
    """How the partition table is populated at initialization and reset."""

    SINGLE = "single"  # One free partition spanning the whole space
    FRAGMENTED = "fragmented"  # Free segments separated by external gaps


class MemoryConfig:
    """Configuration class for a simulated address space.

    Attributes:
        total_size: Size of the address space in KB.
        strategy: Active fit strategy.
        init_mode: Initialization mode used by the table and by reset.
        num_segments: Number of near-equal free segments in fragmented mode.
        jitter_fraction: Maximum segment size jitter as a fraction of the
            nominal segment size (fragmented mode).
        max_gap_fraction: Maximum external gap length as a fraction of the
            nominal segment size (fragmented mode).
        seed: Seed for the fragmented layout generator, None for random.
        enable_backing_store: Whether the table owns a torch byte tensor
            backing the address space.
        device: Device for the backing store tensor.
    """

    def __init__(
        self,
        total_size: int = 1024,
        strategy: Union[FitStrategy, int, str] = FitStrategy.FIRST_FIT,
        init_mode: Union[InitMode, str] = InitMode.SINGLE,
        num_segments: int = 5,
        jitter_fraction: float = 0.2,
        max_gap_fraction: float = 0.1,
        seed: Optional[int] = None,
        enable_backing_store: bool = False,
        device: str = "cpu",
        **kwargs: Any,
    ) -> None:
        """Initialize MemoryConfig.

        Args:
            total_size: Size of the address space in KB.
            strategy: Fit strategy; unrecognized values become FIRST_FIT.
            init_mode: InitMode or its string value.
            num_segments: Number of free segments in fragmented mode.
            jitter_fraction: Segment size jitter bound, in [0, 1).
            max_gap_fraction: External gap length bound, in (0, 1).
            seed: Seed for the fragmented layout generator.
            enable_backing_store: Allocate a torch tensor for the space.
            device: Device for the backing store tensor.
            **kwargs: Additional configuration parameters (ignored).
        """
        self.total_size = total_size
        self.strategy = normalize_strategy(strategy)
        self.init_mode = InitMode(init_mode)
        self.num_segments = num_segments
        self.jitter_fraction = jitter_fraction
        self.max_gap_fraction = max_gap_fraction
        self.seed = seed
        self.enable_backing_store = enable_backing_store
        self.device = device

        self._validate()

    def _validate(self) -> None:
        """Validate configuration parameters.

        Raises:
            ValueError: If configuration parameters are invalid.
        """
        if isinstance(self.total_size, bool) or not isinstance(self.total_size, int):
            raise ValueError(f"total_size must be an integer, got {self.total_size!r}")
        if self.total_size <= 0:
            raise ValueError(f"total_size must be positive, got {self.total_size}")
        if self.num_segments <= 0:
            raise ValueError(f"num_segments must be positive, got {self.num_segments}")
        if not 0.0 <= self.jitter_fraction < 1.0:
            raise ValueError(
                f"jitter_fraction must be in [0, 1), got {self.jitter_fraction}"
            )
        if not 0.0 < self.max_gap_fraction < 1.0:
            raise ValueError(
                f"max_gap_fraction must be in (0, 1), got {self.max_gap_fraction}"
            )

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "MemoryConfig":
        """Build a configuration from a dictionary such as ``to_dict`` output.

        Args:
            values: Configuration parameters; unknown keys are ignored.

        Returns:
            MemoryConfig instance.
        """
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary.

        Returns:
            Dictionary containing all configuration parameters, with enums
            stored by value.
        """
        return {
            "total_size": self.total_size,
            "strategy": self.strategy.value,
            "init_mode": self.init_mode.value,
            "num_segments": self.num_segments,
            "jitter_fraction": self.jitter_fraction,
            "max_gap_fraction": self.max_gap_fraction,
            "seed": self.seed,
            "enable_backing_store": self.enable_backing_store,
            "device": self.device,
        }

    def __repr__(self) -> str:
        return (
            f"MemoryConfig("
            f"total_size={self.total_size}, "
            f"strategy={self.strategy.name}, "
            f"init_mode={self.init_mode.name}, "
            f"num_segments={self.num_segments}, "
            f"jitter_fraction={self.jitter_fraction}, "
            f"max_gap_fraction={self.max_gap_fraction}, "
            f"seed={self.seed}, "
            f"enable_backing_store={self.enable_backing_store}, "
            f"device='{self.device}'"
            f")"
        )
