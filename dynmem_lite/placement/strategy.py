"""Fit strategy selection."""

import logging
from enum import Enum
from typing import Optional, Sequence, Union

from dynmem_lite.memory.partition import Partition
from dynmem_lite.placement.search import best_fit, first_fit, worst_fit

logger = logging.getLogger(__name__)


class FitStrategy(Enum):
    """Rule used to pick the free partition that satisfies a request."""

    FIRST_FIT = 1
    BEST_FIT = 2
    WORST_FIT = 3

    @property
    def label(self) -> str:
        """Human readable name, e.g. "first-fit"."""
        return self.name.lower().replace("_", "-")


_ALIASES = {
    "first": FitStrategy.FIRST_FIT,
    "best": FitStrategy.BEST_FIT,
    "worst": FitStrategy.WORST_FIT,
}


def normalize_strategy(value: Union[FitStrategy, int, str, None]) -> FitStrategy:
    """Coerce ``value`` to a FitStrategy.

    Accepts a FitStrategy, its integer value (1-3), or a name such as
    "best_fit", "Best-Fit" or "best". Anything else falls back to
    FIRST_FIT instead of being rejected.

    Args:
        value: Strategy in any accepted form.

    Returns:
        The matching FitStrategy, or FIRST_FIT for unrecognized input.
    """
    if isinstance(value, FitStrategy):
        return value

    # bool is an int subclass but never a meaningful strategy
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return FitStrategy(value)
        except ValueError:
            pass
    elif isinstance(value, str):
        key = value.strip().upper().replace("-", "_")
        if key in FitStrategy.__members__:
            return FitStrategy[key]
        alias = _ALIASES.get(key.lower())
        if alias is not None:
            return alias

    logger.warning("Unknown fit strategy %r, falling back to first-fit", value)
    return FitStrategy.FIRST_FIT


def find_partition(
    strategy: FitStrategy,
    partitions: Sequence[Partition],
    size: int,
) -> Optional[int]:
    """Run the search function for ``strategy``.

    Args:
        strategy: Active fit strategy.
        partitions: Partitions in address order.
        size: Requested size.

    Returns:
        Index of the chosen free partition, or None if nothing fits.
    """
    if strategy is FitStrategy.BEST_FIT:
        return best_fit(partitions, size)
    elif strategy is FitStrategy.WORST_FIT:
        return worst_fit(partitions, size)
    else:
        return first_fit(partitions, size)
