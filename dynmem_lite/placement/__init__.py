"""
Placement strategies for choosing a free partition.

Provides:
- FitStrategy: closed set of strategies (first-fit, best-fit, worst-fit)
- first_fit / best_fit / worst_fit: pure search functions
- find_partition: strategy dispatch
- normalize_strategy: lenient strategy parsing
"""

from dynmem_lite.placement.search import best_fit, first_fit, worst_fit
from dynmem_lite.placement.strategy import (
    FitStrategy,
    find_partition,
    normalize_strategy,
)

__all__ = [
    "FitStrategy",
    "best_fit",
    "find_partition",
    "first_fit",
    "normalize_strategy",
    "worst_fit",
]
