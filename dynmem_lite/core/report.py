"""Text rendering of partition snapshots and statistics."""

from typing import Dict, Sequence

from dynmem_lite.memory.partition import PartitionInfo

_HEADER = ("#", "Start", "Size(KB)", "Status", "Process")
_RULE = "-" * 54


def format_partitions(partitions: Sequence[PartitionInfo]) -> str:
    """Render partitions as a fixed-width table, one row per partition."""
    lines = [
        _RULE,
        f"| {_HEADER[0]:<4} | {_HEADER[1]:<8} | {_HEADER[2]:<8} | {_HEADER[3]:<6} | {_HEADER[4]:<12} |",
        _RULE,
    ]
    for number, partition in enumerate(partitions, start=1):
        owner = partition.owner if partition.owner is not None else "-"
        lines.append(
            f"| {number:<4} | {partition.start:<8} | {partition.size:<8} "
            f"| {partition.status.value:<6} | {owner:<12} |"
        )
    lines.append(_RULE)
    return "\n".join(lines)


def format_stats(stats: Dict[str, float]) -> str:
    """Render the output of PartitionTable.get_stats on one line."""
    return (
        f"used {stats['used']}/{stats['total']} ({stats['utilization']:.1%}), "
        f"{stats['num_free_partitions']} free partition(s), "
        f"largest free {stats['largest_free']}, "
        f"external fragmentation {stats['external_fragmentation']:.1%}"
    )
