"""Tests for the initial partition layouts."""

import random

import pytest

from dynmem_lite.config import InitMode, MemoryConfig
from dynmem_lite.memory.layout import fragmented_layout, single_partition_layout
from dynmem_lite.memory.partition import EXTERNAL_OWNER
from dynmem_lite.memory.partition_table import PartitionTable


def _assert_covers(partitions, total_size):
    assert partitions[0].start == 0
    for current, following in zip(partitions, partitions[1:]):
        assert current.end == following.start
    assert partitions[-1].end == total_size
    assert all(p.size > 0 for p in partitions)


@pytest.mark.unit
def test_single_partition_layout() -> None:
    [partition] = single_partition_layout(256)

    assert partition.start == 0
    assert partition.size == 256
    assert partition.is_free()


@pytest.mark.unit
def test_single_partition_layout_rejects_empty_space() -> None:
    with pytest.raises(ValueError):
        single_partition_layout(0)


@pytest.mark.unit
class TestFragmentedLayout:
    """Test the pre-fragmented layout."""

    @pytest.mark.parametrize("seed", range(20))
    def test_layout_covers_the_space(self, seed):
        partitions = fragmented_layout(1024, num_segments=5, rng=random.Random(seed))
        _assert_covers(partitions, 1024)

    @pytest.mark.parametrize("seed", range(20))
    def test_segments_alternate_with_external_gaps(self, seed):
        partitions = fragmented_layout(1024, num_segments=5, rng=random.Random(seed))

        # 5 x (free segment + gap) + trailing free segment
        assert len(partitions) == 11
        for index, partition in enumerate(partitions):
            if index % 2 == 0:
                assert partition.is_free()
            else:
                assert partition.is_external()
                assert partition.owner == EXTERNAL_OWNER

    @pytest.mark.parametrize("seed", range(20))
    def test_sizes_are_bounded(self, seed):
        total_size = 1024
        partitions = fragmented_layout(
            total_size,
            num_segments=5,
            jitter_fraction=0.2,
            max_gap_fraction=0.1,
            rng=random.Random(seed),
        )

        front = total_size - total_size // 4
        slot = front // 5
        max_gap = max(1, int(slot * 0.1))
        base = slot - max_gap
        bound = int(base * 0.2)

        segments = partitions[0:-1:2]
        gaps = partitions[1::2]
        for segment in segments:
            assert base - bound <= segment.size <= base + bound
        for gap in gaps:
            assert 1 <= gap.size <= max_gap

        # Trailing segment covers at least the last quarter
        assert partitions[-1].end == total_size
        assert partitions[-1].start <= front
        assert partitions[-1].size >= total_size // 4

    def test_same_seed_same_layout(self):
        a = fragmented_layout(2048, num_segments=6, rng=random.Random(99))
        b = fragmented_layout(2048, num_segments=6, rng=random.Random(99))
        assert a == b

    def test_no_jitter_gives_equal_segments(self):
        partitions = fragmented_layout(
            1024, num_segments=4, jitter_fraction=0.0, rng=random.Random(3)
        )
        sizes = {p.size for p in partitions[0:-1:2]}
        assert len(sizes) == 1

    def test_free_segments_survive_coalescing(self):
        table = PartitionTable(
            MemoryConfig(total_size=1024, init_mode=InitMode.FRAGMENTED, seed=5)
        )
        before = len(table)

        assert table.coalesce() == 0
        assert len(table) == before

    def test_too_small_space(self):
        with pytest.raises(ValueError):
            fragmented_layout(8, num_segments=5)

    def test_smallest_workable_space(self):
        partitions = fragmented_layout(4, num_segments=1, rng=random.Random(0))
        _assert_covers(partitions, 4)
        assert len(partitions) == 3

    def test_invalid_segment_count(self):
        with pytest.raises(ValueError):
            fragmented_layout(1024, num_segments=0)


@pytest.mark.unit
def test_fragmented_table_exercises_placement() -> None:
    """Each strategy picks a different segment in a fragmented table."""
    config = MemoryConfig(total_size=1024, init_mode=InitMode.FRAGMENTED, seed=11)
    table = PartitionTable(config)
    free = [i for i, p in enumerate(table.partitions) if p.is_free()]
    sizes = [table.partitions[i].size for i in free]

    table.set_strategy("first")
    assert table.find(1) == free[0]

    table.set_strategy("worst")
    assert table.find(1) == free[sizes.index(max(sizes))]

    table.set_strategy("best")
    assert table.find(1) == free[sizes.index(min(sizes))]
