"""Tests for MemoryConfig."""

import pytest

from dynmem_lite.config import InitMode, MemoryConfig
from dynmem_lite.placement.strategy import FitStrategy


class TestMemoryConfig:
    """Test MemoryConfig defaults, validation and serialization."""

    def test_defaults(self):
        config = MemoryConfig()

        assert config.total_size == 1024
        assert config.strategy is FitStrategy.FIRST_FIT
        assert config.init_mode is InitMode.SINGLE
        assert config.num_segments == 5
        assert config.seed is None
        assert config.enable_backing_store is False
        assert config.device == "cpu"

    def test_strategy_is_normalized(self):
        assert MemoryConfig(strategy=3).strategy is FitStrategy.WORST_FIT
        assert MemoryConfig(strategy="best-fit").strategy is FitStrategy.BEST_FIT
        assert MemoryConfig(strategy=99).strategy is FitStrategy.FIRST_FIT

    def test_init_mode_from_string(self):
        assert MemoryConfig(init_mode="fragmented").init_mode is InitMode.FRAGMENTED

    def test_unknown_init_mode(self):
        with pytest.raises(ValueError):
            MemoryConfig(init_mode="buddy")

    @pytest.mark.parametrize("total_size", [0, -1, 10.5, "1024"])
    def test_invalid_total_size(self, total_size):
        with pytest.raises(ValueError, match="total_size"):
            MemoryConfig(total_size=total_size)

    def test_invalid_num_segments(self):
        with pytest.raises(ValueError, match="num_segments must be positive"):
            MemoryConfig(num_segments=0)

    @pytest.mark.parametrize("fraction", [-0.1, 1.0, 2.5])
    def test_invalid_jitter_fraction(self, fraction):
        with pytest.raises(ValueError, match="jitter_fraction"):
            MemoryConfig(jitter_fraction=fraction)

    @pytest.mark.parametrize("fraction", [0.0, 1.0])
    def test_invalid_max_gap_fraction(self, fraction):
        with pytest.raises(ValueError, match="max_gap_fraction"):
            MemoryConfig(max_gap_fraction=fraction)

    def test_unknown_keys_are_ignored(self):
        config = MemoryConfig(total_size=64, legacy_option=True)
        assert config.total_size == 64
        assert not hasattr(config, "legacy_option")

    def test_dict_round_trip(self):
        config = MemoryConfig(
            total_size=4096,
            strategy=FitStrategy.BEST_FIT,
            init_mode=InitMode.FRAGMENTED,
            num_segments=8,
            seed=42,
        )

        values = config.to_dict()
        restored = MemoryConfig.from_dict(values)

        assert values["strategy"] == 2
        assert values["init_mode"] == "fragmented"
        assert restored.to_dict() == values

    def test_repr(self):
        text = repr(MemoryConfig(total_size=512, strategy="worst"))
        assert text.startswith("MemoryConfig(")
        assert "total_size=512" in text
        assert "strategy=WORST_FIT" in text
