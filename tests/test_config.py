from dataclasses import replace

import pytest

from src.mazechase.config import CFG, Config
from src.mazechase.levels import LEVELS


def test_defaults_derive_tick_counts():
    assert CFG.ticks_per_tile == 16
    assert CFG.power_ticks == 450
    assert CFG.power_warning_ticks == 225


def test_velocity_must_divide_tile_size():
    with pytest.raises(ValueError):
        Config(velocity=3)


def test_warning_cannot_come_after_expiry():
    with pytest.raises(ValueError):
        Config(power_seconds=2, power_warning_seconds=3)


def test_total_levels_limited_to_available_templates():
    assert replace(CFG, total_levels=len(LEVELS)).total_levels == len(LEVELS)
    with pytest.raises(ValueError, match="no template"):
        replace(CFG, total_levels=len(LEVELS) + 2)
    with pytest.raises(ValueError):
        replace(CFG, total_levels=0)
