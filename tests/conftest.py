import os
import random

import pytest

# headless pygame for anything that touches display or mixer
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from src.mazechase.config import CFG  # noqa: E402
from src.mazechase.grid import Grid  # noqa: E402
from src.mazechase import levels  # noqa: E402


class FixedRng(random.Random):
    """Random whose choice() always returns `pick`."""

    def __init__(self, pick, countdown=5):
        super().__init__(0)
        self.pick = pick
        self.countdown = countdown

    def choice(self, seq):
        return self.pick

    def randint(self, a, b):
        return self.countdown


@pytest.fixture
def cfg():
    return CFG


@pytest.fixture
def make_grid(cfg):
    def _make(*rows):
        return Grid.from_rows(list(rows), cfg.tile_size)
    return _make


@pytest.fixture
def patch_level(monkeypatch):
    """Swap in a custom template for a level number."""
    def _patch(level, *rows):
        monkeypatch.setitem(levels.LEVELS, level, list(rows))
    return _patch


@pytest.fixture
def fixed_rng():
    return FixedRng
