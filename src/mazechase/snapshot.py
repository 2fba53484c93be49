# snapshot.py
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np  # type: ignore

from .config import Direction
from .match import Phase


@dataclass(frozen=True)
class EntityView:
    x: int
    y: int
    direction: Optional[Direction]
    appearance: str
    frame: int = 0


@dataclass(frozen=True)
class Snapshot:
    """Everything a renderer needs for one frame; detached from live state."""
    tiles: np.ndarray
    tile_size: int
    player: EntityView
    player_visible: bool
    adversaries: Tuple[EntityView, ...]
    phase: Phase
    level: int
    score: int
    animated_score: int
    lives: int
    elapsed_ticks: int
    elapsed_seconds: int
    transition_ticks: int
    transition_total: int
    final_time: int
    bonus_points: int
    sound_enabled: bool
    end_animation_ticks: int = 0
    end_animation_total: int = 75

    @property
    def width_px(self) -> int:
        return int(self.tiles.shape[1]) * self.tile_size

    @property
    def height_px(self) -> int:
        return int(self.tiles.shape[0]) * self.tile_size
