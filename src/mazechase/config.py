from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Optional, Tuple

from .levels import LEVELS


# ----- Directions -----
class Direction(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)

# (dx, dy) in tile units
DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

OPPOSITE: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def is_opposite(a: Optional[Direction], b: Optional[Direction]) -> bool:
    if a is None or b is None:
        return False
    return OPPOSITE[a] == b


# ----- Colors -----
BG = (0, 0, 0)
WALL = (33, 33, 222)
PICKUP = (255, 220, 90)
POWER_PICKUP = (255, 120, 200)
PLAYER = (255, 255, 0)
ADVERSARY = (220, 60, 60)
VULNERABLE = (40, 40, 255)
VULNERABLE_ALT = (240, 240, 250)
TEXT = (220, 220, 230)

# ----- Layout -----
HUD_HEIGHT = 56


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass(frozen=True)
class Config:
    tile_size: int = 32
    velocity: int = 2            # px per tick
    fps: int = 75                # ticks per second
    total_levels: int = 3
    start_lives: int = 3

    pickup_points: int = 10
    power_pickup_points: int = 50
    adversary_points: int = 200

    power_seconds: int = 6
    power_warning_seconds: int = 3

    invincibility_ticks: int = 75
    transition_ticks: int = 150
    score_animation_ticks: int = 75
    end_animation_ticks: int = 75    # end-of-game box fade-in

    time_bonus_base: int = 10000
    time_bonus_per_second: int = 100

    leaderboard_size: int = 10
    seed: Optional[int] = None

    def __post_init__(self):
        if self.velocity <= 0 or self.tile_size % self.velocity != 0:
            raise ValueError(
                f"velocity {self.velocity} must evenly divide tile size {self.tile_size}"
            )
        if self.power_warning_seconds > self.power_seconds:
            raise ValueError("power warning must not come after power expiry")
        if self.total_levels < 1:
            raise ValueError("total_levels must be at least 1")
        missing = [n for n in range(1, self.total_levels + 1) if n not in LEVELS]
        if missing:
            raise ValueError(f"total_levels {self.total_levels} but no template for levels {missing}")

    @property
    def ticks_per_tile(self) -> int:
        return self.tile_size // self.velocity

    @property
    def power_ticks(self) -> int:
        return self.power_seconds * self.fps

    @property
    def power_warning_ticks(self) -> int:
        return self.power_warning_seconds * self.fps


CFG = Config()
