# adversary.py
import random
from enum import Enum

from .config import DIRECTIONS, Config
from .entity import MovingEntity
from .grid import Grid
from .player import Player


class Appearance(Enum):
    NORMAL = "normal"
    VULNERABLE = "vulnerable"
    VULNERABLE_ALT = "vulnerable_alt"


class Adversary(MovingEntity):
    """
    Random walker. Every few ticks it rolls a new direction and takes it only
    if it is grid-aligned and the way is open; otherwise it keeps going, or
    waits against a wall until the next roll.
    """

    MIN_DIRECTION_TICKS = 1
    MAX_DIRECTION_TICKS = 20
    FLASH_PERIOD = 10

    def __init__(self, x: int, y: int, grid: Grid, config: Config, rng: random.Random):
        super().__init__(x, y, grid, config)
        self.rng = rng
        self.direction = rng.choice(DIRECTIONS)
        self.direction_timer_default = rng.randint(self.MIN_DIRECTION_TICKS, self.MAX_DIRECTION_TICKS)
        self.direction_timer = self.direction_timer_default
        self.flash_timer = self.FLASH_PERIOD
        self.appearance = Appearance.NORMAL

    def update(self) -> bool:
        """Advance one tick. Returns True if the adversary moved."""
        self._change_direction()
        if self.can_move(self.direction):
            self.advance()
            return True
        return False

    def _change_direction(self) -> None:
        self.direction_timer -= 1
        if self.direction_timer > 0:
            return
        self.direction_timer = self.direction_timer_default
        candidate = self.rng.choice(DIRECTIONS)
        if candidate != self.direction and self.is_aligned() and self.can_move(candidate):
            self.direction = candidate

    def resolve_appearance(self, player: Player) -> Appearance:
        power = player.power
        if not power.active:
            self.appearance = Appearance.NORMAL
        elif not power.about_to_expire:
            self.appearance = Appearance.VULNERABLE
        else:
            self.flash_timer -= 1
            if self.flash_timer == 0:
                self.flash_timer = self.FLASH_PERIOD
                self.appearance = (
                    Appearance.VULNERABLE_ALT
                    if self.appearance == Appearance.VULNERABLE
                    else Appearance.VULNERABLE
                )
        return self.appearance
