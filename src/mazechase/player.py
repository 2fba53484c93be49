# player.py
from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional

from .config import Config, Direction, is_opposite
from .entity import MovingEntity
from .grid import Grid, Tile
from .power import PowerState

if TYPE_CHECKING:
    from .adversary import Adversary


class Player(MovingEntity):
    ANIMATION_PERIOD = 10   # ticks per frame
    FRAME_COUNT = 4
    NEUTRAL_FRAME = 1

    def __init__(self, x: int, y: int, grid: Grid, config: Config):
        super().__init__(x, y, grid, config)
        self.config = config
        self.requested_direction: Optional[Direction] = None
        self.made_first_move = False
        self.facing = Direction.RIGHT
        self.frame_index = 0
        self._animation_timer: Optional[int] = None
        self.power = PowerState(config.power_ticks, config.power_warning_ticks)

    # ---------- Input ----------
    def request_direction(self, direction: Direction) -> None:
        """Record the latest intent; reversals take effect at once, even mid-tile."""
        if is_opposite(direction, self.direction):
            self.direction = direction
        self.requested_direction = direction
        self.made_first_move = True

    # ---------- Tick ----------
    def update(self) -> bool:
        """Advance one tick. Returns True if the player moved."""
        self.power.tick()

        if (
            self.direction != self.requested_direction
            and self.is_aligned()
            and self.can_move(self.requested_direction)
        ):
            self.direction = self.requested_direction

        if not self.can_move(self.direction):
            self._animation_timer = None
            self.frame_index = self.NEUTRAL_FRAME
            return False

        if self._animation_timer is None:
            self._animation_timer = self.ANIMATION_PERIOD
            self.made_first_move = True

        self.advance()
        self.facing = self.direction
        self._animate()
        return True

    def _animate(self) -> None:
        self._animation_timer -= 1
        if self._animation_timer == 0:
            self._animation_timer = self.ANIMATION_PERIOD
            self.frame_index = (self.frame_index + 1) % self.FRAME_COUNT

    # ---------- Interactions ----------
    def on_pickup_consumed(self, kind: Tile) -> int:
        """Apply the effect of eating `kind`; returns the points earned."""
        if kind == Tile.PICKUP:
            return self.config.pickup_points
        if kind == Tile.POWER_PICKUP:
            self.power.activate()
            return self.config.power_pickup_points
        return 0

    def resolve_adversary_contact(self, adversaries: List[Adversary]) -> List[Adversary]:
        """While empowered, remove and return every adversary touching the player."""
        if not self.power.active:
            return []
        eaten = [a for a in adversaries if a.overlaps(self)]
        for adversary in eaten:
            adversaries.remove(adversary)
        return eaten

    def reset(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self.direction = None
        self.requested_direction = None
        self._animation_timer = None
        self.frame_index = self.NEUTRAL_FRAME
        self.facing = Direction.RIGHT
        self.power.reset()
        self.made_first_move = False

    @property
    def empowered(self) -> bool:
        return self.power.active
