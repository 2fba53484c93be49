# entity.py
from typing import Optional

from .config import DELTAS, Config, Direction
from .grid import Grid


class MovingEntity:
    """Something that walks the grid one velocity step per tick."""

    def __init__(self, x: int, y: int, grid: Grid, config: Config):
        self.x = x
        self.y = y
        self.grid = grid
        self.tile_size = config.tile_size
        self.velocity = config.velocity
        self.direction: Optional[Direction] = None

    def is_aligned(self) -> bool:
        return self.grid.is_aligned(self.x, self.y)

    def can_move(self, direction: Optional[Direction]) -> bool:
        return direction is not None and not self.grid.collides_ahead(self.x, self.y, direction)

    def advance(self) -> None:
        dx, dy = DELTAS[self.direction]
        self.x += dx * self.velocity
        self.y += dy * self.velocity

    def overlaps(self, other: "MovingEntity") -> bool:
        # half-tile boxes anchored at each top-left corner
        size = self.tile_size // 2
        return (
            self.x < other.x + size
            and self.x + size > other.x
            and self.y < other.y + size
            and self.y + size > other.y
        )

    @property
    def position(self):
        return (self.x, self.y)
