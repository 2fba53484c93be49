# grid.py
from __future__ import annotations
from enum import IntEnum
from typing import List, Optional, Sequence, Tuple

import numpy as np  # type: ignore

from .config import DELTAS, Direction
from .levels import template_for_level

XY = Tuple[int, int]


class Tile(IntEnum):
    EMPTY = 0
    WALL = 1
    PICKUP = 2
    POWER_PICKUP = 3
    PLAYER_SPAWN = 4
    ADVERSARY_SPAWN = 5
    CONSUMED = 6


GLYPHS = {
    "#": Tile.WALL,
    ".": Tile.PICKUP,
    "o": Tile.POWER_PICKUP,
    "P": Tile.PLAYER_SPAWN,
    "G": Tile.ADVERSARY_SPAWN,
    " ": Tile.EMPTY,
}


class LevelDataError(ValueError):
    """Raised when a level template cannot produce a playable grid."""


class Grid:
    """
    Tile matrix for one level instance.

    Positions passed in are top-left pixel coordinates of an entity; rows and
    columns index the underlying (rows x cols) array.
    """

    def __init__(self, tiles: np.ndarray, tile_size: int):
        if tiles.ndim != 2 or tiles.size == 0:
            raise LevelDataError("grid must be a non-empty 2D matrix")
        self.tiles = tiles
        self.tile_size = tile_size

    @classmethod
    def from_rows(cls, rows: Sequence[str], tile_size: int) -> Grid:
        if not rows:
            raise LevelDataError("level template is empty")
        width = len(rows[0])
        codes = []
        for r, row in enumerate(rows):
            if len(row) != width:
                raise LevelDataError(
                    f"row {r} has {len(row)} cells, expected {width}"
                )
            try:
                codes.append([int(GLYPHS[ch]) for ch in row])
            except KeyError as exc:
                raise LevelDataError(f"unknown tile glyph {exc.args[0]!r} in row {r}") from None
        return cls(np.array(codes, dtype=np.int8), tile_size)

    @classmethod
    def for_level(cls, level: int, tile_size: int) -> Grid:
        return cls.from_rows(template_for_level(level), tile_size)

    # ---------- Geometry ----------
    @property
    def rows(self) -> int:
        return int(self.tiles.shape[0])

    @property
    def cols(self) -> int:
        return int(self.tiles.shape[1])

    @property
    def width_px(self) -> int:
        return self.cols * self.tile_size

    @property
    def height_px(self) -> int:
        return self.rows * self.tile_size

    def is_aligned(self, x: int, y: int) -> bool:
        return x % self.tile_size == 0 and y % self.tile_size == 0

    def tile_at(self, row: int, col: int) -> Optional[Tile]:
        """Cell code at (row, col), or None when outside the grid."""
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return Tile(int(self.tiles[row, col]))
        return None

    def is_wall(self, row: int, col: int) -> bool:
        return self.tile_at(row, col) == Tile.WALL

    def tile_of(self, x: int, y: int) -> Tuple[int, int]:
        """(row, col) of the tile containing the center of an entity at (x, y)."""
        half = self.tile_size // 2
        return (y + half) // self.tile_size, (x + half) // self.tile_size

    # ---------- Queries ----------
    def collides_ahead(self, x: int, y: int, direction: Optional[Direction]) -> bool:
        """
        Would a one-tile move in `direction` from (x, y) land on a wall?
        Only defined at grid-aligned positions; off-grid it answers False.
        """
        if direction is None:
            return False
        if not self.is_aligned(x, y):
            return False
        dx, dy = DELTAS[direction]
        return self.is_wall(y // self.tile_size + dy, x // self.tile_size + dx)

    def consume_pickup_at(self, x: int, y: int) -> Optional[Tile]:
        """Eat the pickup under the entity's center point, returning its kind."""
        row, col = self.tile_of(x, y)
        tile = self.tile_at(row, col)
        if tile in (Tile.PICKUP, Tile.POWER_PICKUP):
            self.tiles[row, col] = Tile.CONSUMED
            return tile
        return None

    def remaining_pickup_count(self) -> int:
        return int(np.count_nonzero(self.tiles == Tile.PICKUP))

    def has_won(self) -> bool:
        return self.remaining_pickup_count() == 0

    def pickup_cells(self) -> np.ndarray:
        """(row, col) pairs of every uneaten pickup of either kind."""
        mask = (self.tiles == Tile.PICKUP) | (self.tiles == Tile.POWER_PICKUP)
        return np.argwhere(mask)

    # ---------- Spawns ----------
    def spawn_positions(self) -> Tuple[XY, List[XY]]:
        """
        Extract spawn points (pixel coordinates) and clear their cells to EMPTY.
        Raises LevelDataError if the grid cannot host a player and adversaries.
        """
        players = np.argwhere(self.tiles == Tile.PLAYER_SPAWN)
        adversaries = np.argwhere(self.tiles == Tile.ADVERSARY_SPAWN)
        if len(players) != 1:
            raise LevelDataError(f"expected exactly one player spawn, found {len(players)}")
        if len(adversaries) == 0:
            raise LevelDataError("level has no adversary spawn")

        ts = self.tile_size
        for row, col in list(players) + list(adversaries):
            self.tiles[row, col] = Tile.EMPTY

        prow, pcol = players[0]
        player_xy = (int(pcol) * ts, int(prow) * ts)
        adversary_xy = [(int(col) * ts, int(row) * ts) for row, col in adversaries]
        return player_xy, adversary_xy
