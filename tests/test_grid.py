import random

import pytest

from src.mazechase.config import Direction
from src.mazechase.grid import Grid, LevelDataError, Tile
from src.mazechase.levels import LEVELS


CORRIDOR = (
    "#####",
    "#P.G#",
    "#####",
)


def test_from_rows_rejects_ragged_rows(make_grid):
    with pytest.raises(LevelDataError):
        make_grid("#####", "#P.#", "#####")


def test_from_rows_rejects_unknown_glyph(make_grid):
    with pytest.raises(LevelDataError):
        make_grid("###", "#X#", "###")


def test_from_rows_rejects_empty_template(cfg):
    with pytest.raises(LevelDataError):
        Grid.from_rows([], cfg.tile_size)


def test_collides_ahead(make_grid):
    grid = make_grid(*CORRIDOR)
    assert grid.collides_ahead(32, 32, Direction.LEFT)
    assert grid.collides_ahead(32, 32, Direction.UP)
    assert grid.collides_ahead(32, 32, Direction.DOWN)
    assert not grid.collides_ahead(32, 32, Direction.RIGHT)


def test_collides_ahead_without_direction_or_off_grid(make_grid):
    grid = make_grid(*CORRIDOR)
    assert not grid.collides_ahead(32, 32, None)
    # mid-tile: undefined, answers False
    assert not grid.collides_ahead(33, 32, Direction.LEFT)


def test_collides_ahead_out_of_range_is_not_a_wall(make_grid):
    grid = make_grid(*CORRIDOR)
    assert not grid.collides_ahead(0, 0, Direction.UP)
    assert not grid.collides_ahead(128, 64, Direction.RIGHT)


def test_consume_pickup_uses_center_point(make_grid):
    grid = make_grid(*CORRIDOR)
    # center at x=63 is still inside column 1
    assert grid.consume_pickup_at(47, 32) is None
    # center at x=64 enters column 2
    assert grid.consume_pickup_at(48, 32) == Tile.PICKUP
    assert grid.tile_at(1, 2) == Tile.CONSUMED
    assert grid.consume_pickup_at(48, 32) is None


def test_consume_power_pickup(make_grid):
    grid = make_grid("#####", "#Po.#", "#G###", "#####")
    assert grid.consume_pickup_at(64, 32) == Tile.POWER_PICKUP
    assert grid.tile_at(1, 2) == Tile.CONSUMED


def test_consume_pickup_out_of_range(make_grid):
    grid = make_grid(*CORRIDOR)
    assert grid.consume_pickup_at(-1000, -1000) is None
    assert grid.consume_pickup_at(5000, 5000) is None


def test_power_pickups_do_not_block_win(make_grid):
    grid = make_grid("######", "#P.o #", "#G####", "######")
    assert grid.remaining_pickup_count() == 1
    assert not grid.has_won()
    grid.consume_pickup_at(64, 32)
    assert grid.remaining_pickup_count() == 0
    assert grid.has_won()


def test_spawn_positions_consumes_spawn_cells(make_grid):
    grid = make_grid(*CORRIDOR)
    player, adversaries = grid.spawn_positions()
    assert player == (32, 32)
    assert adversaries == [(96, 32)]
    assert grid.tile_at(1, 1) == Tile.EMPTY
    assert grid.tile_at(1, 3) == Tile.EMPTY
    # one-time extraction
    with pytest.raises(LevelDataError):
        grid.spawn_positions()


def test_spawn_positions_requires_a_single_player(make_grid):
    with pytest.raises(LevelDataError):
        make_grid("#####", "#..G#", "#####").spawn_positions()
    with pytest.raises(LevelDataError):
        make_grid("#####", "#PPG#", "#####").spawn_positions()


def test_spawn_positions_requires_an_adversary(make_grid):
    with pytest.raises(LevelDataError):
        make_grid("#####", "#P..#", "#####").spawn_positions()


@pytest.mark.parametrize("level", sorted(LEVELS))
def test_every_level_is_playable(cfg, level):
    grid = Grid.for_level(level, cfg.tile_size)
    rows = LEVELS[level]
    assert grid.tiles.shape == (len(rows), len(rows[0]))
    player, adversaries = grid.spawn_positions()
    assert grid.is_aligned(*player)
    assert adversaries
    assert grid.remaining_pickup_count() > 0


def test_unknown_level_falls_back_to_level_one(cfg):
    grid = Grid.for_level(42, cfg.tile_size)
    assert grid.tiles.shape == Grid.for_level(1, cfg.tile_size).tiles.shape


def test_pickup_count_is_monotonic_and_win_iff_zero(cfg):
    grid = Grid.for_level(1, cfg.tile_size)
    grid.spawn_positions()
    rng = random.Random(7)
    last = grid.remaining_pickup_count()
    for _ in range(2000):
        x = rng.randrange(-64, grid.width_px + 64)
        y = rng.randrange(-64, grid.height_px + 64)
        grid.consume_pickup_at(x, y)
        count = grid.remaining_pickup_count()
        assert count <= last
        assert grid.has_won() == (count == 0)
        last = count
