# src/rl/env.py
from __future__ import annotations
from dataclasses import dataclass, field
import random

import numpy as np  # type: ignore
import pygame       # type: ignore

from src.mazechase.config import CFG, Config, Direction
from src.mazechase.loop import GameEvent, GameLoop
from src.mazechase.render import draw_frame, window_size

# -----------------------------------------------------------------------------
# Actions: integers -> maze directions
# -----------------------------------------------------------------------------
ACTIONS = {
    0: Direction.UP,
    1: Direction.DOWN,
    2: Direction.LEFT,
    3: Direction.RIGHT,
}

OBS_SIZE = 12


# -----------------------------------------------------------------------------
# Observation function
# -----------------------------------------------------------------------------
def _obs(loop: GameLoop) -> np.ndarray:
    """
    Return a compact 12-D observation vector.

    Features:
      0: px_n       - player x normalized in [0, 1]
      1: py_n       - player y normalized in [0, 1]
      2..5: wall_up, wall_down, wall_left, wall_right around the player's tile
      6: empowered  - 1.0 while the power state is active
      7: expiring   - 1.0 once the power state is about to expire
      8: adv_dx     - signed x offset to the nearest adversary, in grid widths
      9: adv_dy     - signed y offset to the nearest adversary, in grid heights
     10: pick_dx    - signed column offset to the nearest pickup, in grid widths
     11: pick_dy    - signed row offset to the nearest pickup, in grid heights
    """
    grid = loop.grid
    player = loop.player
    ts = grid.tile_size

    px_n = player.x / max(grid.width_px - ts, 1)
    py_n = player.y / max(grid.height_px - ts, 1)

    row, col = grid.tile_of(player.x, player.y)
    walls = [
        float(grid.is_wall(row - 1, col)),
        float(grid.is_wall(row + 1, col)),
        float(grid.is_wall(row, col - 1)),
        float(grid.is_wall(row, col + 1)),
    ]

    adv_dx = adv_dy = 0.0
    if loop.adversaries:
        nearest = min(loop.adversaries, key=lambda a: abs(a.x - player.x) + abs(a.y - player.y))
        adv_dx = (nearest.x - player.x) / grid.width_px
        adv_dy = (nearest.y - player.y) / grid.height_px

    pick_dx = pick_dy = 0.0
    cells = grid.pickup_cells()
    if len(cells):
        dist = np.abs(cells[:, 0] - row) + np.abs(cells[:, 1] - col)
        prow, pcol = cells[int(np.argmin(dist))]
        pick_dx = (int(pcol) - col) / grid.cols
        pick_dy = (int(prow) - row) / grid.rows

    return np.array(
        [
            px_n, py_n,
            *walls,
            float(player.power.active), float(player.power.about_to_expire),
            adv_dx, adv_dy,
            pick_dx, pick_dy,
        ],
        dtype=np.float32,
    )


# -----------------------------------------------------------------------------
# Headless environment
# -----------------------------------------------------------------------------
@dataclass
class MazeChaseEnv:
    """
    Minimal Gym-like environment over the maze chase GameLoop.

    One env step queues a direction and runs `ticks_per_action` game ticks
    (one tile of travel by default).

    Rewards:
      + score_coef * points scored during the step
      + life_lost_reward when the player is captured
      + win_reward when the final level is cleared
      + step_penalty per step
    """
    config: Config = field(default=CFG)
    level: int = 1
    ticks_per_action: int = 0           # 0 -> config.ticks_per_tile
    step_penalty: float = -0.001
    score_coef: float = 0.01
    life_lost_reward: float = -1.0
    win_reward: float = 5.0
    seed_value: int = 0
    render_enabled: bool = False

    def __post_init__(self):
        # Deterministic RNG for reproducibility
        self.rng = random.Random(self.seed_value)
        np.random.seed(self.seed_value)
        self.loop: GameLoop | None = None
        if self.ticks_per_action <= 0:
            self.ticks_per_action = self.config.ticks_per_tile

        # --- Rendering state (pygame) ---
        self.screen = None
        self.font = None
        self.clock = None
        if self.render_enabled:
            pygame.init()
            pygame.display.set_caption("Maze Chase autoplay")
            self.font = pygame.font.SysFont(None, 24)
            self.clock = pygame.time.Clock()

    # Gym-like API -------------------------------------------------------------
    def reset(self, seed: int | None = None) -> np.ndarray:
        """Start a new run at `self.level`. Returns the initial observation."""
        if seed is not None:
            self.rng.seed(seed)
            np.random.seed(seed)
        self.loop = GameLoop(self.config, rng=self.rng)
        self.loop.start(self.level)
        return _obs(self.loop)

    def step(self, action: int):
        """
        Apply an action (0..3), advance `ticks_per_action` ticks, and return:
          (obs, reward, terminated, info)
        """
        assert self.loop is not None, "Call reset() first."
        assert action in ACTIONS, f"Invalid action {action}"

        m = self.loop.match
        score_before = m.score
        self.loop.queue_direction(ACTIONS[action])

        events = []
        for _ in range(self.ticks_per_action):
            events.extend(self.loop.step())
            if m.finished:
                break

        reward = self.step_penalty + self.score_coef * (m.score - score_before)
        if GameEvent.LIFE_LOST in events or GameEvent.GAME_OVER in events:
            reward += self.life_lost_reward
        if GameEvent.GAME_WON in events:
            reward += self.win_reward

        terminated = m.finished
        info = {
            "score": m.score,
            "lives": m.lives,
            "level": m.level,
            "events": [e.value for e in events],
        }
        if terminated:
            info["reason"] = "won" if m.won else "lost"
        return _obs(self.loop), reward, terminated, info

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------
    def render(self, mode: str = "human") -> None:
        """Draw the current frame with pygame. Only does anything if render_enabled=True."""
        if not self.render_enabled or self.loop is None:
            return
        # Handle window close events
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                raise SystemExit

        snap = self.loop.snapshot()
        if self.screen is None or self.screen.get_size() != window_size(snap):
            self.screen = pygame.display.set_mode(window_size(snap))
        draw_frame(self.screen, self.font, snap)
        pygame.display.flip()

        # Limit FPS so it's actually watchable
        if self.clock is not None:
            self.clock.tick(15)

    def close(self) -> None:
        if self.render_enabled:
            pygame.quit()

    @property
    def action_space_n(self) -> int:
        return len(ACTIONS)

    @property
    def observation_space_shape(self):
        # features defined in _obs()
        return (OBS_SIZE,)
