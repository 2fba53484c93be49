# loop.py
"""
GameLoop: the fixed-tick driver of one play session.

One call to step() is one tick. External input is queued and only applied at
the start of the next live tick, so nothing mutates the simulation mid-step.
"""
from __future__ import annotations
import logging
import random
from collections import deque
from enum import Enum
from typing import Deque, List, Optional, Tuple

from .adversary import Adversary
from .config import CFG, Config, Direction
from .grid import Grid, Tile
from .levels import resolve_level
from .match import MatchState
from .player import Player
from .snapshot import EntityView, Snapshot

logger = logging.getLogger(__name__)

DEFAULT_PLAYER_NAME = "Player"


class GameEvent(Enum):
    PICKUP = "pickup"
    POWER_PICKUP = "power_pickup"
    ADVERSARY_EATEN = "adversary_eaten"
    LIFE_LOST = "life_lost"
    GAME_OVER = "game_over"
    LEVEL_CLEARED = "level_cleared"
    GAME_WON = "game_won"


SOUND_FOR_EVENT = {
    GameEvent.PICKUP: "pickup",
    GameEvent.POWER_PICKUP: "power_pickup",
    GameEvent.ADVERSARY_EATEN: "eat_adversary",
    GameEvent.LIFE_LOST: "capture",
    GameEvent.GAME_OVER: "capture",
    GameEvent.LEVEL_CLEARED: "level_win",
    GameEvent.GAME_WON: "level_win",
}


class GameLoop:
    def __init__(
        self,
        config: Config = CFG,
        audio=None,
        leaderboard=None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.audio = audio                  # anything with play(name) / set_muted(bool)
        self.leaderboard = leaderboard      # anything with submit_score(name, score)
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.match = MatchState(config)
        self.grid: Optional[Grid] = None
        self.player: Optional[Player] = None
        self.adversaries: List[Adversary] = []
        self.player_start: Optional[Tuple[int, int]] = None
        self._inputs: Deque[Direction] = deque(maxlen=8)

    # ---------- Session control ----------
    def start(self, level: int = 1) -> None:
        if self.match.started:
            return
        if not 1 <= level <= self.config.total_levels:
            logger.warning("Level %r out of range 1..%d, starting level 1", level, self.config.total_levels)
            level = 1
        self.match.level = resolve_level(level)
        self._build_level()
        self.match.started = True
        self.match.paused = False
        self._sync_audio()
        logger.info("Started at level %d", self.match.level)

    def reinitialise(self) -> None:
        self.match.reset_for_new_game()
        self.start(1)

    def toggle_pause(self) -> bool:
        if self.match.started:
            self.match.paused = not self.match.paused
            logger.debug("Paused: %s", self.match.paused)
        return self.match.paused

    def toggle_sound(self) -> bool:
        self.match.sound_enabled = not self.match.sound_enabled
        self._sync_audio()
        return self.match.sound_enabled

    def queue_direction(self, direction: Direction) -> None:
        self._inputs.append(direction)

    def submit_name(self, name: Optional[str]) -> None:
        """Record the player's name once the run has ended and post the score."""
        m = self.match
        if not m.awaiting_name:
            return
        m.player_name = (name or "").strip() or DEFAULT_PLAYER_NAME
        m.name_entered = True
        if self.leaderboard is not None:
            self.leaderboard.submit_score(m.player_name, m.score)

    # ---------- Tick ----------
    def step(self) -> List[GameEvent]:
        m = self.match
        if not m.started or m.paused:
            return []

        events: List[GameEvent] = []
        self._apply_inputs()

        if m.transition_ticks > 0:
            m.advance_clocks()
            if m.advance_transition():
                logger.debug("Transition midpoint, building level %d", m.level)
                self._build_level()
            return events

        if self.simulating:
            self._advance_entities(events)

        m.advance_clocks()

        if not m.finished:
            self._check_capture(events)
        if not m.finished:
            self._check_level_cleared(events)

        self._play_sounds(events)
        return events

    @property
    def simulating(self) -> bool:
        m = self.match
        return (
            self.player is not None
            and self.player.made_first_move
            and m.started
            and not m.paused
            and not m.finished
            and m.transition_ticks == 0
        )

    def _apply_inputs(self) -> None:
        while self._inputs:
            self.player.request_direction(self._inputs.popleft())

    def _advance_entities(self, events: List[GameEvent]) -> None:
        player = self.player
        player.update()
        for adversary in self.adversaries:
            adversary.update()

        kind = self.grid.consume_pickup_at(player.x, player.y)
        if kind is not None:
            self.match.add_score(player.on_pickup_consumed(kind))
            events.append(GameEvent.POWER_PICKUP if kind == Tile.POWER_PICKUP else GameEvent.PICKUP)

        for _ in player.resolve_adversary_contact(self.adversaries):
            self.match.add_score(self.config.adversary_points)
            events.append(GameEvent.ADVERSARY_EATEN)

        for adversary in self.adversaries:
            adversary.resolve_appearance(player)

    def _check_capture(self, events: List[GameEvent]) -> None:
        m = self.match
        if m.invincible or self.player.power.active:
            return
        if not any(a.overlaps(self.player) for a in self.adversaries):
            return
        if m.lose_life():
            logger.info("Game over at level %d with %d points after %ds", m.level, m.score, m.final_time)
            events.append(GameEvent.GAME_OVER)
        else:
            self.player.reset(*self.player_start)
            self._inputs.clear()
            logger.debug("Life lost, %d remaining", m.lives)
            events.append(GameEvent.LIFE_LOST)

    def _check_level_cleared(self, events: List[GameEvent]) -> None:
        m = self.match
        if m.transition_ticks > 0 or not self.grid.has_won():
            return
        cleared = m.level
        if m.clear_level():
            logger.info("Won in %ds, bonus %d, final score %d", m.final_time, m.bonus_points, m.score)
            events.append(GameEvent.GAME_WON)
        else:
            logger.info("Level %d cleared, moving to level %d", cleared, m.level)
            events.append(GameEvent.LEVEL_CLEARED)

    # ---------- Level building ----------
    def _build_level(self) -> None:
        cfg = self.config
        self.grid = Grid.for_level(self.match.level, cfg.tile_size)
        player_xy, adversary_xys = self.grid.spawn_positions()
        self.player = Player(player_xy[0], player_xy[1], self.grid, cfg)
        self.adversaries = [Adversary(x, y, self.grid, cfg, self.rng) for x, y in adversary_xys]
        self.player_start = player_xy
        self.match.invincibility_ticks = 0
        self._inputs.clear()

    # ---------- Collaborators ----------
    def _sync_audio(self) -> None:
        if self.audio is not None:
            self.audio.set_muted(not self.match.sound_enabled)

    def _play_sounds(self, events: List[GameEvent]) -> None:
        if self.audio is None or not self.match.sound_enabled:
            return
        for event in events:
            self.audio.play(SOUND_FOR_EVENT[event])

    # ---------- Read-only view ----------
    def snapshot(self) -> Snapshot:
        m = self.match
        p = self.player
        ticks = m.invincibility_ticks
        return Snapshot(
            tiles=self.grid.tiles.copy(),
            tile_size=self.config.tile_size,
            player=EntityView(p.x, p.y, p.facing, "empowered" if p.power.active else "normal", p.frame_index),
            player_visible=ticks <= 0 or ticks % 10 >= 5,
            adversaries=tuple(
                EntityView(a.x, a.y, a.direction, a.appearance.value) for a in self.adversaries
            ),
            phase=m.phase,
            level=m.level,
            score=m.score,
            animated_score=m.animated_score,
            lives=m.lives,
            elapsed_ticks=m.elapsed_ticks,
            elapsed_seconds=m.elapsed_seconds,
            transition_ticks=m.transition_ticks,
            transition_total=self.config.transition_ticks,
            final_time=m.final_time,
            bonus_points=m.bonus_points,
            sound_enabled=m.sound_enabled,
            end_animation_ticks=m.end_animation_ticks,
            end_animation_total=self.config.end_animation_ticks,
        )
