# match.py
from __future__ import annotations
import math
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Optional

from .config import CFG, Config


class Phase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    TRANSITION = "transition"
    LOST = "lost"
    WON = "won"


@dataclass
class MatchState:
    """Score, lives, level progression and the run's end-of-game numbers."""
    config: Config = field(default=CFG, repr=False)
    level: int = 1
    score: int = 0
    started: bool = False
    paused: bool = False
    over: bool = False
    won: bool = False
    sound_enabled: bool = True
    elapsed_ticks: int = 0
    invincibility_ticks: int = 0
    transition_ticks: int = 0
    score_animation_ticks: int = 0
    animated_score: int = 0
    final_time: int = 0             # whole seconds
    bonus_points: int = 0
    end_animation_ticks: int = 0    # counts up once the run has ended
    player_name: Optional[str] = None
    name_entered: bool = False
    lives: int = field(init=False)

    def __post_init__(self):
        self.lives = self.config.start_lives

    # ---------- Derived ----------
    @property
    def phase(self) -> Phase:
        if self.won:
            return Phase.WON
        if self.over:
            return Phase.LOST
        if not self.started:
            return Phase.NOT_STARTED
        if self.paused:
            return Phase.PAUSED
        if self.transition_ticks > 0:
            return Phase.TRANSITION
        return Phase.RUNNING

    @property
    def elapsed_seconds(self) -> int:
        return self.elapsed_ticks // self.config.fps

    @property
    def invincible(self) -> bool:
        return self.invincibility_ticks > 0

    @property
    def finished(self) -> bool:
        return self.over or self.won

    @property
    def awaiting_name(self) -> bool:
        return self.finished and not self.name_entered

    # ---------- Mutations ----------
    def add_score(self, points: int) -> None:
        if points < 0:
            raise ValueError(f"score can only grow, got {points}")
        self.score += points

    def lose_life(self) -> bool:
        """
        Take a life. Returns True when that was the last one (run lost);
        otherwise the invincibility grace window is started.
        """
        self.lives = max(self.lives - 1, 0)
        if self.lives > 0:
            self.invincibility_ticks = self.config.invincibility_ticks
            return False
        self.final_time = self.elapsed_seconds
        self.over = True
        return True

    def clear_level(self) -> bool:
        """
        Level cleared. Returns True when it was the final level (run won),
        otherwise advances the level and starts the transition countdown.
        """
        cfg = self.config
        if self.level < cfg.total_levels:
            self.level += 1
            self.transition_ticks = cfg.transition_ticks
            return False

        self.final_time = self.elapsed_seconds
        self.bonus_points = max(cfg.time_bonus_base - self.final_time * cfg.time_bonus_per_second, 0)
        self.score += self.bonus_points
        self.animated_score = self.score - self.bonus_points
        self.score_animation_ticks = cfg.score_animation_ticks
        self.won = True
        return True

    def advance_clocks(self) -> None:
        if self.invincibility_ticks > 0:
            self.invincibility_ticks -= 1
        if not self.finished and self.transition_ticks == 0:
            self.elapsed_ticks += 1
        self._advance_score_animation()
        if self.finished and self.end_animation_ticks < self.config.end_animation_ticks:
            self.end_animation_ticks += 1

    def _advance_score_animation(self) -> None:
        if not self.won or self.score_animation_ticks <= 0:
            return
        self.score_animation_ticks -= 1
        increment = math.ceil(self.bonus_points / self.config.score_animation_ticks)
        self.animated_score = min(self.animated_score + increment, self.score)
        if self.score_animation_ticks == 0:
            self.animated_score = self.score

    def advance_transition(self) -> bool:
        """Count the transition down; True exactly at its midpoint."""
        if self.transition_ticks <= 0:
            return False
        self.transition_ticks -= 1
        return self.transition_ticks == self.config.transition_ticks // 2

    def reset_for_new_game(self) -> None:
        """Back to new-game defaults; the config and sound preference survive."""
        fresh = MatchState(self.config)
        for f in fields(self):
            if f.name not in ("config", "sound_enabled"):
                setattr(self, f.name, getattr(fresh, f.name))
