# audio.py
from __future__ import annotations
import logging
import os
from typing import Dict

import pygame  # type: ignore

logger = logging.getLogger(__name__)

SOUND_FILES = {
    "pickup": "waka.wav",
    "power_pickup": "power_dot.wav",
    "eat_adversary": "eat_ghost.wav",
    "capture": "game_over.wav",
    "level_win": "game_win.wav",
}


class SoundBoard:
    """Named sound effects. Missing sounds and playback errors never reach the game."""

    def __init__(self, sounds: Dict[str, "pygame.mixer.Sound"]):
        self.sounds = sounds
        self.muted = False

    @classmethod
    def load(cls, asset_dir: str) -> SoundBoard:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as exc:
            logger.warning("Audio device unavailable (%s); sounds disabled", exc)
            return cls({})

        sounds = {}
        for name, filename in SOUND_FILES.items():
            path = os.path.join(asset_dir, filename)
            try:
                sounds[name] = pygame.mixer.Sound(path)
            except (pygame.error, OSError) as exc:
                logger.warning("Could not load sound %r from %s: %s", name, path, exc)
        return cls(sounds)

    def set_muted(self, muted: bool) -> None:
        self.muted = muted

    def play(self, name: str) -> None:
        if self.muted:
            return
        sound = self.sounds.get(name)
        if sound is None:
            return
        try:
            sound.stop()   # restart from the beginning
            sound.play()
        except pygame.error as exc:
            logger.warning("Playback of %r failed: %s", name, exc)
