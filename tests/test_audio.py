import logging

import pygame  # type: ignore

from src.mazechase.audio import SOUND_FILES, SoundBoard
from src.mazechase.loop import SOUND_FOR_EVENT


class FakeSound:
    def __init__(self, fail=False):
        self.plays = 0
        self.fail = fail

    def stop(self):
        pass

    def play(self):
        if self.fail:
            raise pygame.error("device lost")
        self.plays += 1


def test_every_event_sound_has_a_file():
    assert set(SOUND_FOR_EVENT.values()) <= set(SOUND_FILES)


def test_play_and_mute():
    sound = FakeSound()
    board = SoundBoard({"pickup": sound})
    board.play("pickup")
    board.set_muted(True)
    board.play("pickup")
    assert sound.plays == 1


def test_unknown_sound_is_ignored():
    SoundBoard({}).play("pickup")


def test_playback_error_is_logged(caplog):
    board = SoundBoard({"capture": FakeSound(fail=True)})
    with caplog.at_level(logging.WARNING):
        board.play("capture")
    assert "Playback of 'capture' failed" in caplog.text


def test_missing_assets_load_as_silence(tmp_path):
    board = SoundBoard.load(str(tmp_path / "nowhere"))
    assert board.sounds == {}
    board.play("pickup")
