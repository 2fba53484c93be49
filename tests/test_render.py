import pygame  # type: ignore
import pytest

from src.mazechase.config import CFG, HUD_HEIGHT
from src.mazechase.loop import GameLoop
from src.mazechase.render import draw_frame, end_box_opacity, transition_opacity, window_size
from src.rl.env import MazeChaseEnv
from src.rl.run import run_episode


@pytest.mark.parametrize(
    "ticks_left, expected",
    [(150, 0.0), (125, 0.5), (75, 1.0), (25, 0.5), (0, 0.0)],
)
def test_transition_fades_in_holds_and_fades_out(ticks_left, expected):
    assert transition_opacity(ticks_left) == pytest.approx(expected)


def test_frame_draws_headless():
    pygame.init()
    try:
        loop = GameLoop(CFG)
        loop.start(1)
        snap = loop.snapshot()
        assert window_size(snap) == (13 * CFG.tile_size, 11 * CFG.tile_size + HUD_HEIGHT)
        screen = pygame.Surface(window_size(snap))
        draw_frame(screen, pygame.font.SysFont(None, 24), snap)
    finally:
        pygame.quit()


def test_scripted_episode_runs_to_cap():
    env = MazeChaseEnv(seed_value=1)
    steps, total, score, level = run_episode(env, "greedy", 0.0, max_steps=25)
    assert 1 <= steps <= 25
    assert score >= 0 and level >= 1
    with pytest.raises(ValueError):
        run_episode(env, "nope", 0.0, max_steps=1)


@pytest.mark.parametrize("ticks, expected", [(0, 0.0), (15, 0.2), (75, 1.0), (200, 1.0)])
def test_end_box_fades_in(ticks, expected):
    assert end_box_opacity(ticks) == pytest.approx(expected)


def test_end_box_counter_reaches_the_snapshot():
    loop = GameLoop(CFG)
    loop.start(1)
    loop.match.lives = 1
    loop.adversaries[0].x, loop.adversaries[0].y = loop.player.x, loop.player.y
    loop.step()
    assert loop.snapshot().end_animation_ticks == 0
    for _ in range(10):
        loop.step()
    snap = loop.snapshot()
    assert snap.end_animation_ticks == 10
    assert snap.end_animation_total == CFG.end_animation_ticks
