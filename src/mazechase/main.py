# main.py
import argparse
import logging
from dataclasses import replace
from typing import List

import pygame  # type: ignore

from .audio import SoundBoard
from .config import CFG, Direction
from .leaderboard import DEFAULT_SCORES_PATH, Leaderboard
from .loop import DEFAULT_PLAYER_NAME, GameLoop
from .render import draw_frame, window_size

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def handle_input(loop: GameLoop) -> bool:
    """Drain pygame events into the loop between ticks. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type != pygame.KEYDOWN:
            continue
        if event.key in KEY_DIRECTIONS:
            loop.queue_direction(KEY_DIRECTIONS[event.key])
        elif event.key == pygame.K_p:
            loop.toggle_pause()
        elif event.key == pygame.K_m:
            loop.toggle_sound()
        elif event.key == pygame.K_r:
            loop.reinitialise()
        elif event.key == pygame.K_ESCAPE:
            return False
    return True


def format_ranking(entries) -> List[str]:
    """Rank, name, score and date per row, or a placeholder when nobody has scored."""
    if not entries:
        return ["No scores yet!"]
    lines = [f"{'Rank':>4}  {'Name':<12} {'Score':>7}  Date"]
    for rank, entry in enumerate(entries, start=1):
        lines.append(f"{rank:>4}  {entry.name:<12} {entry.score:>7}  {entry.date}")
    return lines


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Maze chase arcade game")
    parser.add_argument("--level", type=int, default=1, help="level to start at (1-3)")
    parser.add_argument("--name", type=str, default=DEFAULT_PLAYER_NAME, help="name recorded on the leaderboard")
    parser.add_argument("--scores", type=str, default=DEFAULT_SCORES_PATH, help="leaderboard JSON file")
    parser.add_argument("--assets", type=str, default="assets/sounds", help="directory holding the .wav effects")
    parser.add_argument("--ranking", action="store_true", help="print the leaderboard and exit")
    parser.add_argument("--mute", action="store_true", help="start with sound off")
    parser.add_argument("--seed", type=int, default=None, help="seed adversary randomness")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = replace(CFG, seed=args.seed)
    leaderboard = Leaderboard(args.scores, size=config.leaderboard_size)
    if args.ranking:
        for line in format_ranking(leaderboard.list_top()):
            print(f"[RANK] {line}")
        return

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    pygame.display.set_caption("Maze Chase")
    clock = pygame.time.Clock()

    loop = GameLoop(config, audio=SoundBoard.load(args.assets), leaderboard=leaderboard)
    loop.start(args.level)
    if args.mute:
        loop.toggle_sound()

    size = window_size(loop.snapshot())
    screen = pygame.display.set_mode(size)
    running = True

    while running:
        # 1) input (applied at the start of the next tick)
        running = handle_input(loop)
        if not running:
            break

        # 2) update
        loop.step()
        if loop.match.awaiting_name:
            loop.submit_name(args.name)
            for line in format_ranking(leaderboard.list_top()):
                print(f"[RANK] {line}")

        # 3) render; levels differ in size so the window follows the grid
        snap = loop.snapshot()
        if window_size(snap) != size:
            size = window_size(snap)
            screen = pygame.display.set_mode(size)
        draw_frame(screen, font, snap)
        pygame.display.flip()
        clock.tick(config.fps)

    pygame.quit()


if __name__ == "__main__":
    main()
