# render.py
import math
from typing import Tuple

import pygame  # type: ignore

from .config import (
    BG, WALL, PICKUP, POWER_PICKUP, PLAYER, ADVERSARY, VULNERABLE, VULNERABLE_ALT, TEXT,
    HUD_HEIGHT, Direction,
)
from .grid import Tile
from .match import Phase
from .snapshot import EntityView, Snapshot

POWER_BLINK_TICKS = 30

ADVERSARY_COLORS = {
    "normal": ADVERSARY,
    "vulnerable": VULNERABLE,
    "vulnerable_alt": VULNERABLE_ALT,
}

# mouth opening (degrees) per animation frame
MOUTH_ANGLES = (0, 25, 45, 25)

FACING_ANGLES = {
    Direction.RIGHT: 0,
    Direction.UP: 90,
    Direction.LEFT: 180,
    Direction.DOWN: 270,
}


# ---------- Helpers ----------
def transition_opacity(ticks_left: int, total: int = 150) -> float:
    """Black-out level during a level transition: fade in, hold, fade out."""
    if ticks_left <= 0:
        return 0.0
    third = total / 3
    if ticks_left > total - third:
        return (total - ticks_left) / third
    if ticks_left > third:
        return 1.0
    return ticks_left / third


def end_box_opacity(ticks: int, total: int = 75) -> float:
    """End-of-game box fades in over `total` ticks and then stays."""
    if total <= 0:
        return 1.0
    return min(max(ticks, 0) / total, 1.0)


def window_size(snapshot: Snapshot) -> Tuple[int, int]:
    return snapshot.width_px, snapshot.height_px + HUD_HEIGHT


def tile_rect(row: int, col: int, size: int) -> pygame.Rect:
    return pygame.Rect(col * size, HUD_HEIGHT + row * size, size, size)


def draw_cell(screen: pygame.Surface, row: int, col: int, size: int, code: int, blink_on: bool) -> None:
    rect = tile_rect(row, col, size)
    if code == Tile.WALL:
        pygame.draw.rect(screen, WALL, rect.inflate(-2, -2), border_radius=4)
    elif code == Tile.PICKUP:
        pygame.draw.circle(screen, PICKUP, rect.center, max(size // 10, 2))
    elif code == Tile.POWER_PICKUP:
        pygame.draw.circle(screen, POWER_PICKUP if blink_on else PICKUP, rect.center, max(size // 4, 4))


def draw_player(screen: pygame.Surface, view: EntityView, size: int) -> None:
    cx = view.x + size // 2
    cy = HUD_HEIGHT + view.y + size // 2
    radius = size // 2 - 2
    pygame.draw.circle(screen, PLAYER, (cx, cy), radius)
    mouth = MOUTH_ANGLES[view.frame % len(MOUTH_ANGLES)]
    if mouth:
        facing = math.radians(FACING_ANGLES.get(view.direction, 0))
        half = math.radians(mouth)
        points = [(cx, cy)]
        for angle in (facing - half, facing + half):
            points.append((cx + radius * math.cos(angle), cy - radius * math.sin(angle)))
        pygame.draw.polygon(screen, BG, points)


def draw_adversary(screen: pygame.Surface, view: EntityView, size: int) -> None:
    color = ADVERSARY_COLORS.get(view.appearance, ADVERSARY)
    body = pygame.Rect(view.x + 2, HUD_HEIGHT + view.y + 2, size - 4, size - 4)
    pygame.draw.rect(screen, color, body, border_top_left_radius=size // 2, border_top_right_radius=size // 2)
    eye = max(size // 8, 2)
    pygame.draw.circle(screen, TEXT, (body.left + body.width // 3, body.top + body.height // 3), eye)
    pygame.draw.circle(screen, TEXT, (body.left + 2 * body.width // 3, body.top + body.height // 3), eye)


# ---------- Frame ----------
def draw_frame(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    screen.fill(BG)
    size = snap.tile_size
    blink_on = (snap.elapsed_ticks // POWER_BLINK_TICKS) % 2 == 0
    rows, cols = snap.tiles.shape
    for row in range(rows):
        for col in range(cols):
            draw_cell(screen, row, col, size, int(snap.tiles[row, col]), blink_on)

    if snap.player_visible:
        draw_player(screen, snap.player, size)
    for view in snap.adversaries:
        draw_adversary(screen, view, size)

    draw_hud(screen, font, snap)
    if snap.phase in (Phase.LOST, Phase.WON):
        draw_game_end(screen, font, snap)
    if snap.transition_ticks > 0:
        draw_transition(screen, font, snap)
    if snap.phase == Phase.PAUSED:
        draw_banner(screen, font, "PAUSED", "Press P to resume")


def draw_hud(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    if snap.phase in (Phase.LOST, Phase.WON):
        return
    width = screen.get_width()
    score = font.render(f"Score: {snap.score}", True, PLAYER)
    screen.blit(score, (8, 6))
    for i in range(snap.lives):
        pygame.draw.circle(screen, ADVERSARY, (score.get_width() + 24 + i * 22, 16), 8)
    level = font.render(f"Level: {snap.level}", True, PLAYER)
    screen.blit(level, (width - level.get_width() - 8, 6))
    clock = font.render(f"Time: {snap.elapsed_seconds} sec", True, TEXT)
    screen.blit(clock, (8, 30))
    if not snap.sound_enabled:
        muted = font.render("Sound off", True, TEXT)
        screen.blit(muted, (width - muted.get_width() - 8, 30))


def draw_game_end(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    # Dim with translucent overlay, fading in
    opacity = end_box_opacity(snap.end_animation_ticks, snap.end_animation_total)
    w, h = screen.get_size()
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, int(200 * opacity)))
    screen.blit(overlay, (0, 0))

    title = font.render("VICTORY!" if snap.phase == Phase.WON else "GAME OVER", True, (240, 240, 250))
    lines = [f"Time: {snap.final_time} sec"]
    if snap.phase == Phase.WON:
        lines += [f"Bonus: {snap.bonus_points} pts", f"Final Score: {snap.animated_score}"]
    else:
        lines.append(f"Final Score: {snap.score}")
    lines.append("Press R to restart")

    title.set_alpha(int(255 * opacity))
    screen.blit(title, title.get_rect(center=(w // 2, h // 2 - 40)))
    for i, line in enumerate(lines):
        txt = font.render(line, True, TEXT)
        txt.set_alpha(int(255 * opacity))
        screen.blit(txt, txt.get_rect(center=(w // 2, h // 2 - 8 + i * 24)))


def draw_transition(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    alpha = int(255 * transition_opacity(snap.transition_ticks, snap.transition_total))
    w, h = screen.get_size()
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, alpha))
    screen.blit(overlay, (0, 0))
    txt = font.render(f"Level {snap.level}", True, TEXT)
    txt.set_alpha(alpha)
    screen.blit(txt, txt.get_rect(center=(w // 2, h // 2)))


def draw_banner(screen: pygame.Surface, font: pygame.font.Font, title: str, sub: str) -> None:
    w, h = screen.get_size()
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 120))
    screen.blit(overlay, (0, 0))
    t = font.render(title, True, (240, 240, 250))
    s = font.render(sub, True, TEXT)
    screen.blit(t, t.get_rect(center=(w // 2, h // 2 - 12)))
    screen.blit(s, s.get_rect(center=(w // 2, h // 2 + 16)))
