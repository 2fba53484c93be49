# levels.py
"""
Hand-authored maze templates, one per level.

Glyphs:
  #  wall
  .  pickup
  o  power pickup
  P  player spawn
  G  adversary spawn
     (space) empty floor
"""
import logging
from typing import Dict, List

logger = logging.getLogger(__name__)

LEVELS: Dict[int, List[str]] = {
    1: [
        "#############",
        "#o..P......o#",
        "#.#######.#.#",
        "#.#G......#.#",
        "#.#o###.#.#.#",
        "#.#.#...#.#.#",
        "#.#.#.#.#.#.#",
        "#.#.#.#.#.#.#",
        "#.#.#.#...#.#",
        "#G.........G#",
        "#############",
    ],
    2: [
        "###############",
        "#o......P....o#",
        "#.###.#####.#.#",
        "#.#G........#.#",
        "#.#.###.###.#.#",
        "#...#...#.....#",
        "#.#.#.#.#.#.#G#",
        "#.#.#.#.#.#.#.#",
        "#.#...#...#.#.#",
        "#.###.###.#.#.#",
        "#G...........o#",
        "###############",
    ],
    3: [
        "#################",
        "#o.......P.....o#",
        "#.###.#####.###.#",
        "#.#G..........#.#",
        "#.#.###.###.#.#.#",
        "#...#...#...#...#",
        "#.#.#.#.#.#.#.#G#",
        "#.#.#.#.#.#.#.#.#",
        "#.#...#...#...#.#",
        "#.###o###.#.###.#",
        "#G.............G#",
        "#################",
    ],
}


def resolve_level(level: int) -> int:
    """Return `level` if a template exists for it, else fall back to level 1."""
    if level in LEVELS:
        return level
    logger.warning("No template for level %r, falling back to level 1", level)
    return 1


def template_for_level(level: int) -> List[str]:
    return list(LEVELS[resolve_level(level)])
