# src/rl/policies/greedy.py
import numpy as np # type: ignore
from src.mazechase.config import Direction

# Nearest adversary closer than this (in grid fractions, per axis sum) is a threat
THREAT_RADIUS = 0.2


def action_for(direction: Direction) -> int:
    """Map a Direction to the env action id."""
    from src.rl.env import ACTIONS
    for a, d in ACTIONS.items():
        if d == direction:
            return a
    # Fallback (shouldn't happen)
    return 0


def moves_toward(dx: float, dy: float):
    """
    Preference ordering of directions that reduce the offset (dx, dy).
    Does NOT check walls; caller should filter blocked moves.
    """
    prefs = []
    if dx < 0:
        prefs.append(Direction.LEFT)
    elif dx > 0:
        prefs.append(Direction.RIGHT)
    if dy < 0:
        prefs.append(Direction.UP)
    elif dy > 0:
        prefs.append(Direction.DOWN)
    # bigger axis first
    if len(prefs) == 2 and abs(dy) > abs(dx):
        prefs.reverse()
    for d in Direction:
        if d not in prefs:
            prefs.append(d)
    return prefs  # length 4


def open_directions(walls) -> list:
    """Directions with no wall right next to the player, in Direction order."""
    return [d for d in Direction if not walls[d]]


def decode_obs(obs: np.ndarray):
    """
    Matches env._obs() layout (12 dims):
    [px, py, wall_up, wall_down, wall_left, wall_right,
     empowered, expiring, adv_dx, adv_dy, pick_dx, pick_dy]
    """
    vals = obs.tolist()
    walls = {
        Direction.UP: bool(vals[2]),
        Direction.DOWN: bool(vals[3]),
        Direction.LEFT: bool(vals[4]),
        Direction.RIGHT: bool(vals[5]),
    }
    return walls, bool(vals[6]), vals[8], vals[9], vals[10], vals[11]


def policy_greedy(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    """
    Greedy on pickup distance with simple safety:
    - prefer directions that close in on the nearest pickup
    - when an adversary is close and we are not empowered, run away from it
    - when empowered, chase a close adversary instead
    - never pick a direction with a wall right next to us if another is open
    """
    walls, empowered, adv_dx, adv_dy, pick_dx, pick_dy = decode_obs(obs)

    threat = (adv_dx, adv_dy) != (0.0, 0.0) and abs(adv_dx) + abs(adv_dy) < THREAT_RADIUS
    if threat and empowered:
        prefs = moves_toward(adv_dx, adv_dy)
    elif threat:
        prefs = moves_toward(-adv_dx, -adv_dy)
    else:
        prefs = moves_toward(pick_dx, pick_dy)

    # 1) first open preferred direction
    open_dirs = open_directions(walls)
    for d in prefs:
        if d in open_dirs:
            return action_for(d)

    # 2) boxed in on all sides (shouldn't happen in a maze); fall back to random
    return np.random.randint(env.action_space_n)
