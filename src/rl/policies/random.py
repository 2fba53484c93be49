# src/rl/policies/random.py
import numpy as np # type: ignore
from src.rl.policies.greedy import action_for, decode_obs, open_directions


def policy_random(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    """
    Random walker: a uniformly random direction among those not blocked by a
    wall next to the player. Any action if the observation shows no opening.
    """
    walls = decode_obs(obs)[0]
    choices = open_directions(walls)
    if not choices:
        return np.random.randint(env.action_space_n)
    return action_for(choices[np.random.randint(len(choices))])
