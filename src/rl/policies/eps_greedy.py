# src/rl/policies/eps_greedy.py
import numpy as np # type: ignore
from src.rl.policies.greedy import action_for, decode_obs, open_directions, policy_greedy


def policy_eps_greedy(obs: np.ndarray, env, epsilon: float = 0.1) -> int:
    """
    Greedy most of the time. With probability epsilon, explore an open corridor
    the greedy policy would not take; stick with greedy when it is the only way out.
    """
    greedy = policy_greedy(obs, env)
    if np.random.rand() >= epsilon:
        return greedy

    walls = decode_obs(obs)[0]
    others = [d for d in open_directions(walls) if action_for(d) != greedy]
    if not others:
        return greedy
    return action_for(others[np.random.randint(len(others))])
