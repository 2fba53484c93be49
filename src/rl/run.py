# src/rl/run.py
from __future__ import annotations
import argparse
import csv
import os
import time
from typing import Tuple

from src.rl.env import MazeChaseEnv
from src.rl.policies import POLICIES


# --------------------------
# Episode loop
# --------------------------
def run_episode(
    env: MazeChaseEnv,
    policy: str,
    epsilon: float,
    max_steps: int = 5_000,
    render_delay: float = 0.0,
) -> Tuple[int, float, int, int]:
    """
    Run a single episode with a scripted policy:
    - random
    - greedy
    - eps-greedy

    Returns:
        steps: number of env steps taken
        total: total return (sum of rewards)
        score: final score from info["score"]
        level: level reached from info["level"]
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy: {policy}")
    choose = POLICIES[policy]

    obs = env.reset()
    total = 0.0
    steps = 0
    info = {}

    while True:
        a = choose(obs, env, epsilon)

        obs, r, done, info = env.step(a)
        total += r
        steps += 1

        if env.render_enabled:
            env.render()
            if render_delay:
                time.sleep(render_delay)

        if done or steps >= max_steps:
            break

    return steps, total, info.get("score", 0), info.get("level", env.level)


# --------------------------
# Main
# --------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(description="Autoplay the maze chase game with a scripted policy")
    parser.add_argument("--episodes", type=int, default=20)
    parser.add_argument("--policy", type=str, default="greedy", choices=sorted(POLICIES))
    parser.add_argument(
        "--epsilon",
        type=float,
        default=0.1,
        help="epsilon for eps-greedy",
    )
    parser.add_argument("--level", type=int, default=1, help="level each episode starts at")
    parser.add_argument("--max-steps", type=int, default=5_000, help="cap on env steps per episode")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument(
        "--outdir",
        type=str,
        default="data/runs",
        help="CSV will be saved here",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Watch the episodes in a pygame window.",
    )
    args = parser.parse_args(argv)

    os.makedirs(args.outdir, exist_ok=True)
    out_csv = os.path.join(args.outdir, f"rl_{args.policy}.csv")

    env = MazeChaseEnv(level=args.level, seed_value=args.seed, render_enabled=args.render)

    print(
        f"Running {args.episodes} episode(s) with "
        f"policy={args.policy} ε={args.epsilon}"
    )
    print("ep,steps,return,score,level")

    rows = [("ep", "steps", "return", "score", "level")]
    try:
        for ep in range(1, args.episodes + 1):
            steps, ret, score, level = run_episode(
                env, args.policy, args.epsilon, args.max_steps,
                render_delay=0.0,
            )
            print(f"{ep},{steps},{ret:.3f},{score},{level}")
            rows.append((ep, steps, float(f"{ret:.6f}"), score, level))
    finally:
        env.close()

    with open(out_csv, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerows(rows)

    print(f"\nSaved results → {out_csv}")


if __name__ == "__main__":
    main()
