#!/usr/bin/env python3
"""Watch a random player play Minesweeper."""
import time
import os

import numpy as np

from src.game.environment import MinesweeperEnv
from src.game.board import get_difficulty


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, difficulty: str = "easy",
         seed: int = None):
    """Run demo games with a player that reveals random closed cells."""
    config = get_difficulty(difficulty)
    env = MinesweeperEnv(config=config, render_mode="ansi", seed=seed)
    rng = np.random.default_rng(seed)
    num_cells = config.width * config.height

    print(f"Board: {config.width}x{config.height} with {config.num_mines} mines")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        obs, _ = env.reset()
        done = False
        step = 0

        while not done:
            # Only reveal actions; the random player never flags
            reveal_mask = env.get_action_mask()[:num_cells]
            action = int(rng.choice(np.flatnonzero(reveal_mask)))
            x, y = action % config.width, action // config.width

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({x}, {y})\n")
            print(env.render())

            if done:
                if info.get("game_state") == "WON":
                    wins += 1
                    print(f"\n*** WIN! ***")
                else:
                    print(f"\n*** LOST (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--difficulty", default="easy", help="easy, normal or hard")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, difficulty=args.difficulty,
         seed=args.seed)
