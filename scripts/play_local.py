from __future__ import annotations

import argparse
import logging
import os, sys

# Ensure repo root is on sys.path when running from scripts/
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from minesweeper.config import load_config
from minesweeper.game import Game, GameState
from viz import ascii_from_game


class _ConsoleStatus:
    def set_message(self, text: str) -> None:
        print(f">> {text}")


class _NullRenderer:
    def render(self, tiles, width, height) -> None:
        pass


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default=None, help="YAML config path")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format='[%(asctime)s] %(message)s', datefmt='%H:%M:%S')

    cfg = load_config(args.config)
    if args.seed is not None:
        cfg.seed = args.seed
    game = Game(cfg, renderer=_NullRenderer(), status=_ConsoleStatus())
    game.bootstrap()
    print(ascii_from_game(game))
    while True:
        s = input("Enter action 'r x y' or 'f x y' (q to quit): ")
        s = s.strip().split()
        if s and s[0].lower() == "q":
            break
        if len(s) != 3:
            print("Invalid input. Example: r 3 4")
            continue
        kind, x_str, y_str = s
        try:
            x, y = int(x_str), int(y_str)
            if kind.lower() == "f":
                game.toggle_flag(x, y)
            else:
                game.click(x, y)
        except ValueError as exc:
            print(exc)
            continue
        print(ascii_from_game(game))
        if game.state is GameState.ENDED:
            print("Game ended. Click any cell to start again.")


if __name__ == "__main__":
    main()
