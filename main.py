#!/usr/bin/env python3
"""
Ice Slide Puzzle

Generates a random ice slide puzzle, optionally plays a sequence of moves,
and prints the board.
"""

import argparse
import sys

from slidepuzzle.game.board import Direction
from slidepuzzle.game.board_builder import BoardConfig
from slidepuzzle.game.engine import GameEngine
from slidepuzzle.game.errors import InvalidConfigurationError
from slidepuzzle.logger import logger, set_level


def print_state(engine: GameEngine) -> None:
    print(str(engine.board))
    print(f"Goal: {engine.goal_position}")
    print(f"Player: {engine.player_positions}")


def play_moves(engine: GameEngine, moves: str) -> None:
    """Apply a move string such as "RDLU", printing the board after each move."""
    for key in moves:
        direction = Direction.from_key(key)
        moved = engine.move_player(direction)
        print(f"\n{direction.name}{'' if moved else ' (blocked)'}")
        print_state(engine)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Ice Slide Puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                     # Generate a 10x10 puzzle
  python main.py --seed 42 --moves RDLU
  python main.py --width 6 --height 6 --walls 4 --blocks 2 --empties 3
        """,
    )

    defaults = BoardConfig()
    parser.add_argument("--width", type=int, default=defaults.board_w)
    parser.add_argument("--height", type=int, default=defaults.board_h)
    parser.add_argument("--walls", type=int, default=defaults.num_walls)
    parser.add_argument("--blocks", type=int, default=defaults.num_blocks)
    parser.add_argument("--empties", type=int, default=defaults.num_empties)
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for puzzle generation"
    )
    parser.add_argument(
        "--moves", type=str, default="", help="Moves to play, using U, D, L and R"
    )
    parser.add_argument(
        "--avoid-terrain-overlap",
        action="store_true",
        help="Only place the player and blocks on plain ice",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    if args.verbose:
        set_level("DEBUG", verbose_components=["movement"])

    cli_logger = logger.bind(component="cli")

    invalid_keys = [key for key in args.moves if key.upper() not in "UDLR"]
    if invalid_keys:
        parser.error(f"Invalid move keys: {''.join(invalid_keys)}")

    config = BoardConfig(
        board_w=args.width,
        board_h=args.height,
        num_walls=args.walls,
        num_blocks=args.blocks,
        num_empties=args.empties,
        avoid_terrain_overlap=args.avoid_terrain_overlap,
    )

    try:
        engine = GameEngine.from_config(config, seed=args.seed)
    except InvalidConfigurationError as e:
        cli_logger.error(f"Cannot generate puzzle: {e}")
        sys.exit(2)

    print(f"Generated puzzle (seed {args.seed}):")
    print_state(engine)

    if args.moves:
        play_moves(engine, args.moves)


if __name__ == "__main__":
    main()
