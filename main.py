"""
Main entry point for terminal TicTacToe.

This script ties together:
- Logic (board, rules, state machine)
- Console UI (prompts and board display)

Run this script to play TicTacToe against a friend on one terminal!
"""

import argparse
import logging
from typing import List, Optional

from logic.state_machine import TicTacToeFSM
from ui import ConsoleUI


LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two-player TicTacToe")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every state transition"
    )
    parser.add_argument(
        "--no-intro",
        action="store_true",
        help="Don't print the space index map before the first turn"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None, ui: Optional[ConsoleUI] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit status: 0 for any finished game, 130 if interrupted.
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT
    )

    ui = ui or ConsoleUI()
    if not args.no_intro:
        ui.show_intro()

    game = TicTacToeFSM(ui)

    try:
        game.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
        return 130

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
