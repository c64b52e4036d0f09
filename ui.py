"""
TicTacToe console UI.
Text interface for two players sharing one terminal.

Shows:
- The board, with free cells labelled by their space number
- A prompt for the player whose turn it is
- Why a selection was rejected
- The final result
"""

import sys
from typing import Callable, List, Optional, TextIO

from logic.board import Board, position_to_space
from logic.errors import SelectionError
from logic.player import Player


class ConsoleUI:
    """
    Console collaborator for the state machine.

    Parsing typed text into a number happens here. Whether that number
    is a playable space is for the game logic to decide.
    """

    PROMPT = "Player {symbol} select your space, enter the number: "
    NOT_A_NUMBER = "Selection must be an integer in range 1 - 9"
    ROW_SEPARATOR = "---------"
    INDEX_MAP = "Index map:\n1 | 2 | 3\n4 | 5 | 6\n7 | 8 | 9\n"

    WIN_MESSAGE = "\nPlayer {number} wins!\n"
    DRAW_MESSAGE = "Draw! Nobody wins"

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None
    ):
        """
        Initialize the UI.

        Args:
            input_func: Reads one line after showing a prompt.
            out: Stream for the board and results (default: stdout).
            err: Stream for rejected selections (default: stderr).
        """
        self.input_func = input_func
        self.out = out
        self.err = err

    def _print(self, text: str = ""):
        print(text, file=self.out or sys.stdout)

    def show_intro(self):
        """Print how space numbers map onto the board."""
        self._print(self.INDEX_MAP)

    def format_board(self, board: Board) -> str:
        """Board as text, e.g. 'X | 2 | O'. Empty cells show their space number."""
        lines = []
        for r, row in enumerate(board.rows()):
            cells = []
            for c, symbol in enumerate(row):
                space = position_to_space(r, c)
                cells.append(str(space) if symbol is None else symbol.value)
            lines.append(" | ".join(cells) + " ")
        return f"\n{self.ROW_SEPARATOR}\n".join(lines) + "\n"

    def render(self, board: Board):
        self._print(self.format_board(board))

    def request_move(self, player: Player) -> int:
        """
        Ask a player for a space until they type a whole number.

        Raises:
            EOFError: If the input stream closes.
        """
        while True:
            text = self.input_func(self.PROMPT.format(symbol=player.value)).strip()
            if not text:
                continue
            try:
                return int(text)
            except ValueError:
                print(self.NOT_A_NUMBER, file=self.err or sys.stderr)

    def report_error(self, error: SelectionError):
        print(error.message, file=self.err or sys.stderr)

    def report_outcome(self, result: Optional[Player],
                       winning_line: Optional[List[int]] = None):
        """
        Print the final result.

        Args:
            result: Winning player, or None for a draw.
            winning_line: Spaces of the completed line, if any.
        """
        if result is None:
            self._print(self.DRAW_MESSAGE)
            return

        self._print(self.WIN_MESSAGE.format(number=result.number))
        if winning_line:
            spaces = "-".join(str(space) for space in winning_line)
            self._print(f"{result.value} completed {spaces}\n")
