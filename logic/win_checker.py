"""
Win checker for terminal TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import List, Optional, Tuple
from dataclasses import dataclass

from .board import Board, position_to_space
from .config import GameConfig
from .player import Player


Line = List[Tuple[int, int]]

_SIZE = GameConfig.BOARD_SIZE


@dataclass(frozen=True)
class Evaluation:
    """Result of evaluating a board."""
    winner: Optional[Player] = None
    is_draw: bool = False

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None or self.is_draw


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same symbol in a row
    (vertically, horizontally, or diagonally, checked in that order)

    Nothing here keeps state between calls, so checking the same board
    twice always gives the same answer.
    """

    ROWS: List[Line] = [[(r, c) for c in range(_SIZE)] for r in range(_SIZE)]
    COLUMNS: List[Line] = [[(r, c) for r in range(_SIZE)] for c in range(_SIZE)]
    DIAGONALS: List[Line] = [
        [(i, i) for i in range(_SIZE)],                  # top-left to bottom-right
        [(i, _SIZE - 1 - i) for i in range(_SIZE)],      # top-right to bottom-left
    ]

    def horizontal_winner(self, board: Board) -> Optional[Player]:
        """First completed row, scanning top to bottom."""
        return self._first_winner(board, self.ROWS)

    def vertical_winner(self, board: Board) -> Optional[Player]:
        """First completed column, scanning left to right."""
        return self._first_winner(board, self.COLUMNS)

    def diagonal_winner(self, board: Board) -> Optional[Player]:
        """Main diagonal first, then the anti-diagonal."""
        return self._first_winner(board, self.DIAGONALS)

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The board to inspect.

        Returns:
            The winning Player, or None if no line is complete.
        """
        for scan in (self.vertical_winner, self.horizontal_winner, self.diagonal_winner):
            winner = scan(board)
            if winner is not None:
                return winner
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND no line is complete.
        """
        if self.check_winner(board) is not None:
            return False
        return board.is_full()

    def evaluate(self, board: Board) -> Evaluation:
        """Winner and draw status in one pass."""
        winner = self.check_winner(board)
        if winner is not None:
            return Evaluation(winner=winner)
        return Evaluation(is_draw=board.is_full())

    def get_winning_line(self, board: Board) -> Optional[List[int]]:
        """
        Get the winning line if there is one.

        Returns:
            The three space numbers of the line, or None.
        """
        for lines in (self.COLUMNS, self.ROWS, self.DIAGONALS):
            for line in lines:
                if self._check_line(board, line) is not None:
                    return [position_to_space(r, c) for r, c in line]
        return None

    def _first_winner(self, board: Board, lines: List[Line]) -> Optional[Player]:
        for line in lines:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner
        return None

    def _check_line(self, board: Board, line: Line) -> Optional[Player]:
        """
        Check if a single line has a winner.

        Returns:
            The Player if all 3 cells hold the same symbol, None otherwise.
        """
        symbols = board.line(line)
        first = symbols[0]
        if first is None:
            return None  # Empty cell, no winner on this line
        if all(symbol == first for symbol in symbols):
            return first
        return None


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Horizontal win
    board1 = Board.from_string("XXX|OO.|...")
    winner = checker.check_winner(board1)
    print(f"Test 1 (horizontal): winner = {winner}")
    assert winner == Player.X

    # Test 2: Anti-diagonal win
    board2 = Board.from_string("X.O|XO.|O..")
    winner = checker.check_winner(board2)
    print(f"Test 2 (diagonal): winner = {winner}, line = {checker.get_winning_line(board2)}")
    assert winner == Player.O

    # Test 3: Draw (full board, no winner)
    board3 = Board.from_string("XOO|OXX|XXO")
    print(f"Test 3 (draw): {checker.evaluate(board3)}")
    assert checker.check_draw(board3)

    print("\nWinChecker test done!")
