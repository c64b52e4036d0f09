"""
Move validator for terminal TicTacToe.
Validates that a requested space can be played.
"""

from typing import List, Optional
from dataclasses import dataclass

from .board import Board, space_to_position
from .errors import OccupiedSpace, SelectionError


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[SelectionError] = None

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error else None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. The space must be an integer in 1-9
    2. Can only place on empty cells
    """

    def validate_move(self, board: Board, space: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Board the move would be played on.
            space: Requested space (1-9).

        Returns:
            ValidationResult with is_valid and the error, if any.
        """
        try:
            # Check if space is in range
            space_to_position(space)
        except SelectionError as error:
            return ValidationResult(is_valid=False, error=error)

        # Check if cell is empty
        if not board.is_empty(space):
            return ValidationResult(is_valid=False, error=OccupiedSpace(space))

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[int]:
        """All spaces that may be played, ascending."""
        return board.empty_spaces()
