"""
Players and moves for terminal TicTacToe.
"""

from enum import Enum
from dataclasses import dataclass


class Player(Enum):
    """The two player symbols."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def number(self) -> int:
        """Seat number shown to humans (X is player 1)."""
        return 1 if self == Player.X else 2


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    space: int              # Space (1-9)
    move_number: int        # Which move this is (1-9)
