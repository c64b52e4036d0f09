"""
Game state for terminal TicTacToe.
The four lifecycle states the state machine moves through. Exactly one
of them is live at a time; each carries only its own data.
"""

from typing import Optional, Union
from dataclasses import dataclass

from .board import Board
from .player import Player


@dataclass(frozen=True)
class Initializing:
    """Game just started, nothing placed yet."""


@dataclass(frozen=True)
class Placing:
    """`player` is choosing a space on `board`."""
    player: Player
    board: Board


@dataclass(frozen=True)
class Evaluating:
    """`after` just moved; `board` includes that move."""
    board: Board
    after: Player


@dataclass(frozen=True)
class Winner:
    """
    Game over.

    `result` is the winning Player, or None when the board filled up
    without a completed line.
    """
    result: Optional[Player]
    board: Board

    @property
    def is_draw(self) -> bool:
        return self.result is None


GameState = Union[Initializing, Placing, Evaluating, Winner]


def is_terminal(state: GameState) -> bool:
    """Whether no further gameplay transition follows this state."""
    return isinstance(state, Winner)
