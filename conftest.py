"""
Shared test helpers.
"""

from typing import List, Optional

from logic.board import Board
from logic.errors import SelectionError
from logic.player import Player


class ScriptedUI:
    """
    Stands in for the console: replays fixed selections and records
    everything the game shows.

    Running out of selections raises EOFError, like a closed terminal.
    """

    def __init__(self, selections: Optional[List[int]] = None):
        self.selections = list(selections or [])
        self.requests: List[Player] = []
        self.rendered: List[Board] = []
        self.errors: List[SelectionError] = []
        self.outcomes: List[tuple] = []

    def request_move(self, player: Player) -> int:
        self.requests.append(player)
        if not self.selections:
            raise EOFError("no more scripted selections")
        return self.selections.pop(0)

    def render(self, board: Board):
        self.rendered.append(board)

    def report_error(self, error: SelectionError):
        self.errors.append(error)

    def report_outcome(self, result, winning_line=None):
        self.outcomes.append((result, winning_line))

    def show_intro(self):
        pass
