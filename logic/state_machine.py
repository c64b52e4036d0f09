"""
State machine for terminal TicTacToe.

The game moves through four states:

    Initializing -> Placing(X, empty board)
    Placing(p, b) -> Evaluating(b + move, p)
    Evaluating(b, p) -> Winner(p, b)            line completed
    Evaluating(b, p) -> Winner(None, b)         board full, no line
    Evaluating(b, p) -> Placing(opponent, b)    otherwise
    Winner -> halt

`advance` computes one step. `TicTacToeFSM` owns the single live state
for a match and drives `advance` until the game is over.
"""

import logging
from typing import List, Optional, Protocol

import numpy as np

from .board import Board, position_to_space
from .config import GameConfig
from .errors import AlreadyTerminal, SelectionError
from .game_state import Evaluating, GameState, Initializing, Placing, Winner, is_terminal
from .move_validator import MoveValidator
from .player import Move, Player
from .win_checker import WinChecker


logger = logging.getLogger(__name__)


class GameIO(Protocol):
    """What the state machine needs from the outside world."""

    def request_move(self, player: Player) -> int:
        """Block until `player` picks a space."""

    def render(self, board: Board) -> None:
        ...

    def report_error(self, error: SelectionError) -> None:
        ...

    def report_outcome(self, result: Optional[Player],
                       winning_line: Optional[List[int]] = None) -> None:
        ...


_validator = MoveValidator()
_win_checker = WinChecker()


def place(state: Placing, space: int,
          validator: Optional[MoveValidator] = None) -> Evaluating:
    """
    Play `space` for the player whose turn it is.

    Args:
        state: Current Placing state. Never modified.
        space: Requested space (1-9).
        validator: Move validator to use.

    Returns:
        Evaluating state holding the updated board.

    Raises:
        OutOfRangeSelection: If space is not in 1-9.
        OccupiedSpace: If the space is already claimed.
    """
    validator = validator or _validator
    result = validator.validate_move(state.board, space)
    if not result.is_valid:
        raise result.error

    board = state.board.apply(state.player, space)
    return Evaluating(board=board, after=state.player)


def evaluate(state: Evaluating,
             win_checker: Optional[WinChecker] = None) -> GameState:
    """Decide what follows a move: a win, a draw, or the other player's turn."""
    win_checker = win_checker or _win_checker
    evaluation = win_checker.evaluate(state.board)
    if evaluation.is_game_over:
        return Winner(result=evaluation.winner, board=state.board)
    return Placing(player=state.after.opposite(), board=state.board)


def advance(state: GameState, io: GameIO,
            validator: Optional[MoveValidator] = None,
            win_checker: Optional[WinChecker] = None) -> GameState:
    """
    Given the current state, compute the next state.

    Placing blocks on `io.request_move` until the player picks a valid
    space; invalid picks are reported through `io.report_error` and the
    player is asked again, with no limit.

    Winner is terminal: the final board and outcome are shown and the
    same state is returned. Callers must not advance past it;
    TicTacToeFSM enforces that.

    Raises:
        TypeError: If `state` is not one of the four game states.
    """
    win_checker = win_checker or _win_checker

    if isinstance(state, Initializing):
        # X always gets the first turn
        return Placing(player=Player(GameConfig.FIRST_PLAYER), board=Board())

    if isinstance(state, Placing):
        io.render(state.board)
        while True:
            space = io.request_move(state.player)
            try:
                return place(state, space, validator)
            except SelectionError as error:
                logger.debug("Rejected %r for %s: %s", space, state.player.value, error)
                io.report_error(error)

    if isinstance(state, Evaluating):
        return evaluate(state, win_checker)

    if isinstance(state, Winner):
        io.render(state.board)
        io.report_outcome(state.result, win_checker.get_winning_line(state.board))
        return state

    raise TypeError(f"Unknown game state: {state!r}")


def _placed_space(before: Board, after: Board) -> int:
    """The one space claimed between two boards."""
    changed = np.argwhere(before.grid != after.grid)
    if len(changed) != 1:
        raise RuntimeError(f"Expected exactly one new cell, found {len(changed)}")
    row, col = changed[0]
    return position_to_space(int(row), int(col))


class TicTacToeFSM:
    """
    Runs one match.

    Game flow:
    1. Start in Initializing
    2. Each transition() advances one step
    3. Once Winner has been shown, the match is over and further
       transitions raise AlreadyTerminal
    """

    def __init__(
        self,
        io: GameIO,
        validator: Optional[MoveValidator] = None,
        win_checker: Optional[WinChecker] = None
    ):
        """
        Initialize the state machine.

        Args:
            io: Collaborator that asks for moves and shows the game.
            validator: Move validator (default: MoveValidator()).
            win_checker: Win checker (default: WinChecker()).
        """
        self.io = io
        self.validator = validator or MoveValidator()
        self.win_checker = win_checker or WinChecker()

        self.state: GameState = Initializing()
        self.moves: List[Move] = []
        self.is_game_over = False

    def transition(self) -> GameState:
        """
        Advance to the next state.

        Returns:
            The new current state.

        Raises:
            AlreadyTerminal: If the match has already finished.
        """
        if self.is_game_over:
            raise AlreadyTerminal()

        previous = self.state
        self.state = advance(previous, self.io, self.validator, self.win_checker)
        logger.debug("%s -> %s", type(previous).__name__, type(self.state).__name__)

        if isinstance(previous, Placing):
            self._record_move(previous, self.state)
        elif is_terminal(previous):
            self.is_game_over = True
            if previous.is_draw:
                logger.info("Game over: draw after %d moves", len(self.moves))
            else:
                logger.info("Game over: %s wins after %d moves",
                            previous.result.value, len(self.moves))

        return self.state

    def run(self) -> Winner:
        """
        Play until the game is over.

        Returns:
            The final Winner state.
        """
        while not self.is_game_over:
            self.transition()
        return self.state

    def _record_move(self, before: Placing, after: Evaluating):
        space = _placed_space(before.board, after.board)
        move = Move(player=before.player, space=space, move_number=len(self.moves) + 1)
        self.moves.append(move)
        logger.debug("Move %d: %s at %d", move.move_number, move.player.value, space)
