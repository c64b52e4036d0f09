"""
Logic module for terminal TicTacToe.
Handles the board, rules, and the game state machine.
"""

from .board import Board
from .player import Player, Move
from .errors import SelectionError, OutOfRangeSelection, OccupiedSpace, AlreadyTerminal
from .game_state import GameState, Initializing, Placing, Evaluating, Winner
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .state_machine import TicTacToeFSM, advance, place

__version__ = "1.0.0"
