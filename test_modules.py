"""
Smoke tests for the TicTacToe modules.
Run this to verify all components are wired together before playing.
"""

import sys

import pytest


def test_game_config():
    """Board size and space map are consistent."""
    from logic.config import GameConfig

    assert GameConfig.BOARD_SIZE == 3
    assert sorted(GameConfig.SPACE_POSITIONS) == list(range(GameConfig.MIN_SPACE, GameConfig.MAX_SPACE + 1))
    assert len(set(GameConfig.SPACE_POSITIONS.values())) == 9
    assert GameConfig.FIRST_PLAYER == "X"


def test_package_exports():
    import logic

    for name in ("Board", "Player", "Move", "WinChecker", "MoveValidator",
                 "TicTacToeFSM", "advance", "place", "Initializing",
                 "Placing", "Evaluating", "Winner", "AlreadyTerminal"):
        assert hasattr(logic, name), name


def test_game_logic():
    """Board, validator, win checker and state machine agree on one game."""
    from conftest import ScriptedUI
    from logic import Board, MoveValidator, Player, TicTacToeFSM, WinChecker

    board = Board().apply(Player.X, 5)

    validator = MoveValidator()
    assert validator.validate_move(board, 1).is_valid
    result = validator.validate_move(board, 5)
    assert not result.is_valid
    assert result.error_message == "Can't update non-empty space, 5 is already occupied."
    assert validator.validate_move(board, 0).error_message == "Selection must be an integer in range 1 - 9"
    assert 5 not in validator.get_valid_moves(board)

    checker = WinChecker()
    assert checker.check_winner(board) is None

    final = TicTacToeFSM(ScriptedUI([5, 1, 3, 2, 7])).run()
    assert final.result == Player.X


def test_console_ui():
    import io
    from logic import Board
    from ui import ConsoleUI

    out = io.StringIO()
    ConsoleUI(out=out).render(Board())
    assert "1 | 2 | 3" in out.getvalue()


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
