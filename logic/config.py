"""
Game configuration for terminal TicTacToe.
All the fixed settings for the board and turn order.
"""


class GameConfig:
    """
    Configuration class for game settings.
    These are rules of the game, not user preferences.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Players pick cells by space number, read left-to-right, top-to-bottom
    MIN_SPACE = 1
    MAX_SPACE = BOARD_SIZE * BOARD_SIZE  # 9

    # Space number -> (row, col)
    SPACE_POSITIONS = {
        1: (0, 0), 2: (0, 1), 3: (0, 2),
        4: (1, 0), 5: (1, 1), 6: (1, 2),
        7: (2, 0), 8: (2, 1), 9: (2, 2),
    }

    # ==================== TURN SETTINGS ====================
    # X always moves first
    FIRST_PLAYER = "X"

    # ==================== CELL ENCODING ====================
    # Values stored in the board array
    EMPTY_CODE = 0
    X_CODE = 1
    O_CODE = 2
