"""
Board for terminal TicTacToe.
A 3x3 grid stored as a read-only numpy array. Placing a symbol never
touches an existing board; it returns a new one.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .config import GameConfig
from .errors import OccupiedSpace, OutOfRangeSelection
from .player import Player


_CODE_FOR_PLAYER = {
    Player.X: GameConfig.X_CODE,
    Player.O: GameConfig.O_CODE,
}
_PLAYER_FOR_CODE = {code: player for player, code in _CODE_FOR_PLAYER.items()}
_VALID_CODES = (GameConfig.EMPTY_CODE, GameConfig.X_CODE, GameConfig.O_CODE)


def space_to_position(space: int) -> Tuple[int, int]:
    """
    Convert a space number to board coordinates.

    Args:
        space: Space number (1-9).

    Returns:
        (row, col) tuple.

    Raises:
        OutOfRangeSelection: If space is not an integer in 1-9.
    """
    # bool is an int subclass, but True is not a space
    if isinstance(space, bool) or not isinstance(space, (int, np.integer)):
        raise OutOfRangeSelection(space)
    if space not in GameConfig.SPACE_POSITIONS:
        raise OutOfRangeSelection(space)
    return GameConfig.SPACE_POSITIONS[int(space)]


def position_to_space(row: int, col: int) -> int:
    """Convert (row, col) back to a space number."""
    return row * GameConfig.BOARD_SIZE + col + 1


class Board:
    """
    The 3x3 TicTacToe board.

    Cells hold GameConfig.EMPTY_CODE, X_CODE or O_CODE. The underlying
    array is never written after construction.
    """

    def __init__(self, grid: Optional[np.ndarray] = None):
        size = GameConfig.BOARD_SIZE
        if grid is None:
            grid = np.full((size, size), GameConfig.EMPTY_CODE, dtype=np.int8)
        else:
            raw = np.asarray(grid)
            if raw.shape != (size, size):
                raise ValueError(f"Board must be {size}x{size}, got {raw.shape}")
            # Every cell is empty or claimed, nothing else
            if not np.isin(raw, _VALID_CODES).all():
                raise ValueError(f"Board cells must be one of {_VALID_CODES}")
            grid = raw.astype(np.int8)
        grid.flags.writeable = False
        self._grid = grid

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[str]]]) -> "Board":
        """
        Build a board from nested rows of "X", "O" or None.

        Handy for setting up positions in tests.
        """
        grid = [
            [GameConfig.EMPTY_CODE if cell is None else _CODE_FOR_PLAYER[Player(cell)]
             for cell in row]
            for row in rows
        ]
        return cls(np.array(grid, dtype=np.int8))

    @classmethod
    def from_string(cls, cells: str) -> "Board":
        """
        Build a board from a 9-character string, e.g. "XO..X...O".

        Any character other than X or O is an empty cell. Whitespace and
        "|" are ignored so rows can be separated for readability.
        """
        cells = [c for c in cells if not c.isspace() and c != "|"]
        if len(cells) != GameConfig.MAX_SPACE:
            raise ValueError(f"Expected {GameConfig.MAX_SPACE} cells, got {len(cells)}")
        size = GameConfig.BOARD_SIZE
        rows = [
            [c if c in ("X", "O") else None for c in cells[i:i + size]]
            for i in range(0, len(cells), size)
        ]
        return cls.from_rows(rows)

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the raw cell codes."""
        return self._grid

    def cell(self, row: int, col: int) -> Optional[Player]:
        """Symbol at (row, col), or None if empty."""
        return _PLAYER_FOR_CODE.get(int(self._grid[row, col]))

    def symbol_at(self, space: int) -> Optional[Player]:
        """Symbol at a space number, or None if empty."""
        row, col = space_to_position(space)
        return self.cell(row, col)

    def is_empty(self, space: int) -> bool:
        """
        Check whether a space is still free.

        Raises:
            OutOfRangeSelection: If space is not in 1-9.
        """
        row, col = space_to_position(space)
        return bool(self._grid[row, col] == GameConfig.EMPTY_CODE)

    def apply(self, player: Player, space: int) -> "Board":
        """
        Place a symbol on a copy of this board.

        Args:
            player: Symbol to place.
            space: Space number (1-9).

        Returns:
            A new Board with the symbol placed. This board is unchanged.

        Raises:
            OutOfRangeSelection: If space is not in 1-9.
            OccupiedSpace: If the space is already claimed.
        """
        row, col = space_to_position(space)
        if self._grid[row, col] != GameConfig.EMPTY_CODE:
            raise OccupiedSpace(space)

        updated = self._grid.copy()
        updated[row, col] = _CODE_FOR_PLAYER[player]
        return Board(updated)

    def is_full(self) -> bool:
        """True once every cell is claimed."""
        return bool(np.all(self._grid != GameConfig.EMPTY_CODE))

    def empty_spaces(self) -> List[int]:
        """All free space numbers, ascending."""
        rows, cols = np.nonzero(self._grid == GameConfig.EMPTY_CODE)
        return [position_to_space(int(r), int(c)) for r, c in zip(rows, cols)]

    def claimed_count(self) -> int:
        return int(np.count_nonzero(self._grid != GameConfig.EMPTY_CODE))

    def rows(self) -> List[List[Optional[Player]]]:
        """The board as nested lists of Player/None, row-major."""
        size = GameConfig.BOARD_SIZE
        return [[self.cell(r, c) for c in range(size)] for r in range(size)]

    def line(self, positions: Iterable[Tuple[int, int]]) -> List[Optional[Player]]:
        """Symbols along a list of (row, col) positions."""
        return [self.cell(r, c) for r, c in positions]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    def __hash__(self) -> int:
        return hash(self._grid.tobytes())

    def __repr__(self) -> str:
        cells = "".join(
            "." if cell is None else cell.value
            for row in self.rows() for cell in row
        )
        return f"Board({cells!r})"


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board()
    for player, space in [(Player.X, 5), (Player.O, 1), (Player.X, 9)]:
        board = board.apply(player, space)
        print(f"{player.value} takes {space}: {board}")

    print(f"Empty spaces: {board.empty_spaces()}")
    print(f"Full: {board.is_full()}")

    print("\nBoard test done!")
