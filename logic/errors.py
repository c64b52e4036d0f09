"""
Errors raised by the game logic.

Selection errors are gameplay errors: the engine reports them to the
player and asks again. AlreadyTerminal is a driver error.
"""


class SelectionError(ValueError):
    """A requested space cannot be played."""

    def __init__(self, space, message: str):
        super().__init__(message)
        self.space = space
        self.message = message


class OutOfRangeSelection(SelectionError):
    """The requested space is not an integer in 1-9."""

    def __init__(self, space):
        super().__init__(space, "Selection must be an integer in range 1 - 9")


class OccupiedSpace(SelectionError):
    """The requested space is already claimed."""

    def __init__(self, space: int):
        super().__init__(
            space, f"Can't update non-empty space, {space} is already occupied."
        )


class AlreadyTerminal(RuntimeError):
    """The state machine was advanced after the game ended."""

    def __init__(self):
        super().__init__("Game is already over!")
