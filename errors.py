"""Exceptions raised by the rule engine.

Every error is a ``ValueError`` so callers that only care about "that input
was rejected" can keep catching ``ValueError``.
"""

from typing import Tuple


class GoRuleError(ValueError):
    """Base class for every rejected board or game operation."""


class InvalidSizeError(GoRuleError):
    def __init__(self, size):
        super().__init__(f"Board size must be a positive integer, got {size!r}.")
        self.size = size


class OutOfBoundsError(GoRuleError):
    def __init__(self, row: int, col: int, size: int):
        super().__init__(f"({row},{col}) is outside the {size}x{size} board.")
        self.row = row
        self.col = col
        self.size = size


class IllegalMoveError(GoRuleError):
    """A placement the rules forbid on the current position."""

    def __init__(self, move: Tuple[int, int], message: str):
        super().__init__(message)
        self.move = move


class OccupiedError(IllegalMoveError):
    def __init__(self, move: Tuple[int, int]):
        super().__init__(move, f"Point {move} is already occupied.")


class SuicideError(IllegalMoveError):
    def __init__(self, move: Tuple[int, int]):
        super().__init__(move, f"Playing at {move} would leave the group without liberties.")


class GameEndedError(GoRuleError):
    def __init__(self, action: str):
        super().__init__(f"Cannot {action}: the game has ended.")
        self.action = action


class FrozenBoardError(GoRuleError):
    def __init__(self):
        super().__init__("Board is read-only; copy() it to make changes.")
