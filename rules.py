from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from board import EMPTY, GoBoard, opponent
from groups import count_liberties, find_group, remove_captured


class IllegalReason(Enum):
    OCCUPIED = "occupied"
    SUICIDE = "suicide"


@dataclass(frozen=True)
class MoveOutcome:
    """Result of checking a placement.

    Attributes
    ----------
    legal : bool
        Whether the placement is allowed.
    board : Optional[GoBoard]
        Position after the stone is placed and dead opponent stones are
        removed. ``None`` for an illegal move.
    captured : int
        Number of opponent stones the placement removes.
    reason : Optional[IllegalReason]
        Why the placement was refused. ``None`` for a legal move.
    """

    legal: bool
    board: Optional[GoBoard] = None
    captured: int = 0
    reason: Optional[IllegalReason] = None

    @classmethod
    def accept(cls, board: GoBoard, captured: int) -> "MoveOutcome":
        return cls(True, board=board, captured=captured)

    @classmethod
    def reject(cls, reason: IllegalReason) -> "MoveOutcome":
        return cls(False, reason=reason)


def validate_move(board: GoBoard, r: int, c: int, color: int) -> MoveOutcome:
    """
    Decides whether ``color`` may place a stone at (r, c).

    The stone is tried on a copy of ``board``; the original is never touched.
    A placement that captures is always legal, even if the new stone would
    otherwise have no liberties. There is no ko rule.

    Raises:
        OutOfBoundsError: if (r, c) is not on the board.
        ValueError: if ``color`` is not a player color.
    """
    other = opponent(color)

    if board.get(r, c) != EMPTY:
        return MoveOutcome.reject(IllegalReason.OCCUPIED)

    trial = board.copy()
    trial.set(r, c, color)

    resolved, captured = remove_captured(trial, other)
    if captured > 0:
        return MoveOutcome.accept(resolved, captured)

    own_group = find_group(resolved, r, c, color)
    if count_liberties(resolved, own_group) == 0:
        return MoveOutcome.reject(IllegalReason.SUICIDE)
    return MoveOutcome.accept(resolved, 0)


def legal_moves(board: GoBoard, color: int) -> List[Tuple[int, int]]:
    """
    Returns every point ``color`` may legally play, in row-major order.
    Passing is always allowed and is not listed.
    """
    moves = []
    for r in range(board.size):
        for c in range(board.size):
            if board.get(r, c) == EMPTY and validate_move(board, r, c, color).legal:
                moves.append((r, c))
    return moves
