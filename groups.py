"""Group, liberty and capture computations over a :class:`GoBoard`.

Groups are never stored: they are recomputed from the board every time they
are needed.
"""

from typing import FrozenSet, Iterable, List, Set, Tuple

import torch

from board import EMPTY, GoBoard

Point = Tuple[int, int]


def find_group(board: GoBoard, r_start: int, c_start: int, color: int) -> FrozenSet[Point]:
    """
    Finds the connected group of ``color`` stones containing (r_start, c_start).

    Uses an explicit stack so that large groups cannot exhaust the call stack.

    Args:
        board (GoBoard): Board to search.
        r_start (int): Row of the starting stone.
        c_start (int): Column of the starting stone.
        color (int): Color expected at the starting point.

    Returns:
        FrozenSet[Tuple[int, int]]: Every (row, col) of the group, or an empty
        set if the starting point does not hold ``color``.

    Raises:
        OutOfBoundsError: if the starting point is not on the board.
    """
    if board.get(r_start, c_start) != color or color == EMPTY:
        return frozenset()

    group: Set[Point] = set()
    stack: List[Point] = [(r_start, c_start)]
    visited: Set[Point] = {(r_start, c_start)}

    while stack:
        r, c = stack.pop()
        group.add((r, c))
        for nr, nc in board.neighbors(r, c):
            if (nr, nc) not in visited and board.get(nr, nc) == color:
                visited.add((nr, nc))
                stack.append((nr, nc))

    return frozenset(group)


def liberties(board: GoBoard, group: Iterable[Point]) -> FrozenSet[Point]:
    """Returns the distinct empty points orthogonally adjacent to ``group``."""
    libs: Set[Point] = set()
    for r, c in group:
        for nr, nc in board.neighbors(r, c):
            if board.get(nr, nc) == EMPTY:
                libs.add((nr, nc))
    return frozenset(libs)


def count_liberties(board: GoBoard, group: Iterable[Point]) -> int:
    return len(liberties(board, group))


def remove_captured(board: GoBoard, color: int) -> Tuple[GoBoard, int]:
    """
    Removes every ``color`` group that has no liberties.

    Scans the whole board rather than only the neighbourhood of the last
    move, so the result does not depend on how the position was reached.

    Args:
        board (GoBoard): Board to resolve. It is left untouched.
        color (int): Color whose dead groups are removed.

    Returns:
        Tuple[GoBoard, int]: The resolved copy and the number of stones removed.
    """
    result = board.copy()
    visited = torch.zeros((board.size, board.size), dtype=torch.bool)
    removed = 0

    for r in range(board.size):
        for c in range(board.size):
            if visited[r, c] or board.get(r, c) != color:
                continue
            group = find_group(board, r, c, color)
            for gr, gc in group:
                visited[gr, gc] = True
            if count_liberties(board, group) == 0:
                for gr, gc in group:
                    result.set(gr, gc, EMPTY)
                removed += len(group)

    return result, removed
