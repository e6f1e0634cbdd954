from typing import Iterator, Tuple
import torch

from errors import FrozenBoardError, InvalidSizeError, OutOfBoundsError

EMPTY: int = 0
BLACK: int = 1
WHITE: int = -1

DEFAULT_BOARD_SIZE: int = 19

COLOR_NAMES = {BLACK: "black", WHITE: "white"}

_NEIGHBOR_OFFSETS = [(0, 1), (0, -1), (1, 0), (-1, 0)]


def opponent(color: int) -> int:
    """Returns the other player's color."""
    if color not in (BLACK, WHITE):
        raise ValueError(f"{color!r} is not a player color.")
    return -color


class GoBoard:
    """
    An N x N grid of intersections, each EMPTY, BLACK or WHITE.

    The board only knows about occupancy: it has no notion of whose turn it
    is, of captures or of legality. Copies made with :meth:`copy` share no
    storage with the original.
    """

    def __init__(self, size: int = DEFAULT_BOARD_SIZE):
        if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
            raise InvalidSizeError(size)
        self.size: int = size
        self.board: torch.Tensor = torch.zeros((size, size), dtype=torch.int8)
        self.frozen: bool = False

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.size and 0 <= c < self.size

    def _check_bounds(self, r: int, c: int) -> None:
        if not self.in_bounds(r, c):
            raise OutOfBoundsError(r, c, self.size)

    def get(self, r: int, c: int) -> int:
        """
        Returns the value at (r, c).

        Raises:
            OutOfBoundsError: if (r, c) is not on the board.
        """
        self._check_bounds(r, c)
        return int(self.board[r, c].item())

    def set(self, r: int, c: int, value: int) -> None:
        """
        Stores ``value`` at (r, c).

        Raises:
            OutOfBoundsError: if (r, c) is not on the board.
            ValueError: if ``value`` is not EMPTY, BLACK or WHITE.
            FrozenBoardError: if the board has been frozen.
        """
        if self.frozen:
            raise FrozenBoardError()
        self._check_bounds(r, c)
        if value not in (EMPTY, BLACK, WHITE):
            raise ValueError(f"Invalid cell value {value!r}.")
        self.board[r, c] = value

    def neighbors(self, r: int, c: int) -> Iterator[Tuple[int, int]]:
        """Yields the on-board orthogonal neighbours of (r, c)."""
        for dr, dc in _NEIGHBOR_OFFSETS:
            nr, nc = r + dr, c + dc
            if self.in_bounds(nr, nc):
                yield nr, nc

    def count(self, value: int) -> int:
        return int((self.board == value).sum().item())

    def is_empty(self) -> bool:
        return not bool(self.board.any().item())

    def freeze(self) -> 'GoBoard':
        """
        Makes the board read-only and returns it. Game states only hold
        frozen boards, so a position cannot change once it is recorded.
        """
        self.frozen = True
        return self

    def copy(self) -> 'GoBoard':
        """
        Creates an independent, writable copy of the board.
        """
        new_board = GoBoard(self.size)
        new_board.board = self.board.clone()
        return new_board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GoBoard):
            return NotImplemented
        return self.size == other.size and torch.equal(self.board, other.board)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"GoBoard(size={self.size}, black={self.count(BLACK)}, white={self.count(WHITE)})"

    def __str__(self) -> str:
        chars = {EMPTY: '.', BLACK: 'X', WHITE: 'O'}
        s = "   " + " ".join([chr(ord('A') + i + (i >= 8)) for i in range(self.size)]) + "\n"  # Skip 'I'
        for r in range(self.size):
            s += f"{self.size - r:2d} " + " ".join([chars[int(self.board[r, c].item())] for c in range(self.size)]) + "\n"
        return s
