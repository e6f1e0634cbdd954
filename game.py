"""Turn-based game state machine.

Every transition is a pure function from one :class:`GameState` to the next;
a rejected transition raises and leaves the caller's state as it was.
:class:`GameController` wraps those functions for callers that prefer a
single mutable handle.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple, Union

from board import BLACK, COLOR_NAMES, DEFAULT_BOARD_SIZE, WHITE, GoBoard, opponent
from errors import GameEndedError, OccupiedError, SuicideError
from rules import IllegalReason, validate_move

logger = logging.getLogger(__name__)

Move = Tuple[int, int]


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    ENDED = "ended"


@dataclass(frozen=True)
class GameState:
    """Snapshot of a game.

    Attributes
    ----------
    board : GoBoard
        Current position, frozen. A writable board passed in is replaced
        by a frozen copy so the caller keeps ownership of the original.
    current_player : int
        ``BLACK`` or ``WHITE``, the side to move.
    captured_by_black : int
        White stones removed by Black so far.
    captured_by_white : int
        Black stones removed by White so far.
    last_move : Optional[Tuple[int, int]]
        Most recent placement, unchanged by passes.
    consecutive_passes : int
        Passes since the last placement.
    ended : bool
        Set once two passes in a row have been played.
    """

    board: GoBoard
    current_player: int = BLACK
    captured_by_black: int = 0
    captured_by_white: int = 0
    last_move: Optional[Move] = None
    consecutive_passes: int = 0
    ended: bool = False

    __hash__ = None  # holds a torch-backed board

    def __post_init__(self):
        if not self.board.frozen:
            object.__setattr__(self, "board", self.board.copy().freeze())

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def status(self) -> GameStatus:
        return GameStatus.ENDED if self.ended else GameStatus.IN_PROGRESS

    def captures(self, color: int) -> int:
        """Number of stones ``color`` has captured."""
        if color == BLACK:
            return self.captured_by_black
        if color == WHITE:
            return self.captured_by_white
        raise ValueError(f"{color!r} is not a player color.")


@dataclass(frozen=True)
class PlaceStone:
    row: int
    col: int


@dataclass(frozen=True)
class Pass:
    pass


@dataclass(frozen=True)
class Reset:
    pass


Command = Union[PlaceStone, Pass, Reset]


def new_game(size: int = DEFAULT_BOARD_SIZE) -> GameState:
    """Empty board, Black to move. Raises ``InvalidSizeError`` for size <= 0."""
    return GameState(board=GoBoard(size).freeze())


def place_stone(state: GameState, row: int, col: int) -> Tuple[GameState, int]:
    """
    Plays a stone for the side to move.

    Returns:
        Tuple[GameState, int]: The next state and the number of stones captured.

    Raises:
        GameEndedError: if the game is over.
        OutOfBoundsError: if (row, col) is not on the board.
        OccupiedError: if the point already holds a stone.
        SuicideError: if the stone's group would have no liberties and nothing is captured.
    """
    if state.ended:
        raise GameEndedError("place a stone")

    player = state.current_player
    outcome = validate_move(state.board, row, col, player)
    if not outcome.legal:
        logger.warning("Rejected %s at (%d,%d): %s", COLOR_NAMES[player], row, col, outcome.reason.value)
        if outcome.reason is IllegalReason.OCCUPIED:
            raise OccupiedError((row, col))
        raise SuicideError((row, col))

    captured = outcome.captured
    next_state = replace(
        state,
        board=outcome.board.freeze(),
        current_player=opponent(player),
        captured_by_black=state.captured_by_black + (captured if player == BLACK else 0),
        captured_by_white=state.captured_by_white + (captured if player == WHITE else 0),
        last_move=(row, col),
        consecutive_passes=0,
    )
    logger.debug("%s plays (%d,%d), captures %d", COLOR_NAMES[player], row, col, captured)
    return next_state, captured


def pass_turn(state: GameState) -> GameState:
    """
    Passes for the side to move. The second pass in a row ends the game; the
    side to move is left as it was when the game ends.

    Raises:
        GameEndedError: if the game is over.
    """
    if state.ended:
        raise GameEndedError("pass")

    passes = state.consecutive_passes + 1
    if passes >= 2:
        logger.info(
            "Game ended by two passes (captures: black %d, white %d)",
            state.captured_by_black,
            state.captured_by_white,
        )
        return replace(state, consecutive_passes=passes, ended=True)

    logger.debug("%s passes", COLOR_NAMES[state.current_player])
    return replace(state, consecutive_passes=passes, current_player=opponent(state.current_player))


def reset(state: GameState) -> GameState:
    """Starts over on a board of the same size. Allowed in any state."""
    return new_game(state.size)


def apply(state: GameState, command: Command) -> GameState:
    """Reducer over :data:`Command`. Errors propagate from the transition."""
    if isinstance(command, PlaceStone):
        next_state, _ = place_stone(state, command.row, command.col)
        return next_state
    if isinstance(command, Pass):
        return pass_turn(state)
    if isinstance(command, Reset):
        return reset(state)
    raise TypeError(f"Unknown command {command!r}")


class GameController:
    """Holds the current :class:`GameState` and advances it one command at a time."""

    def __init__(self, size: int = DEFAULT_BOARD_SIZE):
        self.state: GameState = new_game(size)

    @property
    def board(self) -> GoBoard:
        return self.state.board

    @property
    def current_player(self) -> int:
        return self.state.current_player

    @property
    def ended(self) -> bool:
        return self.state.ended

    def place_stone(self, row: int, col: int) -> int:
        self.state, captured = place_stone(self.state, row, col)
        return captured

    def pass_turn(self) -> None:
        self.state = pass_turn(self.state)

    def reset(self, size: Optional[int] = None) -> None:
        self.state = reset(self.state) if size is None else new_game(size)

    def apply(self, command: Command) -> GameState:
        self.state = apply(self.state, command)
        return self.state
