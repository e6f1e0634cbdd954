"""Simple GTP front end for the rule engine.

Usage:
    python gtp_engine.py  # starts a stdin/stdout GTP loop

Supported commands (subset):
    - protocol_version
    - name
    - version
    - known_command <cmd>
    - list_commands
    - boardsize <N>
    - clear_board
    - play <color> <vertex|pass>
    - showboard
    - captures <color>
    - quit

There is no ``genmove``: the engine referees moves, it does not choose them.
Diagnostics go to stderr through :mod:`logging`; set ``PYGO_LOG_LEVEL`` to
``DEBUG`` to see every placement.
"""

import logging
import os
import sys
from typing import Optional, Tuple

from board import BLACK, WHITE
from errors import GameEndedError, GoRuleError
from game import GameController


LETTERS = "ABCDEFGHJKLMNOPQRST"

logger = logging.getLogger(__name__)


class GtpConfig:
    def __init__(self, name="PyGo", version="0.2", board_size=19):
        self.name = name
        self.version = version
        self.board_size = board_size


def parse_color(color: str) -> int:
    color = color.strip().lower()
    if color in ("b", "black"):
        return BLACK
    if color in ("w", "white"):
        return WHITE
    raise ValueError("invalid color")


def vertex_to_point(vertex: str, size: int) -> Optional[Tuple[int, int]]:
    """Converts a GTP vertex such as ``D4`` to (row, col); ``pass`` gives ``None``."""
    vertex = vertex.strip().lower()
    if vertex == "pass":
        return None
    if len(vertex) < 2:
        raise ValueError("invalid vertex")
    col = vertex[0].upper()
    row = vertex[1:]
    if col not in LETTERS[:size]:
        raise ValueError("invalid vertex")
    try:
        row = int(row)
    except ValueError as exc:
        raise ValueError("invalid vertex") from exc
    x = LETTERS.index(col)
    y = size - row
    if not (0 <= x < size and 0 <= y < size):
        raise ValueError("invalid vertex")
    return y, x


def point_to_vertex(point: Optional[Tuple[int, int]], size: int) -> str:
    if point is None:
        return "pass"
    y, x = point
    return f"{LETTERS[x]}{size - y}"


class GtpEngine:
    def __init__(self, config: Optional[GtpConfig] = None, out=None):
        self.config = config or GtpConfig()
        self.out = out or sys.stdout
        self.game = GameController(self.config.board_size)
        self.implemented_commands = {
            "protocol_version",
            "name",
            "version",
            "known_command",
            "list_commands",
            "boardsize",
            "clear_board",
            "play",
            "showboard",
            "captures",
            "quit",
        }

    # Utility responses --------------------------------------------------
    def respond(self, msg: str = "") -> None:
        self.out.write(f"= {msg}\n\n")
        self.out.flush()

    def error(self, msg: str) -> None:
        self.out.write(f"? {msg}\n\n")
        self.out.flush()

    # Command handlers ---------------------------------------------------
    def handle_play(self, color: str, vertex: str) -> None:
        try:
            player = parse_color(color)
            point = vertex_to_point(vertex, self.game.board.size)
        except ValueError as e:
            self.error(str(e))
            return

        if self.game.ended:
            self.error(f"illegal move: {GameEndedError('play')}")
            return
        if self.game.current_player != player:
            self.error("illegal move: not your turn")
            return

        try:
            if point is None:
                self.game.pass_turn()
                if self.game.ended:
                    logger.info("Game over after two passes")
            else:
                self.game.place_stone(*point)
            self.respond()
        except GoRuleError as e:
            self.error(f"illegal move: {e}")

    def handle_boardsize(self, size: str) -> None:
        try:
            s = int(size)
        except ValueError:
            self.error("invalid boardsize: not an integer")
            return
        if not (0 < s <= len(LETTERS)):
            self.error("unacceptable size")
            return

        self.config.board_size = s
        self.game.reset(s)
        self.respond()

    def handle_captures(self, color: str) -> None:
        try:
            player = parse_color(color)
        except ValueError as e:
            self.error(str(e))
            return
        self.respond(str(self.game.state.captures(player)))

    # Main command dispatcher -------------------------------------------
    def handle_command(self, line: str) -> bool:
        if not line or line.startswith("#"):
            return True
        parts = line.split()
        cmd = parts[0]
        args = parts[1:]
        logger.debug("GTP <- %s", line)
        if cmd == "quit":
            self.respond()
            return False
        elif cmd == "protocol_version":
            self.respond("2")
        elif cmd == "name":
            self.respond(self.config.name)
        elif cmd == "version":
            self.respond(self.config.version)
        elif cmd == "clear_board":
            self.game.reset()
            self.respond()
        elif cmd == "boardsize" and len(args) == 1:
            self.handle_boardsize(args[0])
        elif cmd == "play" and len(args) == 2:
            self.handle_play(args[0], args[1])
        elif cmd == "showboard":
            self.respond("\n" + str(self.game.board).rstrip("\n"))
        elif cmd == "captures" and len(args) == 1:
            self.handle_captures(args[0])
        elif cmd == "known_command":
            if len(args) == 1:
                if args[0] in self.implemented_commands:
                    self.respond("true")
                else:
                    self.respond("false")
            else:
                self.error("wrong number of arguments")
        elif cmd == "list_commands":
            if len(args) == 0:
                self.respond("\n".join(sorted(list(self.implemented_commands))))
            else:
                self.error("wrong number of arguments")
        elif cmd in self.implemented_commands:
            self.error("wrong number of arguments")
        else:
            self.error("unknown command")
        return True


def log_level_from_env() -> int:
    """Reads ``PYGO_LOG_LEVEL``; unknown names fall back to WARNING."""
    name = os.environ.get("PYGO_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.WARNING
    return level


def main() -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=log_level_from_env(),
        format="# %(name)s: %(message)s",
    )
    engine = GtpEngine()
    while True:
        try:
            line = sys.stdin.readline()
            if not line:
                break
            if not engine.handle_command(line.strip()):
                break
        except EOFError:
            break


if __name__ == "__main__":
    main()
