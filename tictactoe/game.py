"""Rule engine for classic 3x3 Tic-Tac-Toe.

A board is an immutable tuple of nine cells in row-major order.  Each cell
holds ``"X"``, ``"O"`` or ``" "`` for an empty square.  Every function in this
module is pure: boards are never mutated, new boards are returned instead.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

Mark = str  # Either "X" or "O"
Board = Tuple[str, ...]
Line = Tuple[int, int, int]

X: Mark = "X"
O: Mark = "O"
EMPTY = " "
# Cells counted as empty; callers may use None like ensure_board does.
BLANKS = (EMPTY, None)
BOARD_CELLS = 9

WIN_LINES: Tuple[Line, ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


class InvalidBoardError(ValueError):
    """Raised when a sequence cannot be interpreted as a 3x3 board."""


class Outcome(Enum):
    ONGOING = "ongoing"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameResult:
    """Terminal classification of a board."""

    outcome: Outcome
    mark: Optional[Mark] = None
    line: Optional[Line] = None

    @property
    def is_over(self) -> bool:
        return self.outcome is not Outcome.ONGOING

    @property
    def is_draw(self) -> bool:
        return self.outcome is Outcome.DRAW


ONGOING = GameResult(Outcome.ONGOING)
DRAW = GameResult(Outcome.DRAW)


def new_board() -> Board:
    return (EMPTY,) * BOARD_CELLS


def ensure_board(cells: Iterable[Optional[str]]) -> Board:
    """Convert ``cells`` into a board, treating ``None`` as an empty cell."""

    board = tuple(EMPTY if cell is None else cell for cell in cells)
    if len(board) != BOARD_CELLS:
        raise InvalidBoardError(f"board must have {BOARD_CELLS} cells, got {len(board)}")
    for index, cell in enumerate(board):
        if cell not in (X, O, EMPTY):
            raise InvalidBoardError(f"invalid symbol {cell!r} at index {index}")
    return board


def evaluate(board: Board) -> GameResult:
    """Classify ``board`` as won, drawn or still in progress.

    Lines are checked in ``WIN_LINES`` order and the first complete line wins.
    """

    for line in WIN_LINES:
        a, b, c = line
        if board[a] not in BLANKS and board[a] == board[b] == board[c]:
            return GameResult(Outcome.WON, board[a], line)
    if all(cell not in BLANKS for cell in board):
        return DRAW
    return ONGOING


def empty_cells(board: Board) -> List[int]:
    return [index for index, cell in enumerate(board) if cell in BLANKS]


def place(board: Board, index: int, mark: Mark) -> Board:
    """Return a copy of ``board`` with ``mark`` written at ``index``."""

    return board[:index] + (mark,) + board[index + 1 :]


def active_mark(board: Board) -> Mark:
    x_count = sum(cell == X for cell in board)
    o_count = sum(cell == O for cell in board)
    return X if x_count == o_count else O


def render_ascii(board: Board) -> str:
    def cell_value(idx: int) -> str:
        value = board[idx]
        return value if value not in BLANKS else "."

    rows = [" ".join(cell_value(row * 3 + col) for col in range(3)) for row in range(3)]
    return "\n".join(rows)


__all__ = [
    "BLANKS",
    "BOARD_CELLS",
    "Board",
    "DRAW",
    "EMPTY",
    "GameResult",
    "InvalidBoardError",
    "Line",
    "Mark",
    "O",
    "ONGOING",
    "Outcome",
    "WIN_LINES",
    "X",
    "active_mark",
    "empty_cells",
    "ensure_board",
    "evaluate",
    "new_board",
    "place",
    "render_ascii",
]
