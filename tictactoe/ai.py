"""Computer opponent: exhaustive minimax plus difficulty-tiered move choice."""
from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Optional

import numpy as np

from .game import O, Board, Mark, Outcome, empty_cells, evaluate, place
from .utils import make_rng, opponent, uniform_choice

NO_MOVE = -1
WIN_SCORE = 10
OPENING_MOVES = (0, 2, 4, 6, 8)
# Number of empty cells at or above which the opening pool is used.
OPENING_THRESHOLD = 8
MEDIUM_OPTIMAL_PROBABILITY = 0.7


class Difficulty(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def label(self) -> str:
        return _DIFFICULTY_LABELS[self]

    @classmethod
    def parse(cls, value: str) -> "Difficulty":
        """Accept either the enum value (``"high"``) or its label (``"Impossible"``)."""

        key = value.strip().lower()
        for difficulty in cls:
            if key in (difficulty.value, difficulty.label.lower()):
                return difficulty
        raise ValueError(f"unknown difficulty {value!r}")


_DIFFICULTY_LABELS = {
    Difficulty.LOW: "Easy",
    Difficulty.MEDIUM: "Hard",
    Difficulty.HIGH: "Impossible",
}


def minimax(board: Board, mark: Mark, depth: int, maximizing: bool) -> int:
    """Score ``board`` for ``mark`` assuming perfect play from both sides.

    Wins score ``10 - depth`` and losses ``depth - 10`` so that quicker wins
    and slower defeats are preferred.  The search runs on a tuple snapshot
    of ``board``, so every branch works on its own copy and results can be
    memoised safely.
    """

    return _minimax(tuple(board), mark, depth, maximizing)


@lru_cache(maxsize=None)
def _minimax(board: Board, mark: Mark, depth: int, maximizing: bool) -> int:
    result = evaluate(board)
    if result.outcome is Outcome.WON:
        if result.mark == mark:
            return WIN_SCORE - depth
        return depth - WIN_SCORE
    if result.outcome is Outcome.DRAW:
        return 0

    to_play = mark if maximizing else opponent(mark)
    scores = (
        _minimax(place(board, index, to_play), mark, depth + 1, not maximizing)
        for index in empty_cells(board)
    )
    return max(scores) if maximizing else min(scores)


def best_move(board: Board, mark: Mark) -> int:
    """Return the minimax-optimal cell for ``mark``.

    Cells are tried in ascending order and only a strictly better score
    replaces the current choice, so ties go to the lowest index.
    """

    board = tuple(board)
    best_score = -float("inf")
    best = NO_MOVE
    for index in empty_cells(board):
        score = _minimax(place(board, index, mark), mark, 0, False)
        if score > best_score:
            best_score = score
            best = index
    return best


def random_move(board: Board, rng: np.random.Generator) -> int:
    moves = empty_cells(board)
    if not moves:
        return NO_MOVE
    return uniform_choice(rng, moves)


def select_move(
    board: Board,
    mark: Mark,
    difficulty: Difficulty,
    rng: Optional[np.random.Generator] = None,
) -> int:
    """Choose the cell the computer plays as ``mark`` on ``board``.

    Returns ``NO_MOVE`` when the board is full.  On its first move the
    computer picks a random corner or the centre regardless of difficulty.
    """

    board = tuple(board)
    moves = empty_cells(board)
    if not moves:
        return NO_MOVE
    if len(moves) == 1:
        return moves[0]

    rng = rng or np.random.default_rng()

    if len(moves) >= OPENING_THRESHOLD:
        openings = [move for move in OPENING_MOVES if move in moves]
        return uniform_choice(rng, openings)

    if difficulty is Difficulty.HIGH:
        return best_move(board, mark)
    if difficulty is Difficulty.MEDIUM:
        if rng.random() < MEDIUM_OPTIMAL_PROBABILITY:
            return best_move(board, mark)
        return random_move(board, rng)
    return random_move(board, rng)


class ComputerOpponent:
    """A computer player bound to a mark, a difficulty and its own generator."""

    def __init__(
        self,
        mark: Mark = O,
        difficulty: Difficulty = Difficulty.LOW,
        seed: Optional[int] = None,
    ) -> None:
        self.mark = mark
        self.difficulty = difficulty
        self.rng = make_rng(seed)

    def set_difficulty(self, difficulty: Difficulty) -> None:
        self.difficulty = difficulty

    def choose(self, board: Board) -> int:
        return select_move(board, self.mark, self.difficulty, self.rng)


__all__ = [
    "ComputerOpponent",
    "Difficulty",
    "MEDIUM_OPTIMAL_PROBABILITY",
    "NO_MOVE",
    "OPENING_MOVES",
    "best_move",
    "minimax",
    "random_move",
    "select_move",
]
