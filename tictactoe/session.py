"""Game session controller tying the rules, the computer and the scoreboard together."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional

from .ai import NO_MOVE, ComputerOpponent, Difficulty
from .game import (
    BOARD_CELLS,
    EMPTY,
    ONGOING,
    Board,
    GameResult,
    Line,
    Mark,
    O,
    X,
    evaluate,
    new_board,
    place,
)
from .scoreboard import GameMode, Scoreboard
from .utils import opponent

logger = logging.getLogger(__name__)


class InvalidMoveError(RuntimeError):
    """Raised when a move is attempted that is not legal in the current state."""


@dataclass
class SessionConfig:
    mode: GameMode = GameMode.TWO_PLAYER
    difficulty: Difficulty = Difficulty.LOW
    # Pause before the computer answers, used by interactive front ends.
    computer_delay_ms: int = 500
    seed: Optional[int] = None


class GameSession:
    """A sequence of games between player 1 (X) and player 2 or the computer (O).

    The session owns the current board and forwards every finished game to
    its scoreboard.  In vs-computer mode the front end calls
    :meth:`computer_move` whenever :attr:`awaiting_computer` is true.
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        scoreboard: Optional[Scoreboard] = None,
    ) -> None:
        self.config = replace(config) if config is not None else SessionConfig()
        self.scoreboard = scoreboard or Scoreboard()
        self.computer = ComputerOpponent(O, self.config.difficulty, seed=self.config.seed)
        self.board: Board = new_board()
        self.current_player: Mark = X
        self.result: GameResult = ONGOING

    @property
    def mode(self) -> GameMode:
        return self.config.mode

    @property
    def difficulty(self) -> Difficulty:
        return self.config.difficulty

    @property
    def uses_difficulty(self) -> bool:
        return self.mode is GameMode.VS_COMPUTER

    @property
    def game_over(self) -> bool:
        return self.result.is_over

    @property
    def winner(self) -> Optional[Mark]:
        return self.result.mark

    @property
    def winning_line(self) -> Optional[Line]:
        return self.result.line

    @property
    def awaiting_computer(self) -> bool:
        return (
            self.mode is GameMode.VS_COMPUTER
            and not self.game_over
            and self.current_player == self.computer.mark
        )

    def play(self, index: int) -> GameResult:
        """Place the current player's mark at ``index`` for a human player."""

        if self.awaiting_computer:
            raise InvalidMoveError("It is the computer's turn")
        self._validate(index)
        return self._apply(index)

    def computer_move(self) -> int:
        """Let the computer play its turn and return the chosen cell.

        Returns ``NO_MOVE`` without touching the board when it is not the
        computer's turn or no cell is left.
        """

        if not self.awaiting_computer:
            return NO_MOVE
        index = self.computer.choose(self.board)
        if index == NO_MOVE:
            return NO_MOVE
        self._apply(index)
        return index

    def reset(self) -> None:
        self.board = new_board()
        self.current_player = X
        self.result = ONGOING
        logger.debug("Board reset (mode=%s, difficulty=%s)", self.mode.value, self.difficulty.value)

    def set_mode(self, mode: GameMode) -> None:
        self.config.mode = mode
        self.reset()

    def set_difficulty(self, difficulty: Difficulty) -> None:
        self.config.difficulty = difficulty
        self.computer.set_difficulty(difficulty)
        self.reset()

    def reset_scores(self) -> None:
        self.scoreboard.reset()

    def _validate(self, index: int) -> None:
        if self.game_over:
            raise InvalidMoveError("Game has already finished")
        if not 0 <= index < BOARD_CELLS:
            raise InvalidMoveError(f"Invalid cell {index}. Must be 0-{BOARD_CELLS - 1}.")
        if self.board[index] != EMPTY:
            raise InvalidMoveError(f"Cell {index} is already occupied by {self.board[index]}")

    def _apply(self, index: int) -> GameResult:
        player = self.current_player
        self.board = place(self.board, index, player)
        logger.debug("%s plays cell %d", player, index)

        result = evaluate(self.board)
        if result.is_over:
            self._finish(result)
        else:
            self.current_player = opponent(player)
        return result

    def _finish(self, result: GameResult) -> None:
        self.result = result
        entry = self.scoreboard.record(result.mark, self.mode, self.difficulty)
        if result.is_draw:
            logger.info("Game drawn (%s)", self.mode.label)
        else:
            logger.info("%s wins on line %s (%s)", entry.winner, result.line, self.mode.label)


__all__ = ["GameSession", "InvalidMoveError", "SessionConfig"]
