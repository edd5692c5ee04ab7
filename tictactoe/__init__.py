"""Tic-Tac-Toe rule engine, minimax computer opponent and game session."""
from .ai import NO_MOVE, ComputerOpponent, Difficulty, best_move, minimax, select_move
from .arena import Arena, ArenaResult, play_game
from .game import GameResult, InvalidBoardError, Outcome, ensure_board, evaluate, new_board
from .scoreboard import GameMode, HistoryEntry, Score, Scoreboard
from .session import GameSession, InvalidMoveError, SessionConfig

__version__ = "1.0.0"

__all__ = [
    "NO_MOVE",
    "Arena",
    "ArenaResult",
    "ComputerOpponent",
    "Difficulty",
    "GameMode",
    "GameResult",
    "GameSession",
    "HistoryEntry",
    "InvalidBoardError",
    "InvalidMoveError",
    "Outcome",
    "Score",
    "Scoreboard",
    "SessionConfig",
    "best_move",
    "ensure_board",
    "evaluate",
    "minimax",
    "new_board",
    "play_game",
    "select_move",
]
