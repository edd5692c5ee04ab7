"""Score totals and game history for a playing session."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from .ai import Difficulty
from .game import Mark, O, X

RESULT_WIN = "win"
RESULT_LOSS = "loss"
RESULT_DRAW = "draw"


class GameMode(Enum):
    TWO_PLAYER = "two-player"
    VS_COMPUTER = "vs-computer"

    @property
    def label(self) -> str:
        return "Two Player" if self is GameMode.TWO_PLAYER else "vs Computer"

    @classmethod
    def parse(cls, value: str) -> "GameMode":
        key = value.strip().lower()
        for mode in cls:
            if key in (mode.value, mode.label.lower()):
                return mode
        raise ValueError(f"unknown game mode {value!r}")


@dataclass
class Score:
    player1: int = 0
    player2: int = 0
    computer: int = 0
    draws: int = 0

    @property
    def total(self) -> int:
        return self.player1 + self.player2 + self.computer + self.draws

    def percentage(self, name: str) -> int:
        """Share of ``name`` ("player1", "player2", "computer", "draws") in whole percent."""

        if name not in ("player1", "player2", "computer", "draws"):
            raise ValueError(f"unknown score field {name!r}")
        total = self.total
        if not total:
            return 0
        # Rounds halves up.
        return int(getattr(self, name) * 100 / total + 0.5)


@dataclass(frozen=True)
class HistoryEntry:
    date: datetime
    mode: GameMode
    difficulty: Optional[Difficulty]
    result: str
    winner: str

    def describe(self) -> str:
        difficulty = self.difficulty.label if self.difficulty is not None else "-"
        return (
            f"{self.date:%Y-%m-%d %H:%M}  {self.mode.label:<11}  {difficulty:<10}  "
            f"{self.result.capitalize():<5}  {self.winner}"
        )


@dataclass
class Scoreboard:
    score: Score = field(default_factory=Score)
    history: List[HistoryEntry] = field(default_factory=list)

    def record(
        self,
        winner: Optional[Mark],
        mode: GameMode,
        difficulty: Difficulty,
        when: Optional[datetime] = None,
    ) -> HistoryEntry:
        """Count a finished game and append it to the history.

        ``winner`` is the winning mark or ``None`` for a draw.  The difficulty
        is only kept for games against the computer.
        """

        when = when or datetime.now()
        vs_computer = mode is GameMode.VS_COMPUTER
        kept_difficulty = difficulty if vs_computer else None

        if winner == X:
            self.score.player1 += 1
            result, label = RESULT_WIN, "Player 1"
        elif winner == O and not vs_computer:
            self.score.player2 += 1
            result, label = RESULT_WIN, "Player 2"
        elif winner == O:
            self.score.computer += 1
            result, label = RESULT_LOSS, f"Computer ({difficulty.label})"
        else:
            self.score.draws += 1
            result, label = RESULT_DRAW, "None (Draw)"

        entry = HistoryEntry(
            date=when,
            mode=mode,
            difficulty=kept_difficulty,
            result=result,
            winner=label,
        )
        self.history.append(entry)
        return entry

    def recent(self) -> List[HistoryEntry]:
        return list(reversed(self.history))

    def reset(self) -> None:
        self.score = Score()
        self.history = []


__all__ = [
    "GameMode",
    "HistoryEntry",
    "RESULT_DRAW",
    "RESULT_LOSS",
    "RESULT_WIN",
    "Score",
    "Scoreboard",
]
