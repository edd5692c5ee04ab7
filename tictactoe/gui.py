"""Tkinter-based graphical client for Tic-Tac-Toe."""
from __future__ import annotations

import logging
from typing import Optional

import tkinter as tk
from tkinter import ttk

from .ai import Difficulty
from .game import BOARD_CELLS, O, X
from .scoreboard import GameMode
from .session import GameSession, InvalidMoveError, SessionConfig

logger = logging.getLogger(__name__)


class TicTacToeApp:
    BOARD_SIZE = 360
    PADDING = 20
    CELL_SIZE = BOARD_SIZE / 3

    def __init__(self, session: Optional[GameSession] = None) -> None:
        self.root = tk.Tk()
        self.root.title("Tic Tac Toe")
        self.root.resizable(False, False)

        self.session = session or GameSession(SessionConfig())
        self.mode = tk.StringVar(value=self.session.mode.label)
        self.difficulty = tk.StringVar(value=self.session.difficulty.label)
        self.status_var = tk.StringVar()
        self.score_var = tk.StringVar()

        self.invalid_move: Optional[int] = None
        self._invalid_job: Optional[str] = None
        self._computer_job: Optional[str] = None
        self._build_widgets()
        self.refresh()

    def _build_widgets(self) -> None:
        notebook = ttk.Notebook(self.root)
        notebook.pack(fill=tk.BOTH, expand=True)

        game_tab = ttk.Frame(notebook, padding=10)
        scores_tab = ttk.Frame(notebook, padding=10)
        notebook.add(game_tab, text="Game")
        notebook.add(scores_tab, text="High Scores")

        control_frame = ttk.Frame(game_tab)
        control_frame.pack(side=tk.TOP, fill=tk.X)

        ttk.Label(control_frame, text="Mode:").pack(side=tk.LEFT)
        ttk.OptionMenu(
            control_frame,
            self.mode,
            self.mode.get(),
            *(mode.label for mode in GameMode),
            command=lambda value: self.change_mode(GameMode.parse(value)),
        ).pack(side=tk.LEFT, padx=5)

        ttk.Label(control_frame, text="Difficulty:").pack(side=tk.LEFT)
        self.difficulty_menu = ttk.OptionMenu(
            control_frame,
            self.difficulty,
            self.difficulty.get(),
            *(difficulty.label for difficulty in Difficulty),
            command=lambda value: self.change_difficulty(Difficulty.parse(value)),
        )
        self.difficulty_menu.pack(side=tk.LEFT, padx=5)

        ttk.Button(control_frame, text="Reset Game", command=self.start_new_game).pack(
            side=tk.LEFT, padx=10
        )

        canvas_size = self.BOARD_SIZE + 2 * self.PADDING
        self.canvas = tk.Canvas(
            game_tab,
            width=canvas_size,
            height=canvas_size,
            background="#f8f8f8",
        )
        self.canvas.pack(padx=10, pady=10)
        self.canvas.bind("<Button-1>", self.on_click)

        ttk.Label(game_tab, textvariable=self.status_var).pack(side=tk.TOP)
        ttk.Label(game_tab, textvariable=self.score_var).pack(side=tk.TOP, pady=5)

        header = ttk.Frame(scores_tab)
        header.pack(side=tk.TOP, fill=tk.X)
        ttk.Label(header, text="High Scores").pack(side=tk.LEFT)
        ttk.Button(header, text="Reset Scores", command=self.reset_scores).pack(side=tk.RIGHT)

        self.stats_var = tk.StringVar()
        ttk.Label(scores_tab, textvariable=self.stats_var, justify=tk.LEFT).pack(
            side=tk.TOP, anchor=tk.W, pady=10
        )
        self.history_list = tk.Listbox(scores_tab, width=70, height=12, font="TkFixedFont")
        self.history_list.pack(side=tk.TOP, fill=tk.BOTH, expand=True)

    def start_new_game(self) -> None:
        self._cancel_jobs()
        self.session.reset()
        self.refresh()

    def change_mode(self, mode: GameMode) -> None:
        self._cancel_jobs()
        self.session.set_mode(mode)
        self.refresh()

    def change_difficulty(self, difficulty: Difficulty) -> None:
        self._cancel_jobs()
        self.session.set_difficulty(difficulty)
        self.refresh()

    def reset_scores(self) -> None:
        self.session.reset_scores()
        self.refresh()

    def on_click(self, event: tk.Event) -> None:
        if self.session.game_over or self.session.awaiting_computer:
            return
        index = self._point_to_cell(event.x, event.y)
        if index is None:
            return

        try:
            self.session.play(index)
        except InvalidMoveError as exc:
            logger.debug("Rejected click: %s", exc)
            self.show_invalid_feedback(index)
            return

        self.refresh()
        if self.session.awaiting_computer:
            self._computer_job = self.root.after(
                self.session.config.computer_delay_ms, self.perform_computer_move
            )

    def perform_computer_move(self) -> None:
        self._computer_job = None
        self.session.computer_move()
        self.refresh()

    def show_invalid_feedback(self, index: int) -> None:
        self.invalid_move = index
        self.draw_board()
        if self._invalid_job is not None:
            self.root.after_cancel(self._invalid_job)
        self._invalid_job = self.root.after(800, self.clear_invalid_feedback)

    def clear_invalid_feedback(self) -> None:
        self.invalid_move = None
        self._invalid_job = None
        self.draw_board()

    def _cancel_jobs(self) -> None:
        for job in (self._computer_job, self._invalid_job):
            if job is not None:
                self.root.after_cancel(job)
        self._computer_job = None
        self._invalid_job = None
        self.invalid_move = None

    def refresh(self) -> None:
        # Difficulty only matters against the computer.
        state = "normal" if self.session.uses_difficulty else "disabled"
        self.difficulty_menu.configure(state=state)
        self.draw_board()
        self.update_status()
        self.update_scores()

    def _player_name(self, mark: str) -> str:
        if mark == X:
            return "Player 1 (X)"
        if self.session.mode is GameMode.TWO_PLAYER:
            return "Player 2 (O)"
        return "Computer (O)"

    def update_status(self) -> None:
        session = self.session
        if session.game_over:
            if session.winner is None:
                self.status_var.set("It's a draw!")
            elif session.winner == O and session.mode is GameMode.VS_COMPUTER:
                self.status_var.set(f"Computer ({session.difficulty.label}) wins!")
            else:
                self.status_var.set(f"{self._player_name(session.winner)} wins!")
            return
        self.status_var.set(f"Current Player: {self._player_name(session.current_player)}")

    def update_scores(self) -> None:
        score = self.session.scoreboard.score
        second = score.player2 if self.session.mode is GameMode.TWO_PLAYER else score.computer
        self.score_var.set(
            f"Player 1: {score.player1}   {self._player_name(O)}: {second}   Draws: {score.draws}"
        )
        self.stats_var.set(
            "\n".join(
                [
                    f"Total Games: {score.total}",
                    f"Player 1 (X) Wins: {score.player1} ({score.percentage('player1')}%)",
                    f"Player 2 (O) Wins: {score.player2} ({score.percentage('player2')}%)",
                    f"Computer Wins: {score.computer} ({score.percentage('computer')}%)",
                    f"Draws: {score.draws} ({score.percentage('draws')}%)",
                ]
            )
        )
        self.history_list.delete(0, tk.END)
        entries = self.session.scoreboard.recent()
        if not entries:
            self.history_list.insert(tk.END, "No games played yet. Start playing to record your history!")
        for entry in entries:
            self.history_list.insert(tk.END, entry.describe())

    def draw_board(self) -> None:
        self.canvas.delete("all")
        margin = self.PADDING
        cell = self.CELL_SIZE
        winning = set(self.session.winning_line or ())

        for index in range(BOARD_CELLS):
            x0, y0, x1, y1 = self._cell_bbox(index)
            fill = "#dcf5dc" if index in winning else "#ffffff"
            self.canvas.create_rectangle(x0, y0, x1, y1, fill=fill, outline="")

            value = self.session.board[index]
            cx = (x0 + x1) / 2
            cy = (y0 + y1) / 2
            if value == X:
                offset = cell * 0.3
                self.canvas.create_line(
                    cx - offset, cy - offset, cx + offset, cy + offset, width=4, fill="#1a4b8c"
                )
                self.canvas.create_line(
                    cx - offset, cy + offset, cx + offset, cy - offset, width=4, fill="#1a4b8c"
                )
            elif value == O:
                radius = cell * 0.32
                self.canvas.create_oval(
                    cx - radius, cy - radius, cx + radius, cy + radius, width=4, outline="#b53d00"
                )

        # Grid lines
        for i in range(1, 3):
            start = margin + i * cell
            self.canvas.create_line(
                margin, start, margin + self.BOARD_SIZE, start, width=3, fill="#444444"
            )
            self.canvas.create_line(
                start, margin, start, margin + self.BOARD_SIZE, width=3, fill="#444444"
            )

        if self.invalid_move is not None:
            x0, y0, x1, y1 = self._cell_bbox(self.invalid_move)
            self.canvas.create_rectangle(x0, y0, x1, y1, outline="#d32f2f", width=3)

    def _point_to_cell(self, x: float, y: float) -> Optional[int]:
        rel_x = x - self.PADDING
        rel_y = y - self.PADDING
        if rel_x < 0 or rel_y < 0 or rel_x >= self.BOARD_SIZE or rel_y >= self.BOARD_SIZE:
            return None
        return int(rel_y // self.CELL_SIZE) * 3 + int(rel_x // self.CELL_SIZE)

    def _cell_bbox(self, index: int) -> tuple[float, float, float, float]:
        row, col = divmod(index, 3)
        x0 = self.PADDING + col * self.CELL_SIZE
        y0 = self.PADDING + row * self.CELL_SIZE
        return x0, y0, x0 + self.CELL_SIZE, y0 + self.CELL_SIZE

    def run(self) -> None:
        self.root.mainloop()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    app = TicTacToeApp()
    app.run()


if __name__ == "__main__":
    main()
