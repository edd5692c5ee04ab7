from __future__ import annotations

import logging

import pytest

from tictactoe.ai import NO_MOVE, OPENING_MOVES, Difficulty
from tictactoe.game import EMPTY, O, X, ensure_board
from tictactoe.scoreboard import RESULT_LOSS, RESULT_WIN, GameMode
from tictactoe.session import GameSession, InvalidMoveError, SessionConfig


def play_all(session: GameSession, moves) -> None:
    for index in moves:
        session.play(index)


def vs_computer(difficulty: Difficulty = Difficulty.HIGH, seed: int = 1) -> GameSession:
    return GameSession(SessionConfig(mode=GameMode.VS_COMPUTER, difficulty=difficulty, seed=seed))


def test_players_alternate_starting_with_x() -> None:
    session = GameSession()
    assert session.current_player == X
    session.play(4)
    assert session.board[4] == X
    assert session.current_player == O
    session.play(0)
    assert session.board[0] == O
    assert session.current_player == X


def test_occupied_cell_is_rejected() -> None:
    session = GameSession()
    session.play(4)
    with pytest.raises(InvalidMoveError):
        session.play(4)
    assert session.current_player == O


@pytest.mark.parametrize("index", [-1, 9, 42])
def test_out_of_range_cell_is_rejected(index) -> None:
    with pytest.raises(InvalidMoveError):
        GameSession().play(index)


def test_two_player_win_is_recorded() -> None:
    session = GameSession()
    play_all(session, [0, 3, 1, 4, 2])

    assert session.game_over
    assert session.winner == X
    assert session.winning_line == (0, 1, 2)
    assert session.scoreboard.score.player1 == 1
    entry = session.scoreboard.history[-1]
    assert entry.result == RESULT_WIN
    assert entry.winner == "Player 1"
    assert entry.difficulty is None

    with pytest.raises(InvalidMoveError):
        session.play(8)
    assert len(session.scoreboard.history) == 1


def test_player_two_win_counts_for_player_two() -> None:
    session = GameSession()
    play_all(session, [0, 3, 1, 4, 8, 5])
    assert session.winner == O
    assert session.scoreboard.score.player2 == 1
    assert session.scoreboard.history[-1].winner == "Player 2"


def test_draw_is_recorded() -> None:
    session = GameSession()
    play_all(session, [0, 1, 2, 4, 3, 5, 7, 6, 8])
    assert session.game_over
    assert session.winner is None
    assert session.winning_line is None
    assert session.scoreboard.score.draws == 1


def test_reset_starts_a_fresh_game_and_keeps_scores() -> None:
    session = GameSession()
    play_all(session, [0, 3, 1, 4, 2])
    session.reset()
    assert session.board == (EMPTY,) * 9
    assert session.current_player == X
    assert not session.game_over
    assert session.scoreboard.score.player1 == 1


def test_computer_answers_human_move() -> None:
    session = vs_computer()
    assert not session.awaiting_computer
    session.play(0)
    assert session.awaiting_computer

    with pytest.raises(InvalidMoveError):
        session.play(1)

    index = session.computer_move()
    assert index in set(OPENING_MOVES) - {0}
    assert session.board[index] == O
    assert session.current_player == X
    assert not session.awaiting_computer


def test_computer_move_out_of_turn_does_nothing() -> None:
    session = vs_computer()
    assert session.computer_move() == NO_MOVE
    assert session.board == (EMPTY,) * 9

    two_player = GameSession()
    two_player.play(4)
    assert two_player.computer_move() == NO_MOVE


def test_computer_win_is_recorded_as_loss() -> None:
    session = vs_computer(Difficulty.HIGH)
    session.board = ensure_board(["X", "X", None, "O", "O", None, "X", None, None])
    session.current_player = O

    assert session.computer_move() == 5
    assert session.game_over
    assert session.winner == O
    assert session.winning_line == (3, 4, 5)
    assert session.scoreboard.score.computer == 1
    entry = session.scoreboard.history[-1]
    assert entry.result == RESULT_LOSS
    assert entry.winner == "Computer (Impossible)"
    assert entry.difficulty is Difficulty.HIGH


def test_full_game_against_computer_finishes() -> None:
    session = vs_computer(Difficulty.MEDIUM, seed=7)
    while not session.game_over:
        if session.awaiting_computer:
            session.computer_move()
        else:
            session.play(session.board.index(EMPTY))
    assert session.scoreboard.score.total == 1
    assert len(session.scoreboard.history) == 1


def test_changing_difficulty_resets_board() -> None:
    session = vs_computer(Difficulty.LOW)
    session.play(4)
    session.set_difficulty(Difficulty.HIGH)
    assert session.difficulty is Difficulty.HIGH
    assert session.computer.difficulty is Difficulty.HIGH
    assert session.board == (EMPTY,) * 9
    assert session.current_player == X


def test_changing_mode_resets_board() -> None:
    session = GameSession()
    session.play(4)
    session.set_mode(GameMode.VS_COMPUTER)
    assert session.mode is GameMode.VS_COMPUTER
    assert session.board == (EMPTY,) * 9


def test_reset_scores_clears_history() -> None:
    session = GameSession()
    play_all(session, [0, 3, 1, 4, 2])
    session.reset_scores()
    assert session.scoreboard.score.total == 0
    assert session.scoreboard.history == []


def test_game_over_is_logged(caplog) -> None:
    session = GameSession()
    with caplog.at_level(logging.INFO, logger="tictactoe.session"):
        play_all(session, [0, 3, 1, 4, 2])
    assert "Player 1 wins" in caplog.text


def test_sessions_built_from_one_config_are_independent() -> None:
    config = SessionConfig(mode=GameMode.VS_COMPUTER, difficulty=Difficulty.LOW)
    first = GameSession(config)
    second = GameSession(config)
    first.set_difficulty(Difficulty.HIGH)
    first.set_mode(GameMode.TWO_PLAYER)
    assert first.difficulty is Difficulty.HIGH
    assert second.difficulty is Difficulty.LOW
    assert second.computer.difficulty is Difficulty.LOW
    assert second.mode is GameMode.VS_COMPUTER
    assert config.difficulty is Difficulty.LOW
    assert config.mode is GameMode.VS_COMPUTER


def test_difficulty_only_applies_against_the_computer() -> None:
    session = GameSession()
    assert not session.uses_difficulty
    session.set_mode(GameMode.VS_COMPUTER)
    assert session.uses_difficulty
    session.set_mode(GameMode.TWO_PLAYER)
    assert not session.uses_difficulty
