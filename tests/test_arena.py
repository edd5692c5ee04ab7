from __future__ import annotations

import pytest

from tictactoe.ai import ComputerOpponent, Difficulty
from tictactoe.arena import Arena, ArenaResult, main, play_game
from tictactoe.game import O, X


def test_arena_result_rates() -> None:
    assert ArenaResult(0, 0, 0).win_rate == 0.0
    result = ArenaResult(wins=3, losses=1, draws=4)
    assert result.total == 8
    assert result.win_rate == pytest.approx(0.375)


@pytest.mark.parametrize("seed", range(5))
def test_high_never_loses_when_opening(seed) -> None:
    result = play_game(
        ComputerOpponent(X, Difficulty.HIGH, seed=seed),
        ComputerOpponent(O, Difficulty.HIGH, seed=seed + 100),
    )
    assert result.is_over
    assert result.mark != O


def test_play_game_between_random_players_finishes() -> None:
    result = play_game(
        ComputerOpponent(X, Difficulty.LOW, seed=1),
        ComputerOpponent(O, Difficulty.LOW, seed=2),
    )
    assert result.is_over


def test_matches_add_up() -> None:
    arena = Arena(challenger=Difficulty.MEDIUM, baseline=Difficulty.LOW, seed=3)
    results = arena.play_matches(num_games=10)
    assert results.total == 10


def test_matches_are_reproducible_with_seed() -> None:
    first = Arena(Difficulty.LOW, Difficulty.LOW, seed=11).play_matches(12)
    second = Arena(Difficulty.LOW, Difficulty.LOW, seed=11).play_matches(12)
    assert first == second


def test_cli_prints_totals(capsys) -> None:
    main(["--challenger", "impossible", "--baseline", "easy", "--games", "4", "--seed", "3"])
    out = capsys.readouterr().out
    assert "Impossible vs Easy over 4 games" in out
    assert "win_rate=" in out


def test_cli_show_single_game(capsys) -> None:
    main(["--challenger", "high", "--baseline", "high", "--seed", "5", "--show"])
    out = capsys.readouterr().out
    assert out.strip().splitlines()[-1] in ("Winner: X", "Winner: draw")
