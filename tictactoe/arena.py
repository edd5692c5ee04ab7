"""Evaluation arena comparing two computer difficulty tiers over many games."""
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional

from .ai import NO_MOVE, ComputerOpponent, Difficulty
from .game import O, X, GameResult, active_mark, evaluate, new_board, place, render_ascii

__all__ = ["Arena", "ArenaResult", "play_game", "main"]


@dataclass
class ArenaResult:
    wins: int
    losses: int
    draws: int

    @property
    def total(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def win_rate(self) -> float:
        return self.wins / self.total if self.total else 0.0


def play_game(x_player: ComputerOpponent, o_player: ComputerOpponent, verbose: bool = False) -> GameResult:
    """Play one game from the empty board and return its final result."""

    players = {X: x_player, O: o_player}
    board = new_board()
    result = evaluate(board)
    while not result.is_over:
        mover = active_mark(board)
        move = players[mover].choose(board)
        if move == NO_MOVE:
            break
        board = place(board, move, mover)
        result = evaluate(board)
        if verbose:
            print(f"{mover} -> {move}\n{render_ascii(board)}\n")
    return result


@dataclass
class Arena:
    challenger: Difficulty
    baseline: Difficulty
    seed: Optional[int] = None

    def play_matches(self, num_games: int = 100) -> ArenaResult:
        """Play ``num_games`` games, alternating which side opens."""

        results = ArenaResult(wins=0, losses=0, draws=0)
        base_seed = self.seed

        for game_index in range(num_games):
            challenger_first = game_index % 2 == 0
            challenger_mark = X if challenger_first else O
            baseline_mark = O if challenger_first else X
            challenger = ComputerOpponent(challenger_mark, self.challenger, seed=_derive_seed(base_seed, 2 * game_index))
            baseline = ComputerOpponent(baseline_mark, self.baseline, seed=_derive_seed(base_seed, 2 * game_index + 1))

            if challenger_first:
                outcome = play_game(challenger, baseline)
            else:
                outcome = play_game(baseline, challenger)

            if outcome.mark == challenger_mark:
                results.wins += 1
            elif outcome.mark == baseline_mark:
                results.losses += 1
            else:
                results.draws += 1

        return results


def _derive_seed(seed: Optional[int], offset: int) -> Optional[int]:
    return None if seed is None else seed + offset


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play computer opponents against each other")
    parser.add_argument("--challenger", type=Difficulty.parse, default=Difficulty.HIGH, help="Difficulty of the challenger")
    parser.add_argument("--baseline", type=Difficulty.parse, default=Difficulty.LOW, help="Difficulty of the baseline")
    parser.add_argument("--games", type=int, default=100, help="Number of games to play")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--show", action="store_true", help="Print the board after every move of a single game")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    if args.show:
        result = play_game(
            ComputerOpponent(X, args.challenger, seed=args.seed),
            ComputerOpponent(O, args.baseline, seed=_derive_seed(args.seed, 1)),
            verbose=True,
        )
        print(f"Winner: {result.mark or 'draw'}")
        return

    arena = Arena(challenger=args.challenger, baseline=args.baseline, seed=args.seed)
    results = arena.play_matches(args.games)
    print(
        f"{args.challenger.label} vs {args.baseline.label} over {results.total} games: "
        f"wins={results.wins} losses={results.losses} draws={results.draws} "
        f"win_rate={results.win_rate:.2%}"
    )


if __name__ == "__main__":
    main()
