#!/usr/bin/env python3
"""Session pacing simulation for difficulty calibration.

Plays many seeded sessions with a scripted guesser and reports how many
enemies fall before the player runs out of health.  A random guesser
is the floor; the sweep guesser (never repeats a miss) is the ceiling a
careful human can reach.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path


def _bootstrap_project_path() -> None:
    root = Path(__file__).resolve().parents[1]
    candidate = str(root)
    if candidate not in sys.path:
        sys.path.insert(0, candidate)


_bootstrap_project_path()

from guess_duel.game import LOG_LEVELS
from guess_duel.modules.duel_rules import load_duel_rules
from guess_duel.modules.pacing_sim import STRATEGIES, simulate_session, summarize


def _print_report(label: str, report: dict[str, float]) -> None:
    print(f"\n== {label} ==")
    print(
        "Enemies defeated "
        f"avg {report['defeats_mean']:.2f} | "
        f"median {report['defeats_median']:.0f} | "
        f"p90 {report['defeats_p90']:.0f}"
    )
    print(
        "Final score "
        f"avg {report['score_mean']:.1f} | "
        f"median {report['score_median']:.0f} | "
        f"p90 {report['score_p90']:.0f}"
    )
    print(f"Highest range reached: 1-{report['range_max']:.0f}")
    print(f"Sessions ending in game over: {report['game_over_rate']:.1%}")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run guess-duel pacing simulations.")
    parser.add_argument(
        "--runs",
        type=int,
        default=300,
        help="Number of deterministic seeds to run per strategy (default: 300).",
    )
    parser.add_argument(
        "--max-guesses",
        type=int,
        default=1000,
        help="Guess cap per session (default: 1000).",
    )
    parser.add_argument(
        "--strategy",
        choices=(*STRATEGIES, "all"),
        default="all",
        help="Guessing strategy to simulate (default: all).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level for game events (default: WARNING).",
    )
    return parser.parse_args(argv)


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level)
    if args.runs < 1:
        raise SystemExit("--runs must be >= 1")
    if args.max_guesses < 1:
        raise SystemExit("--max-guesses must be >= 1")

    rules = load_duel_rules()
    strategies = STRATEGIES if args.strategy == "all" else (args.strategy,)

    print(
        "Guess duel pacing simulation.\n"
        f"Runs per strategy: {args.runs} | guess cap: {args.max_guesses} | "
        f"{rules.hits_to_defeat} hits to defeat, {rules.misses_to_lose} misses to lose"
    )
    for strategy in strategies:
        samples = [
            simulate_session(
                seed,
                strategy=strategy,
                max_guesses=args.max_guesses,
                rules=rules,
            )
            for seed in range(args.runs)
        ]
        _print_report(f"{strategy.title()} Guessing", summarize(samples))


if __name__ == "__main__":
    main()
