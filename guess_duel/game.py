from __future__ import annotations

import argparse
import logging
import random

from guess_duel.models import GameSnapshot, GuessOutcome
from guess_duel.modules.game_controller import GameController

RESET_COMMANDS = {"r", "reset"}
QUIT_COMMANDS = {"q", "quit", "exit"}
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _health_bar(health: float, max_health: float, width: int = 20) -> str:
    filled = 0 if max_health <= 0 else int(round(width * health / max_health))
    return "#" * filled + "-" * (width - filled)


def _render_status(snapshot: GameSnapshot, max_health: float) -> None:
    print(
        f"You   [{_health_bar(snapshot.player_health, max_health)}] {snapshot.player_health:.0f} HP"
    )
    print(
        f"Enemy [{_health_bar(snapshot.enemy_health, max_health)}] {snapshot.enemy_health:.0f} HP"
    )
    print(
        f"Current range: 1-{snapshot.range} | "
        f"Score: {snapshot.score} | High: {snapshot.high_score}"
    )


def _print_events(outcome: GuessOutcome) -> None:
    for event in outcome.events:
        print(event)


def _play(controller: GameController) -> None:
    max_health = float(controller.rules.max_health)
    print(f"New game! Range: 1-{controller.state.session.enemy_range}")

    while True:
        print()
        _render_status(controller.get_snapshot(), max_health)
        prompt = "Game over. Type r to reset or q to quit: " if controller.is_game_over else "Your guess: "
        try:
            raw = input(prompt).strip()
        except EOFError:
            print()
            return

        command = raw.lower()
        if command in QUIT_COMMANDS:
            print("Goodbye.")
            return
        if command in RESET_COMMANDS:
            snapshot = controller.reset_game()
            for event in snapshot.events:
                print(event)
            continue

        _print_events(controller.submit_guess(raw))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play the number-guessing duel in the terminal.")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for target generation (default: random).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level for game events (default: WARNING).",
    )
    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level)
    print("\n=== Guess Duel ===")
    print("Guess the enemy's number. Hits deal damage, misses hurt you.")
    print("Type r to reset, q to quit.")
    _play(GameController(rng=random.Random(args.seed)))


if __name__ == "__main__":
    run()
