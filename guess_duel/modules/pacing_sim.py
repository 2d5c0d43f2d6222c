"""Scripted-session simulation for difficulty pacing.

Plays whole duels with a fixed guessing strategy so rule tweaks in
``rules/duel_rules.json`` can be checked for how far a session gets
before the player runs out of health.
"""

from __future__ import annotations

import random
import statistics
from dataclasses import dataclass

from guess_duel.modules.duel_rules import DuelRules, load_duel_rules
from guess_duel.modules.game_controller import GameController

STRATEGIES: tuple[str, ...] = ("random", "sweep")


@dataclass(frozen=True)
class SessionSample:
    guesses: int
    hits: int
    misses: int
    enemies_defeated: int
    final_range: int
    final_score: int
    game_over: bool


class _SweepGuesser:
    # Walks 1..range, never repeating a miss against the same target and
    # repeating a hit until the target is re-rolled.
    def __init__(self) -> None:
        self.candidate = 1
        self.known_target: int | None = None

    def next_guess(self, enemy_range: int) -> int:
        if self.known_target is not None:
            return self.known_target
        return min(self.candidate, enemy_range)

    def record(self, guess: int, *, hit: bool, enemy_defeated: bool) -> None:
        if enemy_defeated:
            self.candidate = 1
            self.known_target = None
        elif hit:
            self.known_target = guess
        else:
            self.candidate = guess + 1


def simulate_session(
    seed: int,
    *,
    strategy: str = "random",
    max_guesses: int = 1000,
    rules: DuelRules | None = None,
) -> SessionSample:
    """Play one session until game over or *max_guesses* accepted guesses."""
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy '{strategy}'. Choose from: {', '.join(STRATEGIES)}.")
    if max_guesses < 1:
        raise ValueError("max_guesses must be >= 1.")

    game_rng = random.Random(seed)
    guess_rng = random.Random(seed + 1)
    controller = GameController(rules=rules or load_duel_rules(), rng=game_rng)
    sweeper = _SweepGuesser()

    guesses = hits = misses = defeats = 0
    while guesses < max_guesses and not controller.is_game_over:
        enemy_range = controller.state.session.enemy_range
        if strategy == "random":
            guess = guess_rng.randint(1, enemy_range)
        else:
            guess = sweeper.next_guess(enemy_range)

        outcome = controller.submit_guess(str(guess))
        guesses += 1
        if outcome.hit:
            hits += 1
        else:
            misses += 1
        if outcome.enemy_defeated:
            defeats += 1
        sweeper.record(guess, hit=outcome.hit, enemy_defeated=outcome.enemy_defeated)

    snapshot = controller.get_snapshot()
    return SessionSample(
        guesses=guesses,
        hits=hits,
        misses=misses,
        enemies_defeated=defeats,
        final_range=snapshot.range,
        final_score=snapshot.score,
        game_over=controller.is_game_over,
    )


def _percentile(values: list[float], p: float) -> float:
    if not values:
        return 0.0
    idx = int((len(values) - 1) * p)
    return sorted(values)[idx]


def summarize(samples: list[SessionSample]) -> dict[str, float]:
    """Mean/median/p90 of defeats and final score across *samples*."""
    if not samples:
        raise ValueError("At least one sample is required.")
    defeats = [float(sample.enemies_defeated) for sample in samples]
    scores = [float(sample.final_score) for sample in samples]
    ranges = [float(sample.final_range) for sample in samples]
    return {
        "sessions": float(len(samples)),
        "defeats_mean": statistics.mean(defeats),
        "defeats_median": statistics.median(defeats),
        "defeats_p90": _percentile(defeats, 0.9),
        "score_mean": statistics.mean(scores),
        "score_median": statistics.median(scores),
        "score_p90": _percentile(scores, 0.9),
        "range_max": max(ranges),
        "game_over_rate": sum(1 for sample in samples if sample.game_over) / len(samples),
    }
