from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from guess_duel.constants import MAX_HEALTH, MIN_HEALTH, STARTING_RANGE
from guess_duel.utils import clamp_float


class GamePhase(StrEnum):
    IDLE = "idle"
    AWAITING_GUESS = "awaiting_guess"
    RESOLVING = "resolving"
    GAME_OVER = "game_over"


def _require_non_negative(amount: float, label: str) -> float:
    value = float(amount)
    if value < 0:
        raise ValueError(f"{label} amount must be >= 0.")
    return value


@dataclass
class Health:
    """Hit points clamped to ``[0, max_health]``."""

    health: float = MAX_HEALTH
    max_health: float = MAX_HEALTH

    def __post_init__(self) -> None:
        self.health = clamp_float(self.health, MIN_HEALTH, self.max_health)

    def take_damage(self, amount: float) -> float:
        damage = _require_non_negative(amount, "Damage")
        self.health = max(MIN_HEALTH, self.health - damage)
        return self.health

    def is_dead(self) -> bool:
        return self.health <= MIN_HEALTH

    def reset(self) -> None:
        self.health = self.max_health

    def to_dict(self) -> dict[str, float]:
        return {"health": self.health, "max_health": self.max_health}


@dataclass
class EnemyHealth(Health):
    """Enemy hit points. Enemies never heal."""


@dataclass
class PlayerHealth(Health):
    """Player hit points; unlike the enemy, the player can be healed."""

    def heal(self, amount: float) -> float:
        restored = _require_non_negative(amount, "Heal")
        self.health = min(self.max_health, self.health + restored)
        return self.health


@dataclass
class SessionData:
    """Range, secret target and scores for the running session.

    ``target`` is drawn from ``rng`` when not given explicitly. The high
    score survives :meth:`reset`.
    """

    enemy_range: int = STARTING_RANGE
    target: int | None = None
    score: int = 0
    high_score: int = 0
    starting_range: int = STARTING_RANGE
    range_step: int = 1
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.starting_range < 2:
            raise ValueError("Starting range must be >= 2.")
        if self.enemy_range < self.starting_range:
            raise ValueError(f"Range must be >= {self.starting_range}.")
        if self.target is None:
            self.generate_target()
        elif not 1 <= self.target <= self.enemy_range:
            raise ValueError(f"Target must be between 1 and {self.enemy_range}.")

    def generate_target(self) -> int:
        self.target = self.rng.randint(1, self.enemy_range)
        return self.target

    def check_guess(self, guess: int) -> bool:
        return guess == self.target

    def increase_range(self) -> int:
        self.enemy_range += self.range_step
        return self.enemy_range

    def add_score(self, points: int) -> int:
        if points < 0:
            raise ValueError("Score points must be >= 0.")
        self.score += points
        if self.score > self.high_score:
            self.high_score = self.score
        return self.score

    def reset(self) -> None:
        self.enemy_range = self.starting_range
        self.score = 0
        self.generate_target()

    def to_dict(self) -> dict[str, Any]:
        return {
            "range": self.enemy_range,
            "score": self.score,
            "high_score": self.high_score,
        }


@dataclass
class DuelState:
    player: PlayerHealth = field(default_factory=PlayerHealth)
    enemy: EnemyHealth = field(default_factory=EnemyHealth)
    session: SessionData = field(default_factory=SessionData)
    phase: GamePhase = GamePhase.IDLE


@dataclass(frozen=True)
class GuessOutcome:
    """View model returned for every submitted guess.

    ``accepted`` is ``False`` for malformed input and for guesses made
    after game over; nothing else in the duel changes in that case.
    """

    accepted: bool
    guess: int | None
    hit: bool
    enemy_defeated: bool
    player_dead: bool
    new_range: int
    score: int
    high_score: int
    player_health: float
    enemy_health: float
    events: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "accepted": self.accepted,
            "guess": self.guess,
            "hit": self.hit,
            "enemy_defeated": self.enemy_defeated,
            "player_dead": self.player_dead,
            "new_range": self.new_range,
            "score": self.score,
            "high_score": self.high_score,
            "player_health": self.player_health,
            "enemy_health": self.enemy_health,
            "events": list(self.events),
        }


@dataclass(frozen=True)
class SessionSnapshot:
    range: int
    events: tuple[str, ...] = ()


@dataclass(frozen=True)
class GameSnapshot:
    player_health: float
    enemy_health: float
    range: int
    score: int
    high_score: int
    phase: GamePhase

    def to_dict(self) -> dict[str, Any]:
        return {
            "player_health": self.player_health,
            "enemy_health": self.enemy_health,
            "range": self.range,
            "score": self.score,
            "high_score": self.high_score,
            "phase": str(self.phase),
        }
