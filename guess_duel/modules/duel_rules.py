"""Tunable duel numbers.

Reads ``rules/duel_rules.json`` through the rule registry and validates
it into an immutable :class:`DuelRules`.  Missing keys fall back to the
classic values (100 HP, 50 per hit, 10 per miss).  Health never
exceeds 100 and the enemy always falls to exactly two hits.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from guess_duel.constants import DUEL_RULE_SET, MAX_HEALTH, STARTING_RANGE
from guess_duel.rules_registry import load_rule_set
from guess_duel.utils import coerce_int

HITS_TO_DEFEAT = 2


@dataclass(frozen=True)
class DuelRules:
    max_health: int = int(MAX_HEALTH)
    starting_range: int = STARTING_RANGE
    range_step: int = 1
    hit_damage: int = 50
    miss_damage: int = 10
    hit_score: int = 10
    defeat_bonus: int = 50
    defeat_heal: int = 20
    defeat_pause_seconds: float = 0.5

    def __post_init__(self) -> None:
        if not 1 <= self.max_health <= MAX_HEALTH:
            raise ValueError(f"Rule 'max_health' must be between 1 and {MAX_HEALTH:.0f}.")
        if self.hit_damage < 1:
            raise ValueError("Rule 'hit_damage' must be >= 1.")
        if self.miss_damage < 1:
            raise ValueError("Rule 'miss_damage' must be >= 1.")
        if self.hits_to_defeat != HITS_TO_DEFEAT:
            raise ValueError(
                f"Rules must defeat the enemy in exactly {HITS_TO_DEFEAT} hits "
                f"(max_health {self.max_health}, hit_damage {self.hit_damage} "
                f"gives {self.hits_to_defeat})."
            )

    @property
    def hits_to_defeat(self) -> int:
        return math.ceil(self.max_health / self.hit_damage)

    @property
    def misses_to_lose(self) -> int:
        return math.ceil(self.max_health / self.miss_damage)

    def to_dict(self) -> dict[str, Any]:
        return {
            "max_health": self.max_health,
            "starting_range": self.starting_range,
            "range_step": self.range_step,
            "hit_damage": self.hit_damage,
            "miss_damage": self.miss_damage,
            "hit_score": self.hit_score,
            "defeat_bonus": self.defeat_bonus,
            "defeat_heal": self.defeat_heal,
            "defeat_pause_seconds": self.defeat_pause_seconds,
        }

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "DuelRules":
        defaults = cls()

        def _int(key: str, minimum: int) -> int:
            raw = payload.get(key, getattr(defaults, key))
            value = coerce_int(raw)
            if value is None:
                raise ValueError(f"Rule '{key}' must be a whole number.")
            if value < minimum:
                raise ValueError(f"Rule '{key}' must be >= {minimum}.")
            return value

        try:
            pause = float(payload.get("defeat_pause_seconds", defaults.defeat_pause_seconds))
        except (TypeError, ValueError) as exc:
            raise ValueError("Rule 'defeat_pause_seconds' must be a number.") from exc
        if pause < 0:
            raise ValueError("Rule 'defeat_pause_seconds' must be >= 0.")

        return cls(
            max_health=_int("max_health", 1),
            starting_range=_int("starting_range", 2),
            range_step=_int("range_step", 1),
            hit_damage=_int("hit_damage", 1),
            miss_damage=_int("miss_damage", 1),
            hit_score=_int("hit_score", 0),
            defeat_bonus=_int("defeat_bonus", 0),
            defeat_heal=_int("defeat_heal", 0),
            defeat_pause_seconds=pause,
        )


def load_duel_rules(name: str = DUEL_RULE_SET) -> DuelRules:
    """Load and validate the named duel rule set."""
    return DuelRules.from_dict(load_rule_set(name))
