"""Guess parsing and hit/miss resolution.

Pure rule functions that mutate a :class:`DuelState` in place and
return the human-readable event lines for the log.  The controller
owns phase transitions and builds the outward view model.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from guess_duel.constants import GAME_OVER_MESSAGE
from guess_duel.models import DuelState
from guess_duel.modules.duel_rules import DuelRules
from guess_duel.utils import coerce_int

_GUESS_PATTERN = re.compile(r"^[+-]?[0-9]+\Z")


class GuessInputError(ValueError):
    """Raised when a guess is not a whole number inside the current range."""


@dataclass(frozen=True)
class Resolution:
    hit: bool
    enemy_defeated: bool
    player_dead: bool
    events: tuple[str, ...]


def range_prompt(enemy_range: int) -> str:
    return f"Enter a number between 1-{enemy_range}"


def parse_guess(raw_input: str, enemy_range: int) -> int:
    """Parse *raw_input* as a guess in ``[1, enemy_range]``.

    Raises ``GuessInputError`` carrying the re-entry prompt otherwise.
    """
    text = (raw_input or "").strip()
    guess = coerce_int(text) if _GUESS_PATTERN.match(text) else None
    if guess is None or not 1 <= guess <= enemy_range:
        raise GuessInputError(range_prompt(enemy_range))
    return guess


def apply_hit(state: DuelState, rules: DuelRules) -> tuple[bool, list[str]]:
    """Damage the enemy and add the hit score; finish it off if it drops."""
    state.enemy.take_damage(rules.hit_damage)
    state.session.add_score(rules.hit_score)
    events = [f"Hit! The enemy lost {rules.hit_damage} HP."]

    if not state.enemy.is_dead():
        return False, events

    state.session.add_score(rules.defeat_bonus)
    state.player.heal(rules.defeat_heal)
    state.enemy.reset()
    state.session.increase_range()
    state.session.generate_target()
    events.append(f"Enemy defeated! New range: 1-{state.session.enemy_range}")
    return True, events


def apply_miss(state: DuelState, rules: DuelRules) -> list[str]:
    state.player.take_damage(rules.miss_damage)
    return [f"Miss! You lost {rules.miss_damage} HP."]


def resolve_guess(state: DuelState, guess: int, rules: DuelRules) -> Resolution:
    """Apply one accepted guess to *state*.

    Exactly one of :func:`apply_hit` / :func:`apply_miss` runs, followed by
    the player-death check.
    """
    hit = state.session.check_guess(guess)
    if hit:
        enemy_defeated, events = apply_hit(state, rules)
    else:
        enemy_defeated = False
        events = apply_miss(state, rules)

    player_dead = state.player.is_dead()
    if player_dead:
        events.append(GAME_OVER_MESSAGE)

    return Resolution(
        hit=hit,
        enemy_defeated=enemy_defeated,
        player_dead=player_dead,
        events=tuple(events),
    )
