"""Shared game constants.

Centralises magic numbers and string literals that are referenced by
multiple modules so they have a single source of truth.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
MIN_HEALTH: float = 0.0
"""Health at or below this value means the combatant is dead."""

MAX_HEALTH: float = 100.0
"""Full health for both the player and the enemy."""

# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------
STARTING_RANGE: int = 2
"""Upper bound of the guess interval at the start of every session."""

# ---------------------------------------------------------------------------
# Rule sets
# ---------------------------------------------------------------------------
DUEL_RULE_SET: str = "duel_rules"
"""Name of the JSON rule set holding the duel's tunable numbers."""

# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------
GAME_OVER_MESSAGE: str = "You're out of HP! Game Over!"
"""Logged once when the player's health reaches zero."""

GAME_OVER_REJECT_MESSAGE: str = "Game over. Press Reset to start a new game."
"""Returned for any guess submitted after the game has ended."""
