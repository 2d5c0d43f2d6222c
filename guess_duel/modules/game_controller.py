"""Command dispatch for a single duel.

The controller is the only object front ends talk to: they submit raw
guesses and reset requests and re-render from the returned view models.
Game rules live in :mod:`guess_duel.modules.guess_resolution`.
"""

from __future__ import annotations

import logging
import random

from guess_duel.constants import GAME_OVER_REJECT_MESSAGE
from guess_duel.models import (
    DuelState,
    EnemyHealth,
    GamePhase,
    GameSnapshot,
    GuessOutcome,
    PlayerHealth,
    SessionData,
    SessionSnapshot,
)
from guess_duel.modules.duel_rules import DuelRules, load_duel_rules
from guess_duel.modules.guess_resolution import GuessInputError, parse_guess, resolve_guess

logger = logging.getLogger(__name__)


def new_duel_state(rules: DuelRules, *, rng: random.Random | None = None) -> DuelState:
    """Build a fresh duel at full health with a freshly drawn target."""
    session = SessionData(
        enemy_range=rules.starting_range,
        starting_range=rules.starting_range,
        range_step=rules.range_step,
        rng=rng or random.Random(),
    )
    return DuelState(
        player=PlayerHealth(health=rules.max_health, max_health=rules.max_health),
        enemy=EnemyHealth(health=rules.max_health, max_health=rules.max_health),
        session=session,
    )


class GameController:
    def __init__(
        self,
        *,
        rules: DuelRules | None = None,
        rng: random.Random | None = None,
        state: DuelState | None = None,
    ) -> None:
        self.rules = rules or load_duel_rules()
        self.state = state or new_duel_state(self.rules, rng=rng)
        self.state.phase = GamePhase.AWAITING_GUESS
        logger.debug("Duel started with range 1-%d", self.state.session.enemy_range)

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    @property
    def is_game_over(self) -> bool:
        return self.state.phase is GamePhase.GAME_OVER

    def _outcome(
        self,
        *,
        accepted: bool,
        guess: int | None = None,
        hit: bool = False,
        enemy_defeated: bool = False,
        events: tuple[str, ...] = (),
    ) -> GuessOutcome:
        session = self.state.session
        return GuessOutcome(
            accepted=accepted,
            guess=guess,
            hit=hit,
            enemy_defeated=enemy_defeated,
            player_dead=self.state.player.is_dead(),
            new_range=session.enemy_range,
            score=session.score,
            high_score=session.high_score,
            player_health=self.state.player.health,
            enemy_health=self.state.enemy.health,
            events=events,
        )

    def submit_guess(self, raw_input: str) -> GuessOutcome:
        """Resolve one guess typed by the player.

        Malformed input and guesses after game over come back with
        ``accepted=False`` and leave the duel untouched.
        """
        if self.is_game_over:
            logger.debug("Guess %r ignored: game over", raw_input)
            return self._outcome(accepted=False, events=(GAME_OVER_REJECT_MESSAGE,))

        session = self.state.session
        try:
            guess = parse_guess(raw_input, session.enemy_range)
        except GuessInputError as exc:
            logger.debug("Rejected guess %r: %s", raw_input, exc)
            return self._outcome(accepted=False, events=(str(exc),))

        self.state.phase = GamePhase.RESOLVING
        resolution = resolve_guess(self.state, guess, self.rules)

        if resolution.player_dead:
            self.state.phase = GamePhase.GAME_OVER
            logger.info("Game over with score %d (high %d)", session.score, session.high_score)
        else:
            self.state.phase = GamePhase.AWAITING_GUESS

        if resolution.enemy_defeated:
            logger.info("Enemy defeated; range now 1-%d", session.enemy_range)
        else:
            logger.debug("Guess %d %s", guess, "hit" if resolution.hit else "missed")

        return self._outcome(
            accepted=True,
            guess=guess,
            hit=resolution.hit,
            enemy_defeated=resolution.enemy_defeated,
            events=resolution.events,
        )

    def reset_game(self) -> SessionSnapshot:
        """Restore full health and the starting range; keep the high score."""
        self.state.player.reset()
        self.state.enemy.reset()
        self.state.session.reset()
        self.state.phase = GamePhase.AWAITING_GUESS
        events = (f"New game! Range: 1-{self.state.session.enemy_range}",)
        logger.info("Game reset; high score %d", self.state.session.high_score)
        return SessionSnapshot(range=self.state.session.enemy_range, events=events)

    def get_snapshot(self) -> GameSnapshot:
        session = self.state.session
        return GameSnapshot(
            player_health=self.state.player.health,
            enemy_health=self.state.enemy.health,
            range=session.enemy_range,
            score=session.score,
            high_score=session.high_score,
            phase=self.state.phase,
        )
