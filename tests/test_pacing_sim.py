import pytest

from guess_duel.modules.duel_rules import DuelRules
from guess_duel.modules.pacing_sim import simulate_session, summarize


def test_simulation_is_deterministic_per_seed() -> None:
    first = simulate_session(7, strategy="random", rules=DuelRules())
    second = simulate_session(7, strategy="random", rules=DuelRules())

    assert first == second


def test_simulation_totals_are_consistent() -> None:
    for strategy in ("random", "sweep"):
        for seed in range(20):
            sample = simulate_session(seed, strategy=strategy, rules=DuelRules())

            assert sample.guesses == sample.hits + sample.misses
            assert sample.hits >= sample.enemies_defeated * 2
            assert sample.final_range == 2 + sample.enemies_defeated
            assert sample.final_score == sample.hits * 10 + sample.enemies_defeated * 50
            assert sample.game_over


def test_sweep_always_beats_the_first_enemy() -> None:
    for seed in range(20):
        sample = simulate_session(seed, strategy="sweep", rules=DuelRules())
        assert sample.enemies_defeated >= 1


def test_guess_cap_stops_the_session() -> None:
    sample = simulate_session(3, strategy="sweep", max_guesses=2, rules=DuelRules())

    assert sample.guesses == 2
    assert not sample.game_over


def test_unknown_strategy_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown strategy 'psychic'"):
        simulate_session(1, strategy="psychic", rules=DuelRules())


def test_summarize_reports_means_and_rates() -> None:
    samples = [simulate_session(seed, strategy="sweep", rules=DuelRules()) for seed in range(10)]

    report = summarize(samples)

    assert report["sessions"] == 10
    assert report["game_over_rate"] == 1.0
    assert report["defeats_mean"] >= 1
    assert report["range_max"] >= 3

    with pytest.raises(ValueError, match="At least one sample"):
        summarize([])
