import pytest

from guess_duel.modules import duel_rules
from guess_duel.modules.duel_rules import DuelRules, load_duel_rules
from guess_duel.rules_registry import load_rule_set


def test_shipped_rules_match_classic_duel() -> None:
    rules = load_duel_rules()

    assert rules == DuelRules()
    assert rules.hits_to_defeat == 2
    assert rules.misses_to_lose == 10
    assert rules.defeat_pause_seconds == 0.5


def test_missing_keys_fall_back_to_defaults() -> None:
    rules = DuelRules.from_dict({"miss_damage": 25})

    assert rules.miss_damage == 25
    assert rules.hit_damage == 50
    assert rules.misses_to_lose == 4


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValueError, match="'hit_damage' must be >= 1"):
        DuelRules.from_dict({"hit_damage": 0})
    with pytest.raises(ValueError, match="'miss_damage' must be a whole number"):
        DuelRules.from_dict({"miss_damage": "ten"})
    with pytest.raises(ValueError, match="'starting_range' must be >= 2"):
        DuelRules.from_dict({"starting_range": 1})
    with pytest.raises(ValueError, match="'defeat_pause_seconds' must be >= 0"):
        DuelRules.from_dict({"defeat_pause_seconds": -1})


def test_missing_rule_set_raises() -> None:
    with pytest.raises(FileNotFoundError, match="Rule set not found"):
        load_rule_set("does_not_exist")


def test_load_duel_rules_reads_rule_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        duel_rules,
        "load_rule_set",
        lambda name: {"max_health": 80, "hit_damage": 40, "defeat_heal": 0},
    )

    rules = load_duel_rules()

    assert rules.max_health == 80
    assert rules.hit_damage == 40
    assert rules.hits_to_defeat == 2
    assert rules.defeat_heal == 0
    assert rules.to_dict()["hit_damage"] == 40


def test_health_above_one_hundred_is_rejected() -> None:
    with pytest.raises(ValueError, match="'max_health' must be between 1 and 100"):
        DuelRules.from_dict({"max_health": 150, "hit_damage": 75})
    with pytest.raises(ValueError, match="'max_health' must be between 1 and 100"):
        DuelRules(max_health=150, hit_damage=75)


def test_rules_must_keep_two_hit_enemy() -> None:
    with pytest.raises(ValueError, match="exactly 2 hits"):
        DuelRules.from_dict({"hit_damage": 30})
    with pytest.raises(ValueError, match="exactly 2 hits"):
        DuelRules.from_dict({"hit_damage": 100})

    assert DuelRules.from_dict({"hit_damage": 60}).hits_to_defeat == 2


def test_rule_file_with_bad_ratio_fails_to_load(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(duel_rules, "load_rule_set", lambda name: {"hit_damage": 34})

    with pytest.raises(ValueError, match="exactly 2 hits"):
        load_duel_rules()
