import pytest

from guess_duel.models import EnemyHealth, PlayerHealth

AMOUNTS = [0, 0.5, 1, 10, 20, 50, 99, 100, 150, 1000]
STARTING_HEALTH = [0, 1, 10, 50, 90, 100]


def test_take_damage_stays_in_bounds_and_never_increases() -> None:
    for start in STARTING_HEALTH:
        for amount in AMOUNTS:
            for health in (PlayerHealth(health=start), EnemyHealth(health=start)):
                before = health.health
                after = health.take_damage(amount)

                assert 0 <= after <= 100
                assert after <= before
                assert after == max(0, before - amount)


def test_heal_stays_in_bounds_and_never_decreases() -> None:
    for start in STARTING_HEALTH:
        for amount in AMOUNTS:
            player = PlayerHealth(health=start)
            before = player.health
            after = player.heal(amount)

            assert 0 <= after <= 100
            assert after >= before
            assert after == min(100, before + amount)


def test_enemy_cannot_heal() -> None:
    assert not hasattr(EnemyHealth(), "heal")


def test_is_dead_only_at_zero() -> None:
    enemy = EnemyHealth()
    enemy.take_damage(50)
    assert not enemy.is_dead()

    enemy.take_damage(50)
    assert enemy.health == 0
    assert enemy.is_dead()


def test_reset_restores_full_health() -> None:
    player = PlayerHealth()
    player.take_damage(75)
    player.reset()

    assert player.health == 100
    assert not player.is_dead()


def test_constructor_clamps_out_of_range_health() -> None:
    assert PlayerHealth(health=250).health == 100
    assert EnemyHealth(health=-5).health == 0


def test_negative_amounts_are_rejected() -> None:
    player = PlayerHealth()

    with pytest.raises(ValueError, match="Damage amount must be >= 0"):
        player.take_damage(-1)
    with pytest.raises(ValueError, match="Heal amount must be >= 0"):
        player.heal(-1)
    assert player.health == 100
