import random

import pytest

from guess_duel.models import SessionData


def test_generate_target_stays_inside_range() -> None:
    for seed in range(25):
        session = SessionData(rng=random.Random(seed))
        for _ in range(30):
            session.increase_range()
            for _ in range(10):
                target = session.generate_target()
                assert 1 <= target <= session.enemy_range
                assert session.target == target


def test_generate_target_covers_whole_range() -> None:
    session = SessionData(enemy_range=4, rng=random.Random(11))

    seen = {session.generate_target() for _ in range(200)}

    assert seen == {1, 2, 3, 4}


def test_target_is_drawn_on_creation() -> None:
    session = SessionData(rng=random.Random(3))

    assert session.target in (1, 2)


def test_check_guess_is_integer_equality() -> None:
    session = SessionData(target=2)

    assert session.check_guess(2)
    assert not session.check_guess(1)


def test_increase_range_adds_one() -> None:
    session = SessionData(target=1)

    assert session.increase_range() == 3
    assert session.increase_range() == 4


def test_add_score_tracks_high_score() -> None:
    session = SessionData(target=1)
    session.add_score(10)
    session.add_score(50)

    assert session.score == 60
    assert session.high_score == 60

    with pytest.raises(ValueError, match="Score points must be >= 0"):
        session.add_score(-5)


def test_reset_keeps_high_score() -> None:
    session = SessionData(target=1, rng=random.Random(8))
    session.add_score(70)
    session.increase_range()
    session.increase_range()

    session.reset()

    assert session.enemy_range == 2
    assert session.score == 0
    assert session.high_score == 70
    assert 1 <= session.target <= 2


def test_rejects_target_outside_range() -> None:
    with pytest.raises(ValueError, match="Target must be between 1 and 2"):
        SessionData(target=3)


def test_rejects_range_below_start() -> None:
    with pytest.raises(ValueError, match="Range must be >= 2"):
        SessionData(enemy_range=1)
