"""UserProgress — clamping, derived life score, onboarding seed."""

from uuid import uuid4

from lifedeck.core.domain_types import LifeDomain, UserId
from lifedeck.core.progress import UserProgress, clamp_score


def _progress(**kwargs) -> UserProgress:
    return UserProgress(user_id=UserId(uuid4()), **kwargs)


def test_new_progress_is_zeroed():
    progress = UserProgress.create(UserId(uuid4()))
    assert progress.life_score == 0.0
    assert progress.current_streak == 0
    assert progress.longest_streak == 0
    assert progress.last_active_date is None


def test_life_score_is_mean_of_domain_scores():
    progress = _progress(
        health_score=80, finance_score=40, productivity_score=60, mindfulness_score=20,
    )
    assert progress.life_score == 50.0


def test_life_score_tracks_every_domain_change():
    progress = _progress()
    progress.set_domain_score(LifeDomain.MINDFULNESS, 100)
    assert progress.life_score == 25.0
    progress.set_domain_score(LifeDomain.HEALTH, 50)
    assert progress.life_score == 37.5


def test_set_domain_score_clamps():
    progress = _progress()
    assert progress.set_domain_score(LifeDomain.FINANCE, 140) == 100.0
    assert progress.set_domain_score(LifeDomain.HEALTH, -3) == 0.0
    assert progress.finance_score == 100.0


def test_constructor_clamps_out_of_range_scores():
    progress = _progress(health_score=250)
    assert progress.health_score == 100.0


def test_constructor_repairs_longest_streak():
    progress = _progress(current_streak=6, longest_streak=2)
    assert progress.longest_streak == 6


def test_create_seeds_initial_scores():
    progress = UserProgress.create(
        UserId(uuid4()), {LifeDomain.HEALTH: 50, LifeDomain.PRODUCTIVITY: 120},
    )
    assert progress.health_score == 50
    assert progress.productivity_score == 100
    assert progress.domain_scores[LifeDomain.FINANCE] == 0


def test_clamp_score_bounds():
    assert clamp_score(-0.1) == 0.0
    assert clamp_score(55.5) == 55.5
    assert clamp_score(100.1) == 100.0
