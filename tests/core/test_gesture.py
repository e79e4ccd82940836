"""Gesture Interpreter — first-match rules over the drag vector."""

from datetime import datetime, timedelta, timezone

import pytest

from lifedeck.core.domain_types import SwipeAction
from lifedeck.core.errors import InvalidArgumentError
from lifedeck.core.gesture import SWIPE_THRESHOLD, interpret_swipe


def test_right_swipe_completes(now):
    assert interpret_swipe(150, 0, now).action == SwipeAction.COMPLETE


def test_left_swipe_dismisses(now):
    assert interpret_swipe(-150, 0, now).action == SwipeAction.DISMISS


def test_down_swipe_snoozes_until_next_midnight(now):
    decision = interpret_swipe(0, 150, now)
    assert decision.action == SwipeAction.SNOOZE
    assert decision.snooze_until == datetime(2026, 3, 11, 0, 0, tzinfo=timezone.utc)


def test_snooze_deadline_follows_callers_timezone():
    tz = timezone(timedelta(hours=-5))
    late_evening = datetime(2026, 3, 10, 23, 30, tzinfo=tz)
    decision = interpret_swipe(0, 500, late_evening)
    assert decision.snooze_until == datetime(2026, 3, 11, 0, 0, tzinfo=tz)


def test_up_swipe_resets(now):
    decision = interpret_swipe(0, -150, now)
    assert decision.is_reset
    assert decision.snooze_until is None


def test_small_drag_resets(now):
    assert interpret_swipe(40, 60, now).is_reset


def test_exactly_at_threshold_resets(now):
    assert interpret_swipe(SWIPE_THRESHOLD, 0, now).is_reset
    assert interpret_swipe(-SWIPE_THRESHOLD, SWIPE_THRESHOLD, now).is_reset


def test_horizontal_wins_over_vertical(now):
    assert interpret_swipe(120, 300, now).action == SwipeAction.COMPLETE
    assert interpret_swipe(-120, 300, now).action == SwipeAction.DISMISS


def test_custom_threshold(now):
    assert interpret_swipe(60, 0, now, threshold=50).action == SwipeAction.COMPLETE
    assert interpret_swipe(60, 0, now, threshold=80).is_reset


def test_zero_threshold_treats_zero_drag_as_reset(now):
    assert interpret_swipe(0, 0, now, threshold=0).is_reset


def test_negative_threshold_rejected(now):
    with pytest.raises(InvalidArgumentError):
        interpret_swipe(10, 0, now, threshold=-1)


def test_default_threshold_is_100():
    assert SWIPE_THRESHOLD == 100.0
