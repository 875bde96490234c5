import random

import pytest

from control.bindings import LimitAxis
from control.classifier import classify
from control.motion_state import MotionState


def test_initial_state():
    s = MotionState.initial()
    assert (s.speed, s.angle, s.speed_limit, s.angle_limit) == (0.0, 0.0, 1.0, 20.0)


def test_speed_ramps_and_clamps_at_limit():
    s = MotionState.initial(speed_limit=1.0)
    seen = []
    for _ in range(6):
        s.apply_speed_update(1.0, 0.2)
        seen.append(s.speed)
    assert seen == pytest.approx([0.2, 0.4, 0.6, 0.8, 1.0, 1.0])
    assert s.speed == 1.0


def test_angle_clamps_at_negative_limit():
    s = MotionState.initial(angle_limit=20.0)
    seen = []
    for _ in range(3):
        s.apply_angle_update(1.0, -10.0)
        seen.append(s.angle)
    assert seen == [-10.0, -20.0, -20.0]


def test_reset_gives_exact_zero():
    s = MotionState(speed=-0.73, angle=13.0, speed_limit=3.0, angle_limit=20.0)
    assert s.apply(classify("0"))
    assert s.speed == 0.0
    assert s.angle == 13.0

    assert s.apply(classify("c"))
    assert s.angle == 0.0


@pytest.mark.parametrize("seed", range(5))
def test_random_key_sequences_respect_limits(seed):
    rng = random.Random(seed)
    s = MotionState.initial()
    keys = ["A", "B", "C", "D", "0", "c", "w", "s", "e", "d", None, "x"]
    for _ in range(300):
        s.apply(classify(rng.choice(keys)))
        assert abs(s.speed) <= s.speed_limit
        assert abs(s.angle) <= s.angle_limit


def test_limit_growth_and_shrink_only_touch_target_axis():
    s = MotionState.initial(speed_limit=1.0, angle_limit=20.0)

    s.apply_limit_update(LimitAxis.SPEED, 1.1)
    assert s.speed_limit > 1.0
    assert s.angle_limit == 20.0

    s.apply_limit_update(LimitAxis.ANGLE, 0.9)
    assert s.angle_limit < 20.0
    assert s.speed_limit == pytest.approx(1.1)


def test_shrinking_limit_reclamps_its_axis_immediately():
    s = MotionState(speed=-1.0, angle=20.0, speed_limit=1.0, angle_limit=20.0)
    s.apply_limit_update(LimitAxis.SPEED, 0.5)
    assert (s.speed, s.speed_limit) == (-0.5, 0.5)
    assert s.angle == 20.0

    s.apply_limit_update(LimitAxis.ANGLE, 0.9)
    assert s.angle == s.angle_limit
    assert s.angle == pytest.approx(18.0)
    assert s.speed == -0.5


def test_full_speed_then_shrink_keys_stay_within_limits():
    s = MotionState.initial()
    for key in ["A"] * 5 + ["s", "D", "D", "d"]:
        s.apply(classify(key))
        assert abs(s.speed) <= s.speed_limit
        assert abs(s.angle) <= s.angle_limit
    assert s.speed == pytest.approx(0.9)
    assert s.angle == pytest.approx(18.0)


def test_growing_limit_leaves_axis_alone():
    s = MotionState(speed=0.4, angle=-10.0, speed_limit=1.0, angle_limit=20.0)
    s.apply_limit_update(LimitAxis.SPEED, 1.1)
    s.apply_limit_update(LimitAxis.ANGLE, 1.1)
    assert (s.speed, s.angle) == (0.4, -10.0)


def test_limits_are_not_clamped():
    s = MotionState.initial(speed_limit=1.0)
    for _ in range(200):
        s.apply_limit_update(LimitAxis.SPEED, 0.9)
    assert 0.0 < s.speed_limit < 1e-8
    s.apply_speed_update(1.0, 0.2)
    assert s.speed == s.speed_limit


def test_noop_reports_false():
    s = MotionState.initial()
    assert not s.apply(classify(None))
    assert not s.apply(classify("z"))


def test_status_line_format():
    s = MotionState(speed=0.2, angle=-10.0, speed_limit=1.0, angle_limit=20.0)
    assert s.status_line("A") == (
        "Current: speed 0.20(lim 1.00) angle -10.00(lim 20.00) | Last command: A"
    )
    assert s.status_line().endswith("| Awaiting command...")
