import pytest

from control.kinematics import velocity_from_motion
from hardware.drive_sink import DriveSink


class FakeServo:
    def __init__(self):
        self.values = []
        self.centered = 0

    def set_normalized(self, value):
        self.values.append(value)

    def set_center(self):
        self.centered += 1


class FakeThrottle:
    def __init__(self):
        self.values = []
        self.neutral = 0

    def set_normalized(self, value):
        self.values.append(value)

    def set_neutral(self):
        self.neutral += 1
        self.values.append("neutral")


def make_sink(**kwargs):
    servo, throttle = FakeServo(), FakeThrottle()
    opts = dict(
        wheelbase=0.7,
        max_speed=2.0,
        max_steer_deg=30.0,
        steering_invert=False,
        steering_dead_zone=0.03,
        steering_gain=1.0,
        throttle_invert=False,
        throttle_dead_zone=0.05,
    )
    opts.update(kwargs)
    return DriveSink(servo, throttle, **opts), servo, throttle


def test_forward_straight():
    sink, servo, throttle = make_sink()
    sink.publish(velocity_from_motion(1.0, 0.0, 0.7))
    assert servo.values == [0.0]
    assert throttle.values == [pytest.approx(0.5)]


def test_left_angle_maps_to_negative_servo():
    sink, servo, _ = make_sink()
    sink.publish(velocity_from_motion(1.0, 15.0, 0.7))
    assert servo.values == [pytest.approx(-0.5)]


def test_inverted_outputs():
    sink, servo, throttle = make_sink(steering_invert=True, throttle_invert=True)
    sink.publish(velocity_from_motion(1.0, 15.0, 0.7))
    assert servo.values == [pytest.approx(0.5)]
    assert throttle.values == [pytest.approx(-0.5)]


def test_outputs_are_clamped():
    sink, servo, throttle = make_sink()
    sink.publish(velocity_from_motion(5.0, -60.0, 0.7))
    assert servo.values == [1.0]
    assert throttle.values == [1.0]


def test_dead_zones():
    sink, servo, throttle = make_sink()
    sink.publish(velocity_from_motion(0.05, 0.5, 0.7))
    assert servo.values == [0.0]
    assert throttle.values == [0.0]


def test_direction_change_passes_through_neutral():
    sink, _, throttle = make_sink()
    sink.publish(velocity_from_motion(1.0, 0.0))
    sink.publish(velocity_from_motion(-1.0, 0.0))
    sink.publish(velocity_from_motion(-1.0, 0.0))
    assert throttle.values == [pytest.approx(0.5), "neutral", pytest.approx(-0.5)]


def test_close_parks_the_car():
    sink, servo, throttle = make_sink()
    sink.publish(velocity_from_motion(1.0, 10.0))
    sink.close()
    assert throttle.neutral == 1
    assert servo.centered == 1


def test_standstill_holds_last_steering():
    sink, servo, _ = make_sink()
    sink.publish(velocity_from_motion(0.0, 15.0, 0.7))
    sink.publish(velocity_from_motion(1.0, 15.0, 0.7))
    sink.publish(velocity_from_motion(0.0, 15.0, 0.7))
    assert servo.values == [0.0, pytest.approx(-0.5), pytest.approx(-0.5)]


def test_close_forgets_held_steering():
    sink, servo, _ = make_sink()
    sink.publish(velocity_from_motion(1.0, 15.0, 0.7))
    sink.close()
    sink.publish(velocity_from_motion(0.0, 15.0, 0.7))
    assert servo.values[-1] == 0.0
