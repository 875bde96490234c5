# hardware/drive_sink.py

import config
from control.kinematics import steering_angle_from_velocity


def _clamp1(value: float) -> float:
    return max(-1.0, min(1.0, value))


class DriveSink:
    """
    Velocity command -> steering servo + ESC.

    linear.x is scaled by max_speed, the steering angle recovered from
    angular.z is scaled by max_steer_deg (positive = left). Both are then
    clamped, dead-zoned and optionally inverted. A change of driving direction
    always passes through one neutral frame.

    At standstill angular.z carries no steering angle, so the servo holds the
    last steering value seen while moving.
    """

    def __init__(
        self,
        servo,
        throttle,
        wheelbase: float = config.WHEELBASE_M,
        max_speed: float = config.MAX_SPEED_MPS,
        max_steer_deg: float = config.MAX_STEER_DEG,
        steering_invert: bool = config.STEERING_INVERT,
        steering_dead_zone: float = config.STEERING_DEAD_ZONE,
        steering_gain: float = config.STEERING_GAIN,
        throttle_invert: bool = config.THROTTLE_INVERT,
        throttle_dead_zone: float = config.THROTTLE_DEAD_ZONE,
    ):
        self.servo = servo
        self.throttle = throttle
        self.wheelbase = wheelbase
        self.max_speed = max_speed
        self.max_steer_deg = max_steer_deg
        self.steering_invert = steering_invert
        self.steering_dead_zone = steering_dead_zone
        self.steering_gain = steering_gain
        self.throttle_invert = throttle_invert
        self.throttle_dead_zone = throttle_dead_zone

        self._last_throttle = 0.0
        self._last_steer = 0.0

    # ---------- mapping ----------

    def steering_value(self, command) -> float:
        if command.linear.x == 0:
            return self._last_steer

        angle = steering_angle_from_velocity(command, self.wheelbase)

        # servo convention: -1 = left
        value = _clamp1(-angle / self.max_steer_deg)
        if abs(value) < self.steering_dead_zone:
            value = 0.0
        elif self.steering_invert:
            value = -value
        self._last_steer = _clamp1(value * self.steering_gain)
        return self._last_steer

    def throttle_value(self, command) -> float:
        value = _clamp1(command.linear.x / self.max_speed)
        if self.throttle_invert:
            value = -value
        if abs(value) < self.throttle_dead_zone:
            value = 0.0
        return value

    # ---------- sink ----------

    def publish(self, command):
        self.servo.set_normalized(self.steering_value(command))

        value = self.throttle_value(command)

        # no instant reverse
        if (self._last_throttle > 0 and value < 0) or (self._last_throttle < 0 and value > 0):
            self.throttle.set_neutral()
            self._last_throttle = 0.0
            return

        self.throttle.set_normalized(value)
        self._last_throttle = value

    def close(self):
        print("[DRIVE] Neutral + center")
        self.throttle.set_neutral()
        self.servo.set_center()
        self._last_throttle = 0.0
        self._last_steer = 0.0
