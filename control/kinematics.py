# control/kinematics.py

from __future__ import annotations

import math
from dataclasses import dataclass, field

import config


@dataclass(frozen=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class VelocityCommand:
    """Twist-shaped command: linear [m/s], angular [rad/s]."""

    linear: Vector3 = field(default_factory=Vector3)
    angular: Vector3 = field(default_factory=Vector3)

    def as_dict(self) -> dict:
        return {
            "linear": {"x": self.linear.x, "y": self.linear.y, "z": self.linear.z},
            "angular": {"x": self.angular.x, "y": self.angular.y, "z": self.angular.z},
        }


def velocity_from_motion(speed: float, angle_deg: float, wheelbase: float = config.WHEELBASE_M) -> VelocityCommand:
    """
    Bicycle model: yaw rate = v * tan(steer) / H.

    angle_deg = +-90 is not guarded (tan blows up); keep angle limits below it.
    """
    yaw_rate = speed * math.tan(math.radians(angle_deg)) / wheelbase
    return VelocityCommand(
        linear=Vector3(speed, 0.0, 0.0),
        angular=Vector3(0.0, 0.0, yaw_rate),
    )


def steering_angle_from_velocity(cmd: VelocityCommand, wheelbase: float = config.WHEELBASE_M) -> float:
    """
    Inverse of velocity_from_motion for drive sinks, in degrees.
    With zero forward speed the steering angle is not observable; 0 is returned.
    """
    v = cmd.linear.x
    if v == 0:
        return 0.0
    return math.degrees(math.atan(cmd.angular.z * wheelbase / v))


class CommandEmitter:
    def __init__(self, sink, wheelbase: float = config.WHEELBASE_M):
        if not wheelbase > 0:
            raise ValueError(f"wheelbase must be > 0, got {wheelbase}")
        self.sink = sink
        self.wheelbase = float(wheelbase)

    def compute(self, state) -> VelocityCommand:
        return velocity_from_motion(state.speed, state.angle, self.wheelbase)

    def emit(self, state) -> VelocityCommand:
        cmd = self.compute(state)
        self.sink.publish(cmd)
        return cmd
