# control/motion_state.py

from __future__ import annotations

from dataclasses import dataclass

import config
from control.bindings import LimitAxis
from control.classifier import Action, ActionKind


def _clamp(value: float, limit: float) -> float:
    return max(-limit, min(limit, value))


@dataclass
class MotionState:
    """
    Commanded speed [m/s] and steering angle [deg] with their current limits.

    After every update |speed| <= speed_limit and |angle| <= angle_limit.
    A shrinking limit drags its axis along. The limits themselves are never
    clamped.
    """

    speed: float = 0.0
    angle: float = 0.0
    speed_limit: float = config.DEFAULT_SPEED_LIMIT
    angle_limit: float = config.DEFAULT_ANGLE_LIMIT

    @classmethod
    def initial(
        cls,
        speed_limit: float = config.DEFAULT_SPEED_LIMIT,
        angle_limit: float = config.DEFAULT_ANGLE_LIMIT,
    ) -> "MotionState":
        return cls(0.0, 0.0, float(speed_limit), float(angle_limit))

    def apply_speed_update(self, multiplier: float, increment: float) -> None:
        self.speed = _clamp(multiplier * self.speed + increment, self.speed_limit)

    def apply_angle_update(self, multiplier: float, increment: float) -> None:
        self.angle = _clamp(multiplier * self.angle + increment, self.angle_limit)

    def apply_limit_update(self, axis: str, factor: float) -> None:
        if axis == LimitAxis.SPEED:
            self.speed_limit *= factor
            self.speed = _clamp(self.speed, self.speed_limit)
        else:
            self.angle_limit *= factor
            self.angle = _clamp(self.angle, self.angle_limit)

    def apply(self, action: Action) -> bool:
        """Apply a classified action. Returns False for a no-op."""
        if action.kind == ActionKind.SPEED:
            self.apply_speed_update(action.multiplier, action.value)
        elif action.kind == ActionKind.ANGLE:
            self.apply_angle_update(action.multiplier, action.value)
        elif action.kind == ActionKind.LIMIT:
            self.apply_limit_update(action.axis, action.value)
        else:
            return False
        return True

    def status_line(self, last_key=None) -> str:
        head = (
            f"Current: speed {self.speed:.2f}(lim {self.speed_limit:.2f}) "
            f"angle {self.angle:.2f}(lim {self.angle_limit:.2f})"
        )
        if last_key is None:
            return head + " | Awaiting command..."
        return f"{head} | Last command: {last_key}"
