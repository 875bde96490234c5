from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class DisplayState:
    speed: float = 0.0
    angle: float = 0.0
    speed_limit: float = 0.0
    angle_limit: float = 0.0

    last_key: Optional[str] = None

    # replaces the gauges when set (startup/shutdown)
    message: Optional[str] = None

    @classmethod
    def from_motion(cls, state, last_key: Optional[str] = None) -> "DisplayState":
        return cls(
            speed=state.speed,
            angle=state.angle,
            speed_limit=state.speed_limit,
            angle_limit=state.angle_limit,
            last_key=last_key,
        )
