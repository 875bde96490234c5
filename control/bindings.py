# control/bindings.py

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

import config


class LimitAxis:
    SPEED = "speed_limit"
    ANGLE = "angle_limit"


@dataclass(frozen=True)
class Binding:
    multiplier: float
    increment: float


@dataclass(frozen=True)
class LimitBinding:
    axis: str
    factor: float


# Arrow keys arrive as ESC [ A..D, only the last byte is bound.
# ESC and "[" fall through as no-op.
SPEED_BINDINGS: Mapping[str, Binding] = MappingProxyType({
    "A": Binding(1.0, +0.2),   # up     [m/s]
    "B": Binding(1.0, -0.2),   # down
    "0": Binding(0.0, 0.0),    # stop
})

ANGLE_BINDINGS: Mapping[str, Binding] = MappingProxyType({
    "D": Binding(1.0, +10.0),  # left   [deg]
    "C": Binding(1.0, -10.0),  # right
    "c": Binding(0.0, 0.0),    # center
})

LIMIT_BINDINGS: Mapping[str, LimitBinding] = MappingProxyType({
    "w": LimitBinding(LimitAxis.SPEED, 1.1),
    "s": LimitBinding(LimitAxis.SPEED, 0.9),
    "e": LimitBinding(LimitAxis.ANGLE, 1.1),
    "d": LimitBinding(LimitAxis.ANGLE, 0.9),
})


@dataclass(frozen=True)
class KeyBindings:
    """
    The three binding tables plus the quit key.

    A key may belong to at most one table, and the quit key to none.
    """

    speed: Mapping[str, Binding] = field(default_factory=lambda: SPEED_BINDINGS)
    angle: Mapping[str, Binding] = field(default_factory=lambda: ANGLE_BINDINGS)
    limit: Mapping[str, LimitBinding] = field(default_factory=lambda: LIMIT_BINDINGS)
    quit_key: str = config.QUIT_KEY

    def __post_init__(self):
        # freeze caller-supplied dicts too
        for name in ("speed", "angle", "limit"):
            table = getattr(self, name)
            if not isinstance(table, MappingProxyType):
                object.__setattr__(self, name, MappingProxyType(dict(table)))

        seen = {}
        for name in ("speed", "angle", "limit"):
            for key in getattr(self, name):
                if len(key) != 1:
                    raise ValueError(f"binding key must be a single character, got {key!r}")
                if key in seen:
                    raise ValueError(f"key {key!r} bound in both {seen[key]} and {name} tables")
                seen[key] = name

        for key, lb in self.limit.items():
            if lb.axis not in (LimitAxis.SPEED, LimitAxis.ANGLE):
                raise ValueError(f"unknown limit axis {lb.axis!r} for key {key!r}")

        if self.quit_key in seen:
            raise ValueError(f"quit key {self.quit_key!r} is also bound in the {seen[self.quit_key]} table")

    def help_lines(self):
        lines = []
        for key, b in self.limit.items():
            what = "max speed" if b.axis == LimitAxis.SPEED else "max turning angle"
            pct = round((b.factor - 1.0) * 100)
            lines.append(f"{key} : {what} {pct:+d}%")
        for key, b in self.speed.items():
            if b.multiplier == 0 and b.increment == 0:
                lines.append(f"{key} : stop")
        for key, b in self.angle.items():
            if b.multiplier == 0 and b.increment == 0:
                lines.append(f"{key} : center steering")
        return lines


DEFAULT_BINDINGS = KeyBindings()
