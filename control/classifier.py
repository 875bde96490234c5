# control/classifier.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from control.bindings import DEFAULT_BINDINGS, KeyBindings


class ActionKind:
    SPEED = "speed"
    ANGLE = "angle"
    LIMIT = "limit"
    NONE = "none"


@dataclass(frozen=True)
class Action:
    kind: str
    multiplier: float = 0.0
    value: float = 0.0          # increment (speed/angle) or factor (limit)
    axis: Optional[str] = None  # limit table only


NO_OP = Action(ActionKind.NONE)


def classify(key: Optional[str], bindings: KeyBindings = DEFAULT_BINDINGS) -> Action:
    """
    Map one polled key (None = nothing pressed this tick) to an action.
    Tables are checked in the order speed, angle, limit.
    """
    if key is None:
        return NO_OP

    b = bindings.speed.get(key)
    if b is not None:
        return Action(ActionKind.SPEED, b.multiplier, b.increment)

    b = bindings.angle.get(key)
    if b is not None:
        return Action(ActionKind.ANGLE, b.multiplier, b.increment)

    lb = bindings.limit.get(key)
    if lb is not None:
        return Action(ActionKind.LIMIT, 0.0, lb.factor, lb.axis)

    return NO_OP


def is_quit(key: Optional[str], bindings: KeyBindings = DEFAULT_BINDINGS) -> bool:
    return key is not None and key == bindings.quit_key
