from control.bindings import Binding, KeyBindings, LimitAxis
from control.classifier import NO_OP, Action, ActionKind, classify, is_quit


def test_no_key_is_noop():
    assert classify(None) == NO_OP


def test_arrow_keys():
    assert classify("A") == Action(ActionKind.SPEED, 1.0, 0.2)
    assert classify("B") == Action(ActionKind.SPEED, 1.0, -0.2)
    assert classify("D") == Action(ActionKind.ANGLE, 1.0, 10.0)
    assert classify("C") == Action(ActionKind.ANGLE, 1.0, -10.0)


def test_escape_prefix_of_arrow_sequence_is_noop():
    assert classify("\x1b").kind == ActionKind.NONE
    assert classify("[").kind == ActionKind.NONE


def test_limit_keys_carry_axis_and_factor():
    a = classify("w")
    assert a.kind == ActionKind.LIMIT
    assert a.axis == LimitAxis.SPEED
    assert a.value == 1.1

    a = classify("d")
    assert a.axis == LimitAxis.ANGLE
    assert a.value == 0.9


def test_unknown_key_is_noop():
    assert classify("z") is NO_OP


def test_quit_is_not_a_table_action():
    assert is_quit("q")
    assert classify("q").kind == ActionKind.NONE
    assert not is_quit(None)
    assert not is_quit("Q")


def test_custom_bindings():
    kb = KeyBindings(speed={"i": Binding(1.0, 0.5)}, angle={}, limit={}, quit_key="x")
    assert classify("i", kb) == Action(ActionKind.SPEED, 1.0, 0.5)
    assert classify("A", kb) is NO_OP
    assert is_quit("x", kb)
    assert not is_quit("q", kb)
