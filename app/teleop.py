# app/teleop.py

import time

import config
from control.bindings import DEFAULT_BINDINGS
from control.classifier import classify, is_quit
from control.motion_state import MotionState


BANNER = """
Reading from the keyboard and publishing velocity commands!
---------------------------
Accelerating/turning: arrow keys

{keys}

{quit_key} to quit
"""


class LoopState:
    AWAITING_INPUT = "awaiting_input"
    PROCESSING = "processing"
    QUIT = "quit"


class TeleopLoop:
    """
    One tick: poll keyboard -> classify -> update MotionState -> emit command.

    A command is emitted every tick, key or not, until the quit key arrives.
    rate_hz <= 0 runs the loop as fast as polling allows.
    """

    def __init__(
        self,
        keyboard,
        emitter,
        state=None,
        bindings=DEFAULT_BINDINGS,
        rate_hz: float = config.LOOP_RATE_HZ,
        sleep=time.sleep,
        clock=time.monotonic,
        out=print,
        on_change=None,
    ):
        self.keyboard = keyboard
        self.emitter = emitter
        self.state = state if state is not None else MotionState.initial()
        self.bindings = bindings
        self.rate_hz = rate_hz
        self.sleep = sleep
        self.clock = clock
        self.out = out
        self.on_change = on_change

        self.loop_state = LoopState.AWAITING_INPUT
        self.last_command = None
        self.ticks = 0

    @property
    def period(self) -> float:
        return 1.0 / self.rate_hz if self.rate_hz and self.rate_hz > 0 else 0.0

    def banner(self) -> str:
        return BANNER.format(
            keys="\n".join(self.bindings.help_lines()),
            quit_key=self.bindings.quit_key,
        )

    def tick(self) -> bool:
        """Run one iteration. Returns False once the quit key was read."""
        self.loop_state = LoopState.AWAITING_INPUT
        key = None
        if self.keyboard.poll_available():
            key = self.keyboard.read_one()

        self.loop_state = LoopState.PROCESSING
        action = classify(key, self.bindings)
        if self.state.apply(action):
            self.out(self.state.status_line(key))
            if self.on_change:
                self.on_change(self.state, key)

        if is_quit(key, self.bindings):
            self.out("Exit")
            self.loop_state = LoopState.QUIT
            return False

        self.last_command = self.emitter.emit(self.state)
        self.ticks += 1
        return True

    def run(self) -> None:
        self.out(self.banner())
        self.out(self.state.status_line())

        period = self.period
        with self.keyboard.echo_off():
            while True:
                started = self.clock()
                if not self.tick():
                    break
                if period:
                    remaining = period - (self.clock() - started)
                    if remaining > 0:
                        self.sleep(remaining)
