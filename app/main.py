# app/main.py

import signal
import sys

import config

from app.cli import parse_config
from app.sinks import ConsoleSink, NullSink
from app.teleop import TeleopLoop

from control.kinematics import CommandEmitter
from control.motion_state import MotionState

from input.keyboard_input import KeyboardInput


# =========================================================
# Helpers
# =========================================================

def build_sink(kind: str, wheelbase: float):
    if kind == "none":
        return NullSink()

    if kind == "pca9685":
        try:
            from hardware.pca import open_pca
            from hardware.servo import Servo
            from hardware.throttle import Throttle
            from hardware.drive_sink import DriveSink

            pca = open_pca()
            servo = Servo(
                pca,
                channel=config.STEERING_CHANNEL,
                center_us=config.SERVO_CENTER_US,
                left_us=config.SERVO_LEFT_US,
                right_us=config.SERVO_RIGHT_US,
            )
            throttle = Throttle(
                pca,
                channel=config.THROTTLE_CHANNEL,
                neutral_us=config.THROTTLE_NEUTRAL_US,
                forward_us=config.THROTTLE_FORWARD_US,
                reverse_us=config.THROTTLE_REVERSE_US,
            )
            return DriveSink(servo, throttle, wheelbase=wheelbase)
        except Exception as e:
            print("[WARN] PCA9685 not available, falling back to console:", e)

    return ConsoleSink()


def build_display(enabled: bool):
    if not enabled:
        return None
    try:
        from display import DisplayService, DisplayState

        service = DisplayService()
        service.start()
        service.update(DisplayState(message="TELEOP\nready"))
        return service
    except Exception as e:
        print("[WARN] Display not available:", e)
        return None


def _raise_interrupt(signum, frame):
    raise KeyboardInterrupt


# =========================================================
# Main
# =========================================================

def main(argv=None) -> int:
    cfg = parse_config(argv)

    signal.signal(signal.SIGTERM, _raise_interrupt)

    sink = build_sink(cfg.sink, cfg.wheelbase)
    display = build_display(cfg.display)

    on_change = None
    if display:
        from display import DisplayState

        def on_change(state, key):
            display.update(DisplayState.from_motion(state, key))

    keyboard = KeyboardInput()
    loop = TeleopLoop(
        keyboard,
        CommandEmitter(sink, cfg.wheelbase),
        state=MotionState.initial(cfg.speed_limit, cfg.angle_limit),
        rate_hz=cfg.rate_hz,
        on_change=on_change,
    )

    print(f"[SYSTEM] Teleop loop started ({type(sink).__name__}, {cfg.rate_hz:g} Hz)")

    status = 0
    try:
        loop.run()
    except KeyboardInterrupt:
        print("[SYSTEM] Keyboard interrupt")
        status = 130
    finally:
        print("[SYSTEM] Shutting down safely")
        keyboard.close()
        sink.close()
        if display:
            display.stop()

    return status


if __name__ == "__main__":
    sys.exit(main())
