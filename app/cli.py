from dataclasses import dataclass
import argparse

import config


@dataclass(frozen=True)
class AppConfig:
    rate_hz: float
    wheelbase: float
    speed_limit: float
    angle_limit: float
    sink: str
    display: bool


def _positive_float(text: str) -> float:
    value = float(text)
    if not value > 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {text}")
    return value


def _rate(text: str) -> float:
    value = float(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {text}")
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Keyboard teleop: arrow keys -> speed/steering velocity commands")

    p.add_argument("--rate", type=_rate, default=config.LOOP_RATE_HZ,
                   help="Loop rate in Hz, 0 = free-running.")
    p.add_argument("--wheelbase", type=_positive_float, default=config.WHEELBASE_M,
                   help="Effective wheelbase H [m] for the yaw-rate relation.")
    p.add_argument("--speed-limit", type=_positive_float, default=config.DEFAULT_SPEED_LIMIT)
    p.add_argument("--angle-limit", type=_positive_float, default=config.DEFAULT_ANGLE_LIMIT,
                   help="Start steering limit [deg], keep well below 90.")
    p.add_argument("--sink", choices=("console", "pca9685", "none"), default=config.DEFAULT_SINK)
    p.add_argument("--display", action="store_true", default=config.DISPLAY_ENABLED,
                   help="Mirror the status on the SH1106 OLED.")

    return p


def parse_config(argv=None) -> AppConfig:
    args = build_arg_parser().parse_args(argv)

    return AppConfig(
        rate_hz=args.rate,
        wheelbase=args.wheelbase,
        speed_limit=args.speed_limit,
        angle_limit=args.angle_limit,
        sink=args.sink,
        display=args.display,
    )
