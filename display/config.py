from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DisplayConfig:
    # SH1106 128x64 on I2C
    i2c_bus: int = 1
    i2c_address: int = 0x3C

    width: int = 128
    height: int = 64

    # 0..3 => 0/90/180/270 deg
    rotate: int = 0

    # redraw at most this often
    max_fps: float = 5.0
