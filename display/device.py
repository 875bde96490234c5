from __future__ import annotations

from PIL import Image

from luma.core.interface.serial import i2c
from luma.oled.device import sh1106

from .config import DisplayConfig


class OLEDDevice:
    """
    SH1106 over I2C via luma.oled
    """

    def __init__(self, cfg: DisplayConfig):
        serial = i2c(port=cfg.i2c_bus, address=cfg.i2c_address)
        self.dev = sh1106(serial, width=cfg.width, height=cfg.height, rotate=cfg.rotate)

    def clear(self) -> None:
        self.dev.clear()

    def show(self, img: Image.Image) -> None:
        self.dev.display(img.convert(self.dev.mode))
