# hardware/pca.py
import board
import busio
from adafruit_pca9685 import PCA9685

PERIOD_US = 20000  # 50 Hz frame


def open_pca(frequency: int = 50) -> PCA9685:
    i2c = busio.I2C(board.SCL, board.SDA)
    pca = PCA9685(i2c)
    pca.frequency = frequency
    return pca


def us_to_duty(us) -> int:
    return int(int(us) * 65535 / PERIOD_US)
