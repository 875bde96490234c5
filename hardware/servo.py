# hardware/servo.py
from hardware.pca import us_to_duty


class Servo:
    """
    Steering servo on one PCA9685 channel.

    set_normalized: -1.0 (left) ... 0.0 (center) ... 1.0 (right)
    """

    def __init__(self, pca, channel=0, center_us=1550, left_us=1300, right_us=1700):
        self.pca = pca
        self.ch = pca.channels[channel]

        self.center_us = center_us
        self.left_us = left_us
        self.right_us = right_us

        self.set_center()

    def _set_us(self, us):
        self.ch.duty_cycle = us_to_duty(us)

    def set_center(self):
        self._set_us(self.center_us)

    def set_normalized(self, value: float):
        value = max(-1.0, min(1.0, value))
        if value < 0:
            us = self.center_us + value * (self.center_us - self.left_us)
        else:
            us = self.center_us + value * (self.right_us - self.center_us)
        self._set_us(us)
