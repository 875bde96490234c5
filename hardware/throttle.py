# hardware/throttle.py
from hardware.pca import us_to_duty


class Throttle:
    """
    ESC on one PCA9685 channel. Pulse widths are logged only when they change.
    """

    def __init__(self, pca, channel: int = 1, neutral_us: int = 1600, reverse_us: int = 1100, forward_us: int = 1900):
        self.ch = pca.channels[channel]
        self.neutral_us = neutral_us
        self.reverse_us = reverse_us
        self.forward_us = forward_us

        self._last_us = None
        self.set_neutral()

    def _set_us(self, us):
        us = int(us)
        self.ch.duty_cycle = us_to_duty(us)
        if us != self._last_us:
            print(f"[THROTTLE] {us} µs")
            self._last_us = us

    def set_neutral(self):
        self._set_us(self.neutral_us)

    def set_normalized(self, value: float):
        value = max(-1.0, min(1.0, value))
        if value > 0:
            us = self.neutral_us + value * (self.forward_us - self.neutral_us)
        elif value < 0:
            us = self.neutral_us + value * (self.neutral_us - self.reverse_us)
        else:
            us = self.neutral_us
        self._set_us(us)
