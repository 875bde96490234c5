# app/sinks.py

import time

import config


class NullSink:
    def publish(self, command):
        pass

    def close(self):
        pass


class ConsoleSink:
    """
    Prints the outgoing command, at most once per interval.
    """

    def __init__(self, interval_s: float = config.CONSOLE_LOG_INTERVAL_S, clock=time.time, out=print):
        self.interval_s = interval_s
        self.clock = clock
        self.out = out
        self._last_log = None

    def publish(self, command):
        now = self.clock()
        if self._last_log is not None and now - self._last_log < self.interval_s:
            return
        self._last_log = now
        self.out(
            f"[DEBUG] cmd linear.x={command.linear.x:+.2f} "
            f"angular.z={command.angular.z:+.3f}"
        )

    def close(self):
        pass
