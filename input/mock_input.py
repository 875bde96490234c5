# input/mock_input.py

from contextlib import contextmanager


class ScriptedInput:
    """
    Replays a fixed key sequence, one entry per poll.
    None entries are idle ticks. Once the script runs out nothing is available.
    """

    def __init__(self, keys):
        self._keys = list(keys)
        self._pending = None
        self.echo = True
        self.echo_changes = 0

    def poll_available(self) -> bool:
        if self._pending is None and self._keys:
            self._pending = self._keys.pop(0)
        return self._pending is not None

    def read_one(self):
        key, self._pending = self._pending, None
        return key

    @property
    def exhausted(self) -> bool:
        return not self._keys and self._pending is None

    @contextmanager
    def echo_off(self):
        self.echo = False
        self.echo_changes += 1
        try:
            yield self
        finally:
            self.echo = True
            self.echo_changes += 1

    def close(self):
        pass
