# input/keyboard_input.py

import os
import sys
import termios
import select
from contextlib import contextmanager


class KeyboardInput:
    """
    Non-blocking single-key reader on a terminal file descriptor.

    poll_available() never blocks; read_one() reads exactly one character.
    Terminal attribute failures (e.g. fd is a pipe) are reported and ignored.
    """

    def __init__(self, fd=None):
        self.fd = sys.stdin.fileno() if fd is None else fd
        self.is_tty = os.isatty(self.fd)
        if not self.is_tty:
            print(f"[WARN] fd {self.fd} is not a TTY, echo and line mode left untouched")
        self.original = self._get_attrs()

    # ---------- termios helpers ----------

    def _get_attrs(self):
        if not self.is_tty:
            return None
        try:
            return termios.tcgetattr(self.fd)
        except termios.error as e:
            print("[WARN] tcgetattr failed:", e)
            return None

    def _set_attrs(self, attrs, when=termios.TCSANOW):
        if attrs is None:
            return
        try:
            termios.tcsetattr(self.fd, when, attrs)
        except termios.error as e:
            print("[WARN] tcsetattr failed:", e)

    @contextmanager
    def _lflag_cleared(self, mask, vmin=None):
        old = self._get_attrs()
        if old is None:
            yield
            return

        new = list(old)
        new[3] = new[3] & ~mask
        if vmin is not None:
            new[6] = list(new[6])
            new[6][termios.VMIN] = vmin
            new[6][termios.VTIME] = 0
        self._set_attrs(new)
        try:
            yield
        finally:
            self._set_attrs(old, termios.TCSADRAIN)

    # ---------- capability ----------

    def poll_available(self) -> bool:
        with self._lflag_cleared(termios.ICANON):
            r, _, _ = select.select([self.fd], [], [], 0)
        return bool(r)

    def read_one(self):
        """Blocking read of one character. Returns None on EOF."""
        with self._lflag_cleared(termios.ICANON | termios.ECHO, vmin=1):
            data = os.read(self.fd, 1)
        if not data:
            return None
        return data.decode("latin-1")

    @contextmanager
    def echo_off(self):
        """Echo disabled for the block; original attributes restored on any exit."""
        saved = self._get_attrs()
        if saved is not None:
            quiet = list(saved)
            quiet[3] = quiet[3] & ~termios.ECHO
            self._set_attrs(quiet)
        try:
            yield self
        finally:
            self._set_attrs(saved, termios.TCSADRAIN)

    def close(self):
        self._set_attrs(self.original, termios.TCSADRAIN)
