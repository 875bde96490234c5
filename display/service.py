from __future__ import annotations

import threading
import time
from typing import Optional

from .config import DisplayConfig
from .models import DisplayState
from .renderer import render


class DisplayService:
    """
    Background renderer for the SH1106 status panel.
    Call update(...) from the control loop; drawing never blocks it.
    """

    def __init__(self, cfg: Optional[DisplayConfig] = None, enabled: bool = True, device=None):
        self.cfg = cfg or DisplayConfig()
        self.enabled = enabled

        self._dev = device
        self._th: Optional[threading.Thread] = None
        self._stop_evt = threading.Event()

        self._lock = threading.Lock()
        self._state = DisplayState()
        self._dirty = True

    def start(self) -> None:
        if not self.enabled or self._th is not None:
            return

        if self._dev is None:
            # luma is only needed once a panel is actually driven
            from .device import OLEDDevice
            self._dev = OLEDDevice(self.cfg)

        self._stop_evt.clear()
        self._th = threading.Thread(target=self._run, name="DisplayService", daemon=True)
        self._th.start()

    def stop(self) -> None:
        self._stop_evt.set()
        th = self._th
        self._th = None
        if th:
            th.join(timeout=2.0)

        if self._dev:
            try:
                self._dev.clear()
            except Exception as e:
                print("[DISPLAY] clear failed:", e)
        self._dev = None

    def update(self, state: DisplayState) -> None:
        if not self.enabled:
            return
        with self._lock:
            self._state = state
            self._dirty = True

    def draw_pending(self) -> bool:
        """Render the latest state if it changed. Returns True if something was drawn."""
        with self._lock:
            if not self._dirty:
                return False
            st = self._state
            self._dirty = False

        try:
            self._dev.show(render(st))
        except Exception as e:
            print("[DISPLAY] render/show failed:", e)
            return False
        return True

    def _run(self) -> None:
        min_dt = 1.0 / self.cfg.max_fps if self.cfg.max_fps > 0 else 0.2

        while not self._stop_evt.is_set():
            started = time.time()
            self.draw_pending()
            self._stop_evt.wait(max(0.01, min_dt - (time.time() - started)))
