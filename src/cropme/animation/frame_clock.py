"""
Frame scheduling for in-flight motion strategies.

``FrameClock`` is advanced explicitly by its host, which keeps the
simulation deterministic.  ``TimerFrameClock`` advances itself from a Qt
timer while any strategy is running.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from PySide6.QtCore import QObject, QTimer

from ..config import FRAME_INTERVAL_MS

if TYPE_CHECKING:
    from .abstract import MotionStrategy

_LOGGER = logging.getLogger(__name__)


class FrameClock:
    """Advances every registered strategy once per frame."""

    def __init__(self) -> None:
        self._strategies: list[MotionStrategy] = []

    def register(self, strategy: MotionStrategy) -> None:
        if strategy in self._strategies:
            return
        self._strategies.append(strategy)
        if len(self._strategies) == 1:
            self._arm()

    def unregister(self, strategy: MotionStrategy) -> None:
        if strategy not in self._strategies:
            return
        self._strategies.remove(strategy)
        if not self._strategies:
            self._disarm()

    def has_pending(self) -> bool:
        """Return True if any strategy is waiting for frames."""
        return bool(self._strategies)

    def advance(self, delta_ms: float) -> None:
        """Run one frame of ``delta_ms`` milliseconds.

        Strategies registered while the frame runs wait for the next one;
        strategies canceled while it runs are skipped.
        """
        for strategy in list(self._strategies):
            if strategy not in self._strategies:
                continue
            strategy.do_frame(delta_ms)

    def _arm(self) -> None:
        """Hook invoked when the first strategy registers."""

    def _disarm(self) -> None:
        """Hook invoked when the last strategy unregisters."""


class TimerFrameClock(FrameClock):
    """Frame clock driven by a :class:`QTimer` on the host event loop."""

    def __init__(
        self,
        *,
        interval_ms: int = FRAME_INTERVAL_MS,
        timer_parent: QObject | None = None,
    ) -> None:
        """Initialize the timer clock.

        Parameters
        ----------
        interval_ms:
            Timer interval in milliseconds.
        timer_parent:
            Parent QObject for the timer (optional).
        """
        super().__init__()
        self._timer = QTimer(timer_parent)
        self._timer.setInterval(int(interval_ms))
        self._timer.timeout.connect(self._handle_tick)
        self._last_tick: float = 0.0

    def is_running(self) -> bool:
        """Return True while the timer is armed."""
        return self._timer.isActive()

    def _arm(self) -> None:
        self._last_tick = time.monotonic()
        self._timer.start()
        _LOGGER.debug("Frame timer started")

    def _disarm(self) -> None:
        self._timer.stop()
        _LOGGER.debug("Frame timer stopped")

    def _handle_tick(self) -> None:
        """Handle animation timer tick."""
        now = time.monotonic()
        delta_ms = (now - self._last_tick) * 1000.0
        self._last_tick = now
        self.advance(delta_ms)
