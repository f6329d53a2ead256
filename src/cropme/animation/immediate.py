"""
Immediate strategy for direct drag tracking.
"""

from __future__ import annotations

import logging

from .abstract import MotionStrategy

_LOGGER = logging.getLogger(__name__)


class ImmediateMover(MotionStrategy):
    """Writes a new value with zero animation duration.

    The write happens synchronously inside :meth:`start`, so the mover is
    never left running and never registers with the frame clock.
    """

    def start(self, target_value: float) -> None:
        """Jump to ``target_value``."""
        self.cancel()
        self._value = float(target_value)
        self._velocity = 0.0
        if not self._write_value(self._value):
            _LOGGER.debug("%s skipped: surface unavailable", self.name)
            return
        for listener in list(self._update_listeners):
            listener(self._value, 0.0)
        self._notify_end(canceled=False)

    def _step(
        self, value: float, velocity: float, delta_ms: float
    ) -> tuple[float, float, bool]:
        return value, 0.0, True
