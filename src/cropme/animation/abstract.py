"""
Abstract base class for motion strategies.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .frame_clock import FrameClock

_LOGGER = logging.getLogger(__name__)

UpdateListener = Callable[[float, float], None]
EndListener = Callable[[bool, float, float], None]


class MotionStrategy(ABC):
    """Base class for strategies that drive one scalar surface property.

    Strategies never touch the surface directly.  They read through
    ``read_value`` (``None`` when the surface is gone) and write through
    ``write_value`` (``False`` when the surface is gone).  A failed write
    cancels the strategy without raising.

    Listener contract
    -----------------
    Update listeners run once per simulated frame with ``(value, velocity)``
    after the value has been written.  End listeners run exactly once per
    run with ``(canceled, value, velocity)``.
    """

    def __init__(
        self,
        *,
        name: str,
        clock: FrameClock,
        read_value: Callable[[], float | None],
        write_value: Callable[[float], bool],
    ) -> None:
        self.name = name
        self._clock = clock
        self._read_value = read_value
        self._write_value = write_value
        self._running: bool = False
        self._value: float = 0.0
        self._velocity: float = 0.0
        self._update_listeners: list[UpdateListener] = []
        self._end_listeners: list[EndListener] = []

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def add_update_listener(self, listener: UpdateListener) -> None:
        if listener not in self._update_listeners:
            self._update_listeners.append(listener)

    def remove_update_listener(self, listener: UpdateListener) -> None:
        if listener in self._update_listeners:
            self._update_listeners.remove(listener)

    def add_end_listener(self, listener: EndListener) -> None:
        if listener not in self._end_listeners:
            self._end_listeners.append(listener)

    def remove_end_listener(self, listener: EndListener) -> None:
        if listener in self._end_listeners:
            self._end_listeners.remove(listener)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def is_active(self) -> bool:
        """Return True while the strategy is driving its property."""
        return self._running

    @property
    def velocity(self) -> float:
        return self._velocity

    def cancel(self) -> None:
        """Stop the strategy.  Safe to call when it is not running."""
        if not self._running:
            return
        self._running = False
        self._clock.unregister(self)
        _LOGGER.debug("%s canceled at value=%.2f", self.name, self._value)
        self._notify_end(canceled=True)

    def _begin(self, start_velocity: float) -> bool:
        """Read the start value and hand the strategy to the frame clock."""
        value = self._read_value()
        if value is None:
            _LOGGER.debug("%s not started: surface unavailable", self.name)
            return False
        self._value = float(value)
        self._velocity = float(start_velocity)
        self._running = True
        self._clock.register(self)
        return True

    def do_frame(self, delta_ms: float) -> bool:
        """Advance the simulation by ``delta_ms``.

        Returns
        -------
        bool:
            True once the strategy is no longer running.
        """
        if not self._running:
            return True

        value, velocity, finished = self._step(self._value, self._velocity, delta_ms)
        self._value = value
        self._velocity = velocity
        if not self._write_value(value):
            _LOGGER.debug("%s stopped: surface unavailable", self.name)
            self.cancel()
            return True

        for listener in list(self._update_listeners):
            listener(value, velocity)
            if not self._running:
                # A listener replaced this strategy with another one.
                return True

        if finished:
            self._running = False
            self._clock.unregister(self)
            _LOGGER.debug("%s finished at value=%.2f", self.name, value)
            self._notify_end(canceled=False)
            return True
        return False

    def _notify_end(self, *, canceled: bool) -> None:
        for listener in list(self._end_listeners):
            listener(canceled, self._value, self._velocity)

    @abstractmethod
    def _step(
        self, value: float, velocity: float, delta_ms: float
    ) -> tuple[float, float, bool]:
        """Return ``(value, velocity, finished)`` after ``delta_ms``."""
