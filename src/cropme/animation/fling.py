"""
Momentum fling strategy: velocity decaying under constant friction.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from typing import TYPE_CHECKING

from ..config import FLING_FRICTION_SCALE
from ..settings import DEFAULT_SETTINGS, MotionSettings
from .abstract import MotionStrategy

if TYPE_CHECKING:
    from .frame_clock import FrameClock

_LOGGER = logging.getLogger(__name__)


class DragForce:
    """Exponential velocity decay used by :class:`MomentumFling`."""

    def __init__(self, *, friction: float, velocity_threshold: float) -> None:
        self.friction = float(friction) * FLING_FRICTION_SCALE
        self.velocity_threshold = float(velocity_threshold)

    def update_values(
        self, value: float, velocity: float, delta_ms: float
    ) -> tuple[float, float]:
        t = delta_ms / 1000.0
        decay = math.exp(self.friction * t)
        new_velocity = velocity * decay
        new_value = value - velocity / self.friction + velocity / self.friction * decay
        if abs(new_velocity) < self.velocity_threshold:
            new_velocity = 0.0
        return new_value, new_velocity

    def is_at_equilibrium(self, velocity: float) -> bool:
        return abs(velocity) < self.velocity_threshold

    def travel_distance(self, velocity: float) -> float:
        """Distance a fling starting at ``velocity`` covers before stopping."""
        return -velocity / self.friction


class MomentumFling(MotionStrategy):
    """Moves the property with a release velocity that decays every frame."""

    def __init__(
        self,
        *,
        name: str,
        clock: FrameClock,
        read_value: Callable[[], float | None],
        write_value: Callable[[float], bool],
        settings: MotionSettings = DEFAULT_SETTINGS,
    ) -> None:
        super().__init__(
            name=name, clock=clock, read_value=read_value, write_value=write_value
        )
        self.force = DragForce(
            friction=settings.friction,
            velocity_threshold=settings.fling_velocity_threshold,
        )

    def start(self, start_velocity: float) -> bool:
        """Start flinging from the current value."""
        self.cancel()
        started = self._begin(start_velocity)
        if started:
            _LOGGER.debug(
                "%s flinging from %.2f (v=%.1f)", self.name, self._value, self._velocity
            )
        return started

    def _step(
        self, value: float, velocity: float, delta_ms: float
    ) -> tuple[float, float, bool]:
        value, velocity = self.force.update_values(value, velocity, delta_ms)
        return value, velocity, self.force.is_at_equilibrium(velocity)
