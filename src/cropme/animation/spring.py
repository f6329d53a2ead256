"""
Damped-spring strategy used to pull an out-of-bounds surface back.

The spring is advanced with the closed-form solution of the damped harmonic
oscillator, so the trajectory does not depend on the frame rate.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from typing import TYPE_CHECKING

from ..settings import DEFAULT_SETTINGS, MotionSettings
from .abstract import MotionStrategy

if TYPE_CHECKING:
    from .frame_clock import FrameClock

_LOGGER = logging.getLogger(__name__)


class SpringForce:
    """Damped harmonic oscillator pulling towards ``final_position``.

    Parameters
    ----------
    stiffness:
        Spring constant for a unit mass; the natural frequency is
        ``sqrt(stiffness)``.
    damping_ratio:
        ``1`` is critically damped, below ``1`` oscillates, above ``1``
        creeps towards the target.
    value_threshold:
        Distance from the target considered at rest.
    velocity_threshold:
        Speed considered at rest.
    """

    def __init__(
        self,
        *,
        stiffness: float,
        damping_ratio: float,
        value_threshold: float,
        velocity_threshold: float,
        final_position: float = 0.0,
    ) -> None:
        self.stiffness = float(stiffness)
        self.damping_ratio = float(damping_ratio)
        self.value_threshold = float(value_threshold)
        self.velocity_threshold = float(velocity_threshold)
        self.final_position = float(final_position)

    @property
    def natural_frequency(self) -> float:
        return math.sqrt(self.stiffness)

    def is_at_equilibrium(self, value: float, velocity: float) -> bool:
        return (
            abs(velocity) < self.velocity_threshold
            and abs(value - self.final_position) < self.value_threshold
        )

    def update_values(
        self, value: float, velocity: float, delta_ms: float
    ) -> tuple[float, float]:
        """Return ``(value, velocity)`` after ``delta_ms`` milliseconds."""
        t = delta_ms / 1000.0
        omega = self.natural_frequency
        zeta = self.damping_ratio
        displacement = value - self.final_position

        if zeta > 1.0:
            root = omega * math.sqrt(zeta * zeta - 1.0)
            gamma_plus = -zeta * omega + root
            gamma_minus = -zeta * omega - root
            coeff_b = (gamma_minus * displacement - velocity) / (gamma_minus - gamma_plus)
            coeff_a = displacement - coeff_b
            exp_minus = math.exp(gamma_minus * t)
            exp_plus = math.exp(gamma_plus * t)
            new_displacement = coeff_a * exp_minus + coeff_b * exp_plus
            new_velocity = coeff_a * gamma_minus * exp_minus + coeff_b * gamma_plus * exp_plus
        elif zeta == 1.0:
            coeff_a = displacement
            coeff_b = velocity + omega * displacement
            decay = math.exp(-omega * t)
            new_displacement = (coeff_a + coeff_b * t) * decay
            new_velocity = coeff_b * decay - omega * new_displacement
        else:
            damped = omega * math.sqrt(1.0 - zeta * zeta)
            cos_coeff = displacement
            sin_coeff = (zeta * omega * displacement + velocity) / damped
            decay = math.exp(-zeta * omega * t)
            cos_t = math.cos(damped * t)
            sin_t = math.sin(damped * t)
            new_displacement = decay * (cos_coeff * cos_t + sin_coeff * sin_t)
            new_velocity = -zeta * omega * new_displacement + decay * damped * (
                sin_coeff * cos_t - cos_coeff * sin_t
            )

        return self.final_position + new_displacement, new_velocity


class SpringCorrector(MotionStrategy):
    """Drives the property towards a target along a damped-spring trajectory."""

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
        self.force = SpringForce(
            stiffness=settings.stiffness,
            damping_ratio=settings.damping_ratio,
            value_threshold=settings.value_threshold,
            velocity_threshold=settings.spring_velocity_threshold,
        )

    @property
    def final_position(self) -> float:
        return self.force.final_position

    def start(self, final_position: float, start_velocity: float = 0.0) -> bool:
        """Spring from the current value to ``final_position``.

        Returns
        -------
        bool:
            False when the surface is unavailable and nothing was started.
        """
        self.cancel()
        self.force.final_position = float(final_position)
        started = self._begin(start_velocity)
        if started:
            _LOGGER.debug(
                "%s springing %.2f -> %.2f (v=%.1f)",
                self.name,
                self._value,
                self.force.final_position,
                self._velocity,
            )
        return started

    def _step(
        self, value: float, velocity: float, delta_ms: float
    ) -> tuple[float, float, bool]:
        value, velocity = self.force.update_values(value, velocity, delta_ms)
        if self.force.is_at_equilibrium(value, velocity):
            return self.force.final_position, 0.0, True
        return value, velocity, False
