"""
Boundary-constrained motion for one axis of a crop surface.

The animator owns three strategies (immediate move, spring correction and
momentum fling) and guarantees that at most one of them drives the surface
at a time: every entry point cancels all motion before starting anything.
"""

from __future__ import annotations

import enum
import logging
import weakref
from dataclasses import dataclass
from functools import partial

from .animation import (
    FrameClock,
    ImmediateMover,
    MomentumFling,
    MotionStrategy,
    SpringCorrector,
)
from .errors import ConfigurationError
from .geometry import effective_rect, resting_position
from .settings import DEFAULT_SETTINGS, MotionSettings
from .surface import HORIZONTAL, VERTICAL, AxisAccessor, Surface

_LOGGER = logging.getLogger(__name__)


class MotionPhase(enum.Enum):
    """What is currently moving the surface along one axis."""

    IDLE = "idle"
    DRAGGING = "dragging"
    FLINGING = "flinging"
    SPRING_CORRECTING = "spring_correcting"


@dataclass
class AxisState:
    """Mutable per-axis state, owned by exactly one animator."""

    is_flinging: bool = False
    phase: MotionPhase = MotionPhase.IDLE


class BoundedAxisAnimator:
    """Keeps a surface's effective extent inside ``[near_bound, far_bound]``."""

    def __init__(
        self,
        surface: Surface,
        axis: AxisAccessor,
        *,
        near_bound: float,
        far_bound: float,
        max_scale: float,
        clock: FrameClock,
        settings: MotionSettings = DEFAULT_SETTINGS,
    ) -> None:
        """Initialize the animator.

        Parameters
        ----------
        surface:
            The animated view.  Held weakly; once it is collected or reports
            itself detached every operation becomes a no-op.
        axis:
            Accessor selecting the axis to drive.
        near_bound, far_bound:
            Limits the effective extent must not leave a gap against.
        max_scale:
            Upper limit of the surface scale factor.
        clock:
            Frame clock advancing the spring and fling.
        settings:
            Shared spring and fling constants.
        """
        if max_scale <= 0.0:
            raise ConfigurationError(f"max_scale must be > 0, got {max_scale!r}")
        if near_bound > far_bound:
            raise ConfigurationError(
                f"near_bound {near_bound!r} lies beyond far_bound {far_bound!r}"
            )
        self._surface_ref = weakref.ref(surface)
        self._axis = axis
        self._near_bound = float(near_bound)
        self._far_bound = float(far_bound)
        self._max_scale = float(max_scale)
        self._state = AxisState()

        self._mover = ImmediateMover(
            name=f"{axis.name}-move",
            clock=clock,
            read_value=self._read_position,
            write_value=self._write_position,
        )
        self._spring = SpringCorrector(
            name=f"{axis.name}-spring",
            clock=clock,
            read_value=self._read_position,
            write_value=self._write_position,
            settings=settings,
        )
        self._fling = MomentumFling(
            name=f"{axis.name}-fling",
            clock=clock,
            read_value=self._read_position,
            write_value=self._write_position,
            settings=settings,
        )

        self._spring.add_end_listener(partial(self._on_spring_end, self._state))
        self._fling_update_listener = partial(self._on_fling_update, self._state)
        self._fling_end_listener = partial(self._on_fling_end, self._state)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def axis(self) -> AxisAccessor:
        return self._axis

    @property
    def phase(self) -> MotionPhase:
        return self._state.phase

    @property
    def spring(self) -> SpringCorrector:
        return self._spring

    @property
    def momentum(self) -> MomentumFling:
        return self._fling

    def is_not_flinging(self) -> bool:
        """Return True unless a fling is in progress."""
        return not self._state.is_flinging

    def active_strategies(self) -> list[MotionStrategy]:
        """Return the strategies currently driving the surface."""
        return [
            strategy
            for strategy in (self._mover, self._spring, self._fling)
            if strategy.is_active()
        ]

    def move(self, delta: float) -> None:
        """Offset the surface by ``delta`` without animation."""
        current = self._read_position()
        self.cancel()
        if current is None:
            return
        self._state.phase = MotionPhase.DRAGGING
        self._mover.start(current + delta)

    def adjust(self, velocity: float = 0.0) -> float | None:
        """Spring the surface back if its effective extent leaves a gap.

        Returns
        -------
        float | None:
            The spring target when a correction was started, otherwise None.
        """
        surface = self._attached_surface()
        if surface is None:
            return None

        size = self._axis.get_extent(surface)
        rect, scale = effective_rect(
            surface.hit_rect(),
            surface.width(),
            surface.height(),
            surface.scale(),
            self._max_scale,
        )
        target = resting_position(
            self._axis.near_edge(rect),
            self._axis.far_edge(rect),
            near_bound=self._near_bound,
            far_bound=self._far_bound,
            size=size,
            effective_scale=scale,
        )
        if target is None:
            return None

        self.cancel()
        if self._spring.start(target, velocity):
            self._state.phase = MotionPhase.SPRING_CORRECTING
            _LOGGER.debug(
                "%s out of bounds, springing to %.2f (v=%.1f)",
                self._axis.name,
                target,
                velocity,
            )
        return target

    def fling(self, velocity: float) -> None:
        """Start momentum motion with the release ``velocity``."""
        self.cancel()
        if self._attached_surface() is None:
            return
        self._state.is_flinging = True
        self._state.phase = MotionPhase.FLINGING
        self._fling.add_update_listener(self._fling_update_listener)
        self._fling.add_end_listener(self._fling_end_listener)
        if not self._fling.start(velocity):
            self.cancel()

    def cancel(self) -> None:
        """Stop whichever strategy is active.  Idempotent."""
        self._state.is_flinging = False
        self._mover.cancel()
        self._spring.cancel()
        self._fling.cancel()
        self._fling.remove_update_listener(self._fling_update_listener)
        self._fling.remove_end_listener(self._fling_end_listener)
        self._state.phase = MotionPhase.IDLE

    # ------------------------------------------------------------------
    # Strategy callbacks
    # ------------------------------------------------------------------
    def _on_fling_update(self, state: AxisState, value: float, velocity: float) -> None:
        if state.is_flinging:
            self.adjust(velocity)

    @staticmethod
    def _on_fling_end(
        state: AxisState, canceled: bool, value: float, velocity: float
    ) -> None:
        state.is_flinging = False
        if state.phase is MotionPhase.FLINGING:
            state.phase = MotionPhase.IDLE

    @staticmethod
    def _on_spring_end(
        state: AxisState, canceled: bool, value: float, velocity: float
    ) -> None:
        if state.phase is MotionPhase.SPRING_CORRECTING:
            state.phase = MotionPhase.IDLE

    # ------------------------------------------------------------------
    # Surface access
    # ------------------------------------------------------------------
    def _attached_surface(self) -> Surface | None:
        surface = self._surface_ref()
        if surface is None or not surface.is_attached():
            return None
        return surface

    def _read_position(self) -> float | None:
        surface = self._attached_surface()
        if surface is None:
            return None
        return float(self._axis.get_position(surface))

    def _write_position(self, value: float) -> bool:
        surface = self._attached_surface()
        if surface is None:
            return False
        self._axis.set_position(surface, value)
        return True


def horizontal_animator(
    surface: Surface,
    *,
    left_bound: float,
    right_bound: float,
    max_scale: float,
    clock: FrameClock,
    settings: MotionSettings = DEFAULT_SETTINGS,
) -> BoundedAxisAnimator:
    """Create the animator that drives ``surface`` along the x axis."""
    return BoundedAxisAnimator(
        surface,
        HORIZONTAL,
        near_bound=left_bound,
        far_bound=right_bound,
        max_scale=max_scale,
        clock=clock,
        settings=settings,
    )


def vertical_animator(
    surface: Surface,
    *,
    top_bound: float,
    bottom_bound: float,
    max_scale: float,
    clock: FrameClock,
    settings: MotionSettings = DEFAULT_SETTINGS,
) -> BoundedAxisAnimator:
    """Create the animator that drives ``surface`` along the y axis."""
    return BoundedAxisAnimator(
        surface,
        VERTICAL,
        near_bound=top_bound,
        far_bound=bottom_bound,
        max_scale=max_scale,
        clock=clock,
        settings=settings,
    )
