"""
Two-axis motion controller for a crop surface.

This module acts as the coordinator between the gesture layer and the two
independent axis animators.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QRectF

from .animation import FrameClock
from .animator import BoundedAxisAnimator, MotionPhase, horizontal_animator, vertical_animator
from .settings import DEFAULT_SETTINGS, MotionSettings
from .surface import Surface

_LOGGER = logging.getLogger(__name__)


class CropMotionController:
    """Drives a surface so that it always covers the crop frame."""

    def __init__(
        self,
        surface: Surface,
        *,
        frame: QRectF,
        max_scale: float,
        clock: FrameClock,
        settings: MotionSettings = DEFAULT_SETTINGS,
    ) -> None:
        """Initialize the controller.

        Parameters
        ----------
        surface:
            The animated view.
        frame:
            Crop frame in view coordinates; its edges are the axis bounds.
        max_scale:
            Upper limit of the surface scale factor.
        clock:
            Frame clock shared by both axes.
        settings:
            Shared spring and fling constants.
        """
        self._frame = QRectF(frame)
        self._horizontal = horizontal_animator(
            surface,
            left_bound=frame.left(),
            right_bound=frame.right(),
            max_scale=max_scale,
            clock=clock,
            settings=settings,
        )
        self._vertical = vertical_animator(
            surface,
            top_bound=frame.top(),
            bottom_bound=frame.bottom(),
            max_scale=max_scale,
            clock=clock,
            settings=settings,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def frame(self) -> QRectF:
        return QRectF(self._frame)

    @property
    def horizontal(self) -> BoundedAxisAnimator:
        return self._horizontal

    @property
    def vertical(self) -> BoundedAxisAnimator:
        return self._vertical

    def drag(self, dx: float, dy: float) -> None:
        """Track a drag step of ``(dx, dy)``."""
        self._horizontal.move(dx)
        self._vertical.move(dy)

    def fling(self, vx: float, vy: float) -> None:
        """Hand the release velocity of a drag over to momentum motion."""
        _LOGGER.debug("Fling released with v=(%.1f, %.1f)", vx, vy)
        self._horizontal.fling(vx)
        self._vertical.fling(vy)

    def release(self) -> None:
        """Settle the surface after a drag that ended without a fling."""
        if self._horizontal.is_not_flinging():
            self._horizontal.adjust(0.0)
        if self._vertical.is_not_flinging():
            self._vertical.adjust(0.0)

    def is_not_flinging(self) -> bool:
        """Return True when neither axis is flinging."""
        return self._horizontal.is_not_flinging() and self._vertical.is_not_flinging()

    def is_idle(self) -> bool:
        """Return True when no motion is in progress on either axis."""
        return not (
            self._horizontal.active_strategies() or self._vertical.active_strategies()
        )

    def phases(self) -> tuple[MotionPhase, MotionPhase]:
        """Return the ``(horizontal, vertical)`` motion phases."""
        return self._horizontal.phase, self._vertical.phase

    def cancel(self) -> None:
        """Stop all motion on both axes."""
        self._horizontal.cancel()
        self._vertical.cancel()
