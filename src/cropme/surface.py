"""
Animated surface abstraction and per-axis accessors.

The view layer owns the surface; the motion core only reads its size, scale
and on-screen rectangle and writes its position.  ``AxisAccessor`` lets one
animator implementation drive either axis.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from PySide6.QtCore import QRectF


class Surface(Protocol):
    """Interface the motion core expects from the animated view."""

    def x(self) -> float: ...

    def y(self) -> float: ...

    def set_x(self, value: float) -> None: ...

    def set_y(self, value: float) -> None: ...

    def width(self) -> float: ...

    def height(self) -> float: ...

    def scale(self) -> float: ...

    def hit_rect(self) -> QRectF: ...

    def is_attached(self) -> bool: ...


class ViewSurface:
    """In-memory surface positioned by its unscaled top-left corner.

    The scale factor is applied uniformly around the surface centre, so the
    on-screen rectangle returned by :meth:`hit_rect` grows and shrinks
    symmetrically while ``x``/``y`` stay put.

    Parameters
    ----------
    width, height:
        Unscaled size of the surface.
    x, y:
        Initial position of the unscaled top-left corner.
    scale:
        Initial uniform scale factor.
    on_changed:
        Optional callback invoked after every position write with ``(x, y)``.
    """

    def __init__(
        self,
        width: float,
        height: float,
        *,
        x: float = 0.0,
        y: float = 0.0,
        scale: float = 1.0,
        on_changed: Callable[[float, float], None] | None = None,
    ) -> None:
        self._width = float(width)
        self._height = float(height)
        self._x = float(x)
        self._y = float(y)
        self._scale = float(scale)
        self._on_changed = on_changed
        self._attached = True

    def x(self) -> float:
        return self._x

    def y(self) -> float:
        return self._y

    def set_x(self, value: float) -> None:
        self._x = float(value)
        self._notify()

    def set_y(self, value: float) -> None:
        self._y = float(value)
        self._notify()

    def width(self) -> float:
        return self._width

    def height(self) -> float:
        return self._height

    def scale(self) -> float:
        return self._scale

    def set_scale(self, value: float) -> None:
        self._scale = float(value)

    def hit_rect(self) -> QRectF:
        """Return the on-screen rectangle, scaled about the surface centre."""
        scaled_w = self._width * self._scale
        scaled_h = self._height * self._scale
        left = self._x + (self._width - scaled_w) / 2.0
        top = self._y + (self._height - scaled_h) / 2.0
        return QRectF(left, top, scaled_w, scaled_h)

    def is_attached(self) -> bool:
        return self._attached

    def detach(self) -> None:
        """Mark the surface as removed from its host view."""
        self._attached = False

    def _notify(self) -> None:
        if self._on_changed is not None:
            self._on_changed(self._x, self._y)


@dataclass(frozen=True)
class AxisAccessor:
    """Binds the generic animator to one axis of a :class:`Surface`."""

    name: str
    get_position: Callable[[Surface], float]
    set_position: Callable[[Surface, float], None]
    get_extent: Callable[[Surface], float]
    near_edge: Callable[[QRectF], float]
    far_edge: Callable[[QRectF], float]


HORIZONTAL = AxisAccessor(
    name="horizontal",
    get_position=lambda surface: surface.x(),
    set_position=lambda surface, value: surface.set_x(value),
    get_extent=lambda surface: surface.width(),
    near_edge=lambda rect: rect.left(),
    far_edge=lambda rect: rect.right(),
)

VERTICAL = AxisAccessor(
    name="vertical",
    get_position=lambda surface: surface.y(),
    set_position=lambda surface, value: surface.set_y(value),
    get_extent=lambda surface: surface.height(),
    near_edge=lambda rect: rect.top(),
    far_edge=lambda rect: rect.bottom(),
)
