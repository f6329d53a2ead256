"""
Pure geometry helpers for scale-aware boundary correction.

Nothing here touches a surface or an animation; the animator feeds in the
values it reads and acts on the result.
"""

from __future__ import annotations

from PySide6.QtCore import QRectF


def effective_rect(
    rect: QRectF,
    width: float,
    height: float,
    scale: float,
    max_scale: float,
) -> tuple[QRectF, float]:
    """Predict the on-screen rectangle once the scale settles into range.

    The legal scale range is ``[1, max_scale]``.  A surface that is
    currently over- or under-scaled will spring back into that range, so the
    boundary check must use the geometry it will have afterwards.

    Parameters
    ----------
    rect:
        Current on-screen rectangle of the surface.
    width, height:
        Unscaled size of the surface.
    scale:
        Current uniform scale factor.
    max_scale:
        Upper limit of the scale factor.

    Returns
    -------
    tuple[QRectF, float]
        The effective rectangle and the effective scale.
    """
    if scale > max_scale:
        ratio = max_scale / scale
        width_diff = (rect.width() - rect.width() * ratio) / 2.0
        height_diff = (rect.height() - rect.height() * ratio) / 2.0
        shrunk = rect.adjusted(width_diff, height_diff, -width_diff, -height_diff)
        return shrunk, max_scale
    if scale < 1.0:
        width_diff = (width - rect.width()) / 2.0
        height_diff = (height - rect.height()) / 2.0
        expanded = rect.adjusted(-width_diff, -height_diff, width_diff, height_diff)
        return expanded, 1.0
    return QRectF(rect), scale


def scaled_overhang(size: float, effective_scale: float) -> float:
    """Return the extent added on each side by scaling ``size`` about its centre."""
    return (size * effective_scale - size) / 2.0


def resting_position(
    near: float,
    far: float,
    *,
    near_bound: float,
    far_bound: float,
    size: float,
    effective_scale: float,
) -> float | None:
    """Return the position that closes a gap between the surface and its bounds.

    ``near``/``far`` are the effective rectangle's edges along the axis.  A
    near edge inside ``near_bound`` pulls the surface back so that its scaled
    near edge lands on ``near_bound``; a far edge short of ``far_bound`` pushes
    the scaled far edge onto ``far_bound``.  ``None`` means no correction is
    needed.
    """
    overhang = scaled_overhang(size, effective_scale)
    if near_bound < near:
        # scaled near edge = position - overhang
        return near_bound + overhang
    if far < far_bound:
        # scaled far edge = position + size + overhang
        return far_bound - size - overhang
    return None
