"""
Boundary-constrained motion core for crop/pan widgets.

A draggable, scalable surface is kept inside fixed bounds using spring
return and momentum fling instead of abrupt jumps.
"""

from .animator import AxisState, BoundedAxisAnimator, MotionPhase
from .controller import CropMotionController
from .errors import ConfigurationError, CropmeError
from .settings import MotionSettings
from .surface import HORIZONTAL, VERTICAL, AxisAccessor, Surface, ViewSurface

__all__ = [
    "HORIZONTAL",
    "VERTICAL",
    "AxisAccessor",
    "AxisState",
    "BoundedAxisAnimator",
    "ConfigurationError",
    "CropMotionController",
    "CropmeError",
    "MotionPhase",
    "MotionSettings",
    "Surface",
    "ViewSurface",
]
