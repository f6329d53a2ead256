"""Default motion constants for cropme."""

from __future__ import annotations

from typing import Final

# ---------------------------------------------------------------------------
# Frame scheduling
# ---------------------------------------------------------------------------

# Interval of the timer that drives in-flight animations.  Sixteen
# milliseconds matches a 60 Hz display refresh.
FRAME_INTERVAL_MS: Final[int] = 16

# ---------------------------------------------------------------------------
# Spring correction
# ---------------------------------------------------------------------------

SPRING_STIFFNESS: Final[float] = 1500.0
SPRING_DAMPING_RATIO: Final[float] = 1.0

# ---------------------------------------------------------------------------
# Momentum fling
# ---------------------------------------------------------------------------

FLING_FRICTION: Final[float] = 1.75
# Multiplied with ``FLING_FRICTION`` to obtain the exponential decay rate per
# second of the fling velocity.
FLING_FRICTION_SCALE: Final[float] = -4.2

# ---------------------------------------------------------------------------
# Rest detection
# ---------------------------------------------------------------------------

# Smallest positional change a user can see, in pixels.  Both the spring
# and the fling derive their stop thresholds from this value.
MIN_VISIBLE_CHANGE_PIXELS: Final[float] = 1.0
SPRING_THRESHOLD_MULTIPLIER: Final[float] = 0.75
VELOCITY_THRESHOLD_MULTIPLIER: Final[float] = 1000.0 / 16.0
