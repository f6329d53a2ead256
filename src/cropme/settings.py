"""Motion tuning shared by the animators of one crop surface."""

from __future__ import annotations

from dataclasses import dataclass

from . import config
from .errors import ConfigurationError


@dataclass(frozen=True)
class MotionSettings:
    """Physical constants for spring correction and momentum fling.

    A single instance is shared by the horizontal and vertical animators so
    both axes feel identical.  Values are validated on creation.
    """

    stiffness: float = config.SPRING_STIFFNESS
    damping_ratio: float = config.SPRING_DAMPING_RATIO
    friction: float = config.FLING_FRICTION
    min_visible_change: float = config.MIN_VISIBLE_CHANGE_PIXELS
    frame_interval_ms: int = config.FRAME_INTERVAL_MS

    def __post_init__(self) -> None:
        if self.stiffness <= 0.0:
            raise ConfigurationError(f"stiffness must be > 0, got {self.stiffness!r}")
        if self.damping_ratio <= 0.0:
            raise ConfigurationError(
                f"damping_ratio must be > 0, got {self.damping_ratio!r}"
            )
        if self.friction <= 0.0:
            raise ConfigurationError(f"friction must be > 0, got {self.friction!r}")
        if self.min_visible_change <= 0.0:
            raise ConfigurationError(
                f"min_visible_change must be > 0, got {self.min_visible_change!r}"
            )
        if self.frame_interval_ms <= 0:
            raise ConfigurationError(
                f"frame_interval_ms must be > 0, got {self.frame_interval_ms!r}"
            )

    @property
    def value_threshold(self) -> float:
        """Distance from the spring target considered at rest."""
        return self.min_visible_change * config.SPRING_THRESHOLD_MULTIPLIER

    @property
    def spring_velocity_threshold(self) -> float:
        """Speed below which a spring near its target is considered at rest."""
        return self.value_threshold * config.VELOCITY_THRESHOLD_MULTIPLIER

    @property
    def fling_velocity_threshold(self) -> float:
        """Speed below which a fling stops."""
        return self.min_visible_change * config.VELOCITY_THRESHOLD_MULTIPLIER


DEFAULT_SETTINGS = MotionSettings()
