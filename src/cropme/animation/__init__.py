"""
Motion strategies for the boundary-constrained animators.

Each strategy drives one scalar surface property: an immediate jump, a
damped spring towards a target, or a decelerating fling.
"""

from .abstract import MotionStrategy
from .fling import DragForce, MomentumFling
from .frame_clock import FrameClock, TimerFrameClock
from .immediate import ImmediateMover
from .spring import SpringCorrector, SpringForce

__all__ = [
    "DragForce",
    "FrameClock",
    "ImmediateMover",
    "MomentumFling",
    "MotionStrategy",
    "SpringCorrector",
    "SpringForce",
    "TimerFrameClock",
]
