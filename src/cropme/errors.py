"""Custom exception hierarchy for cropme."""

from __future__ import annotations


class CropmeError(Exception):
    """Base class for all custom errors raised by cropme."""


class ConfigurationError(CropmeError):
    """Raised when bounds, scale limits or motion constants are degenerate."""
