"""Exceptions raised by camera framing and movement helpers."""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised synchronously when caller input is rejected before any camera write."""


class FramingError(ValidationError):
    """A frame or camera state cannot be resolved into a pose."""


class MovementSpeedError(ValidationError):
    """Movement speed argument is neither a finite number nor a callable."""


__all__ = ["FramingError", "MovementSpeedError", "ValidationError"]
