"""Movement speed modes for free flight.

The speed source is an explicit tagged variant rather than a value whose type
is inspected on every tick: exactly one of :class:`FixedSpeed`,
:class:`ProviderSpeed` or :class:`AutoFitSpeed` is active at a time.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional, Union

from camnav.errors import MovementSpeedError
from camnav.geometry import is_finite_number

SpeedProvider = Callable[[Any], Any]


@dataclass(frozen=True)
class FixedSpeed:
    value: float


@dataclass(frozen=True)
class ProviderSpeed:
    """Speed recomputed every tick from the live camera."""

    provider: SpeedProvider


@dataclass(frozen=True)
class AutoFitSpeed:
    """Speed follows the scene radius reported through ``adjust_speed``."""

    factor: float = 0.1


SpeedMode = Union[FixedSpeed, ProviderSpeed, AutoFitSpeed]


def speed_mode_from_value(value: Any) -> SpeedMode:
    """Translate a caller-supplied speed argument into a speed mode."""

    if is_finite_number(value):
        return FixedSpeed(float(value))
    if callable(value):
        return ProviderSpeed(value)
    raise MovementSpeedError(
        f"movement speed should be a finite number or a function, got {value!r}"
    )


def provided_speed(mode: ProviderSpeed, camera: Any) -> Optional[float]:
    """Ask the provider for a speed; ``None`` when the answer is unusable."""

    candidate = mode.provider(camera)
    if is_finite_number(candidate):
        return float(candidate)
    return None


__all__ = [
    "AutoFitSpeed",
    "FixedSpeed",
    "ProviderSpeed",
    "SpeedMode",
    "SpeedProvider",
    "provided_speed",
    "speed_mode_from_value",
]
