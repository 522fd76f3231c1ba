"""Free-flight movement: speed modes, integrator and input controller."""

from __future__ import annotations

from .events import EventHub
from .fly import DEFAULT_KEY_BINDINGS, FlightAction, FlightStep, FlyIntegrator
from .input import HIT_TEST_EVENTS, MovementController
from .speed import (
    AutoFitSpeed,
    FixedSpeed,
    ProviderSpeed,
    SpeedMode,
    speed_mode_from_value,
)

__all__ = [
    "AutoFitSpeed",
    "DEFAULT_KEY_BINDINGS",
    "EventHub",
    "FixedSpeed",
    "FlightAction",
    "FlightStep",
    "FlyIntegrator",
    "HIT_TEST_EVENTS",
    "MovementController",
    "ProviderSpeed",
    "SpeedMode",
    "speed_mode_from_value",
]
