"""Configuration dataclasses shared across the navigation package."""

from __future__ import annotations

from dataclasses import dataclass, field

from camnav.config.logging_policy import DebugPolicy


@dataclass(frozen=True)
class NavigationConfig:
    """Resolved tuning values for transitions and free flight."""

    default_duration_ms: float = 600.0
    roll_speed: float = 0.20
    tick_seconds: float = 0.1
    autofit_factor: float = 0.1
    initial_speed: float = 200.0
    debug_policy: DebugPolicy = field(default_factory=DebugPolicy)
