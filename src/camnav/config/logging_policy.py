from __future__ import annotations

"""Debug/logging policy for camera navigation.

Every verbose logging toggle consumed by the framing, controller and navigator
modules is materialised here as an immutable dataclass so the rest of the
package never reads ``os.environ`` directly.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


def _env_bool(env: Mapping[str, str], name: str, default: bool = False) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    if val in {"1", "true", "yes", "on"}:
        return True
    if val in {"0", "false", "no", "off"}:
        return False
    try:
        return bool(int(raw))
    except ValueError:
        return default


@dataclass(frozen=True)
class LoggingToggles:
    """Per-subsystem INFO logging flags."""

    log_transitions: bool = False
    log_speed: bool = False
    log_hit_test: bool = False
    log_flight: bool = False


@dataclass(frozen=True)
class DebugPolicy:
    """Composite debug/logging policy."""

    enabled: bool = False
    logging: LoggingToggles = LoggingToggles()


def load_debug_policy(env: Optional[Mapping[str, str]] = None) -> DebugPolicy:
    """Read debug/logging flags from the provided environment mapping.

    ``CAMNAV_DEBUG`` switches every category on unless a category flag is set
    explicitly.
    """

    if env is None:
        env = os.environ

    enabled = _env_bool(env, "CAMNAV_DEBUG", False)
    logging = LoggingToggles(
        log_transitions=_env_bool(env, "CAMNAV_LOG_TRANSITIONS", enabled),
        log_speed=_env_bool(env, "CAMNAV_LOG_SPEED", enabled),
        log_hit_test=_env_bool(env, "CAMNAV_LOG_HIT_TEST", enabled),
        log_flight=_env_bool(env, "CAMNAV_LOG_FLIGHT", enabled),
    )
    return DebugPolicy(enabled=enabled, logging=logging)


__all__ = ["DebugPolicy", "LoggingToggles", "load_debug_policy"]
