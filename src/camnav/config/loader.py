"""Environment loader for :class:`NavigationConfig`.

Scalar knobs come from individual ``CAMNAV_*`` variables; ``CAMNAV_CONFIG``
may carry a JSON object whose keys override the dataclass fields. Malformed
values are logged and replaced by defaults rather than raised, so a bad
environment never prevents the camera from working.
"""

from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import fields, replace
from typing import Mapping, Optional

from camnav.config.logging_policy import load_debug_policy
from camnav.config.models import NavigationConfig


logger = logging.getLogger(__name__)


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    v = env.get(name)
    if v is None or v.strip() == "":
        return float(default)
    try:
        value = float(v)
    except ValueError:
        logger.warning("%s=%r is not a number; using %s", name, v, default)
        return float(default)
    if not math.isfinite(value):
        logger.warning("%s=%r is not finite; using %s", name, v, default)
        return float(default)
    return value


def _cfg_float(value: object, default: float) -> float:
    if value is None or isinstance(value, bool):
        return float(default)
    if isinstance(value, (int, float)):
        out = float(value)
    elif isinstance(value, str):
        try:
            out = float(value.strip())
        except ValueError:
            return float(default)
    else:
        return float(default)
    return out if math.isfinite(out) else float(default)


def _load_json_config(env: Mapping[str, str], name: str) -> dict[str, object]:
    raw = env.get(name)
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        logger.warning("Failed to parse %s; ignoring", name, exc_info=True)
        return {}
    if isinstance(data, dict):
        return data
    logger.warning("%s must be a JSON object; ignoring", name)
    return {}


_FLOAT_FIELDS = {
    "default_duration_ms": "CAMNAV_TRANSITION_MS",
    "roll_speed": "CAMNAV_ROLL_SPEED",
    "tick_seconds": "CAMNAV_TICK_SECONDS",
    "autofit_factor": "CAMNAV_AUTOFIT_FACTOR",
    "initial_speed": "CAMNAV_INITIAL_SPEED",
}


def load_navigation_config(env: Optional[Mapping[str, str]] = None) -> NavigationConfig:
    """Resolve the navigation config from ``env`` (defaults to ``os.environ``)."""

    if env is None:
        env = os.environ

    base = NavigationConfig()
    values: dict[str, float] = {}
    for attr, var in _FLOAT_FIELDS.items():
        values[attr] = _env_float(env, var, getattr(base, attr))

    bundle = _load_json_config(env, "CAMNAV_CONFIG")
    known = {f.name for f in fields(NavigationConfig)}
    for key, raw in bundle.items():
        if key in _FLOAT_FIELDS:
            values[key] = _cfg_float(raw, values[key])
        elif key not in known:
            logger.warning("CAMNAV_CONFIG: unknown key %r ignored", key)

    values["default_duration_ms"] = max(0.0, values["default_duration_ms"])

    cfg = replace(base, debug_policy=load_debug_policy(env), **values)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("navigation config resolved: %s", cfg)
    return cfg


__all__ = ["load_navigation_config"]
