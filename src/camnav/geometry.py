"""Vector value type and coercion helpers shared by framing and flight code.

Callers hand us points in whatever shape their scene uses: ``Vector3``
instances, objects exposing ``x/y/z`` attributes (renderer vectors), mappings
with ``x/y/z`` keys (JSON payloads) or plain length-3 sequences and numpy
arrays. Everything funnels through :func:`coerce_vector` so validation is
uniform and happens before any camera is touched.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional, Union

import numpy as np

from camnav.errors import FramingError

# Minimum length accepted for directions and plane normals.
EPSILON = 1e-8


@dataclass(frozen=True)
class Vector3:
    """Immutable 3D vector."""

    x: float
    y: float
    z: float

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scaled(self, factor: float) -> "Vector3":
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: Any) -> "Vector3":
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))


VectorLike = Union[Vector3, Mapping[str, float], Sequence[float], np.ndarray, Any]

ZERO = Vector3(0.0, 0.0, 0.0)
UNIT_Z = Vector3(0.0, 0.0, 1.0)


def _components(value: Any) -> Optional[tuple[Any, Any, Any]]:
    if isinstance(value, Vector3):
        return value.as_tuple()
    if isinstance(value, Mapping):
        if all(k in value for k in ("x", "y", "z")):
            return value["x"], value["y"], value["z"]
        return None
    if isinstance(value, np.ndarray):
        if value.shape != (3,):
            return None
        return value[0], value[1], value[2]
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if len(value) != 3:
            return None
        return value[0], value[1], value[2]
    if all(hasattr(value, k) for k in ("x", "y", "z")):
        return value.x, value.y, value.z
    return None


def _is_real(value: Any) -> bool:
    return isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool)


def coerce_vector(value: VectorLike, name: str) -> Vector3:
    """Return ``value`` as a finite :class:`Vector3` or raise :class:`FramingError`."""

    if value is None:
        raise FramingError(f"{name} is required")
    comps = _components(value)
    if comps is None or not all(_is_real(c) for c in comps):
        raise FramingError(f"{name} must be a 3D vector, got {value!r}")
    vec = Vector3(float(comps[0]), float(comps[1]), float(comps[2]))
    if not vec.is_finite():
        raise FramingError(f"{name} must be finite, got {vec.as_tuple()}")
    return vec


def normalized(vec: Vector3, name: str) -> Vector3:
    """Unit vector along ``vec``; zero-length input is rejected, never defaulted."""

    length = vec.length()
    if not math.isfinite(length) or length < EPSILON:
        raise FramingError(f"{name} must have non-zero length")
    return Vector3(vec.x / length, vec.y / length, vec.z / length)


def normalized_or(vec: Vector3, fallback: Vector3) -> Vector3:
    """Unit vector along ``vec``, or ``fallback`` when ``vec`` is degenerate."""

    length = vec.length()
    if not math.isfinite(length) or length == 0.0:
        return fallback
    return Vector3(vec.x / length, vec.y / length, vec.z / length)


def is_finite_number(value: Any) -> bool:
    return _is_real(value) and math.isfinite(float(value))


def lerp(start: float, stop: float, t: float) -> float:
    # weighted form: exact at t == 0 and t == 1
    return start * (1.0 - t) + stop * t


def lerp_vector(start: Vector3, stop: Vector3, t: float) -> Vector3:
    """Component-wise linear interpolation."""
    return Vector3(
        lerp(start.x, stop.x, t),
        lerp(start.y, stop.y, t),
        lerp(start.z, stop.z, t),
    )


__all__ = [
    "EPSILON",
    "UNIT_Z",
    "Vector3",
    "VectorLike",
    "ZERO",
    "coerce_vector",
    "is_finite_number",
    "lerp",
    "lerp_vector",
    "normalized",
    "normalized_or",
]
