"""Camera contract consumed by the framing and flight helpers.

The engine never owns a camera. Callers hand in any object satisfying
:class:`CameraLike` (free flight additionally needs :class:`OrientableCamera`)
and the helpers mutate it in place. :class:`PerspectiveCamera` is a small
numpy-backed implementation used by the navigator demo and the tests.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, runtime_checkable

import numpy as np

from camnav.geometry import EPSILON, Vector3, VectorLike, coerce_vector


logger = logging.getLogger(__name__)


@runtime_checkable
class CameraLike(Protocol):
    """Minimal camera surface required by pose resolution and transitions."""

    fov: float
    aspect: float
    near: float
    far: float

    def get_position(self) -> Vector3:
        ...

    def set_position(self, position: Vector3) -> None:
        ...

    def get_forward(self) -> Vector3:
        ...

    def look_at(self, target: Vector3) -> None:
        ...


@runtime_checkable
class OrientableCamera(CameraLike, Protocol):
    """Camera whose full orientation (forward + up) can be read and written."""

    def get_up(self) -> Vector3:
        ...

    def orient(self, forward: Vector3, up: Vector3) -> None:
        ...


_WORLD_UP = np.array([0.0, 1.0, 0.0])


def _unit(vec: np.ndarray) -> Optional[np.ndarray]:
    norm = float(np.linalg.norm(vec))
    if not np.isfinite(norm) or norm < EPSILON:
        return None
    return vec / norm


def _orthonormal_up(forward: np.ndarray, preferred: np.ndarray) -> np.ndarray:
    right = _unit(np.cross(forward, preferred))
    if right is None:
        # forward is parallel to the preferred up; any perpendicular will do
        alt = np.array([0.0, 0.0, 1.0]) if abs(forward[2]) < 0.9 else np.array([1.0, 0.0, 0.0])
        right = _unit(np.cross(forward, alt))
        assert right is not None
    return np.cross(right, forward)


class PerspectiveCamera:
    """Perspective camera storing position and an orthonormal forward/up frame.

    Defaults mirror a typical WebGL perspective camera: looking down ``-Z``
    with ``+Y`` up, 75 degree vertical field of view.
    """

    def __init__(
        self,
        fov: float = 75.0,
        aspect: float = 1.0,
        near: float = 0.1,
        far: float = 1000.0,
        *,
        position: VectorLike = (0.0, 0.0, 0.0),
    ) -> None:
        self.fov = float(fov)
        self.aspect = float(aspect)
        self.near = float(near)
        self.far = float(far)
        self._position = coerce_vector(position, "position").as_array()
        self._forward = np.array([0.0, 0.0, -1.0])
        self._up = _WORLD_UP.copy()

    def __repr__(self) -> str:
        pos = tuple(round(float(v), 4) for v in self._position)
        fwd = tuple(round(float(v), 4) for v in self._forward)
        return f"PerspectiveCamera(fov={self.fov}, position={pos}, forward={fwd})"

    # ------------------------------------------------------------------
    def get_position(self) -> Vector3:
        return Vector3.from_array(self._position)

    def set_position(self, position: VectorLike) -> None:
        self._position = coerce_vector(position, "position").as_array()

    def get_forward(self) -> Vector3:
        return Vector3.from_array(self._forward)

    def get_up(self) -> Vector3:
        return Vector3.from_array(self._up)

    def get_right(self) -> Vector3:
        return Vector3.from_array(np.cross(self._forward, self._up))

    def look_at(self, target: VectorLike) -> None:
        """Aim at ``target`` keeping world ``+Y`` as the preferred up axis."""

        point = coerce_vector(target, "target").as_array()
        forward = _unit(point - self._position)
        if forward is None:
            # target coincides with the camera; orientation is undefined
            logger.debug("look_at ignored: target coincides with camera position")
            return
        self._forward = forward
        self._up = _orthonormal_up(forward, _WORLD_UP)

    def orient(self, forward: VectorLike, up: VectorLike) -> None:
        fwd = _unit(coerce_vector(forward, "forward").as_array())
        if fwd is None:
            raise ValueError("forward must have non-zero length")
        self._forward = fwd
        self._up = _orthonormal_up(fwd, coerce_vector(up, "up").as_array())

    # ------------------------------------------------------------------
    def view_matrix(self) -> np.ndarray:
        right = np.cross(self._forward, self._up)
        mat = np.identity(4, dtype=np.float64)
        mat[0, :3] = right
        mat[1, :3] = self._up
        mat[2, :3] = -self._forward
        mat[:3, 3] = -mat[:3, :3] @ self._position
        return mat


__all__ = ["CameraLike", "OrientableCamera", "PerspectiveCamera"]
