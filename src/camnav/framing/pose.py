"""Pose resolution for declarative frames and explicit camera states.

Resolution is a pure function of its inputs and the camera's current read
state: the camera is never written here, so a raised :class:`FramingError`
guarantees nothing was applied. :func:`apply_pose` and :func:`fly_to` are the
only helpers in this module that mutate a camera.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from camnav.camera import CameraLike
from camnav.errors import FramingError
from camnav.geometry import (
    EPSILON,
    UNIT_Z,
    Vector3,
    VectorLike,
    coerce_vector,
    is_finite_number,
    normalized,
    normalized_or,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RadiusFrame:
    """Frame a sphere of ``radius`` around ``center`` from ``direction``.

    Without a direction the camera keeps its current bearing relative to the
    center.
    """

    center: VectorLike
    radius: float
    direction: Optional[VectorLike] = None


@dataclass(frozen=True)
class PlaneFrame:
    """Place the camera on ``plane_normal`` through ``center``, looking back at it.

    Depth is taken from the first source present: ``final_z``, then
    ``distance_along_normal``, then ``radius`` (field-of-view fit).
    """

    center: VectorLike
    plane_normal: VectorLike
    final_z: Optional[float] = None
    distance_along_normal: Optional[float] = None
    radius: Optional[float] = None


@dataclass(frozen=True)
class CameraState:
    """Explicit camera placement with an optional aim point or direction."""

    position: VectorLike
    look_at: Optional[VectorLike] = None
    direction: Optional[VectorLike] = None


@dataclass(frozen=True)
class Pose:
    """Fully resolved camera placement."""

    position: Vector3
    look_at: Vector3


Frame = Union[RadiusFrame, PlaneFrame]
FramingTarget = Union[RadiusFrame, PlaneFrame, CameraState, Mapping[str, Any]]


# ---------------------------------------------------------------------------
# Payload parsing


def _pick(payload: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return None


def frame_from_payload(payload: Mapping[str, Any]) -> Frame:
    """Build a frame from a camelCase or snake_case mapping."""

    center = _pick(payload, "center")
    normal = _pick(payload, "planeNormal", "plane_normal")
    radius = _pick(payload, "radius")
    if normal is not None:
        return PlaneFrame(
            center=center,
            plane_normal=normal,
            final_z=_pick(payload, "finalZ", "final_z"),
            distance_along_normal=_pick(payload, "distanceAlongNormal", "distance_along_normal"),
            radius=radius,
        )
    return RadiusFrame(center=center, radius=radius, direction=_pick(payload, "direction"))


def camera_state_from_payload(payload: Mapping[str, Any]) -> CameraState:
    return CameraState(
        position=_pick(payload, "position"),
        look_at=_pick(payload, "lookAt", "look_at"),
        direction=_pick(payload, "direction"),
    )


def target_from_payload(payload: Mapping[str, Any]) -> Union[Frame, CameraState]:
    """Mappings carrying ``position`` are camera states, everything else a frame."""

    if _pick(payload, "position") is not None:
        return camera_state_from_payload(payload)
    return frame_from_payload(payload)


# ---------------------------------------------------------------------------
# Resolution


def fov_offset(camera: CameraLike, radius: float) -> float:
    """Distance at which a sphere of ``radius`` fills the vertical field of view."""

    half = math.tan(math.radians(float(camera.fov)) * 0.5)
    if not math.isfinite(half) or half <= 0.0:
        raise FramingError(f"camera fov must be in (0, 180) degrees, got {camera.fov!r}")
    offset = float(radius) / half
    if not math.isfinite(offset) or offset <= 0.0:
        raise FramingError(
            f"field-of-view offset is invalid (radius={radius!r}, fov={camera.fov!r})"
        )
    return offset


def _positive_radius(radius: Any, name: str = "radius") -> float:
    if not is_finite_number(radius) or float(radius) <= 0.0:
        raise FramingError(f"{name} must be a positive finite number, got {radius!r}")
    return float(radius)


def _resolve_radius_frame(camera: CameraLike, frame: RadiusFrame) -> Pose:
    center = coerce_vector(frame.center, "frame.center")
    radius = _positive_radius(frame.radius, "frame.radius")
    if frame.direction is not None:
        direction = normalized(coerce_vector(frame.direction, "frame.direction"), "frame.direction")
    else:
        direction = normalized_or(camera.get_position() - center, UNIT_Z)
    offset = fov_offset(camera, radius)
    return Pose(position=center + direction.scaled(offset), look_at=center)


def _resolve_plane_frame(camera: CameraLike, frame: PlaneFrame) -> Pose:
    center = coerce_vector(frame.center, "frame.center")
    normal = normalized(coerce_vector(frame.plane_normal, "frame.plane_normal"), "frame.plane_normal")

    if frame.final_z is not None:
        if not is_finite_number(frame.final_z):
            raise FramingError(f"frame.final_z must be finite, got {frame.final_z!r}")
        if abs(normal.z) < EPSILON:
            raise FramingError("frame.final_z requires a plane normal with a z component")
        final_z = float(frame.final_z)
        depth = (final_z - center.z) / normal.z
        if not math.isfinite(depth) or depth < 0.0:
            raise FramingError(
                f"frame.final_z={final_z} lies behind the plane (offset {depth})"
            )
        position = center + normal.scaled(depth)
        # pin z so the requested height is reproduced exactly
        return Pose(position=Vector3(position.x, position.y, final_z), look_at=center)

    if frame.distance_along_normal is not None:
        distance = frame.distance_along_normal
        if not is_finite_number(distance) or float(distance) < 0.0:
            raise FramingError(
                f"frame.distance_along_normal must be finite and non-negative, got {distance!r}"
            )
        depth = float(distance)
    elif frame.radius is not None:
        depth = fov_offset(camera, _positive_radius(frame.radius, "frame.radius"))
    else:
        raise FramingError(
            "plane-locked frame needs one of final_z, distance_along_normal or radius"
        )

    return Pose(position=center + normal.scaled(depth), look_at=center)


def resolve_frame_pose(camera: CameraLike, frame: Union[Frame, Mapping[str, Any]]) -> Pose:
    """Resolve a radius or plane-locked frame against the camera's projection."""

    if isinstance(frame, Mapping):
        frame = frame_from_payload(frame)
    if isinstance(frame, PlaneFrame):
        return _resolve_plane_frame(camera, frame)
    if isinstance(frame, RadiusFrame):
        return _resolve_radius_frame(camera, frame)
    raise FramingError(f"unsupported frame type: {type(frame).__name__}")


def resolve_camera_state_pose(
    camera: CameraLike, state: Union[CameraState, Mapping[str, Any]]
) -> Pose:
    """Resolve an explicit camera state; orientation is preserved when unspecified."""

    if isinstance(state, Mapping):
        state = camera_state_from_payload(state)
    position = coerce_vector(state.position, "state.position")
    if state.look_at is not None:
        look_at = coerce_vector(state.look_at, "state.look_at")
    elif state.direction is not None:
        direction = normalized(coerce_vector(state.direction, "state.direction"), "state.direction")
        look_at = position + direction
    else:
        look_at = position + camera.get_forward()
    return Pose(position=position, look_at=look_at)


def resolve_pose(camera: CameraLike, target: FramingTarget) -> Pose:
    """Resolve any framing target (frame, camera state or payload mapping)."""

    if isinstance(target, Mapping):
        target = target_from_payload(target)
    if isinstance(target, CameraState):
        return resolve_camera_state_pose(camera, target)
    return resolve_frame_pose(camera, target)


# ---------------------------------------------------------------------------
# Instant application


def apply_pose(camera: CameraLike, pose: Pose) -> None:
    camera.set_position(pose.position)
    camera.look_at(pose.look_at)


def fly_to(
    camera: CameraLike,
    center: VectorLike,
    radius: float,
    direction: Optional[VectorLike] = None,
) -> Pose:
    """Frame ``center`` at ``radius`` immediately, without animation."""

    pose = resolve_frame_pose(camera, RadiusFrame(center=center, radius=radius, direction=direction))
    apply_pose(camera, pose)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "fly_to center=%s radius=%.3f -> position=%s",
            pose.look_at.as_tuple(),
            float(radius),
            pose.position.as_tuple(),
        )
    return pose


__all__ = [
    "CameraState",
    "Frame",
    "FramingTarget",
    "PlaneFrame",
    "Pose",
    "RadiusFrame",
    "apply_pose",
    "camera_state_from_payload",
    "fly_to",
    "fov_offset",
    "frame_from_payload",
    "resolve_camera_state_pose",
    "resolve_frame_pose",
    "resolve_pose",
    "target_from_payload",
]
