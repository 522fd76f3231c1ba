"""Time-driven camera transitions.

A :class:`Transition` is an immutable record pairing the camera's start pose
with a resolved target pose. The owning frame loop calls
:func:`step_transition` once per rendered frame with its own clock reading;
nothing here keeps timers or references to the transition, so replaying the
same ``now`` sequence reproduces the same camera path.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from camnav.camera import CameraLike
from camnav.framing.easing import EasingFn, resolve_easing
from camnav.framing.pose import (
    CameraState,
    FramingTarget,
    Pose,
    resolve_camera_state_pose,
    resolve_pose,
)
from camnav.geometry import Vector3, is_finite_number, lerp_vector


logger = logging.getLogger(__name__)

DEFAULT_DURATION_MS = 600.0


def monotonic_ms() -> float:
    """Default time source for transitions, in milliseconds."""
    return time.monotonic() * 1000.0


@dataclass(frozen=True)
class TransitionOptions:
    duration_ms: float = DEFAULT_DURATION_MS
    easing: Any = None


OptionsLike = Union[TransitionOptions, Mapping[str, Any], None]


@dataclass(frozen=True)
class Transition:
    """Start/target poses plus timing for one animated camera move."""

    start_position: Vector3
    target_position: Vector3
    start_look_at: Vector3
    target_look_at: Vector3
    started_at: float
    duration_ms: float
    easing: EasingFn

    @property
    def target_pose(self) -> Pose:
        return Pose(position=self.target_position, look_at=self.target_look_at)

    def progress(self, now: float) -> float:
        """Linear progress in ``[0, 1]`` at time ``now``."""

        if self.duration_ms == 0:
            return 1.0
        value = (float(now) - self.started_at) / self.duration_ms
        if math.isnan(value) or value < 0.0:
            return 0.0
        if value > 1.0:
            return 1.0
        return value


def _duration_from(options: OptionsLike, default: float) -> float:
    raw: Any = None
    if isinstance(options, TransitionOptions):
        raw = options.duration_ms
    elif isinstance(options, Mapping):
        raw = options.get("durationMs", options.get("duration_ms"))
    if not is_finite_number(raw):
        raw = default
    return max(0.0, float(raw))


def _easing_from(options: OptionsLike) -> EasingFn:
    if isinstance(options, TransitionOptions):
        return resolve_easing(options.easing)
    if isinstance(options, Mapping):
        return resolve_easing(options.get("easing"))
    return resolve_easing(None)


def _build_transition(
    camera: CameraLike,
    target: Pose,
    options: OptionsLike,
    now: Optional[float],
) -> Transition:
    start_position = camera.get_position()
    # engine works in look-at terms: synthesize a point one unit ahead
    start_look_at = start_position + camera.get_forward()
    transition = Transition(
        start_position=start_position,
        target_position=target.position,
        start_look_at=start_look_at,
        target_look_at=target.look_at,
        started_at=float(now) if now is not None else monotonic_ms(),
        duration_ms=_duration_from(options, DEFAULT_DURATION_MS),
        easing=_easing_from(options),
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "transition created start=%s target=%s look_at=%s duration_ms=%.1f",
            start_position.as_tuple(),
            target.position.as_tuple(),
            target.look_at.as_tuple(),
            transition.duration_ms,
        )
    return transition


def create_transition(
    camera: CameraLike,
    target: FramingTarget,
    options: OptionsLike = None,
    now: Optional[float] = None,
) -> Transition:
    """Create a transition from the camera's current pose to ``target``.

    ``target`` may be a frame, a camera state or a payload mapping of either.
    Validation errors propagate before anything is captured or written.
    """

    pose = resolve_pose(camera, target)
    return _build_transition(camera, pose, options, now)


def create_transition_from_camera_state(
    camera: CameraLike,
    state: Union[CameraState, Mapping[str, Any]],
    options: OptionsLike = None,
    now: Optional[float] = None,
) -> Transition:
    pose = resolve_camera_state_pose(camera, state)
    return _build_transition(camera, pose, options, now)


def step_transition(camera: CameraLike, transition: Transition, now: float) -> bool:
    """Advance ``camera`` along ``transition`` at time ``now``; return completion.

    Position and look-at point are interpolated independently per axis with
    ``easing(progress)`` and the camera is re-aimed at the interpolated look-at
    point. The easing runs on every step, the final one included; the built-in
    easings return exactly 1 there, which lands the camera on the target pose.
    """

    progress = transition.progress(now)
    eased = float(transition.easing(progress))
    position = lerp_vector(transition.start_position, transition.target_position, eased)
    look_at = lerp_vector(transition.start_look_at, transition.target_look_at, eased)

    camera.set_position(position)
    camera.look_at(look_at)
    return progress >= 1.0


__all__ = [
    "DEFAULT_DURATION_MS",
    "Transition",
    "TransitionOptions",
    "create_transition",
    "create_transition_from_camera_state",
    "monotonic_ms",
    "step_transition",
]
