"""Camera framing: easing, pose resolution and transitions."""

from __future__ import annotations

from .easing import EasingFn, ease_in_out_cubic, linear, resolve_easing
from .pose import (
    CameraState,
    Frame,
    PlaneFrame,
    Pose,
    RadiusFrame,
    apply_pose,
    camera_state_from_payload,
    fly_to,
    fov_offset,
    frame_from_payload,
    resolve_camera_state_pose,
    resolve_frame_pose,
    resolve_pose,
    target_from_payload,
)
from .transition import (
    DEFAULT_DURATION_MS,
    Transition,
    TransitionOptions,
    create_transition,
    create_transition_from_camera_state,
    monotonic_ms,
    step_transition,
)

__all__ = [
    "CameraState",
    "DEFAULT_DURATION_MS",
    "EasingFn",
    "Frame",
    "PlaneFrame",
    "Pose",
    "RadiusFrame",
    "Transition",
    "TransitionOptions",
    "apply_pose",
    "camera_state_from_payload",
    "create_transition",
    "create_transition_from_camera_state",
    "ease_in_out_cubic",
    "fly_to",
    "fov_offset",
    "frame_from_payload",
    "linear",
    "monotonic_ms",
    "resolve_camera_state_pose",
    "resolve_easing",
    "resolve_frame_pose",
    "resolve_pose",
    "step_transition",
    "target_from_payload",
]
