"""
camnav: camera framing, transitions and free flight for 3D scenes.

The framing engine resolves target poses from declarative frames or explicit
camera states and animates a caller-owned camera toward them; the movement
controller drives free flight with context-dependent speed.
"""

from camnav.camera import CameraLike, OrientableCamera, PerspectiveCamera
from camnav.controls import MovementController
from camnav.errors import FramingError, MovementSpeedError, ValidationError
from camnav.framing import (
    CameraState,
    PlaneFrame,
    Pose,
    RadiusFrame,
    Transition,
    TransitionOptions,
    apply_pose,
    create_transition,
    create_transition_from_camera_state,
    fly_to,
    resolve_camera_state_pose,
    resolve_easing,
    resolve_frame_pose,
    resolve_pose,
    step_transition,
)
from camnav.geometry import Vector3
from camnav.navigator import CameraNavigator

__version__ = "0.1.0"

__all__ = [
    "CameraLike",
    "CameraNavigator",
    "CameraState",
    "FramingError",
    "MovementController",
    "MovementSpeedError",
    "OrientableCamera",
    "PerspectiveCamera",
    "PlaneFrame",
    "Pose",
    "RadiusFrame",
    "Transition",
    "TransitionOptions",
    "ValidationError",
    "Vector3",
    "__version__",
    "apply_pose",
    "create_transition",
    "create_transition_from_camera_state",
    "fly_to",
    "resolve_camera_state_pose",
    "resolve_easing",
    "resolve_frame_pose",
    "resolve_pose",
    "step_transition",
]
