"""Keyboard-driven free-flight integrator.

Translates the camera along its own right/up/forward axes and rotates it
around them (pitch, yaw, roll). Rotations are composed with vispy's
quaternion helper, the same one its fly camera uses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

import numpy as np
from vispy.util.quaternion import Quaternion

from camnav.camera import OrientableCamera
from camnav.controls.events import EventHub, Listener
from camnav.geometry import Vector3


logger = logging.getLogger(__name__)


class FlightAction(str, Enum):
    FORWARD = "forward"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    PITCH_UP = "pitch_up"
    PITCH_DOWN = "pitch_down"
    YAW_LEFT = "yaw_left"
    YAW_RIGHT = "yaw_right"
    ROLL_LEFT = "roll_left"
    ROLL_RIGHT = "roll_right"


DEFAULT_KEY_BINDINGS: Mapping[str, FlightAction] = {
    "w": FlightAction.FORWARD,
    "s": FlightAction.BACK,
    "a": FlightAction.LEFT,
    "d": FlightAction.RIGHT,
    "r": FlightAction.UP,
    "f": FlightAction.DOWN,
    "up": FlightAction.PITCH_UP,
    "down": FlightAction.PITCH_DOWN,
    "left": FlightAction.YAW_LEFT,
    "right": FlightAction.YAW_RIGHT,
    "q": FlightAction.ROLL_LEFT,
    "e": FlightAction.ROLL_RIGHT,
}


def normalize_key(key: object) -> str:
    """``"ArrowUp"`` -> ``"up"``, ``"W"`` -> ``"w"``."""
    name = str(key).strip().lower()
    if name.startswith("arrow"):
        name = name[len("arrow"):]
    return name


@dataclass(frozen=True)
class FlightStep:
    """Pose change applied by one integrator update."""

    translation: Vector3
    rotation: tuple[float, float, float]  # pitch, yaw, roll in radians


class FlyIntegrator:
    """Applies held flight actions to an orientable camera each tick."""

    def __init__(
        self,
        camera: OrientableCamera,
        *,
        movement_speed: float = 1.0,
        roll_speed: float = 0.20,
        key_bindings: Optional[Mapping[str, FlightAction]] = None,
    ) -> None:
        self.camera = camera
        self.movement_speed = float(movement_speed)
        self.roll_speed = float(roll_speed)
        self.key_bindings = dict(key_bindings if key_bindings is not None else DEFAULT_KEY_BINDINGS)
        self._active: set[FlightAction] = set()
        self._events = EventHub()

    def on(self, name: str, callback: Listener) -> None:
        self._events.on(name, callback)

    def off(self, name: str, callback: Listener) -> None:
        self._events.off(name, callback)

    # ------------------------------------------------------------------
    @property
    def active_actions(self) -> frozenset[FlightAction]:
        return frozenset(self._active)

    def set_action(self, action: FlightAction, active: bool) -> None:
        if active:
            self._active.add(FlightAction(action))
        else:
            self._active.discard(FlightAction(action))

    def key_down(self, key: object) -> bool:
        """Activate the action bound to ``key``; return whether one was bound."""
        action = self.key_bindings.get(normalize_key(key))
        if action is None:
            return False
        self._active.add(action)
        return True

    def key_up(self, key: object) -> bool:
        action = self.key_bindings.get(normalize_key(key))
        if action is None:
            return False
        self._active.discard(action)
        return True

    def release_all(self) -> None:
        self._active.clear()

    # ------------------------------------------------------------------
    def _axis(self, positive: FlightAction, negative: FlightAction) -> float:
        return float(positive in self._active) - float(negative in self._active)

    def update(self, delta: float) -> Optional[FlightStep]:
        """Advance by ``delta`` seconds; fire ``move`` when the pose changed."""

        A = FlightAction
        move = (
            self._axis(A.RIGHT, A.LEFT),
            self._axis(A.UP, A.DOWN),
            self._axis(A.FORWARD, A.BACK),
        )
        rot = (
            self._axis(A.PITCH_UP, A.PITCH_DOWN),
            self._axis(A.YAW_LEFT, A.YAW_RIGHT),
            self._axis(A.ROLL_RIGHT, A.ROLL_LEFT),
        )
        if not any(move) and not any(rot):
            return None

        move_mult = float(delta) * self.movement_speed
        rot_mult = float(delta) * self.roll_speed

        forward = self.camera.get_forward().as_array()
        up = self.camera.get_up().as_array()
        right = np.cross(forward, up)

        translation = (right * move[0] + up * move[1] + forward * move[2]) * move_mult
        if any(move):
            position = self.camera.get_position().as_array() + translation
            self.camera.set_position(Vector3.from_array(position))

        angles = (rot[0] * rot_mult, rot[1] * rot_mult, rot[2] * rot_mult)
        if any(rot):
            q_pitch = Quaternion.create_from_axis_angle(angles[0], *right)
            q_yaw = Quaternion.create_from_axis_angle(angles[1], *up)
            q_roll = Quaternion.create_from_axis_angle(angles[2], *forward)
            q = q_roll * q_yaw * q_pitch
            new_forward = q.rotate_point(forward)
            new_up = q.rotate_point(up)
            self.camera.orient(
                Vector3(*(float(v) for v in new_forward)),
                Vector3(*(float(v) for v in new_up)),
            )

        step = FlightStep(translation=Vector3.from_array(translation), rotation=angles)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "flight step translation=%s rotation=%s",
                step.translation.as_tuple(),
                step.rotation,
            )
        self._events.fire("move", step)
        return step


__all__ = [
    "DEFAULT_KEY_BINDINGS",
    "FlightAction",
    "FlightStep",
    "FlyIntegrator",
    "normalize_key",
]
