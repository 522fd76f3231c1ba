"""Frame-loop glue between transitions and free flight.

The navigator keeps at most one active :class:`Transition` for its camera and
guarantees a single writer per tick: while a transition is in flight
``tick()`` steps it, otherwise the movement controller updates free flight.
Requesting a new transition simply replaces the previous one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Mapping
from typing import Any, Optional

from camnav.camera import CameraLike
from camnav.config.models import NavigationConfig
from camnav.controls.events import EventHub, Listener
from camnav.controls.input import MovementController
from camnav.errors import FramingError
from camnav.framing.pose import CameraState, FramingTarget, PlaneFrame, RadiusFrame
from camnav.framing.transition import (
    OptionsLike,
    Transition,
    TransitionOptions,
    create_transition,
    create_transition_from_camera_state,
    monotonic_ms,
    step_transition,
)
from camnav.interfaces import SceneBoundsProvider


logger = logging.getLogger(__name__)

CameraHook = Callable[[CameraLike], None]


def _option(options: Optional[Mapping[str, Any]], *keys: str) -> Any:
    if not options:
        return None
    for key in keys:
        if options.get(key) is not None:
            return options[key]
    return None


class CameraNavigator:
    """Drives one camera from transitions or free flight, one writer per tick."""

    def __init__(
        self,
        camera: CameraLike,
        controller: Optional[MovementController] = None,
        *,
        bounds: Optional[SceneBoundsProvider] = None,
        config: Optional[NavigationConfig] = None,
        clock: Optional[Callable[[], float]] = None,
        on_camera_change: Optional[CameraHook] = None,
    ) -> None:
        self.camera = camera
        self.controller = controller
        self.bounds = bounds
        self.config = config if config is not None else NavigationConfig()
        self._clock = clock if clock is not None else monotonic_ms
        self._on_camera_change = on_camera_change
        self._transition: Optional[Transition] = None
        self._log = self.config.debug_policy.logging
        self.events = EventHub()

    def on(self, name: str, callback: Listener) -> None:
        self.events.on(name, callback)

    def off(self, name: str, callback: Listener) -> None:
        self.events.off(name, callback)

    @property
    def transition(self) -> Optional[Transition]:
        return self._transition

    @property
    def is_animating(self) -> bool:
        return self._transition is not None

    # ------------------------------------------------------------------
    def _with_default_duration(self, options: OptionsLike) -> OptionsLike:
        default = self.config.default_duration_ms
        if options is None:
            return TransitionOptions(duration_ms=default)
        if isinstance(options, Mapping) and _option(options, "durationMs", "duration_ms") is None:
            merged = dict(options)
            merged["durationMs"] = default
            return merged
        return options

    def _start(self, transition: Transition, kind: str) -> Transition:
        if self._transition is not None and logger.isEnabledFor(logging.DEBUG):
            logger.debug("replacing in-flight transition")
        self._transition = transition
        if self._log.log_transitions and logger.isEnabledFor(logging.INFO):
            logger.info(
                "%s transition start=%s target=%s duration_ms=%.1f",
                kind,
                transition.start_position.as_tuple(),
                transition.target_position.as_tuple(),
                transition.duration_ms,
            )
        return transition

    def fly_to_position(
        self,
        frame: FramingTarget,
        options: OptionsLike = None,
        now: Optional[float] = None,
    ) -> Transition:
        """Animate toward a frame (or any framing target)."""

        opts = self._with_default_duration(options)
        start = self._clock() if now is None else now
        return self._start(create_transition(self.camera, frame, opts, start), "frame")

    def fly_camera_to(
        self,
        state: CameraState | Mapping[str, Any],
        options: OptionsLike = None,
        now: Optional[float] = None,
    ) -> Transition:
        """Animate toward an explicit camera position/orientation."""

        opts = self._with_default_duration(options)
        start = self._clock() if now is None else now
        transition = create_transition_from_camera_state(self.camera, state, opts, start)
        return self._start(transition, "camera-state")

    def show_node(
        self,
        node_id: Hashable,
        radius: float,
        options: Optional[Mapping[str, Any]] = None,
        now: Optional[float] = None,
    ) -> Transition:
        """Frame a scene node; ``plane_normal`` in ``options`` locks the view plane."""

        if self.bounds is None:
            raise FramingError("show_node requires a scene bounds provider")
        center = self.bounds.node_position(node_id)
        if center is None:
            raise FramingError(f"unknown node {node_id!r}")

        normal = _option(options, "planeNormal", "plane_normal")
        if normal is not None:
            frame: FramingTarget = PlaneFrame(
                center=center,
                plane_normal=normal,
                final_z=_option(options, "finalZ", "final_z"),
                distance_along_normal=_option(options, "distanceAlongNormal", "distance_along_normal"),
                radius=radius,
            )
        else:
            frame = RadiusFrame(center=center, radius=radius, direction=_option(options, "direction"))
        return self.fly_to_position(frame, options, now)

    def fit_to_view(
        self,
        options: OptionsLike = None,
        *,
        plane_normal: Any = None,
        final_z: Optional[float] = None,
        min_radius: float = 0.0,
        now: Optional[float] = None,
    ) -> Transition:
        """Frame the whole scene bounding sphere and retune auto-fit speed."""

        if self.bounds is None:
            raise FramingError("fit_to_view requires a scene bounds provider")
        sphere = self.bounds.bounding_sphere()
        radius = max(float(min_radius), float(sphere.radius))
        if plane_normal is not None:
            frame: FramingTarget = PlaneFrame(
                center=sphere.center,
                plane_normal=plane_normal,
                final_z=final_z,
                radius=radius,
            )
        else:
            frame = RadiusFrame(center=sphere.center, radius=radius)
        transition = self.fly_to_position(frame, options, now)
        if self.controller is not None:
            self.controller.adjust_speed(sphere.radius)
        return transition

    def cancel(self) -> None:
        """Abandon the in-flight transition, leaving the camera where it is."""
        self._transition = None

    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """Advance one frame; return whether a transition is still running."""

        if self._transition is not None:
            current = self._clock() if now is None else now
            done = step_transition(self.camera, self._transition, current)
            if done:
                if self._log.log_transitions and logger.isEnabledFor(logging.INFO):
                    logger.info(
                        "transition complete at %s",
                        self._transition.target_position.as_tuple(),
                    )
                self._transition = None
            self._camera_changed()
        elif self.controller is not None:
            if self.controller.update() is not None:
                self._camera_changed()
        return self._transition is not None

    def _camera_changed(self) -> None:
        if self._on_camera_change is not None:
            self._on_camera_change(self.camera)
        self.events.fire("camerachanged", self.camera)


__all__ = ["CameraHook", "CameraNavigator"]
