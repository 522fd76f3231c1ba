"""Movement controller: free-flight speed policy, key handlers and hit-test relay.

The controller owns the speed mode of a :class:`FlyIntegrator` and advances
it by a fixed nominal timestep per ``update()``. It never runs while a
transition drives the same camera; the embedding frame loop (see
:class:`camnav.navigator.CameraNavigator`) picks one writer per tick.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from typing import Any, Optional

from camnav.camera import OrientableCamera
from camnav.config.models import NavigationConfig
from camnav.controls.events import EventHub, Listener
from camnav.controls.fly import FlightStep, FlyIntegrator, normalize_key
from camnav.controls.speed import (
    AutoFitSpeed,
    FixedSpeed,
    ProviderSpeed,
    SpeedMode,
    provided_speed,
    speed_mode_from_value,
)
from camnav.errors import MovementSpeedError
from camnav.geometry import is_finite_number
from camnav.interfaces import HitTestService


logger = logging.getLogger(__name__)

HIT_TEST_EVENTS = ("nodeover", "nodeclick", "nodedblclick")

KeyHandler = Callable[[Any], None]


class MovementController:
    """Free-flight input controller for one camera."""

    def __init__(
        self,
        camera: OrientableCamera,
        *,
        hit_test: Optional[HitTestService] = None,
        integrator: Optional[FlyIntegrator] = None,
        movement_speed: Any = None,
        roll_speed: Optional[float] = None,
        config: Optional[NavigationConfig] = None,
    ) -> None:
        self.camera = camera
        self.config = config if config is not None else NavigationConfig()
        self.hit_test = hit_test
        self.events = EventHub()
        self._key_map: dict[Hashable, KeyHandler] = {}
        self._log = self.config.debug_policy.logging
        requested = speed_mode_from_value(movement_speed) if movement_speed is not None else None

        if integrator is None:
            integrator = FlyIntegrator(camera)
        self.integrator = integrator
        self.integrator.roll_speed = float(
            roll_speed if roll_speed is not None else self.config.roll_speed
        )
        self.integrator.movement_speed = float(self.config.initial_speed)

        self._mode: SpeedMode = AutoFitSpeed(factor=float(self.config.autofit_factor))
        if requested is not None:
            self._install_speed(requested)

        self._relays: list[tuple[str, Listener]] = []
        if self.hit_test is not None:
            for name in HIT_TEST_EVENTS:
                relay = self._passthrough(name)
                self.hit_test.on(name, relay)
                self._relays.append((name, relay))
        self.integrator.on("move", self._on_move)

    # ------------------------------------------------------------------
    # Observers

    def on(self, name: str, callback: Listener) -> None:
        self.events.on(name, callback)

    def off(self, name: str, callback: Listener) -> None:
        self.events.off(name, callback)

    def _passthrough(self, name: str) -> Listener:
        def relay(payload: Any = None) -> None:
            self.events.fire(name, payload)

        return relay

    def _on_move(self, step: FlightStep) -> None:
        if self._log.log_flight and logger.isEnabledFor(logging.INFO):
            logger.info(
                "flight move translation=%s speed=%.3f",
                step.translation.as_tuple(),
                self.integrator.movement_speed,
            )
        self.events.fire("move", step)
        self._update_hit_test(False)

    # ------------------------------------------------------------------
    # Speed

    @property
    def speed_mode(self) -> SpeedMode:
        return self._mode

    @property
    def movement_speed(self) -> float:
        return self.integrator.movement_speed

    @property
    def roll_speed(self) -> float:
        return self.integrator.roll_speed

    @property
    def auto_fit(self) -> bool:
        return isinstance(self._mode, AutoFitSpeed)

    def _install_speed(self, mode: SpeedMode) -> None:
        self._mode = mode
        if isinstance(mode, FixedSpeed):
            self.integrator.movement_speed = mode.value
        if self._log.log_speed and logger.isEnabledFor(logging.INFO):
            logger.info("movement speed mode -> %s", type(mode).__name__)

    def set_movement_speed(self, value: Any) -> None:
        """Install a fixed speed (finite number) or a per-tick provider (callable).

        Either choice disables auto-fit; any other argument raises
        :class:`MovementSpeedError` and leaves the current mode untouched.
        """

        self._install_speed(speed_mode_from_value(value))

    def adjust_speed(self, scene_radius: float) -> None:
        """Derive speed from the scene radius while auto-fit is active."""

        if not isinstance(self._mode, AutoFitSpeed):
            return
        if not is_finite_number(scene_radius):
            raise MovementSpeedError(f"scene radius must be finite, got {scene_radius!r}")
        self.integrator.movement_speed = float(scene_radius) * self._mode.factor
        if self._log.log_speed and logger.isEnabledFor(logging.INFO):
            logger.info(
                "auto-fit speed radius=%.3f speed=%.3f",
                float(scene_radius),
                self.integrator.movement_speed,
            )

    # ------------------------------------------------------------------
    # Per-tick

    def update(self) -> Optional[FlightStep]:
        """Refresh provider speed and advance free flight by one nominal step."""

        if isinstance(self._mode, ProviderSpeed):
            speed = provided_speed(self._mode, self.camera)
            if speed is not None:
                self.integrator.movement_speed = speed
            elif logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "speed provider returned unusable value; keeping %.3f",
                    self.integrator.movement_speed,
                )
        return self.integrator.update(self.config.tick_seconds)

    # ------------------------------------------------------------------
    # Keys

    def on_key(self, key: Hashable, handler: KeyHandler) -> None:
        """Register ``handler`` for ``key``; a later registration replaces it."""
        self._key_map[self._key_id(key)] = handler

    def handle_key(self, key: Hashable, event: Any = None) -> bool:
        """Dispatch a key press to its registered handler, if any."""
        handler = self._key_map.get(self._key_id(key))
        if handler is None:
            return False
        handler(event)
        return True

    @staticmethod
    def _key_id(key: Hashable) -> Hashable:
        return normalize_key(key) if isinstance(key, str) else key

    # ------------------------------------------------------------------
    # Hit test

    def pointer_moved(self) -> None:
        self._update_hit_test(False)

    def sync_hit_test(self, force: bool = False) -> None:
        self._update_hit_test(force)

    def _update_hit_test(self, force: bool) -> None:
        if self.hit_test is None:
            return
        if self._log.log_hit_test and logger.isEnabledFor(logging.INFO):
            logger.info("hit test refresh force=%s", bool(force))
        self.hit_test.update(self.camera, bool(force))

    def reset(self) -> None:
        if self.hit_test is not None:
            self.hit_test.reset()

    def dispose(self) -> None:
        if self.hit_test is not None:
            for name, relay in self._relays:
                self.hit_test.off(name, relay)
        self._relays.clear()
        self.integrator.off("move", self._on_move)
        self.events.clear()
        self._key_map.clear()


__all__ = ["HIT_TEST_EVENTS", "MovementController"]
