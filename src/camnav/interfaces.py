"""Protocols for the external collaborators the navigation core talks to."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable

from camnav.camera import CameraLike
from camnav.geometry import Vector3, VectorLike


@dataclass(frozen=True)
class BoundingSphere:
    """Scene bounds used to build "fit to view" frames."""

    center: Vector3
    radius: float


@runtime_checkable
class SceneBoundsProvider(Protocol):
    """Scene/graph bounds and per-node positions."""

    def bounding_sphere(self) -> BoundingSphere:
        ...

    def node_position(self, node_id: Hashable) -> Optional[VectorLike]:
        ...


@runtime_checkable
class HitTestService(Protocol):
    """Pointer hit-testing against rendered objects.

    Emits ``nodeover``, ``nodeclick`` and ``nodedblclick`` notifications keyed
    by scene object identity. The navigation core only forwards them and asks
    for a refresh whenever the camera pose changes.
    """

    def on(self, name: str, callback: Callable[[Any], None]) -> None:
        ...

    def off(self, name: str, callback: Callable[[Any], None]) -> None:
        ...

    def update(self, camera: CameraLike, force: bool = False) -> None:
        ...

    def reset(self) -> None:
        ...


__all__ = ["BoundingSphere", "HitTestService", "SceneBoundsProvider"]
