#!/usr/bin/env python
"""Headless walk-through of framing transitions and free flight.

Runs a navigator against a synthetic scene and prints the camera pose per
frame. Honors the CAMNAV_* environment variables, e.g.::

    CAMNAV_DEBUG=1 python scripts/fly_through.py --fps 30 --verbose
"""

from __future__ import annotations

import argparse
import logging

from camnav import CameraNavigator, MovementController, PerspectiveCamera
from camnav.config import load_navigation_config
from camnav.geometry import Vector3
from camnav.interfaces import BoundingSphere


class GridScene:
    """Nodes laid out on a square grid in the z=0 plane."""

    def __init__(self, size: int, spacing: float) -> None:
        self.nodes = {
            f"n{i}-{j}": (i * spacing, j * spacing, 0.0)
            for i in range(size)
            for j in range(size)
        }
        half = (size - 1) * spacing / 2.0
        self.sphere = BoundingSphere(Vector3(half, half, 0.0), half * 2 ** 0.5 or 1.0)

    def bounding_sphere(self) -> BoundingSphere:
        return self.sphere

    def node_position(self, node_id):
        return self.nodes.get(node_id)


def _run(nav: CameraNavigator, log: logging.Logger, label: str, clock: list[float], frame_ms: float) -> None:
    while True:
        clock[0] += frame_ms
        running = nav.tick()
        pos = nav.camera.get_position()
        log.info("%-8s t=%7.1f pos=(%.2f, %.2f, %.2f)", label, clock[0], pos.x, pos.y, pos.z)
        if not running:
            return


def main() -> None:
    ap = argparse.ArgumentParser(description="Drive a camera through a synthetic grid scene")
    ap.add_argument("--size", type=int, default=5, help="Grid nodes per side")
    ap.add_argument("--spacing", type=float, default=50.0)
    ap.add_argument("--fps", type=float, default=20.0)
    ap.add_argument("--node", default="n1-3", help="Node to frame after fit-to-view")
    ap.add_argument("--steps", type=int, default=10, help="Free-flight ticks to simulate")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    log = logging.getLogger("fly_through")

    cfg = load_navigation_config()
    clock = [0.0]
    frame_ms = 1000.0 / float(args.fps)

    camera = PerspectiveCamera(60, 16 / 9, 0.1, 10_000, position=(0, 0, 1000))
    controller = MovementController(camera, config=cfg)
    scene = GridScene(args.size, args.spacing)
    nav = CameraNavigator(camera, controller, bounds=scene, config=cfg, clock=lambda: clock[0])

    nav.fit_to_view()
    _run(nav, log, "fit", clock, frame_ms)
    log.info("auto-fit speed=%.2f", controller.movement_speed)

    nav.show_node(args.node, args.spacing, {"planeNormal": (0, 0, 1), "distanceAlongNormal": 120})
    _run(nav, log, "node", clock, frame_ms)

    controller.integrator.key_down("w")
    controller.integrator.key_down("ArrowLeft")
    for _ in range(max(0, args.steps)):
        clock[0] += frame_ms
        nav.tick()
    pos = camera.get_position()
    log.info("flight   pos=(%.2f, %.2f, %.2f)", pos.x, pos.y, pos.z)


if __name__ == "__main__":
    main()
