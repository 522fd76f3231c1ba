from __future__ import annotations

import numpy as np
import pytest

from camnav.camera import CameraLike, OrientableCamera, PerspectiveCamera
from camnav.geometry import Vector3


def test_satisfies_camera_protocols() -> None:
    cam = PerspectiveCamera()
    assert isinstance(cam, CameraLike)
    assert isinstance(cam, OrientableCamera)


def test_defaults_look_down_negative_z() -> None:
    cam = PerspectiveCamera()
    assert (cam.fov, cam.aspect, cam.near, cam.far) == (75.0, 1.0, 0.1, 1000.0)
    assert cam.get_forward() == Vector3(0.0, 0.0, -1.0)
    assert cam.get_up() == Vector3(0.0, 1.0, 0.0)
    assert cam.get_right() == Vector3(1.0, 0.0, 0.0)


def test_look_at_sets_unit_forward_and_orthogonal_up() -> None:
    cam = PerspectiveCamera(position=(10, 0, 0))
    cam.look_at((0, 0, 0))
    assert cam.get_forward().as_tuple() == pytest.approx((-1.0, 0.0, 0.0))
    fwd = cam.get_forward().as_array()
    up = cam.get_up().as_array()
    assert float(np.dot(fwd, up)) == pytest.approx(0.0)
    assert np.linalg.norm(up) == pytest.approx(1.0)


def test_look_at_straight_down_picks_a_valid_up() -> None:
    cam = PerspectiveCamera(position=(0, 50, 0))
    cam.look_at((0, 0, 0))
    assert cam.get_forward().as_tuple() == pytest.approx((0.0, -1.0, 0.0))
    assert float(np.dot(cam.get_forward().as_array(), cam.get_up().as_array())) == pytest.approx(0.0)


def test_look_at_own_position_is_ignored() -> None:
    cam = PerspectiveCamera(position=(1, 2, 3))
    cam.look_at((1, 2, 3))
    assert cam.get_forward() == Vector3(0.0, 0.0, -1.0)


def test_view_matrix_maps_camera_to_origin() -> None:
    cam = PerspectiveCamera(position=(3, 4, 5))
    cam.look_at((0, 0, 0))
    eye = np.array([3.0, 4.0, 5.0, 1.0])
    assert cam.view_matrix() @ eye == pytest.approx([0.0, 0.0, 0.0, 1.0])
