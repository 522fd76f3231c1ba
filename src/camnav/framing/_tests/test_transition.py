from __future__ import annotations

import pytest

from camnav.camera import PerspectiveCamera
from camnav.errors import FramingError
from camnav.framing.pose import CameraState, PlaneFrame, RadiusFrame, resolve_frame_pose
from camnav.framing.transition import (
    DEFAULT_DURATION_MS,
    TransitionOptions,
    create_transition,
    create_transition_from_camera_state,
    step_transition,
)
from camnav.geometry import Vector3


def _camera_looking_at_origin(z: float = 300.0) -> PerspectiveCamera:
    cam = PerspectiveCamera(75, 1, 0.1, 1000, position=(0, 0, z))
    cam.look_at((0, 0, 0))
    return cam


def _assert_close(actual: Vector3, expected: Vector3, tol: float = 1e-8) -> None:
    assert abs(actual.x - expected.x) < tol
    assert abs(actual.y - expected.y) < tol
    assert abs(actual.z - expected.z) < tol


def test_step_transition_reaches_exact_target_pose() -> None:
    cam = _camera_looking_at_origin()
    frame = RadiusFrame(center=(10, 20, 30), radius=40)
    target = resolve_frame_pose(cam, frame)

    transition = create_transition(cam, frame, {"durationMs": 100, "easing": "linear"}, 1000)
    done = step_transition(cam, transition, 1100)

    assert done is True
    _assert_close(cam.get_position(), target.position)
    expected_forward = target.look_at - target.position
    expected_forward = expected_forward.scaled(1.0 / expected_forward.length())
    _assert_close(cam.get_forward(), expected_forward, 1e-9)


def test_transition_captures_start_pose() -> None:
    cam = _camera_looking_at_origin()
    transition = create_transition(cam, RadiusFrame(center=(0, 0, 0), radius=10), now=5.0)
    assert transition.start_position == Vector3(0.0, 0.0, 300.0)
    assert transition.start_look_at == Vector3(0.0, 0.0, 299.0)
    assert transition.started_at == 5.0
    assert transition.duration_ms == DEFAULT_DURATION_MS
    assert transition.target_look_at == Vector3(0.0, 0.0, 0.0)


def test_linear_midpoint_interpolates_each_axis() -> None:
    cam = _camera_looking_at_origin()
    state = CameraState(position=(100, 50, 100), look_at=(0, 0, 0))
    transition = create_transition_from_camera_state(
        cam, state, TransitionOptions(duration_ms=200, easing="linear"), now=0
    )

    assert step_transition(cam, transition, 100) is False
    _assert_close(cam.get_position(), Vector3(50.0, 25.0, 200.0))


def test_progress_clamps_before_start_and_after_end() -> None:
    cam = _camera_looking_at_origin()
    frame = PlaneFrame(center=(1, 2, 3), plane_normal=(0, 0, 1), distance_along_normal=150)
    transition = create_transition(cam, frame, {"durationMs": 100}, now=1000)

    assert step_transition(cam, transition, 500) is False
    _assert_close(cam.get_position(), Vector3(0.0, 0.0, 300.0))

    assert step_transition(cam, transition, 1e9) is True
    assert cam.get_position() == Vector3(1.0, 2.0, 153.0)


def test_zero_duration_completes_on_first_step() -> None:
    cam = _camera_looking_at_origin()
    transition = create_transition(cam, RadiusFrame(center=(0, 0, 0), radius=5), {"durationMs": 0}, 10)
    assert step_transition(cam, transition, 10) is True
    assert step_transition(cam, transition, 0) is True


def test_negative_duration_clamps_to_zero() -> None:
    cam = _camera_looking_at_origin()
    transition = create_transition(
        cam, RadiusFrame(center=(0, 0, 0), radius=5), TransitionOptions(duration_ms=-50), 0
    )
    assert transition.duration_ms == 0.0
    assert step_transition(cam, transition, 0) is True


@pytest.mark.parametrize("duration", ["fast", None, float("nan")])
def test_unusable_duration_falls_back_to_default(duration) -> None:
    cam = _camera_looking_at_origin()
    transition = create_transition(cam, RadiusFrame(center=(0, 0, 0), radius=5), {"durationMs": duration}, 0)
    assert transition.duration_ms == DEFAULT_DURATION_MS


def test_stepping_after_completion_is_idempotent() -> None:
    cam = _camera_looking_at_origin()
    transition = create_transition(cam, RadiusFrame(center=(10, 20, 30), radius=40), None, 0)
    assert step_transition(cam, transition, 600) is True
    position, forward = cam.get_position(), cam.get_forward()
    for now in (601, 5000, 1e12):
        assert step_transition(cam, transition, now) is True
        assert cam.get_position() == position
        assert cam.get_forward() == forward


def test_custom_easing_is_applied_on_every_step() -> None:
    cam = _camera_looking_at_origin()
    seen: list[float] = []

    def half_way(t: float) -> float:
        seen.append(t)
        return 0.5 * t

    transition = create_transition(
        cam, RadiusFrame(center=(0, 0, 0), radius=10), {"durationMs": 100, "easing": half_way}, 0
    )
    assert step_transition(cam, transition, 50) is False
    assert seen == [0.5]
    quarter = transition.start_position.z + (transition.target_position.z - 300.0) * 0.25
    assert cam.get_position().z == pytest.approx(quarter)

    assert step_transition(cam, transition, 100) is True
    assert seen == [0.5, 1.0]
    halfway = (transition.start_position.z + transition.target_position.z) / 2
    assert cam.get_position().z == pytest.approx(halfway)
    assert cam.get_position().z != pytest.approx(transition.target_position.z)


def test_builtin_easings_land_exactly_on_target() -> None:
    for easing in ("linear", None):
        cam = _camera_looking_at_origin()
        state = CameraState(position=(0.1, 0.7, 13.3), look_at=(0.3, -0.2, 0.0))
        transition = create_transition_from_camera_state(
            cam, state, {"durationMs": 100, "easing": easing}, 0
        )
        assert step_transition(cam, transition, 100) is True
        assert cam.get_position() == Vector3(0.1, 0.7, 13.3)


def test_camera_state_transition_preserves_orientation() -> None:
    cam = PerspectiveCamera(position=(0, 0, 10))
    forward = cam.get_forward()
    transition = create_transition_from_camera_state(cam, {"position": (5, 5, 5)}, {"durationMs": 10}, 0)
    assert step_transition(cam, transition, 10) is True
    assert cam.get_position() == Vector3(5.0, 5.0, 5.0)
    _assert_close(cam.get_forward(), forward)


def test_invalid_target_raises_before_any_write() -> None:
    cam = _camera_looking_at_origin()
    before = (cam.get_position(), cam.get_forward())
    with pytest.raises(FramingError):
        create_transition(cam, PlaneFrame(center=(0, 0, 10), plane_normal=(0, 0, 1), final_z=0), None, 0)
    with pytest.raises(FramingError):
        create_transition_from_camera_state(cam, CameraState(position=(0, 0, 0), direction=(0, 0, 0)))
    assert (cam.get_position(), cam.get_forward()) == before


def test_now_defaults_to_monotonic_clock(monkeypatch) -> None:
    monkeypatch.setattr("camnav.framing.transition.monotonic_ms", lambda: 4242.0)
    cam = _camera_looking_at_origin()
    transition = create_transition(cam, RadiusFrame(center=(0, 0, 0), radius=10))
    assert transition.started_at == 4242.0
