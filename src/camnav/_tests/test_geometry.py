from __future__ import annotations

from types import SimpleNamespace

import numpy as np
import pytest

from camnav.errors import FramingError
from camnav.geometry import (
    UNIT_Z,
    Vector3,
    coerce_vector,
    lerp_vector,
    normalized,
    normalized_or,
)


@pytest.mark.parametrize(
    "value",
    [
        Vector3(1.0, 2.0, 3.0),
        (1, 2, 3),
        [1.0, 2.0, 3.0],
        np.array([1.0, 2.0, 3.0]),
        {"x": 1, "y": 2, "z": 3},
        SimpleNamespace(x=1, y=2, z=3),
    ],
)
def test_coerce_vector_accepts_vector_likes(value) -> None:
    assert coerce_vector(value, "v") == Vector3(1.0, 2.0, 3.0)


@pytest.mark.parametrize(
    "value",
    [None, "xyz", (1, 2), (1, 2, 3, 4), (True, 0, 0), ("1", 0, 0), (float("nan"), 0, 0), np.zeros((3, 1))],
)
def test_coerce_vector_rejects_malformed(value) -> None:
    with pytest.raises(FramingError):
        coerce_vector(value, "v")


def test_error_message_names_the_field() -> None:
    with pytest.raises(FramingError, match="frame.center"):
        coerce_vector(None, "frame.center")


def test_normalized_rejects_zero_length() -> None:
    assert normalized(Vector3(0.0, 3.0, 4.0), "n") == Vector3(0.0, 0.6, 0.8)
    with pytest.raises(FramingError):
        normalized(Vector3(0.0, 0.0, 0.0), "n")


def test_normalized_or_falls_back_for_degenerate_vectors() -> None:
    assert normalized_or(Vector3(0.0, 0.0, 0.0), UNIT_Z) is UNIT_Z
    assert normalized_or(Vector3(2.0, 0.0, 0.0), UNIT_Z) == Vector3(1.0, 0.0, 0.0)


def test_lerp_vector_endpoints() -> None:
    a = Vector3(0.0, 10.0, -4.0)
    b = Vector3(2.0, 20.0, 4.0)
    assert lerp_vector(a, b, 0.0) == a
    assert lerp_vector(a, b, 0.5) == Vector3(1.0, 15.0, 0.0)
    assert lerp_vector(a, b, 1.0) == b
