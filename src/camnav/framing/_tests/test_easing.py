from __future__ import annotations

import pytest

from camnav.framing.easing import ease_in_out_cubic, linear, resolve_easing


def test_resolve_easing_returns_callable_unchanged() -> None:
    def custom(t: float) -> float:
        return t * t

    assert resolve_easing(custom) is custom


def test_resolve_easing_linear_name() -> None:
    assert resolve_easing("linear") is linear
    assert linear(0.25) == 0.25


@pytest.mark.parametrize("request_value", [None, "ease", "LINEAR", 3, object()])
def test_resolve_easing_defaults_to_cubic(request_value) -> None:
    assert resolve_easing(request_value) is ease_in_out_cubic


def test_presets_hit_endpoints_exactly() -> None:
    for fn in (linear, ease_in_out_cubic):
        assert fn(0.0) == 0.0
        assert fn(1.0) == 1.0


def test_cubic_is_symmetric_and_monotonic() -> None:
    assert ease_in_out_cubic(0.5) == pytest.approx(0.5)
    assert ease_in_out_cubic(0.25) == pytest.approx(4 * 0.25 ** 3)
    assert ease_in_out_cubic(0.75) == pytest.approx(1 - ease_in_out_cubic(0.25))
    samples = [ease_in_out_cubic(i / 20) for i in range(21)]
    assert samples == sorted(samples)
