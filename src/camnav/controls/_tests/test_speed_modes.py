from __future__ import annotations

import pytest

from camnav.controls.speed import (
    AutoFitSpeed,
    FixedSpeed,
    ProviderSpeed,
    provided_speed,
    speed_mode_from_value,
)
from camnav.errors import MovementSpeedError, ValidationError


def test_numbers_become_fixed_speed() -> None:
    assert speed_mode_from_value(3) == FixedSpeed(3.0)
    assert speed_mode_from_value(2.5) == FixedSpeed(2.5)


def test_callables_become_provider() -> None:
    def provider(camera) -> float:
        return 1.0

    mode = speed_mode_from_value(provider)
    assert isinstance(mode, ProviderSpeed)
    assert mode.provider is provider


@pytest.mark.parametrize("value", [float("nan"), float("-inf"), "3", None, False, object()])
def test_other_values_raise_validation_error(value) -> None:
    with pytest.raises(MovementSpeedError):
        speed_mode_from_value(value)
    with pytest.raises(ValidationError):
        speed_mode_from_value(value)


def test_provided_speed_filters_unusable_results() -> None:
    assert provided_speed(ProviderSpeed(lambda cam: 7), None) == 7.0
    assert provided_speed(ProviderSpeed(lambda cam: float("nan")), None) is None
    assert provided_speed(ProviderSpeed(lambda cam: "7"), None) is None


def test_auto_fit_default_factor() -> None:
    assert AutoFitSpeed().factor == 0.1
