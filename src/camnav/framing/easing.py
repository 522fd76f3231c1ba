"""Progress mapping functions for camera transitions.

Each function maps normalized time ``t`` in ``[0, 1]`` to eased progress in
``[0, 1]``, returning exactly ``0`` at ``t=0`` and ``1`` at ``t=1``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

EasingFn = Callable[[float], float]


def linear(t: float) -> float:
    """Constant speed."""
    return t


def ease_in_out_cubic(t: float) -> float:
    """Slow start and end, fast middle."""
    if t < 0.5:
        return 4.0 * t * t * t
    return 1.0 - pow(-2.0 * t + 2.0, 3) / 2.0


def resolve_easing(easing: Any = None) -> EasingFn:
    """Map an easing request onto a progress function.

    Callables are returned unchanged, ``"linear"`` selects :func:`linear` and
    every other value (including ``None``) falls back to
    :func:`ease_in_out_cubic`.
    """

    if callable(easing):
        return easing
    if easing == "linear":
        return linear
    return ease_in_out_cubic


__all__ = ["EasingFn", "ease_in_out_cubic", "linear", "resolve_easing"]
