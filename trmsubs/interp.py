"""Linear interpolation and numerical differentiation."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import SubsError


def linterp(x1: float, y1: float, x2: float, y2: float, x: float) -> float:
    """Value at ``x`` of the straight line through (x1, y1) and (x2, y2)."""
    return (y1 * (x2 - x) + y2 * (x - x1)) / (x2 - x1)


def numdiff(x: Sequence[float], y: Sequence[float]) -> list[float]:
    """Numerical derivative dy/dx.

    Centred differences are used for interior points, one-sided differences
    at the two ends.
    """
    if len(x) != len(y):
        raise SubsError("numdiff: x and y data sizes must match")
    if len(x) < 2:
        raise SubsError("numdiff: must have at least 2 points")

    first = (y[1] - y[0]) / (x[1] - x[0])
    last = (y[-1] - y[-2]) / (x[-1] - x[-2])
    interior = [
        (yn - yp) / (xn - xp)
        for xp, xn, yp, yn in zip(x, x[2:], y, y[2:])
    ]
    return [first, *interior, last]