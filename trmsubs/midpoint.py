"""Modified mid-point integration step and polynomial extrapolation."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .errors import SubsError

Derivs = Callable[[float, Sequence[float]], Sequence[float]]


def mmid(
    y: Sequence[float],
    dydx: Sequence[float],
    xs: float,
    htot: float,
    nstep: int,
    derivs: Derivs,
) -> list[float]:
    """Advance ``y`` from ``xs`` to ``xs + htot`` in ``nstep`` sub-steps.

    ``dydx`` holds the derivatives at ``xs``; ``derivs(x, y)`` returns the
    derivatives at any other point. Returns the new y values.
    """
    if nstep < 1:
        raise SubsError("mmid: nstep must be at least 1")
    h = htot / nstep
    ym = list(y)
    yn = [yi + h * di for yi, di in zip(y, dydx)]
    x = xs + h
    yout = list(derivs(x, yn))
    h2 = 2.0 * h
    for _ in range(1, nstep):
        ym, yn = yn, [a + h2 * d for a, d in zip(ym, yout)]
        x += h
        yout = list(derivs(x, yn))
    return [0.5 * (a + b + h * d) for a, b, d in zip(ym, yn, yout)]


class PolyExtrapolator:
    """Polynomial extrapolation to x = 0 of successive estimates.

    Estimates must be supplied in order, starting with ``iest == 0``; a call
    with ``iest == 0`` starts a fresh sequence.
    """

    def __init__(self) -> None:
        self._x: list[float] = []
        self._d: list[list[float]] = []

    def extrapolate(
        self, iest: int, xest: float, yest: Sequence[float]
    ) -> tuple[list[float], list[float]]:
        """Add estimate ``yest`` at ``xest``; return (extrapolated y, error estimates)."""
        if iest < 0 or iest > len(self._x):
            raise SubsError(
                f"PolyExtrapolator.extrapolate: estimate {iest} supplied out of order"
            )
        if iest > 0 and len(yest) != len(self._d):
            raise SubsError(
                "PolyExtrapolator.extrapolate: number of values changed between estimates"
            )

        del self._x[iest:]
        self._x.append(xest)

        if iest == 0:
            self._d = [[v] for v in yest]
            return list(yest), list(yest)

        factors = []
        for xk in reversed(self._x[:iest]):
            delta = 1.0 / (xk - xest)
            factors.append((xest * delta, xk * delta))

        yz: list[float] = []
        dy: list[float] = []
        for row, value in zip(self._d, yest):
            del row[iest:]
            c = value
            dyj = value
            yzj = value
            for k1, (f1, f2) in enumerate(factors):
                q = row[k1]
                row[k1] = dyj
                delta = c - q
                dyj = f1 * delta
                c = f2 * delta
                yzj += dyj
            row.append(dyj)
            yz.append(yzj)
            dy.append(dyj)
        return yz, dy