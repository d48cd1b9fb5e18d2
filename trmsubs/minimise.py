"""Bracketing of a minimum and backtracking line search."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .errors import SubsError

_GOLD = 1.618034
_GLIMIT = 100.0
_TINY = 1.0e-20

_TOLX = 1.0e-10
_ALF = 1.0e-4


@dataclass(frozen=True)
class Bracket:
    """Three abscissae bracketing a minimum and the function values there."""

    ax: float
    bx: float
    cx: float
    fa: float
    fb: float
    fc: float


def _sign(a: float, b: float) -> float:
    return abs(a) if b >= 0.0 else -abs(a)


def mnbrak(func: Callable[[float], float], ax: float, bx: float) -> Bracket:
    """Bracket a minimum of ``func`` starting from ``ax`` and ``bx``.

    Heads downhill from the two starting points until a minimum is
    bracketed, so that ``fb`` is no larger than ``fa`` and ``fc``.
    """
    fa = func(ax)
    fb = func(bx)
    if fb > fa:
        ax, bx = bx, ax
        fa, fb = fb, fa

    cx = bx + _GOLD * (bx - ax)
    fc = func(cx)

    while fb > fc:
        r = (bx - ax) * (fb - fc)
        q = (bx - cx) * (fb - fa)
        ux = bx - ((bx - cx) * q - (bx - ax) * r) / (
            2.0 * _sign(max(abs(q - r), _TINY), q - r)
        )
        ulim = bx + _GLIMIT * (cx - bx)

        if (bx - ux) * (ux - cx) > 0.0:
            fu = func(ux)
            if fu < fc:
                return Bracket(bx, ux, cx, fb, fu, fc)
            if fu > fb:
                return Bracket(ax, bx, ux, fa, fb, fu)
            ux = cx + _GOLD * (cx - bx)
            fu = func(ux)
        elif (cx - ux) * (ux - ulim) > 0.0:
            fu = func(ux)
            if fu < fc:
                bx, cx, ux = cx, ux, cx + _GOLD * (ux - bx)
                fb, fc, fu = fc, fu, func(ux)
        elif (ux - ulim) * (ulim - cx) >= 0.0:
            ux = ulim
            fu = func(ux)
        else:
            ux = cx + _GOLD * (cx - bx)
            fu = func(ux)

        ax, bx, cx = bx, cx, ux
        fa, fb, fc = fb, fc, fu

    return Bracket(ax, bx, cx, fa, fb, fc)


def lnsrch(
    xold: Sequence[float],
    fold: float,
    g: Sequence[float],
    p: Sequence[float],
    stpmax: float,
    func: Callable[[list[float]], float],
) -> tuple[list[float], float, bool]:
    """Find a point along direction ``p`` from ``xold`` where ``func`` has decreased enough.

    ``fold`` is the function value and ``g`` its gradient at ``xold``. Steps
    longer than ``stpmax`` are scaled down. Returns (x, f, check); ``check``
    is True when the step became too small, in which case ``x`` is ``xold``.
    Raises SubsError on a round-off failure.
    """
    n = len(xold)
    if len(g) != n or len(p) != n:
        raise SubsError("lnsrch: vectors differ in length")

    step = [float(pi) for pi in p]
    length = math.sqrt(sum(pi * pi for pi in step))
    if length > stpmax:
        step = [pi * stpmax / length for pi in step]

    slope = sum(gi * pi for gi, pi in zip(g, step))
    test = max(
        (abs(pi) / max(abs(xi), 1.0) for pi, xi in zip(step, xold)), default=0.0
    )
    alamin = _TOLX / test if test > 0.0 else math.inf

    alam = 1.0
    alam2 = 0.0
    f2 = 0.0
    while True:
        x = [xi + alam * pi for xi, pi in zip(xold, step)]
        f = func(x)
        if alam < alamin:
            return list(xold), f, True
        if f <= fold + _ALF * alam * slope:
            return x, f, False

        if alam == 1.0:
            tmplam = -slope / (2.0 * (f - fold - slope))
        else:
            rhs1 = f - fold - alam * slope
            rhs2 = f2 - fold - alam2 * slope
            a = (rhs1 / (alam * alam) - rhs2 / (alam2 * alam2)) / (alam - alam2)
            b = (-alam2 * rhs1 / (alam * alam) + alam * rhs2 / (alam2 * alam2)) / (
                alam - alam2
            )
            if a == 0.0:
                tmplam = -slope / (2.0 * b)
            else:
                disc = b * b - 3.0 * a * slope
                if disc < 0.0:
                    raise SubsError("lnsrch: roundoff problem")
                tmplam = (-b + math.sqrt(disc)) / (3.0 * a)
            tmplam = min(tmplam, 0.5 * alam)

        alam2 = alam
        f2 = f
        alam = max(tmplam, 0.1 * alam)