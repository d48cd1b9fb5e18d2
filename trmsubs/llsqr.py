"""General linear least-squares fitting by the normal equations.

The functions to be fitted are given as a design matrix: one row per data
point, one column per function. Uncertainties that are zero or negative
mask the corresponding data point.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

from .errors import SubsError
from .lud import invert

Design = Sequence[Sequence[float]]


def design_matrix(
    x: Sequence[float], basis: Callable[[float], Sequence[float]]
) -> list[list[float]]:
    """Evaluate ``basis(x)`` (the function values at x) at every x."""
    rows = [[float(v) for v in basis(xi)] for xi in x]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise SubsError("design_matrix: basis returned varying numbers of values")
    return rows


def _check(func: Design, name: str, *columns: Sequence[float]) -> int:
    ndata = len(func)
    if ndata < 1:
        raise SubsError(f"{name}: < 1 data point")
    nfunc = len(func[0])
    if nfunc < 1:
        raise SubsError(f"{name}: < 1 function")
    if any(len(row) != nfunc for row in func):
        raise SubsError(f"{name}: rows of the design matrix differ in length")
    if any(len(col) != ndata for col in columns):
        raise SubsError(f"{name}: data and design matrix differ in length")
    return nfunc


def _model(row: Sequence[float], coeff: Sequence[float]) -> float:
    return sum(c * f for c, f in zip(coeff, row))


def llsqr(
    y: Sequence[float], e: Sequence[float], func: Design
) -> tuple[list[float], list[list[float]]]:
    """Fit the columns of ``func`` to ``y`` with uncertainties ``e``.

    Returns (coefficients, covariance matrix).
    """
    nfunc = _check(func, "llsqr", y, e)

    normal = [[0.0] * nfunc for _ in range(nfunc)]
    beta = [0.0] * nfunc
    for yi, ei, row in zip(y, e, func):
        if ei > 0.0:
            weight = 1.0 / (ei * ei)
            for j in range(nfunc):
                wt = weight * row[j]
                for k in range(j + 1):
                    normal[j][k] += wt * row[k]
                beta[j] += wt * yi

    for j in range(1, nfunc):
        for k in range(j):
            normal[k][j] = normal[j][k]

    covar = invert(normal)
    coeff = [_model(row, beta) for row in covar]
    return coeff, covar


def llsqr_eval(func: Design, coeff: Sequence[float]) -> list[float]:
    """Fitted values given the coefficients of a fit."""
    _check(func, "llsqr_eval")
    return [_model(row, coeff) for row in func]


def llsqr_chisq(
    y: Sequence[float], e: Sequence[float], func: Design, coeff: Sequence[float]
) -> float:
    """Chi-squared of a fit over the unmasked points."""
    _check(func, "llsqr_chisq", y, e)
    return sum(
        ((yi - _model(row, coeff)) / ei) ** 2
        for yi, ei, row in zip(y, e, func)
        if ei > 0.0
    )


def llsqr_reduced_chisq(
    y: Sequence[float], e: Sequence[float], func: Design, coeff: Sequence[float]
) -> float:
    """Chi-squared per degree of freedom of a fit."""
    nfunc = _check(func, "llsqr_reduced_chisq", y, e)
    ndof = sum(1 for ei in e if ei > 0.0) - nfunc
    if ndof < 1:
        raise SubsError("llsqr_reduced_chisq: < 1 degree of freedom")
    return llsqr_chisq(y, e, func, coeff) / ndof


def llsqr_reject(
    y: Sequence[float],
    e: Sequence[float],
    func: Design,
    coeff: Sequence[float],
    thresh: float,
    slow: bool,
) -> tuple[list[float], int]:
    """One rejection cycle after a fit.

    Points deviating by more than ``thresh`` times the rms scatter are
    masked by negating their uncertainties. With ``slow`` only the worst such
    point is masked. Returns (new uncertainties, number rejected).
    """
    _check(func, "llsqr_reject", y, e)
    if thresh <= 0.0:
        raise SubsError("llsqr_reject: thresh <= 0.")

    limit = math.sqrt(llsqr_reduced_chisq(y, e, func, coeff)) * thresh
    errors = list(e)
    outliers = []
    for i, (yi, ei, row) in enumerate(zip(y, e, func)):
        if ei > 0.0:
            dev = abs(yi - _model(row, coeff)) / ei
            if dev > limit:
                outliers.append((dev, i))

    if slow and outliers:
        worst = -1.0
        iworst = -1
        for dev, i in outliers:
            if dev > worst:
                worst, iworst = dev, i
        outliers = [(worst, iworst)]

    for _, i in outliers:
        errors[i] = -errors[i]
    return errors, len(outliers)