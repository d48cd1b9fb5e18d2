"""LU decomposition, back substitution and matrix inversion."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .errors import SubsError

_TINY = 1.0e-20

Matrix = Sequence[Sequence[float]]


@dataclass
class LUDecomposition:
    """LU decomposition of a row-wise permutation of a square matrix.

    ``lu`` holds the combined lower and upper triangular factors, ``indx``
    the row interchanges made and ``d`` is +1 or -1 according to whether the
    number of interchanges was even or odd.
    """

    lu: list[list[float]]
    indx: list[int]
    d: float

    def solve(self, b: Sequence[float]) -> list[float]:
        """Solve A x = b for x, where A is the decomposed matrix."""
        return lubksb(self.lu, self.indx, b)


def ludcmp(a: Matrix) -> LUDecomposition:
    """Decompose the square matrix ``a``; ``a`` itself is left unchanged.

    Raises SubsError for an empty, non-square or singular matrix.
    """
    n = len(a)
    if n == 0:
        raise SubsError("ludcmp: null matrix")
    if any(len(row) != n for row in a):
        raise SubsError("ludcmp: matrix not square")

    lu = [[float(v) for v in row] for row in a]

    vv = []
    for row in lu:
        big = max(abs(v) for v in row)
        if big == 0.0:
            raise SubsError("ludcmp: singular matrix")
        vv.append(1.0 / big)

    d = 1.0
    indx = [0] * n
    imax = 0
    for j in range(n):
        for i in range(j):
            s = lu[i][j]
            for k in range(i):
                s -= lu[i][k] * lu[k][j]
            lu[i][j] = s

        big = 0.0
        for i in range(j, n):
            s = lu[i][j]
            for k in range(j):
                s -= lu[i][k] * lu[k][j]
            lu[i][j] = s
            dum = vv[i] * abs(s)
            if dum >= big:
                big = dum
                imax = i

        if j != imax:
            lu[imax], lu[j] = lu[j], lu[imax]
            d = -d
            vv[imax] = vv[j]
        indx[j] = imax

        if lu[j][j] == 0.0:
            lu[j][j] = _TINY

        if j != n - 1:
            dum = 1.0 / lu[j][j]
            for row in lu[j + 1:]:
                row[j] *= dum

    return LUDecomposition(lu, indx, d)


def lubksb(lu: Matrix, indx: Sequence[int], b: Sequence[float]) -> list[float]:
    """Back substitution using the results of :func:`ludcmp`.

    Returns the solution x of A x = b as a new list.
    """
    n = len(lu)
    if n == 0:
        raise SubsError("lubksb: null matrix")
    if any(len(row) != n for row in lu):
        raise SubsError("lubksb: matrix not square")
    if len(indx) != n:
        raise SubsError("lubksb: matrix and index array clash")
    if len(b) != n:
        raise SubsError("lubksb: matrix and right-hand side clash")

    x = [float(v) for v in b]
    ii = -1
    for i in range(n):
        ip = indx[i]
        s = x[ip]
        x[ip] = x[i]
        if ii >= 0:
            for j in range(ii, i):
                s -= lu[i][j] * x[j]
        elif s:
            ii = i
        x[i] = s

    for i in reversed(range(n)):
        s = x[i]
        for j in range(i + 1, n):
            s -= lu[i][j] * x[j]
        x[i] = s / lu[i][i]
    return x


def invert(a: Matrix) -> list[list[float]]:
    """Return the inverse of the square matrix ``a``."""
    decomposition = ludcmp(a)
    n = len(a)
    columns = [
        decomposition.solve([1.0 if k == col else 0.0 for k in range(n)])
        for col in range(n)
    ]
    return [list(row) for row in zip(*columns)]