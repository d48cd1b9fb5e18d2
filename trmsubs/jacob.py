"""Eigenvalues and eigenvectors of a real symmetric matrix by Jacobi rotations."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .errors import SubsError

_MAX_SWEEPS = 50


def _rotate(m: list[list[float]], i: int, j: int, k: int, l: int, s: float, tau: float) -> None:
    g = m[i][j]
    h = m[k][l]
    m[i][j] = g - s * (h + g * tau)
    m[k][l] = h + s * (g - h * tau)


def jacob(
    a: Sequence[Sequence[float]],
) -> tuple[list[float], list[list[float]], int]:
    """Diagonalise the real symmetric matrix ``a``.

    Returns (eigenvalues, eigenvectors, number of rotations). The
    eigenvectors are the columns of the returned matrix. ``a`` is not
    modified. Raises SubsError for an empty or non-square matrix, or if
    the iteration fails to converge.
    """
    n = len(a)
    if n == 0:
        raise SubsError("jacob: null matrix")
    if any(len(row) != n for row in a):
        raise SubsError("jacob: matrix not square")

    m = [[float(val) for val in row] for row in a]
    v = [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]
    b = [m[i][i] for i in range(n)]
    d = list(b)
    z = [0.0] * n
    nrot = 0

    for sweep in range(1, _MAX_SWEEPS + 1):
        sm = sum(abs(m[ip][iq]) for ip in range(n - 1) for iq in range(ip + 1, n))
        if sm == 0.0:
            return d, v, nrot

        tresh = 0.2 * sm / (n * n) if sweep < 4 else 0.0
        for ip in range(n - 1):
            for iq in range(ip + 1, n):
                g = 100.0 * abs(m[ip][iq])
                if (
                    sweep > 4
                    and abs(d[ip]) + g == abs(d[ip])
                    and abs(d[iq]) + g == abs(d[iq])
                ):
                    m[ip][iq] = 0.0
                elif abs(m[ip][iq]) > tresh:
                    h = d[iq] - d[ip]
                    if abs(h) + g == abs(h):
                        t = m[ip][iq] / h
                    else:
                        theta = 0.5 * h / m[ip][iq]
                        t = 1.0 / (abs(theta) + math.sqrt(1.0 + theta * theta))
                        if theta < 0.0:
                            t = -t
                    c = 1.0 / math.sqrt(1.0 + t * t)
                    s = t * c
                    tau = s / (1.0 + c)
                    h = t * m[ip][iq]
                    z[ip] -= h
                    z[iq] += h
                    d[ip] -= h
                    d[iq] += h
                    m[ip][iq] = 0.0
                    for j in range(ip):
                        _rotate(m, j, ip, j, iq, s, tau)
                    for j in range(ip + 1, iq):
                        _rotate(m, ip, j, j, iq, s, tau)
                    for j in range(iq + 1, n):
                        _rotate(m, ip, j, iq, j, s, tau)
                    for j in range(n):
                        _rotate(v, j, ip, j, iq, s, tau)
                    nrot += 1

        for ip in range(n):
            b[ip] += z[ip]
            d[ip] = b[ip]
            z[ip] = 0.0

    raise SubsError("jacob: too many iterations")