"""Rebinning of data and variance arrays between polynomial scales."""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import Enum

from .errors import SubsError
from .interp import linterp
from .poly import Poly


class RebinMode(Enum):
    """Whether output pixels average or sum the input they cover."""

    AVERAGE = "average"
    INTEGRATE = "integrate"


def _nint(x: float) -> int:
    return int(math.floor(x + 0.5))


def rebin(
    indat: Sequence[float],
    invar: Sequence[float],
    infirst: int,
    inlast: int,
    inpoly: Poly,
    nout: int,
    outfirst: int,
    outlast: int,
    outpoly: Poly,
    mode: RebinMode,
) -> tuple[list[float], list[float]]:
    """Linearly rebin data and variances onto a new scale.

    Input pixels ``infirst`` to ``inlast - 1`` on scale ``inpoly`` are
    mapped onto output pixels ``outfirst`` to ``outlast - 1`` of an output
    array of ``nout`` pixels on scale ``outpoly``. Scales must be monotonic.
    Output pixels outside the range or with no overlap are set to zero.
    Returns (data, variances).
    """
    if len(indat) != len(invar):
        raise SubsError(
            f"rebin: conflicting numbers of data & variance pixels: {len(indat)} {len(invar)}"
        )
    if (
        infirst < 0
        or inlast > len(indat)
        or outfirst < 0
        or outlast > nout
        or infirst >= inlast
        or outfirst >= outlast
    ):
        raise SubsError(
            f"rebin: invalid pixel ranges {infirst} {inlast} {len(indat)} "
            f"{outfirst} {outlast} {nout}"
        )
    if len(inpoly) == 0 or len(outpoly) == 0:
        raise SubsError(
            f"rebin: invalid input and/or output polys, npoly = {len(inpoly)} {len(outpoly)}"
        )

    nin = len(indat)
    pix_leftmost = infirst - 0.5
    pix_rightmost = inlast - 0.5
    leftmost = inpoly.value(pix_leftmost)
    rightmost = inpoly.value(pix_rightmost)
    in_min = min(leftmost, rightmost)
    in_max = max(leftmost, rightmost)
    increase = outpoly.deriv((outfirst + outlast - 1) / 2.0) > 0.0

    def to_input_pixel(value: float) -> float:
        guess = linterp(leftmost, pix_leftmost, rightmost, pix_rightmost, value)
        return inpoly.get_x(value, guess, 1.0e-4)

    def weighted(index: int, weight: float) -> tuple[float, float]:
        if 0 <= index < nin and weight != 0.0:
            return weight * indat[index], weight * weight * invar[index]
        return 0.0, 0.0

    outdat = [0.0] * nout
    outvar = [0.0] * nout
    shared_edge: float | None = None

    for iout in range(outfirst, outlast):
        out_left = outpoly.value(iout - 0.5)
        out_right = outpoly.value(iout + 0.5)
        if out_left > out_right:
            out_left, out_right = out_right, out_left

        if out_left > in_max or out_right < in_min:
            shared_edge = None
            continue

        if increase and shared_edge is not None:
            pix_left = shared_edge
        elif leftmost < rightmost and out_left < leftmost:
            pix_left = pix_leftmost
        elif leftmost > rightmost and out_left < rightmost:
            pix_left = pix_rightmost
        else:
            pix_left = to_input_pixel(out_left)

        if not increase and shared_edge is not None:
            pix_right = shared_edge
        elif leftmost < rightmost and out_right > rightmost:
            pix_right = pix_rightmost
        elif leftmost > rightmost and out_right > leftmost:
            pix_right = pix_leftmost
        else:
            pix_right = to_input_pixel(out_right)

        shared_edge = pix_right if increase else pix_left

        if pix_left > pix_right:
            pix_left, pix_right = pix_right, pix_left

        first = _nint(pix_left)
        last = _nint(pix_right)
        if first == last:
            sumdat, sumvar = weighted(first, pix_right - pix_left)
        else:
            d1, v1 = weighted(first, first + 0.5 - pix_left)
            d2, v2 = weighted(last, pix_right - last + 0.5)
            sumdat = d1 + d2 + math.fsum(indat[max(first + 1, 0):min(last, nin)])
            sumvar = v1 + v2 + math.fsum(invar[max(first + 1, 0):min(last, nin)])

        if mode is RebinMode.AVERAGE:
            lpix = pix_right - pix_left
            sumdat /= lpix
            sumvar /= lpix * lpix

        outdat[iout] = sumdat
        outvar[iout] = sumvar

    return outdat, outvar