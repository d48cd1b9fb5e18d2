"""Poisson deviates by the rejection method."""

from __future__ import annotations

import math
from collections.abc import Callable


def poisson(mu: float, uniform: Callable[[], float]) -> float:
    """Return a Poisson deviate of mean ``mu``.

    ``uniform`` supplies uniform deviates in [0, 1), for example
    ``Ran2(-1).random``.
    """
    if mu < 12.0:
        g = math.exp(-mu)
        em = -1.0
        t = 1.0
        while True:
            em += 1.0
            t *= uniform()
            if t <= g:
                return em

    sq = math.sqrt(2.0 * mu)
    alxm = math.log(mu)
    g = mu * alxm - math.lgamma(mu + 1.0)
    while True:
        while True:
            y = math.tan(math.pi * uniform())
            em = sq * y + mu
            if em >= 0.0:
                break
        em = math.floor(em)
        t = 0.9 * (1.0 + y * y) * math.exp(em * alxm - math.lgamma(em + 1.0) - g)
        if uniform() <= t:
            return float(em)