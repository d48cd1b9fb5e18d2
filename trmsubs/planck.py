"""Planck function and its logarithmic derivatives."""

from __future__ import annotations

import math

H = 6.62607015e-34
"""Planck constant, J s."""
C = 2.99792458e8
"""Speed of light, m/s."""
K = 1.380649e-23
"""Boltzmann constant, J/K."""

_FAC1 = 2.0e27 * H * C
_FAC2 = 1.0e9 * H * C / K


def planck(wave: float, temp: float) -> float:
    """Planck function B_nu in W/m**2/Hz/sr.

    ``wave`` is the wavelength in nanometres, ``temp`` the temperature in K.
    """
    efac = _FAC2 / (wave * temp)
    if efac > 40.0:
        return _FAC1 * math.exp(-efac) / wave**3
    return _FAC1 / math.expm1(efac) / wave**3


def dplanck(wave: float, temp: float) -> float:
    """d ln(B_nu) / d ln(lambda)."""
    efac = _FAC2 / (wave * temp)
    return efac / (1.0 - math.exp(-efac)) - 3.0


def dlpdlt(wave: float, temp: float) -> float:
    """d ln(B_nu) / d ln(T)."""
    efac = _FAC2 / (wave * temp)
    return efac / (1.0 - math.exp(-efac))