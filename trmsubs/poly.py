"""Polynomial scales used to describe pixel-to-coordinate mappings."""

from __future__ import annotations

import math
import struct
import warnings
from dataclasses import dataclass, field

from .errors import SubsError

_HEADER = struct.Struct("<?ddi")
_ITMAX = 500


@dataclass
class Poly:
    """Polynomial in the scaled variable ``(x - middle) / hrange``.

    The value is ``sum(coeff[n] * ((x - middle) / hrange) ** n)``; when
    ``norm`` is False the exponential of that sum is returned instead,
    which gives a logarithmic scale.
    """

    coeff: list[float] = field(default_factory=list)
    norm: bool = True
    middle: float = 0.0
    hrange: float = 1.0

    @classmethod
    def pixel_scale(cls, npix: int) -> Poly:
        """Linear scale running from 1 at pixel 0 to npix at pixel npix-1."""
        half = (npix - 1) / 2.0
        return cls([(npix + 1) / 2.0, half], True, half, half)

    @classmethod
    def linear(cls, xs: float, xe: float, npix: int) -> Poly:
        """Linear scale from ``xs`` at pixel -0.5 to ``xe`` at pixel npix-0.5."""
        middle = (xs + xe) / 2.0
        hrange = abs(xe - xs) / 2.0
        c1 = hrange * (xe - xs) / npix
        c0 = xs - c1 * (-0.5 - middle) / hrange
        return cls([c0, c1], True, middle, hrange)

    def __len__(self) -> int:
        return len(self.coeff)

    def value(self, x: float) -> float:
        """Value of the poly at ``x``."""
        if not self.coeff:
            raise SubsError("Poly.value: undefined operation on null poly")
        total = self.coeff[0]
        if len(self.coeff) > 1:
            fac = (x - self.middle) / self.hrange
            power = fac
            for c in self.coeff[1:]:
                total += c * power
                power *= fac
        return total if self.norm else math.exp(total)

    def deriv(self, x: float) -> float:
        """Derivative of the poly with respect to ``x``."""
        if not self.coeff:
            raise SubsError("Poly.deriv: undefined operation on null poly")
        fac = (x - self.middle) / self.hrange
        total = 0.0
        power = 1.0
        for i, c in enumerate(self.coeff[1:], start=1):
            total += i * c * power
            power *= fac
        if self.norm:
            return total / self.hrange
        return total * self.value(x) / self.hrange

    def get_x(self, value: float, xguess: float, acc: float) -> float:
        """X at which the poly equals ``value``, by Newton-Raphson from ``xguess``.

        The poly should be monotonic and the guess reasonable.
        """
        xold = xguess + 2.0 * acc
        nit = 0
        while abs(xold - xguess) > acc and nit < _ITMAX:
            xold = xguess
            nit += 1
            xguess -= (self.value(xguess) - value) / self.deriv(xguess)
        if nit == _ITMAX:
            warnings.warn("Poly.get_x: hit maximum iterations", RuntimeWarning, stacklevel=2)
        return xguess

    def to_bytes(self) -> bytes:
        """Binary form: norm flag, middle, hrange, count, then the coefficients."""
        n = len(self.coeff)
        return _HEADER.pack(self.norm, self.middle, self.hrange, n) + struct.pack(
            f"<{n}d", *self.coeff
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> Poly:
        """Inverse of :meth:`to_bytes`."""
        if len(data) < _HEADER.size:
            raise SubsError("Poly.from_bytes: data too short")
        norm, middle, hrange, n = _HEADER.unpack_from(data)
        if n < 0 or len(data) != _HEADER.size + 8 * n:
            raise SubsError("Poly.from_bytes: data length does not match coefficient count")
        coeff = list(struct.unpack_from(f"<{n}d", data, _HEADER.size))
        return cls(coeff, norm, middle, hrange)

    def __str__(self) -> str:
        parts = [str(int(self.norm)), repr(self.middle), repr(self.hrange), str(len(self.coeff))]
        parts.extend(repr(c) for c in self.coeff)
        return " ".join(parts)

    @classmethod
    def parse(cls, text: str) -> Poly:
        """Read a poly from the text form produced by ``str()``."""
        tokens = text.split()
        try:
            norm = bool(int(tokens[0]))
            middle = float(tokens[1])
            hrange = float(tokens[2])
            n = int(tokens[3])
            if n < 0 or len(tokens) != 4 + n:
                raise SubsError(f"Poly.parse: expected {n} coefficients")
            coeff = [float(t) for t in tokens[4:]]
        except (IndexError, ValueError) as err:
            raise SubsError(f"Poly.parse: cannot read poly from {text!r}") from err
        return cls(coeff, norm, middle, hrange)