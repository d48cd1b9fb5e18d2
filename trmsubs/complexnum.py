"""A minimal complex number type."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Complex:
    """Complex number with real and imaginary parts."""

    real: float = 0.0
    imag: float = 0.0

    def modulus(self) -> float:
        """Absolute value."""
        return math.hypot(self.real, self.imag)

    def _product(self, other: Complex | float) -> tuple[float, float]:
        if isinstance(other, Complex):
            return (
                self.real * other.real - self.imag * other.imag,
                self.real * other.imag + self.imag * other.real,
            )
        if isinstance(other, (int, float)):
            return self.real * other, self.imag * other
        return NotImplemented

    def __mul__(self, other: Complex | float) -> Complex:
        product = self._product(other)
        if product is NotImplemented:
            return NotImplemented
        return Complex(*product)

    __rmul__ = __mul__

    def __imul__(self, other: Complex | float) -> Complex:
        product = self._product(other)
        if product is NotImplemented:
            return NotImplemented
        self.real, self.imag = product
        return self