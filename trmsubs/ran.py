"""Uniform pseudo-random generators ran1 to ran4 and the psdes hash."""

from __future__ import annotations

from collections.abc import Iterator

_MASK32 = 0xFFFFFFFF


class _Generator:
    """Common iteration support for the uniform generators."""

    def random(self) -> float:  # pragma: no cover - overridden
        raise NotImplementedError

    def __iter__(self) -> Iterator[float]:
        while True:
            yield self.random()


class Ran1(_Generator):
    """Minimal-standard generator with Bays-Durham shuffle.

    Setting ``seed`` to zero or a negative value re-initialises the sequence
    on the next call.
    """

    _IA = 16807
    _IM = 2147483647
    _AM = 1.0 / _IM
    _IQ = 127773
    _IR = 2836
    _NTAB = 32
    _NDIV = 1 + (_IM - 1) // _NTAB
    _RNMX = 1.0 - 1.2e-7

    def __init__(self, seed: int) -> None:
        self.seed = int(seed)
        self._first = True
        self._iy = 0
        self._iv = [0] * self._NTAB

    def _step(self) -> None:
        k = self.seed // self._IQ
        self.seed = self._IA * (self.seed - k * self._IQ) - self._IR * k
        if self.seed < 0:
            self.seed += self._IM

    def random(self) -> float:
        """Return a uniform deviate in (0, 1)."""
        if self.seed <= 0 or self._first:
            self._first = False
            self.seed = 1 if self.seed == 0 else abs(self.seed)
            for j in range(self._NTAB + 7, -1, -1):
                self._step()
                if j < self._NTAB:
                    self._iv[j] = self.seed
            self._iy = self._iv[0]
        self._step()
        j = self._iy // self._NDIV
        self._iy = self._iv[j]
        self._iv[j] = self.seed
        return min(self._AM * self._iy, self._RNMX)


class Ran2(_Generator):
    """L'Ecuyer combined generator with Bays-Durham shuffle."""

    _IM1 = 2147483563
    _IM2 = 2147483399
    _AM = 1.0 / _IM1
    _IMM1 = _IM1 - 1
    _IA1 = 40014
    _IA2 = 40692
    _IQ1 = 53668
    _IQ2 = 52774
    _IR1 = 12211
    _IR2 = 3791
    _NTAB = 32
    _NDIV = 1 + _IMM1 // _NTAB
    _RNMX = 1.0 - 1.2e-7

    def __init__(self, seed: int) -> None:
        self.seed = int(seed)
        self._first = True
        self._seed2 = 123456789
        self._iy = 0
        self._iv = [0] * self._NTAB

    def _step1(self) -> None:
        k = self.seed // self._IQ1
        self.seed = self._IA1 * (self.seed - k * self._IQ1) - k * self._IR1
        if self.seed < 0:
            self.seed += self._IM1

    def random(self) -> float:
        """Return a uniform deviate in (0, 1)."""
        if self.seed <= 0 or self._first:
            self._first = False
            self.seed = 1 if self.seed == 0 else abs(self.seed)
            self._seed2 = self.seed
            for j in range(self._NTAB + 7, -1, -1):
                self._step1()
                if j < self._NTAB:
                    self._iv[j] = self.seed
            self._iy = self._iv[0]
        self._step1()
        k = self._seed2 // self._IQ2
        self._seed2 = self._IA2 * (self._seed2 - k * self._IQ2) - k * self._IR2
        if self._seed2 < 0:
            self._seed2 += self._IM2
        j = self._iy // self._NDIV
        self._iy = self._iv[j] - self._seed2
        self._iv[j] = self.seed
        if self._iy < 1:
            self._iy += self._IMM1
        return min(self._AM * self._iy, self._RNMX)


class Ran3(_Generator):
    """Knuth's subtractive generator.

    A negative ``seed`` re-initialises the sequence on the next call; the
    first call always initialises.
    """

    _MBIG = 1000000000
    _MSEED = 161803398

    def __init__(self, seed: int) -> None:
        self.seed = int(seed)
        self._first = True
        self._inext = 0
        self._inextp = 0
        self._ma = [0] * 56

    def _initialise(self) -> None:
        mbig = self._MBIG
        ma = [0] * 56
        mj = abs(self._MSEED - abs(self.seed)) % mbig
        ma[55] = mj
        mk = 1
        for i in range(1, 55):
            ii = (21 * i) % 55
            ma[ii] = mk
            mk = mj - mk
            if mk < 0:
                mk += mbig
            mj = ma[ii]
        for _ in range(4):
            for i in range(1, 56):
                ma[i] -= ma[1 + (i + 30) % 55]
                if ma[i] < 0:
                    ma[i] += mbig
        self._ma = ma
        self._inext = 0
        self._inextp = 31
        self.seed = 1

    def random(self) -> float:
        """Return a uniform deviate in [0, 1)."""
        if self.seed < 0 or self._first:
            self._first = False
            self._initialise()
        self._inext = 1 if self._inext + 1 == 56 else self._inext + 1
        self._inextp = 1 if self._inextp + 1 == 56 else self._inextp + 1
        mj = self._ma[self._inext] - self._ma[self._inextp]
        if mj < 0:
            mj += self._MBIG
        self._ma[self._inext] = mj
        return mj / self._MBIG


_C1 = (0xBAA96887, 0x1E17D32C, 0x03BCDC3C, 0x0F33D1B2)
_C2 = (0x4B0F3B58, 0xE874F0C3, 0x6955C5A6, 0x55A7CA46)


def psdes(lword: int, rword: int) -> tuple[int, int]:
    """Pseudo-DES hash of two 32-bit words; returns the new (lword, rword)."""
    lword &= _MASK32
    rword &= _MASK32
    for c1, c2 in zip(_C1, _C2):
        iswap = rword
        ia = rword ^ c1
        itmpl = ia & 0xFFFF
        itmph = ia >> 16
        ib = (itmpl * itmpl + (~(itmph * itmph) & _MASK32)) & _MASK32
        ia = ((ib >> 16) | ((ib & 0xFFFF) << 16)) & _MASK32
        rword = lword ^ (((ia ^ c2) + itmpl * itmph) & _MASK32)
        lword = iswap
    return lword, rword


class Ran4(_Generator):
    """Generator built on the psdes hash of a counter.

    A negative ``seed`` sets the hash key to its magnitude and restarts the
    counter at 1.
    """

    _NORMALISE = 2.0 ** -32

    def __init__(self, seed: int) -> None:
        self.seed = int(seed)
        self._idums = 0

    def random(self) -> float:
        """Return a uniform deviate in [0, 1)."""
        if self.seed < 0:
            self._idums = -self.seed
            self.seed = 1
        _, rword = psdes(self._idums, self.seed)
        self.seed += 1
        return self._NORMALISE * rword