"""Celestial positions: parsing, formatting, binary storage and geometry."""

from __future__ import annotations

import math
import re
import struct
import warnings
from dataclasses import dataclass

from .errors import SubsError

_LITTLE = struct.Struct("<3d4f")
_BIG = struct.Struct(">3d4f")

_INT = r"[+-]?\d+"
_FLOAT = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
_POSITION_RE = re.compile(
    rf"""
    \s*(?P<rah>{_INT}).
    \s*(?P<ram>{_INT}).
    \s*(?P<ras>{_FLOAT})
    \s*(?P<sign>\S)
    \s*(?P<decd>{_INT}).
    \s*(?P<decm>{_INT}).
    \s*(?P<decs>{_FLOAT})
    (?:[ \t]*P
        \s+(?P<pmra>{_FLOAT})
        \s+(?P<pmdec>{_FLOAT})
        \s+(?P<prlx>{_FLOAT})
        \s+(?P<rv>{_FLOAT})
        \s+(?P<epoch>{_FLOAT})
    )?
    \s*$
    """,
    re.VERBOSE,
)


class PositionError(SubsError):
    """Raised for invalid positions or position data."""


def _sexagesimal(value: float) -> tuple[int, int, int, int]:
    """Split a non-negative value into units, minutes, seconds and tenths."""
    units = int(math.floor(value))
    minutes = int(math.floor(60.0 * (value - units)))
    seconds = int(math.floor(3600.0 * (value - (units + minutes / 60.0))))
    tenths = int(
        math.floor(36000.0 * (value - (units + minutes / 60.0 + seconds / 3600.0)) + 0.5)
    )
    if tenths == 10:
        seconds += 1
        tenths = 0
    if seconds == 60:
        minutes += 1
        seconds = 0
    if minutes == 60:
        units += 1
        minutes = 0
    return units, minutes, seconds, tenths


def _signed(sign: str, value: float) -> float:
    if sign == "-":
        return -value
    if sign != "+":
        raise PositionError("declination sign must equal either '-' or '+'")
    return value


@dataclass
class Position:
    """Right ascension (hours), declination (degrees) and epoch of a target.

    Proper motions are in arcseconds per year, parallax in arcseconds and
    radial velocity in km/s.
    """

    ra: float
    dec: float
    epoch: float = 2000.0
    pm_ra: float = 0.0
    pm_dec: float = 0.0
    parallax: float = 0.0
    rv: float = 0.0

    def __post_init__(self) -> None:
        if self.ra > 24.0:
            raise PositionError("Position: RA > 24")
        if self.dec < -90.0 or self.dec > 90.0:
            raise PositionError("Position: declination out of range -90 to 90")

    @classmethod
    def from_sexagesimal(
        cls,
        rah: int,
        ram: int,
        ras: float,
        decsgn: str,
        decd: int,
        decm: int,
        decs: float,
        epoch: float,
    ) -> Position:
        """Build a position from hours, minutes, seconds and sign, degrees, minutes, seconds."""
        ra = abs(float(rah)) + abs(float(ram)) / 60.0 + abs(float(ras)) / 3600.0
        if ra > 24.0:
            raise PositionError("Position.from_sexagesimal: RA > 24")
        dec = abs(float(decd)) + abs(float(decm)) / 60.0 + abs(float(decs)) / 3600.0
        if dec > 90.0:
            raise PositionError(
                "Position.from_sexagesimal: declination out of range -90 to 90"
            )
        return cls(ra, _signed(decsgn, dec), epoch)

    @classmethod
    def parse(cls, text: str) -> Position:
        """Read a position such as ``"01:10:12.2 +20:00:34.34"``.

        Blanks may replace the colons. An optional trailing
        ``"P pm_ra pm_dec parallax rv epoch"`` sets the space motion and
        epoch; otherwise these are zero and the epoch is 2000.
        """
        match = _POSITION_RE.match(text)
        if match is None:
            raise PositionError(f"Position.parse: failed to construct from {text!r}")
        ra = (
            abs(float(match["rah"]))
            + abs(float(match["ram"])) / 60.0
            + abs(float(match["ras"])) / 3600.0
        )
        dec = (
            abs(float(match["decd"]))
            + abs(float(match["decm"])) / 60.0
            + abs(float(match["decs"])) / 3600.0
        )
        dec = _signed(match["sign"], dec)
        if match["epoch"] is None:
            return cls(ra, dec, 2000.0)
        return cls(
            ra,
            dec,
            float(match["epoch"]),
            float(match["pmra"]),
            float(match["pmdec"]),
            float(match["prlx"]),
            float(match["rv"]),
        )

    @property
    def ra_rad(self) -> float:
        """Right ascension in radians."""
        return 2.0 * math.pi * self.ra / 24.0

    @property
    def dec_rad(self) -> float:
        """Declination in radians."""
        return 2.0 * math.pi * self.dec / 360.0

    def _parts(self) -> tuple[str, str, str]:
        rah, ram, ras, rafs = _sexagesimal(self.ra)
        if rah == 24:
            rah = 0
        sign = "-" if self.dec < 0.0 else "+"
        decd, decm, decs, decfs = _sexagesimal(abs(self.dec))
        return (
            f"{rah:02d}:{ram:02d}:{ras:02d}.{rafs:d}",
            sign,
            f"{decd:02d}:{decm:02d}:{decs:02d}.{decfs:d}",
        )

    def ra_dec(self) -> str:
        """Position as ``"HH:MM:SS.s+DD:MM:SS.s"``."""
        ra, sign, dec = self._parts()
        return f"{ra}{sign}{dec}"

    def __str__(self) -> str:
        ra, sign, dec = self._parts()
        return f"RA: {ra}, Dec: {sign}{dec}, Ep: {self.epoch:g}"

    def vect(self) -> tuple[float, float, float]:
        """Unit vector pointing at the position."""
        a, d = self.ra_rad, self.dec_rad
        cd = math.cos(d)
        return cd * math.cos(a), cd * math.sin(a), math.sin(d)

    def to_bytes(self) -> bytes:
        """Binary form: RA, Dec, epoch as doubles then pm_ra, pm_dec, parallax, rv as floats."""
        return _LITTLE.pack(
            self.ra, self.dec, self.epoch, self.pm_ra, self.pm_dec, self.parallax, self.rv
        )

    @classmethod
    def from_bytes(cls, data: bytes, swap_bytes: bool) -> Position:
        """Inverse of :meth:`to_bytes`; ``swap_bytes`` reads the opposite byte order."""
        layout = _BIG if swap_bytes else _LITTLE
        if len(data) < layout.size:
            raise PositionError("Position.from_bytes: read error")
        ra, dec, epoch, pm_ra, pm_dec, parallax, rv = layout.unpack_from(data)
        if ra < 0.0 or ra >= 24.0:
            raise PositionError("Position.from_bytes: RA out of range")
        if dec < -90.0 or dec > 90.0:
            raise PositionError("Position.from_bytes: Dec out of range")
        if epoch < 1900.0 or epoch > 2100.0:
            raise PositionError("Position.from_bytes: Epoch out of range")
        return cls(ra, dec, epoch, pm_ra, pm_dec, parallax, rv)


def dot(pos1: Position, pos2: Position) -> float:
    """Cosine of the angle between two positions.

    Warns if the epochs differ; no correction is made for that.
    """
    if pos1.epoch != pos2.epoch:
        warnings.warn(
            "taking dot product of positions with different epoch; no correction is made",
            RuntimeWarning,
            stacklevel=2,
        )
    rd1 = pos1.dec_rad
    rd2 = pos2.dec_rad
    return math.sin(rd1) * math.sin(rd2) + math.cos(rd1) * math.cos(rd2) * math.cos(
        2.0 * math.pi * (pos1.ra - pos2.ra) / 24.0
    )