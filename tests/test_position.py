import math
import struct

import pytest

from trmsubs.errors import SubsError
from trmsubs.position import Position, PositionError, dot


def test_parse_colon_form_formats_back():
    pos = Position.parse("01:10:12.2 +20:00:34.3")
    assert pos.ra_dec() == "01:10:12.2+20:00:34.3"
    assert pos.epoch == 2000.0
    assert pos.pm_ra == 0.0 and pos.rv == 0.0


def test_parse_blank_form_matches_colon_form():
    a = Position.parse("01:10:12.2 +20:00:34.3")
    b = Position.parse("01 10 12.2 +20 00 34.3")
    assert a.ra == pytest.approx(b.ra)
    assert a.dec == pytest.approx(b.dec)


def test_parse_negative_declination():
    pos = Position.parse("12:00:00.0 -45:30:00.0")
    assert pos.dec == pytest.approx(-45.5)
    assert pos.ra == pytest.approx(12.0)


def test_parse_proper_motion_block():
    pos = Position.parse("01:10:12.2 +20:00:34.34 P 0.66 -0.45 0.034 -21.3 2010.0")
    assert pos.pm_ra == pytest.approx(0.66)
    assert pos.pm_dec == pytest.approx(-0.45)
    assert pos.parallax == pytest.approx(0.034)
    assert pos.rv == pytest.approx(-21.3)
    assert pos.epoch == pytest.approx(2010.0)


def test_parse_bad_sign_raises():
    with pytest.raises(PositionError):
        Position.parse("01:10:12.2 *20:00:34.3")


def test_parse_garbage_raises():
    with pytest.raises(PositionError):
        Position.parse("not a position")


def test_position_error_is_subs_error():
    with pytest.raises(SubsError):
        Position(0.0, 95.0)


def test_str_form():
    pos = Position.parse("01:10:12.2 +20:00:34.3")
    assert str(pos) == "RA: 01:10:12.2, Dec: +20:00:34.3, Ep: 2000"


def test_ra_wraps_at_24_hours():
    pos = Position(23.99999999, 0.0)
    assert pos.ra_dec().startswith("00:00:00.0")


def test_from_sexagesimal_matches_parse():
    a = Position.from_sexagesimal(5, 30, 15.5, "-", 10, 20, 30.0, 2000.0)
    b = Position.parse("05:30:15.5 -10:20:30.0")
    assert a.ra == pytest.approx(b.ra)
    assert a.dec == pytest.approx(b.dec)
    assert a.dec < 0.0


@pytest.mark.parametrize(
    "args",
    [
        (25, 0, 0.0, "+", 0, 0, 0.0, 2000.0),
        (1, 0, 0.0, "+", 91, 0, 0.0, 2000.0),
        (1, 0, 0.0, "x", 10, 0, 0.0, 2000.0),
    ],
)
def test_from_sexagesimal_errors(args):
    with pytest.raises(PositionError):
        Position.from_sexagesimal(*args)


@pytest.mark.parametrize("ra, dec", [(25.0, 0.0), (1.0, -91.0), (1.0, 90.5)])
def test_constructor_range_errors(ra, dec):
    with pytest.raises(PositionError):
        Position(ra, dec)


@pytest.mark.parametrize("ra, dec", [(0.0, 0.0), (3.7, -20.0), (18.2, 65.0)])
def test_vect_is_unit(ra, dec):
    v = Position(ra, dec).vect()
    assert math.fsum(c * c for c in v) == pytest.approx(1.0)


def test_vect_axes():
    assert Position(0.0, 0.0).vect() == pytest.approx((1.0, 0.0, 0.0))
    assert Position(6.0, 0.0).vect() == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)
    assert Position(0.0, 90.0).vect() == pytest.approx((0.0, 0.0, 1.0), abs=1e-12)


def test_dot_agrees_with_vectors():
    p1 = Position(3.0, 20.0)
    p2 = Position(7.5, -35.0)
    v1, v2 = p1.vect(), p2.vect()
    expected = sum(a * b for a, b in zip(v1, v2))
    assert dot(p1, p2) == pytest.approx(expected)
    assert dot(p1, p1) == pytest.approx(1.0)


def test_dot_warns_for_different_epochs():
    with pytest.warns(RuntimeWarning):
        value = dot(Position(1.0, 0.0, 2000.0), Position(1.0, 0.0, 2010.0))
    assert value == pytest.approx(1.0)


def test_bytes_round_trip():
    pos = Position(10.25, -33.5, 2015.5, 0.5, -0.25, 0.125, 12.0)
    data = pos.to_bytes()
    assert len(data) == 3 * 8 + 4 * 4
    assert Position.from_bytes(data, False) == pos


def test_bytes_swapped():
    data = struct.pack(">3d4f", 4.5, 12.0, 2000.0, 1.0, 2.0, 0.5, -3.0)
    pos = Position.from_bytes(data, True)
    assert pos == Position(4.5, 12.0, 2000.0, 1.0, 2.0, 0.5, -3.0)


@pytest.mark.parametrize(
    "values",
    [
        (24.0, 0.0, 2000.0),
        (-1.0, 0.0, 2000.0),
        (1.0, 91.0, 2000.0),
        (1.0, 0.0, 1800.0),
    ],
)
def test_from_bytes_range_errors(values):
    data = struct.pack("<3d4f", *values, 0.0, 0.0, 0.0, 0.0)
    with pytest.raises(PositionError):
        Position.from_bytes(data, False)


def test_from_bytes_short_data():
    with pytest.raises(PositionError):
        Position.from_bytes(b"\x00" * 10, False)