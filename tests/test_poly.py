import math
import struct

import pytest

from trmsubs.errors import SubsError
from trmsubs.poly import Poly


def test_pixel_scale_runs_one_to_npix():
    poly = Poly.pixel_scale(10)
    assert poly.value(0) == pytest.approx(1.0)
    assert poly.value(9) == pytest.approx(10.0)


def test_linear_end_values():
    poly = Poly.linear(400.0, 700.0, 300)
    assert poly.value(-0.5) == pytest.approx(400.0)
    assert poly.value(299.5) == pytest.approx(700.0)


def test_linear_reversed_scale():
    poly = Poly.linear(700.0, 400.0, 150)
    assert poly.value(-0.5) == pytest.approx(700.0)
    assert poly.value(149.5) == pytest.approx(400.0)
    assert poly.deriv(20.0) < 0.0


@pytest.mark.parametrize("x", [-3.0, 0.0, 1.7, 5.5])
def test_deriv_matches_numerical_derivative(x):
    poly = Poly([0.5, -1.2, 0.7, 0.3], True, 2.0, 4.0)
    h = 1e-6
    numeric = (poly.value(x + h) - poly.value(x - h)) / (2 * h)
    assert poly.deriv(x) == pytest.approx(numeric, rel=1e-6)


def test_exponential_poly():
    normal = Poly([0.1, 0.4], True, 1.0, 2.0)
    expo = Poly([0.1, 0.4], False, 1.0, 2.0)
    assert expo.value(3.0) == pytest.approx(math.exp(normal.value(3.0)))
    h = 1e-6
    numeric = (expo.value(3.0 + h) - expo.value(3.0 - h)) / (2 * h)
    assert expo.deriv(3.0) == pytest.approx(numeric, rel=1e-6)


def test_get_x_inverts_value():
    poly = Poly([10.0, 3.0, 0.2], True, 0.0, 5.0)
    target = poly.value(2.3)
    assert poly.get_x(target, 1.0, 1e-10) == pytest.approx(2.3, abs=1e-8)


def test_null_poly_raises():
    with pytest.raises(SubsError):
        Poly().value(1.0)


def test_bytes_round_trip():
    poly = Poly([1.5, -2.25, 3.0], False, 12.5, 7.0)
    assert Poly.from_bytes(poly.to_bytes()) == poly


def test_bytes_layout():
    data = Poly([2.0], True, 1.0, 3.0).to_bytes()
    assert data[:1] == b"\x01"
    assert struct.unpack("<d", data[1:9]) == (1.0,)
    assert len(data) == 1 + 8 + 8 + 4 + 8


def test_from_bytes_truncated():
    data = Poly([1.0, 2.0], True, 0.0, 1.0).to_bytes()
    with pytest.raises(SubsError):
        Poly.from_bytes(data[:-3])


def test_text_round_trip():
    poly = Poly([0.1, 0.2, -0.3], True, 4.5, 2.5)
    assert Poly.parse(str(poly)) == poly


def test_parse_rejects_bad_text():
    with pytest.raises(SubsError):
        Poly.parse("1 0.0 1.0 3 1.0 2.0")
    with pytest.raises(SubsError):
        Poly.parse("nonsense")