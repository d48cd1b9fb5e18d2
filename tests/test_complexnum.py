import pytest

from trmsubs.complexnum import Complex


def test_defaults_are_zero():
    c = Complex()
    assert (c.real, c.imag) == (0.0, 0.0)


def test_from_real_only():
    c = Complex(2.5)
    assert (c.real, c.imag) == (2.5, 0.0)


def test_modulus():
    assert Complex(3.0, 4.0).modulus() == pytest.approx(5.0)


@pytest.mark.parametrize("a,b", [((1.0, 2.0), (3.0, -1.0)), ((-0.5, 4.0), (2.0, 2.0))])
def test_multiplication_matches_builtin(a, b):
    product = Complex(*a) * Complex(*b)
    expected = complex(*a) * complex(*b)
    assert product.real == pytest.approx(expected.real)
    assert product.imag == pytest.approx(expected.imag)


def test_in_place_multiplication_matches_builtin():
    c = Complex(1.5, -2.0)
    original = c
    c *= Complex(0.5, 3.0)
    expected = complex(1.5, -2.0) * complex(0.5, 3.0)
    assert c is original
    assert c == Complex(pytest.approx(expected.real), pytest.approx(expected.imag))


def test_scalar_multiplication():
    assert Complex(1.0, -2.0) * 3.0 == Complex(3.0, -6.0)
    assert 2.0 * Complex(1.0, 1.0) == Complex(2.0, 2.0)
    c = Complex(1.0, 2.0)
    c *= 0.5
    assert c == Complex(0.5, 1.0)


def test_modulus_of_product_is_product_of_moduli():
    a, b = Complex(1.2, -0.7), Complex(-3.0, 2.2)
    assert (a * b).modulus() == pytest.approx(a.modulus() * b.modulus())


def test_unsupported_operand():
    with pytest.raises(TypeError):
        Complex(1.0, 1.0) * "x"