import math

import pytest

from trmsubs.planck import dlpdlt, dplanck, planck


@pytest.mark.parametrize("wave,temp", [(500.0, 5800.0), (100.0, 2000.0), (2e4, 10.0)])
def test_derivatives_differ_by_three(wave, temp):
    assert dlpdlt(wave, temp) - dplanck(wave, temp) == pytest.approx(3.0)


def test_positive():
    assert planck(550.0, 6000.0) > 0.0


def test_rayleigh_jeans_limit():
    wave = 1.0e8
    assert planck(wave, 2000.0) / planck(wave, 1000.0) == pytest.approx(2.0, rel=1e-4)
    assert dplanck(wave, 1000.0) == pytest.approx(-2.0, abs=1e-3)
    assert dlpdlt(wave, 1000.0) == pytest.approx(1.0, abs=1e-3)


def test_increases_with_temperature():
    values = [planck(500.0, t) for t in (3000.0, 5000.0, 8000.0, 20000.0)]
    assert values == sorted(values)


def test_continuous_across_branch_switch():
    wave = 100.0
    # dlpdlt equals the exponent factor to 1 part in e**40 near the switch
    t_switch = dlpdlt(wave, 1000.0) * 1000.0 / 40.0
    below = planck(wave, t_switch * 0.9999)
    above = planck(wave, t_switch * 1.0001)
    expected_ratio = math.exp(40.0 * (1.0 / 0.9999 - 1.0 / 1.0001))
    assert above / below == pytest.approx(expected_ratio, rel=1e-6)


def test_log_derivative_matches_finite_difference():
    wave, temp, h = 700.0, 4000.0, 1e-5
    numeric = (
        math.log(planck(wave, temp * math.exp(h))) - math.log(planck(wave, temp * math.exp(-h)))
    ) / (2 * h)
    assert dlpdlt(wave, temp) == pytest.approx(numeric, rel=1e-6)