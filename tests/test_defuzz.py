import math

import pytest

from fuzzysets.fuzzy.core import defuzz
from fuzzysets.fuzzy.core.defuzz import Defuzzification, defuzzify
from fuzzysets.fuzzy.core.mfs import Gaussian, Linear, Trapezoidal, Triangular
from fuzzysets.fuzzy.core.types import FuzzyError


@pytest.fixture
def triangle():
    return Triangular(0, 5, 10)


@pytest.mark.parametrize("method", list(Defuzzification))
def test_symmetric_triangle_defuzzifies_to_its_peak(triangle, method):
    assert defuzzify(method, triangle) == pytest.approx(5.0)


@pytest.mark.parametrize("method", list(Defuzzification))
def test_empty_input_is_zero(method):
    assert defuzzify(method) == 0.0


def test_centroid_weights_by_area():
    # (10 * 10 + 20/3 * 5) / 15
    value = defuzzify(Defuzzification.CENTROID, Triangular(0, 10, 20), Linear(0, 0, 10, 1))
    assert value == pytest.approx(80.0 / 9.0)


def test_max_membership_mean():
    value = defuzzify("max_membership_mean", Triangular(0, 5, 10), Triangular(10, 15, 20))
    assert value == pytest.approx(10.0)


def test_weighted_max_membership_mean():
    low = Triangular(0, 2, 4, y_middle=0.5)
    high = Triangular(6, 8, 10)
    # (2 * 0.5 + 8 * 1.0) / 1.5
    assert defuzzify("weighted_max_membership_mean", low, high) == pytest.approx(6.0)


def test_weighted_mean_uses_membership_at_mean():
    a = Gaussian(1.0, 0.0)
    b = Trapezoidal(4, 5, 7, 8, y_middle=0.5)
    # both weighted means sit at a maximum: weights 1.0 and 0.5
    assert defuzzify("weighted_mean", a, b) == pytest.approx((0.0 * 1.0 + 6.0 * 0.5) / 1.5)


@pytest.mark.parametrize("method", list(Defuzzification))
def test_zero_weight_sum_returns_zero_not_nan(method):
    flat = Linear(0, 0, 10, 0)
    value = defuzzify(method, flat, Linear(2, 0, 4, 0))
    assert not math.isnan(value)
    if method is not Defuzzification.MAX_MEMBERSHIP_MEAN:
        assert value == 0.0


def test_max_membership_mean_ignores_weights():
    assert defuzzify("max_membership_mean", Linear(0, 0, 10, 0)) == 5.0


@pytest.mark.parametrize("name", ["centroid", "CENTROID", "Centroid", Defuzzification.CENTROID])
def test_method_parsing(name):
    assert Defuzzification.parse(name) is Defuzzification.CENTROID


def test_unknown_method():
    with pytest.raises(FuzzyError):
        defuzzify("bogus", Triangular(0, 5, 10))


class TestGrid:
    def test_symmetric_triangle(self, triangle):
        est = defuzz.grid_estimates(triangle.mu, 0, 10, 1001)
        assert est["centroid"] == pytest.approx(5.0)
        assert est["mom"] == pytest.approx(5.0)
        assert est["bisector"] == pytest.approx(5.0, abs=0.02)

    def test_mom_on_plateau(self):
        trap = Trapezoidal(0, 2, 4, 6)
        assert defuzz.grid_estimates(trap.mu, 0, 6, 601)["mom"] == pytest.approx(3.0)

    def test_skewed_ramp(self):
        ramp = Linear(0, 0, 10, 1)
        est = defuzz.grid_estimates(ramp.mu, 0, 10, 2001)
        assert est["centroid"] == pytest.approx(20.0 / 3.0, abs=1e-2)
        assert est["mom"] == pytest.approx(10.0)
        # ∫0^b x dx = 25  ->  b = sqrt(50)
        assert est["bisector"] == pytest.approx(math.sqrt(50.0), abs=1e-2)

    def test_zero_curve_falls_back_to_midpoint(self):
        est = defuzz.grid_estimates(lambda y: 0.0, 2, 8, 101)
        assert est == {"centroid": 5.0, "mom": 5.0, "bisector": 5.0}

    def test_sample(self):
        assert defuzz.sample(lambda y: 1.0, 0, 1, 3) == [(0.0, 1.0), (0.5, 1.0), (1.0, 1.0)]
        assert defuzz.sample(lambda y: y, 2, 4, 1) == [(3.0, 3.0)]
