import math

import pytest

from fuzzysets.fuzzy.core.defuzz import grid_estimates
from fuzzysets.fuzzy.core.mfs import Gaussian, Linear, SShaped, Trapezoidal, Triangular, ZShaped
from fuzzysets.fuzzy.core.point import Point
from fuzzysets.fuzzy.core.types import FuzzyError, InvalidShapeError, MembershipOutOfRangeError


def numeric_area(mf, n=20001):
    lo, hi = mf.support()
    dx = (hi - lo) / (n - 1)
    ys = [mf.mu(lo + i * dx) for i in range(n)]
    return dx * (sum(ys) - 0.5 * (ys[0] + ys[-1]))


class TestLinear:
    def test_reference_values(self):
        mf = Linear(0, 0, 10, 1)
        assert mf.mu(0) == 0.0
        assert mf.mu(10) == 1.0
        assert mf.mu(5) == 0.5
        assert mf.mu(-1) == 0.0
        assert mf.mu(11) == 0.0
        assert mf.area() == 5.0

    def test_weighted_mean_of_ramp(self):
        assert Linear(0, 0, 10, 1).weighted_mean() == pytest.approx(20.0 / 3.0)
        assert Linear(0, 1, 10, 0).weighted_mean() == pytest.approx(10.0 / 3.0)

    def test_flat_segment(self):
        mf = Linear(2, 0.4, 6, 0.4)
        assert mf.slope() == 0.0
        assert mf.area() == pytest.approx(1.6)
        assert mf.weighted_mean() == pytest.approx(4.0)
        assert mf.max_membership_at() == 4.0

    def test_zero_segment_has_midpoint_mean(self):
        mf = Linear(0, 0, 4, 0)
        assert mf.area() == 0.0
        assert mf.weighted_mean() == 2.0

    def test_max_membership_at(self):
        assert Linear(0, 0, 10, 1).max_membership_at() == 10
        assert Linear(0, 1, 10, 0).max_membership_at() == 0

    def test_degenerate_is_invalid_shape(self):
        with pytest.raises(InvalidShapeError):
            Linear(1, 0, 1, 1)
        with pytest.raises(InvalidShapeError):
            Linear(2, 0, 1, 1)

    def test_y_out_of_range(self):
        with pytest.raises(MembershipOutOfRangeError):
            Linear(0, 0, 1, 1.5)
        with pytest.raises(MembershipOutOfRangeError):
            Linear(0, -0.1, 1, 1)

    def test_between(self):
        mf = Linear.between(0, 4)
        assert (mf.y_lower, mf.y_upper) == (0.0, 1.0)


class TestTriangular:
    def test_reference_values(self):
        mf = Triangular(0, 5, 10)
        assert mf.mu(5) == 1.0
        assert mf.mu(0) == 0.0
        assert mf.mu(10) == pytest.approx(0.0)
        assert mf.mu(2.5) == pytest.approx(0.5)
        assert mf.mu(-1) == 0.0
        assert mf.mu(11) == 0.0
        assert mf.area() == pytest.approx(5.0)

    def test_symmetric_weighted_mean_is_peak(self):
        assert Triangular(0, 5, 10).weighted_mean() == pytest.approx(5.0)

    def test_skewed_weighted_mean_is_centroid(self):
        # centroid of a triangle = mean of its vertices
        assert Triangular(0, 10, 20).weighted_mean() == pytest.approx(10.0)
        assert Triangular(0, 2, 10).weighted_mean() == pytest.approx(4.0)

    def test_max_membership_at(self):
        assert Triangular(0, 3, 10).max_membership_at() == 3
        assert Triangular(0, 3, 10, y_lower=1.0, y_middle=0.0).max_membership_at() == 0
        assert Triangular(0, 3, 10, y_lower=0.5, y_middle=0.5).max_membership_at() == 5

    def test_lifted_base(self):
        mf = Triangular(0, 5, 10, y_lower=0.2, y_middle=0.8)
        assert mf.mu(0) == pytest.approx(0.2)
        assert mf.mu(5) == pytest.approx(0.8)
        assert mf.area() == pytest.approx(5.0)

    @pytest.mark.parametrize("params", [(0, 0, 10), (0, 10, 10), (5, 3, 10), (10, 5, 0)])
    def test_non_increasing_breakpoints(self, params):
        with pytest.raises(InvalidShapeError):
            Triangular(*params)

    def test_peak_out_of_range(self):
        with pytest.raises(MembershipOutOfRangeError):
            Triangular(0, 5, 10, y_middle=1.2)


class TestTrapezoidal:
    def test_values(self):
        mf = Trapezoidal(0, 2, 4, 6)
        assert mf.mu(-1) == 0.0
        assert mf.mu(1) == pytest.approx(0.5)
        assert mf.mu(2) == pytest.approx(1.0)
        assert mf.mu(3) == 1.0
        assert mf.mu(5) == pytest.approx(0.5)
        assert mf.mu(7) == 0.0

    def test_area_mean_max(self):
        mf = Trapezoidal(0, 2, 4, 6)
        assert mf.area() == pytest.approx(4.0)
        assert mf.weighted_mean() == pytest.approx(3.0)
        assert mf.max_membership_at() == 3.0

    def test_uneven_shoulders(self):
        mf = Trapezoidal(0, 2, 4, 6, y_lower=0.2, y_middle=1.0, y_upper=0.0)
        assert mf.mu(0) == pytest.approx(0.2)
        assert mf.mu(6) == pytest.approx(0.0)
        assert mf.area() == pytest.approx(1.2 + 1.0 + 2.0)

    def test_y_upper_defaults_to_y_lower(self):
        mf = Trapezoidal(0, 1, 2, 3, y_lower=0.3, y_middle=0.9)
        assert mf.y_upper == 0.3

    @pytest.mark.parametrize("params", [(0, 4, 2, 6), (0, 3, 3, 6)])
    def test_crossed_middle_is_triangle(self, params):
        with pytest.raises(InvalidShapeError) as exc:
            Trapezoidal(*params)
        assert exc.value.shape_found == "Triangle"

    def test_same_sign_slopes_is_parallelogram(self):
        with pytest.raises(InvalidShapeError) as exc:
            Trapezoidal(0, 2, 4, 6, y_lower=0.0, y_middle=0.5, y_upper=1.0)
        assert exc.value.shape_found == "Parallelogram"

    @pytest.mark.parametrize("params", [(2, 2, 4, 6), (0, 2, 6, 6), (3, 2, 4, 6)])
    def test_unordered_breakpoints(self, params):
        with pytest.raises(InvalidShapeError):
            Trapezoidal(*params)


class TestGaussian:
    def test_peak_and_symmetry(self):
        mf = Gaussian(2.0, 3.0)
        assert mf.mu(3.0) == 1.0
        for d in (0.5, 1.0, 4.0):
            assert mf.mu(3.0 + d) == pytest.approx(mf.mu(3.0 - d))
        assert Gaussian(1.0, 0.0).mu(1.5) == Gaussian(1.0, 0.0).mu(-1.5)

    def test_one_sigma(self):
        assert Gaussian(1.0, 0.0).mu(1.0) == pytest.approx(math.exp(-0.5))

    def test_derived(self):
        mf = Gaussian(1.5, -2.0)
        assert mf.area() == pytest.approx(math.sqrt(2 * math.pi) * 1.5)
        assert mf.weighted_mean() == -2.0
        assert mf.max_membership_at() == -2.0

    @pytest.mark.parametrize("width", [0.0, -1.0])
    def test_width_must_be_positive(self, width):
        with pytest.raises(InvalidShapeError):
            Gaussian(width, 0.0)


class TestSAndZ:
    def test_s_values(self):
        mf = SShaped.between(0, 10)
        assert mf.mu(-3) == 0.0
        assert mf.mu(0) == 0.0
        assert mf.mu(2.5) == pytest.approx(0.125)
        assert mf.mu(5) == pytest.approx(0.5)
        assert mf.mu(7.5) == pytest.approx(0.875)
        assert mf.mu(10) == 1.0
        assert mf.mu(12) == 1.0

    def test_s_derived(self):
        mf = SShaped.between(0, 10)
        assert mf.factor() == 2.0
        assert mf.area() == pytest.approx(5.0)
        assert mf.weighted_mean() == pytest.approx(85.0 / 12.0)
        assert mf.max_membership_at() == 10

    def test_z_is_mirror_of_s(self):
        s = SShaped.between(0, 10)
        z = ZShaped.between(0, 10)
        for x in (-1, 0, 2.5, 5, 7.5, 10, 11):
            assert z.mu(x) == pytest.approx(s.mu(10 - x))
        assert z.mu(0) == 1.0
        assert z.mu(10) == 0.0
        assert z.area() == pytest.approx(s.area())
        assert z.weighted_mean() == pytest.approx(10 - s.weighted_mean())
        assert z.max_membership_at() == 0

    def test_partial_heights(self):
        mf = SShaped(0, 0.2, 4, 0.6)
        assert mf.mu(-1) == pytest.approx(0.2)
        assert mf.mu(2) == pytest.approx(0.4)
        assert mf.mu(5) == pytest.approx(0.6)

    @pytest.mark.parametrize("cls", [SShaped, ZShaped])
    def test_invalid(self, cls):
        with pytest.raises(InvalidShapeError):
            cls(5, 0, 5, 1)
        with pytest.raises(InvalidShapeError):
            cls(6, 0, 5, 1)
        with pytest.raises(MembershipOutOfRangeError):
            cls(0, -0.1, 1, 1)


NAN, INF = float("nan"), float("inf")


@pytest.mark.parametrize("build", [
    lambda: Linear(NAN, 0, 1, 1),
    lambda: Linear(0, 0, INF, 1),
    lambda: Triangular(0, NAN, 10),
    lambda: Triangular(-INF, 0, 10),
    lambda: Trapezoidal(0, 1, 2, NAN),
    lambda: Trapezoidal(0, NAN, 2, 3),
    lambda: Gaussian(NAN, 0.0),
    lambda: Gaussian(1.0, NAN),
    lambda: Gaussian(INF, 0.0),
    lambda: SShaped(0, 0, NAN, 1),
    lambda: ZShaped(NAN, 0, 1, 1),
], ids=["linear-nan", "linear-inf", "tri-nan", "tri-inf", "trap-upper-nan", "trap-middle-nan",
        "gauss-width-nan", "gauss-center-nan", "gauss-width-inf", "s-nan", "z-nan"])
def test_non_finite_breakpoints_are_invalid_shapes(build):
    with pytest.raises(InvalidShapeError):
        build()


@pytest.mark.parametrize("y", [NAN, INF])
def test_non_finite_heights_are_out_of_range(y):
    with pytest.raises(MembershipOutOfRangeError):
        Linear(0, y, 1, 1)
    with pytest.raises(MembershipOutOfRangeError):
        SShaped(0, 0, 1, y)


SHAPES = [
    Linear(0, 0, 10, 1),
    Linear(-2, 0.8, 3, 0.1),
    Triangular(0, 5, 10),
    Triangular(1, 2, 9, y_lower=0.1, y_middle=0.7),
    Trapezoidal(0, 2, 4, 6),
    Trapezoidal(0, 1, 5, 9, y_lower=0.3, y_middle=0.9, y_upper=0.0),
    Gaussian(1.0, 2.0),
    SShaped.between(0, 10),
    SShaped(1, 0.1, 4, 0.9),
    ZShaped(1, 0.2, 7, 0.6),
]


@pytest.mark.parametrize("mf", SHAPES, ids=repr)
def test_closed_forms_match_numeric_integration(mf):
    lo, hi = mf.support()
    assert mf.area() == pytest.approx(numeric_area(mf), rel=1e-3)
    assert mf.weighted_mean() == pytest.approx(grid_estimates(mf.mu, lo, hi, 20001)["centroid"], abs=1e-2)


@pytest.mark.parametrize("mf", SHAPES, ids=repr)
def test_membership_stays_in_unit_interval(mf):
    lo, hi = mf.support()
    for i in range(-10, 111):
        x = lo + (hi - lo) * i / 100.0
        assert 0.0 <= mf.mu(x) <= 1.0


class TestShifts:
    def test_shift_returns_new_instance(self):
        mf = Linear(0, 0, 10, 0.5)
        up = mf.shift_up(0.5)
        assert (up.y_lower, up.y_upper) == (0.5, 1.0)
        assert (mf.y_lower, mf.y_upper) == (0.0, 0.5)

    def test_shift_out_of_range_fails(self):
        mf = Linear(0, 0, 10, 0.5)
        with pytest.raises(MembershipOutOfRangeError):
            mf.shift_up(0.6)
        with pytest.raises(MembershipOutOfRangeError):
            mf.shift_down(0.1)

    def test_horizontal_shift(self):
        mf = Triangular(0, 5, 10).shift_right(2)
        assert (mf.x_lower, mf.x_middle, mf.x_upper) == (2, 7, 12)
        assert mf.mu(7) == 1.0
        back = mf.shift_left(2)
        assert back == Triangular(0, 5, 10)

    def test_composite_shift_rebuilds_segments(self):
        mf = Triangular(0, 5, 10, y_middle=0.5).shift_up(0.5)
        assert mf.mu(0) == pytest.approx(0.5)
        assert mf.mu(5) == pytest.approx(1.0)
        assert mf.left.y_lower == pytest.approx(0.5)

    def test_trapezoid_shift_down(self):
        mf = Trapezoidal(0, 2, 4, 6, y_lower=0.2, y_middle=1.0).shift_down(0.2)
        assert (mf.y_lower, mf.y_middle, mf.y_upper) == pytest.approx((0.0, 0.8, 0.0))

    def test_gaussian(self):
        mf = Gaussian(1.0, 0.0)
        assert mf.shift_right(3).center == 3.0
        with pytest.raises(FuzzyError, match="no vertical parameters"):
            mf.shift_up(0.1)
        with pytest.raises(FuzzyError):
            mf.shift_down(0.1)

    def test_z_shift(self):
        mf = ZShaped.between(0, 10).shift_left(5)
        assert mf.mu(-5) == 1.0
        assert mf.mu(5) == 0.0


def test_weighted_point():
    p = Point(5.0, name="mid")
    wp = Triangular(0, 5, 10).weighted_point(p)
    assert wp.point is p
    assert wp.membership == 1.0
    assert Triangular(0, 5, 10).mu_of(Point(2.5)) == pytest.approx(0.5)
