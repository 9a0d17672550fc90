# Rationalize - Property Tests
# Copyright (c) 2024 Rationalize Contributors. All rights reserved.

"""
Property-based tests for the arithmetic and the bracket search.

Targets are kept to a modest magnitude since the search takes one step
per unit of |x| before it starts refining.
"""

from fractions import Fraction

from hypothesis import given, settings, strategies as st

from rationalize.rational import Comparison, Ok, Rational, compare, compare_to_num, diff_num
from rationalize.search import closest_bracket, closest_rational


targets = st.floats(min_value=-1000, max_value=1000, allow_nan=False, allow_infinity=False)
den_maxes = st.integers(min_value=1, max_value=300)
ints = st.integers(min_value=-10**6, max_value=10**6)
nonzero_ints = ints.filter(lambda v: v != 0)


class TestSearchProperties:

    @settings(deadline=None)
    @given(k=st.integers(min_value=-500, max_value=500), den_max=den_maxes)
    def test_integers_are_exact(self, k, den_max):
        assert closest_rational(k, den_max) == Rational(k, 1)

    @settings(deadline=None)
    @given(x=targets, den_max=den_maxes)
    def test_bracket_contains_target(self, x, den_max):
        lo, hi = closest_bracket(x, den_max)
        assert compare_to_num(lo, x) in (Comparison.LT, Comparison.EQ)
        assert compare_to_num(hi, x) in (Comparison.GT, Comparison.EQ)
        assert lo.d <= den_max
        assert hi.d <= den_max

    @settings(deadline=None)
    @given(x=targets, den_max=den_maxes)
    def test_bracket_is_tree_adjacent(self, x, den_max):
        lo, hi = closest_bracket(x, den_max)
        if lo.is_finite() and hi.is_finite() and lo != hi:
            assert abs(lo.n * hi.d - hi.n * lo.d) == 1

    @settings(deadline=None)
    @given(x=targets, den_max=den_maxes)
    def test_result_in_lowest_terms(self, x, den_max):
        r = closest_rational(x, den_max)
        assert r.d >= 1
        assert r.to_fraction().denominator == r.d

    @settings(deadline=None)
    @given(x=targets, den_max=den_maxes)
    def test_never_opposite_sign(self, x, den_max):
        r = closest_rational(x, den_max)
        assert r.n * x >= 0

    @settings(deadline=None)
    @given(
        x=st.floats(min_value=-100, max_value=100, allow_nan=False),
        den_max=den_maxes,
        extra=st.integers(min_value=0, max_value=300),
    )
    def test_monotonic_refinement(self, x, den_max, extra):
        coarse = closest_rational(x, den_max)
        fine = closest_rational(x, den_max + extra)
        assert abs(float(fine) - x) <= abs(float(coarse) - x) + 1e-12

    @settings(deadline=None)
    @given(
        p=st.integers(min_value=-60, max_value=60),
        q=st.integers(min_value=1, max_value=60),
        extra=st.integers(min_value=0, max_value=200),
    )
    def test_exact_value_is_fixed_point(self, p, q, extra):
        expected = Fraction(p, q)
        r = closest_rational(p / q, q + extra)
        assert r == Rational(expected.numerator, expected.denominator)


class TestArithmeticProperties:

    @given(n=ints, d=nonzero_ints)
    def test_compare_with_self_is_equal(self, n, d):
        r = Rational(n, d)
        assert compare(r, r) is Comparison.EQ

    @given(n=ints, d=ints)
    def test_compare_with_undefined_is_symmetric(self, n, d):
        undefined = Rational(0, 0)
        r = Rational(n, d)
        assert compare(undefined, r) is Comparison.UNDEFINED
        assert compare(r, undefined) is Comparison.UNDEFINED

    @given(n1=ints, d1=nonzero_ints, n2=ints, d2=nonzero_ints)
    def test_compare_is_antisymmetric(self, n1, d1, n2, d2):
        r1 = Rational(n1, d1)
        r2 = Rational(n2, d2)
        assert compare(r1, r2) is compare(r2, r1).mirror()

    @given(n=ints, d=ints, x=st.floats(min_value=-1e6, max_value=1e6, allow_nan=False))
    def test_diff_num_argument_order(self, n, d, x):
        r = Rational(n, d)
        forward = diff_num(r, x)
        backward = diff_num(x, r)
        if isinstance(forward, Ok):
            assert backward == Ok(-forward.value)
        else:
            assert backward is forward.negate()

    @given(n=ints, d=ints, x=st.floats(min_value=-1e6, max_value=1e6, allow_nan=False))
    def test_compare_to_num_argument_order(self, n, d, x):
        r = Rational(n, d)
        assert compare_to_num(x, r) is compare_to_num(r, x).mirror()

    @given(n=ints, d=ints)
    def test_negate_twice_is_identity(self, n, d):
        r = Rational(n, d)
        assert r.negate().negate() == r

    @given(n=ints, d=ints)
    def test_standardize_keeps_value(self, n, d):
        r = Rational(n, d)
        s = r.standardize()
        assert s.d >= 0
        if r.is_finite():
            assert compare(r, s) is Comparison.EQ
