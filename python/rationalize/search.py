# Rationalize - Bracket Search
# Copyright (c) 2024 Rationalize Contributors. All rights reserved.

"""
Search for the rationals nearest to a number.

The search walks the Stern-Brocot tree, which is a binary search tree over
the positive rationals: starting from the bracket [0/1, 1/0], the mediant of
the two endpoints replaces whichever endpoint lies on the same side of the
target. Every node of the tree is in lowest terms and the endpoints of every
bracket are tree-adjacent (|n1*d2 - n2*d1| == 1), so the results never need
reducing.

Example:
    >>> from rationalize.search import closest_rational, closest_bracket
    >>> closest_rational(0.27, 10)
    Rational(2, 7)
    >>> closest_bracket(0.27, 10)
    (Rational(1, 4), Rational(2, 7))
"""

from __future__ import annotations
from typing import Tuple
import logging
import math

from .exceptions import NonFiniteError, check_den_max
from .rational import Comparison, Number, Ok, Rational, diff_num, is_real_number


logger = logging.getLogger(__name__)

Bracket = Tuple[Rational, Rational]

# The bracket [0, +inf) that every search starts from
INITIAL_BRACKET: Bracket = (Rational(0, 1), Rational(1, 0))


def check_target(x: Number) -> None:
    if not is_real_number(x):
        raise TypeError(f"Target must be a real number, got {type(x).__name__}")
    try:
        finite = math.isfinite(x)
    except OverflowError as exc:
        raise NonFiniteError(
            "Target must be finite, got a value beyond the float range", value=x
        ) from exc
    if not finite:
        raise NonFiniteError(f"Target must be finite, got {x!r}", value=x)


def search(bracket: Bracket, x: Number, den_max: int) -> Bracket:
    """
    Narrow a bracket around a non-negative number x.

    The bracket must hold two tree-adjacent rationals with lo <= x <= hi.
    The search stops when:
        1. either end of the bracket equals x,
        2. the denominator of the mediant exceeds den_max, or
        3. the mediant equals x, in which case (m, m) is returned.

    Args:
        bracket: Starting (lo, hi) pair.
        x: Target number, x >= 0.
        den_max: Largest denominator allowed in the result.

    Returns:
        The narrowest bracket reachable without exceeding den_max.
    """
    lo, hi = bracket
    steps = 0
    while True:
        if (lo.compare_to_num(x) is Comparison.EQ
                or hi.compare_to_num(x) is Comparison.EQ):
            logger.debug("search(%r): endpoint hit after %d steps", x, steps)
            return lo, hi

        m = lo.mediant(hi)
        if m.d > den_max:
            logger.debug("search(%r): den_max %d reached after %d steps", x, den_max, steps)
            return lo, hi

        cm = m.compare_to_num(x)
        if cm is Comparison.EQ:
            logger.debug("search(%r): mediant %s hit after %d steps", x, m, steps)
            return m, m
        if cm is Comparison.GT:
            hi = m
        elif cm is Comparison.LT:
            lo = m
        else:
            raise AssertionError(f"mediant {m!r} is not comparable to {x!r}")
        steps += 1


def closest_bracket(x: Number, den_max: int) -> Bracket:
    """
    Return the pair of rationals (lo, hi) that most tightly brackets x,
    with both denominators no larger than den_max.

    The search runs on |x|. For negative x the endpoints are negated and
    swapped, since negation reverses their order.

    Args:
        x: A finite real number.
        den_max: Largest denominator allowed, an integer >= 1.

    Raises:
        DenominatorError: If den_max is not a positive integer.
        NonFiniteError: If x is nan, infinite, or beyond the float range.

    Examples:
        >>> closest_bracket(0, 1)
        (Rational(0, 1), Rational(1, 0))
        >>> closest_bracket(-math.pi, 10)
        (Rational(-22, 7), Rational(-25, 8))
    """
    den_max = check_den_max(den_max)
    check_target(x)

    lo, hi = search(INITIAL_BRACKET, abs(x), den_max)
    if x < 0:
        return hi.negate(), lo.negate()
    return lo, hi


def closest_rational(x: Number, den_max: int) -> Rational:
    """
    Return the rational closest to x whose denominator is at most den_max.

    When x lies exactly halfway between the two bracketing rationals the
    upper one is returned.

    Raises:
        DenominatorError: If den_max is not a positive integer.
        NonFiniteError: If x is nan, infinite, or beyond the float range.

    Examples:
        >>> closest_rational(0.17, 10)
        Rational(1, 6)
        >>> closest_rational(3.14159265359, 20)
        Rational(22, 7)
    """
    den_max = check_den_max(den_max)
    check_target(x)

    if x == 0:
        return Rational(0, 1)

    return pick_closest(closest_bracket(x, den_max), x)


def pick_closest(bracket: Bracket, x: Number) -> Rational:
    """
    Return the endpoint of a finite bracket nearest to x, hi on a tie.
    """
    lo, hi = bracket
    diff_left = _finite(diff_num(x, lo))
    diff_right = _finite(diff_num(hi, x))
    if diff_left < diff_right:
        return lo
    return hi


def _finite(result) -> float:
    # closest_bracket never returns an infinite endpoint for x != 0
    assert isinstance(result, Ok), f"expected a finite difference, got {result!r}"
    return result.value
