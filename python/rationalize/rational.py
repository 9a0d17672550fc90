# Rationalize - Rational Arithmetic
# Copyright (c) 2024 Rationalize Contributors. All rights reserved.

"""
Safe arithmetic on rationals with possibly zero denominators.

A Rational is a pair of integers (n, d). The denominator may be positive,
negative, or zero, so the pair covers ordinary fractions as well as signed
infinity (n/0 with n != 0) and an undefined value (0/0). Nothing here ever
divides by zero: conversions return an explicit result value instead.

Example:
    >>> from rationalize.rational import Rational, mediant, compare
    >>> mediant(Rational(1, 2), Rational(1, 0))
    Rational(2, 2)
    >>> compare(Rational(1, 0), Rational(1, 2))
    <Comparison.GT: 'gt'>
    >>> Rational(0, 0).to_float()
    <Sentinel.UNDEFINED: 'undefined'>
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from numbers import Integral, Real
from numbers import Rational as _RationalABC
from typing import Any, Callable, Optional, Union
import math

from .exceptions import NonFiniteError


# Things that can be compared or subtracted against a Rational
Number = Union[int, float, Fraction]

Formatter = Callable[[int, int], str]


class Comparison(Enum):
    """Outcome of comparing a rational against another value."""
    GT = "gt"
    LT = "lt"
    EQ = "eq"
    UNDEFINED = "undefined"

    def mirror(self) -> Comparison:
        """Result of the same comparison with the operands swapped."""
        if self is Comparison.GT:
            return Comparison.LT
        if self is Comparison.LT:
            return Comparison.GT
        return self


class Sentinel(Enum):
    """Non-finite outcomes of converting a rational to a float."""
    POS_INFINITY = "pos_infinity"
    NEG_INFINITY = "neg_infinity"
    UNDEFINED = "undefined"

    def negate(self) -> Sentinel:
        if self is Sentinel.POS_INFINITY:
            return Sentinel.NEG_INFINITY
        if self is Sentinel.NEG_INFINITY:
            return Sentinel.POS_INFINITY
        return self


@dataclass(frozen=True)
class Ok:
    """A float result for a rational with a nonzero denominator."""
    value: float


FloatResult = Union[Ok, Sentinel]


def _default_format(n: int, d: int) -> str:
    return f"{n}/{d}"


def _quotient(n: int, d: int) -> float:
    """n / d for d != 0, saturated to inf or -inf beyond the float range."""
    try:
        return n / d
    except OverflowError:
        return math.inf if (n > 0) == (d > 0) else -math.inf


def _saturate(q: Fraction) -> float:
    try:
        return float(q)
    except OverflowError:
        return math.inf if q > 0 else -math.inf


@dataclass(frozen=True)
class Rational:
    """
    An integer numerator and denominator, kept exactly as given.

    The pair is never reduced and its signs are never normalized, so
    Rational(2, 4) and Rational(1, 2) are distinct values that compare
    EQ under compare(). Instances are immutable; every operation returns
    a new Rational.
    """
    n: int
    d: int

    def __post_init__(self):
        for name in ('n', 'd'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise TypeError(
                    f"Rational {name} must be an integer, got {type(value).__name__}"
                )
            # Store numpy and other integral types as plain int
            object.__setattr__(self, name, int(value))

    @classmethod
    def new(cls, n: int, d: int) -> Rational:
        """Create a rational n/d without any normalization."""
        return cls(n, d)

    @classmethod
    def from_fraction(cls, f: Fraction) -> Rational:
        return cls(f.numerator, f.denominator)

    @classmethod
    def from_dict(cls, data: dict[str, int]) -> Rational:
        """Create from a {'n': ..., 'd': ...} mapping."""
        return cls(data['n'], data['d'])

    # Classification

    def is_finite(self) -> bool:
        return self.d != 0

    def is_undefined(self) -> bool:
        return self.n == 0 and self.d == 0

    # Structural operations

    def mediant(self, other: Rational) -> Rational:
        """
        Return (n1 + n2)/(d1 + d2).

        When n1/d1 < n2/d2 the mediant lies strictly between them. Zero
        denominators are allowed, e.g. the mediant of 1/2 and 1/0 is 2/2.
        """
        return Rational(self.n + other.n, self.d + other.d)

    def negate(self) -> Rational:
        """Negate the numerator. Flips the sign of an infinity; 0/0 stays 0/0."""
        return Rational(-self.n, self.d)

    def standardize(self) -> Rational:
        """Return an equivalent rational whose denominator is not negative."""
        if self.d < 0:
            return Rational(-self.n, -self.d)
        return self

    # Conversions

    def to_float(self) -> FloatResult:
        """
        Attempt to convert to a float.

        Returns:
            Ok(n / d) for a nonzero denominator, saturated to inf or -inf
            when the quotient is beyond the float range. For a zero denominator,
            Sentinel.UNDEFINED if n == 0, Sentinel.POS_INFINITY if n > 0,
            or Sentinel.NEG_INFINITY if n < 0.
        """
        if self.d == 0:
            if self.n == 0:
                return Sentinel.UNDEFINED
            return Sentinel.POS_INFINITY if self.n > 0 else Sentinel.NEG_INFINITY
        return Ok(_quotient(self.n, self.d))

    def to_fraction(self) -> Fraction:
        """
        Convert to a reduced Fraction.

        Raises:
            NonFiniteError: If the denominator is zero.
        """
        if self.d == 0:
            raise NonFiniteError(f"{self} has no finite value", value=self)
        return Fraction(self.n, self.d)

    def to_dict(self) -> dict[str, int]:
        return {'n': self.n, 'd': self.d}

    def to_string(self, formatter: Optional[Formatter] = None) -> str:
        """
        Format as a string, "n/d" unless a formatter(n, d) is given.

        Example:
            >>> Rational(1, 2).to_string(lambda n, d: f"{n} over {d}")
            '1 over 2'
        """
        if formatter is None:
            formatter = _default_format
        return formatter(self.n, self.d)

    # Comparisons and differences

    def diff_num(self, x: Number) -> FloatResult:
        """Return Ok(self - x), or the sentinel of to_float() if self is not finite."""
        if self.d == 0:
            return self.to_float()
        try:
            return Ok(self.n / self.d - x)
        except OverflowError:
            pass

        # An operand is beyond the float range; subtract exactly instead
        if not isinstance(x, _RationalABC):
            x = float(x)
            if not math.isfinite(x):
                return Ok(_quotient(self.n, self.d) - x)
        return Ok(_saturate(Fraction(self.n, self.d) - Fraction(x)))

    def compare_to_num(self, x: Number) -> Comparison:
        """
        Compare against an ordinary number.

        0/0 is UNDEFINED, n/0 with n > 0 is GT any number, n/0 with
        n < 0 is LT any number. Otherwise n / d is compared to x with
        exact float comparison; a NaN x gives UNDEFINED. A quotient beyond
        the float range is compared exactly as a Fraction.
        """
        if self.d == 0:
            if self.n == 0:
                return Comparison.UNDEFINED
            return Comparison.GT if self.n > 0 else Comparison.LT

        try:
            f = self.n / self.d
        except OverflowError:
            f = Fraction(self.n, self.d)
            if not isinstance(x, _RationalABC):
                x = float(x)

        if f > x:
            return Comparison.GT
        if f < x:
            return Comparison.LT
        if f == x:
            return Comparison.EQ
        return Comparison.UNDEFINED

    def compare(self, other: Rational) -> Comparison:
        """
        Compare with another rational without converting to float.

        UNDEFINED if either side is 0/0 or both sides have a zero
        denominator. An infinity is GT (n > 0) or LT (n < 0) any rational
        with a nonzero denominator. Everything else is decided by the sign
        of the cross product of the standardized operands.
        """
        if self.is_undefined() or other.is_undefined():
            return Comparison.UNDEFINED
        if self.d == 0 and other.d == 0:
            return Comparison.UNDEFINED
        if self.d == 0:
            return Comparison.GT if self.n > 0 else Comparison.LT
        if other.d == 0:
            return Comparison.LT if other.n > 0 else Comparison.GT

        r1 = self.standardize()
        r2 = other.standardize()
        cross = r1.n * r2.d - r2.n * r1.d
        if cross > 0:
            return Comparison.GT
        if cross < 0:
            return Comparison.LT
        return Comparison.EQ

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Rational({self.n}, {self.d})"

    def __float__(self) -> float:
        """Float value, with inf, -inf and nan standing in for the sentinels."""
        f = self.to_float()
        if isinstance(f, Ok):
            return f.value
        if f is Sentinel.POS_INFINITY:
            return math.inf
        if f is Sentinel.NEG_INFINITY:
            return -math.inf
        return math.nan


def _split_operands(a: Any, b: Any, op: str) -> tuple[Rational, Any, bool]:
    """Return (rational, number, reversed) for a mixed pair of operands."""
    if isinstance(a, Rational) and not isinstance(b, Rational):
        return a, b, False
    if isinstance(b, Rational) and not isinstance(a, Rational):
        return b, a, True
    raise TypeError(
        f"{op}() takes one Rational and one number, "
        f"got {type(a).__name__} and {type(b).__name__}"
    )


def new(n: int, d: int) -> Rational:
    return Rational(n, d)


def mediant(r1: Rational, r2: Rational) -> Rational:
    return r1.mediant(r2)


def negate(r: Rational) -> Rational:
    return r.negate()


def standardize(r: Rational) -> Rational:
    return r.standardize()


def to_float(r: Rational) -> FloatResult:
    return r.to_float()


def to_string(r: Rational, formatter: Optional[Formatter] = None) -> str:
    return r.to_string(formatter)


def compare(r1: Rational, r2: Rational) -> Comparison:
    return r1.compare(r2)


def diff_num(a: Union[Rational, Number], b: Union[Rational, Number]) -> FloatResult:
    """
    Difference between a rational and a number, in either order.

    diff_num(r, x) is r - x and diff_num(x, r) is x - r. When r is not
    finite the result is its sentinel, with the infinity flipped for the
    reversed order.

    Example:
        >>> diff_num(Rational(3, 2), 1)
        Ok(value=0.5)
        >>> diff_num(1, Rational(1, 0))
        <Sentinel.NEG_INFINITY: 'neg_infinity'>
    """
    r, x, swapped = _split_operands(a, b, 'diff_num')
    result = r.diff_num(x)
    if not swapped:
        return result
    if isinstance(result, Ok):
        return Ok(-result.value)
    return result.negate()


def compare_to_num(a: Union[Rational, Number], b: Union[Rational, Number]) -> Comparison:
    """
    Compare a rational and a number, in either order.

    compare_to_num(x, r) is compare_to_num(r, x) mirrored.
    """
    r, x, swapped = _split_operands(a, b, 'compare_to_num')
    result = r.compare_to_num(x)
    return result.mirror() if swapped else result


def is_real_number(x: Any) -> bool:
    """True for int, float, Fraction and other numbers.Real values, but not bool."""
    return isinstance(x, Real) and not isinstance(x, bool)
