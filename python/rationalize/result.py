# Rationalize - Result Types
# Copyright (c) 2024 Rationalize Contributors. All rights reserved.

"""
Result type for rational approximations.

An Approximation keeps the target alongside the chosen rational and the
bracket it was picked from, so callers can report the error without
repeating the search.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

from .rational import Formatter, Number, Rational


@dataclass(frozen=True)
class Approximation:
    """
    The closest rational to a target under a denominator limit.

    Attributes:
        target: The number that was approximated.
        den_max: Denominator limit used for the search.
        rational: The closest rational.
        bracket: The (lo, hi) pair the rational was chosen from.
    """
    target: Number
    den_max: int
    rational: Rational
    bracket: tuple[Rational, Rational]

    @property
    def numerator(self) -> int:
        return self.rational.n

    @property
    def denominator(self) -> int:
        return self.rational.d

    @property
    def value(self) -> float:
        """Float value of the rational."""
        return float(self.rational)

    @property
    def error(self) -> float:
        """Signed error, value - target."""
        return self.value - float(self.target)

    @property
    def is_exact(self) -> bool:
        return self.error == 0

    def format(self, formatter: Optional[Formatter] = None) -> str:
        return self.rational.to_string(formatter)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        lo, hi = self.bracket
        return {
            'target': float(self.target),
            'den_max': self.den_max,
            'rational': self.rational.to_dict(),
            'bracket': {'lo': lo.to_dict(), 'hi': hi.to_dict()},
            'error': self.error,
        }

    def __str__(self) -> str:
        return str(self.rational)

    def __repr__(self) -> str:
        return (
            f"Approximation(target={self.target!r}, "
            f"rational={self.rational}, "
            f"error={self.error:.3g})"
        )
