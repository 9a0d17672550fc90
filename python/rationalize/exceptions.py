# Rationalize - Exceptions
# Copyright (c) 2024 Rationalize Contributors. All rights reserved.

"""Exception hierarchy for Rationalize."""

from __future__ import annotations
from numbers import Integral
from typing import Any


class RationalizeError(Exception):
    """Base class for all Rationalize exceptions."""
    pass


class DenominatorError(RationalizeError, ValueError):
    """Raised when a maximum denominator is not a positive integer."""

    def __init__(self, den_max: Any):
        super().__init__(
            f"Maximum denominator must be a positive integer, got {den_max!r}"
        )
        self.den_max = den_max


class NonFiniteError(RationalizeError, ValueError):
    """Raised when a finite value is required but an infinite or undefined one is given."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


def check_den_max(den_max: Any) -> int:
    """
    Validate a maximum denominator.

    Returns:
        The denominator as a plain int.

    Raises:
        DenominatorError: If den_max is not an integer >= 1.
    """
    if isinstance(den_max, bool) or not isinstance(den_max, Integral):
        raise DenominatorError(den_max)
    if den_max < 1:
        raise DenominatorError(den_max)
    return int(den_max)
