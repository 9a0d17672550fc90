# Rationalize - High-level API
# Copyright (c) 2024 Rationalize Contributors. All rights reserved.

"""
High-level API for Rationalize.

This module provides the main user-facing entry points. The search itself
lives in rationalize.search; these functions resolve the denominator limit
and formatter from a Config and package the outcome.
"""

from __future__ import annotations
from typing import Optional

from .config import Config
from .exceptions import check_den_max
from .rational import Formatter, Number, Rational
from .result import Approximation
from .search import check_target, closest_bracket, pick_closest


def _resolve_den_max(den_max: Optional[int], config: Optional[Config]) -> int:
    if den_max is not None:
        return check_den_max(den_max)
    if config is not None:
        return config.den_max
    return Config().den_max


def approximate(
    x: Number,
    den_max: Optional[int] = None,
    *,
    config: Optional[Config] = None,
) -> Approximation:
    """
    Find the closest rational to x and report how close it is.

    Args:
        x: A finite real number.
        den_max: Largest denominator allowed. Defaults to config.den_max,
                 or Config().den_max if no config is given.
        config: Optional configuration.

    Returns:
        Approximation with the rational, its bracket and its error.

    Example:
        >>> result = approximate(3.1416, 1000)
        >>> str(result)
        '2862/911'
        >>> abs(result.error) < 1e-5
        True
    """
    den_max = _resolve_den_max(den_max, config)
    check_target(x)

    bracket = closest_bracket(x, den_max)
    if x == 0:
        rational = Rational(0, 1)
    else:
        rational = pick_closest(bracket, x)
    return Approximation(target=x, den_max=den_max, rational=rational, bracket=bracket)


def rationalize(
    x: Number,
    den_max: Optional[int] = None,
    *,
    config: Optional[Config] = None,
    formatter: Optional[Formatter] = None,
) -> str:
    """
    Return the closest rational to x as a string.

    The formatter argument wins over config.formatter; with neither the
    result is formatted as "n/d".

    Example:
        >>> rationalize(0.27, 10)
        '2/7'
        >>> rationalize(0.27, 10, formatter=lambda n, d: f"{n} over {d}")
        '2 over 7'
    """
    if formatter is None and config is not None:
        formatter = config.formatter
    return approximate(x, den_max, config=config).format(formatter)
