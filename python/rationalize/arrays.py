# Rationalize - NumPy Support
# Copyright (c) 2024 Rationalize Contributors. All rights reserved.

"""
Element-wise rational approximation of numpy arrays.

Example:
    >>> import numpy as np
    >>> from rationalize.arrays import rationalize_array
    >>> num, den = rationalize_array(np.array([0.5, 0.27, -1.25]), den_max=10)
    >>> num.tolist(), den.tolist()
    ([1, 2, -5], [2, 7, 4])
"""

from __future__ import annotations
from typing import Tuple
import numpy as np

from .exceptions import check_den_max
from .search import closest_rational

__all__ = [
    "rationalize_array",
    "to_float_array",
]


def rationalize_array(
    values: np.ndarray,
    den_max: int = 1000,
) -> Tuple[np.ndarray, np.ndarray]:
    """Approximate every element of an array by its closest rational.

    Args:
        values: Array-like of finite real numbers
        den_max: Maximum denominator for every element

    Returns:
        Tuple of (numerators, denominators), int64 arrays with the shape of values

    Raises:
        DenominatorError: If den_max is not a positive integer
        NonFiniteError: If any element is nan or infinite
        OverflowError: If a numerator does not fit in int64
    """
    den_max = check_den_max(den_max)
    arr = np.asarray(values, dtype=np.float64)

    numerators = np.empty(arr.shape, dtype=np.int64)
    denominators = np.empty(arr.shape, dtype=np.int64)
    for index, v in np.ndenumerate(arr):
        r = closest_rational(float(v), den_max)
        numerators[index] = r.n
        denominators[index] = r.d
    return numerators, denominators


def to_float_array(numerators: np.ndarray, denominators: np.ndarray) -> np.ndarray:
    """Divide element-wise, giving inf, -inf or nan where a denominator is zero."""
    num = np.asarray(numerators, dtype=np.float64)
    den = np.asarray(denominators, dtype=np.float64)
    with np.errstate(divide='ignore', invalid='ignore'):
        return num / den
