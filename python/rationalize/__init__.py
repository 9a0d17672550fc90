# Rationalize
# Copyright (c) 2024 Rationalize Contributors. All rights reserved.

"""
Rationalize - Best Rational Approximations.

This package finds the rational number closest to a given real number among
all rationals whose denominator is bounded, by binary search over the
Stern-Brocot tree. The arithmetic it relies on is exposed as well, and is
safe for zero denominators (signed infinities and the undefined 0/0).

Example:
    >>> import rationalize as rz
    >>> rz.closest_rational(3.14159265359, 20)
    Rational(22, 7)
    >>> rz.closest_bracket(3.14159265359, 20)
    (Rational(47, 15), Rational(22, 7))
    >>> rz.rationalize(0.27, 10)
    '2/7'

Key Features:
    - Results always in lowest terms
    - Exact integer comparisons between rationals
    - Total arithmetic: no division by zero, ever
    - numpy helpers for whole arrays
"""

import logging

__version__ = "0.1.0"

# Rational arithmetic
from .rational import (
    Rational,
    Comparison,
    Sentinel,
    Ok,
    FloatResult,
    new,
    mediant,
    negate,
    standardize,
    to_float,
    to_string,
    diff_num,
    compare_to_num,
    compare,
)

# Search
from .search import (
    Bracket,
    closest_bracket,
    closest_rational,
)

# Configuration
from .config import Config

# Result types
from .result import Approximation

# High-level API
from .api import approximate, rationalize

# numpy support
from . import arrays
from .arrays import rationalize_array, to_float_array

# Exceptions
from .exceptions import (
    RationalizeError,
    DenominatorError,
    NonFiniteError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Rational arithmetic
    "Rational",
    "Comparison",
    "Sentinel",
    "Ok",
    "FloatResult",
    "new",
    "mediant",
    "negate",
    "standardize",
    "to_float",
    "to_string",
    "diff_num",
    "compare_to_num",
    "compare",
    # Search
    "Bracket",
    "closest_bracket",
    "closest_rational",
    # Configuration
    "Config",
    # Result types
    "Approximation",
    # High-level API
    "approximate",
    "rationalize",
    # numpy support
    "arrays",
    "rationalize_array",
    "to_float_array",
    # Exceptions
    "RationalizeError",
    "DenominatorError",
    "NonFiniteError",
]
