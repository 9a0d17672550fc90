# Rationalize - Configuration
# Copyright (c) 2024 Rationalize Contributors. All rights reserved.

"""Configuration settings for Rationalize."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

from .exceptions import check_den_max
from .rational import Formatter


@dataclass
class Config:
    """
    Configuration for rational approximation requests.

    Attributes:
        den_max: Largest denominator an approximation may use.
                 Larger values give closer approximations and longer searches.
        formatter: Callable (n, d) -> str used when formatting results.
                   None means the "n/d" format.
    """
    den_max: int = 1000
    formatter: Optional[Formatter] = None

    def __post_init__(self):
        self.den_max = check_den_max(self.den_max)

    @classmethod
    def low_precision(cls) -> Config:
        """Small denominators, fast searches."""
        return cls(den_max=100)

    @classmethod
    def medium_precision(cls) -> Config:
        """Balanced configuration (default)."""
        return cls()

    @classmethod
    def high_precision(cls) -> Config:
        """Denominators up to one million."""
        return cls(den_max=1_000_000)

    def to_dict(self) -> dict[str, Any]:
        return {
            'den_max': self.den_max,
            'formatter': None if self.formatter is None else getattr(
                self.formatter, '__name__', repr(self.formatter)
            ),
        }

    def __repr__(self) -> str:
        return f"Config(den_max={self.den_max})"
