# Fractional
# Copyright (c) 2024 Fractional Contributors. All rights reserved.

"""
Fractional - Exact Rational Arithmetic.

Fractions are kept in lowest terms over a chosen integer kind: Python's
int, or a numpy fixed-width integer. Division by zero does not raise;
it produces +Inf, -Inf or NaN encoded with a zero denominator.

Example:
    >>> import fractional as fr
    >>> half = fr.Fraction(1, 2)
    >>> half + fr.Fraction(1, 4)
    Fraction(3, 4)
    >>> print(half / 0)
    +Inf
    >>> float(fr.Fraction64(3, 8))
    0.375

Key Features:
    - Exact arithmetic with normalized numerator/denominator
    - Float-like infinities and NaN instead of ZeroDivisionError
    - Generic over int, int8, int16, int32 and int64
"""

__version__ = "0.1.0"

# Integer helpers
from .numeric import gcd, lcm, reduce

# Fraction types
from .fraction import (
    Fractional,
    Fraction,
    Fraction8,
    Fraction16,
    Fraction32,
    Fraction64,
)

# Conversion utilities
from .rational import to_fraction

# Configuration
from .config import Config, IntegerKind

# Exceptions
from .exceptions import (
    FractionalError,
    NotAnIntegerError,
    IntegerKindError,
    KindMismatchError,
)

__all__ = [
    # Version
    "__version__",
    # Integer helpers
    "gcd",
    "lcm",
    "reduce",
    # Fraction types
    "Fractional",
    "Fraction",
    "Fraction8",
    "Fraction16",
    "Fraction32",
    "Fraction64",
    # Conversion
    "to_fraction",
    # Configuration
    "Config",
    "IntegerKind",
    # Exceptions
    "FractionalError",
    "NotAnIntegerError",
    "IntegerKindError",
    "KindMismatchError",
]
