# Fractional - Rational Number Utilities
# Copyright (c) 2024 Fractional Contributors. All rights reserved.

"""
Utilities for bringing other rational values into a fraction kind.

The Problem:
    >>> from fractional import Fraction, Fraction32
    >>> Fraction(1, 2) + Fraction32(1, 2)
    Traceback (most recent call last):
    KindMismatchError: Cannot apply '+' to Fraction and Fraction32: integer kinds differ

The Solution:
    >>> from fractional.rational import to_fraction
    >>> Fraction(1, 2) + to_fraction(Fraction32(1, 2))
    Fraction(1, 1)
"""

from __future__ import annotations
import fractions
import logging
import numbers
from typing import Union

import numpy as np

from .config import IntegerKind
from .exceptions import NotAnIntegerError
from .fraction import Fractional

logger = logging.getLogger(__name__)


# Type for things that can be converted to a Fractional
Convertible = Union[int, np.integer, fractions.Fraction, Fractional]


def to_fraction(
    x: Convertible,
    kind: Union[IntegerKind, str, type] = IntegerKind.INT,
) -> Fractional:
    """
    Convert a rational value to a fraction of the given kind.

    Fractions of another kind are rebuilt from their numerator and
    denominator, so infinities and NaN keep their meaning. Fixed-width
    kinds raise numpy's OverflowError for parts that do not fit.

    Args:
        x: An integer, a standard library Fraction, or a Fractional.
        kind: Target integer kind (IntegerKind, its string value, or a type).

    Returns:
        A Fractional of the requested kind.

    Raises:
        NotAnIntegerError: If x is a float or another non-rational value.
        IntegerKindError: If kind is not supported.

    Examples:
        >>> to_fraction(3)
        Fraction(3, 1)
        >>> to_fraction(fractions.Fraction(6, 8), 'int16')
        Fraction16(3, 4)
        >>> to_fraction(Fraction32(-1, 0))
        Fraction(-1, 0)
    """
    cls = Fractional[kind]
    if isinstance(x, cls):
        return x
    elif isinstance(x, Fractional):
        logger.debug("Converting %s to %s", type(x).__name__, cls.__name__)
        return cls(x.numerator, x.denominator)
    elif isinstance(x, fractions.Fraction):
        return cls(x.numerator, x.denominator)
    elif isinstance(x, numbers.Integral) and not isinstance(x, bool):
        return cls(x)
    else:
        raise NotAnIntegerError(x, 'value')
