# Fractional - Integer Helpers
# Copyright (c) 2024 Fractional Contributors. All rights reserved.

"""
Integer building blocks used for normalization and common denominators.

The helpers only rely on `==`, `<`, `*`, `//` and `%`, so they work for
Python ints as well as numpy fixed-width integer scalars. Results keep the
integer type of their inputs.

Example:
    >>> from fractional.numeric import gcd, lcm, reduce
    >>> gcd(12, 18)
    6
    >>> lcm(4, 6)
    12
    >>> reduce(6, -8)
    (3, -4)
"""

from __future__ import annotations
from typing import TypeVar

N = TypeVar('N')


def gcd(a: N, b: N) -> N:
    """
    Greatest common divisor by the Euclidean algorithm.

    The sign of the result follows the remainder chain and is not normalized;
    callers that need a magnitude take it themselves. `gcd(0, 0) == 0`.
    """
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: N, b: N) -> N:
    """Least common multiple of two non-zero integers."""
    return a * b // gcd(a, b)


def reduce(numerator: N, denominator: N) -> tuple[N, N]:
    """
    Reduce a numerator/denominator pair to lowest terms.

    Args:
        numerator: Raw numerator.
        denominator: Raw denominator, possibly negative or zero.

    Returns:
        The reduced pair. The divisor is made non-negative before dividing,
        so for a negative denominator the signs of both parts flip and the
        caller is left to fold the sign into the numerator. A zero divisor
        (only possible for 0/0) returns the pair with no division attempted.
    """
    divisor = gcd(numerator, denominator)
    if divisor < 0:
        divisor = -divisor
    if divisor == 0:
        return numerator, denominator
    return numerator // divisor, denominator // divisor
