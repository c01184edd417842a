# Fractional - Fraction Value Type
# Copyright (c) 2024 Fractional Contributors. All rights reserved.

"""
Exact fractions over a choice of integer kind.

A fraction is stored in lowest terms with a non-negative denominator. A zero
denominator encodes the special values: n/0 with n > 0 is +infinity, n < 0
is -infinity and 0/0 is NaN. Arithmetic never raises; dividing by zero gives
an infinity or NaN the way floating point does.

Example:
    >>> from fractional import Fraction
    >>> Fraction(1, 2) + Fraction(1, 4)
    Fraction(3, 4)
    >>> str(Fraction(1, 0))
    '+Inf'
    >>> Fraction(1, 4) * 10
    Fraction(5, 2)

Fixed-width kinds use numpy integer scalars and wrap on overflow:
    >>> from fractional import Fractional
    >>> import numpy as np
    >>> Fractional[np.int32](6, 4)
    Fraction32(3, 2)
"""

from __future__ import annotations
import logging
import numbers
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Union

import numpy as np

from .config import IntegerKind
from .exceptions import IntegerKindError, KindMismatchError, NotAnIntegerError
from .numeric import lcm, reduce

logger = logging.getLogger(__name__)


# Things accepted wherever a fraction operand is expected
FractionLike = Union['Fractional', int, np.integer]


def _as_integer(value: Any, number_type: type, role: str) -> Any:
    """Cast an integral value to number_type, rejecting bools and non-integers."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise NotAnIntegerError(value, role)
    if type(value) is number_type:
        return value
    return number_type(value)


@dataclass(frozen=True, eq=False, repr=False)
class Fractional:
    """
    An exact fraction, generic over its integer kind.

    Use a specialization: `Fractional[int]` (alias `Fraction`), or
    `Fractional[np.int8]` ... `Fractional[np.int64]` (aliases `Fraction8`
    ... `Fraction64`). Instances are immutable and hashable.

    Attributes:
        numerator: Carries the sign of the fraction.
        denominator: Always non-negative; zero for infinities and NaN.
    """
    numerator: Any
    denominator: Any

    kind: ClassVar[Optional[IntegerKind]] = None
    zero: ClassVar[Fractional]
    one: ClassVar[Fractional]
    infinity: ClassVar[Fractional]
    nan: ClassVar[Fractional]

    def __init__(self, numerator: Any = 0, denominator: Any = 1):
        """
        Create the fraction numerator/denominator in lowest terms.

        Args:
            numerator: Integer numerator.
            denominator: Integer denominator; may be negative or zero.

        Raises:
            NotAnIntegerError: If either part is not an integer.
            IntegerKindError: If called on the unspecialized base class.
        """
        kind = type(self).kind
        if kind is None:
            raise IntegerKindError(
                None,
                [k.value for k in IntegerKind],
                suggestion="Use Fractional[int], Fractional[np.int64] or one of the Fraction aliases.",
            )
        number_type = kind.number_type
        numerator = _as_integer(numerator, number_type, 'numerator')
        denominator = _as_integer(denominator, number_type, 'denominator')

        numerator, denominator = reduce(numerator, denominator)
        if denominator < 0:
            numerator, denominator = -1 * numerator, -1 * denominator

        # Bypass frozen dataclass __setattr__
        object.__setattr__(self, 'numerator', numerator)
        object.__setattr__(self, 'denominator', denominator)

    def __class_getitem__(cls, kind: Union[IntegerKind, str, type]) -> type[Fractional]:
        return _SPECIALIZATIONS[IntegerKind.from_type(kind)]

    # Predicates

    @property
    def is_finite(self) -> bool:
        """True iff self is neither infinite nor NaN."""
        return bool(self.denominator != 0)

    @property
    def is_infinite(self) -> bool:
        """True iff the denominator is zero and the numerator is not."""
        return bool(self.denominator == 0 and self.numerator != 0)

    @property
    def is_nan(self) -> bool:
        """True iff both the numerator and the denominator are zero."""
        return bool(self.denominator == 0 and self.numerator == 0)

    @property
    def reciprocal(self) -> Fractional:
        """1/self. The reciprocal of zero is +infinity and of an infinity is zero."""
        return type(self)(self.denominator, self.numerator)

    # Arithmetic

    def _operand(self, other: Any, operation: str) -> Optional[Fractional]:
        """
        Convert the other side of a binary operation to this kind.

        Returns None for non-numeric operands so the caller can return
        NotImplemented and let Python try the reflected operation.
        """
        if isinstance(other, Fractional):
            if type(other).kind is not type(self).kind:
                raise KindMismatchError(type(self).__name__, type(other).__name__, operation)
            return other
        if isinstance(other, numbers.Real):
            return type(self)(_as_integer(other, type(self).kind.number_type, 'operand'))
        return None

    @staticmethod
    def _common_denominator(lhs: Fractional, rhs: Fractional) -> tuple[Any, Any, Any]:
        """Numerators of lhs and rhs rescaled to their least common denominator."""
        denominator = lcm(lhs.denominator, rhs.denominator)
        lhs_numerator = lhs.numerator * (denominator // lhs.denominator)
        rhs_numerator = rhs.numerator * (denominator // rhs.denominator)
        return lhs_numerator, rhs_numerator, denominator

    def _add(self, other: Fractional) -> Fractional:
        cls = type(self)
        if self.is_nan or other.is_nan:
            return cls.nan
        if not (self.is_finite and other.is_finite):
            # x >= 0 reduces to the sign of the numerator for non-NaN values
            lhs_positive = self.numerator >= 0
            rhs_positive = other.numerator >= 0
            if lhs_positive and rhs_positive:
                return cls.infinity
            if not lhs_positive and not rhs_positive:
                return -cls.infinity
            return cls.nan
        lhs_numerator, rhs_numerator, denominator = self._common_denominator(self, other)
        return cls(lhs_numerator + rhs_numerator, denominator)

    def _mul(self, other: Fractional) -> Fractional:
        cls = type(self)
        # Cross-reduce first so fixed-width intermediates stay small.
        # Zero denominators flow through construction and produce the
        # special values: 0 * inf is 0/0, finite * inf keeps the sign.
        left = cls(self.numerator, other.denominator)
        right = cls(other.numerator, self.denominator)
        return cls(left.numerator * right.numerator, left.denominator * right.denominator)

    def __neg__(self) -> Fractional:
        return type(self)(-1 * self.numerator, self.denominator)

    def __pos__(self) -> Fractional:
        return self

    def __abs__(self) -> Fractional:
        return -self if self.numerator < 0 else self

    def __add__(self, other: FractionLike) -> Fractional:
        other = self._operand(other, '+')
        if other is None:
            return NotImplemented
        return self._add(other)

    def __radd__(self, other: FractionLike) -> Fractional:
        other = self._operand(other, '+')
        if other is None:
            return NotImplemented
        return other._add(self)

    def __sub__(self, other: FractionLike) -> Fractional:
        other = self._operand(other, '-')
        if other is None:
            return NotImplemented
        return self._add(-other)

    def __rsub__(self, other: FractionLike) -> Fractional:
        other = self._operand(other, '-')
        if other is None:
            return NotImplemented
        return other._add(-self)

    def __mul__(self, other: FractionLike) -> Fractional:
        other = self._operand(other, '*')
        if other is None:
            return NotImplemented
        return self._mul(other)

    def __rmul__(self, other: FractionLike) -> Fractional:
        other = self._operand(other, '*')
        if other is None:
            return NotImplemented
        return other._mul(self)

    def __truediv__(self, other: FractionLike) -> Fractional:
        other = self._operand(other, '/')
        if other is None:
            return NotImplemented
        return self._mul(other.reciprocal)

    def __rtruediv__(self, other: FractionLike) -> Fractional:
        other = self._operand(other, '/')
        if other is None:
            return NotImplemented
        return other._mul(self.reciprocal)

    def __pow__(self, exponent: int) -> Fractional:
        """
        Raise to an integer power by repeated multiplication.

        A negative exponent gives the reciprocal of the positive power, and
        any value to the power 0 is one.
        """
        if isinstance(exponent, bool) or not isinstance(exponent, numbers.Integral):
            raise NotAnIntegerError(exponent, 'exponent')
        remaining = abs(int(exponent))
        result = type(self).one
        base = self
        while remaining:
            if remaining & 1:
                result = result._mul(base)
            remaining >>= 1
            if remaining:
                base = base._mul(base)
        return result if exponent >= 0 else result.reciprocal

    def advanced_by(self, n: FractionLike) -> Fractional:
        """The value n steps away from self, i.e. self + n."""
        return self + n

    def distance_to(self, other: FractionLike) -> Fractional:
        """The step from self to other, i.e. other - self."""
        return other - self

    # Comparison

    def _rank(self) -> int:
        """-1 for -infinity, 1 for +infinity, 0 for finite values."""
        if self.is_finite:
            return 0
        return 1 if self.numerator > 0 else -1

    def _compare(self, other: Fractional) -> Optional[int]:
        """Three-way comparison, or None when either side is NaN."""
        if self.is_nan or other.is_nan:
            return None
        if not (self.is_finite and other.is_finite):
            lhs, rhs = self._rank(), other._rank()
        else:
            lhs, rhs, _ = self._common_denominator(self, other)
        return int(lhs > rhs) - int(lhs < rhs)

    def __lt__(self, other: FractionLike) -> bool:
        other = self._operand(other, '<')
        if other is None:
            return NotImplemented
        result = self._compare(other)
        return result is not None and result < 0

    def __gt__(self, other: FractionLike) -> bool:
        other = self._operand(other, '>')
        if other is None:
            return NotImplemented
        result = self._compare(other)
        return result is not None and result > 0

    # <= and >= are built on < and ==, so NaN <= NaN holds

    def __le__(self, other: FractionLike) -> bool:
        other = self._operand(other, '<=')
        if other is None:
            return NotImplemented
        return self < other or self == other

    def __ge__(self, other: FractionLike) -> bool:
        other = self._operand(other, '>=')
        if other is None:
            return NotImplemented
        return self > other or self == other

    def __eq__(self, other: object) -> bool:
        """Structural equality: NaN equals NaN."""
        if isinstance(other, Fractional):
            if type(other).kind is not type(self).kind:
                return NotImplemented
            return bool(self.numerator == other.numerator and self.denominator == other.denominator)
        if isinstance(other, numbers.Integral) and not isinstance(other, bool):
            return bool(self.denominator == 1 and self.numerator == other)
        return NotImplemented

    def __hash__(self) -> int:
        # Integral fractions hash like the integer they equal
        if self.denominator == 1:
            return hash(int(self.numerator))
        return hash((int(self.numerator), int(self.denominator)))

    def __bool__(self) -> bool:
        return bool(self.numerator != 0 or self.denominator == 0)

    # Conversions

    def _divide(self, float_type: type) -> Any:
        with np.errstate(divide='ignore', invalid='ignore'):
            return float_type(self.numerator) / float_type(self.denominator)

    def to_float64(self) -> np.float64:
        """Double-precision value; special values map to inf, -inf and nan."""
        return self._divide(np.float64)

    def to_float32(self) -> np.float32:
        """Single-precision value; special values map to inf, -inf and nan."""
        return self._divide(np.float32)

    def __float__(self) -> float:
        return float(self.to_float64())

    def __str__(self) -> str:
        if self.is_nan:
            return "NaN"
        if self.is_infinite:
            return ("+" if self.numerator > 0 else "-") + "Inf"
        if self.denominator == 1:
            return f"{self.numerator}"
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self.numerator)}, {int(self.denominator)})"


def _specialize(kind: IntegerKind) -> type[Fractional]:
    """Build the Fractional subclass for one integer kind and its constants."""
    name = kind.class_name
    cls = type(name, (Fractional,), {
        '__module__': __name__,
        '__qualname__': name,
        '__doc__': f"Exact fraction with {kind.value} numerator and denominator.",
        'kind': kind,
    })
    cls.zero = cls(0)
    cls.one = cls(1)
    cls.infinity = cls(1, 0)
    cls.nan = cls(0, 0)
    logger.debug("Registered %s over %s", name, kind.value)
    return cls


_SPECIALIZATIONS: dict[IntegerKind, type[Fractional]] = {
    kind: _specialize(kind) for kind in IntegerKind
}

Fraction = _SPECIALIZATIONS[IntegerKind.INT]
Fraction8 = _SPECIALIZATIONS[IntegerKind.INT8]
Fraction16 = _SPECIALIZATIONS[IntegerKind.INT16]
Fraction32 = _SPECIALIZATIONS[IntegerKind.INT32]
Fraction64 = _SPECIALIZATIONS[IntegerKind.INT64]
