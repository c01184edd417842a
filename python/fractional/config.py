# Fractional - Configuration
# Copyright (c) 2024 Fractional Contributors. All rights reserved.

"""Configuration settings for Fractional."""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

import numpy as np

from .exceptions import IntegerKindError

if TYPE_CHECKING:
    from .fraction import Fractional

logger = logging.getLogger(__name__)


# numpy error modes accepted by np.errstate
OVERFLOW_MODES = ('ignore', 'warn', 'raise', 'call', 'print', 'log')


class IntegerKind(Enum):
    """
    Integer representation underlying a fraction.

    INT uses Python's arbitrary-precision int. The fixed-width kinds use
    numpy scalar types and inherit their wrap-around overflow behaviour.
    """
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"

    @property
    def number_type(self) -> type:
        """The Python or numpy integer type for this kind."""
        if self is IntegerKind.INT:
            return int
        return getattr(np, self.value)

    @property
    def class_name(self) -> str:
        """Name of the fraction class specialized for this kind."""
        if self is IntegerKind.INT:
            return "Fraction"
        return "Fraction" + self.value[3:]

    @classmethod
    def from_type(cls, kind: Union[IntegerKind, str, type]) -> IntegerKind:
        """
        Resolve an IntegerKind from a member, its string value, or a type.

        Raises:
            IntegerKindError: If the kind is not supported.
        """
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            try:
                return cls(kind)
            except ValueError:
                raise IntegerKindError(kind, [k.value for k in cls]) from None
        for member in cls:
            if kind is member.number_type:
                return member
        # np.dtype('int32') and friends
        try:
            name = np.dtype(kind).name
        except TypeError:
            raise IntegerKindError(kind, [k.value for k in cls]) from None
        if name in {k.value for k in cls}:
            return cls(name)
        raise IntegerKindError(kind, [k.value for k in cls])


@dataclass
class Config:
    """
    Configuration for fraction arithmetic.

    Attributes:
        kind: Integer representation for numerators and denominators.
              A string value such as "int64" is accepted.
        overflow: numpy error mode used by errstate() for fixed-width
                  integer overflow. Has no effect for IntegerKind.INT.
    """
    kind: IntegerKind = IntegerKind.INT
    overflow: str = "warn"

    def __post_init__(self):
        if not isinstance(self.kind, IntegerKind):
            self.kind = IntegerKind.from_type(self.kind)
            logger.debug("Resolved integer kind %s", self.kind.value)
        if self.overflow not in OVERFLOW_MODES:
            raise ValueError(
                f"Invalid overflow mode: {self.overflow!r} "
                f"(expected one of {', '.join(OVERFLOW_MODES)})"
            )

    @classmethod
    def arbitrary(cls) -> Config:
        """Python int numerators and denominators (default)."""
        return cls()

    @classmethod
    def int32(cls, overflow: str = "warn") -> Config:
        """32-bit numerators and denominators."""
        return cls(kind=IntegerKind.INT32, overflow=overflow)

    @classmethod
    def int64(cls, overflow: str = "warn") -> Config:
        """64-bit numerators and denominators."""
        return cls(kind=IntegerKind.INT64, overflow=overflow)

    def fraction_type(self) -> type[Fractional]:
        """The fraction class specialized for the configured kind."""
        from .fraction import Fractional
        return Fractional[self.kind]

    def errstate(self) -> np.errstate:
        """
        Context manager applying the configured overflow mode.

        Example:
            >>> cfg = Config.int32(overflow="raise")
            >>> with cfg.errstate():
            ...     big = cfg.fraction_type()(2**30) * 4
            Traceback (most recent call last):
            FloatingPointError: overflow encountered in scalar multiply
        """
        return np.errstate(over=self.overflow)

    def __repr__(self) -> str:
        parts = []
        if self.kind != IntegerKind.INT:
            parts.append(f"kind={self.kind.value}")
        parts.append(f"overflow={self.overflow}")
        return f"Config({', '.join(parts)})"
