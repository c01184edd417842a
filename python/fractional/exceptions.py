# Fractional - Exceptions
# Copyright (c) 2024 Fractional Contributors. All rights reserved.

"""Exception hierarchy for Fractional.

Arithmetic on fractions never raises: zero denominators produce infinities
or NaN. These errors only report misuse of the API.
"""

from __future__ import annotations
from typing import Any, Optional


class FractionalError(Exception):
    """Base class for all Fractional exceptions."""
    pass


class NotAnIntegerError(FractionalError, TypeError):
    """Raised when a fraction component or exponent is not an integer."""

    def __init__(self, value: Any, role: str = 'value'):
        message = f"{role} must be an integer, got {type(value).__name__}: {value!r}"
        if isinstance(value, float):
            message += "\n  Suggestion: conversion from float is not supported; pass numerator and denominator."
        super().__init__(message)
        self.value = value
        self.role = role


class IntegerKindError(FractionalError, TypeError):
    """Raised when a fraction is requested over an unsupported integer kind."""

    def __init__(
        self,
        kind: Any,
        supported: Optional[list[str]] = None,
        suggestion: Optional[str] = None,
    ):
        name = getattr(kind, '__name__', repr(kind))
        message = f"Unsupported integer kind: {name}"
        if supported:
            message += f"\n  Supported kinds: {', '.join(supported)}"
        if suggestion:
            message += f"\n  Suggestion: {suggestion}"
        super().__init__(message)
        self.kind = kind
        self.suggestion = suggestion


class KindMismatchError(FractionalError, TypeError):
    """Raised when fractions over different integer kinds are combined."""

    def __init__(self, left: str, right: str, operation: str):
        super().__init__(
            f"Cannot apply '{operation}' to {left} and {right}: integer kinds differ"
        )
        self.left = left
        self.right = right
        self.operation = operation
