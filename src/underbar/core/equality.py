"""Strict equality used by searching, membership and deduplication."""

import math
from numbers import Number
from typing import Any

__all__ = ["strict_equal"]


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def strict_equal(a: Any, b: Any) -> bool:
    """Compare two values without cross-type coercion.

    Numbers compare by value regardless of their concrete type (``1`` equals
    ``1.0``), but booleans never equal numbers, and ``NaN`` equals nothing,
    itself included. Any other pair must share a type and compare equal.

    Containers of the same type therefore compare by value, not identity:
    two distinct lists ``[1]`` and ``[1]`` are equal here.

    Examples:
        >>> strict_equal(1, 1.0)
        True
        >>> strict_equal(1, True)
        False
        >>> strict_equal("1", 1)
        False
    """
    if _is_nan(a) or _is_nan(b):
        return False
    if a is b:
        return True
    if _is_number(a) and _is_number(b):
        return bool(a == b)
    return type(a) is type(b) and bool(a == b)
