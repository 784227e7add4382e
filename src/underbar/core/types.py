"""Reusable type definitions for underbar.

Type Aliases:
    Collection: Anything the traversal primitive accepts (a sequence, a mapping,
        or ``None`` for an absent input).
    Visitor: Callback receiving ``(value, key, collection)``.
    Predicate: Single-argument truth test.
    Iteratee: Callback receiving ``(value, key, collection)`` and returning a value.
    Reducer: Callback receiving ``(accumulator, value)``.
    WaitMillis: Non-negative delay expressed in milliseconds.
"""

from typing import Annotated, Any, Callable, Hashable, Mapping, Optional, Sequence, Union

import annotated_types as at

__all__ = [
    "NOT_FOUND",
    "Collection",
    "Visitor",
    "Predicate",
    "Iteratee",
    "Reducer",
    "WaitMillis",
]

# Returned by index_of when the target is absent
NOT_FOUND = -1

Collection = Optional[Union[Sequence[Any], Mapping[Hashable, Any]]]

Visitor = Callable[[Any, Any, Any], None]
Predicate = Callable[[Any], Any]
Iteratee = Callable[[Any, Any, Any], Any]
Reducer = Callable[[Any, Any], Any]

WaitMillis = Annotated[float, at.Ge(0)]
