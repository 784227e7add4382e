"""Functional primitives for underbar.

This package provides the collection, object and function combinators. They
are stateless (apart from the state owned by each decorator's wrapper) and
compose freely: every traversal goes through
:func:`underbar.functional.collections.each`.

Several names (``filter``, ``map``, ``zip``) intentionally shadow builtins;
import the module or the names you need rather than ``*``.
"""

from underbar.functional.arrays import (
    difference,
    flatten,
    intersection,
    shuffle,
    sort_by,
    zip,
)
from underbar.functional.collections import (
    contains,
    each,
    every,
    filter,
    first,
    index_of,
    invoke,
    last,
    map,
    pluck,
    reduce,
    reject,
    some,
    uniq,
)
from underbar.functional.decorators import Memoized, Once, delay, memoize, once
from underbar.functional.objects import defaults, extend

__all__ = [
    "each",
    "index_of",
    "filter",
    "reject",
    "uniq",
    "map",
    "pluck",
    "invoke",
    "reduce",
    "contains",
    "every",
    "some",
    "first",
    "last",
    "extend",
    "defaults",
    "once",
    "memoize",
    "delay",
    "Once",
    "Memoized",
    "sort_by",
    "zip",
    "flatten",
    "intersection",
    "difference",
    "shuffle",
]
