"""Collection combinators built on a single traversal primitive.

Everything in this module is expressed in terms of :func:`each`, directly or
through :func:`reduce`. ``each`` walks either container shape with one calling
convention, ``visitor(value, key, collection)``:

    - **Sequences** (lists, tuples, ...) are visited in ascending index order.
    - **Mappings** are visited once per key, in the mapping's iteration order.
    - ``None`` is an absent input and is visited zero times.

The membership and quantifier tests (:func:`contains`, :func:`every`,
:func:`some`) are folds over the whole collection: they never stop early, but
their result cannot change back once decided.

Examples:
    >>> from underbar.functional.collections import reduce, reject, pluck
    >>> reduce([1, 2, 3], lambda total, n: total + n, 0)
    6
    >>> reject([1, 2, 3, 4], lambda x: x % 2 == 0)
    [1, 3]
    >>> pluck([{"age": 30}, {"age": 41}], "age")
    [30, 41]
"""

import typing as tp

from underbar.core.capabilities import as_capability
from underbar.core.containers import as_container, is_mapping, is_sequence
from underbar.core.equality import strict_equal
from underbar.core.types import (
    NOT_FOUND,
    Collection,
    Iteratee,
    Predicate,
    Reducer,
    Visitor,
)

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
    "get_property",
]


def each(collection: Collection, visitor: Visitor) -> None:
    """Call ``visitor(value, key, collection)`` once per element or entry.

    Args:
        collection: Sequence, mapping or ``None``.
        visitor: Callback invoked for its side effects.

    Raises:
        UnsupportedContainerError: If ``collection`` is neither shape.
    """
    container = as_container(collection)
    for key, value in container.entries():
        visitor(value, key, collection)


def index_of(sequence: Collection, target: tp.Any) -> int:
    """Return the index of the first element strictly equal to ``target``.

    Returns:
        The index, or ``NOT_FOUND`` (-1) when absent.
    """
    result = NOT_FOUND

    def visit(element, index, _):
        nonlocal result
        if result == NOT_FOUND and strict_equal(element, target):
            result = index

    each(sequence, visit)
    return result


def filter(collection: Collection, predicate: Predicate) -> list:
    """Return the elements for which ``predicate(element)`` is truthy."""
    result = []

    def visit(element, *_):
        if predicate(element):
            result.append(element)

    each(collection, visit)
    return result


def reject(collection: Collection, predicate: Predicate) -> list:
    """Return the elements for which ``predicate(element)`` is exactly ``False``.

    This is not the complement of :func:`filter`: a predicate returning ``0``,
    ``None`` or ``""`` keeps the element out of both results.
    """
    result = []

    def visit(element, *_):
        if predicate(element) is False:
            result.append(element)

    each(collection, visit)
    return result


def uniq(sequence: Collection) -> tp.Optional[list]:
    """Drop duplicates, keeping first occurrences in order.

    Returns:
        The deduplicated list, or ``None`` when ``sequence`` is ``None``.
    """
    if sequence is None:
        return None

    result = []

    def visit(element, *_):
        if index_of(result, element) == NOT_FOUND:
            result.append(element)

    each(sequence, visit)
    return result


def map(collection: Collection, iteratee: Iteratee) -> list:
    """Return ``[iteratee(value, key, collection) ...]`` in traversal order."""
    result = []

    def visit(element, index, source):
        result.append(iteratee(element, index, source))

    each(collection, visit)
    return result


def get_property(record: tp.Any, key: tp.Any) -> tp.Any:
    """Look ``key`` up on ``record``, returning ``None`` when it is missing.

    Mappings are read with ``get``, sequences by integer index (out-of-range
    indices give ``None``), anything else by attribute name.
    """
    if is_mapping(record):
        return record.get(key)
    if is_sequence(record) and isinstance(key, int) and not isinstance(key, bool):
        return record[key] if 0 <= key < len(record) else None
    if isinstance(key, str):
        return getattr(record, key, None)
    return None


def pluck(records: Collection, key: tp.Any) -> list:
    """Extract ``key`` from every record."""
    return map(records, lambda record, *_: get_property(record, key))


def invoke(
    sequence: Collection,
    method: tp.Union[str, tp.Callable[..., tp.Any]],
    args: tp.Sequence[tp.Any] = (),
) -> list:
    """Call a method on every element and collect the results.

    Args:
        sequence: Elements acting as receivers.
        method: A function, called as ``method(element, *args)``, or the name
            of a method looked up on each element and called as
            ``element.<method>(*args)``.
        args: Positional arguments for every call.

    Raises:
        AttributeError: If an element lacks the named method.
    """
    capability = as_capability(method)
    args = tuple(args or ())
    return map(sequence, lambda element, *_: capability.call(element, args))


def reduce(collection: Collection, reducer: Reducer, initial: tp.Any = 0) -> tp.Any:
    """Left fold: ``accumulator = reducer(accumulator, element)`` per element.

    Args:
        collection: Sequence, mapping (folded over its values) or ``None``.
        reducer: Two-argument callback.
        initial: Starting accumulator, ``0`` when omitted.
    """
    accumulator = initial

    def visit(element, *_):
        nonlocal accumulator
        accumulator = reducer(accumulator, element)

    each(collection, visit)
    return accumulator


def contains(collection: Collection, target: tp.Any) -> bool:
    """Whether any element is strictly equal to ``target``."""

    def step(found, element):
        if found:
            return True
        return strict_equal(element, target)

    return reduce(collection, step, False)


def every(collection: Collection, predicate: tp.Optional[Predicate] = None) -> bool:
    """Whether every element passes ``predicate`` (or is truthy without one)."""

    def step(passing, element):
        if not passing:
            return False
        return bool(element) if predicate is None else bool(predicate(element))

    return reduce(collection, step, True)


def some(collection: Collection, predicate: tp.Optional[Predicate] = None) -> bool:
    """Whether any element passes ``predicate`` (or is truthy without one)."""

    def step(passing, element):
        if passing:
            return True
        return bool(element) if predicate is None else bool(predicate(element))

    return reduce(collection, step, False)


def first(sequence: tp.Sequence[tp.Any], n: tp.Optional[int] = None) -> tp.Any:
    """Return the first element, or a list of the first ``n`` elements."""
    if n is None:
        return sequence[0] if len(sequence) else None
    return list(sequence[:n])


def last(sequence: tp.Sequence[tp.Any], n: tp.Optional[int] = None) -> tp.Any:
    """Return the last element, or a list of the last ``n`` elements.

    Asking for more elements than there are returns all of them.
    """
    length = len(sequence)
    if n is None:
        return sequence[length - 1] if length else None
    start = 0 if n > length else length - n
    return list(sequence[start:length])
