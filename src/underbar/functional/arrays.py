"""Combinators over several arrays, sorting and shuffling.

These build on the collection combinators rather than re-implementing
traversal: :func:`intersection` and :func:`difference` are ``uniq`` +
``filter`` + ``every`` + ``index_of``, :func:`flatten` expands a work-list of
pending items with ``map`` and :func:`zip` is a ``pluck`` per row.

Ordering notes:
    - :func:`sort_by` compares criteria by subtraction. A pair whose difference
      cannot be computed, or is NaN, compares as equal, so non-numeric criteria
      leave the order unspecified instead of raising.
    - :func:`shuffle` is a backward Fisher-Yates pass drawing from an injectable
      :class:`~underbar.core.random_source.RandomSource`.
"""

import functools
import math
import typing as tp

from underbar.core.containers import is_sequence
from underbar.core.random_source import RandomSource, default_random_source
from underbar.core.types import NOT_FOUND
from underbar.functional.collections import (
    every,
    filter,
    get_property,
    index_of,
    map,
    pluck,
    reduce,
    uniq,
)

__all__ = [
    "sort_by",
    "zip",
    "flatten",
    "intersection",
    "difference",
    "shuffle",
]


def _compare_by_subtraction(a: tp.Any, b: tp.Any) -> int:
    try:
        diff = a - b
        if isinstance(diff, float) and math.isnan(diff):
            return 0
        return (diff > 0) - (diff < 0)
    except TypeError:
        return 0


def sort_by(
    sequence: tp.MutableSequence[tp.Any],
    criterion: tp.Union[str, tp.Callable[[tp.Any], tp.Any]],
) -> tp.MutableSequence[tp.Any]:
    """Sort ``sequence`` in place by ascending criterion and return it.

    Args:
        sequence: Mutable sequence to reorder.
        criterion: Function computing each element's sort value, or a property
            name read from each element (mapping key or attribute).

    Example:
        >>> people = [{"name": "b", "age": 40}, {"name": "a", "age": 25}]
        >>> [p["name"] for p in sort_by(people, "age")]
        ['a', 'b']
    """
    if isinstance(criterion, str):
        name = criterion
        criterion = lambda element: get_property(element, name)  # noqa: E731

    keyed = functools.cmp_to_key(
        lambda a, b: _compare_by_subtraction(criterion(a), criterion(b))
    )
    sequence[:] = sorted(sequence, key=keyed)
    return sequence


def zip(*sequences: tp.Sequence[tp.Any]) -> tp.List[list]:
    """Group elements sharing an index.

    The result is as long as the longest input; shorter inputs contribute
    ``None`` past their end.

    Example:
        >>> zip(["a", "b", "c"], [1, 2])
        [['a', 1], ['b', 2], ['c', None]]
    """
    longest = reduce(sequences, lambda size, seq: max(size, len(seq)), 0)
    return [pluck(sequences, index) for index in range(longest)]


def flatten(nested: tp.Sequence[tp.Any]) -> list:
    """Concatenate all non-sequence leaves, at any depth, left to right.

    Example:
        >>> flatten([1, [2, [3, [4]], 5]])
        [1, 2, 3, 4, 5]
    """
    result = []
    # Work-list of items still to expand; the top is the leftmost pending item
    pending = list(reversed(map(nested, lambda item, *_: item)))
    while pending:
        item = pending.pop()
        if is_sequence(item):
            pending.extend(reversed(map(item, lambda child, *_: child)))
        else:
            result.append(item)
    return result


def intersection(*sequences: tp.Sequence[tp.Any]) -> list:
    """Unique elements of the first sequence present in every other one."""
    if not sequences:
        return []
    first, others = sequences[0], sequences[1:]
    return filter(
        uniq(first),
        lambda item: every(others, lambda other: index_of(other, item) != NOT_FOUND),
    )


def difference(first: tp.Sequence[tp.Any], *others: tp.Sequence[tp.Any]) -> list:
    """Unique elements of ``first`` present in none of ``others``."""
    return filter(
        uniq(first),
        lambda item: every(others, lambda other: index_of(other, item) == NOT_FOUND),
    )


def shuffle(
    sequence: tp.Sequence[tp.Any],
    random_source: tp.Optional[RandomSource] = None,
) -> list:
    """Return a uniformly random permutation of ``sequence`` as a new list.

    Args:
        sequence: Elements to permute. Never modified.
        random_source: Uniform ``[0, 1)`` source, e.g. a seeded
            ``numpy.random.Generator``. Defaults to the process-wide generator.
    """
    source = default_random_source() if random_source is None else random_source
    result = list(sequence)
    for i in range(len(result) - 1, 0, -1):
        # min() guards against sources returning exactly 1.0
        j = min(int(source.random() * (i + 1)), i)
        result[i], result[j] = result[j], result[i]
    return result
