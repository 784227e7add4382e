"""Helpers for merging mappings."""

import typing as tp

from underbar.functional.collections import each

__all__ = ["extend", "defaults"]


def extend(target: tp.MutableMapping, *sources: tp.Optional[tp.Mapping]) -> tp.MutableMapping:
    """Copy every key of every source into ``target``, later sources winning.

    Args:
        target: Mapping updated in place.
        *sources: Mappings applied left to right. ``None`` sources are skipped.

    Returns:
        ``target`` itself.

    Example:
        >>> extend({"a": 1}, {"b": 2}, {"a": 3})
        {'a': 3, 'b': 2}
    """

    def assign(value, key, _):
        target[key] = value

    each(sources, lambda source, *_: each(source, assign))
    return target


def defaults(target: tp.MutableMapping, *sources: tp.Optional[tp.Mapping]) -> tp.MutableMapping:
    """Fill in keys missing from ``target``; existing keys are never replaced.

    When several sources provide the same missing key, the first one wins.

    Example:
        >>> defaults({"a": 1}, {"a": 2, "b": 2})
        {'a': 1, 'b': 2}
    """

    def assign_missing(value, key, _):
        if key not in target:
            target[key] = value

    each(sources, lambda source, *_: each(source, assign_missing))
    return target
