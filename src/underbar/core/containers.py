"""Uniform enumeration over the two container shapes.

Every traversal-consuming combinator goes through :func:`as_container`, which
wraps its input in one of two implementations of the same enumeration
capability:

    - :class:`OrderedSequence`: integer-indexed, visited ``0..len-1`` in order.
    - :class:`KeyedMapping`: unique keys, visited in the mapping's own iteration
      order. No particular order is promised to callers.

``None`` stands for an absent input and is enumerated as an empty sequence.
Strings and bytes are deliberately not sequences here: they are leaves for
``flatten`` and cannot be traversed.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, Iterator, Tuple

from underbar.core.enums import ContainerKind
from underbar.core.errors import UnsupportedContainerError

__all__ = [
    "Container",
    "OrderedSequence",
    "KeyedMapping",
    "as_container",
    "is_sequence",
    "is_mapping",
]

_SCALAR_SEQUENCES = (str, bytes, bytearray)


def is_sequence(obj: Any) -> bool:
    """Return ``True`` for list-like containers (lists, tuples, ranges...)."""
    return isinstance(obj, Sequence) and not isinstance(obj, _SCALAR_SEQUENCES)


def is_mapping(obj: Any) -> bool:
    return isinstance(obj, Mapping)


class Container(ABC):
    """Abstract enumeration capability shared by both container shapes."""

    kind: ContainerKind

    def __init__(self, source: Any):
        self.source = source

    @abstractmethod
    def entries(self) -> Iterator[Tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs, each entry exactly once."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.source!r})"


class OrderedSequence(Container):
    kind = ContainerKind.SEQUENCE

    def entries(self) -> Iterator[Tuple[int, Any]]:
        # Index-based so the visitor always sees the live element at i
        for index in range(len(self.source)):
            yield index, self.source[index]

    def __len__(self) -> int:
        return len(self.source)


class _Absent(OrderedSequence):
    """Empty enumeration standing in for a ``None`` input."""

    def entries(self) -> Iterator[Tuple[int, Any]]:
        return iter(())

    def __len__(self) -> int:
        return 0


class KeyedMapping(Container):
    kind = ContainerKind.MAPPING

    def entries(self) -> Iterator[Tuple[Any, Any]]:
        # Snapshot the keys so visitors may assign into the mapping
        for key in list(self.source):
            yield key, self.source[key]

    def __len__(self) -> int:
        return len(self.source)


def as_container(obj: Any) -> Container:
    """Wrap ``obj`` in the matching :class:`Container` implementation.

    Args:
        obj: A sequence, a mapping, an existing container or ``None``.

    Returns:
        The container wrapper to enumerate.

    Raises:
        UnsupportedContainerError: If ``obj`` is neither shape.
    """
    if isinstance(obj, Container):
        return obj
    if obj is None:
        return _Absent(obj)
    if is_sequence(obj):
        return OrderedSequence(obj)
    if is_mapping(obj):
        return KeyedMapping(obj)
    raise UnsupportedContainerError(obj)
