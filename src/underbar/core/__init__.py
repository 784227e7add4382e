"""Core building blocks shared by the functional combinators."""

from underbar.core.containers import (
    Container,
    KeyedMapping,
    OrderedSequence,
    as_container,
    is_mapping,
    is_sequence,
)
from underbar.core.enums import ContainerKind
from underbar.core.equality import strict_equal
from underbar.core.errors import (
    ConfigurationError,
    UnderbarError,
    UnsupportedContainerError,
)
from underbar.core.types import NOT_FOUND

__all__ = [
    "Container",
    "OrderedSequence",
    "KeyedMapping",
    "as_container",
    "is_sequence",
    "is_mapping",
    "ContainerKind",
    "strict_equal",
    "UnderbarError",
    "UnsupportedContainerError",
    "ConfigurationError",
    "NOT_FOUND",
]
