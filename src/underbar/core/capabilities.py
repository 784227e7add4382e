"""Method references accepted by ``invoke``.

A method is given either as a function, called with each element as its
receiver, or as the name of an attribute looked up on each element. Both are
normalised once per ``invoke`` call into a :class:`Capability` whose
:meth:`~Capability.resolve` binds it to one element.
"""

import functools
from abc import ABC, abstractmethod
from typing import Any, Callable, Union

__all__ = [
    "Capability",
    "FunctionCapability",
    "NamedCapability",
    "as_capability",
]


class Capability(ABC):
    @abstractmethod
    def resolve(self, receiver: Any) -> Callable[..., Any]:
        """Return a callable bound to ``receiver``."""
        pass

    def call(self, receiver: Any, args: tuple = ()) -> Any:
        return self.resolve(receiver)(*args)


class FunctionCapability(Capability):
    def __init__(self, fn: Callable[..., Any]):
        self.fn = fn

    def resolve(self, receiver: Any) -> Callable[..., Any]:
        return functools.partial(self.fn, receiver)

    def __repr__(self) -> str:
        return f"FunctionCapability({self.fn!r})"


class NamedCapability(Capability):
    def __init__(self, name: str):
        self.name = name

    def resolve(self, receiver: Any) -> Callable[..., Any]:
        # AttributeError propagates to the caller untouched
        return getattr(receiver, self.name)

    def __repr__(self) -> str:
        return f"NamedCapability({self.name!r})"


def as_capability(method: Union[str, Callable[..., Any], Capability]) -> Capability:
    """Normalise a function, an attribute name or a capability.

    Raises:
        TypeError: If ``method`` is none of those.
    """
    if isinstance(method, Capability):
        return method
    if isinstance(method, str):
        return NamedCapability(method)
    if callable(method):
        return FunctionCapability(method)
    raise TypeError(
        f"invoke expects a callable or a method name, got {type(method).__name__!r}"
    )
