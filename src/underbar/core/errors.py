"""Exception hierarchy for underbar.

Combinators do not wrap the errors raised by caller-supplied functions; those
propagate unchanged. The classes here cover the library's own failure modes.
"""

__all__ = [
    "UnderbarError",
    "UnsupportedContainerError",
    "ConfigurationError",
]


class UnderbarError(Exception):
    """Base exception for all underbar errors."""


class UnsupportedContainerError(UnderbarError, TypeError):
    """Raised when traversal is asked to walk something that is not a container."""

    def __init__(self, obj: object):
        super().__init__(
            f"Expected a sequence or a mapping, got {type(obj).__name__!r}"
        )
        self.obj = obj


class ConfigurationError(UnderbarError, ValueError):
    """Raised when ``UNDERBAR_*`` settings cannot be validated."""
