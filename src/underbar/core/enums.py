"""Enumerations for container shapes."""

from enum import Enum


class ContainerKind(Enum):
    """The two container shapes the traversal primitive understands."""

    SEQUENCE = "sequence"
    MAPPING = "mapping"

    @property
    def ordered(self) -> bool:
        """Whether traversal of this shape promises ascending index order."""
        return self is ContainerKind.SEQUENCE
