"""Uniform random number source consumed by ``shuffle``."""

from typing import Optional, Protocol, runtime_checkable

import numpy as np

from underbar.core.config import settings
from underbar.logger.logger import logger

__all__ = ["RandomSource", "default_random_source", "seeded_random_source"]


@runtime_checkable
class RandomSource(Protocol):
    """Anything producing uniform floats in ``[0, 1)``.

    ``numpy.random.Generator`` and ``random.Random`` both qualify.
    """

    def random(self) -> float: ...


_default_source: Optional[np.random.Generator] = None


def seeded_random_source(seed: Optional[int] = None) -> np.random.Generator:
    """Return a fresh NumPy generator, reproducible when ``seed`` is given."""
    return np.random.default_rng(seed)


def default_random_source() -> np.random.Generator:
    """Return the process-wide generator, creating it on first use.

    The generator is seeded from ``UNDERBAR_SHUFFLE_SEED`` when set.
    """
    global _default_source
    if _default_source is None:
        logger.debug(f"Creating default random source (seed={settings.SHUFFLE_SEED})")
        _default_source = seeded_random_source(settings.SHUFFLE_SEED)
    return _default_source
