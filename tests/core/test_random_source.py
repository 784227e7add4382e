import random

import numpy as np
from unittest.mock import patch
from underbar.core import random_source
from underbar.core.random_source import (
    RandomSource,
    default_random_source,
    seeded_random_source,
)


def test_generators_satisfy_protocol():
    assert isinstance(np.random.default_rng(0), RandomSource)
    assert isinstance(random.Random(0), RandomSource)


def test_seeded_sources_are_reproducible():
    a = seeded_random_source(123)
    b = seeded_random_source(123)
    assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]


def test_default_source_is_created_once():
    with patch.object(random_source, "_default_source", None):
        first = default_random_source()
        assert default_random_source() is first
        assert 0.0 <= first.random() < 1.0


def test_default_source_uses_configured_seed():
    with patch.object(random_source, "_default_source", None), patch.object(
        random_source.settings, "SHUFFLE_SEED", 99
    ):
        value = default_random_source().random()
    assert value == np.random.default_rng(99).random()
