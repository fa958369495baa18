import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from flappy_block.config import GameConfig  # noqa: E402


class FixedRng:
    """Returns the same offset for every draw."""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    def randrange(self, stop):
        self.calls += 1
        assert 0 <= self.value < stop
        return self.value


class SequenceRng:
    """Returns the given offsets in order."""

    def __init__(self, *values):
        self.values = list(values)

    def randrange(self, stop):
        value = self.values.pop(0)
        assert 0 <= value < stop
        return value


class CountingRandom(random.Random):
    def __init__(self, seed=None):
        super().__init__(seed)
        self.draws = 0

    def randrange(self, *args, **kwargs):
        self.draws += 1
        return super().randrange(*args, **kwargs)


@pytest.fixture
def config():
    return GameConfig(seed=1234)


@pytest.fixture
def fixed_rng():
    return FixedRng(380)
