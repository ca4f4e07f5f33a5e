"""
Shared fixtures for the N-Queens GA tests.
"""

from random import Random

import matplotlib
import pytest

matplotlib.use("Agg")


class ScriptedRandom(Random):
    """Random source replaying fixed randrange() and random() results."""

    def __init__(self, randranges=(), randoms=()):
        super().__init__(0)
        self.randranges = list(randranges)
        self.randoms = list(randoms)

    def randrange(self, start, stop=None, step=1):
        return self.randranges.pop(0)

    def random(self):
        return self.randoms.pop(0)


@pytest.fixture
def scripted_random():
    """Factory for random sources with a fixed script of draws."""
    return ScriptedRandom


@pytest.fixture
def rng():
    return Random(1234)
