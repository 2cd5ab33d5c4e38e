# src/conftest.py

import pytest

from src.config import default_config
from src.engine import GameEngine


class ScriptedRandom:
    """
    Stands in for random.Random. randrange(n) returns the queued values in
    order; once the queue is empty it returns n - 1, which never triggers
    the one-in-N apple roll and places apples in the far corner.
    """

    def __init__(self, values=None):
        self.values = list(values or [])
        self.calls = []

    def randrange(self, n):
        self.calls.append(n)
        if self.values:
            value = self.values.pop(0)
            assert 0 <= value < n
            return value
        return n - 1

    def queue(self, *values):
        self.values.extend(values)


@pytest.fixture
def config():
    return default_config()


@pytest.fixture
def rng():
    return ScriptedRandom()


@pytest.fixture
def engine(config, rng):
    return GameEngine(config, rng=rng)


@pytest.fixture
def scripted_random():
    return ScriptedRandom
