import random
import pytest

from maths_practice.session import Session


class ScriptedRandom(random.Random):
    """Returns queued values from randint, checking each lies in the requested range."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        value = self.values.pop(0)
        assert a <= value <= b, f"{value} outside [{a}, {b}]"
        return value


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def session():
    """A session with a fixed seed so generated batches are reproducible."""
    return Session(rng=random.Random(1234))
