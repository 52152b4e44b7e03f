# Ensure project root is on sys.path for tests, plus shared battle fixtures
import sys, pathlib, random
root = pathlib.Path(__file__).resolve().parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

import pytest

from pokebattle.battle.models import Move, Creature


class ScriptedRng:
    """Stand-in for random.Random: cycles fixed hit draws, fixed damage roll and move pick."""
    def __init__(self, draws=(0.0,), roll=1.0, pick=0):
        self.draws = list(draws)
        self._i = 0
        self.roll = roll
        self.pick = pick

    def random(self):
        v = self.draws[self._i % len(self.draws)]
        self._i += 1
        return v

    def uniform(self, a, b):
        return a + (b - a) * self.roll

    def randrange(self, n):
        return self.pick % n


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def rng():
    return random.Random(12345)


@pytest.fixture
def make_creature():
    def _make(name="Testmon", element="Normal", hp=50, moves=None):
        moves = moves or [Move("Tackle", "Normal", 40)]
        return Creature(name, element, hp, moves)
    return _make
