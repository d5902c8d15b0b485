import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


class ScriptedRandom:
    """Random source replaying fixed draws; fails loudly on unexpected calls."""

    def __init__(self, ints=(), coins=()):
        self.ints = list(ints)
        self.coins = list(coins)

    def randint(self, a, b):
        assert self.ints, f"unexpected randint({a}, {b})"
        value = self.ints.pop(0)
        assert a <= value <= b, f"scripted {value} outside [{a}, {b}]"
        return value

    def coin(self):
        assert self.coins, "unexpected coin()"
        return self.coins.pop(0)


@pytest.fixture
def scripted_rng():
    return ScriptedRandom
