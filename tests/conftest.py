import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from config import Settings
from core import GameSession


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def session():
    return GameSession(rng=random.Random(1234))


@pytest.fixture
def tall_session():
    # ball starts far from both paddles so nothing is hit for a few hundred ticks
    return GameSession(Settings(height=2000), rng=FixedRandom(0.1))


@pytest.fixture
def running(session):
    session.start()
    return session
