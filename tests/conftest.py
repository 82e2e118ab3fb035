import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
import pytest

from ballsim.Ball import Ball
from ballsim.config import SimulationConfig
from ballsim.scheduler import ManualScheduler
from ballsim.world import World

pygame.init()


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def draw_ball(self, position, radius, color):
        self.calls.append(("draw", (position.x, position.y), radius, color))

    def draws(self):
        return [c for c in self.calls if c[0] == "draw"]


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def make_world(renderer):
    def _make(balls=None, **settings):
        config = SimulationConfig(**settings)
        return World(renderer, config, balls=balls)
    return _make


@pytest.fixture
def head_on_pair():
    return [
        Ball((90, 100), (1, 0), radius=10),
        Ball((110, 100), (-1, 0), radius=10),
    ]
