"""
conftest.py
-----------
Shared pytest configuration and fixtures for the Flappy Box tests.

Contains:
- Headless SDL setup so pygame never needs a real display or sound card
- Config / world fixtures with a seeded random source
- A minimal stand-in for GameApp used by state tests
"""

import os
import random
import sys

# Must be set before pygame initialises any subsystem
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Add src directory to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pygame
import pytest

from flappy.data.schema import GameConfig
from flappy.engine.input import resolve_key
from flappy.engine.world import World


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def world(config, rng):
    w = World(config, rng=rng)
    # hold back spawning so tests control the pipe list
    w.spawner.timer = 0.0
    return w


@pytest.fixture
def fonts():
    pygame.font.init()
    f = pygame.font.Font(None, 20)
    return (f, f, f)


class FakeApp:
    """Just the attributes states read from GameApp."""

    def __init__(self, config, fonts):
        self.config = config
        self.flap_key = resolve_key(config.controls.flap_key)
        self.running = True
        self.hud_font, self.big_font, self.font = fonts
        self.state_stack = []

    def switch_state(self, st, **kwargs):
        if self.state_stack:
            self.state_stack.pop().exit()
        self.state_stack.append(st)
        st.enter(**kwargs)


@pytest.fixture
def fake_app(config, fonts):
    return FakeApp(config, fonts)


@pytest.fixture
def make_app(fonts):
    return lambda cfg: FakeApp(cfg, fonts)
