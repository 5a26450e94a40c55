"""
Shared fixtures for virtual stick tests.

Provides a controllable clock, an event recorder and ready-made sessions.
"""
import os
import sys

import pytest

# Ensure src is on the path when the package is not installed
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from virtual_stick.config_manager import StickConfig
from virtual_stick.events import UpdateEmitter
from virtual_stick.input_surface import ListenerSurface
from virtual_stick.session import StickSession


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


class Recorder:
    """Collects events per channel."""

    def __init__(self):
        self.starts = []
        self.moves = []
        self.stops = []

    def emitter(self):
        return UpdateEmitter(
            on_start=self.starts.append,
            on_move=self.moves.append,
            on_stop=self.stops.append,
        )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def surface():
    return ListenerSurface()


@pytest.fixture
def make_session(recorder, surface, clock):
    def _make(**config):
        cfg = StickConfig(**config)
        return StickSession(cfg, recorder.emitter(), surface, clock=clock)
    return _make
