import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from flappy_capy.config import GameConfig  # noqa: E402


class FakeSurface:
    def __init__(self):
        self.calls = []

    def draw_rect(self, bounds, color):
        self.calls.append(("rect", bounds, color))

    def draw_image(self, name, x, y):
        self.calls.append(("image", name, x, y))

    def draw_text(self, text, x, y, style):
        self.calls.append(("text", text, x, y))

    def texts(self):
        return [c[1] for c in self.calls if c[0] == "text"]


class FakeScheduler:
    def __init__(self):
        self.pending = []

    def request_next_tick(self, callback):
        self.pending.append(callback)

    def step(self, frames=1):
        for _ in range(frames):
            callback = self.pending.pop(0)
            callback()


class FakeCue:
    def __init__(self):
        self.calls = []

    def play(self):
        self.calls.append("play")

    def pause(self):
        self.calls.append("pause")

    def rewind(self):
        self.calls.append("rewind")


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def cues():
    return {"idle": FakeCue(), "play": FakeCue(), "death": FakeCue()}
