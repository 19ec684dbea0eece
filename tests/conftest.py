import os
import sys

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pygame
import pytest

import dvd_screensaver as dvd

LOGO_RGBA = (30, 80, 255, 255)


@pytest.fixture
def pg():
    pygame.init()
    yield pygame
    pygame.quit()


@pytest.fixture
def window():
    return dvd.Rect.from_size(800, 600)


@pytest.fixture
def logo(pg):
    surf = pygame.Surface((100, 80), pygame.SRCALPHA, 32)
    surf.fill(LOGO_RGBA)
    return surf


class CountingRecolor:
    def __init__(self):
        self.calls = 0

    def __call__(self, image, rng=None):
        self.calls += 1
        return image


@pytest.fixture
def recolor():
    return CountingRecolor()
