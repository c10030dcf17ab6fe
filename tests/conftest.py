import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest


@pytest.fixture(scope="session", autouse=True)
def pygame_init():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def rng():
    return random.Random(1234)


def region_colour(row, col):
    return (40 + row * 40, 40 + col * 40, 90)


def make_grid_image(grid_size, tile_w, tile_h):
    """Surface whose (row, col) region is filled with region_colour(row, col)."""
    surf = pygame.Surface((grid_size * tile_w, grid_size * tile_h), 0, 32)
    for r in range(grid_size):
        for c in range(grid_size):
            surf.fill(region_colour(r, c), pygame.Rect(c * tile_w, r * tile_h, tile_w, tile_h))
    return surf


class FakeAssets:
    def __init__(self, images=None):
        self.images = dict(images or {})
        self.calls = []

    def lookup(self, name):
        self.calls.append(name)
        return self.images.get(name)


@pytest.fixture
def grid_image():
    return make_grid_image(4, 20, 15)


@pytest.fixture
def fake_assets(grid_image):
    from config import WORDS
    return FakeAssets({name: grid_image for name in WORDS})
