import random

import pygame
import pytest

from conftest import FakeAssets, make_grid_image, region_colour
from core.tile_puzzle import Tile, TilePuzzleGenerator, is_permutation, split_into_tiles, tile_size


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_split_is_row_major_partition(n):
    image = make_grid_image(n, 12, 9)
    tiles = split_into_tiles(image, n)
    assert len(tiles) == n * n
    assert [(t.row, t.col) for t in tiles] == [(r, c) for r in range(n) for c in range(n)]
    for t in tiles:
        assert t.surface.get_size() == (12, 9)
        assert t.surface.get_at((0, 0))[:3] == region_colour(t.row, t.col)
        assert t.surface.get_at((11, 8))[:3] == region_colour(t.row, t.col)


@pytest.mark.parametrize("size", [(101, 77), (3, 3), (2, 9)])
def test_split_handles_uneven_sizes(size):
    image = pygame.Surface(size)
    tiles = split_into_tiles(image, 4)
    tw, th = tile_size(*size, 4)
    assert len(tiles) == 16
    assert is_permutation(tiles, 4)
    assert {t.surface.get_size() for t in tiles} == {(tw, th)}


def test_tile_size_floors_and_never_zero():
    assert tile_size(101, 77, 4) == (25, 19)
    assert tile_size(3, 2, 4) == (1, 1)


def test_split_rejects_empty_grid():
    with pytest.raises(ValueError):
        split_into_tiles(pygame.Surface((8, 8)), 0)


def test_is_permutation_detects_duplicates():
    surf = pygame.Surface((1, 1))
    tiles = [Tile(r, c, surf) for r in range(2) for c in range(2)]
    assert is_permutation(tiles, 2)
    assert not is_permutation(tiles[:3], 2)
    assert not is_permutation(tiles[:3] + [tiles[0]], 2)


def test_generate_returns_shuffled_permutation(grid_image):
    gen = TilePuzzleGenerator(FakeAssets({"izmir": grid_image}), 4, random.Random(7))
    tiles = gen.generate("izmir")
    assert is_permutation(tiles, 4)
    for t in tiles:
        assert t.surface.get_at((0, 0))[:3] == region_colour(t.row, t.col)


def test_generate_reshuffles_every_call(grid_image):
    gen = TilePuzzleGenerator(FakeAssets({"izmir": grid_image}), 4, random.Random(7))
    first = [(t.row, t.col) for t in gen.generate("izmir")]
    second = [(t.row, t.col) for t in gen.generate("izmir")]
    assert sorted(first) == sorted(second)
    assert first != second


def test_same_seed_same_order(grid_image):
    assets = FakeAssets({"izmir": grid_image})
    a = TilePuzzleGenerator(assets, 4, random.Random(99)).generate("izmir")
    b = TilePuzzleGenerator(assets, 4, random.Random(99)).generate("izmir")
    assert a == b


def test_missing_image_gives_empty_puzzle():
    gen = TilePuzzleGenerator(FakeAssets(), 4)
    assert gen.generate("ankara") == []


def test_generator_rejects_bad_grid_size():
    with pytest.raises(ValueError):
        TilePuzzleGenerator(FakeAssets(), 0)
