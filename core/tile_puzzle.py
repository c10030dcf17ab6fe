"""
Tile puzzle generator.

Cuts a place photo into an N×N grid of equal tiles (row‑major) and hands
them back shuffled.  Every call shuffles afresh; inject a seeded
``random.Random`` to make the order reproducible.
"""
from __future__ import annotations
import random
from dataclasses import dataclass, field
from typing import List, Protocol

import pygame

from config import GRID_SIZE


class ImageLookup(Protocol):
    def lookup(self, name: str) -> pygame.Surface | None: ...


@dataclass(frozen=True)
class Tile:
    row: int                                  # position before shuffling
    col: int
    surface: pygame.Surface = field(compare=False, repr=False)


def tile_size(width: int, height: int, grid_size: int) -> tuple[int, int]:
    """Floor‑divided tile dimensions, never below one pixel."""
    return max(1, width // grid_size), max(1, height // grid_size)


def split_into_tiles(image: pygame.Surface, grid_size: int = GRID_SIZE) -> List[Tile]:
    """
    Partition *image* into ``grid_size**2`` tiles, row by row.

    If the image size is not a multiple of the tile size it is rescaled to
    ``(tile_w * N, tile_h * N)`` first, so the tiles still cover the whole
    picture with nothing dropped or duplicated by rounding.
    """
    if grid_size < 1:
        raise ValueError(f"grid_size must be >= 1, got {grid_size}")

    w, h = image.get_size()
    tw, th = tile_size(w, h, grid_size)
    full = (tw * grid_size, th * grid_size)
    if full != (w, h):
        image = pygame.transform.scale(image, full)

    tiles: List[Tile] = []
    for row in range(grid_size):
        for col in range(grid_size):
            rect = pygame.Rect(col * tw, row * th, tw, th)
            tiles.append(Tile(row, col, image.subsurface(rect).copy()))
    return tiles


def is_permutation(tiles: List[Tile], grid_size: int = GRID_SIZE) -> bool:
    """True if *tiles* hold every grid cell exactly once."""
    cells = [(t.row, t.col) for t in tiles]
    expected = {(r, c) for r in range(grid_size) for c in range(grid_size)}
    return len(cells) == len(expected) and set(cells) == expected


class TilePuzzleGenerator:
    def __init__(
        self,
        assets: ImageLookup,
        grid_size: int = GRID_SIZE,
        rng: random.Random | None = None,
    ):
        if grid_size < 1:
            raise ValueError(f"grid_size must be >= 1, got {grid_size}")
        self.assets    = assets
        self.grid_size = grid_size
        self.rng       = rng or random.Random()

    def generate(self, image_name: str) -> List[Tile]:
        """Shuffled tiles for *image_name*; empty if the image is missing."""
        image = self.assets.lookup(image_name)
        if image is None:
            print(f"[Puzzle] Empty puzzle for: {image_name!r}")
            return []
        tiles = split_into_tiles(image, self.grid_size)
        self.rng.shuffle(tiles)
        return tiles
