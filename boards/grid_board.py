"""
GridBoard – the N×N picture grid.

Holds the shuffled tile list for the current round and lays it out
row‑major, one tile per cell.  The board does *no* game rules; it only:
    1. Stores the tiles in display order.
    2. Maps (row, col) to the pixel position of each cell.
    3. Scales and draws the tiles, with a thin gap between cells.

An empty tile list draws nothing.
"""
from __future__ import annotations
from typing import List, Tuple, Sequence
import pygame

from constants import TILE_GAP

class GridBoard:
    def __init__(
        self,
        grid_size: int,
        cell_size: int = 64,
        origin: Tuple[int, int] = (0, 0),
        gap: int = TILE_GAP,
    ):
        self.grid_size = grid_size
        self.cell_size = cell_size
        self.origin    = origin
        self.gap       = gap
        self.tiles: List = []
        self._scaled: List[pygame.Surface] = []

    @property
    def size(self) -> Tuple[int, int]:
        side = self.grid_size * self.cell_size + (self.grid_size - 1) * self.gap
        return side, side

    # ───────────────────────────── tiles ─────────────────────────────
    def set_tiles(self, tiles: Sequence) -> None:
        """Replace the displayed tiles (objects with a ``surface``)."""
        self.tiles = list(tiles)
        cell = (self.cell_size, self.cell_size)
        self._scaled = [pygame.transform.scale(t.surface, cell) for t in self.tiles]

    # ───────────────────────────── geometry ──────────────────────────
    def cell_to_pixel(self, row: int, col: int) -> Tuple[int, int]:
        ox, oy = self.origin
        step = self.cell_size + self.gap
        return ox + col * step, oy + row * step

    # ─────────────────────────── rendering ───────────────────────────
    def draw(self, target: pygame.Surface) -> None:
        for idx, surf in enumerate(self._scaled):
            row, col = divmod(idx, self.grid_size)
            target.blit(surf, self.cell_to_pixel(row, col))
