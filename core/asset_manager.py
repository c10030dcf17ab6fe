"""
AssetManager  –  name‑keyed lookup of the bundled place photos.

Each place name maps to ``<images_dir>/<name>.png`` (``.jpg`` also
accepted).  Lookups are cached per name, misses included, so a missing
photo is reported once and then stays a silent ``None``.
"""
from __future__ import annotations
from pathlib import Path
import pygame

IMAGE_SUFFIXES = (".png", ".jpg")

class AssetManager:
    def __init__(self, images_dir: Path):
        self.images_dir = Path(images_dir)
        # key = place name -> pygame.Surface, or None when not found
        self._cache: dict[str, pygame.Surface | None] = {}

    # ----------------------------------------------------------------
    def _find_file(self, name: str) -> Path | None:
        for suffix in IMAGE_SUFFIXES:
            path = self.images_dir / f"{name}{suffix}"
            if path.is_file():
                return path
        return None

    def lookup(self, name: str) -> pygame.Surface | None:
        """
        Return the Surface for *name*, or None if the asset cannot be
        resolved or decoded.
        """
        if name in self._cache:
            return self._cache[name]

        surf = None
        path = self._find_file(name) if name else None
        if path is None:
            print(f"[Assets] No image for: {name!r}")
        else:
            try:
                surf = pygame.image.load(path)
            except (pygame.error, FileNotFoundError) as exc:
                print(f"[Assets] Could not decode {path.name}: {exc}")
                surf = None
            # convert() needs a display mode; tests run without one
            if surf is not None and pygame.display.get_surface() is not None:
                surf = surf.convert_alpha()

        self._cache[name] = surf
        return surf

    def clear(self) -> None:
        self._cache.clear()
