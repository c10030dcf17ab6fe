"""
main.py

Entry point.  Opens the window, builds the GeoGuesser scene and runs a
plain event → update → draw loop until the window closes or Esc is hit.
"""

import sys
import pygame

from config              import WIDTH, HEIGHT, FPS, IMAGES_DIR, GRID_SIZE
from core.asset_manager  import AssetManager
from core.game_controller import GuessGameController
from core.tile_puzzle    import TilePuzzleGenerator
from scenes.geoguesser   import GeoGuesserScene

def build_scene(screen: pygame.Surface) -> GeoGuesserScene:
    assets     = AssetManager(IMAGES_DIR)
    puzzle     = TilePuzzleGenerator(assets, GRID_SIZE)
    controller = GuessGameController()
    return GeoGuesserScene(screen, controller, puzzle)

def main() -> None:
    pygame.init()
    pygame.display.set_caption("GeoGuesser")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock  = pygame.time.Clock()

    scene = build_scene(screen)

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        for ev in pygame.event.get():
            if ev.type == pygame.QUIT or scene.handle_event(ev) == "quit":
                running = False
                break

        scene.update(dt)
        scene.draw()
        pygame.display.flip()

    pygame.quit()
    sys.exit()

if __name__ == "__main__":
    main()
