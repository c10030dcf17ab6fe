"""
Global constants shared across modules.
"""
from pathlib import Path

# Window ---------------------------------------------------------------
WIDTH, HEIGHT = 640, 900
FPS           = 60

# Fonts / sizes --------------------------------------------------------
import pygame  # only to query default font
FONT_NAME  = pygame.font.get_default_font()
BOARD_SIZE = 360                     # px, square tile grid

# Assets ---------------------------------------------------------------
PROJECT_ROOT = Path(__file__).parent
IMAGES_DIR   = PROJECT_ROOT / "assets" / "places"

# Game rules -----------------------------------------------------------
# one round per place; the image asset carries the same name
WORDS = ("ankara", "istanbul", "izmir", "bursa", "antalya")

GRID_SIZE    = 4                     # tiles per side
MAX_HELP     = 5
ROUND_POINTS = 100
HELP_PENALTY = 10                    # per help / wrong guess
