"""
Values you can freely tinker with without touching the logic.
"""

# ── Colours ───────────────────────────────────────────────────────────
GRADIENT_TOP           = (128, 0, 128)     # purple
GRADIENT_BOTTOM        = (0, 0, 255)       # blue
PANEL_COLOR            = (0, 0, 0, 178)    # black @ 70 %

TEXT_COLOR             = (255, 255, 255)
CORRECT_COLOR          = (60, 200, 90)
INCORRECT_COLOR        = (230, 60, 60)
ERROR_COLOR            = (255, 80, 80)

BUTTON_FG_COLOR        = (240, 240, 240)
BUTTON_BG_COLOR        = (20, 20, 20)      # Help / New Game

INPUT_BG_COLOR         = (245, 245, 245)
INPUT_FG_COLOR         = (20, 20, 20)
INPUT_BORDER_COLOR     = (150, 150, 150)

KEY_BORDER_COLOR       = (100, 100, 100)
KEY_HIT_COLOR          = (118, 210, 118)
KEY_MISS_COLOR         = (70, 70, 70)

# ── Layout / sizes ────────────────────────────────────────────────────
PANEL_RADIUS           = 10
PANEL_PADDING          = 12
TILE_GAP               = 1                 # px between puzzle tiles
SECTION_GAP            = 14                # vertical gap between blocks

KEY_SIZE               = 34
KEY_GAP                = 5
