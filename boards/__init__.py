"""
Expose the public board classes.
"""
from .grid_board import GridBoard        # shuffled picture tiles
from .word_board import WordBoard        # masked answer + keyboard

__all__ = ["GridBoard", "WordBoard"]
