"""
Reusable UI widgets (buttons & the one‑letter guess field).
"""
from __future__ import annotations
import pygame
from config    import FONT_NAME
from constants import (BUTTON_BG_COLOR, BUTTON_FG_COLOR, PANEL_RADIUS,
                       INPUT_BG_COLOR, INPUT_FG_COLOR, INPUT_BORDER_COLOR)

# --------------------------------------------------------------------
class Button:
    def __init__(self, rect: pygame.Rect, text: str,
                 bg=BUTTON_BG_COLOR, fg=BUTTON_FG_COLOR):
        self.rect = rect
        self.text = text
        self.bg   = bg
        self.fg   = fg

        font = pygame.font.Font(FONT_NAME, 20)
        self.surface = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(self.surface, bg, self.surface.get_rect(),
                         border_radius=PANEL_RADIUS)
        lbl = font.render(text, True, fg)
        self.surface.blit(lbl, lbl.get_rect(center=self.surface.get_rect().center))

    def draw(self, screen):  screen.blit(self.surface, self.rect.topleft)
    def hovered(self, pos):  return self.rect.collidepoint(pos)

# --------------------------------------------------------------------
class TextInput:
    """
    Single‑character text field.  Typing appends up to *max_len*
    characters; further keys are dropped until Backspace or Enter.
    Enter returns the text and clears it.
    """
    def __init__(self, rect: pygame.Rect, placeholder: str = "Guess a letter",
                 max_len: int = 1):
        self.rect        = rect
        self.placeholder = placeholder
        self.max_len     = max_len
        self.text        = ""
        self.font        = pygame.font.Font(FONT_NAME, 22)

    def handle_event(self, event) -> str | None:
        """Return the submitted text on Enter, else None."""
        if event.type != pygame.KEYDOWN:
            return None
        if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            submitted, self.text = self.text, ""
            return submitted
        if event.key == pygame.K_BACKSPACE:
            self.text = self.text[:-1]
        elif event.unicode and event.unicode.isprintable():
            self.text = (self.text + event.unicode)[:self.max_len]
        return None

    def draw(self, screen):
        pygame.draw.rect(screen, INPUT_BG_COLOR, self.rect, border_radius=6)
        pygame.draw.rect(screen, INPUT_BORDER_COLOR, self.rect, width=1, border_radius=6)
        if self.text:
            lbl = self.font.render(self.text, True, INPUT_FG_COLOR)
        else:
            lbl = self.font.render(self.placeholder, True, INPUT_BORDER_COLOR)
        screen.blit(lbl, lbl.get_rect(center=self.rect.center))
