"""
WordBoard – utility surface that splits into:

  A) the masked answer, letter‑spaced ("i _ _ i _ ")
  B) on‑screen keyboard (QWERTY)

Keys already guessed are coloured hit/miss.  Clicking a key posts a
pygame.USEREVENT with a lowercase ``letter`` attribute, so the scene can
treat clicks and typed keys the same way.
"""
from __future__ import annotations
from typing import Tuple, Dict, Iterable
import pygame

from constants import (TEXT_COLOR, KEY_BORDER_COLOR, KEY_HIT_COLOR,
                       KEY_MISS_COLOR, KEY_SIZE, KEY_GAP)

class WordBoard:
    KEY_ROWS = ["QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM"]

    def __init__(
        self,
        origin: Tuple[int, int] = (0, 0),
        key_size: int = KEY_SIZE,
        gap: int = KEY_GAP,
        font: pygame.font.Font | None = None,
        answer_font: pygame.font.Font | None = None,
    ):
        self.origin      = origin
        self.key_size    = key_size
        self.gap         = gap
        self.font        = font or pygame.font.Font(None, key_size - 6)
        self.answer_font = answer_font or pygame.font.Font(None, 52)

        # state
        self.displayed = ""
        self.key_states: Dict[str, str] = {}   # LETTER -> "hit"/"miss"

        self._keyboard_rects: Dict[str, pygame.Rect] = {}
        self._keyboard_surf = self._build_keyboard_surface()

    # ───────────────────────── keyboard surface ──────────────────────
    @property
    def keyboard_width(self) -> int:
        longest = max(len(r) for r in self.KEY_ROWS)
        return longest * self.key_size + (longest - 1) * self.gap

    @property
    def answer_height(self) -> int:
        return self.answer_font.get_linesize() + 16

    def _build_keyboard_surface(self) -> pygame.Surface:
        row_h = self.key_size + self.gap
        kb_w  = self.keyboard_width
        kb_h  = row_h * len(self.KEY_ROWS)
        surf  = pygame.Surface((kb_w, kb_h), pygame.SRCALPHA)

        y = 0
        for row in self.KEY_ROWS:
            # centre each row
            row_w = len(row) * self.key_size + (len(row) - 1) * self.gap
            x = (kb_w - row_w) // 2
            for ch in row:
                rect = pygame.Rect(x, y, self.key_size, self.key_size)
                self._keyboard_rects[ch] = rect
                pygame.draw.rect(surf, KEY_BORDER_COLOR, rect, width=2, border_radius=4)
                label = self.font.render(ch, True, TEXT_COLOR)
                surf.blit(label, label.get_rect(center=rect.center))
                x += self.key_size + self.gap
            y += row_h
        return surf

    # ───────────────────────────── state ─────────────────────────────
    def set_answer(self, displayed: str) -> None:
        self.displayed = displayed

    def set_key_states(self, hits: Iterable[str], misses: Iterable[str]) -> None:
        self.key_states = {ch.upper(): "miss" for ch in misses}
        self.key_states.update({ch.upper(): "hit" for ch in hits})

    # ─────────────────────────── rendering ───────────────────────────
    def _keyboard_top(self) -> int:
        return self.origin[1] + self.answer_height

    def draw(self, target: pygame.Surface) -> None:
        ox, oy = self.origin
        label = self.answer_font.render(self.displayed.rstrip(), True, TEXT_COLOR)
        target.blit(label, label.get_rect(midtop=(ox + self.keyboard_width // 2, oy + 8)))

        kb_y = self._keyboard_top()
        target.blit(self._keyboard_surf, (ox, kb_y))
        for ch, st in self.key_states.items():
            rect = self._keyboard_rects.get(ch)
            if rect is None:
                continue
            rect = rect.inflate(-4, -4).move(ox, kb_y)
            colour = KEY_HIT_COLOR if st == "hit" else KEY_MISS_COLOR
            pygame.draw.rect(target, colour, rect, border_radius=4)
            lbl = self.font.render(ch, True, TEXT_COLOR)
            target.blit(lbl, lbl.get_rect(center=rect.center))

    # ───────────────────────── hit testing ───────────────────────────
    def key_from_pos(self, pos: Tuple[int, int]) -> str | None:
        ox    = self.origin[0]
        rel   = (pos[0] - ox, pos[1] - self._keyboard_top())
        for ch, rect in self._keyboard_rects.items():
            if rect.collidepoint(rel):
                return ch.lower()
        return None

    def handle_event(self, event: pygame.event.Event) -> None:
        """Left click on a key → USEREVENT(letter=<key>)."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            ch = self.key_from_pos(event.pos)
            if ch:
                pygame.event.post(pygame.event.Event(pygame.USEREVENT, letter=ch))
