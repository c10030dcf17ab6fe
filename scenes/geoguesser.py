# scenes/geoguesser.py
"""
GeoGuesser scene – the whole game on one screen.

Playing view (top → bottom):
    title · round · shuffled 4×4 photo · masked answer + keyboard
    · feedback · guess field + Help · error · score
Game‑over view:
    "Congrats!" · final score · New Game

The scene never mutates game state itself; it forwards input to the
GuessGameController and redraws from the snapshots the controller pushes.
A new round (or a new game) triggers a fresh tile shuffle.
"""

from __future__ import annotations
from typing import Tuple

import pygame

from boards              import GridBoard, WordBoard
from config              import WIDTH, HEIGHT, FONT_NAME, BOARD_SIZE, GRID_SIZE, IMAGES_DIR
from constants           import (GRADIENT_TOP, GRADIENT_BOTTOM, PANEL_COLOR, PANEL_RADIUS,
                                 PANEL_PADDING, TEXT_COLOR, CORRECT_COLOR, INCORRECT_COLOR,
                                 ERROR_COLOR, TILE_GAP, SECTION_GAP)
from core.asset_manager  import AssetManager
from core.game_controller import (GuessGameController, ControllerSnapshot, GameState,
                                  GuessOutcome, feedback_text)
from core.tile_puzzle    import TilePuzzleGenerator
from ui.widgets          import Button, TextInput


def _gradient(size: Tuple[int, int]) -> pygame.Surface:
    w, h = size
    surf = pygame.Surface(size)
    for y in range(h):
        t = y / max(1, h - 1)
        colour = [round(a + (b - a) * t) for a, b in zip(GRADIENT_TOP, GRADIENT_BOTTOM)]
        pygame.draw.line(surf, colour, (0, y), (w, y))
    return surf


# ─────────────────────────── scene class ──────────────────────────
class GeoGuesserScene:
    def __init__(
        self,
        screen: pygame.Surface,
        controller: GuessGameController | None = None,
        puzzle: TilePuzzleGenerator | None = None,
    ):
        self.screen     = screen
        self.controller = controller or GuessGameController()
        self.puzzle     = puzzle or TilePuzzleGenerator(AssetManager(IMAGES_DIR), GRID_SIZE)

        # fonts
        pygame.font.init()
        self.title_f = pygame.font.Font(FONT_NAME, 40)
        self.head_f  = pygame.font.Font(FONT_NAME, 26)
        self.hud_f   = pygame.font.Font(FONT_NAME, 20)

        self.background = _gradient((WIDTH, HEIGHT))

        # layout
        cx = WIDTH // 2
        grid_n = self.puzzle.grid_size
        cell   = (BOARD_SIZE - (grid_n - 1) * TILE_GAP) // grid_n
        self.grid = GridBoard(grid_n, cell_size=cell, gap=TILE_GAP)
        gw, gh = self.grid.size
        self.grid.origin = (cx - gw // 2, 130)
        self.grid_rect   = pygame.Rect(self.grid.origin, (gw, gh))

        self.word_board = WordBoard()
        kb_w = self.word_board.keyboard_width
        self.word_board.origin = (cx - kb_w // 2, self.grid_rect.bottom + 2 * SECTION_GAP)
        kb_bottom = (self.word_board.origin[1] + self.word_board.answer_height
                     + len(WordBoard.KEY_ROWS) * (self.word_board.key_size + self.word_board.gap))

        self.feedback_y = kb_bottom + SECTION_GAP
        row_y = self.feedback_y + 40
        w, h  = 160, 44
        self.input    = TextInput(pygame.Rect(cx - w - 10, row_y, w, h))
        self.help_btn = Button(pygame.Rect(cx + 10, row_y, w, h), "Help")
        self.error_y  = row_y + h + SECTION_GAP
        self.score_y  = self.error_y + 34

        self.new_game_btn = Button(pygame.Rect(cx - 80, HEIGHT // 2 + 60, 160, 50), "New Game")

        # state from the controller
        self._tiles_key: tuple[int, GameState] | None = None
        self.snap: ControllerSnapshot = self.controller.snapshot()
        self.controller.subscribe(self._on_change)
        self._on_change(self.snap)

    # ───────── controller observer ─────────
    def _on_change(self, snap: ControllerSnapshot) -> None:
        self.snap = snap
        self.word_board.set_answer(snap.displayed_answer)
        self.word_board.set_key_states(snap.hits, snap.misses)

        key = (snap.round, snap.state)
        if snap.state is GameState.PLAYING and key != self._tiles_key:
            self.grid.set_tiles(self.puzzle.generate(snap.answer_image))
        self._tiles_key = key

    # ───────── event loop ─────────
    def handle_event(self, ev: pygame.event.Event):
        if ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
            return "quit"

        if self.snap.state is GameState.GAME_OVER:
            if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1 \
                    and self.new_game_btn.hovered(ev.pos):
                self.controller.new_game()
            elif ev.type == pygame.KEYDOWN and ev.key == pygame.K_n:
                self.controller.new_game()
            return None

        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self.help_btn.hovered(ev.pos):
                self.controller.use_help()
                return None
        if ev.type == pygame.USEREVENT and hasattr(ev, "letter"):
            self.controller.submit_letter_guess(ev.letter)
            return None

        submitted = self.input.handle_event(ev)
        if submitted is not None:
            self.controller.submit_letter_guess(submitted)
        self.word_board.handle_event(ev)
        return None

    def update(self, dt: float):
        pass

    # ───────── draw helpers ─────────
    def _panel_text(self, font, text: str, colour, midtop: Tuple[int, int]) -> pygame.Rect:
        label = font.render(text, True, colour)
        rect  = label.get_rect(midtop=midtop)
        self._panel(rect)
        self.screen.blit(label, rect)
        return rect

    def _panel(self, rect: pygame.Rect, pad: int = PANEL_PADDING) -> None:
        box = rect.inflate(2 * pad, 2 * pad)
        surf = pygame.Surface(box.size, pygame.SRCALPHA)
        pygame.draw.rect(surf, PANEL_COLOR, surf.get_rect(), border_radius=PANEL_RADIUS)
        self.screen.blit(surf, box.topleft)

    def _draw_playing(self):
        cx = WIDTH // 2
        self._panel_text(self.title_f, "GeoGuesser", TEXT_COLOR, (cx, 20))
        self._panel_text(self.head_f, f"Round {self.snap.round_number}", TEXT_COLOR, (cx, 85))

        self._panel(self.grid_rect, pad=4)
        self.grid.draw(self.screen)
        self.word_board.draw(self.screen)

        text = feedback_text(self.snap.outcome)
        if text:
            colour = CORRECT_COLOR if self.snap.outcome is GuessOutcome.CORRECT else INCORRECT_COLOR
            self._panel_text(self.hud_f, text, colour, (cx, self.feedback_y))

        self.input.draw(self.screen)
        self.help_btn.draw(self.screen)

        if self.snap.error:
            lbl = self.hud_f.render(self.snap.error, True, ERROR_COLOR)
            self.screen.blit(lbl, lbl.get_rect(midtop=(cx, self.error_y)))

        self._panel_text(self.hud_f, f"Score: {self.snap.score}", TEXT_COLOR, (cx, self.score_y))

    def _draw_game_over(self):
        cx, cy = WIDTH // 2, HEIGHT // 2
        title = self.title_f.render("Congrats!", True, TEXT_COLOR)
        self.screen.blit(title, title.get_rect(midbottom=(cx, cy - 20)))
        score = self.head_f.render(f"You got {self.snap.score} points", True, TEXT_COLOR)
        self.screen.blit(score, score.get_rect(midtop=(cx, cy)))
        self.new_game_btn.draw(self.screen)

    # ───────── main draw ─────────
    def draw(self):
        self.screen.blit(self.background, (0, 0))
        if self.snap.state is GameState.PLAYING:
            self._draw_playing()
        else:
            self._draw_game_over()
