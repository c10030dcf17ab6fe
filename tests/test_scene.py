import random

import pygame
import pytest

from config import WIDTH, HEIGHT
from conftest import FakeAssets
from core.game_controller import GuessGameController, GameState
from core.tile_puzzle import TilePuzzleGenerator
from scenes.geoguesser import GeoGuesserScene
from ui.widgets import TextInput


@pytest.fixture
def screen():
    return pygame.display.set_mode((WIDTH, HEIGHT))


@pytest.fixture
def scene(screen, fake_assets):
    ctrl = GuessGameController(words=("izmir", "bursa"), rng=random.Random(3))
    puzzle = TilePuzzleGenerator(fake_assets, 4, random.Random(3))
    return GeoGuesserScene(screen, ctrl, puzzle)


def key(k, ch=""):
    return pygame.event.Event(pygame.KEYDOWN, key=k, unicode=ch, mod=0)


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


def test_tiles_built_for_first_round(scene, fake_assets):
    assert fake_assets.calls == ["izmir"]
    assert len(scene.grid.tiles) == 16
    scene.draw()


def test_typed_guess_submits_on_enter(scene):
    scene.handle_event(key(pygame.K_z, "z"))
    assert scene.controller.guessed_letters == frozenset()
    scene.handle_event(key(pygame.K_RETURN))
    assert scene.controller.guessed_letters == frozenset({"z"})
    assert scene.snap.masked_answer == "_z___"
    assert scene.word_board.key_states == {"Z": "hit"}
    scene.draw()


def test_keyboard_click_letter_event(scene):
    scene.handle_event(pygame.event.Event(pygame.USEREVENT, letter="q"))
    assert scene.snap.misses == frozenset({"q"})
    assert scene.snap.help_count == 1


def test_on_screen_key_hit_test(scene):
    board = scene.word_board
    rect = board._keyboard_rects["Q"]
    pos = (rect.centerx + board.origin[0], rect.centery + board._keyboard_top())
    assert board.key_from_pos(pos) == "q"


def test_help_button_and_new_round_reshuffles(scene, fake_assets):
    for _ in range(4):
        scene.handle_event(click(scene.help_btn.rect.center))
    assert scene.snap.round == 1
    assert fake_assets.calls == ["izmir", "bursa"]
    scene.draw()


def test_game_over_and_new_game(scene, fake_assets):
    for ch in "izmr" + "bursa":
        scene.handle_event(pygame.event.Event(pygame.USEREVENT, letter=ch))
    assert scene.snap.state is GameState.GAME_OVER
    scene.draw()
    scene.handle_event(click(scene.new_game_btn.rect.center))
    assert scene.snap.state is GameState.PLAYING
    assert scene.snap.round == 0
    assert fake_assets.calls == ["izmir", "bursa", "izmir"]


def test_escape_quits(scene):
    assert scene.handle_event(key(pygame.K_ESCAPE)) == "quit"


def test_missing_photo_draws_empty_grid(screen):
    assets = FakeAssets()
    ctrl = GuessGameController(words=("izmir",))
    scene = GeoGuesserScene(screen, ctrl, TilePuzzleGenerator(assets, 4))
    assert assets.calls == ["izmir"]
    assert scene.grid.tiles == []
    scene.draw()
    scene.handle_event(pygame.event.Event(pygame.USEREVENT, letter="i"))
    assert scene.snap.masked_answer == "i__i_"


def test_text_input_keeps_first_character_until_cleared():
    field = TextInput(pygame.Rect(0, 0, 100, 40))
    field.handle_event(key(pygame.K_a, "a"))
    field.handle_event(key(pygame.K_b, "b"))
    assert field.text == "a"
    field.handle_event(key(pygame.K_BACKSPACE))
    field.handle_event(key(pygame.K_c, "c"))
    assert field.handle_event(key(pygame.K_RETURN)) == "c"
    assert field.text == ""
