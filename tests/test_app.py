import math

import pygame

from cube3d.app import key_from_pygame, main, mouse_turn
from cube3d.game import WIDTH, GameState, Key, spawn_player


def _state():
    grid = ["111", "101", "111"]
    return GameState(grid=grid, player=spawn_player(1, 1, "N"))


def test_key_from_pygame_maps_movement_keys():
    assert key_from_pygame(pygame.K_w) == Key.W
    assert key_from_pygame(pygame.K_a) == Key.A
    assert key_from_pygame(pygame.K_s) == Key.S
    assert key_from_pygame(pygame.K_d) == Key.D


def test_key_from_pygame_maps_control_keys():
    assert key_from_pygame(pygame.K_ESCAPE) == Key.ESC
    assert key_from_pygame(pygame.K_SPACE) == Key.SPACE
    assert key_from_pygame(pygame.K_LSHIFT) == Key.SHIFT
    assert key_from_pygame(pygame.K_LCTRL) == Key.CTRL
    assert key_from_pygame(pygame.K_TAB) == Key.TAB
    assert key_from_pygame(pygame.K_LEFT) == Key.LEFT
    assert key_from_pygame(pygame.K_RIGHT) == Key.RIGHT


def test_key_from_pygame_unknown_key():
    assert key_from_pygame(pygame.K_q) is None


def test_mouse_turn_centre_does_nothing():
    state = _state()
    before = (state.player.dir_x, state.player.dir_y)
    assert mouse_turn(state, WIDTH // 2) == 0.0
    assert (state.player.dir_x, state.player.dir_y) == before


def test_mouse_turn_paused_does_nothing():
    state = _state()
    state.paused = True
    before = (state.player.dir_x, state.player.dir_y)
    assert mouse_turn(state, WIDTH) == 0.0
    assert (state.player.dir_x, state.player.dir_y) == before


def test_mouse_turn_right_edge():
    state = _state()
    assert math.isclose(mouse_turn(state, WIDTH), -0.5)


def test_mouse_turn_is_symmetric_and_keeps_length():
    left = _state()
    right = _state()
    a = mouse_turn(left, WIDTH // 2 - 300)
    b = mouse_turn(right, WIDTH // 2 + 300)
    assert a == -b
    assert a > 0
    assert math.isclose(math.hypot(left.player.dir_x, left.player.dir_y), 1.0)
    assert math.isclose(left.player.dir_y, -right.player.dir_y)


def test_mouse_turn_small_offset_truncates():
    state = _state()
    assert mouse_turn(state, WIDTH // 2 + 5) == 0.0
    assert state.player.dir_x == -1.0


def test_main_rejects_wrong_extension(capsys):
    assert main(["scene.txt"]) == 0
    assert '".cub" extension' in capsys.readouterr().err


def test_main_without_argument(capsys):
    assert main([]) == 0
    assert '".cub" extension' in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.cub")]) == 0
    assert "Wrong path" in capsys.readouterr().err