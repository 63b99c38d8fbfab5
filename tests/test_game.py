import random

import numpy as np

from meshspawn.camera import look_at
from meshspawn.game import Game
from meshspawn.input import Event, EventType, Key


def make_game():
    return Game(random.Random(7))


def test_idle_update_does_not_quit_or_move():
    game = make_game()
    assert game.update() is False
    assert np.allclose(game.cam.position, 0.0)
    assert game.world.indices == [0, 1, 2]


def test_quit_event_is_reported():
    game = make_game()
    assert game.update([Event(EventType.QUIT)]) is True


def test_held_forward_key_moves_along_look():
    game = make_game()
    game.update([Event(EventType.KEY_DOWN, Key.W)])
    assert np.allclose(game.cam.position, game.cam.look)
    game.update()
    assert np.allclose(game.cam.position, 2 * game.cam.look)
    expected = look_at(game.cam.position, game.cam.position + game.cam.look, [0, 1, 0])
    assert np.allclose(game.cam.view, expected)


def test_ctrl_spawns_once_per_press():
    game = make_game()
    game.update([Event(EventType.KEY_DOWN, Key.CTRL)])
    assert len(game.world.indices) == 6
    assert len(game.world.manager.nodes) == 4
    game.update()
    assert len(game.world.indices) == 6


def test_arrow_key_turns_camera():
    game = make_game()
    before = game.cam.look.copy()
    game.update([Event(EventType.KEY_DOWN, Key.RIGHT)])
    assert not np.allclose(game.cam.look, before)
    assert np.linalg.norm(game.cam.look) == np.float64(1.0) or np.isclose(
        np.linalg.norm(game.cam.look), 1.0
    )