import pygame
import pytest

from fortresstanks.context import Context
from fortresstanks.drawing import BLACK, WHITE
from fortresstanks.game import Game
from fortresstanks.input import KeyType
from fortresstanks.objects import ObjectType
from fortresstanks.scenes import MenuScene, SceneType
from fortresstanks.timing import TimeManager


def _fake_clock(values):
    iterator = iter(values)
    last = [0.0]

    def clock():
        try:
            last[0] = next(iterator)
        except StopIteration:
            pass
        return last[0]

    return clock


@pytest.fixture
def game(tmp_path):
    g = Game(resource_dir=tmp_path)
    g.init(pygame.Surface((800, 600)))
    return g


def test_init_opens_menu_scene(game):
    assert game.scenes.scene_type is SceneType.FORTRESS_MENU
    assert isinstance(game.scenes.scene, MenuScene)


def test_update_before_init_raises():
    with pytest.raises(RuntimeError):
        Game().update()


def test_render_before_init_raises():
    with pytest.raises(RuntimeError):
        Game().render()


def test_run_before_init_raises():
    with pytest.raises(RuntimeError):
        Game().run()


def test_pressing_e_starts_fortress(game):
    game.update({KeyType.E}, (0, 0))
    assert game.scenes.scene_type is SceneType.FORTRESS
    players = [o for o in game.context.objects.objects if o.object_type is ObjectType.PLAYER]
    assert len(players) == 2


def test_other_keys_keep_menu(game):
    game.update({KeyType.Q}, (0, 0))
    assert game.scenes.scene_type is SceneType.FORTRESS_MENU


def test_update_records_mouse_position(game):
    game.update((), (123, 45))
    assert game.context.input.mouse_pos == (123, 45)


def test_update_advances_time():
    context = Context(time=TimeManager(clock=_fake_clock([0.0, 0.25])))
    g = Game(context=context)
    g.init(pygame.Surface((800, 600)))
    g.update()
    assert context.time.delta_time == pytest.approx(0.25)


def test_render_copies_frame_and_clears_back_buffer(game):
    game.update((), (5, 5))
    game.render()
    # The menu outlines the whole screen in black.
    assert game.surface.get_at((0, 0))[:3] == BLACK
    assert game.back_buffer.get_at((0, 0))[:3] == WHITE
    assert game.back_buffer.get_at((400, 300))[:3] == WHITE


def test_back_buffer_matches_surface_size(game):
    assert game.back_buffer.get_size() == game.surface.get_size()


def test_init_loads_meshes_from_directory(tmp_path):
    (tmp_path / "Menu.txt").write_text("1\n(0,0)->(10,10)\n", encoding="utf-8")
    g = Game(resource_dir=tmp_path)
    g.init(pygame.Surface((800, 600)))
    mesh = g.context.resources.get_line_mesh("Menu")
    assert mesh.lines == [((0, 0), (10, 10))]


def test_run_stops_on_quit_and_clears_resources(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    try:
        screen = pygame.display.set_mode((800, 600))
        g = Game(resource_dir=tmp_path)
        g.init(screen)
        assert g.context.resources.get_line_mesh("UI") is not None
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        g.run()
        assert g.context.resources.get_line_mesh("UI") is None
    finally:
        pygame.display.quit()