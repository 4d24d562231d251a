"""Scenes of the game and the manager that switches between them."""

from __future__ import annotations

import functools
import random
from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum, auto
from pathlib import Path

import pygame

from .actors import Monster, Player, PlayerType
from .context import Context
from .drawing import BLACK, WHITE, draw_circle, draw_line
from .geometry import WIN_SIZE_X, WIN_SIZE_Y, Vector
from .input import KeyType
from .line_mesh import Line, LineMesh, Point
from .objects import ObjectType

MAX_PLAYERS = 2
DEV_MOVE_SPEED = 1000.0
DEV_CIRCLE_RADIUS = 30
EDIT_FILE = "Unit.txt"
EDIT_LOAD_OFFSET = (400, 300)
MENU_FONT_SIZE = 30
MENU_MESSAGE = "PRESS 'E' TO START."
MENU_MESSAGE_POS = (250, 550)
TURN_SECONDS = 10


class SceneType(Enum):
    NONE = auto()
    DEVELOPMENT = auto()
    GAME = auto()
    EDIT = auto()
    FORTRESS_MENU = auto()
    FORTRESS = auto()


@functools.lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


class Scene(ABC):
    """A screen of the game that updates and draws every frame."""

    def __init__(self, context: Context) -> None:
        self._context = context

    @abstractmethod
    def init(self) -> None:
        """Prepare the scene once it becomes current."""

    @abstractmethod
    def update(self) -> None:
        """Advance the scene by one frame."""

    @abstractmethod
    def render(self, surface: pygame.Surface) -> None:
        """Draw the scene."""


class DevScene(Scene):
    """A circle moved around with the W, A, S and D keys."""

    def __init__(self, context: Context) -> None:
        super().__init__(context)
        self.pos = Vector(300, 300)

    def init(self) -> None:
        pass

    def update(self) -> None:
        step = DEV_MOVE_SPEED * self._context.time.delta_time
        keys = self._context.input
        if keys.is_button(KeyType.A):
            self.pos.x -= step
        if keys.is_button(KeyType.D):
            self.pos.x += step
        if keys.is_button(KeyType.W):
            self.pos.y -= step
        if keys.is_button(KeyType.S):
            self.pos.y += step

    def render(self, surface: pygame.Surface) -> None:
        draw_circle(surface, self.pos, DEV_CIRCLE_RADIUS)


class EditScene(Scene):
    """A line editor: left clicks chain segments, right click starts a new chain.

    S saves the drawing and D loads it back.
    """

    def __init__(self, context: Context, path: str | Path = EDIT_FILE) -> None:
        super().__init__(context)
        self.path = Path(path)
        self.lines: list[Line] = []
        self.set_origin = True
        self.last_pos: Point = (0, 0)

    def init(self) -> None:
        pass

    def save(self, path: str | Path) -> None:
        """Write the lines centred on the middle of their bounding box."""
        LineMesh(lines=list(self.lines)).save(path)

    def load(self, path: str | Path) -> None:
        """Replace the lines with those in the file, placed around the screen centre."""
        mesh = LineMesh()
        mesh.load(path)
        dx, dy = EDIT_LOAD_OFFSET
        self.lines = [
            ((x1 + dx, y1 + dy), (x2 + dx, y2 + dy)) for (x1, y1), (x2, y2) in mesh.lines
        ]
        if self.lines:
            self.set_origin = True

    def update(self) -> None:
        keys = self._context.input

        if keys.is_button_down(KeyType.LEFT_MOUSE):
            mouse_pos = keys.mouse_pos
            if self.set_origin:
                self.set_origin = False
            else:
                self.lines.append((self.last_pos, mouse_pos))
            self.last_pos = mouse_pos

        if keys.is_button_down(KeyType.RIGHT_MOUSE):
            self.set_origin = True

        if keys.is_button_down(KeyType.S):
            self.save(self.path)

        if keys.is_button_down(KeyType.D):
            try:
                self.load(self.path)
            except (OSError, ValueError):
                self.lines = []

    def render(self, surface: pygame.Surface) -> None:
        for (x1, y1), (x2, y2) in self.lines:
            draw_line(surface, Vector(x1, y1), Vector(x2, y2))


class MenuScene(Scene):
    """The title screen; E starts the game."""

    def init(self) -> None:
        pass

    def update(self) -> None:
        scenes = self._context.scenes
        if scenes is not None and self._context.input.is_button_down(KeyType.E):
            scenes.change_scene(SceneType.FORTRESS)

    def render(self, surface: pygame.Surface) -> None:
        screen = pygame.Rect(0, 0, WIN_SIZE_X, WIN_SIZE_Y)
        pygame.draw.rect(surface, WHITE, screen)
        pygame.draw.rect(surface, BLACK, screen, 1)

        mesh = self._context.resources.get_line_mesh("Menu")
        if mesh is not None:
            mesh.render(surface, Vector(0, 0))

        rendered = _font(MENU_FONT_SIZE).render(MENU_MESSAGE, True, BLACK, WHITE)
        surface.blit(rendered, MENU_MESSAGE_POS)


class GameScene(Scene):
    """A sandbox with a single monster."""

    def init(self) -> None:
        objects = self._context.objects
        monster = objects.create_object(lambda: Monster(self._context))
        monster.pos = Vector(400, 400)
        objects.add(monster)

    def update(self) -> None:
        for obj in self._context.objects.objects:
            obj.update()

    def render(self, surface: pygame.Surface) -> None:
        for obj in self._context.objects.objects:
            obj.render(surface)


class FortressScene(Scene):
    """Two tanks taking timed turns at each other."""

    def __init__(self, context: Context, rng: random.Random | None = None) -> None:
        super().__init__(context)
        self._rng = rng if rng is not None else random.Random()
        self.player_turn = 1
        self.sum_time = 0.0

    def _spawn(self, player_type: PlayerType, player_id: int, pos: Vector, turn: bool) -> None:
        objects = self._context.objects
        player = objects.create_object(lambda: Player(self._context))
        player.player_type = player_type
        player.player_id = player_id
        objects.add(player)
        player.pos = pos
        player.player_turn = turn

    def init(self) -> None:
        self._context.ui.init()
        self._spawn(PlayerType.MISSILE_TANK, 0, Vector(100, 400), True)
        self._spawn(PlayerType.CANNON_TANK, 1, Vector(700, 400), False)
        self.player_turn = 1
        self.change_player_turn()

    def update(self) -> None:
        delta_time = self._context.time.delta_time

        for obj in self._context.objects.objects:
            obj.update()

        self.sum_time += delta_time
        if self.sum_time >= 1.0:
            self.sum_time = 0.0
            ui = self._context.ui
            ui.remain_time = max(0, ui.remain_time - 1)
            if ui.remain_time == 0:
                self.change_player_turn()

    def render(self, surface: pygame.Surface) -> None:
        for obj in self._context.objects.objects:
            obj.render(surface)
        self._context.ui.render(surface, self._context.resources)

    def change_player_turn(self) -> None:
        """Pass the turn to the next player and reset the panel for them."""
        self.player_turn = (self.player_turn + 1) % MAX_PLAYERS

        for obj in self._context.objects.objects:
            if obj.object_type is not ObjectType.PLAYER:
                continue
            obj.player_turn = obj.player_id == self.player_turn

        ui = self._context.ui
        ui.remain_time = TURN_SECONDS
        ui.stamina_percent = 100.0
        ui.power_percent = 0.0
        ui.wind_percent = float(self._rng.randrange(-100, 100))


_SCENE_FACTORIES: dict[SceneType, Callable[[Context], Scene]] = {
    SceneType.GAME: GameScene,
    SceneType.DEVELOPMENT: DevScene,
    SceneType.EDIT: EditScene,
    SceneType.FORTRESS: FortressScene,
    SceneType.FORTRESS_MENU: MenuScene,
}


class SceneManager:
    """Owns the current scene and swaps it on request."""

    def __init__(self, context: Context) -> None:
        self._context = context
        self._scene: Scene | None = None
        self._scene_type = SceneType.NONE
        context.scenes = self

    @property
    def scene(self) -> Scene | None:
        return self._scene

    @property
    def scene_type(self) -> SceneType:
        return self._scene_type

    def update(self) -> None:
        if self._scene is not None:
            self._scene.update()

    def render(self, surface: pygame.Surface) -> None:
        if self._scene is not None:
            self._scene.render(surface)

    def change_scene(self, scene_type: SceneType) -> None:
        """Switch to a fresh scene of the given type unless it is already current."""
        if scene_type is self._scene_type:
            return
        factory = _SCENE_FACTORIES.get(scene_type)
        self._scene = factory(self._context) if factory is not None else None
        self._scene_type = scene_type
        if self._scene is not None:
            self._scene.init()