"""The tanks controlled by the players and the target monster."""

from __future__ import annotations

import math
from enum import Enum, auto

import pygame

from .context import Context
from .drawing import BLACK, draw_circle, draw_line, draw_text
from .geometry import PI, Vector
from .input import KeyType
from .objects import GameObject, MoveDir, ObjectType

TURN_MARKER_COLOR = (250, 236, 197)
LOOK_LINE_COLOR = (255, 0, 0)

MAX_FIRE_ANGLE = 75.0
FIRE_ANGLE_SPEED = 50.0
STAMINA_DRAIN = 100.0
POWER_GAIN = 100.0
POWER_TO_SPEED = 10.0
MESH_SCALE = 0.5


class PlayerType(Enum):
    MISSILE_TANK = auto()
    CANNON_TANK = auto()


class _Bullet(GameObject):
    """A shell fired by a player, travelling at a fixed velocity."""

    def __init__(self, context: Context) -> None:
        super().__init__(ObjectType.MISSILE)
        self._context = context
        self.speed = Vector()
        self.owner: GameObject | None = None

    def init(self) -> None:
        self.speed = Vector()

    def update(self) -> None:
        self.pos += self.speed * self._context.time.delta_time

    def render(self, surface: pygame.Surface) -> None:
        draw_circle(surface, self.pos, 10)


class Player(GameObject):
    """A tank that moves, aims and fires during its owner's turn."""

    def __init__(self, context: Context) -> None:
        super().__init__(ObjectType.PLAYER)
        self._context = context
        self.player_id = 0
        self.player_type = PlayerType.MISSILE_TANK
        self.player_turn = False
        self.fire_angle = 0.0

    def init(self) -> None:
        self.stat.hp = 100
        self.stat.max_hp = 100
        self.stat.speed = 500
        self.pos = Vector(0, 0)
        self.radius = 50.0
        self.fire_angle = 30.0

    def mesh_key(self) -> str:
        """Name of the line mesh drawn for this tank."""
        if self.player_type is PlayerType.MISSILE_TANK:
            return "MissileTank"
        return "CanonTank"

    def _update_fire_angle(self) -> None:
        ui = self._context.ui
        if self.move_dir is MoveDir.RIGHT:
            ui.barrel_angle = self.fire_angle
            ui.player_angle = 0
        else:
            ui.barrel_angle = 180 - self.fire_angle
            ui.player_angle = 180

    def _move(self, direction: MoveDir, delta_time: float) -> None:
        ui = self._context.ui
        stamina = max(0.0, ui.stamina_percent - STAMINA_DRAIN * delta_time)
        ui.stamina_percent = stamina
        if stamina > 0:
            step = self.stat.speed * delta_time
            self.pos.x += -step if direction is MoveDir.LEFT else step
        self.move_dir = direction

    def _fire(self) -> None:
        ui = self._context.ui
        self.player_turn = False
        speed = POWER_TO_SPEED * ui.power_percent
        radians = ui.barrel_angle * PI / 180

        objects = self._context.objects
        bullet = objects.create_object(lambda: _Bullet(self._context))
        bullet.owner = self
        bullet.pos = Vector(self.pos.x, self.pos.y)
        bullet.speed = Vector(speed * math.cos(radians), -speed * math.sin(radians))
        objects.add(bullet)

    def update(self) -> None:
        delta_time = self._context.time.delta_time
        if not self.player_turn:
            return

        self._update_fire_angle()

        keys = self._context.input
        ui = self._context.ui

        if keys.is_button(KeyType.A):
            self._move(MoveDir.LEFT, delta_time)
        if keys.is_button(KeyType.D):
            self._move(MoveDir.RIGHT, delta_time)

        if keys.is_button(KeyType.W):
            self.fire_angle = min(
                max(self.fire_angle + FIRE_ANGLE_SPEED * delta_time, 0.0), MAX_FIRE_ANGLE
            )
        if keys.is_button(KeyType.S):
            self.fire_angle = min(
                max(self.fire_angle - FIRE_ANGLE_SPEED * delta_time, 0.0), MAX_FIRE_ANGLE
            )

        if keys.is_button(KeyType.SPACE_BAR):
            ui.power_percent = min(100.0, ui.power_percent + POWER_GAIN * delta_time)

        if keys.is_button_up(KeyType.SPACE_BAR):
            self._fire()

        if keys.is_button_down(KeyType.KEY_1):
            ui.special_weapon = False
        if keys.is_button_down(KeyType.KEY_2):
            ui.special_weapon = True

    def render(self, surface: pygame.Surface) -> None:
        mesh = self._context.resources.get_line_mesh(self.mesh_key())
        if mesh is not None:
            ratio_x = MESH_SCALE if self.move_dir is MoveDir.LEFT else -MESH_SCALE
            mesh.render(surface, self.pos, ratio_x, MESH_SCALE)

        if self.player_turn:
            left = int(self.pos.x - 10)
            right = int(self.pos.x + 10)
            top = int(self.pos.y - 80)
            bottom = int(self.pos.y - 60)
            marker = pygame.Rect(left, top, right - left, bottom - top)
            pygame.draw.ellipse(surface, TURN_MARKER_COLOR, marker)
            pygame.draw.ellipse(surface, BLACK, marker, 1)


def _format_number(value: float) -> str:
    text = f"{value}"
    return text[:-2] if text.endswith(".0") else text


class Monster(GameObject):
    """A stationary enemy that shows the angle between its gaze and the mouse."""

    def __init__(self, context: Context) -> None:
        super().__init__(ObjectType.ENEMY)
        self._context = context
        self.look_pos = Vector()
        self.look_dir = Vector()

    def init(self) -> None:
        self.pos = Vector(400, 300)
        self.look_pos = Vector(400, 70)
        self.look_dir = self.look_pos - self.pos
        self.look_dir.normalize()

    def update(self) -> None:
        """Monsters stay where they are."""

    def angle_to(self, point) -> float:
        """Angle in degrees between the look direction and the direction to point."""
        direction = Vector(self.look_dir.x, self.look_dir.y)
        direction.normalize()
        x, y = point
        to_point = Vector(x, y) - self.pos
        to_point.normalize()
        dot = max(-1.0, min(1.0, to_point.dot(direction)))
        return math.acos(dot) * 180 / 3.14

    def render(self, surface: pygame.Surface) -> None:
        draw_circle(surface, self.pos, 100)
        draw_line(surface, self.pos, self.look_pos, LOOK_LINE_COLOR)

        mouse_x, mouse_y = self._context.input.mouse_pos
        mouse = Vector(mouse_x, mouse_y)
        angle = self.angle_to(mouse)

        draw_line(surface, self.pos, mouse)
        draw_text(surface, Vector(20, 50), f"angle({_format_number(angle)})")