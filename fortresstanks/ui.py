"""Heads-up display: wind, power, stamina, turn timer, angles and minimap."""

from __future__ import annotations

import functools
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import pygame

from .drawing import BLACK, WHITE, draw_line
from .geometry import MINIMAP_SIZE_X, MINIMAP_SIZE_Y, PI, WIN_SIZE_X, WIN_SIZE_Y, Vector

if TYPE_CHECKING:
    from .resources import ResourceManager

WIND_COLOR = (50, 198, 74)
POWER_COLOR = (255, 216, 216)
STAMINA_COLOR = (250, 236, 197)
BARREL_COLOR = (204, 61, 61)
WEAPON_COLOR = (255, 0, 0)

TIME_FONT_SIZE = 30
TIME_TEXT_POS = (728, 510)

ANGLE_CENTER = (96, 520)
ANGLE_DIAL_RADIUS = 35
ANGLE_HAND_LENGTH = 30

MINIMAP_WORLD_SIZE = (1280, 720)


@functools.lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _rectangle(
    surface: pygame.Surface, left: int, top: int, right: int, bottom: int, fill=WHITE
) -> pygame.Rect:
    """Fill a rectangle and outline it in black; right and bottom are exclusive."""
    rect = pygame.Rect(min(left, right), min(top, bottom), abs(right - left), abs(bottom - top))
    pygame.draw.rect(surface, fill, rect)
    pygame.draw.rect(surface, BLACK, rect, 1)
    return rect


def _scaled_x(value: float) -> float:
    return value / 800 * WIN_SIZE_X


def _scaled_y(value: float) -> float:
    return value / 600 * WIN_SIZE_Y


def _hand_end(angle_degrees: float) -> Vector:
    cx, cy = ANGLE_CENTER
    radians = angle_degrees * PI / 180
    return Vector(
        int(cx + ANGLE_HAND_LENGTH * math.cos(radians)),
        int(cy - ANGLE_HAND_LENGTH * math.sin(radians)),
    )


@dataclass
class UIManager:
    """State shown on the in-game panel and the code that draws it."""

    wind_percent: float = 0.0  # from -100 to 100
    power_percent: float = 0.0
    stamina_percent: float = 0.0
    player_angle: float = 0.0
    barrel_angle: float = 0.0
    special_weapon: bool = False
    remain_time: int = 0

    def init(self) -> None:
        """Reset the panel to its starting test values."""
        self.wind_percent = 50
        self.stamina_percent = 40
        self.remain_time = 7
        self.player_angle = 0.0
        self.barrel_angle = 20.0

    def render(
        self, surface: pygame.Surface, resources: ResourceManager | None = None
    ) -> None:
        """Draw every panel element onto the surface."""
        self._render_background(surface, resources)
        self._render_wind(surface)
        self._render_power(surface)
        self._render_stamina(surface)
        self._render_time(surface)
        self._render_angle(surface)
        self._render_weapon_choice(surface)
        self._render_minimap(surface)

    def _render_background(
        self, surface: pygame.Surface, resources: ResourceManager | None
    ) -> None:
        if resources is None:
            return
        mesh = resources.get_line_mesh("UI")
        if mesh is not None:
            mesh.render(surface, Vector(0, 0))

    def _render_wind(self, surface: pygame.Surface) -> None:
        min_y = _scaled_y(560.0)
        max_y = _scaled_y(575.0)
        avg_x = _scaled_x(100.0)
        size_x = _scaled_x(49.0)
        tip = int(avg_x + size_x * self.wind_percent / 100)

        if self.wind_percent < 0:
            left, right = tip, int(avg_x)
        else:
            left, right = int(avg_x), tip
        _rectangle(surface, left, int(min_y), right, int(max_y), WIND_COLOR)

    def _render_gauge(
        self, surface: pygame.Surface, top: float, percent: float, color
    ) -> None:
        _rectangle(
            surface,
            int(_scaled_x(265.0)),
            int(_scaled_y(top)),
            int(_scaled_x(680.0)),
            int(_scaled_y(top + 30)),
        )
        _rectangle(
            surface,
            int(_scaled_x(270.0)),
            int(_scaled_y(top + 5)),
            int(_scaled_x(270.0) + percent * 4),
            int(_scaled_y(top + 25)),
            color,
        )

    def _render_power(self, surface: pygame.Surface) -> None:
        self._render_gauge(surface, 505.0, self.power_percent, POWER_COLOR)

    def _render_stamina(self, surface: pygame.Surface) -> None:
        self._render_gauge(surface, 538.0, self.stamina_percent, STAMINA_COLOR)

    def _render_time(self, surface: pygame.Surface) -> None:
        message = f"{int(self.remain_time):02d}"
        rendered = _font(TIME_FONT_SIZE).render(message, True, BLACK, WHITE)
        surface.blit(rendered, TIME_TEXT_POS)

    def _render_angle(self, surface: pygame.Surface) -> None:
        cx, cy = ANGLE_CENTER
        r = ANGLE_DIAL_RADIUS
        dial = pygame.Rect(cx - r, cy - r, 2 * r, 2 * r)
        pygame.draw.ellipse(surface, WHITE, dial)
        pygame.draw.ellipse(surface, BLACK, dial, 1)

        center = Vector(cx, cy)
        draw_line(surface, center, _hand_end(self.player_angle))
        draw_line(surface, center, _hand_end(self.barrel_angle), BARREL_COLOR)

    def _render_weapon_choice(self, surface: pygame.Surface) -> None:
        x = 170 if self.special_weapon else 20
        _rectangle(surface, x - 5, 550 - 5, x + 5, 550 + 5, WEAPON_COLOR)

    def _render_minimap(self, surface: pygame.Surface) -> None:
        _rectangle(
            surface,
            WIN_SIZE_X - MINIMAP_SIZE_X - 10,
            10,
            WIN_SIZE_X - 10,
            10 + MINIMAP_SIZE_Y,
        )