"""Primitive drawing helpers on pygame surfaces."""

from __future__ import annotations

import functools

import pygame

from .geometry import Vector

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

FONT_SIZE = 20


@functools.lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _box(pos: Vector, half_width: int, half_height: int) -> pygame.Rect:
    left = int(pos.x - half_width)
    top = int(pos.y - half_height)
    right = int(pos.x + half_width)
    bottom = int(pos.y + half_height)
    return pygame.Rect(left, top, right - left, bottom - top)


def draw_text(surface: pygame.Surface, pos: Vector, text: str) -> pygame.Rect:
    """Draw black text on a white background with its top-left corner at pos."""
    rendered = _font(FONT_SIZE).render(text, True, BLACK, WHITE)
    return surface.blit(rendered, (int(pos.x), int(pos.y)))


def draw_rect(surface: pygame.Surface, pos: Vector, width: int, height: int) -> pygame.Rect:
    """Draw a white rectangle with a black outline centred on pos."""
    rect = _box(pos, int(width / 2), int(height / 2))
    pygame.draw.rect(surface, WHITE, rect)
    pygame.draw.rect(surface, BLACK, rect, 1)
    return rect


def draw_circle(surface: pygame.Surface, pos: Vector, radius: int) -> pygame.Rect:
    """Draw a white circle with a black outline centred on pos."""
    rect = _box(pos, radius, radius)
    pygame.draw.ellipse(surface, WHITE, rect)
    pygame.draw.ellipse(surface, BLACK, rect, 1)
    return rect


def draw_line(
    surface: pygame.Surface, start: Vector, end: Vector, color=BLACK
) -> pygame.Rect:
    """Draw a one pixel wide line between two positions."""
    return pygame.draw.line(
        surface,
        color,
        (int(start.x), int(start.y)),
        (int(end.x), int(end.y)),
    )