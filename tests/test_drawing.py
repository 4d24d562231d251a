import pygame
import pytest

from fortresstanks.drawing import BLACK, WHITE, draw_circle, draw_line, draw_rect, draw_text
from fortresstanks.geometry import Vector

GRAY = (100, 100, 100)
RED = (255, 0, 0)


@pytest.fixture
def surface():
    surf = pygame.Surface((100, 100))
    surf.fill(GRAY)
    return surf


def pixel(surf, point):
    return tuple(surf.get_at(point))[:3]


def test_draw_rect_is_centred_and_sized(surface):
    rect = draw_rect(surface, Vector(50, 50), 20, 10)
    assert rect.center == (50, 50)
    assert rect.size == (20, 10)


def test_draw_rect_fills_white_with_black_outline(surface):
    rect = draw_rect(surface, Vector(50, 50), 20, 10)
    assert pixel(surface, rect.center) == WHITE
    assert pixel(surface, rect.topleft) == BLACK
    assert pixel(surface, (0, 0)) == GRAY


def test_draw_circle_bounds_and_fill(surface):
    rect = draw_circle(surface, Vector(50, 50), 10)
    assert rect.center == (50, 50)
    assert rect.size == (20, 20)
    assert pixel(surface, rect.center) == WHITE
    assert pixel(surface, rect.topleft) == GRAY


def test_draw_circle_outline_is_black(surface):
    rect = draw_circle(surface, Vector(50, 50), 10)
    assert pixel(surface, (rect.centerx, rect.top)) == BLACK


def test_draw_line_default_color(surface):
    draw_line(surface, Vector(10, 10), Vector(40, 10))
    assert pixel(surface, (20, 10)) == BLACK
    assert pixel(surface, (20, 12)) == GRAY


def test_draw_line_custom_color(surface):
    draw_line(surface, Vector(10, 30), Vector(10, 60), RED)
    assert pixel(surface, (10, 45)) == RED
    assert pixel(surface, (12, 45)) == GRAY


def test_draw_text_marks_pixels_at_position():
    surf = pygame.Surface((200, 50))
    surf.fill(WHITE)
    rect = draw_text(surf, Vector(10, 10), "Hello")
    assert rect.topleft == (10, 10)
    inked = [
        (x, y)
        for x in range(rect.left, rect.right)
        for y in range(rect.top, rect.bottom)
        if pixel(surf, (x, y)) != WHITE
    ]
    assert inked
    assert pixel(surf, (0, 0)) == WHITE