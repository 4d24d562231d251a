import pygame
import pytest

from fortresstanks.drawing import BLACK
from fortresstanks.geometry import Vector
from fortresstanks.line_mesh import LineMesh, format_line, parse_line

GRAY = (100, 100, 100)


def pixel(surf, point):
    return tuple(surf.get_at(point))[:3]


def test_format_line_layout():
    assert format_line((1, -2), (3, 4)) == "(1,-2)->(3,4)"


def test_parse_line_round_trip():
    start, end = (-15, 7), (22, -300)
    assert parse_line(format_line(start, end)) == (start, end)


@pytest.mark.parametrize("text", ["", "garbage", "(1,2)->", "(1;2)->(3,4)"])
def test_parse_line_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_line(text)


def test_save_writes_count_first(tmp_path):
    mesh = LineMesh(lines=[((0, 0), (10, 20)), ((10, 20), (30, 0))])
    path = tmp_path / "mesh.txt"
    mesh.save(path)
    rows = path.read_text(encoding="utf-8").splitlines()
    assert rows[0] == str(len(mesh.lines))
    assert len(rows) == len(mesh.lines) + 1


def test_save_load_centres_and_keeps_shape(tmp_path):
    original = [((0, 0), (10, 20)), ((10, 20), (30, 0))]
    path = tmp_path / "mesh.txt"
    LineMesh(lines=list(original)).save(path)

    loaded = LineMesh()
    loaded.load(path)

    assert len(loaded.lines) == len(original)
    for (a1, a2), (b1, b2) in zip(original, loaded.lines):
        assert (a2[0] - a1[0], a2[1] - a1[1]) == (b2[0] - b1[0], b2[1] - b1[1])

    xs = [p[0] for line in loaded.lines for p in line]
    ys = [p[1] for line in loaded.lines for p in line]
    assert min(xs) + max(xs) == 0
    assert min(ys) + max(ys) == 0


def test_load_computes_extent(tmp_path):
    path = tmp_path / "mesh.txt"
    LineMesh(lines=[((0, 0), (10, 20)), ((10, 20), (30, 0))]).save(path)
    mesh = LineMesh()
    mesh.load(path)
    assert mesh.width == 30
    assert mesh.height == 20


def test_empty_mesh_round_trip(tmp_path):
    path = tmp_path / "empty.txt"
    LineMesh().save(path)
    mesh = LineMesh(lines=[((1, 1), (2, 2))], width=5, height=5)
    mesh.load(path)
    assert mesh.lines == []
    assert (mesh.width, mesh.height) == (0, 0)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        LineMesh().load(tmp_path / "missing.txt")


def test_load_truncated_file_raises(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("3\n(0,0)->(1,1)\n", encoding="utf-8")
    with pytest.raises(ValueError):
        LineMesh().load(path)


def test_render_draws_offset_line():
    surf = pygame.Surface((60, 30))
    surf.fill(GRAY)
    LineMesh(lines=[((0, 0), (20, 0))]).render(surf, Vector(10, 10))
    assert pixel(surf, (20, 10)) == BLACK
    assert pixel(surf, (20, 15)) == GRAY


def test_render_mirrors_with_negative_ratio():
    surf = pygame.Surface((60, 30))
    surf.fill(GRAY)
    LineMesh(lines=[((0, 0), (20, 0))]).render(surf, Vector(30, 10), -1.0, 1.0)
    assert pixel(surf, (20, 10)) == BLACK
    assert pixel(surf, (40, 10)) == GRAY